import uuid
from datetime import date, time

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text, Time
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class Wedding(Base, TimestampMixin):
    __tablename__ = "weddings"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    bride_name: Mapped[str] = mapped_column(String(255))
    groom_name: Mapped[str] = mapped_column(String(255))
    wedding_date: Mapped[date] = mapped_column(Date)
    venue_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    venue_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    venue_contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    venue_contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    venue_contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    guest_count_adults: Mapped[int] = mapped_column(Integer, default=0)
    guest_count_children: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(50), default="planning")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    events = relationship("Event", back_populates="wedding", order_by="Event.event_order")


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    event_order: Mapped[int] = mapped_column(Integer)
    event_name: Mapped[str] = mapped_column(String(255))
    event_date: Mapped[date] = mapped_column(Date)
    event_start_time: Mapped[time] = mapped_column(Time)
    event_end_time: Mapped[time] = mapped_column(Time)
    event_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    event_type: Mapped[str] = mapped_column(String(50))
    expected_guests_adults: Mapped[int] = mapped_column(Integer, default=0)
    expected_guests_children: Mapped[int] = mapped_column(Integer, default=0)
    duration_hours: Mapped[float] = mapped_column(Numeric(5, 2), default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    wedding = relationship("Wedding", back_populates="events")
