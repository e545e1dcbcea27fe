import uuid

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class Guest(Base, TimestampMixin):
    __tablename__ = "guests"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    name: Mapped[str] = mapped_column(String(255))
    guest_type: Mapped[str] = mapped_column(String(20), default="adult")
    invitation_status: Mapped[str] = mapped_column(String(20), default="pending")
    table_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)
    allergies: Mapped[str | None] = mapped_column(Text, nullable=True)
    starter_choice: Mapped[str | None] = mapped_column(String(100), nullable=True)
    main_choice: Mapped[str | None] = mapped_column(String(100), nullable=True)
    dessert_choice: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    attendance = relationship("GuestEventAttendance", back_populates="guest")


class GuestEventAttendance(Base, TimestampMixin):
    __tablename__ = "guest_event_attendance"
    __table_args__ = (UniqueConstraint("guest_id", "event_id", name="uq_guest_event_attendance"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    guest_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("guests.id", ondelete="CASCADE")
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE")
    )
    attending: Mapped[bool] = mapped_column(Boolean, default=False)
    shuttle_to_event: Mapped[bool] = mapped_column(Boolean, default=False)
    shuttle_from_event: Mapped[bool] = mapped_column(Boolean, default=False)

    guest = relationship("Guest", back_populates="attendance")
    event = relationship("Event")
