import uuid
from datetime import time

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text, Time
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class StaffRequirement(Base, TimestampMixin):
    __tablename__ = "staff_requirements"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    event_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("events.id"))
    vendor_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("vendors.id"), nullable=True
    )
    supervisors: Mapped[int] = mapped_column(Integer, default=0)
    waiters: Mapped[int] = mapped_column(Integer, default=0)
    bartenders: Mapped[int] = mapped_column(Integer, default=0)
    runners: Mapped[int] = mapped_column(Integer, default=0)
    scullers: Mapped[int] = mapped_column(Integer, default=0)
    total_staff: Mapped[int] = mapped_column(Integer, default=0)
    staff_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    event = relationship("Event")
    vendor = relationship("Vendor")


class ShuttleTransport(Base, TimestampMixin):
    __tablename__ = "shuttle_transport"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    event_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("events.id"))
    transport_type: Mapped[str] = mapped_column(String(50))
    shuttle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    collection_location: Mapped[str] = mapped_column(String(255))
    dropoff_location: Mapped[str] = mapped_column(String(255))
    collection_time: Mapped[time] = mapped_column(Time)
    number_of_guests: Mapped[int] = mapped_column(Integer, default=0)
    guest_names: Mapped[str | None] = mapped_column(Text, nullable=True)

    event = relationship("Event")


class StationeryItem(Base, TimestampMixin):
    __tablename__ = "stationery_items"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    item_name: Mapped[str] = mapped_column(String(255))
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=0)
    cost_per_item: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    total_cost: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)


class BeautyService(Base, TimestampMixin):
    __tablename__ = "beauty_services"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    vendor_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("vendors.id"), nullable=True
    )
    person_name: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(100))
    requires_hair: Mapped[bool] = mapped_column(Boolean, default=False)
    requires_makeup: Mapped[bool] = mapped_column(Boolean, default=False)
    appointment_time: Mapped[time | None] = mapped_column(Time, nullable=True)

    vendor = relationship("Vendor")
