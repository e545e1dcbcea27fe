import uuid
from datetime import time

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text, Time
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class WeddingItem(Base, TimestampMixin):
    __tablename__ = "wedding_items"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    category: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(String(500))
    aggregation_method: Mapped[str] = mapped_column(String(3), default="ADD")
    number_available: Mapped[int] = mapped_column(Integer, default=0)
    total_required: Mapped[int] = mapped_column(Integer, default=0)
    cost_per_unit: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    total_cost: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    supplier_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    event_quantities = relationship(
        "WeddingItemEventQuantity", back_populates="wedding_item", cascade="all, delete"
    )


class WeddingItemEventQuantity(Base, TimestampMixin):
    __tablename__ = "wedding_item_event_quantities"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_item_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("wedding_items.id", ondelete="CASCADE")
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE")
    )
    quantity_required: Mapped[int] = mapped_column(Integer, default=0)

    wedding_item = relationship("WeddingItem", back_populates="event_quantities")
    event = relationship("Event")


class RepurposingInstruction(Base, TimestampMixin):
    __tablename__ = "repurposing_instructions"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    wedding_item_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("wedding_items.id", ondelete="CASCADE")
    )
    from_event_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("events.id"))
    to_event_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("events.id"))
    pickup_location: Mapped[str] = mapped_column(String(255))
    pickup_time: Mapped[time] = mapped_column(Time)
    dropoff_location: Mapped[str] = mapped_column(String(255))
    dropoff_time: Mapped[time] = mapped_column(Time)
    responsible_party: Mapped[str | None] = mapped_column(String(255), nullable=True)
    handling_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="pending")

    wedding_item = relationship("WeddingItem")
    from_event = relationship("Event", foreign_keys=[from_event_id])
    to_event = relationship("Event", foreign_keys=[to_event_id])
