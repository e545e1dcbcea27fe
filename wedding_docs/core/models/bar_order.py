import uuid

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class BarOrder(Base, TimestampMixin):
    __tablename__ = "bar_orders"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    event_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("events.id"), nullable=True
    )
    guest_count_adults: Mapped[int] = mapped_column(Integer, default=0)
    guest_count_children: Mapped[int] = mapped_column(Integer, default=0)
    event_duration_hours: Mapped[float] = mapped_column(Numeric(5, 2), default=0)
    total_servings_per_person: Mapped[float] = mapped_column(Numeric(6, 2), default=0)

    event = relationship("Event")
    items = relationship(
        "BarOrderItem",
        back_populates="bar_order",
        cascade="all, delete",
        order_by="BarOrderItem.sort_order",
    )


class BarOrderItem(Base, TimestampMixin):
    __tablename__ = "bar_order_items"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    bar_order_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("bar_orders.id", ondelete="CASCADE")
    )
    item_name: Mapped[str] = mapped_column(String(255))
    percentage: Mapped[float] = mapped_column(Numeric(5, 2), default=0)
    calculated_servings: Mapped[float] = mapped_column(Numeric(10, 2), default=0)
    servings_per_unit: Mapped[float] = mapped_column(Numeric(8, 2), default=1)
    units_needed: Mapped[float] = mapped_column(Numeric(10, 2), default=0)
    cost_per_unit: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    total_cost: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)

    bar_order = relationship("BarOrder", back_populates="items")
