import uuid

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class BudgetCategory(Base, TimestampMixin):
    __tablename__ = "budget_categories"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    category_name: Mapped[str] = mapped_column(String(255))
    projected_amount: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    actual_amount: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    variance: Mapped[float] = mapped_column(Numeric(12, 2), default=0)

    line_items = relationship(
        "BudgetLineItem", back_populates="category", cascade="all, delete"
    )


class BudgetLineItem(Base, TimestampMixin):
    __tablename__ = "budget_line_items"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    budget_category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("budget_categories.id", ondelete="CASCADE")
    )
    vendor_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("vendors.id"), nullable=True
    )
    item_description: Mapped[str] = mapped_column(String(500))
    projected_cost: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    actual_cost: Mapped[float | None] = mapped_column(Numeric(12, 2), nullable=True)
    payment_status: Mapped[str] = mapped_column(String(20), default="pending")

    category = relationship("BudgetCategory", back_populates="line_items")
    vendor = relationship("Vendor")
