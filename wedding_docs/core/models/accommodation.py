import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding_docs.core.models.base import Base, TimestampMixin


class Cottage(Base, TimestampMixin):
    __tablename__ = "cottages"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    wedding_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("weddings.id", ondelete="CASCADE")
    )
    cottage_name: Mapped[str] = mapped_column(String(255))
    charge_per_room_per_night: Mapped[float] = mapped_column(Numeric(12, 2), default=0)

    rooms = relationship(
        "CottageRoom",
        back_populates="cottage",
        cascade="all, delete",
        order_by="CottageRoom.room_name",
    )


class CottageRoom(Base, TimestampMixin):
    __tablename__ = "cottage_rooms"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    cottage_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("cottages.id", ondelete="CASCADE")
    )
    room_name: Mapped[str] = mapped_column(String(100))
    bed_type: Mapped[str] = mapped_column(String(50))
    bathroom_type: Mapped[str] = mapped_column(String(50))
    guest_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_occupied: Mapped[bool] = mapped_column(Boolean, default=False)
    number_of_nights: Mapped[int] = mapped_column(Integer, default=0)
    room_cost: Mapped[float] = mapped_column(Numeric(12, 2), default=0)

    cottage = relationship("Cottage", back_populates="rooms")
