"""Room model — the hotel's sellable inventory."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hotelops.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Room(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A single bookable room."""

    __tablename__ = "rooms"

    number: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    room_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # SIMPLE, DOBLE, SUITE
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, default=2)
    status: Mapped[str] = mapped_column(String(50), default="available")  # available, occupied, maintenance

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.number!r}, type={self.room_type!r})>"
