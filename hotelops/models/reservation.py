"""Reservation model — a customer's stay across one or more rooms."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Column, Date, ForeignKey, Index, Numeric, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotelops.database import Base, UUIDPrimaryKeyMixin

# Link table: a reservation may hold several rooms for the same dates.
reservation_rooms = Table(
    "reservation_rooms",
    Base.metadata,
    Column("reservation_id", ForeignKey("reservations.id", ondelete="CASCADE"), primary_key=True),
    Column("room_id", ForeignKey("rooms.id", ondelete="CASCADE"), primary_key=True),
)


class Reservation(UUIDPrimaryKeyMixin, Base):
    """A reservation occupying its rooms from start_date through end_date, both inclusive."""

    __tablename__ = "reservations"

    customer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        default="pending",
        index=True,
    )  # pending, confirmed, checked_in, checked_out, cancelled, no_show
    total_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    customer: Mapped["User"] = relationship(back_populates="reservations", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    rooms: Mapped[list["Room"]] = relationship(secondary=reservation_rooms, lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    invoices: Mapped[list["Invoice"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="reservation", lazy="selectin", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("ix_reservations_dates", "start_date", "end_date"),)

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, customer_id={self.customer_id}, "
            f"{self.start_date}..{self.end_date}, status={self.status})>"
        )
