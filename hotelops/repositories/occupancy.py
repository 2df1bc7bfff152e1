"""Occupancy data source — the five aggregate reads behind the occupancy report."""

import uuid
from abc import ABC, abstractmethod
from collections import Counter, defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotelops.config import settings
from hotelops.models.invoice import Invoice
from hotelops.models.reservation import Reservation, reservation_rooms
from hotelops.models.room import Room


@dataclass(frozen=True)
class RoomTypeOccupancyRow:
    """Raw per-room-type occupancy record."""

    room_type: str
    reservations_count: int
    occupied_days: int
    total_rooms_of_type: int


@dataclass(frozen=True)
class DailyOccupancyRow:
    """Raw per-day occupancy record."""

    day: date
    occupied_rooms: int


class OccupancyDataSource(ABC):
    """Read-only source of occupancy aggregates for an inclusive date range.

    Occupied room-day counts must already be clipped to the range, counted once
    per room and day, and multiplied out for reservations holding several rooms.
    List-valued reads return a list (possibly empty), never ``None``.
    """

    @abstractmethod
    async def get_total_rooms(self) -> int:
        """Current room inventory count."""

    @abstractmethod
    async def get_total_income(self, start_date: date, end_date: date) -> Decimal | float:
        """Income attributable to the range."""

    @abstractmethod
    async def get_total_occupied_days(self, start_date: date, end_date: date) -> int:
        """Occupied room-days inside the range."""

    @abstractmethod
    async def get_occupancy_by_type(self, start_date: date, end_date: date) -> Sequence[RoomTypeOccupancyRow]:
        """Per-room-type records, in the order the report should show them."""

    @abstractmethod
    async def get_daily_occupancy(self, start_date: date, end_date: date) -> Sequence[DailyOccupancyRow]:
        """Per-day records, in the order the report should show them."""


def _days(first: date, last: date) -> Iterator[date]:
    """Yield every date from first through last, inclusive."""
    day = first
    while day <= last:
        yield day
        day += timedelta(days=1)


class SqlOccupancyRepository(OccupancyDataSource):
    """Occupancy data source backed by the reservations database.

    A reservation occupies each of its rooms from ``start_date`` through
    ``end_date`` inclusive. Reservations whose status is listed in
    ``excluded_statuses`` do not count.
    """

    def __init__(self, db: AsyncSession, excluded_statuses: Sequence[str] | None = None) -> None:
        self.db = db
        if excluded_statuses is None:
            excluded_statuses = settings.occupancy_excluded_statuses
        self.excluded_statuses = tuple(excluded_statuses)

    async def _booked_rooms(self, start_date: date, end_date: date) -> list[tuple]:
        """Fetch (room_id, room_type, reservation_id, first_day, last_day) for bookings overlapping the range.

        ``first_day``/``last_day`` are already clipped to the range.
        """
        query = (
            select(
                reservation_rooms.c.room_id,
                Room.room_type,
                Reservation.id,
                Reservation.start_date,
                Reservation.end_date,
            )
            .select_from(reservation_rooms)
            .join(Reservation, Reservation.id == reservation_rooms.c.reservation_id)
            .join(Room, Room.id == reservation_rooms.c.room_id)
            .where(
                Reservation.status.not_in(self.excluded_statuses),
                Reservation.start_date <= end_date,
                Reservation.end_date >= start_date,
            )
        )
        result = await self.db.execute(query)
        return [
            (room_id, room_type, reservation_id, max(res_start, start_date), min(res_end, end_date))
            for room_id, room_type, reservation_id, res_start, res_end in result.all()
        ]

    async def _occupied_room_days(self, start_date: date, end_date: date) -> set[tuple[uuid.UUID, date]]:
        # A set so overlapping bookings of the same room count once per day
        room_days: set[tuple[uuid.UUID, date]] = set()
        for room_id, _room_type, _reservation_id, first, last in await self._booked_rooms(start_date, end_date):
            room_days.update((room_id, day) for day in _days(first, last))
        return room_days

    async def get_total_rooms(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Room))
        return result.scalar_one()

    async def get_total_income(self, start_date: date, end_date: date) -> Decimal:
        result = await self.db.execute(
            select(func.coalesce(func.sum(Invoice.total_amount), 0)).where(
                Invoice.issued_on >= start_date,
                Invoice.issued_on <= end_date,
            )
        )
        return Decimal(str(result.scalar_one()))

    async def get_total_occupied_days(self, start_date: date, end_date: date) -> int:
        return len(await self._occupied_room_days(start_date, end_date))

    async def get_occupancy_by_type(self, start_date: date, end_date: date) -> list[RoomTypeOccupancyRow]:
        """One row per room type in inventory, ordered by label."""
        inventory = await self.db.execute(
            select(Room.room_type, func.count()).group_by(Room.room_type).order_by(Room.room_type)
        )

        reservations_by_type: dict[str, set[uuid.UUID]] = defaultdict(set)
        room_days_by_type: dict[str, set[tuple[uuid.UUID, date]]] = defaultdict(set)
        for room_id, room_type, reservation_id, first, last in await self._booked_rooms(start_date, end_date):
            reservations_by_type[room_type].add(reservation_id)
            room_days_by_type[room_type].update((room_id, day) for day in _days(first, last))

        return [
            RoomTypeOccupancyRow(
                room_type=room_type,
                reservations_count=len(reservations_by_type.get(room_type, ())),
                occupied_days=len(room_days_by_type.get(room_type, ())),
                total_rooms_of_type=rooms_of_type,
            )
            for room_type, rooms_of_type in inventory.all()
        ]

    async def get_daily_occupancy(self, start_date: date, end_date: date) -> list[DailyOccupancyRow]:
        """One row per day of the range in ascending order, zero days included."""
        occupied = Counter(day for _room_id, day in await self._occupied_room_days(start_date, end_date))
        return [DailyOccupancyRow(day=day, occupied_rooms=occupied[day]) for day in _days(start_date, end_date)]
