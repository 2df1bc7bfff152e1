"""Pydantic v2 schemas for the occupancy report.

The models are frozen and their collections are tuples, so a report cannot be
changed once the service has assembled it.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class RoomTypeOccupancy(BaseModel):
    """Occupancy figures for one room-type record, exactly as the source reported them."""

    model_config = ConfigDict(frozen=True)

    room_type: str  # opaque label, e.g. SIMPLE, DOBLE, SUITE
    reservations_count: int
    occupied_days: int
    total_rooms_of_type: int


class DailyOccupancy(BaseModel):
    """Occupancy for a single calendar day."""

    model_config = ConfigDict(frozen=True)

    day: date
    occupied_rooms: int
    total_rooms: int
    occupancy_rate_day: Decimal  # fraction 0..1


class OccupancyReport(BaseModel):
    """Occupancy and income for an inclusive date range."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    days_in_period: int
    total_rooms: int
    total_income: Decimal | float
    occupancy_rate: float  # fraction 0..1
    occupancy_by_type: tuple[RoomTypeOccupancy, ...]
    daily_occupancy: tuple[DailyOccupancy, ...]
