"""Occupancy report service — turns occupancy aggregates into an OccupancyReport."""

import logging
from datetime import date
from decimal import Decimal

from hotelops.repositories.occupancy import OccupancyDataSource
from hotelops.schemas.occupancy import DailyOccupancy, OccupancyReport, RoomTypeOccupancy
from hotelops.services.errors import ContractViolationError, InvalidRangeError

logger = logging.getLogger(__name__)


def days_in_period(start_date: date, end_date: date) -> int:
    """Number of days in the inclusive range [start_date, end_date]."""
    return (end_date - start_date).days + 1


def occupancy_rate(occupied_room_days: int, total_rooms: int, days: int) -> float:
    """Occupied room-days over available room-days; 0.0 when there are no rooms."""
    if total_rooms <= 0:
        return 0.0
    return occupied_room_days / (total_rooms * days)


def daily_occupancy_rate(occupied_rooms: int, total_rooms: int) -> Decimal:
    """Fraction of rooms occupied on a single day, in decimal arithmetic."""
    if total_rooms <= 0:
        return Decimal(0)
    return Decimal(occupied_rooms) / Decimal(total_rooms)


class OccupancyReportService:
    """Builds occupancy reports from an OccupancyDataSource.

    The service holds no state besides its source, so a single instance may
    serve concurrent calls. Errors raised by the source are not caught.
    """

    def __init__(self, source: OccupancyDataSource) -> None:
        self.source = source

    async def generate_occupancy_report(self, start_date: date, end_date: date) -> OccupancyReport:
        """Generate the occupancy report for the inclusive range [start_date, end_date].

        Raises:
            InvalidRangeError: If ``start_date`` is after ``end_date``. No source
                query is issued in that case.
            ContractViolationError: If the source returns ``None`` instead of a
                list for the per-type or per-day breakdown.
        """
        if start_date > end_date:
            raise InvalidRangeError(start_date, end_date)

        days = days_in_period(start_date, end_date)
        logger.info("Generating occupancy report for %s..%s (%d days)", start_date, end_date, days)

        total_rooms = await self.source.get_total_rooms()
        total_income = await self.source.get_total_income(start_date, end_date)
        total_occupied_days = await self.source.get_total_occupied_days(start_date, end_date)

        type_rows = await self.source.get_occupancy_by_type(start_date, end_date)
        if type_rows is None:
            logger.error("Occupancy data source returned None from get_occupancy_by_type")
            raise ContractViolationError("get_occupancy_by_type")

        daily_rows = await self.source.get_daily_occupancy(start_date, end_date)
        if daily_rows is None:
            logger.error("Occupancy data source returned None from get_daily_occupancy")
            raise ContractViolationError("get_daily_occupancy")

        by_type = tuple(
            RoomTypeOccupancy(
                room_type=row.room_type,
                reservations_count=row.reservations_count,
                occupied_days=row.occupied_days,
                total_rooms_of_type=row.total_rooms_of_type,
            )
            for row in type_rows
        )

        # Source order is kept; days are neither sorted nor filled in.
        daily = tuple(
            DailyOccupancy(
                day=row.day,
                occupied_rooms=row.occupied_rooms,
                total_rooms=total_rooms,
                occupancy_rate_day=daily_occupancy_rate(row.occupied_rooms, total_rooms),
            )
            for row in daily_rows
        )

        report = OccupancyReport(
            start_date=start_date,
            end_date=end_date,
            days_in_period=days,
            total_rooms=total_rooms,
            total_income=total_income,
            occupancy_rate=occupancy_rate(total_occupied_days, total_rooms, days),
            occupancy_by_type=by_type,
            daily_occupancy=daily,
        )
        logger.debug(
            "Occupancy report %s..%s: rooms=%d rate=%.4f types=%d days=%d",
            start_date,
            end_date,
            total_rooms,
            report.occupancy_rate,
            len(by_type),
            len(daily),
        )
        return report
