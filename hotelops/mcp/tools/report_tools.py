"""Occupancy report MCP tool."""

import logging
from datetime import date, timedelta

from hotelops.mcp import get_session_factory, mcp
from hotelops.repositories.occupancy import SqlOccupancyRepository
from hotelops.services.errors import InvalidRangeError
from hotelops.services.occupancy_report import OccupancyReportService

logger = logging.getLogger(__name__)


@mcp.tool()
async def occupancy_report(
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    """Report hotel occupancy and income for an inclusive date range.

    Args:
        start_date: First day of the report (YYYY-MM-DD, defaults to 6 days before end_date)
        end_date: Last day of the report (YYYY-MM-DD, defaults to today)

    Returns:
        Dict with total rooms, total income, the global occupancy rate, a
        per-room-type breakdown and a per-day breakdown. Rates are fractions
        between 0 and 1.
    """
    try:
        end = date.fromisoformat(end_date) if end_date else date.today()
        start = date.fromisoformat(start_date) if start_date else end - timedelta(days=6)
    except ValueError as e:
        return {"error": f"Invalid date format: {e}"}

    try:
        session_factory = get_session_factory()
        async with session_factory() as session:
            service = OccupancyReportService(SqlOccupancyRepository(session))
            report = await service.generate_occupancy_report(start, end)
    except InvalidRangeError as e:
        return {"error": str(e)}
    except Exception as e:
        logger.exception("occupancy_report failed")
        return {"error": str(e)}

    return report.model_dump(mode="json")
