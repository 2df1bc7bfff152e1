"""Shared API dependencies — single import point for all routers.

Re-exports database session and authentication dependencies so that router
modules can import everything they need from one place::

    from hotelops.api.deps import get_db, require_admin
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotelops.auth.dependencies import (
    get_current_active_user,
    get_current_user,
    require_admin,
)
from hotelops.database import get_db
from hotelops.repositories.occupancy import SqlOccupancyRepository
from hotelops.services.occupancy_report import OccupancyReportService


async def get_occupancy_report_service(
    db: AsyncSession = Depends(get_db),
) -> OccupancyReportService:
    """Build a report service over the request's database session."""
    return OccupancyReportService(SqlOccupancyRepository(db))


__all__ = [
    "get_db",
    "get_current_user",
    "get_current_active_user",
    "require_admin",
    "get_occupancy_report_service",
]
