"""Reports API router — occupancy and income for a date range."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hotelops.api.deps import get_occupancy_report_service, require_admin
from hotelops.models.user import User
from hotelops.schemas.occupancy import OccupancyReport
from hotelops.services.errors import InvalidRangeError
from hotelops.services.occupancy_report import OccupancyReportService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


@router.get("/occupancy", response_model=OccupancyReport)
async def get_occupancy_report(
    start_date: date = Query(..., description="First day of the report (inclusive)"),
    end_date: date = Query(..., description="Last day of the report (inclusive)"),
    service: OccupancyReportService = Depends(get_occupancy_report_service),
    current_user: User = Depends(require_admin),
) -> OccupancyReport:
    """Return the occupancy report for ``[start_date, end_date]``.

    The global rate is occupied room-days over available room-days; each daily
    entry carries that day's occupied rooms over the current inventory. A
    single-day range (``start_date == end_date``) is valid.
    """
    try:
        return await service.generate_occupancy_report(start_date, end_date)
    except InvalidRangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from None
