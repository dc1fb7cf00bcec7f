"""
TIMETRACK - Export Router

Timesheet export as a pt-BR CSV download, plus a JSON preview.
"""

import logging
from datetime import date
from typing import Annotated, List, Optional, Tuple
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from timetrack.config import settings
from timetrack.datasets.repository import DatasetRepositoryInterface
from timetrack.datasets.router import get_dataset_repository
from timetrack.export.csv_writer import encode_csv, export_filename, render_csv
from timetrack.export.rows import TimesheetRow, build_timesheet_rows, date_range
from timetrack.export.schemas import TimesheetPreview, TimesheetRowModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["Export"])

DatasetRepository = Annotated[DatasetRepositoryInterface, Depends(get_dataset_repository)]


async def _collect_rows(
    repository: DatasetRepositoryInterface,
    start: date,
    end: date,
    member: Optional[str],
) -> Tuple[List[date], List[TimesheetRow]]:
    if end < start:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end must not be before start")
    if (end - start).days + 1 > settings.EXPORT_MAX_DAYS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Export range is limited to {settings.EXPORT_MAX_DAYS} days",
        )

    snapshot = await repository.get_snapshot()
    group = None
    if member is not None:
        group = snapshot.find_group(member)
        if group is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")

    dates = date_range(start, end)
    return dates, build_timesheet_rows(snapshot.groups, dates, group)


@router.get("/timesheet", summary="Download the timesheet as CSV")
async def export_timesheet(
    repository: DatasetRepository,
    start: date = Query(description="First day (inclusive)"),
    end: date = Query(description="Last day (inclusive)"),
    member: Optional[str] = Query(default=None, description="Member view; team view when omitted"),
) -> Response:
    dates, rows = await _collect_rows(repository, start, end, member)
    filename = export_filename(member, start, end)
    logger.info(f"Exporting {len(rows)} timesheet rows as {filename}")
    return Response(
        content=encode_csv(render_csv(rows, dates)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@router.get("/timesheet/preview", response_model=TimesheetPreview, summary="Timesheet rows as JSON")
async def preview_timesheet(
    repository: DatasetRepository,
    start: date = Query(description="First day (inclusive)"),
    end: date = Query(description="Last day (inclusive)"),
    member: Optional[str] = Query(default=None),
) -> TimesheetPreview:
    dates, rows = await _collect_rows(repository, start, end, member)
    return TimesheetPreview(
        dates=dates,
        rows=[
            TimesheetRowModel(
                label=row.label,
                type=row.row_type,
                days=row.days,
                total_realized=row.total_realized,
                total_planned=row.total_planned,
            )
            for row in rows
        ],
        filename=export_filename(member, start, end),
    )
