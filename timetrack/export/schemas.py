"""
TIMETRACK - Export Schemas
"""

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field

from timetrack.tasks.enums import RowType


class TimesheetRowModel(BaseModel):
    label: str
    type: RowType
    days: Dict[date, float] = Field(description="Realized hours per date (dates without hours omitted)")
    total_realized: float
    total_planned: float


class TimesheetPreview(BaseModel):
    """JSON view of the rows a CSV export would contain."""

    dates: List[date]
    rows: List[TimesheetRowModel]
    filename: str
