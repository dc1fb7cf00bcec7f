"""
TIMETRACK - Timesheet CSV

pt-BR spreadsheet format consumed by the existing downstream tools:
UTF-8 with BOM, ';' delimited, ',' as decimal separator, label always
quoted, dates as dd/mm/yyyy, '0' for a day without logged hours.
"""

import csv
import io
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

from timetrack.export.rows import TimesheetRow
from timetrack.tasks.enums import RowType

BOM = "\ufeff"
DELIMITER = ";"
LINE_SEPARATOR = "\n"

LABEL_HEADER = "Item / Descrição"
TYPE_HEADER = "Tipo"
REALIZED_HEADER = "Total Realizado"
PLANNED_HEADER = "Total Planejado"

DATE_FORMAT = "%d/%m/%Y"


class TimesheetCSVError(ValueError):
    """Raised when parsing text that is not a timesheet export."""


def format_number(value: float) -> str:
    """Shortest decimal form with a comma separator; whole numbers have no decimals."""
    value = float(value)
    text = str(int(value)) if value.is_integer() else repr(value)
    return text.replace(".", ",")


def parse_number(text: str) -> float:
    return float(text.replace(",", "."))


def quote_label(label: str) -> str:
    return '"' + label.replace('"', '""') + '"'


def render_header(dates: Sequence[date]) -> str:
    cells = [LABEL_HEADER, TYPE_HEADER]
    cells.extend(day.strftime(DATE_FORMAT) for day in dates)
    cells.extend([REALIZED_HEADER, PLANNED_HEADER])
    return DELIMITER.join(cells)


def render_row(row: TimesheetRow, dates: Sequence[date]) -> str:
    cells = [quote_label(row.label), row.row_type.value]
    for day in dates:
        hours = row.days.get(day, 0.0)
        cells.append(format_number(hours) if hours > 0 else "0")
    cells.append(format_number(row.total_realized))
    cells.append(format_number(row.total_planned))
    return DELIMITER.join(cells)


def render_csv(rows: Sequence[TimesheetRow], dates: Sequence[date]) -> str:
    """Full export text including the BOM."""
    body = LINE_SEPARATOR.join(render_row(row, dates) for row in rows)
    return BOM + render_header(dates) + LINE_SEPARATOR + body


def encode_csv(text: str) -> bytes:
    return text.encode("utf-8")


def parse_csv(text: str) -> Tuple[List[date], List[TimesheetRow]]:
    """Read an export back into its dates and rows."""
    if text.startswith(BOM):
        text = text[len(BOM):]

    records = list(csv.reader(io.StringIO(text, newline=""), delimiter=DELIMITER))
    if not records:
        raise TimesheetCSVError("Empty timesheet export")

    header = records[0]
    if len(header) < 4 or header[:2] != [LABEL_HEADER, TYPE_HEADER] or header[-2:] != [REALIZED_HEADER, PLANNED_HEADER]:
        raise TimesheetCSVError("Unexpected timesheet header")
    try:
        dates = [datetime.strptime(cell, DATE_FORMAT).date() for cell in header[2:-2]]
    except ValueError as exc:
        raise TimesheetCSVError(f"Invalid date in header: {exc}") from exc

    rows: List[TimesheetRow] = []
    for record in records[1:]:
        if not record:
            continue
        if len(record) != len(header):
            raise TimesheetCSVError(f"Row has {len(record)} cells, expected {len(header)}")
        try:
            row_type = RowType(record[1])
            day_values = [parse_number(cell) for cell in record[2:-2]]
            rows.append(
                TimesheetRow(
                    label=record[0],
                    row_type=row_type,
                    days={day: hours for day, hours in zip(dates, day_values) if hours > 0},
                    total_realized=parse_number(record[-2]),
                    total_planned=parse_number(record[-1]),
                )
            )
        except ValueError as exc:
            raise TimesheetCSVError(f"Invalid row {record[0]!r}: {exc}") from exc
    return dates, rows


def export_filename(member: Optional[str], start: date, end: date) -> str:
    return f"relatorio_{member or 'geral'}_{start.isoformat()}_a_{end.isoformat()}.csv"
