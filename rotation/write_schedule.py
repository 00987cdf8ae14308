"""
Write a finished schedule to an Excel workbook or a CSV file.
Adds a VIOLATIONS sheet when the validator reports coverage breaches.
"""

import io
from pathlib import Path
from typing import List, Optional

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .analytics import DAILY_COLUMNS, daily_frame, supervisor_summary, workload_deviation
from .models import STATUS_LABELS, ScheduleResult, Status, Violation

# ARGB, no leading '#'
COLORS = {
    Status.TRAVEL_IN.value: "FFFDE68A",
    Status.INDUCTION.value: "FFC4B5FD",
    Status.DRILLING.value: "FF86EFAC",
    Status.TRAVEL_OUT.value: "FFFDBA74",
    Status.REST.value: "FFE2E8F0",
}
VIOLATION_FILL = "FFFCA5A5"

_thin = Side(border_style="thin", color="CBD5E1")
_border = Border(bottom=_thin, right=_thin)
_center = Alignment(horizontal="center", vertical="center")
_bold = Font(bold=True, size=11, name="Arial")
_header_fill = PatternFill(start_color="FFF8FAFC", end_color="FFF8FAFC", fill_type="solid")


def _fill(argb: str) -> PatternFill:
    return PatternFill(start_color=argb, end_color=argb, fill_type="solid")


def _header_row(ws, headers: List[str]) -> None:
    for c, h in enumerate(headers, 1):
        cell = ws.cell(1, c, h)
        cell.font = _bold
        cell.alignment = _center
        cell.fill = _header_fill
        cell.border = _border


def _fill_schedule_sheet(ws, result: ScheduleResult) -> None:
    _header_row(ws, DAILY_COLUMNS)
    bad_days = {v.day for v in result.violations}
    frame = daily_frame(result)
    for row_idx, row in enumerate(frame.itertuples(index=False), 2):
        day = row_idx - 2
        for col, value in enumerate(row, 1):
            cell = ws.cell(row_idx, col, value.item() if hasattr(value, "item") else value)
            cell.alignment = _center
            cell.border = _border
            if value in COLORS:
                cell.fill = _fill(COLORS[value])
        if day in bad_days:
            ws.cell(row_idx, len(DAILY_COLUMNS)).fill = _fill(VIOLATION_FILL)

    ws.freeze_panes = "B2"
    ws.column_dimensions["A"].width = 8
    for col in range(2, len(DAILY_COLUMNS) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 15

    # Legend to the right of the grid
    legend_col = len(DAILY_COLUMNS) + 2
    ws.cell(1, legend_col, "Legend").font = _bold
    for i, status in enumerate(Status, 2):
        cell = ws.cell(i, legend_col, f"{STATUS_LABELS[status]} ({status.value})")
        cell.fill = _fill(COLORS[status.value])
    ws.column_dimensions[get_column_letter(legend_col)].width = 18


def _fill_summary_sheet(ws, result: ScheduleResult) -> None:
    summary = supervisor_summary(result)
    headers = list(summary.columns)
    _header_row(ws, headers)
    for row_idx, row in enumerate(summary.to_dict(orient="records"), 2):
        for col, h in enumerate(headers, 1):
            ws.cell(row_idx, col, row[h]).border = _border
    ws.column_dimensions["A"].width = 26
    for col in range(2, len(headers) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 14

    r = len(summary) + 3
    cfg = result.config
    ws.cell(r, 1, "Configuration").font = _bold
    for i, (k, v) in enumerate(cfg.to_dict().items(), r + 1):
        ws.cell(i, 1, k)
        ws.cell(i, 2, v)
    r += len(cfg.to_dict()) + 2
    ws.cell(r, 1, "Drilling ceiling")
    ws.cell(r, 2, cfg.drilling_ceiling)
    note = workload_deviation(result)
    if note:
        ws.cell(r + 1, 1, f"Note: {note}")


def build_workbook(result: ScheduleResult) -> openpyxl.Workbook:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "SCHEDULE"
    _fill_schedule_sheet(ws, result)
    _fill_summary_sheet(wb.create_sheet("SUMMARY"), result)
    if result.violations:
        _fill_violations_sheet(wb.create_sheet("VIOLATIONS"), result.violations)
    return wb


def write_schedule(result: ScheduleResult, output_path: str) -> str:
    """Write SCHEDULE, SUMMARY and (if needed) VIOLATIONS sheets to a new workbook."""
    output = Path(output_path)
    if not output.parent.exists():
        raise FileNotFoundError(f"Output folder not found: {output.parent}")
    build_workbook(result).save(output)
    return str(output)


def workbook_bytes(result: ScheduleResult) -> io.BytesIO:
    buf = io.BytesIO()
    build_workbook(result).save(buf)
    buf.seek(0)
    return buf


def _fill_violations_sheet(ws, violations: List[Violation]) -> None:
    _header_row(ws, ["Day", "Drilling", "Violation"])
    for i, v in enumerate(violations, 2):
        ws.cell(i, 1, v.display_day)
        ws.cell(i, 2, v.drilling)
        ws.cell(i, 3, v.message)
    ws.column_dimensions["C"].width = 36


def csv_filename(result: ScheduleResult) -> str:
    return f"supervisor_schedule_{result.config.total_days}d.csv"


def csv_text(result: ScheduleResult) -> str:
    """CSV body without BOM; line endings are plain '\\n'."""
    return daily_frame(result).to_csv(index=False, lineterminator="\n")


def csv_bytes(result: ScheduleResult) -> bytes:
    """UTF-8 with BOM so Excel opens it with the right encoding."""
    return csv_text(result).encode("utf-8-sig")


def write_csv(result: ScheduleResult, output_path: Optional[str] = None) -> str:
    output = Path(output_path) if output_path else Path(csv_filename(result))
    if not output.parent.exists():
        raise FileNotFoundError(f"Output folder not found: {output.parent}")
    output.write_bytes(csv_bytes(result))
    return str(output)
