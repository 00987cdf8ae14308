"""
Create the CONFIG data-entry sheet in a workbook.
The workbook is the source of truth for the rotation parameters.
"""

from pathlib import Path
from typing import Optional

import openpyxl

from .models import RotationConfig

CONFIG_SHEET = "CONFIG"

DESCRIPTIONS = {
    "work_days": "Days on site per cycle (W, min 1)",
    "rest_days": "Days off per cycle incl. both travel days (R, min 2)",
    "induction_days": "One-time onboarding before the first shift (I, below W - 1)",
    "total_days": "Planning horizon in days (15..2000)",
}


def ensure_config_sheet(wb, config: Optional[RotationConfig] = None, overwrite: bool = False):
    """Create the CONFIG sheet; leaves an existing one alone unless overwrite is set."""
    if CONFIG_SHEET in wb.sheetnames:
        if not overwrite:
            # preserve user edits
            return wb[CONFIG_SHEET]
        del wb[CONFIG_SHEET]
    ws = wb.create_sheet(CONFIG_SHEET)
    headers = ["Parameter", "Value", "Description"]
    for c, h in enumerate(headers, 1):
        ws.cell(1, c, h)

    values = (config or RotationConfig()).to_dict()
    for i, (p, v) in enumerate(values.items(), 2):
        ws.cell(i, 1, p)
        ws.cell(i, 2, v)
        ws.cell(i, 3, DESCRIPTIONS[p])
    ws.column_dimensions["A"].width = 18
    ws.column_dimensions["C"].width = 60
    return ws


def setup_workbook(wb_path: str, config: Optional[RotationConfig] = None,
                   overwrite: bool = False) -> str:
    """
    Open (or create) the workbook and add the CONFIG sheet.
    Returns the path to the saved workbook.
    """
    path = Path(wb_path)
    if path.exists():
        wb = openpyxl.load_workbook(path)
    else:
        wb = openpyxl.Workbook()
        # drop the empty default sheet
        wb.remove(wb.active)
    ensure_config_sheet(wb, config, overwrite=overwrite)
    wb.save(path)
    return str(path)
