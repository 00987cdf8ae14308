"""
Load a RotationConfig from a JSON file, a workbook CONFIG sheet or a plain mapping.
"""

import json
from pathlib import Path
from typing import Any, Mapping

import openpyxl

from .models import RotationConfig
from .workbook_sheets import CONFIG_SHEET

FIELDS = ("work_days", "rest_days", "induction_days", "total_days")

# keys used by the browser form and its saved config
CAMEL_KEYS = {
    "workDays": "work_days",
    "restDays": "rest_days",
    "inductionDays": "induction_days",
    "totalDays": "total_days",
}


class ConfigError(ValueError):
    """Raised when a configuration source is missing or malformed."""


def config_from_mapping(data: Mapping[str, Any]) -> RotationConfig:
    """Accepts snake_case or camelCase keys; missing keys fall back to defaults."""
    values = {}
    for key, raw in data.items():
        name = CAMEL_KEYS.get(key, key)
        if name not in FIELDS:
            continue
        if isinstance(raw, bool):
            raise ConfigError(f"{key}: expected an integer, got {raw!r}")
        try:
            number = float(raw)
        except (TypeError, ValueError):
            raise ConfigError(f"{key}: expected an integer, got {raw!r}") from None
        if not number.is_integer():
            raise ConfigError(f"{key}: expected an integer, got {raw!r}")
        values[name] = int(number)
    return RotationConfig(**values)


def _read_config(wb) -> RotationConfig:
    """Read the CONFIG sheet's Parameter / Value rows."""
    if CONFIG_SHEET not in wb.sheetnames:
        raise ConfigError(f"Workbook has no {CONFIG_SHEET} sheet (run 'setup' first)")
    ws = wb[CONFIG_SHEET]
    rows = {}
    for row in range(2, ws.max_row + 1):
        p = ws.cell(row, 1).value
        v = ws.cell(row, 2).value
        if p and v is not None:
            rows[str(p).strip()] = v
    return config_from_mapping(rows)


def parse_workbook(wb_path: str) -> RotationConfig:
    wb = openpyxl.load_workbook(wb_path, data_only=True)
    return _read_config(wb)


def load_config(path: str) -> RotationConfig:
    """Dispatch on file extension: .json or .xlsx."""
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")
    suffix = p.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from None
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        return config_from_mapping(data)
    if suffix in (".xlsx", ".xlsm"):
        return parse_workbook(str(p))
    raise ConfigError(f"Unsupported config file type: {p.suffix or '(none)'}")
