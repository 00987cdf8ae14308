"""
Per-supervisor statistics over a finished schedule.
"""

from typing import List, Optional

import pandas as pd

from .models import SUPERVISOR_NAMES, SUPERVISOR_ROLES, ScheduleResult, Status
from .validate import longest_drilling_run

DAILY_COLUMNS = ["Day", *SUPERVISOR_NAMES, "Drilling (#P)"]
DEVIATION_THRESHOLD = 5


def daily_frame(result: ScheduleResult) -> pd.DataFrame:
    """One row per day: 1-based day, the three status letters, drilling count."""
    counts = result.drilling_counts()
    rows = [
        [day + 1, a.value, b.value, c.value, counts[day]]
        for day, (a, b, c) in enumerate(zip(*result.timelines()))
    ]
    return pd.DataFrame(rows, columns=DAILY_COLUMNS)


def supervisor_summary(result: ScheduleResult) -> pd.DataFrame:
    total = result.config.total_days
    rows = []
    for name, role, timeline in zip(SUPERVISOR_NAMES, SUPERVISOR_ROLES, result.timelines()):
        counts = pd.Series([s.value for s in timeline]).value_counts()
        drilling = int(counts.get(Status.DRILLING.value, 0))
        rows.append({
            "Supervisor": f"{name} ({role})",
            "Drilling (P)": drilling,
            "Rest (D)": int(counts.get(Status.REST.value, 0)),
            "Travel In (S)": int(counts.get(Status.TRAVEL_IN.value, 0)),
            "Induction (I)": int(counts.get(Status.INDUCTION.value, 0)),
            "Travel Out (B)": int(counts.get(Status.TRAVEL_OUT.value, 0)),
            "Utilization %": round(drilling / total * 100, 1) if total else 0.0,
            "Longest Run": longest_drilling_run(timeline),
        })
    return pd.DataFrame(rows)


def workload_deviation(result: ScheduleResult,
                       threshold: int = DEVIATION_THRESHOLD) -> Optional[str]:
    """Note when either filling supervisor's drilling days drift far from the anchor's."""
    p1, p2, p3 = (sum(1 for s in t if s is Status.DRILLING) for t in result.timelines())
    if abs(p2 - p1) > threshold or abs(p3 - p1) > threshold:
        return "Significant workload deviation detected to cover gaps."
    return None


def summary_lines(result: ScheduleResult) -> List[str]:
    """Plain-text summary for the CLI."""
    lines = []
    for row in supervisor_summary(result).to_dict(orient="records"):
        lines.append(
            f"  {row['Supervisor']:<24} P={row['Drilling (P)']:<4} D={row['Rest (D)']:<4} "
            f"S={row['Travel In (S)']:<3} I={row['Induction (I)']:<3} B={row['Travel Out (B)']:<3} "
            f"util={row['Utilization %']}%  longest={row['Longest Run']}")
    note = workload_deviation(result)
    if note:
        lines.append(f"  Note: {note}")
    return lines
