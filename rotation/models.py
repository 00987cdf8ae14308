"""
Data models for the rotation scheduler.
Status letters follow the crew roster convention: S, I, P, B, D.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class Status(str, Enum):
    """Per-day status recorded on a supervisor's timeline."""
    TRAVEL_IN = "S"
    INDUCTION = "I"
    DRILLING = "P"
    TRAVEL_OUT = "B"
    REST = "D"


class Phase(str, Enum):
    """Internal agent phase. NOT_DEPLOYED renders as REST on the timeline."""
    NOT_DEPLOYED = "H"
    TRAVEL_IN = "S"
    INDUCTION = "I"
    DRILLING = "P"
    TRAVEL_OUT = "B"
    REST = "D"

    @property
    def status(self) -> Status:
        if self is Phase.NOT_DEPLOYED:
            return Status.REST
        return Status(self.value)

    @property
    def is_off(self) -> bool:
        return self in (Phase.NOT_DEPLOYED, Phase.REST)


class Directive(str, Enum):
    """Per-day instruction issued by the orchestration loop to an agent."""
    AUTO = "AUTO"
    FORCE_DEPART = "FORCE_DEPART"
    FORCE_STAY = "FORCE_STAY"
    EMERGENCY_RETURN = "EMERGENCY_RETURN"


STATUS_LABELS: Dict[Status, str] = {
    Status.TRAVEL_IN: "Travel In",
    Status.INDUCTION: "Induction",
    Status.DRILLING: "Drilling",
    Status.TRAVEL_OUT: "Travel Out",
    Status.REST: "Rest",
}

SUPERVISOR_NAMES = ("Supervisor 1", "Supervisor 2", "Supervisor 3")
SUPERVISOR_ROLES = ("Master", "Agent", "Agent")

MAX_TOTAL_DAYS = 2000
MIN_TOTAL_DAYS = 15


@dataclass(frozen=True)
class RotationConfig:
    """Shared cadence for all three supervisors plus the planning horizon."""
    work_days: int = 14       # W: days on site per cycle
    rest_days: int = 7        # R: days off per cycle, travel days included
    induction_days: int = 5   # I: one-time onboarding before the first shift
    total_days: int = 30      # H: horizon

    @property
    def first_cycle_drilling(self) -> int:
        return self.work_days - self.induction_days

    @property
    def drilling_ceiling(self) -> int:
        """Longest run any filling supervisor may drill in one stretch."""
        return max(self.work_days - self.induction_days - 1, self.rest_days + 1)

    @property
    def handover_day(self) -> int:
        """Day the third supervisor first drills and the second leaves its first cycle."""
        return self.work_days

    @property
    def third_entry_day(self) -> int:
        return self.work_days - self.induction_days - 1

    @property
    def is_supported(self) -> bool:
        return self.work_days >= 2 * self.induction_days + 2

    def to_dict(self) -> Dict[str, int]:
        return {
            "work_days": self.work_days,
            "rest_days": self.rest_days,
            "induction_days": self.induction_days,
            "total_days": self.total_days,
        }


@dataclass(frozen=True)
class AgentState:
    """Value snapshot of one filling supervisor; advance() returns a new one."""
    name: str
    phase: Phase = Phase.NOT_DEPLOYED
    days_in_phase: int = 0
    inducted: bool = False
    completed_cycles: int = 0
    drilling_ceiling: int = 0
    induction_days: int = 0

    @property
    def status(self) -> Status:
        return self.phase.status

    @property
    def is_drilling(self) -> bool:
        return self.phase is Phase.DRILLING


@dataclass(frozen=True)
class Violation:
    day: int           # zero-based
    message: str
    drilling: int

    @property
    def display_day(self) -> int:
        return self.day + 1


@dataclass
class ScheduleResult:
    """Output of one engine run: three timelines plus the validator's findings."""
    config: RotationConfig
    anchor: List[Status]
    second: List[Status]
    third: List[Status]
    violations: List[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def timelines(self) -> List[List[Status]]:
        return [self.anchor, self.second, self.third]

    def drilling_counts(self) -> List[int]:
        return [
            sum(1 for t in self.timelines() if t[d] is Status.DRILLING)
            for d in range(len(self.anchor))
        ]

    def to_dict(self) -> dict:
        return {
            "config": self.config.to_dict(),
            "supervisors": [
                {"name": name, "timeline": [s.value for s in timeline]}
                for name, timeline in zip(SUPERVISOR_NAMES, self.timelines())
            ],
            "drilling_counts": self.drilling_counts(),
            "violations": [
                {"day": v.day, "display_day": v.display_day,
                 "drilling": v.drilling, "message": v.message}
                for v in self.violations
            ],
            "valid": self.is_valid,
        }
