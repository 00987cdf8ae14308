"""Pydantic schemas for API."""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from rotation.models import MAX_TOTAL_DAYS, MIN_TOTAL_DAYS, RotationConfig


class RotationConfigIn(BaseModel):
    work_days: int = Field(14, ge=1)
    rest_days: int = Field(7, ge=2)
    induction_days: int = Field(5, ge=0)
    total_days: int = Field(30, ge=MIN_TOTAL_DAYS, le=MAX_TOTAL_DAYS)

    def to_config(self) -> RotationConfig:
        return RotationConfig(
            work_days=self.work_days,
            rest_days=self.rest_days,
            induction_days=self.induction_days,
            total_days=self.total_days,
        )


class SavedConfigOut(RotationConfigIn):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SupervisorTimeline(BaseModel):
    name: str
    timeline: List[str]


class ViolationOut(BaseModel):
    day: int
    display_day: int
    drilling: int
    message: str


class SupervisorStats(BaseModel):
    supervisor: str
    drilling: int
    rest: int
    travel_in: int
    induction: int
    travel_out: int
    utilization: float
    longest_run: int


class ScheduleOut(BaseModel):
    config: RotationConfigIn
    supervisors: List[SupervisorTimeline]
    drilling_counts: List[int]
    violations: List[ViolationOut]
    valid: bool
    drilling_ceiling: int
    warnings: List[str] = []
    summary: List[SupervisorStats] = []
    deviation_note: Optional[str] = None
