"""Run the rotation engine and remember the last-used parameters."""
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database import get_db
from models import SavedConfig
from schemas import RotationConfigIn, SavedConfigOut, ScheduleOut, SupervisorStats
from rotation.analytics import supervisor_summary, workload_deviation
from rotation.engine import run
from rotation.models import MAX_TOTAL_DAYS, MIN_TOTAL_DAYS, RotationConfig, ScheduleResult
from rotation.validate import check_config, support_warnings

router = APIRouter()


def config_query(
    work_days: int = Query(14, ge=1),
    rest_days: int = Query(7, ge=2),
    induction_days: int = Query(5, ge=0),
    total_days: int = Query(30, ge=MIN_TOTAL_DAYS, le=MAX_TOTAL_DAYS),
) -> RotationConfigIn:
    return RotationConfigIn(
        work_days=work_days,
        rest_days=rest_days,
        induction_days=induction_days,
        total_days=total_days,
    )


def checked_config(data: RotationConfigIn) -> RotationConfig:
    """Cross-field rules that pydantic bounds can't express."""
    config = data.to_config()
    ok, msgs = check_config(config)
    if not ok:
        raise HTTPException(400, "; ".join(msgs))
    return config


def _summary(result: ScheduleResult) -> List[SupervisorStats]:
    return [
        SupervisorStats(
            supervisor=row["Supervisor"],
            drilling=row["Drilling (P)"],
            rest=row["Rest (D)"],
            travel_in=row["Travel In (S)"],
            induction=row["Induction (I)"],
            travel_out=row["Travel Out (B)"],
            utilization=row["Utilization %"],
            longest_run=row["Longest Run"],
        )
        for row in supervisor_summary(result).to_dict(orient="records")
    ]


def _save_last_config(db: Session, config: RotationConfig) -> SavedConfig:
    """Keep a single row holding the last-used parameters."""
    saved = db.query(SavedConfig).order_by(SavedConfig.id.desc()).first()
    if saved is None:
        saved = SavedConfig()
        db.add(saved)
    else:
        db.query(SavedConfig).filter(SavedConfig.id != saved.id).delete()
    for field, value in config.to_dict().items():
        setattr(saved, field, value)
    saved.created_at = datetime.utcnow()
    db.commit()
    db.refresh(saved)
    return saved


@router.post("/", response_model=ScheduleOut)
def create_schedule(data: RotationConfigIn, db: Session = Depends(get_db)):
    config = checked_config(data)
    result = run(config)

    _save_last_config(db, config)

    payload = result.to_dict()
    payload["drilling_ceiling"] = config.drilling_ceiling
    payload["warnings"] = support_warnings(config)
    payload["summary"] = _summary(result)
    payload["deviation_note"] = workload_deviation(result)
    return payload


@router.get("/last-config", response_model=SavedConfigOut)
def get_last_config(db: Session = Depends(get_db)):
    saved = db.query(SavedConfig).order_by(SavedConfig.id.desc()).first()
    if not saved:
        raise HTTPException(404, "No configuration saved yet")
    return saved


@router.get("/summary", response_model=List[SupervisorStats])
def get_summary(data: RotationConfigIn = Depends(config_query)):
    return _summary(run(checked_config(data)))
