"""SQLAlchemy models for the rotation DB."""
from datetime import datetime
from sqlalchemy import Column, Integer, DateTime

from database import Base


class SavedConfig(Base):
    """Single row holding the last-used parameters; overwritten on every accepted run."""
    __tablename__ = "saved_configs"
    id = Column(Integer, primary_key=True, index=True)
    work_days = Column(Integer, nullable=False)
    rest_days = Column(Integer, nullable=False)
    induction_days = Column(Integer, nullable=False)
    total_days = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
