"""Shared fixtures for the rotation test suite."""
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
BACKEND = ROOT / "webapp" / "backend"
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(BACKEND))

# keep the API tests away from the real database file
os.environ.setdefault(
    "ROTATION_DB_PATH", str(Path(tempfile.mkdtemp(prefix="rotation-tests-")) / "rotation.db"))

from rotation.engine import run
from rotation.models import RotationConfig

SCENARIOS = {
    "14x7_ind5": RotationConfig(work_days=14, rest_days=7, induction_days=5, total_days=40),
    "21x7_ind3": RotationConfig(work_days=21, rest_days=7, induction_days=3, total_days=60),
    "10x5_ind2": RotationConfig(work_days=10, rest_days=5, induction_days=2, total_days=30),
    "14x6_ind4": RotationConfig(work_days=14, rest_days=6, induction_days=4, total_days=40),
    "7x7_ind1": RotationConfig(work_days=7, rest_days=7, induction_days=1, total_days=30),
}


@pytest.fixture
def config_14_7_5():
    return SCENARIOS["14x7_ind5"]


@pytest.fixture
def result_14_7_5(config_14_7_5):
    return run(config_14_7_5)


@pytest.fixture
def testing_session():
    """Session factory bound to a fresh in-memory database."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from database import Base
    import main  # noqa: F401  registers the ORM models

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return TestingSession


@pytest.fixture
def client(testing_session):
    from fastapi.testclient import TestClient

    from database import get_db
    from main import app

    def override_get_db():
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
