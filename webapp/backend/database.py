"""Database setup for SQLite."""
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

import os

if os.environ.get("ROTATION_DB_PATH"):
    DB_PATH = Path(os.environ["ROTATION_DB_PATH"])
else:
    DB_PATH = Path(__file__).resolve().parent / "rotation.db"

DATABASE_URL = f"sqlite:///{DB_PATH}"

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    echo=False,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
