"""FastAPI application for the supervisor rotation scheduler."""
import sys
from pathlib import Path

# repo root, so the rotation package imports when run from this folder
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database import engine, Base
from routers import schedule, export

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Supervisor Rotation Scheduler",
    description="Three-supervisor drilling rotation with 2-of-3 coverage",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins in development
    allow_credentials=False,  # Must be False when allow_origins is "*"
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])
app.include_router(export.router, prefix="/api/export", tags=["export"])


@app.get("/")
def root():
    return {"message": "Supervisor Rotation Scheduler API", "docs": "/docs"}
