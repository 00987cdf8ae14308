"""
Rotation — three-supervisor drilling rotation scheduler.
Builds a day-by-day timetable in which exactly two supervisors drill on
every day once the crew is deployed, using a single deterministic forward pass.
"""

__version__ = "1.0.0"
