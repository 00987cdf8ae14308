"""
Anchor (Supervisor 1) timeline generation.
The anchor never deviates from its cadence; the other two fill around it.
"""

from typing import List

from .models import RotationConfig, Status


def _cycle(config: RotationConfig, first: bool) -> List[Status]:
    if first:
        onboarding = [Status.INDUCTION] * config.induction_days
        drilling = [Status.DRILLING] * config.first_cycle_drilling
    else:
        onboarding = []
        drilling = [Status.DRILLING] * config.work_days
    return (
        [Status.TRAVEL_IN]
        + onboarding
        + drilling
        + [Status.TRAVEL_OUT]
        + [Status.REST] * (config.rest_days - 2)
    )


def generate_anchor_timeline(config: RotationConfig) -> List[Status]:
    """
    Cycle 1: S, I x I, P x (W - I), B, D x (R - 2).
    Later cycles: S, P x W, B, D x (R - 2).
    Repeated and truncated to exactly total_days entries.
    """
    timeline: List[Status] = []
    first = True
    while len(timeline) < config.total_days:
        timeline.extend(_cycle(config, first))
        first = False
    return timeline[:config.total_days]

