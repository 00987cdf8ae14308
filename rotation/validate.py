"""
Post-schedule validation and configuration checks.
"""

from typing import List, Tuple

from .models import MAX_TOTAL_DAYS, MIN_TOTAL_DAYS, RotationConfig, Status, Violation


def validate_schedule(
    anchor: List[Status],
    second: List[Status],
    third: List[Status],
) -> List[Violation]:
    """
    Scan the three timelines once, in day order.
    Over-coverage is always reported; under-coverage only once the third
    supervisor has left REST for the first time.
    """
    violations = []
    has_ever_deployed = False
    for day, statuses in enumerate(zip(anchor, second, third)):
        if statuses[2] is not Status.REST:
            has_ever_deployed = True
        drilling = sum(1 for s in statuses if s is Status.DRILLING)
        if drilling > 2:
            violations.append(Violation(day, f"VIOLATION: {drilling} drilling (max 2)", drilling))
        elif drilling < 2 and has_ever_deployed:
            violations.append(Violation(day, f"VIOLATION: {drilling} drilling (need 2)", drilling))
    return violations


def check_config(config: RotationConfig) -> Tuple[bool, List[str]]:
    """Returns (is_valid, messages) for the configuration's field rules."""
    msgs = []
    if config.work_days < 1:
        msgs.append(f"work_days = {config.work_days} (min 1)")
    if config.rest_days < 2:
        msgs.append(f"rest_days = {config.rest_days} (min 2: travel out + travel in)")
    if config.induction_days < 0:
        msgs.append(f"induction_days = {config.induction_days} (min 0)")
    elif config.induction_days >= config.work_days - 1:
        msgs.append(
            f"induction_days = {config.induction_days} must be below work_days - 1 "
            f"({config.work_days - 1})")
    if config.total_days < MIN_TOTAL_DAYS:
        msgs.append(f"total_days = {config.total_days} (min {MIN_TOTAL_DAYS})")
    elif config.total_days > MAX_TOTAL_DAYS:
        msgs.append(f"total_days = {config.total_days} (max {MAX_TOTAL_DAYS})")
    if config.work_days > config.total_days:
        msgs.append(
            f"work_days = {config.work_days} exceeds total_days = {config.total_days}")
    return len(msgs) == 0, msgs


def support_warnings(config: RotationConfig) -> List[str]:
    """Reasons a valid configuration may still produce coverage violations."""
    warnings = []
    if not config.is_supported:
        warnings.append(
            f"work_days = {config.work_days} is below 2 x induction_days + 2 "
            f"({2 * config.induction_days + 2}): the third supervisor cannot finish "
            f"induction before the second must leave; ramp-up gaps expected")
    return warnings


def longest_drilling_run(timeline: List[Status]) -> int:
    best = run = 0
    for status in timeline:
        run = run + 1 if status is Status.DRILLING else 0
        best = max(best, run)
    return best
