"""
Lead-time-aware forecasts of coverage gaps and overlaps.

All projections are made from an *observed day*: the last day already
reflected in an agent's state. Demand raised while scheduling day d uses
observed day d - 1, so the agent travels on d and reaches drilling on
(d - 1) + lead_time.
"""

from typing import Iterable, List, Optional, Tuple

from .agent import peek_drilling
from .models import AgentState, Directive, Phase, Status


def lead_time(state: AgentState) -> int:
    """Travel + remaining induction + one day between observation and travel."""
    induction = 0 if state.inducted else state.induction_days
    return 1 + induction + 1


def off_window_length(anchor: List[Status], day: int) -> int:
    """Consecutive non-drilling anchor days starting at day, clipped to the horizon."""
    length = 0
    while day + length < len(anchor) and anchor[day + length] is not Status.DRILLING:
        length += 1
    return length


def planned_last_day(
    state: AgentState,
    observed_day: int,
    anchor: List[Status],
    release_day: Optional[int] = None,
) -> int:
    """
    Last day a drilling agent keeps drilling if nothing intervenes.
    Stops before the ceiling would be exceeded, before release_day, and before
    the last anchor drilling day ahead of an off-window the agent could not
    carry through within its ceiling.
    """
    horizon = len(anchor)
    ceiling = state.drilling_ceiling
    last = observed_day
    run = state.days_in_phase
    nxt = observed_day + 1
    while nxt < horizon:
        nrun = run + 1
        if nrun > ceiling:
            break
        if release_day is not None and nxt >= release_day:
            break
        if (anchor[nxt] is Status.DRILLING
                and nxt + 1 < horizon
                and anchor[nxt + 1] is not Status.DRILLING
                and nrun + off_window_length(anchor, nxt + 1) > ceiling):
            break
        last = nxt
        run = nrun
        nxt += 1
    return last


def project_gap(
    observed_day: int,
    lead: int,
    anchor: List[Status],
    me: AgentState,
    partner: AgentState,
    partner_release: Optional[int] = None,
) -> bool:
    """True when an off-duty agent must start travelling now to close a future gap."""
    if not me.phase.is_off:
        return False
    target = observed_day + lead
    if target >= len(anchor):
        return False

    covered = 1 if anchor[target] is Status.DRILLING else 0
    if partner.is_drilling:
        if planned_last_day(partner, observed_day, anchor, partner_release) >= target:
            covered += 1
    elif partner.phase in (Phase.TRAVEL_IN, Phase.INDUCTION):
        covered += 1
    return covered < 2


def project_excess(
    day: int,
    anchor: List[Status],
    me: AgentState,
    partner: AgentState,
    me_directive: Directive = Directive.AUTO,
    partner_directive: Directive = Directive.AUTO,
) -> bool:
    """True when a drilling agent staying on would put three people on the rig."""
    if not me.is_drilling or not peek_drilling(me, me_directive):
        return False
    count = 1 if anchor[day] is Status.DRILLING else 0
    count += 1
    if peek_drilling(partner, partner_directive):
        count += 1
    return count > 2


def drilling_count(
    day: int,
    anchor: List[Status],
    agents: Iterable[Tuple[AgentState, Directive]],
) -> int:
    count = 1 if anchor[day] is Status.DRILLING else 0
    for state, directive in agents:
        if peek_drilling(state, directive):
            count += 1
    return count
