"""
Day-by-day orchestration of the two filling supervisors around the anchor.

One forward pass over the horizon. For each day a priority cascade assigns a
directive to each agent, each agent's demand flag is projected, both agents
advance, and their statuses are recorded. No day is revisited.
"""

from typing import Dict, List, Optional

from .agent import advance, new_agent, peek_drilling
from .baseline import generate_anchor_timeline
from .models import AgentState, Directive, Phase, RotationConfig, ScheduleResult, Status
from .projector import (
    drilling_count,
    lead_time,
    planned_last_day,
    project_excess,
    project_gap,
)
from .validate import validate_schedule

SECOND = "second"
THIRD = "third"


def _release_day(config: RotationConfig, state: AgentState) -> Optional[int]:
    """The second supervisor's first stint ends at the handover day."""
    if state.name == SECOND and state.completed_cycles == 0:
        return config.handover_day
    return None


def _count(day: int, anchor: List[Status], agents: Dict[str, AgentState],
           directives: Dict[str, Directive]) -> int:
    return drilling_count(day, anchor, [(agents[k], directives[k]) for k in (SECOND, THIRD)])


def _longest_drilling(candidates: List[AgentState]) -> AgentState:
    # ties go to the second supervisor, which is listed first
    best = candidates[0]
    for state in candidates[1:]:
        if state.days_in_phase > best.days_in_phase:
            best = state
    return best


def _can_emergency_return(state: AgentState, directive: Directive) -> bool:
    if not state.inducted or peek_drilling(state, directive):
        return False
    if state.phase.is_off:
        return True
    return state.phase is Phase.TRAVEL_OUT and state.days_in_phase >= 1


def _directives_for_day(
    day: int,
    config: RotationConfig,
    anchor: List[Status],
    agents: Dict[str, AgentState],
) -> Dict[str, Directive]:
    directives = {SECOND: Directive.AUTO, THIRD: Directive.AUTO}
    second = agents[SECOND]
    ceiling = config.drilling_ceiling

    # 1. first-cycle coordination
    if second.completed_cycles == 0 and second.is_drilling and day >= config.handover_day:
        directives[SECOND] = Directive.FORCE_DEPART

    # 2. ceiling enforcement
    for key in (SECOND, THIRD):
        state = agents[key]
        if directives[key] is not Directive.AUTO or not state.is_drilling:
            continue
        planned = planned_last_day(state, day - 1, anchor, _release_day(config, state))
        if state.days_in_phase >= ceiling or planned < day:
            directives[key] = Directive.FORCE_DEPART

    # 3. coverage balancing
    count = _count(day, anchor, agents, directives)
    if count > 2:
        candidates = [
            agents[k] for k in (SECOND, THIRD)
            if directives[k] is Directive.AUTO
            and agents[k].is_drilling
            and peek_drilling(agents[k], directives[k])
        ]
        if candidates:
            directives[_longest_drilling(candidates).name] = Directive.FORCE_DEPART
    elif count < 2:
        for key in (SECOND, THIRD):
            state = agents[key]
            if (directives[key] is Directive.AUTO and state.is_drilling
                    and state.days_in_phase < ceiling):
                directives[key] = Directive.FORCE_STAY

    # 4. failsafe
    count = _count(day, anchor, agents, directives)
    for key in (THIRD, SECOND):
        if count >= 2:
            break
        if _can_emergency_return(agents[key], directives[key]):
            directives[key] = Directive.EMERGENCY_RETURN
            count += 1
    _force_out_excess(day, anchor, agents, directives)

    # 5. cascading re-check
    _force_out_excess(day, anchor, agents, directives)
    return directives


def _force_out_excess(day: int, anchor: List[Status], agents: Dict[str, AgentState],
                      directives: Dict[str, Directive]) -> None:
    second, third = agents[SECOND], agents[THIRD]
    excess = (
        project_excess(day, anchor, second, third, directives[SECOND], directives[THIRD])
        or project_excess(day, anchor, third, second, directives[THIRD], directives[SECOND])
    )
    if not excess:
        return
    candidates = [
        agents[k] for k in (SECOND, THIRD)
        if agents[k].is_drilling and peek_drilling(agents[k], directives[k])
    ]
    if candidates:
        directives[_longest_drilling(candidates).name] = Directive.FORCE_DEPART


def _demand(
    day: int,
    config: RotationConfig,
    anchor: List[Status],
    me: AgentState,
    partner: AgentState,
) -> bool:
    if me.name == THIRD and me.phase is Phase.NOT_DEPLOYED:
        return day == config.third_entry_day
    return project_gap(day - 1, lead_time(me), anchor, me, partner,
                       _release_day(config, partner))


def run(config: RotationConfig) -> ScheduleResult:
    """Build the full three-supervisor timetable and validate it."""
    anchor = generate_anchor_timeline(config)
    agents = {SECOND: new_agent(SECOND, config), THIRD: new_agent(THIRD, config)}
    timelines: Dict[str, List[Status]] = {SECOND: [], THIRD: []}

    for day in range(config.total_days):
        directives = _directives_for_day(day, config, anchor, agents)
        demands = {
            SECOND: _demand(day, config, anchor, agents[SECOND], agents[THIRD]),
            THIRD: _demand(day, config, anchor, agents[THIRD], agents[SECOND]),
        }
        for key in (SECOND, THIRD):
            agents[key] = advance(agents[key], directives[key], demands[key])
            timelines[key].append(agents[key].status)

    violations = validate_schedule(anchor, timelines[SECOND], timelines[THIRD])
    return ScheduleResult(
        config=config,
        anchor=anchor,
        second=timelines[SECOND],
        third=timelines[THIRD],
        violations=violations,
    )
