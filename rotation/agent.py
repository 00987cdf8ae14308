"""
Filling-supervisor state machine.
advance() is pure: it takes the state as of the previous day plus the day's
directive and demand flag, and returns the state for the day being scheduled.
"""

from dataclasses import replace

from .models import AgentState, Directive, Phase, RotationConfig


def new_agent(name: str, config: RotationConfig) -> AgentState:
    return AgentState(
        name=name,
        phase=Phase.NOT_DEPLOYED,
        days_in_phase=0,
        inducted=False,
        completed_cycles=0,
        drilling_ceiling=config.drilling_ceiling,
        induction_days=config.induction_days,
    )


def _stay(state: AgentState) -> AgentState:
    return replace(state, days_in_phase=state.days_in_phase + 1)


def _enter(state: AgentState, phase: Phase, **changes) -> AgentState:
    return replace(state, phase=phase, days_in_phase=1, **changes)


def advance(
    state: AgentState,
    directive: Directive = Directive.AUTO,
    demand_start: bool = False,
) -> AgentState:
    phase = state.phase

    if phase.is_off:
        if directive is Directive.EMERGENCY_RETURN and state.inducted:
            return _enter(state, Phase.DRILLING)
        if demand_start:
            return _enter(state, Phase.TRAVEL_IN)
        return _stay(state)

    if phase is Phase.TRAVEL_IN:
        if state.days_in_phase < 1:
            return _stay(state)
        if not state.inducted and state.induction_days > 0:
            return _enter(state, Phase.INDUCTION)
        return _enter(state, Phase.DRILLING, inducted=True)

    if phase is Phase.INDUCTION:
        if state.days_in_phase >= state.induction_days:
            return _enter(state, Phase.DRILLING, inducted=True)
        return _stay(state)

    if phase is Phase.DRILLING:
        if directive is Directive.FORCE_DEPART:
            return _enter(state, Phase.TRAVEL_OUT,
                          completed_cycles=state.completed_cycles + 1)
        if directive in (Directive.FORCE_STAY, Directive.EMERGENCY_RETURN):
            return _stay(state)
        if state.days_in_phase >= state.drilling_ceiling:
            return _enter(state, Phase.TRAVEL_OUT,
                          completed_cycles=state.completed_cycles + 1)
        return _stay(state)

    # TRAVEL_OUT
    if state.days_in_phase < 1:
        return _stay(state)
    if directive is Directive.EMERGENCY_RETURN and state.inducted:
        return _enter(state, Phase.DRILLING)
    if demand_start:
        return _enter(state, Phase.TRAVEL_IN)
    return _enter(state, Phase.REST)


def peek_drilling(state: AgentState, directive: Directive = Directive.AUTO) -> bool:
    """Would the agent be drilling today under this directive?"""
    return advance(state, directive).is_drilling
