from dataclasses import replace

from rotation.agent import advance, new_agent, peek_drilling
from rotation.models import Directive, Phase, RotationConfig, Status


def _agent(**changes):
    return replace(new_agent("second", RotationConfig(14, 7, 5, 40)), **changes)


def test_new_agent_is_not_deployed_and_renders_rest():
    a = _agent()
    assert a.phase is Phase.NOT_DEPLOYED
    assert a.status is Status.REST
    assert a.drilling_ceiling == 8
    assert not a.inducted


def test_not_deployed_waits_without_demand():
    a = advance(_agent())
    assert a.phase is Phase.NOT_DEPLOYED
    assert a.days_in_phase == 1


def test_first_deployment_runs_travel_induction_drilling():
    a = advance(_agent(), demand_start=True)
    assert a.phase is Phase.TRAVEL_IN and a.days_in_phase == 1
    a = advance(a)
    assert a.phase is Phase.INDUCTION
    for _ in range(4):
        a = advance(a)
        assert a.phase is Phase.INDUCTION
    assert a.days_in_phase == 5
    a = advance(a)
    assert a.phase is Phase.DRILLING
    assert a.inducted
    assert a.days_in_phase == 1


def test_emergency_return_ignored_before_induction():
    a = advance(_agent(), Directive.EMERGENCY_RETURN)
    assert a.phase is Phase.NOT_DEPLOYED


def test_inducted_agent_skips_induction():
    a = _agent(phase=Phase.REST, days_in_phase=3, inducted=True)
    a = advance(a, demand_start=True)
    assert a.phase is Phase.TRAVEL_IN
    a = advance(a)
    assert a.phase is Phase.DRILLING


def test_zero_induction_goes_straight_to_drilling_and_marks_inducted():
    a = new_agent("third", RotationConfig(7, 7, 0, 30))
    a = advance(advance(a, demand_start=True))
    assert a.phase is Phase.DRILLING
    assert a.inducted


def test_auto_departs_at_ceiling_and_counts_cycle():
    a = _agent(phase=Phase.DRILLING, days_in_phase=7, inducted=True)
    a = advance(a)
    assert a.phase is Phase.DRILLING and a.days_in_phase == 8
    a = advance(a)
    assert a.phase is Phase.TRAVEL_OUT
    assert a.completed_cycles == 1


def test_force_depart_and_force_stay():
    a = _agent(phase=Phase.DRILLING, days_in_phase=2, inducted=True)
    out = advance(a, Directive.FORCE_DEPART)
    assert out.phase is Phase.TRAVEL_OUT and out.completed_cycles == 1
    stay = advance(_agent(phase=Phase.DRILLING, days_in_phase=8, inducted=True),
                   Directive.FORCE_STAY)
    assert stay.phase is Phase.DRILLING and stay.days_in_phase == 9


def test_travel_out_then_rest_or_demand_or_emergency():
    b = _agent(phase=Phase.TRAVEL_OUT, days_in_phase=1, inducted=True, completed_cycles=1)
    assert advance(b).phase is Phase.REST
    assert advance(b, demand_start=True).phase is Phase.TRAVEL_IN
    back = advance(b, Directive.EMERGENCY_RETURN)
    assert back.phase is Phase.DRILLING and back.days_in_phase == 1


def test_emergency_return_takes_priority_over_demand_from_rest():
    r = _agent(phase=Phase.REST, days_in_phase=2, inducted=True)
    assert advance(r, Directive.EMERGENCY_RETURN, demand_start=True).phase is Phase.DRILLING


def test_advance_does_not_mutate_input():
    a = _agent(phase=Phase.DRILLING, days_in_phase=3, inducted=True)
    advance(a, Directive.FORCE_DEPART)
    assert a.phase is Phase.DRILLING and a.days_in_phase == 3


def test_peek_drilling():
    a = _agent(phase=Phase.INDUCTION, days_in_phase=5)
    assert peek_drilling(a)
    d = _agent(phase=Phase.DRILLING, days_in_phase=8, inducted=True)
    assert not peek_drilling(d)
    assert peek_drilling(d, Directive.FORCE_STAY)
