from dataclasses import replace

from rotation.agent import new_agent
from rotation.baseline import generate_anchor_timeline
from rotation.models import Directive, Phase, RotationConfig
from rotation.projector import (
    drilling_count,
    lead_time,
    off_window_length,
    planned_last_day,
    project_excess,
    project_gap,
)

CONFIG = RotationConfig(14, 7, 5, 40)
ANCHOR = generate_anchor_timeline(CONFIG)


def _agent(**changes):
    return replace(new_agent("second", CONFIG), **changes)


def test_lead_time_includes_induction_until_inducted():
    assert lead_time(_agent()) == 7
    assert lead_time(_agent(inducted=True)) == 2


def test_off_window_length_clips_to_horizon():
    assert off_window_length(ANCHOR, 15) == 7
    assert off_window_length(ANCHOR, 36) == 4
    assert off_window_length(ANCHOR, 22) == 0


def test_planned_last_day_respects_release_day():
    a = _agent(phase=Phase.DRILLING, days_in_phase=2, inducted=True)
    assert planned_last_day(a, 7, ANCHOR, release_day=14) == 13


def test_planned_last_day_respects_ceiling():
    a = _agent(phase=Phase.DRILLING, days_in_phase=1, inducted=True)
    # observed day 23 is run day 1, so run day 8 falls on day 30
    assert planned_last_day(a, 23, ANCHOR) == 30


def test_planned_last_day_stops_before_uncoverable_off_window():
    a = _agent(phase=Phase.DRILLING, days_in_phase=1, inducted=True)
    # day 35 is the anchor's last drilling day before the 36..39 window;
    # 5 + 4 would exceed the ceiling of 8
    assert planned_last_day(a, 31, ANCHOR) == 34


def test_planned_last_day_carries_through_when_it_fits():
    a = _agent(phase=Phase.DRILLING, days_in_phase=1, inducted=True)
    assert planned_last_day(a, 14, ANCHOR) == 21


def test_project_gap_first_deployment():
    me = _agent()
    partner = new_agent("third", CONFIG)
    # travelling on day 0 reaches drilling on day 6, the anchor's first drilling day
    assert project_gap(-1, lead_time(me), ANCHOR, me, partner)


def test_project_gap_waits_while_partner_covers_target():
    me = _agent(phase=Phase.REST, days_in_phase=1, inducted=True, completed_cycles=1)
    partner = _agent(name="third", phase=Phase.DRILLING, days_in_phase=3, inducted=True)
    # partner drilling since 23, planned through 30
    assert not project_gap(25, 2, ANCHOR, me, partner)
    partner = replace(partner, days_in_phase=7)
    assert project_gap(29, 2, ANCHOR, me, partner)


def test_project_gap_only_for_off_duty_agents():
    me = _agent(phase=Phase.TRAVEL_OUT, days_in_phase=1, inducted=True)
    partner = new_agent("third", CONFIG)
    assert not project_gap(20, 2, ANCHOR, me, partner)


def test_project_gap_beyond_horizon_is_false():
    me = _agent(phase=Phase.REST, days_in_phase=1, inducted=True)
    partner = new_agent("third", CONFIG)
    assert not project_gap(38, 2, ANCHOR, me, partner)


def test_project_excess_and_drilling_count():
    me = _agent(phase=Phase.DRILLING, days_in_phase=3, inducted=True)
    partner = _agent(name="third", phase=Phase.DRILLING, days_in_phase=2, inducted=True)
    assert project_excess(25, ANCHOR, me, partner)
    assert not project_excess(25, ANCHOR, me, partner, partner_directive=Directive.FORCE_DEPART)
    assert not project_excess(17, ANCHOR, me, partner)
    assert drilling_count(25, ANCHOR, [(me, Directive.AUTO), (partner, Directive.AUTO)]) == 3
    assert drilling_count(17, ANCHOR, [(me, Directive.FORCE_DEPART),
                                       (partner, Directive.AUTO)]) == 1
