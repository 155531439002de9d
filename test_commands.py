"""
Tests for roster, recruiting, and staff commands.

Usage:
    pytest test_commands.py
"""
import random

from conftest import make_player, make_state, make_staff
from models import CoachProfile
from models.constants import OFFENSIVE_COORDINATOR, STRENGTH_COACH
from simulation import (
    recruit,
    scout,
    cut_player,
    reorder_roster,
    move_player,
    auto_sort_roster,
    hire_staff,
    set_staff_style,
    staff_hire_cost,
)


class FixedRoll(random.Random):
    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


# ===================================================================
# Recruiting
# ===================================================================

def test_successful_recruit_joins_roster_fully_scouted():
    prospect = make_player("p1", interest_level=60, scouting_level=1)
    state = make_state(recruitment_pool=[prospect])
    nxt = recruit(state, "p1", FixedRoll(0.59))
    assert nxt.find_prospect("p1") is None
    assert nxt.find_player("p1").scouting_level == 3
    assert state.find_prospect("p1") is not None


def test_failed_recruit_costs_interest():
    state = make_state(recruitment_pool=[make_player("p1", interest_level=60)])
    nxt = recruit(state, "p1", FixedRoll(0.61))
    assert nxt.find_player("p1") is None
    assert nxt.find_prospect("p1").interest_level == 45


def test_interest_never_drops_below_zero():
    state = make_state(recruitment_pool=[make_player("p1", interest_level=10)])
    assert recruit(state, "p1", FixedRoll(0.99)).find_prospect("p1").interest_level == 0


def test_recruiter_bonus():
    state = make_state(recruitment_pool=[make_player("p1", interest_level=60)],
                       coach=CoachProfile("Coach", "x", "Recruiter"))
    nxt = recruit(state, "p1", FixedRoll(0.75))
    assert nxt.find_player("p1") is not None


def test_recruit_unknown_prospect_is_noop():
    state = make_state(recruitment_pool=[make_player("p1")])
    assert recruit(state, "nope", FixedRoll(0.0)).to_dict() == state.to_dict()


def test_scout_spends_a_point():
    state = make_state(recruitment_pool=[make_player("p1", scouting_level=0)], scouting_points=2)
    nxt = scout(state, "p1")
    assert nxt.find_prospect("p1").scouting_level == 1
    assert nxt.scouting_points == 1


def test_scout_stops_at_max_level_and_zero_points():
    maxed = make_state(recruitment_pool=[make_player("p1", scouting_level=3)], scouting_points=2)
    assert scout(maxed, "p1").scouting_points == 2
    broke = make_state(recruitment_pool=[make_player("p1", scouting_level=0)], scouting_points=0)
    assert scout(broke, "p1").find_prospect("p1").scouting_level == 0


# ===================================================================
# Roster
# ===================================================================

def _roster():
    return [
        make_player("a", "WR", overall=60, potential=90),
        make_player("b", "QB", overall=70, potential=75),
        make_player("c", "WR", overall=80, potential=82),
        make_player("d", "QB", overall=65, potential=95),
    ]


def test_cut_player():
    state = make_state(roster=_roster())
    nxt = cut_player(state, "b")
    assert [p.id for p in nxt.roster] == ["a", "c", "d"]
    assert len(state.roster) == 4
    assert cut_player(state, "nope").to_dict() == state.to_dict()


def test_reorder_roster():
    state = make_state(roster=_roster())
    nxt = reorder_roster(state, ["d", "nope", "b", "d"])
    assert [p.id for p in nxt.roster] == ["d", "b", "a", "c"]


def test_move_player_swaps_neighbours():
    state = make_state(roster=_roster())
    assert [p.id for p in move_player(state, "c", "up").roster] == ["a", "c", "b", "d"]
    assert [p.id for p in move_player(state, "c", "down").roster] == ["a", "b", "d", "c"]
    assert [p.id for p in move_player(state, "a", "up").roster] == ["a", "b", "c", "d"]
    assert [p.id for p in move_player(state, "d", "down").roster] == ["a", "b", "c", "d"]
    assert [p.id for p in move_player(state, "nope", "up").roster] == ["a", "b", "c", "d"]


def test_auto_sort_by_overall_and_potential():
    state = make_state(roster=_roster())
    assert [p.id for p in auto_sort_roster(state, "overall").roster] == ["b", "d", "c", "a"]
    assert [p.id for p in auto_sort_roster(state, "potential").roster] == ["d", "b", "a", "c"]
    assert [p.id for p in auto_sort_roster(state, "grade").roster] == ["a", "b", "c", "d"]


# ===================================================================
# Staff
# ===================================================================

def test_hire_staff_replaces_incumbent_and_pays():
    incumbent = make_staff(OFFENSIVE_COORDINATOR, staff_id="old-oc")
    candidate = make_staff(OFFENSIVE_COORDINATOR, staff_id="new-oc")
    candidate.skill = 70
    other = make_staff(STRENGTH_COACH, staff_id="sc")
    state = make_state(staff=[incumbent, other], staff_candidates=[candidate])
    nxt = hire_staff(state, "new-oc")
    assert staff_hire_cost(candidate) == 10500
    assert nxt.user_school.budget == state.user_school.budget - 10500
    assert sorted(s.id for s in nxt.staff) == ["new-oc", "sc"]
    assert nxt.staff_candidates == []


def test_hire_unknown_candidate_is_noop():
    state = make_state(staff_candidates=[make_staff(OFFENSIVE_COORDINATOR, staff_id="c1")])
    assert hire_staff(state, "nope").to_dict() == state.to_dict()


def test_set_staff_style_is_clamped():
    state = make_state(staff=[make_staff(STRENGTH_COACH, staff_id="sc")])
    assert set_staff_style(state, "sc", 80).find_staff("sc").style_value == 80
    assert set_staff_style(state, "sc", 140).find_staff("sc").style_value == 100
    assert set_staff_style(state, "sc", -5).find_staff("sc").style_value == 0
    assert set_staff_style(state, "nope", 10).to_dict() == state.to_dict()
