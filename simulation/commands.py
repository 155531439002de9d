"""
Roster, recruiting, and staff commands for FNL Coach.
Each command takes the current GameState plus an id or value and returns a new
GameState. Unknown ids leave the state unchanged. Caller-side policies (roster cap,
budget, available scouting points) are enforced by the API layer, not here.
"""
from __future__ import annotations

import copy
import logging
import random

from models import GameState, Staff
from models.constants import (
    RECRUITER_BONUS,
    SCOUTING_LEVEL_MAX,
    STAFF_COST_PER_SKILL,
    STYLE_MIN,
    STYLE_MAX,
)

_log = logging.getLogger("fnlcoach.commands")

INTEREST_DROP = 15
SORT_KEYS = ("overall", "potential")


def staff_hire_cost(staff: Staff) -> int:
    return staff.skill * STAFF_COST_PER_SKILL


def recruitment_chance(state: GameState, interest_level: int) -> float:
    """Probability a prospect commits: interest plus the Recruiter bonus, as a fraction."""
    bonus = RECRUITER_BONUS if state.coach.archetype == "Recruiter" else 0
    return (interest_level + bonus) / 100


# ===================================================================
# Recruiting
# ===================================================================

def recruit(state: GameState, player_id: str, rng: random.Random | None = None) -> GameState:
    """Try to sign a prospect. A commit joins the roster fully scouted; a miss costs 15 interest."""
    state = copy.deepcopy(state)
    prospect = state.find_prospect(player_id)
    if prospect is None:
        return state
    rng = rng or random.Random()

    if rng.random() < recruitment_chance(state, prospect.interest_level):
        state.recruitment_pool = [p for p in state.recruitment_pool if p.id != player_id]
        prospect.scouting_level = SCOUTING_LEVEL_MAX
        state.roster.append(prospect)
        _log.info("%s (%s, %s) committed", prospect.name, prospect.position, prospect.source)
    else:
        prospect.interest_level = max(0, prospect.interest_level - INTEREST_DROP)
        _log.debug("%s turned us down, interest now %d", prospect.name, prospect.interest_level)
    return state


def scout(state: GameState, player_id: str) -> GameState:
    """Spend one scouting point to raise a prospect's scouting level by one."""
    state = copy.deepcopy(state)
    prospect = state.find_prospect(player_id)
    if prospect is None or state.scouting_points <= 0 or prospect.scouting_level >= SCOUTING_LEVEL_MAX:
        return state
    prospect.scouting_level += 1
    state.scouting_points -= 1
    return state


# ===================================================================
# Roster
# ===================================================================

def cut_player(state: GameState, player_id: str) -> GameState:
    state = copy.deepcopy(state)
    state.roster = [p for p in state.roster if p.id != player_id]
    return state


def reorder_roster(state: GameState, player_ids: list[str]) -> GameState:
    """Put the roster in the given id order. Unknown ids are ignored; players
    missing from the list keep their relative order after the listed ones."""
    state = copy.deepcopy(state)
    by_id = {p.id: p for p in state.roster}
    ordered = []
    seen = set()
    for pid in player_ids:
        if pid in by_id and pid not in seen:
            ordered.append(by_id[pid])
            seen.add(pid)
    ordered.extend(p for p in state.roster if p.id not in seen)
    state.roster = ordered
    return state


def move_player(state: GameState, player_id: str, direction: str) -> GameState:
    """Swap a player with the neighbour above ("up") or below ("down") on the depth chart."""
    state = copy.deepcopy(state)
    index = next((i for i, p in enumerate(state.roster) if p.id == player_id), None)
    if index is None or direction not in ("up", "down"):
        return state
    target = index - 1 if direction == "up" else index + 1
    if 0 <= target < len(state.roster):
        roster = state.roster
        roster[index], roster[target] = roster[target], roster[index]
    return state


def auto_sort_roster(state: GameState, key: str = "overall") -> GameState:
    """Group the roster by position name, best *key* (overall or potential) first within each."""
    state = copy.deepcopy(state)
    if key not in SORT_KEYS:
        return state
    state.roster.sort(key=lambda p: (p.position, -getattr(p, key)))
    return state


# ===================================================================
# Staff
# ===================================================================

def hire_staff(state: GameState, candidate_id: str) -> GameState:
    """Hire a candidate: pay skill*150 from the budget and replace whoever holds the role."""
    state = copy.deepcopy(state)
    candidate = next((c for c in state.staff_candidates if c.id == candidate_id), None)
    if candidate is None:
        return state

    cost = staff_hire_cost(candidate)
    state.user_school.budget -= cost
    state.staff = [s for s in state.staff if s.role != candidate.role] + [candidate]
    state.staff_candidates = [c for c in state.staff_candidates if c.id != candidate_id]
    _log.info("Hired %s as %s for $%d", candidate.name, candidate.role, cost)
    return state


def set_staff_style(state: GameState, staff_id: str, value: int) -> GameState:
    state = copy.deepcopy(state)
    member = state.find_staff(staff_id)
    if member is not None:
        member.style_value = max(STYLE_MIN, min(STYLE_MAX, int(value)))
    return state
