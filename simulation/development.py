"""
Weekly player development for FNL Coach.
Every week each roster player heals, may get hurt, may progress, and has grades and
morale nudged by the staff's style dials:

- Strength Coach style raises both the injury risk (in-season) and the progression
  chance (off-season / pre-season).
- Academic Advisor style raises GPA and lowers morale every week.

Vacant roles read as a neutral style of 50.
"""
from __future__ import annotations

import logging
import random
from typing import Any

from models import GameState, Player
from models.constants import (
    OFFSEASON,
    PRESEASON,
    REGULAR_SEASON,
    STRENGTH_COACH,
    ACADEMIC_ADVISOR,
    INJURY_PRONE_TRAIT,
    HEALTHY,
    OUT,
    OVERALL_MAX,
    ACADEMICS_MAX,
)

_log = logging.getLogger("fnlcoach.development")

INJURY_PHASES = (PRESEASON, REGULAR_SEASON)
PROGRESSION_PHASES = (OFFSEASON, PRESEASON)

BASE_INJURY_CHANCE = 0.01
STRENGTH_INJURY_FACTOR = 0.05
INJURY_PRONE_PENALTY = 0.08
BASE_PROGRESSION_CHANCE = 0.1
STRENGTH_PROGRESSION_FACTOR = 0.3
ACADEMIC_GROWTH = 0.1
MORALE_COST = 5


def injury_chance(player: Player, strength_style: int) -> float:
    chance = BASE_INJURY_CHANCE + (strength_style / 100) * STRENGTH_INJURY_FACTOR
    if player.has_trait(INJURY_PRONE_TRAIT):
        chance += INJURY_PRONE_PENALTY
    return chance


def progression_chance(strength_style: int) -> float:
    return BASE_PROGRESSION_CHANCE + (strength_style / 100) * STRENGTH_PROGRESSION_FACTOR


def _heal(player: Player) -> None:
    if player.injury_weeks > 0:
        player.injury_weeks -= 1
    if player.injury_weeks <= 0:
        player.injury_weeks = 0
        player.injury_status = HEALTHY


def _progression_gain(player: Player, rng: random.Random) -> int:
    gain = 2 if player.potential > 85 and rng.random() > 0.7 else 1
    return min(gain, OVERALL_MAX - player.overall)


def run_weekly_development(state: GameState, rng: random.Random) -> dict[str, Any]:
    """
    Apply one week of development to every roster player in *state* (mutated in place).
    Returns a summary: {"injured": [...ids], "healed": [...ids], "progressed": {id: gain}}.
    """
    strength_style = state.style_for_role(STRENGTH_COACH)
    advisor_style = state.style_for_role(ACADEMIC_ADVISOR)
    phase = state.phase

    summary: dict[str, Any] = {"injured": [], "healed": [], "progressed": {}}

    for player in state.roster:
        player.last_ovr_change = 0

        if player.is_out:
            _heal(player)
            if not player.is_out:
                summary["healed"].append(player.id)
        # a player healed this week is exposed to a new injury straight away
        if not player.is_out and phase in INJURY_PHASES and rng.random() < injury_chance(player, strength_style):
            player.injury_status = OUT
            player.injury_weeks = rng.randint(1, 4)
            summary["injured"].append(player.id)

        if phase in PROGRESSION_PHASES and rng.random() < progression_chance(strength_style):
            gain = _progression_gain(player, rng)
            if gain > 0:
                player.overall += gain
                player.last_ovr_change = gain
                summary["progressed"][player.id] = gain

        growth = (advisor_style / 100) * ACADEMIC_GROWTH
        player.academics = round(min(ACADEMICS_MAX, player.academics + growth), 2)
        player.morale = max(0, player.morale - (advisor_style / 100) * MORALE_COST)

    _log.debug(
        "Week %d %s development: %d injured, %d healed, %d progressed",
        state.week, phase, len(summary["injured"]), len(summary["healed"]), len(summary["progressed"]),
    )
    return summary
