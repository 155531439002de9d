"""
Year rollover for FNL Coach.
Runs when a season ends (a regular season short of the playoff threshold, or the
last playoff week): log the year to history, graduate seniors, age everyone else a
grade, wipe stat lines, and build next year's schedule against the same league.
"""
from __future__ import annotations

import logging
import random

from models import GameState, SeasonRecord, empty_phase_stats
from models.constants import (
    PLAYOFFS,
    OFFSEASON,
    GRADUATION_GRADE,
    PLAYOFF_WIN_THRESHOLD,
    CHAMPIONSHIP_WIN_THRESHOLD,
    STATE_CHAMPION,
    PLAYOFF_APPEARANCE,
    REBUILDING_YEAR,
)

from .schedule import generate_schedule_for_year

_log = logging.getLogger("fnlcoach.offseason")


def season_achievement(wins: int, leaving_phase: str) -> str:
    """History label for a finished year. Only a playoff run can end in a title."""
    if leaving_phase == PLAYOFFS and wins > CHAMPIONSHIP_WIN_THRESHOLD:
        return STATE_CHAMPION
    if wins >= PLAYOFF_WIN_THRESHOLD:
        return PLAYOFF_APPEARANCE
    return REBUILDING_YEAR


def run_roster_rollover(state: GameState) -> list[str]:
    """Graduate grade-12 players and advance everyone else. Returns graduated ids."""
    graduates = [p.id for p in state.roster if p.grade >= GRADUATION_GRADE]
    returning = [p for p in state.roster if p.grade < GRADUATION_GRADE]
    for player in returning:
        player.grade += 1
        player.stats = empty_phase_stats()
        player.last_ovr_change = 0
    state.roster = returning
    return graduates


def run_season_reset(state: GameState, leaving_phase: str, rng: random.Random) -> None:
    """
    Close out the year on *state* (mutated in place) and land it in the off-season.
    *leaving_phase* is the phase that just ended; the championship check depends on it.
    """
    career = state.career
    achievement = season_achievement(career.wins, leaving_phase)
    state.history.append(SeasonRecord(
        year=state.year,
        record=f"{career.wins}-{career.losses}",
        achievement=achievement,
        school_name=state.user_school.name,
    ))
    _log.info("Season %d closed %d-%d: %s", state.year, career.wins, career.losses, achievement)

    if achievement == STATE_CHAMPION:
        career.titles += 1
    state.year += 1
    career.wins = 0
    career.losses = 0

    graduates = run_roster_rollover(state)
    state.schedule = generate_schedule_for_year(state.user_school, state.league_schools, rng)
    state.phase = OFFSEASON
    state.week = 1
    _log.info("Year %d begins: %d graduated, %d returning", state.year, len(graduates), len(state.roster))
