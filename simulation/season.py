"""
Season state machine for FNL Coach.

A career moves through OFFSEASON (3 weeks) -> PRESEASON (6) -> REGULAR_SEASON (9)
-> PLAYOFFS (4, only with at least 5 wins) and back to OFFSEASON, one
``advance_week`` call at a time. Each call:

1. merges a finished live game, then fast-sims the week's unplayed matchup, if there is one;
2. runs weekly development for every player;
3. refreshes the recruiting pool, scouting points, and staff candidates;
4. moves the calendar, building the playoff bracket or closing out the year.

Every public function takes a GameState and returns a new one; the input is never mutated.
"""
from __future__ import annotations

import copy
import logging
import random

from generation import (
    generate_player,
    generate_school,
    generate_league,
    generate_staff,
    generate_staff_candidates,
    generate_weekly_recruits,
)
from models import ActiveGame, CoachProfile, GameMatchup, GameState, CareerStats
from models.constants import (
    OFFSEASON,
    PRESEASON,
    REGULAR_SEASON,
    PLAYOFFS,
    PHASE_WEEKS,
    PHASE_LABELS,
    SCRIMMAGE,
    REGULAR,
    PLAYOFF,
    SCRIMMAGE_WEEK_OFFSET,
    PLAYOFF_WIN_THRESHOLD,
    SCOUTING_POINTS,
    SCOUTING_POINTS_OFFSEASON,
    ROSTER_DISTRIBUTION,
    MOTIVATOR_MORALE_BONUS,
    LEAGUE_SIZE,
    USER_PRIMARY_COLOR,
    SECONDARY_COLOR,
    HIREABLE_ROLES,
    STARTING_YEAR,
)

from .development import run_weekly_development
from .engine import simulate_matchup, apply_live_game
from .interactive import start_interactive_game
from .offseason import run_season_reset
from .schedule import generate_schedule_for_year, generate_playoff_bracket

_log = logging.getLogger("fnlcoach.season")


def create_career(coach: CoachProfile, team_name: str, rng: random.Random | None = None) -> GameState:
    """
    Start a new career at the user's school: pre-season week 1 of 2024 with a
    fully scouted 51-man roster, a nine-school league, and the year's schedule.
    """
    rng = rng or random.Random()
    user_school = generate_school(team_name, rng)
    user_school.primary_color = USER_PRIMARY_COLOR
    user_school.secondary_color = SECONDARY_COLOR

    morale_bonus = MOTIVATOR_MORALE_BONUS if coach.archetype == "Motivator" else 0
    roster = []
    for position, count in ROSTER_DISTRIBUTION.items():
        for _ in range(count):
            player = generate_player(None, position, None, rng, fully_scouted=True)
            player.morale = min(100, player.morale + morale_bonus)
            roster.append(player)

    league = generate_league(LEAGUE_SIZE, rng)
    state = GameState(
        year=STARTING_YEAR,
        week=1,
        phase=PRESEASON,
        user_school=user_school,
        coach=copy.deepcopy(coach),
        roster=roster,
        staff=[generate_staff(role, rng) for role in HIREABLE_ROLES],
        staff_candidates=generate_staff_candidates(rng),
        career=CareerStats(),
        league_schools=league,
        schedule=generate_schedule_for_year(user_school, league, rng),
        recruitment_pool=[],
        scouting_points=SCOUTING_POINTS,
        history=[],
    )
    _log.info(
        "New career: %s (%s) at %s, %d players",
        coach.name, coach.archetype, user_school.name, len(roster),
    )
    return state


def current_matchup(state: GameState) -> GameMatchup | None:
    """The unplayed matchup scheduled for the state's phase and week, if any.
    Scrimmages sit in the last two pre-season weeks."""
    if state.phase == PRESEASON:
        summary, week = SCRIMMAGE, state.week - SCRIMMAGE_WEEK_OFFSET
    elif state.phase == REGULAR_SEASON:
        summary, week = REGULAR, state.week
    elif state.phase == PLAYOFFS:
        summary, week = PLAYOFF, state.week
    else:
        return None
    return next(
        (m for m in state.schedule if m.summary == summary and m.week == week and not m.played),
        None,
    )


def _advance_clock(state: GameState, rng: random.Random) -> None:
    phase = state.phase
    if state.week < PHASE_WEEKS.get(phase, 1):
        state.week += 1
        return

    if phase == OFFSEASON:
        next_phase = PRESEASON
    elif phase == PRESEASON:
        next_phase = REGULAR_SEASON
    elif phase == REGULAR_SEASON and state.career.wins >= PLAYOFF_WIN_THRESHOLD:
        next_phase = PLAYOFFS
    else:
        run_season_reset(state, phase, rng)
        return

    state.week = 1
    state.phase = next_phase
    if next_phase == PLAYOFFS:
        state.schedule.extend(generate_playoff_bracket(state.user_school, state.league_schools, rng))
    _log.info("%d: %s -> %s", state.year, PHASE_LABELS.get(phase, phase), PHASE_LABELS[next_phase])


def _settle_active_game(state: GameState, rng: random.Random) -> None:
    """
    Merge a finished live game into the schedule, then drop the live game.
    A game left unfinished is abandoned and its matchup falls back to the fast sim.
    """
    game = state.active_game
    matchup = state.find_matchup(game.matchup_id)
    if game.is_game_over and matchup is not None and not matchup.played:
        apply_live_game(state, matchup, game, rng)
    elif not game.is_game_over:
        _log.warning("Abandoning unfinished live game for %s", game.matchup_id)
    state.active_game = None


def advance_week(state: GameState, rng: random.Random | None = None) -> GameState:
    """Run one week of the career. Returns a new GameState."""
    rng = rng or random.Random()
    state = copy.deepcopy(state)

    if state.active_game is not None:
        _settle_active_game(state, rng)

    matchup = current_matchup(state)
    if matchup is not None:
        simulate_matchup(state, matchup, rng)

    run_weekly_development(state, rng)

    leaving = state.phase
    state.recruitment_pool = generate_weekly_recruits(leaving, rng)
    state.scouting_points = SCOUTING_POINTS_OFFSEASON if leaving == OFFSEASON else SCOUTING_POINTS
    state.staff_candidates = generate_staff_candidates(rng)

    _advance_clock(state, rng)
    return state


def launch_game(state: GameState, matchup_id: str, rng: random.Random | None = None) -> GameState:
    """State with a live game started for *matchup_id*; unchanged if the id is unknown or already played."""
    state = copy.deepcopy(state)
    matchup = state.find_matchup(matchup_id)
    if matchup is None or matchup.played:
        return state
    state.active_game = start_interactive_game(state, matchup_id, rng)
    return state


def merge_finished_game(
    state: GameState,
    game: ActiveGame | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """
    Fold a finished live game into the season and clear ``active_game``.
    *game* defaults to the state's own active game. Nothing happens unless the game
    is over and its matchup is on the schedule and still unplayed. A live game whose
    matchup is already played or gone can never merge, so it is cleared.
    """
    rng = rng or random.Random()
    state = copy.deepcopy(state)
    game = copy.deepcopy(game) if game is not None else state.active_game
    if game is None or not game.is_game_over:
        return state
    matchup = state.find_matchup(game.matchup_id)
    if matchup is None or matchup.played:
        if state.active_game is not None and state.active_game.matchup_id == game.matchup_id:
            state.active_game = None
        return state

    apply_live_game(state, matchup, game, rng)
    state.active_game = None
    return state
