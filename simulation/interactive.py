"""
Play-by-play engine for a single live game.

The caller drives the game one step at a time:

- ``execute_single_play`` is the autoplay tick: burns clock, then runs a random
  run or pass. Quarter breaks and the user's 4th downs pause the game
  (``waiting_for_coach``) until the coach responds.
- ``execute_coach_play`` resolves the coach's call at a pause. It uses the same
  scoring / first-down / turnover-on-downs rules as autoplay but does not burn clock.

Field position is measured from the home goal line: home drives toward 100,
away toward 0. A drive that reaches either end scores a touchdown (7, no PAT).
"""
from __future__ import annotations

import copy
import logging
import random

from models import ActiveGame, GameState
from models.constants import (
    QUARTER_SECONDS,
    QUARTERS,
    PLAY_HISTORY_LIMIT,
    KICKOFF_YARD_LINE,
    FIRST_DOWN_DISTANCE,
    TOUCHDOWN_POINTS,
    PUNT_MAX_YARD_LINE,
    PLAY_CONTINUE,
    PLAY_RUN,
    PLAY_PASS_SHORT,
    PLAY_PASS_LONG,
    PLAY_PUNT,
    PLAY_CALLS,
)

_log = logging.getLogger("fnlcoach.interactive")

QUARTER_BREAK = "Quarter Break"
FOURTH_DOWN = "Fourth Down"
LONG_PASS_CHANCE = 0.70
LONG_PASS_GAIN = 30
LONG_PASS_LOSS = -5
AUTOPLAY_PASS_CHANCE = 0.55


# ===================================================================
# Helper utilities
# ===================================================================

def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def _other_side(side: str) -> str:
    return "away" if side == "home" else "home"


def _push_history(game: ActiveGame, text: str) -> None:
    game.last_play_result = text
    game.play_history = [text] + game.play_history[:PLAY_HISTORY_LIMIT - 1]


def _new_series(game: ActiveGame) -> None:
    game.down = 1
    game.distance = FIRST_DOWN_DISTANCE


def _resolve_play(game: ActiveGame, yards: int, is_pass: bool) -> str:
    """
    Apply a gain/loss for the team in possession and settle the down.
    Returns a short suffix describing what happened ("" for an ordinary play).
    """
    offense = game.possession
    stats = game.stats_for(offense)
    if yards > 0:
        stats.total_yards += yards
        if is_pass:
            stats.pass_yards += yards
        else:
            stats.rush_yards += yards

    game.yard_line += yards if offense == "home" else -yards

    if game.yard_line >= 100 or game.yard_line <= 0:
        if offense == "home":
            game.home_score += TOUCHDOWN_POINTS
        else:
            game.away_score += TOUCHDOWN_POINTS
        game.possession = _other_side(offense)
        game.yard_line = KICKOFF_YARD_LINE
        _new_series(game)
        return " Touchdown!"

    if yards >= game.distance:
        _new_series(game)
        stats.first_downs += 1
        return " First down."

    game.down += 1
    game.distance -= yards
    if game.down > 4:
        stats.turnovers += 1
        game.possession = _other_side(offense)
        game.yard_line = 100 - game.yard_line
        _new_series(game)
        return " Turnover on downs."
    return ""


def _check_fourth_down(game: ActiveGame) -> None:
    if not game.is_game_over and game.possession == game.user_side and game.down == 4:
        game.waiting_for_coach = True
        game.moment_description = FOURTH_DOWN


# ===================================================================
# Public API
# ===================================================================

def start_interactive_game(
    state: GameState,
    matchup_id: str,
    rng: random.Random | None = None,
) -> ActiveGame:
    """Fresh live game for *matchup_id*. An unknown id still starts a game against "Opponent"."""
    rng = rng or random.Random()
    matchup = state.find_matchup(matchup_id)
    if matchup is not None:
        opponent_name = matchup.opponent_name or "Opponent"
        user_side = "home" if matchup.is_home(state.user_school.id) else "away"
    else:
        opponent_name, user_side = "Opponent", "home"

    return ActiveGame(
        matchup_id=matchup_id,
        opponent_name=opponent_name,
        user_side=user_side,
        quarter=1,
        time_remaining=QUARTER_SECONDS,
        possession="home" if rng.random() > 0.5 else "away",
        yard_line=KICKOFF_YARD_LINE,
        down=1,
        distance=FIRST_DOWN_DISTANCE,
        waiting_for_coach=False,
        moment_description="Game Start",
        last_play_result="Kickoff incoming!",
        play_history=["Game Start"],
    )


def execute_single_play(game: ActiveGame, rng: random.Random | None = None) -> ActiveGame:
    """One autoplay tick. Returns a new ActiveGame; a finished game comes back unchanged."""
    game = copy.deepcopy(game)
    if game.is_game_over:
        return game
    rng = rng or random.Random()

    game.time_remaining -= rng.randint(25, 34)
    if game.time_remaining <= 0:
        if game.quarter < QUARTERS:
            game.quarter += 1
            game.time_remaining = QUARTER_SECONDS
            game.waiting_for_coach = True
            game.moment_description = QUARTER_BREAK
            _push_history(game, f"End of Quarter {game.quarter - 1}")
        else:
            game.time_remaining = 0
            game.is_game_over = True
            game.waiting_for_coach = False
            _push_history(game, "Final Whistle.")
            _log.info("Final: %s %d - %d", game.opponent_name, game.home_score, game.away_score)
        return game

    yards = rng.randint(-2, 9)
    is_pass = rng.random() < AUTOPLAY_PASS_CHANCE
    team = "Home" if game.possession == "home" else "Away"
    outcome = _resolve_play(game, yards, is_pass)
    _push_history(game, f"{team} {'pass' if is_pass else 'run'} for {yards} yds.{outcome}")
    _check_fourth_down(game)
    return game


def tactical_edge(coach_archetype: str | None, team_rating: int) -> float:
    """Extra long-pass success chance a Tactician earns: 0.05 plus up to 0.05 more with team rating."""
    if coach_archetype != "Tactician":
        return 0.0
    return 0.05 + 0.05 * _clamp(team_rating, 0, 99) / 99


def execute_coach_play(
    game: ActiveGame,
    play_type: str,
    team_rating: int,
    coach_archetype: str | None = None,
    rng: random.Random | None = None,
) -> ActiveGame:
    """
    Resolve the coach's call at a decision point.

    Parameters
    ----------
    play_type : str
        One of CONTINUE, RUN, PASS_SHORT, PASS_LONG, PUNT. Anything else is ignored.
    team_rating : int
        User team rating, feeds the Tactician edge on long passes.
    coach_archetype : str | None
        The coach's archetype.
    """
    game = copy.deepcopy(game)
    if game.is_game_over or play_type not in PLAY_CALLS:
        return game
    rng = rng or random.Random()
    game.waiting_for_coach = False
    if play_type == PLAY_CONTINUE:
        return game

    if play_type == PLAY_PUNT:
        kick = rng.randint(30, 45)
        punter = game.possession
        game.yard_line = _clamp(game.yard_line + (kick if punter == "home" else -kick), 1, 99)
        game.possession = _other_side(punter)
        _new_series(game)
        _push_history(game, f"Coach call: PUNT for {kick} yds.")
        return game

    if play_type == PLAY_PASS_LONG:
        chance = LONG_PASS_CHANCE + tactical_edge(coach_archetype, team_rating)
        yards = LONG_PASS_GAIN if rng.random() < chance else LONG_PASS_LOSS
    else:
        yards = rng.randint(2, 9)
    is_pass = play_type in (PLAY_PASS_SHORT, PLAY_PASS_LONG)

    outcome = _resolve_play(game, yards, is_pass)
    _push_history(game, f"Coach call: {play_type.replace('_', ' ')} for {yards} yds.{outcome}")
    _check_fourth_down(game)
    return game


def available_play_calls(game: ActiveGame) -> list[str]:
    """Calls the coach can make right now."""
    if game.is_game_over:
        return []
    if game.waiting_for_coach and game.moment_description == QUARTER_BREAK:
        return [PLAY_CONTINUE]
    calls = [PLAY_RUN, PLAY_PASS_SHORT, PLAY_PASS_LONG]
    # yard_line is measured from the home goal; mirror it for an away offense
    field_position = game.yard_line if game.possession == "home" else 100 - game.yard_line
    if game.down == 4 and field_position < PUNT_MAX_YARD_LINE:
        calls.append(PLAY_PUNT)
    return calls
