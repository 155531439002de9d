"""
Game resolution for FNL Coach.

Two ways a matchup gets a final score:

1. **Fast sim**: the weekly tick rolls both scores from the user's team rating,
   the opponent's rating, and a variance dial driven by the two coordinators'
   aggressiveness. Each side scores ``14 + U(0, 20 * (1 + variance))`` shifted by
   half the rating gap (toward the user when the user is stronger).
2. **Live game**: the interactive engine plays the game out and the finished
   ActiveGame is folded back in.

Either way the result is recorded against the career record (scrimmages do not
count) and every fielded player's phase stat line gets role-based deltas.
Functions here work on a state the caller already copied; they mutate it in place.
"""
from __future__ import annotations

import logging
import random

from models import GameState, GameMatchup, ActiveGame, Player, TeamGameStats, compute_team_rating
from models.constants import (
    OFFENSIVE_COORDINATOR,
    DEFENSIVE_COORDINATOR,
    DEFENSE_POSITIONS,
    RECEIVER_POSITIONS,
)
from models.player import PlayerStats

_log = logging.getLogger("fnlcoach.engine")

BASE_SCORE = 14
SCORE_SPREAD = 20


# ===================================================================
# Helper utilities
# ===================================================================


def _phase_line(player: Player, phase: str) -> PlayerStats:
    return player.stats.setdefault(phase, PlayerStats())


def score_variance(state: GameState) -> float:
    """Sum of both coordinators' style dials over 100 (1.0 with neutral or vacant coordinators)."""
    oc = state.style_for_role(OFFENSIVE_COORDINATOR)
    dc = state.style_for_role(DEFENSIVE_COORDINATOR)
    return (oc + dc) / 100


def user_side(matchup: GameMatchup, user_school_id: str) -> str:
    return "home" if matchup.is_home(user_school_id) else "away"


# ===================================================================
# Result bookkeeping
# ===================================================================

def record_result(state: GameState, matchup: GameMatchup) -> bool:
    """Update career wins/losses from a played matchup. Returns True on a user win.
    Ties go down as losses; scrimmages leave the record alone."""
    if matchup.home_score is None or matchup.away_score is None:
        return False
    if matchup.is_home(state.user_school.id):
        user_score, opp_score = matchup.home_score, matchup.away_score
    else:
        user_score, opp_score = matchup.away_score, matchup.home_score
    win = user_score > opp_score
    if not matchup.is_scrimmage:
        if win:
            state.career.wins += 1
        else:
            state.career.losses += 1
    return win


# ===================================================================
# Stat distribution
# ===================================================================

def distribute_fast_sim_stats(
    roster: list[Player],
    phase: str,
    user_score: int,
    rng: random.Random,
) -> None:
    """Hand out synthetic stat deltas scaled by the user's score. Out players are skipped."""
    for player in roster:
        if player.is_out:
            continue
        line = _phase_line(player, phase)
        line.games_played += 1

        if player.position == "QB":
            line.passing_yards += round(user_score * (5 + rng.random() * 5))
            line.passing_tds += user_score // 10
        elif player.position == "RB":
            line.rushing_yards += round(user_score * (2 + rng.random() * 3))
            if rng.random() > 0.6:
                line.rushing_tds += 1
        elif player.position in RECEIVER_POSITIONS:
            line.receiving_yards += round(user_score * (3 + rng.random() * 4))
            if rng.random() > 0.7:
                line.receiving_tds += 1
        elif player.position in DEFENSE_POSITIONS:
            line.tackles += rng.randint(0, 7)
            if rng.random() > 0.9:
                line.sacks += 1
            if rng.random() > 0.95:
                line.interceptions_caught += 1


def distribute_live_game_stats(
    roster: list[Player],
    phase: str,
    team_stats: TeamGameStats,
    user_score: int,
    rng: random.Random,
) -> None:
    """Hand out stat deltas from a finished live game's actual team yardage.
    Ball carriers and receivers take a share proportional to their overall."""
    for player in roster:
        if player.is_out:
            continue
        line = _phase_line(player, phase)
        line.games_played += 1

        if player.position == "QB":
            line.passing_yards += team_stats.pass_yards
            line.passing_tds += user_score // 10
        elif player.position == "RB":
            line.rushing_yards += round(team_stats.rush_yards * (player.overall / 300))
            if rng.random() > 0.7:
                line.rushing_tds += 1
        elif player.position in RECEIVER_POSITIONS:
            line.receiving_yards += round(team_stats.pass_yards * (player.overall / 400))
            line.receptions += rng.randint(0, 3)
            if rng.random() > 0.8:
                line.receiving_tds += 1
        elif player.position in DEFENSE_POSITIONS:
            line.tackles += rng.randint(2, 7)
            if rng.random() > 0.92:
                line.sacks += 1
            if rng.random() > 0.96:
                line.interceptions_caught += 1


# ===================================================================
# Public API
# ===================================================================

def roll_scores(
    user_rating: int,
    opponent_rating: int,
    variance: float,
    rng: random.Random,
) -> tuple[int, int]:
    """Return (user_score, opponent_score) for a fast-simmed game, each floored at 0."""
    edge = (user_rating - opponent_rating) / 2
    spread = SCORE_SPREAD * (1 + variance)
    user_score = round(BASE_SCORE + rng.random() * spread + edge)
    opp_score = round(BASE_SCORE + rng.random() * spread - edge)
    return max(0, user_score), max(0, opp_score)


def simulate_matchup(state: GameState, matchup: GameMatchup, rng: random.Random) -> None:
    """Fast-sim *matchup* into *state*: scores, played flag, career record, player stats.

    Ratings are read from the roster before any stats are applied.
    """
    user_rating = compute_team_rating(state.roster)
    variance = score_variance(state)
    user_score, opp_score = roll_scores(user_rating, matchup.opponent_rating, variance, rng)

    if matchup.is_home(state.user_school.id):
        matchup.home_score, matchup.away_score = user_score, opp_score
    else:
        matchup.home_score, matchup.away_score = opp_score, user_score
    matchup.played = True

    distribute_fast_sim_stats(state.roster, state.phase, user_score, rng)
    win = record_result(state, matchup)
    _log.debug(
        "Fast sim %s vs %s: %d-%d (%s, rating %d vs %d, variance %.2f)",
        matchup.id, matchup.opponent_name, user_score, opp_score,
        "W" if win else "L", user_rating, matchup.opponent_rating, variance,
    )


def apply_live_game(
    state: GameState,
    matchup: GameMatchup,
    game: ActiveGame,
    rng: random.Random,
) -> None:
    """Fold a finished live game into *state*."""
    matchup.home_score = game.home_score
    matchup.away_score = game.away_score
    matchup.played = True

    side = user_side(matchup, state.user_school.id)
    distribute_live_game_stats(state.roster, state.phase, game.stats_for(side), game.score_for(side), rng)
    win = record_result(state, matchup)
    _log.info(
        "Live game %s vs %s final %d-%d (%s)",
        matchup.id, matchup.opponent_name, game.home_score, game.away_score, "W" if win else "L",
    )
