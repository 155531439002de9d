"""
Season schedule generation for FNL Coach.

A year has two pre-season scrimmages against random league schools, then a
nine-week regular season that rotates deterministically through the league
(week w faces ``league_schools[w % n]``). Home and away alternate by week parity:
the user hosts on even weeks. Playoff brackets are built separately, only
when the regular season clears the win threshold.
"""
from __future__ import annotations

import random

from models import GameMatchup, School
from models.constants import (
    SCRIMMAGE,
    REGULAR,
    PLAYOFF,
    SCRIMMAGE_WEEKS,
    REGULAR_SEASON_GAMES,
    PLAYOFF_ROUNDS,
)


def _matchup(
    matchup_id: str,
    week: int,
    user_school: School,
    opponent: School,
    summary: str,
    opponent_rating: int,
    user_home: bool,
) -> GameMatchup:
    home, away = (user_school, opponent) if user_home else (opponent, user_school)
    return GameMatchup(
        id=matchup_id,
        week=week,
        home_team_id=home.id,
        away_team_id=away.id,
        played=False,
        summary=summary,
        opponent_rating=opponent_rating,
        opponent_name=opponent.name,
    )


def generate_schedule_for_year(
    user_school: School,
    league_schools: list[School],
    rng: random.Random | None = None,
) -> list[GameMatchup]:
    """Build a year's scrimmages and regular-season games.

    Parameters
    ----------
    user_school : School
        The user's program.
    league_schools : list[School]
        Opponent pool; an empty pool yields an empty schedule.
    rng : random.Random | None
        Optional RNG for opponent picks and rating noise.

    Returns
    -------
    list[GameMatchup]
        ``SCRIMMAGE_WEEKS`` scrimmages followed by ``REGULAR_SEASON_GAMES`` regular games,
        all unplayed.
    """
    if not league_schools:
        return []
    rng = rng or random.Random()
    schedule: list[GameMatchup] = []

    for week in range(1, SCRIMMAGE_WEEKS + 1):
        opponent = rng.choice(league_schools)
        rating = round(opponent.prestige + 10 + rng.random() * 10)
        schedule.append(_matchup(
            f"scrimmage-{week}", week, user_school, opponent, SCRIMMAGE, rating, week % 2 == 0,
        ))

    for week in range(1, REGULAR_SEASON_GAMES + 1):
        opponent = league_schools[week % len(league_schools)]
        rating = round(opponent.prestige + 15 + rng.random() * 5)
        schedule.append(_matchup(
            f"reg-{week}", week, user_school, opponent, REGULAR, rating, week % 2 == 0,
        ))

    return schedule


def generate_playoff_bracket(
    user_school: School,
    league_schools: list[School],
    rng: random.Random | None = None,
) -> list[GameMatchup]:
    """Four playoff rounds against random league schools; the user always hosts."""
    if not league_schools:
        return []
    rng = rng or random.Random()
    bracket: list[GameMatchup] = []
    for week in range(1, PLAYOFF_ROUNDS + 1):
        opponent = rng.choice(league_schools)
        rating = round(opponent.prestige + 20 + rng.random() * 10)
        bracket.append(_matchup(
            f"playoff-{week}", week, user_school, opponent, PLAYOFF, rating, True,
        ))
    return bracket
