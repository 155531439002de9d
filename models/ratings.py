"""
Team composite ratings derived from a roster snapshot.
Only fielded players count: middle schoolers (grade 8) and players ruled Out are excluded.
"""
from typing import Iterable

from .constants import OFFENSE_POSITIONS, DEFENSE_POSITIONS
from .player import Player


def _fielded(roster: Iterable[Player], positions: tuple[str, ...] | None = None) -> list[Player]:
    return [
        p for p in roster
        if p.grade > 8 and not p.is_out and (positions is None or p.position in positions)
    ]


def _mean_overall(players: list[Player]) -> int:
    """Rounded mean overall; 0 for an empty group."""
    if not players:
        return 0
    return round(sum(p.overall for p in players) / len(players))


def compute_team_rating(roster: Iterable[Player]) -> int:
    """Mean overall of every fielded player. Returns 0-99."""
    return _mean_overall(_fielded(roster))


def compute_offensive_rating(roster: Iterable[Player]) -> int:
    """Mean overall of fielded offensive players (QB, RB, WR, TE, OL)."""
    return _mean_overall(_fielded(roster, OFFENSE_POSITIONS))


def compute_defensive_rating(roster: Iterable[Player]) -> int:
    """Mean overall of fielded defensive players (DE, DT, LB, CB, S)."""
    return _mean_overall(_fielded(roster, DEFENSE_POSITIONS))
