"""
Data model for FNL Coach: plain, serializable DTOs plus the roster rating calculators.
"""
from .coach import CoachProfile, ARCHETYPE_DESCRIPTIONS
from .game import GameMatchup, TeamGameStats, ActiveGame
from .player import Player, PlayerStats, empty_phase_stats
from .ratings import compute_team_rating, compute_offensive_rating, compute_defensive_rating
from .school import School
from .staff import Staff
from .state import GameState, CareerStats, SeasonRecord

__all__ = [
    "CoachProfile",
    "ARCHETYPE_DESCRIPTIONS",
    "GameMatchup",
    "TeamGameStats",
    "ActiveGame",
    "Player",
    "PlayerStats",
    "empty_phase_stats",
    "compute_team_rating",
    "compute_offensive_rating",
    "compute_defensive_rating",
    "School",
    "Staff",
    "GameState",
    "CareerStats",
    "SeasonRecord",
]
