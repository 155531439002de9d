"""
Procedural generation of players, schools, and staff for FNL Coach.
"""
from .generate import (
    seeded_rng,
    generate_player,
    generate_weekly_recruits,
    generate_school,
    generate_league,
    generate_staff,
    generate_staff_candidates,
)

__all__ = [
    "seeded_rng",
    "generate_player",
    "generate_weekly_recruits",
    "generate_school",
    "generate_league",
    "generate_staff",
    "generate_staff_candidates",
]
