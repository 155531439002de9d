"""
Shared fixtures for the FNL Coach test modules.
"""
import random

import pytest

from models import CoachProfile, GameMatchup, GameState, Player, School, Staff
from models.constants import (
    OFFENSIVE_COORDINATOR,
    DEFENSIVE_COORDINATOR,
    STRENGTH_COACH,
    ACADEMIC_ADVISOR,
    REGULAR,
)
from simulation import create_career


def make_player(player_id: str, position: str = "QB", grade: int = 10, overall: int = 60, **kwargs) -> Player:
    kwargs.setdefault("potential", overall)
    return Player(id=player_id, name=f"Player {player_id}", position=position, grade=grade, overall=overall, **kwargs)


def make_staff(role: str, style: int = 50, staff_id: str | None = None) -> Staff:
    return Staff(id=staff_id or role.lower().replace(" ", "-"), name=f"Coach {role}", role=role, skill=60,
                 style_value=style)


def make_state(**kwargs) -> GameState:
    """Small hand-built career: user school 'u1', two league schools, default staff at style 50."""
    user = School(id="u1", name="Dillon Panthers", prestige=50, budget=60000)
    league = [
        School(id="s1", name="Arnett Mead", prestige=40),
        School(id="s2", name="East Dillon", prestige=60),
    ]
    defaults = dict(
        user_school=user,
        coach=CoachProfile(name="Eric Taylor", appearance="classic", archetype="Tactician"),
        roster=[],
        staff=[make_staff(r) for r in (OFFENSIVE_COORDINATOR, DEFENSIVE_COORDINATOR, STRENGTH_COACH, ACADEMIC_ADVISOR)],
        league_schools=league,
        schedule=[],
    )
    defaults.update(kwargs)
    return GameState(**defaults)


def make_matchup(matchup_id: str, week: int, summary: str = REGULAR, user_home: bool = True,
                 opponent_rating: int = 50) -> GameMatchup:
    home, away = ("u1", "s1") if user_home else ("s1", "u1")
    return GameMatchup(id=matchup_id, week=week, home_team_id=home, away_team_id=away, summary=summary,
                       opponent_rating=opponent_rating, opponent_name="Arnett Mead")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def career() -> GameState:
    coach = CoachProfile(name="Eric Taylor", appearance="classic", archetype="Tactician")
    return create_career(coach, "Dillon Panthers", random.Random(2024))
