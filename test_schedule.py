"""
Tests for the season schedule and playoff bracket.

Usage:
    pytest test_schedule.py
"""
import random

from models import School
from models.constants import SCRIMMAGE, REGULAR, PLAYOFF
from simulation import generate_schedule_for_year, generate_playoff_bracket


def _league(n: int = 9) -> list[School]:
    return [School(id=f"s{i}", name=f"School {i}", prestige=20 + i * 5) for i in range(n)]


USER = School(id="u1", name="Dillon Panthers", prestige=50)


def test_schedule_layout():
    schedule = generate_schedule_for_year(USER, _league(), random.Random(1))
    scrimmages = [m for m in schedule if m.summary == SCRIMMAGE]
    regular = [m for m in schedule if m.summary == REGULAR]
    assert [m.week for m in scrimmages] == [1, 2]
    assert [m.week for m in regular] == list(range(1, 10))
    assert len(schedule) == 11
    assert all(not m.played and m.home_score is None for m in schedule)
    assert len({m.id for m in schedule}) == 11


def test_regular_season_rotates_through_league():
    league = _league()
    schedule = generate_schedule_for_year(USER, league, random.Random(2))
    for m in schedule:
        if m.summary != REGULAR:
            continue
        opponent = league[m.week % len(league)]
        assert m.opponent_name == opponent.name
        assert opponent.prestige + 15 <= m.opponent_rating <= opponent.prestige + 20
        user_home = m.week % 2 == 0
        assert m.is_home(USER.id) == user_home
        assert (m.away_team_id if user_home else m.home_team_id) == opponent.id


def test_scrimmage_ratings_and_sides():
    league = _league()
    by_name = {s.name: s for s in league}
    for seed in range(10):
        for m in generate_schedule_for_year(USER, league, random.Random(seed)):
            if m.summary != SCRIMMAGE:
                continue
            prestige = by_name[m.opponent_name].prestige
            assert prestige + 10 <= m.opponent_rating <= prestige + 20
            assert m.is_home(USER.id) == (m.week % 2 == 0)


def test_empty_league_yields_empty_schedule():
    assert generate_schedule_for_year(USER, [], random.Random(1)) == []
    assert generate_playoff_bracket(USER, [], random.Random(1)) == []


def test_playoff_bracket_user_always_hosts():
    league = _league()
    by_name = {s.name: s for s in league}
    bracket = generate_playoff_bracket(USER, league, random.Random(3))
    assert [m.week for m in bracket] == [1, 2, 3, 4]
    for m in bracket:
        assert m.summary == PLAYOFF
        assert m.home_team_id == USER.id
        prestige = by_name[m.opponent_name].prestige
        assert prestige + 20 <= m.opponent_rating <= prestige + 30
