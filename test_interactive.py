"""
Tests for the live play-by-play engine.

Usage:
    pytest test_interactive.py
"""
import random

from conftest import make_state, make_matchup
from models import ActiveGame
from models.constants import PLAY_CONTINUE, PLAY_RUN, PLAY_PASS_SHORT, PLAY_PASS_LONG, PLAY_PUNT
from simulation import (
    start_interactive_game,
    execute_single_play,
    execute_coach_play,
    tactical_edge,
    available_play_calls,
)


class ScriptedRng(random.Random):
    """Random source that replays fixed draws, so a single play can be pinned down."""

    def __init__(self, ints=(), floats=()):
        super().__init__(0)
        self.ints = list(ints)
        self.floats = list(floats)

    def randint(self, a, b):
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self):
        return self.floats.pop(0)


def _game(**kwargs) -> ActiveGame:
    defaults = dict(matchup_id="reg-1", opponent_name="Arnett Mead", user_side="home", possession="home")
    defaults.update(kwargs)
    return ActiveGame(**defaults)


# ===================================================================
# Game start
# ===================================================================

def test_start_game_for_scheduled_matchup():
    state = make_state(schedule=[make_matchup("reg-3", 3, user_home=False)])
    game = start_interactive_game(state, "reg-3", random.Random(1))
    assert game.matchup_id == "reg-3"
    assert game.opponent_name == "Arnett Mead"
    assert game.user_side == "away"
    assert (game.quarter, game.time_remaining) == (1, 480)
    assert (game.yard_line, game.down, game.distance) == (25, 1, 10)
    assert (game.home_score, game.away_score) == (0, 0)
    assert game.possession in ("home", "away")
    assert not game.waiting_for_coach and not game.is_game_over
    assert game.play_history == ["Game Start"]
    assert game.home_stats.total_yards == 0 and game.away_stats.turnovers == 0


def test_start_game_for_unknown_matchup():
    game = start_interactive_game(make_state(), "nope", random.Random(2))
    assert game.opponent_name == "Opponent"
    assert game.user_side == "home"


# ===================================================================
# Autoplay clock
# ===================================================================

def test_clock_expiring_in_fourth_quarter_ends_game():
    game = _game(quarter=4, time_remaining=20, home_score=14, away_score=7)
    over = execute_single_play(game, random.Random(3))
    assert over.is_game_over
    assert over.play_history[0] == "Final Whistle."
    again = execute_single_play(over, random.Random(4))
    assert again.is_game_over
    assert (again.home_score, again.away_score) == (14, 7)
    assert again.play_history == over.play_history


def test_clock_expiring_earlier_is_a_quarter_break():
    game = _game(quarter=2, time_remaining=20)
    nxt = execute_single_play(game, random.Random(5))
    assert (nxt.quarter, nxt.time_remaining) == (3, 480)
    assert nxt.waiting_for_coach
    assert nxt.moment_description == "Quarter Break"
    assert nxt.play_history[0] == "End of Quarter 2"
    assert game.quarter == 2


def test_autoplay_burns_25_to_34_seconds():
    rng = random.Random(6)
    game = _game(time_remaining=480, yard_line=50)
    for _ in range(10):
        nxt = execute_single_play(game, rng)
        assert 25 <= game.time_remaining - nxt.time_remaining <= 34
        game = _game(time_remaining=480, yard_line=50)


# ===================================================================
# Play resolution
# ===================================================================

def test_home_touchdown():
    game = _game(yard_line=95, down=2, distance=6)
    nxt = execute_single_play(game, ScriptedRng(ints=[30, 9], floats=[0.1]))
    assert (nxt.home_score, nxt.away_score) == (7, 0)
    assert nxt.possession == "away"
    assert (nxt.yard_line, nxt.down, nxt.distance) == (25, 1, 10)
    assert nxt.home_stats.pass_yards == 9
    assert nxt.play_history[0] == "Home pass for 9 yds. Touchdown!"


def test_away_touchdown():
    game = _game(possession="away", yard_line=5)
    nxt = execute_single_play(game, ScriptedRng(ints=[30, 6], floats=[0.9]))
    assert (nxt.home_score, nxt.away_score) == (0, 7)
    assert nxt.possession == "home"
    assert nxt.away_stats.rush_yards == 6


def test_first_down():
    game = _game(yard_line=50, down=2, distance=5)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, 7], floats=[0.2]))
    assert (nxt.yard_line, nxt.down, nxt.distance) == (57, 1, 10)
    assert nxt.home_stats.first_downs == 1
    assert (nxt.home_stats.total_yards, nxt.home_stats.pass_yards, nxt.home_stats.rush_yards) == (7, 7, 0)


def test_loss_of_yards_moves_ball_back_without_counting_yardage():
    game = _game(yard_line=50, down=2, distance=5)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, -2], floats=[0.9]))
    assert (nxt.yard_line, nxt.down, nxt.distance) == (48, 3, 7)
    assert nxt.home_stats.total_yards == 0
    assert nxt.play_history[0] == "Home run for -2 yds."


def test_away_offense_moves_toward_zero():
    game = _game(possession="away", yard_line=60, down=1, distance=10)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, 4], floats=[0.9]))
    assert (nxt.yard_line, nxt.down, nxt.distance) == (56, 2, 6)


def test_turnover_on_downs():
    game = _game(user_side="away", yard_line=40, down=4, distance=5)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, 3], floats=[0.9]))
    assert nxt.possession == "away"
    assert (nxt.yard_line, nxt.down, nxt.distance) == (57, 1, 10)
    assert nxt.home_stats.turnovers == 1
    assert nxt.play_history[0].endswith("Turnover on downs.")


def test_user_fourth_down_pauses_for_coach():
    game = _game(yard_line=40, down=3, distance=8)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, 2], floats=[0.9]))
    assert nxt.down == 4
    assert nxt.waiting_for_coach
    assert nxt.moment_description == "Fourth Down"


def test_opponent_fourth_down_does_not_pause():
    game = _game(user_side="away", yard_line=40, down=3, distance=8)
    nxt = execute_single_play(game, ScriptedRng(ints=[25, 2], floats=[0.9]))
    assert nxt.down == 4
    assert not nxt.waiting_for_coach


def test_play_history_is_capped_at_fifty():
    game = _game(yard_line=50, play_history=[f"play {i}" for i in range(50)])
    nxt = execute_single_play(game, random.Random(7))
    assert len(nxt.play_history) == 50
    assert nxt.play_history[0] == nxt.last_play_result
    assert nxt.play_history[1] == "play 0"


# ===================================================================
# Coach calls
# ===================================================================

def test_continue_only_clears_the_pause():
    game = _game(quarter=3, waiting_for_coach=True, moment_description="Quarter Break", yard_line=44)
    nxt = execute_coach_play(game, PLAY_CONTINUE, 60, "Tactician", random.Random(8))
    assert not nxt.waiting_for_coach
    assert (nxt.yard_line, nxt.time_remaining, nxt.play_history) == (44, game.time_remaining, game.play_history)


def test_run_call_gains_and_does_not_burn_clock():
    game = _game(yard_line=30, waiting_for_coach=True, time_remaining=200)
    nxt = execute_coach_play(game, PLAY_RUN, 60, None, ScriptedRng(ints=[5]))
    assert nxt.yard_line == 35
    assert nxt.home_stats.rush_yards == 5
    assert nxt.time_remaining == 200
    assert nxt.play_history[0] == "Coach call: RUN for 5 yds."


def test_short_pass_counts_as_passing():
    nxt = execute_coach_play(_game(yard_line=30), PLAY_PASS_SHORT, 60, None, ScriptedRng(ints=[9]))
    assert nxt.home_stats.pass_yards == 9


def test_long_pass_hits_or_loses_five():
    hit = execute_coach_play(_game(yard_line=30), PLAY_PASS_LONG, 60, "Recruiter", ScriptedRng(floats=[0.5]))
    assert hit.yard_line == 60
    assert hit.home_stats.first_downs == 1
    miss = execute_coach_play(_game(yard_line=30), PLAY_PASS_LONG, 60, "Recruiter", ScriptedRng(floats=[0.75]))
    assert miss.yard_line == 25
    assert (miss.down, miss.distance) == (2, 15)
    assert miss.home_stats.total_yards == 0


def test_tactician_improves_long_pass_odds():
    nxt = execute_coach_play(_game(yard_line=30), PLAY_PASS_LONG, 99, "Tactician", ScriptedRng(floats=[0.75]))
    assert nxt.yard_line == 60


def test_coach_call_can_score():
    nxt = execute_coach_play(_game(yard_line=80), PLAY_PASS_LONG, 60, None, ScriptedRng(floats=[0.1]))
    assert nxt.home_score == 7
    assert nxt.possession == "away"
    assert nxt.yard_line == 25


def test_failed_fourth_down_call_turns_it_over():
    game = _game(yard_line=50, down=4, distance=10, waiting_for_coach=True, moment_description="Fourth Down")
    nxt = execute_coach_play(game, PLAY_RUN, 60, None, ScriptedRng(ints=[3]))
    assert nxt.possession == "away"
    assert nxt.yard_line == 47
    assert nxt.home_stats.turnovers == 1
    assert not nxt.waiting_for_coach


def test_punt_flips_field():
    game = _game(yard_line=30, down=4, distance=7)
    nxt = execute_coach_play(game, PLAY_PUNT, 60, None, ScriptedRng(ints=[40]))
    assert nxt.possession == "away"
    assert (nxt.yard_line, nxt.down, nxt.distance) == (70, 1, 10)


def test_punt_is_kept_in_the_field_of_play():
    game = _game(possession="away", yard_line=20, down=4, distance=7)
    nxt = execute_coach_play(game, PLAY_PUNT, 60, None, ScriptedRng(ints=[45]))
    assert nxt.possession == "home"
    assert nxt.yard_line == 1


def test_coach_call_is_ignored_once_over_or_unknown():
    over = _game(is_game_over=True)
    assert execute_coach_play(over, PLAY_RUN, 60, None, random.Random(9)) == over
    paused = _game(waiting_for_coach=True)
    assert execute_coach_play(paused, "HAIL_MARY", 60, None, random.Random(9)) == paused


def test_tactical_edge():
    assert tactical_edge("Recruiter", 99) == 0
    assert tactical_edge(None, 99) == 0
    assert tactical_edge("Tactician", 0) == 0.05
    assert abs(tactical_edge("Tactician", 99) - 0.10) < 1e-9


def test_available_play_calls():
    assert available_play_calls(_game(is_game_over=True)) == []
    assert available_play_calls(_game(waiting_for_coach=True, moment_description="Quarter Break")) == [PLAY_CONTINUE]
    assert available_play_calls(_game(down=2)) == [PLAY_RUN, PLAY_PASS_SHORT, PLAY_PASS_LONG]
    assert PLAY_PUNT in available_play_calls(_game(down=4, yard_line=50))
    assert PLAY_PUNT not in available_play_calls(_game(down=4, yard_line=75))


def test_punt_offer_follows_the_offense_direction():
    # away drives toward yard 0
    assert PLAY_PUNT not in available_play_calls(_game(possession="away", down=4, yard_line=20))
    assert PLAY_PUNT in available_play_calls(_game(possession="away", down=4, yard_line=80))
    assert PLAY_PUNT in available_play_calls(_game(possession="away", down=4, yard_line=31))
    assert PLAY_PUNT not in available_play_calls(_game(possession="away", down=4, yard_line=30))


# ===================================================================
# Whole game
# ===================================================================

def test_full_game_runs_to_completion():
    rng = random.Random(10)
    game = start_interactive_game(make_state(schedule=[make_matchup("reg-1", 1)]), "reg-1", rng)
    steps = 0
    while not game.is_game_over:
        if game.waiting_for_coach:
            call = available_play_calls(game)[0]
            game = execute_coach_play(game, call, 60, "Tactician", rng)
        else:
            game = execute_single_play(game, rng)
        steps += 1
        assert steps < 1000, "game never ended"
        assert 1 <= game.down <= 4
        assert len(game.play_history) <= 50
    assert game.quarter == 4
    assert game.home_score % 7 == 0 and game.away_score % 7 == 0
    assert game.play_history[0] == "Final Whistle."
