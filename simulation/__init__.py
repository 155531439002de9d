"""
Simulation engine for FNL Coach.
The weekly season state machine, fast-sim and live game resolution, player
development, year rollover, scheduling, and the roster/recruiting/staff commands.
"""
from .schedule import generate_schedule_for_year, generate_playoff_bracket
from .season import (
    create_career,
    current_matchup,
    advance_week,
    launch_game,
    merge_finished_game,
)
from .interactive import (
    start_interactive_game,
    execute_single_play,
    execute_coach_play,
    tactical_edge,
    available_play_calls,
)
from .commands import (
    recruit,
    scout,
    cut_player,
    reorder_roster,
    move_player,
    auto_sort_roster,
    hire_staff,
    set_staff_style,
    staff_hire_cost,
)

__all__ = [
    "generate_schedule_for_year",
    "generate_playoff_bracket",
    "create_career",
    "current_matchup",
    "advance_week",
    "launch_game",
    "merge_finished_game",
    "start_interactive_game",
    "execute_single_play",
    "execute_coach_play",
    "tactical_edge",
    "available_play_calls",
    "recruit",
    "scout",
    "cut_player",
    "reorder_roster",
    "move_player",
    "auto_sort_roster",
    "hire_staff",
    "set_staff_style",
    "staff_hire_cost",
]
