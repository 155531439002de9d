"""
Game DTOs for FNL Coach.

GameMatchup is one scheduled contest on the season calendar.
TeamGameStats holds one side's running totals during a live game.
ActiveGame is the working record of the interactive play-by-play engine.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List

from .constants import (
    QUARTER_SECONDS,
    KICKOFF_YARD_LINE,
    FIRST_DOWN_DISTANCE,
    SCRIMMAGE,
    REGULAR,
)


@dataclass
class GameMatchup:
    """A scheduled contest between the user's school and a league opponent."""

    id: str = ""
    week: int = 1
    home_team_id: str = ""
    away_team_id: str = ""
    played: bool = False
    home_score: int | None = None
    away_score: int | None = None
    summary: str = REGULAR  # SCRIMMAGE | REGULAR | PLAYOFF
    opponent_rating: int = 0
    opponent_name: str = ""

    @property
    def is_scrimmage(self) -> bool:
        return self.summary == SCRIMMAGE

    def is_home(self, school_id: str) -> bool:
        return self.home_team_id == school_id

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "week": self.week,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "played": self.played,
            "summary": self.summary,
            "opponent_rating": self.opponent_rating,
            "opponent_name": self.opponent_name,
        }
        if self.home_score is not None:
            d["home_score"] = self.home_score
        if self.away_score is not None:
            d["away_score"] = self.away_score
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameMatchup":
        return cls(
            id=data["id"],
            week=data.get("week", 1),
            home_team_id=data.get("home_team_id", ""),
            away_team_id=data.get("away_team_id", ""),
            played=data.get("played", False),
            home_score=data.get("home_score"),
            away_score=data.get("away_score"),
            summary=data.get("summary", REGULAR),
            opponent_rating=data.get("opponent_rating", 0),
            opponent_name=data.get("opponent_name", ""),
        )


@dataclass
class TeamGameStats:
    """Running team totals for one side of a live game."""

    total_yards: int = 0
    pass_yards: int = 0
    rush_yards: int = 0
    first_downs: int = 0
    turnovers: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {k: getattr(self, k) for k in self.__dataclass_fields__}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamGameStats":
        return cls(**{k: data.get(k, 0) for k in cls.__dataclass_fields__})


@dataclass
class ActiveGame:
    """Live state of one matchup being played interactively.

    ``yard_line`` is measured from the home team's goal line: home drives toward
    100, away drives toward 0. ``down`` 0 marks a kickoff / special teams snap.
    """

    matchup_id: str = ""
    opponent_name: str = "Opponent"
    user_side: str = "home"
    home_score: int = 0
    away_score: int = 0
    quarter: int = 1
    time_remaining: int = QUARTER_SECONDS
    possession: str = "home"
    yard_line: int = KICKOFF_YARD_LINE
    down: int = 1
    distance: int = FIRST_DOWN_DISTANCE
    waiting_for_coach: bool = False
    moment_description: str = "Game Start"
    last_play_result: str = "Kickoff incoming!"
    play_history: List[str] = field(default_factory=lambda: ["Game Start"])
    is_game_over: bool = False
    home_stats: TeamGameStats = field(default_factory=TeamGameStats)
    away_stats: TeamGameStats = field(default_factory=TeamGameStats)

    def stats_for(self, side: str) -> TeamGameStats:
        return self.home_stats if side == "home" else self.away_stats

    def score_for(self, side: str) -> int:
        return self.home_score if side == "home" else self.away_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matchup_id": self.matchup_id,
            "opponent_name": self.opponent_name,
            "user_side": self.user_side,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "quarter": self.quarter,
            "time_remaining": self.time_remaining,
            "possession": self.possession,
            "yard_line": self.yard_line,
            "down": self.down,
            "distance": self.distance,
            "waiting_for_coach": self.waiting_for_coach,
            "moment_description": self.moment_description,
            "last_play_result": self.last_play_result,
            "play_history": list(self.play_history),
            "is_game_over": self.is_game_over,
            "game_stats": {
                "home": self.home_stats.to_dict(),
                "away": self.away_stats.to_dict(),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActiveGame":
        game_stats = data.get("game_stats", {})
        return cls(
            matchup_id=data["matchup_id"],
            opponent_name=data.get("opponent_name", "Opponent"),
            user_side=data.get("user_side", "home"),
            home_score=data.get("home_score", 0),
            away_score=data.get("away_score", 0),
            quarter=data.get("quarter", 1),
            time_remaining=data.get("time_remaining", QUARTER_SECONDS),
            possession=data.get("possession", "home"),
            yard_line=data.get("yard_line", KICKOFF_YARD_LINE),
            down=data.get("down", 1),
            distance=data.get("distance", FIRST_DOWN_DISTANCE),
            waiting_for_coach=data.get("waiting_for_coach", False),
            moment_description=data.get("moment_description", ""),
            last_play_result=data.get("last_play_result", ""),
            play_history=list(data.get("play_history", [])),
            is_game_over=data.get("is_game_over", False),
            home_stats=TeamGameStats.from_dict(game_stats.get("home", {})),
            away_stats=TeamGameStats.from_dict(game_stats.get("away", {})),
        )
