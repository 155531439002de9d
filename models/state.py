"""
Career root DTOs for FNL Coach.
GameState is the single live value per career; every engine transition returns a new one.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .constants import PRESEASON, STARTING_YEAR, SCOUTING_POINTS, DEFAULT_STYLE_VALUE
from .coach import CoachProfile
from .game import ActiveGame, GameMatchup
from .player import Player
from .school import School
from .staff import Staff


@dataclass
class CareerStats:
    """Current-season record plus career-long counters."""

    wins: int = 0
    losses: int = 0
    titles: int = 0
    experience: int = 1
    reputation: int = 50

    def to_dict(self) -> Dict[str, Any]:
        return {k: getattr(self, k) for k in self.__dataclass_fields__}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerStats":
        defaults = cls()
        return cls(**{k: data.get(k, getattr(defaults, k)) for k in cls.__dataclass_fields__})


@dataclass
class SeasonRecord:
    """One line of the year-by-year history log."""

    year: int = STARTING_YEAR
    record: str = "0-0"
    achievement: str = ""
    school_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "record": self.record,
            "achievement": self.achievement,
            "school_name": self.school_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonRecord":
        return cls(
            year=data.get("year", STARTING_YEAR),
            record=data.get("record", "0-0"),
            achievement=data.get("achievement", ""),
            school_name=data.get("school_name", ""),
        )


@dataclass
class GameState:
    """The whole career: calendar position, program, people, schedule, and history."""

    year: int = STARTING_YEAR
    week: int = 1
    phase: str = PRESEASON
    user_school: School = field(default_factory=School)
    coach: CoachProfile = field(default_factory=CoachProfile)
    roster: List[Player] = field(default_factory=list)
    staff: List[Staff] = field(default_factory=list)
    staff_candidates: List[Staff] = field(default_factory=list)
    career: CareerStats = field(default_factory=CareerStats)
    league_schools: List[School] = field(default_factory=list)
    schedule: List[GameMatchup] = field(default_factory=list)
    recruitment_pool: List[Player] = field(default_factory=list)
    scouting_points: int = SCOUTING_POINTS
    active_game: Optional[ActiveGame] = None
    history: List[SeasonRecord] = field(default_factory=list)

    # --- Lookups (None when the id is unknown) ---

    def find_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.roster if p.id == player_id), None)

    def find_prospect(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.recruitment_pool if p.id == player_id), None)

    def find_matchup(self, matchup_id: str) -> Optional[GameMatchup]:
        return next((m for m in self.schedule if m.id == matchup_id), None)

    def find_staff(self, staff_id: str) -> Optional[Staff]:
        return next((s for s in self.staff if s.id == staff_id), None)

    def staff_for_role(self, role: str) -> Optional[Staff]:
        return next((s for s in self.staff if s.role == role), None)

    def style_for_role(self, role: str) -> int:
        """Style dial of the staff member in *role*; neutral 50 when the role is vacant."""
        member = self.staff_for_role(role)
        return member.style_value if member is not None else DEFAULT_STYLE_VALUE

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "year": self.year,
            "week": self.week,
            "phase": self.phase,
            "user_school": self.user_school.to_dict(),
            "coach": self.coach.to_dict(),
            "roster": [p.to_dict() for p in self.roster],
            "staff": [s.to_dict() for s in self.staff],
            "staff_candidates": [s.to_dict() for s in self.staff_candidates],
            "career": self.career.to_dict(),
            "league_schools": [s.to_dict() for s in self.league_schools],
            "schedule": [m.to_dict() for m in self.schedule],
            "recruitment_pool": [p.to_dict() for p in self.recruitment_pool],
            "scouting_points": self.scouting_points,
            "history": [h.to_dict() for h in self.history],
        }
        if self.active_game is not None:
            d["active_game"] = self.active_game.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        active = data.get("active_game")
        return cls(
            year=data.get("year", STARTING_YEAR),
            week=data.get("week", 1),
            phase=data.get("phase", PRESEASON),
            user_school=School.from_dict(data["user_school"]),
            coach=CoachProfile.from_dict(data["coach"]),
            roster=[Player.from_dict(p) for p in data.get("roster", [])],
            staff=[Staff.from_dict(s) for s in data.get("staff", [])],
            staff_candidates=[Staff.from_dict(s) for s in data.get("staff_candidates", [])],
            career=CareerStats.from_dict(data.get("career", {})),
            league_schools=[School.from_dict(s) for s in data.get("league_schools", [])],
            schedule=[GameMatchup.from_dict(m) for m in data.get("schedule", [])],
            recruitment_pool=[Player.from_dict(p) for p in data.get("recruitment_pool", [])],
            scouting_points=data.get("scouting_points", SCOUTING_POINTS),
            active_game=ActiveGame.from_dict(active) if active else None,
            history=[SeasonRecord.from_dict(h) for h in data.get("history", [])],
        )
