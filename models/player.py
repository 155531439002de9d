"""
Player DTO for FNL Coach.
Covers roster members and recruiting prospects. Overall is derived from the five ratings;
per-phase stat lines live in `stats` and are cleared at year rollover.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List

from .constants import SEASON_PHASES, HEALTHY, OUT, WALK_ON, RATING_KEYS


@dataclass
class PlayerStats:
    """Accumulated stat line for one season phase."""

    passing_yards: int = 0
    passing_tds: int = 0
    interceptions_thrown: int = 0
    rushing_yards: int = 0
    rushing_tds: int = 0
    receptions: int = 0
    receiving_yards: int = 0
    receiving_tds: int = 0
    tackles: int = 0
    sacks: int = 0
    interceptions_caught: int = 0
    games_played: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {k: getattr(self, k) for k in self.__dataclass_fields__}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        return cls(**{k: data.get(k, 0) for k in cls.__dataclass_fields__})


def empty_phase_stats() -> Dict[str, PlayerStats]:
    """Zeroed stat lines for all four phases."""
    return {phase: PlayerStats() for phase in SEASON_PHASES}


@dataclass
class Player:
    """A roster member or recruiting prospect."""

    id: str = ""
    name: str = ""
    grade: int = 9  # 8 (middle school) through 12
    position: str = ""
    archetype: str = ""
    overall: int = 25  # 25-99
    potential: int = 25  # ceiling
    # Ratings (roughly 25-99)
    speed: int = 50
    strength: int = 50
    awareness: int = 50
    tackling: int = 50
    hands: int = 50
    # Condition
    morale: float = 80
    academics: float = 3.0  # GPA
    injury_status: str = HEALTHY
    injury_weeks: int = 0
    # Background
    primary_sport: str = "Football"
    football_experience: int = 50
    traits: List[str] = field(default_factory=list)
    # Recruiting
    source: str = WALK_ON
    interest_level: int = 50
    scouting_level: int = 0  # 0-3
    stats: Dict[str, PlayerStats] = field(default_factory=empty_phase_stats)
    last_ovr_change: int = 0

    @property
    def ratings(self) -> Dict[str, int]:
        return {k: getattr(self, k) for k in RATING_KEYS}

    @property
    def is_out(self) -> bool:
        return self.injury_status == OUT

    def has_trait(self, trait: str) -> bool:
        return trait in self.traits

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "grade": self.grade,
            "position": self.position,
            "archetype": self.archetype,
            "overall": self.overall,
            "potential": self.potential,
            "ratings": self.ratings,
            "morale": self.morale,
            "academics": self.academics,
            "injury_status": self.injury_status,
            "injury_weeks": self.injury_weeks,
            "primary_sport": self.primary_sport,
            "football_experience": self.football_experience,
            "traits": list(self.traits),
            "source": self.source,
            "interest_level": self.interest_level,
            "scouting_level": self.scouting_level,
            "stats": {phase: s.to_dict() for phase, s in self.stats.items()},
            "last_ovr_change": self.last_ovr_change,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        ratings = data.get("ratings", {})
        stats_data = data.get("stats") or {}
        stats = empty_phase_stats()
        for phase, line in stats_data.items():
            stats[phase] = PlayerStats.from_dict(line)
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            grade=data.get("grade", 9),
            position=data.get("position", ""),
            archetype=data.get("archetype", ""),
            overall=data.get("overall", 25),
            potential=data.get("potential", 25),
            speed=ratings.get("speed", 50),
            strength=ratings.get("strength", 50),
            awareness=ratings.get("awareness", 50),
            tackling=ratings.get("tackling", 50),
            hands=ratings.get("hands", 50),
            morale=data.get("morale", 80),
            academics=data.get("academics", 3.0),
            injury_status=data.get("injury_status", HEALTHY),
            injury_weeks=data.get("injury_weeks", 0),
            primary_sport=data.get("primary_sport", "Football"),
            football_experience=data.get("football_experience", 50),
            traits=list(data.get("traits", [])),
            source=data.get("source", WALK_ON),
            interest_level=data.get("interest_level", 50),
            scouting_level=data.get("scouting_level", 0),
            stats=stats,
            last_ovr_change=data.get("last_ovr_change", 0),
        )
