"""
Staff DTO for FNL Coach.
Each staff member carries a style dial (0-100) that the weekly tick reads:
coordinators -> aggressiveness, strength coach -> intensity, academic advisor -> strictness.
"""
from dataclasses import dataclass
from typing import Dict, Any

from .constants import DEFAULT_STYLE_VALUE


@dataclass
class Staff:
    """A member of the coaching staff, or a candidate for a role."""

    id: str = ""
    name: str = ""
    role: str = ""
    skill: int = 50  # 40-85 at generation
    trait: str = ""
    philosophy: str = ""
    alma_mater: str = ""
    years_experience: int = 1
    prestige: int = 25
    career_wins: int = 0
    career_losses: int = 0
    style_value: int = DEFAULT_STYLE_VALUE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "skill": self.skill,
            "trait": self.trait,
            "philosophy": self.philosophy,
            "alma_mater": self.alma_mater,
            "years_experience": self.years_experience,
            "prestige": self.prestige,
            "career_record": {"wins": self.career_wins, "losses": self.career_losses},
            "style_value": self.style_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Staff":
        record = data.get("career_record", {})
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            role=data.get("role", ""),
            skill=data.get("skill", 50),
            trait=data.get("trait", ""),
            philosophy=data.get("philosophy", ""),
            alma_mater=data.get("alma_mater", ""),
            years_experience=data.get("years_experience", 1),
            prestige=data.get("prestige", 25),
            career_wins=record.get("wins", 0),
            career_losses=record.get("losses", 0),
            style_value=data.get("style_value", DEFAULT_STYLE_VALUE),
        )
