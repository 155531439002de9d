"""
School DTO for FNL Coach.
The user's program and every generated league opponent share this shape.
"""
from dataclasses import dataclass
from typing import Dict, Any

from .constants import SECONDARY_COLOR


@dataclass
class School:
    """A high school football program."""

    id: str = ""
    name: str = ""
    enrollment: str = "3A"
    budget: int = 0
    facilities: int = 50  # 0-100
    academic_strictness: int = 50  # 0-100
    community_support: int = 50  # 0-100
    prestige: int = 50  # 20-80 at generation
    primary_color: str = "#3b82f6"
    secondary_color: str = SECONDARY_COLOR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "enrollment": self.enrollment,
            "budget": self.budget,
            "facilities": self.facilities,
            "academic_strictness": self.academic_strictness,
            "community_support": self.community_support,
            "prestige": self.prestige,
            "colors": {"primary": self.primary_color, "secondary": self.secondary_color},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "School":
        colors = data.get("colors", {})
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            enrollment=data.get("enrollment", "3A"),
            budget=data.get("budget", 0),
            facilities=data.get("facilities", 50),
            academic_strictness=data.get("academic_strictness", 50),
            community_support=data.get("community_support", 50),
            prestige=data.get("prestige", 50),
            primary_color=colors.get("primary", "#3b82f6"),
            secondary_color=colors.get("secondary", SECONDARY_COLOR),
        )
