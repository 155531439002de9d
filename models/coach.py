"""
Coach profile DTO for FNL Coach.
The human player. The archetype feeds three hooks: recruiting odds (Recruiter),
starting morale (Motivator), and play-call success in live games (Tactician).
"""
from dataclasses import dataclass
from typing import Dict

from .constants import COACH_ARCHETYPES

# Display names and one-line descriptions for the coach archetypes
ARCHETYPE_DESCRIPTIONS: Dict[str, str] = {
    "Recruiter": "Boosts your success rate when closing on prospects.",
    "Motivator": "Players start the career with higher morale.",
    "Tactician": "Called plays have a higher success probability.",
}


@dataclass
class CoachProfile:
    """Represents the human player as head coach."""

    name: str = ""
    appearance: str = ""
    archetype: str = "Tactician"

    def __post_init__(self) -> None:
        if self.archetype not in COACH_ARCHETYPES:
            raise ValueError(f"archetype must be one of {', '.join(COACH_ARCHETYPES)}, got {self.archetype!r}")

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "appearance": self.appearance,
            "archetype": self.archetype,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CoachProfile":
        return cls(
            name=data.get("name", ""),
            appearance=data.get("appearance", ""),
            archetype=data.get("archetype", "Tactician"),
        )
