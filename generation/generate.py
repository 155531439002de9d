"""
Generate players, schools, and staff for FNL Coach.
Every generator takes an optional random.Random so a seeded career is reproducible,
including the ids it hands out.

Procedural logic:
- Player ability starts from a grade-driven base level; five ratings scatter around it and
  archetype bonuses/penalties are layered on top. Overall = rounded mean of the five ratings.
- Middle schoolers (grade 8) only ever come through the Middle School pipeline.
- Schools derive their budget from prestige; staff derive prestige from skill and experience.
"""
from __future__ import annotations

import random

from models import Player, School, Staff, empty_phase_stats
from models.constants import (
    POSITIONS,
    OL_POSITIONS,
    DL_POSITIONS,
    HIGH_SCHOOL_GRADES,
    ARCHETYPES_BY_POSITION,
    ARCHETYPE_MODIFIERS,
    RATING_KEYS,
    OVERALL_MIN,
    OVERALL_MAX,
    TRAITS,
    ACADEMICS_MIN,
    ACADEMICS_MAX,
    MIDDLE_SCHOOL,
    WALK_ON,
    WEEKLY_RECRUIT_SOURCES,
    SCOUTING_LEVEL_MAX,
    OTHER_SPORTS,
    OFFSEASON,
    RECRUITS_PER_WEEK_OFFSEASON,
    RECRUITS_PER_WEEK,
    ENROLLMENTS,
    SCHOOL_COLORS,
    SCHOOL_NAMES,
    SECONDARY_COLOR,
    FIRST_NAMES,
    LAST_NAMES,
    OFFENSIVE_COORDINATOR,
    DEFENSIVE_COORDINATOR,
    HIREABLE_ROLES,
    CANDIDATES_PER_ROLE,
    STAFF_TRAITS,
    OFFENSIVE_PHILOSOPHIES,
    DEFENSIVE_PHILOSOPHIES,
    SUPPORT_PHILOSOPHIES,
    ALMA_MATERS,
    DEFAULT_STYLE_VALUE,
)

TRAIT_CHANCE = 0.9  # chance of at least one trait
SECOND_TRAIT_CHANCE = 0.7  # conditional on having the first
OTHER_SPORT_CHANCE = 0.1


def seeded_rng(seed: int | str | None) -> random.Random:
    """Build an RNG from an optional seed (str seeds are hashed deterministically)."""
    if isinstance(seed, str):
        seed = sum((i + 1) * ord(ch) for i, ch in enumerate(seed))
    return random.Random(seed)


def _new_id(rng: random.Random) -> str:
    """Nine-character base-36 id drawn from *rng*."""
    alphabet = "0123456789abcdefghijklmnopqrstuvwxyz"
    return "".join(rng.choice(alphabet) for _ in range(9))


def _random_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def _resolve_position(position: str | None, rng: random.Random) -> str:
    """Concrete position for a request; generic OL/DL pick a sub-position."""
    if not position:
        return rng.choice(POSITIONS)
    if position == "OL":
        return rng.choice(OL_POSITIONS)
    if position == "DL":
        return rng.choice(DL_POSITIONS)
    return position


def _base_level(grade: int, rng: random.Random) -> int:
    """Ability anchor for a grade: 8th graders start far behind, each HS year adds 8."""
    grade_modifier = -15 if grade == 8 else (grade - 9) * 8
    return 40 + grade_modifier + rng.randint(0, 15)


def _roll_traits(rng: random.Random) -> list[str]:
    traits: list[str] = []
    if rng.random() < TRAIT_CHANCE:
        traits.append(rng.choice(TRAITS))
        if rng.random() < SECOND_TRAIT_CHANCE:
            traits.append(rng.choice([t for t in TRAITS if t != traits[0]]))
    return traits


def generate_player(
    grade: int | None = None,
    position: str | None = None,
    source: str | None = None,
    rng: random.Random | None = None,
    *,
    fully_scouted: bool = False,
) -> Player:
    """Generate one player.

    Parameters
    ----------
    grade : int | None
        8-12. Random high-school grade (9-12) when omitted.
    position : str | None
        A concrete position, or "OL"/"DL" for any lineman. Random when omitted.
    source : str | None
        Recruiting pipeline. Defaults to Walk-On; forced to Middle School for grade 8.
    rng : random.Random | None
        RNG to draw from; a fresh unseeded one when omitted.
    fully_scouted : bool
        Start at scouting level 3 (used for the initial roster).
    """
    rng = rng or random.Random()
    g = grade if grade is not None else rng.choice(HIGH_SCHOOL_GRADES)
    pos = _resolve_position(position, rng)
    final_source = MIDDLE_SCHOOL if g == 8 else (source or WALK_ON)

    base = _base_level(g, rng)
    potential = rng.randint(base, 95)
    archetype = rng.choice(ARCHETYPES_BY_POSITION.get(pos, ("Balanced",)))

    ratings = {key: rng.randint(base - 10, base + 10) for key in RATING_KEYS}
    for key, delta in ARCHETYPE_MODIFIERS.get(archetype, {}).items():
        ratings[key] += delta

    overall = round(sum(ratings.values()) / len(ratings))
    overall = max(OVERALL_MIN, min(OVERALL_MAX, overall))
    traits = _roll_traits(rng)

    return Player(
        id=_new_id(rng),
        name=_random_name(rng),
        grade=g,
        position=pos,
        archetype=archetype,
        overall=overall,
        potential=max(potential, overall),
        speed=ratings["speed"],
        strength=ratings["strength"],
        awareness=ratings["awareness"],
        tackling=ratings["tackling"],
        hands=ratings["hands"],
        morale=rng.randint(70, 100),
        academics=round(rng.uniform(ACADEMICS_MIN, ACADEMICS_MAX), 2),
        primary_sport=rng.choice(OTHER_SPORTS) if rng.random() < OTHER_SPORT_CHANCE else "Football",
        football_experience=rng.randint(20, 90),
        traits=traits,
        source=final_source,
        interest_level=rng.randint(10, 80),
        scouting_level=SCOUTING_LEVEL_MAX if fully_scouted else 0,
        stats=empty_phase_stats(),
    )


def _grade_for_source(source: str, rng: random.Random) -> int:
    if source == MIDDLE_SCHOOL:
        return 8
    if source == "Youth League":
        return 9
    if source == "Transfer Portal":
        return rng.choice((10, 11, 12))
    return rng.choice(HIGH_SCHOOL_GRADES)


def generate_weekly_recruits(phase: str, rng: random.Random | None = None) -> list[Player]:
    """Fresh recruiting pool for the week: 8 prospects in the off-season, 5 otherwise.
    Each prospect's grade follows its pipeline (Middle School -> 8, Youth League -> 9,
    Transfer Portal -> 10-12, Other Sport -> any HS grade)."""
    rng = rng or random.Random()
    count = RECRUITS_PER_WEEK_OFFSEASON if phase == OFFSEASON else RECRUITS_PER_WEEK
    pool: list[Player] = []
    for _ in range(count):
        source = rng.choice(WEEKLY_RECRUIT_SOURCES)
        pool.append(generate_player(_grade_for_source(source, rng), None, source, rng))
    return pool


def generate_school(name: str | None = None, rng: random.Random | None = None) -> School:
    """Generate a school; budget scales with prestige."""
    rng = rng or random.Random()
    enrollment = rng.choice(ENROLLMENTS)
    prestige = rng.randint(20, 80)
    return School(
        id=_new_id(rng),
        name=name or rng.choice(SCHOOL_NAMES),
        enrollment=enrollment,
        budget=prestige * 1000 + rng.randint(5000, 20000),
        facilities=rng.randint(20, 80),
        academic_strictness=rng.randint(30, 90),
        community_support=rng.randint(40, 100),
        prestige=prestige,
        primary_color=rng.choice(SCHOOL_COLORS),
        secondary_color=SECONDARY_COLOR,
    )


def generate_league(count: int, rng: random.Random | None = None) -> list[School]:
    """Opponent pool for a career."""
    rng = rng or random.Random()
    return [generate_school(None, rng) for _ in range(count)]


def _philosophies_for_role(role: str) -> tuple[str, ...]:
    if role == OFFENSIVE_COORDINATOR:
        return OFFENSIVE_PHILOSOPHIES
    if role == DEFENSIVE_COORDINATOR:
        return DEFENSIVE_PHILOSOPHIES
    return SUPPORT_PHILOSOPHIES


def generate_staff(role: str, rng: random.Random | None = None) -> Staff:
    """Generate a staff member for *role* with a neutral style dial."""
    rng = rng or random.Random()
    skill = rng.randint(40, 85)
    years = rng.randint(1, 30)
    return Staff(
        id=_new_id(rng),
        name=f"Coach {rng.choice(LAST_NAMES)}",
        role=role,
        skill=skill,
        trait=rng.choice(STAFF_TRAITS),
        philosophy=rng.choice(_philosophies_for_role(role)),
        alma_mater=rng.choice(ALMA_MATERS),
        years_experience=years,
        prestige=round((skill + years) / 2),
        career_wins=rng.randint(years * 3, years * 10),
        career_losses=rng.randint(years * 3, years * 10),
        style_value=DEFAULT_STYLE_VALUE,
    )


def generate_staff_candidates(rng: random.Random | None = None) -> list[Staff]:
    """This week's hiring pool: three candidates for each hireable role."""
    rng = rng or random.Random()
    return [generate_staff(role, rng) for role in HIREABLE_ROLES for _ in range(CANDIDATES_PER_ROLE)]
