"""
Constants for FNL Coach: positions, archetypes, traits, season phases, name pools, and policy limits.
"""
from typing import Dict

# Positions (same list for roster and recruits). "OL" / "DL" are accepted as generic requests.
POSITIONS: tuple[str, ...] = (
    "QB", "RB", "WR", "TE", "LT", "LG", "C", "RG", "RT",
    "DE", "DT", "LB", "CB", "S", "K", "P",
)
OL_POSITIONS: tuple[str, ...] = ("LT", "LG", "C", "RG", "RT")
DL_POSITIONS: tuple[str, ...] = ("DE", "DT")

OFFENSE_POSITIONS: tuple[str, ...] = ("QB", "RB", "WR", "TE", "LT", "LG", "C", "RG", "RT")
DEFENSE_POSITIONS: tuple[str, ...] = ("DE", "DT", "LB", "CB", "S")
RECEIVER_POSITIONS: tuple[str, ...] = ("WR", "TE")

GRADES: tuple[int, ...] = (8, 9, 10, 11, 12)
HIGH_SCHOOL_GRADES: tuple[int, ...] = (9, 10, 11, 12)
GRADUATION_GRADE = 12

ARCHETYPES_BY_POSITION: Dict[str, tuple[str, ...]] = {
    "QB": ("Strong Arm", "Scrambler", "Improvisor", "Field General"),
    "RB": ("Power Back", "Elusive Back", "Receiving Back"),
    "WR": ("Deep Threat", "Possession", "Red Zone Threat", "Slot Receiver"),
    "TE": ("Vertical Threat", "Possession", "Blocking"),
    "LT": ("Agile", "Power", "Pass Protector"),
    "LG": ("Agile", "Power", "Pass Protector"),
    "C": ("Agile", "Power", "Pass Protector"),
    "RG": ("Agile", "Power", "Pass Protector"),
    "RT": ("Agile", "Power", "Pass Protector"),
    "DE": ("Run Stopper", "Speed Rusher", "Power Rusher"),
    "DT": ("Run Stopper", "Speed Rusher", "Power Rusher"),
    "LB": ("Field General", "Pass Coverage", "Run Stopper", "Speed Rusher", "Power Rusher"),
    "CB": ("Man-to-Man", "Zone Coverage", "Slot Corner"),
    "S": ("Zone Coverage", "Run Support", "Hybrid"),
    "K": ("Accurate", "Power"),
    "P": ("Accurate", "Power"),
}

# Archetype -> rating adjustments applied after the base roll
ARCHETYPE_MODIFIERS: Dict[str, Dict[str, int]] = {
    "Strong Arm": {"strength": 15, "speed": -5},
    "Scrambler": {"speed": 15, "strength": -5},
    "Deep Threat": {"speed": 12, "hands": 5},
    "Power Back": {"strength": 10, "speed": -5},
    "Elusive Back": {"speed": 10, "awareness": 5},
    "Pass Protector": {"awareness": 10, "hands": 5},
    "Run Stopper": {"tackling": 12, "strength": 5},
    "Speed Rusher": {"speed": 12, "awareness": 5},
    "Zone Coverage": {"awareness": 10, "speed": 5},
    "Man-to-Man": {"speed": 10, "hands": 5},
    "Power": {"strength": 15},
    "Accurate": {"awareness": 15},
}

RATING_KEYS: tuple[str, ...] = ("speed", "strength", "awareness", "tackling", "hands")
OVERALL_MIN = 25
OVERALL_MAX = 99

TRAITS: tuple[str, ...] = (
    "Team Leader",
    "Locker Room Cancer",
    "Academic Risk",
    "Injury-Prone",
    "Raw Talent",
    "Dual Athlete",
    "Clutch",
    "Hard Worker",
    "Quiet Leader",
    "Spotlight Junkie",
    "Big Game Performer",
    "Coachable",
)
INJURY_PRONE_TRAIT = "Injury-Prone"

INJURY_STATUSES: tuple[str, ...] = ("Healthy", "Questionable", "Doubtful", "Out")
HEALTHY = "Healthy"
OUT = "Out"

ACADEMICS_MIN = 1.5
ACADEMICS_MAX = 4.0

RECRUIT_SOURCES: tuple[str, ...] = ("Middle School", "Youth League", "Transfer Portal", "Other Sport", "Walk-On")
MIDDLE_SCHOOL = "Middle School"
WALK_ON = "Walk-On"
# Sources rolled for the weekly pool (walk-ons only come from direct generation)
WEEKLY_RECRUIT_SOURCES: tuple[str, ...] = ("Middle School", "Youth League", "Transfer Portal", "Other Sport")
SCOUTING_LEVEL_MAX = 3

OTHER_SPORTS: tuple[str, ...] = ("Basketball", "Track", "Baseball", "Soccer", "Wrestling", "Lacrosse")

# Season phases, in yearly order, with their length in weeks
OFFSEASON = "OFFSEASON"
PRESEASON = "PRESEASON"
REGULAR_SEASON = "REGULAR_SEASON"
PLAYOFFS = "PLAYOFFS"
SEASON_PHASES: tuple[str, ...] = (OFFSEASON, PRESEASON, REGULAR_SEASON, PLAYOFFS)
PHASE_WEEKS: Dict[str, int] = {
    OFFSEASON: 3,
    PRESEASON: 6,
    REGULAR_SEASON: 9,
    PLAYOFFS: 4,
}
PHASE_LABELS: Dict[str, str] = {
    OFFSEASON: "Off-Season",
    PRESEASON: "Pre-Season",
    REGULAR_SEASON: "Regular Season",
    PLAYOFFS: "Post-Season",
}
# Scrimmages are played in pre-season weeks 5 and 6 (scrimmage week = week - offset)
SCRIMMAGE_WEEK_OFFSET = 4
SCRIMMAGE_WEEKS = 2
REGULAR_SEASON_GAMES = 9
PLAYOFF_ROUNDS = 4
PLAYOFF_WIN_THRESHOLD = 5
CHAMPIONSHIP_WIN_THRESHOLD = 8

# Matchup summary categories
SCRIMMAGE = "SCRIMMAGE"
REGULAR = "REGULAR"
PLAYOFF = "PLAYOFF"

# Recruiting pool and scouting points per week
RECRUITS_PER_WEEK_OFFSEASON = 8
RECRUITS_PER_WEEK = 5
SCOUTING_POINTS_OFFSEASON = 15
SCOUTING_POINTS = 10

# Caller-enforced roster limit
ROSTER_CAP = 53

# Starting roster by position
ROSTER_DISTRIBUTION: Dict[str, int] = {
    "QB": 3, "RB": 4, "WR": 6, "TE": 3,
    "LT": 2, "LG": 2, "C": 2, "RG": 2, "RT": 2,
    "DE": 4, "DT": 4, "LB": 6, "CB": 5, "S": 4,
    "K": 1, "P": 1,
}

# Coach profile
COACH_ARCHETYPES: tuple[str, ...] = ("Recruiter", "Motivator", "Tactician")
RECRUITER_BONUS = 20  # percentage points on recruitment success
MOTIVATOR_MORALE_BONUS = 15
STARTING_YEAR = 2024

# Staff
HEAD_COACH = "Head Coach"
OFFENSIVE_COORDINATOR = "Offensive Coordinator"
DEFENSIVE_COORDINATOR = "Defensive Coordinator"
STRENGTH_COACH = "Strength Coach"
ACADEMIC_ADVISOR = "Academic Advisor"
STAFF_ROLES: tuple[str, ...] = (
    HEAD_COACH, OFFENSIVE_COORDINATOR, DEFENSIVE_COORDINATOR, STRENGTH_COACH, ACADEMIC_ADVISOR,
)
HIREABLE_ROLES: tuple[str, ...] = (
    OFFENSIVE_COORDINATOR, DEFENSIVE_COORDINATOR, STRENGTH_COACH, ACADEMIC_ADVISOR,
)
# Display label of each role's style dial
STYLE_LABELS: Dict[str, str] = {
    OFFENSIVE_COORDINATOR: "Aggressiveness",
    DEFENSIVE_COORDINATOR: "Aggressiveness",
    STRENGTH_COACH: "Intensity",
    ACADEMIC_ADVISOR: "Strictness",
}
STAFF_TRAITS: tuple[str, ...] = ("Tactician", "Recruiter", "Motivator", "Developer")
DEFAULT_STYLE_VALUE = 50
STYLE_MIN = 0
STYLE_MAX = 100
CANDIDATES_PER_ROLE = 3
STAFF_COST_PER_SKILL = 150

OFFENSIVE_PHILOSOPHIES: tuple[str, ...] = (
    "Air Raid", "West Coast", "Ground & Pound", "Triple Option", "Pro-Style", "Spread", "Power-I",
)
DEFENSIVE_PHILOSOPHIES: tuple[str, ...] = (
    "Swarm & Punish", "Bend Don't Break", "No-Fly Zone", "4-3 Stack", "3-4 Multiple", "Tampa 2", "Blitz Heavy",
)
SUPPORT_PHILOSOPHIES: tuple[str, ...] = (
    "Holistic Development", "Grades First", "Power Lifting", "Olympic Training", "Mental Performance",
)
ALMA_MATERS: tuple[str, ...] = (
    "State University", "Tech Institute", "Central College", "Metropolitan State", "Northern University",
    "Southern Poly", "Eastern Academy", "Western University", "A&M State", "Land Grant University",
)

# Schools
ENROLLMENTS: tuple[str, ...] = ("1A", "2A", "3A", "4A", "5A", "6A")
LEAGUE_SIZE = 9
SCHOOL_COLORS: tuple[str, ...] = ("#ef4444", "#3b82f6", "#10b981", "#f59e0b", "#6366f1", "#8b5cf6", "#000000")
USER_PRIMARY_COLOR = "#1e40af"
SECONDARY_COLOR = "#ffffff"
SCHOOL_NAMES: tuple[str, ...] = (
    "Lincoln High", "Westview Academy", "Central Tech", "Oak Ridge", "Riverdale",
    "Summit Prep", "Lakeville North", "Valley View", "Pinecrest", "Meadowbrook",
    "Sterling Heights", "Grand Valley", "Ironwood", "Legacy Christian", "Southside",
)

FIRST_NAMES: tuple[str, ...] = (
    "James", "Robert", "John", "Michael", "David", "William", "Richard", "Joseph", "Thomas", "Christopher",
    "Charles", "Daniel", "Matthew", "Anthony", "Mark", "Donald", "Steven", "Paul", "Andrew", "Joshua",
    "Jackson", "Liam", "Noah", "Aiden", "Lucas", "Caden", "Grayson", "Mason", "Elijah", "Logan",
)
LAST_NAMES: tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson",
)

# Season history achievements
STATE_CHAMPION = "State Champion"
PLAYOFF_APPEARANCE = "Playoff Appearance"
REBUILDING_YEAR = "Rebuilding Year"

# Interactive game
QUARTER_SECONDS = 480
QUARTERS = 4
PLAY_HISTORY_LIMIT = 50
KICKOFF_YARD_LINE = 25
FIRST_DOWN_DISTANCE = 10
TOUCHDOWN_POINTS = 7
PUNT_MAX_YARD_LINE = 70  # punt is offered on 4th down only short of this line, counted from the offense's own goal

PLAY_CONTINUE = "CONTINUE"
PLAY_RUN = "RUN"
PLAY_PASS_SHORT = "PASS_SHORT"
PLAY_PASS_LONG = "PASS_LONG"
PLAY_PUNT = "PUNT"
PLAY_CALLS: tuple[str, ...] = (PLAY_CONTINUE, PLAY_RUN, PLAY_PASS_SHORT, PLAY_PASS_LONG, PLAY_PUNT)
