import enum
from typing import Dict, List, Tuple


class LocationType(str, enum.Enum):
    CITY = "city"
    COUNTRY = "country"
    CONTINENT = "continent"


class BadgeTier(str, enum.Enum):
    NONE = "none"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @property
    def rank(self) -> int:
        return TIER_ORDER.index(self)

    @property
    def threshold(self) -> int:
        return TIER_THRESHOLDS[self]

    @property
    def is_awardable(self) -> bool:
        return self is not BadgeTier.NONE


class LeaderboardBadge(str, enum.Enum):
    GOLD_CHAMPION = "gold_champion"
    SILVER_EXPLORER = "silver_explorer"
    BRONZE_VOYAGER = "bronze_voyager"
    ELITE_TRAVELER = "elite_traveler"
    RISING_STAR = "rising_star"


# Lowest to highest
TIER_ORDER: List[BadgeTier] = [
    BadgeTier.NONE,
    BadgeTier.BRONZE,
    BadgeTier.SILVER,
    BadgeTier.GOLD,
    BadgeTier.PLATINUM,
]

# Inclusive lower bounds, in percent of a node's attractions
TIER_THRESHOLDS: Dict[BadgeTier, int] = {
    BadgeTier.NONE: 0,
    BadgeTier.BRONZE: 25,
    BadgeTier.SILVER: 50,
    BadgeTier.GOLD: 75,
    BadgeTier.PLATINUM: 100,
}

AWARDABLE_TIERS: List[BadgeTier] = [t for t in TIER_ORDER if t.is_awardable]

# Ancestor order used when checking a new visit: most specific first
LOCATION_LEVELS: List[LocationType] = [
    LocationType.CITY,
    LocationType.COUNTRY,
    LocationType.CONTINENT,
]

# Lowest rank that still holds each leaderboard badge, best badge first
LEADERBOARD_BADGE_CUTOFFS: List[Tuple[int, LeaderboardBadge]] = [
    (1, LeaderboardBadge.GOLD_CHAMPION),
    (2, LeaderboardBadge.SILVER_EXPLORER),
    (3, LeaderboardBadge.BRONZE_VOYAGER),
    (10, LeaderboardBadge.ELITE_TRAVELER),
    (100, LeaderboardBadge.RISING_STAR),
]
