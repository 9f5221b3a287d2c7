from .attraction import Attraction
from .badge import Badge, UserBadge
from .location import City, Continent, Country
from .visit import Visit

__all__ = [
    "Continent",
    "Country",
    "City",
    "Attraction",
    "Visit",
    "Badge",
    "UserBadge",
]
