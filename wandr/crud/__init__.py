from .attraction import crud_attraction
from .badge import crud_badge, crud_user_badge
from .location import crud_city, crud_continent, crud_country, recount_attractions
from .visit import crud_visit

__all__ = [
    "crud_continent",
    "crud_country",
    "crud_city",
    "crud_attraction",
    "crud_visit",
    "crud_badge",
    "crud_user_badge",
    "recount_attractions",
]
