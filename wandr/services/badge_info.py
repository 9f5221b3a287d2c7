from typing import Dict, Iterable, List, Optional, Set, Tuple

from sqlalchemy.orm import Session

from wandr.core.constants import LocationType
from wandr.models.badge import UserBadge
from wandr.models.location import City, Continent, Country
from wandr.schemas.badge import BadgeInfo

ImageKey = Tuple[LocationType, int]


def to_badge_info(
    user_badge: UserBadge, location_image_url: Optional[str] = None
) -> BadgeInfo:
    badge = user_badge.badge
    return BadgeInfo(
        id=user_badge.id,
        tier=badge.tier,
        location_id=badge.location_id,
        location_name=badge.location_name,
        location_type=badge.location_type,
        icon_url=badge.icon_url,
        location_image_url=location_image_url,
        earned_at=user_badge.earned_at,
        attractions_visited=user_badge.attractions_visited,
        total_attractions=user_badge.total_attractions,
        progress_percent=user_badge.progress_percent,
    )


def load_location_images(
    db: Session, user_badges: Iterable[UserBadge]
) -> Dict[ImageKey, Optional[str]]:
    """Image for every location referenced by the badges, one query per level."""
    ids: Dict[LocationType, Set[int]] = {t: set() for t in LocationType}
    for user_badge in user_badges:
        ids[user_badge.badge.location_type].add(user_badge.badge.location_id)

    images: Dict[ImageKey, Optional[str]] = {}
    if ids[LocationType.CITY]:
        for city_id, image_url in db.query(City.id, City.image_url).filter(
            City.id.in_(ids[LocationType.CITY])
        ):
            images[(LocationType.CITY, city_id)] = image_url
    if ids[LocationType.COUNTRY]:
        for country_id, flag_url, image_url in db.query(
            Country.id, Country.flag_url, Country.image_url
        ).filter(Country.id.in_(ids[LocationType.COUNTRY])):
            images[(LocationType.COUNTRY, country_id)] = flag_url or image_url
    if ids[LocationType.CONTINENT]:
        for continent_id, image_url in db.query(
            Continent.id, Continent.image_url
        ).filter(Continent.id.in_(ids[LocationType.CONTINENT])):
            images[(LocationType.CONTINENT, continent_id)] = image_url
    return images


def to_badge_infos(db: Session, user_badges: List[UserBadge]) -> List[BadgeInfo]:
    images = load_location_images(db, user_badges)
    return [
        to_badge_info(
            user_badge,
            images.get((user_badge.badge.location_type, user_badge.badge.location_id)),
        )
        for user_badge in user_badges
    ]
