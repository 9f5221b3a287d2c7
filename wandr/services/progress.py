"""
Progress calculation for a single location node.

Pure functions: given how many of a node's attractions a user has visited,
work out the percentage, the tier it earns and the distance to the next tier.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from wandr.core.constants import TIER_ORDER, BadgeTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressResult:
    visited: int
    total: int
    percent: int
    current_tier: BadgeTier
    next_tier: Optional[BadgeTier]
    progress_to_next_tier: int


def tier_for_percent(percent: int) -> BadgeTier:
    """Highest tier whose threshold is at or below ``percent``."""
    reached = BadgeTier.NONE
    for tier in TIER_ORDER:
        if percent >= tier.threshold:
            reached = tier
    return reached


def next_tier(tier: BadgeTier) -> Optional[BadgeTier]:
    rank = tier.rank
    if rank + 1 < len(TIER_ORDER):
        return TIER_ORDER[rank + 1]
    return None


def compute_progress(visited: int, total: int) -> ProgressResult:
    if visited < 0 or total < 0:
        raise ValueError(
            f"Visit counts cannot be negative (visited={visited}, total={total})"
        )

    if total == 0:
        percent = 0
    elif visited > total:
        # Stale attraction_count; never report more than complete
        logger.warning(
            f"Visited count {visited} exceeds total {total}; clamping progress to 100"
        )
        percent = 100
    else:
        percent = (visited * 100) // total

    current = tier_for_percent(percent)
    upcoming = next_tier(current)
    gap = upcoming.threshold - percent if upcoming is not None else 0

    return ProgressResult(
        visited=visited,
        total=total,
        percent=percent,
        current_tier=current,
        next_tier=upcoming,
        progress_to_next_tier=gap,
    )


def tiers_crossed(previous: BadgeTier, current: BadgeTier) -> List[BadgeTier]:
    """Awardable tiers above ``previous`` up to and including ``current``, lowest first."""
    return [
        tier
        for tier in TIER_ORDER
        if tier.is_awardable and previous.rank < tier.rank <= current.rank
    ]
