from wandr.schemas.attraction import (
    AttractionCreate,
    AttractionResponse,
)
from wandr.schemas.badge import (
    AllBadgeProgress,
    BadgeCollection,
    BadgeInfo,
    BadgeProgress,
    BadgeSummary,
    BadgeTimeline,
    NewBadgeResult,
)
from wandr.schemas.leaderboard import (
    LeaderboardBadgeInfo,
    LeaderboardEntry,
    LeaderboardResponse,
    UserLeaderboardStats,
)
from wandr.schemas.location import (
    CityCreate,
    CityResponse,
    ContinentCreate,
    ContinentResponse,
    CountryCreate,
    CountryResponse,
    LocationAncestors,
    LocationNode,
)
from wandr.schemas.response import (
    APIResponse,
    CreateResponse,
    DeleteResponse,
    ListResponse,
    Messages,
    SuccessResponse,
)
from wandr.schemas.visit import (
    LocationStats,
    LocationStatsAttraction,
    MarkVisitedResponse,
    UserStats,
    VisitAttraction,
    VisitCheck,
    VisitCreate,
    VisitResponse,
)
