from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

# Generic type for data payload
T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response schema with message support"""

    success: bool = True
    message: str
    data: Optional[T] = None
    errors: Optional[List[str]] = None
    meta: Optional[Dict[str, Any]] = None


class SuccessResponse(APIResponse[T]):
    """Success response with data"""

    success: bool = True
    message: str = "Operation completed successfully"
    data: Optional[T] = None
    meta: Optional[Dict[str, Any]] = None


class CreateResponse(APIResponse[T]):
    """Response for create operations"""

    success: bool = True
    message: str = "Created successfully"
    data: Optional[T] = None


class DeleteResponse(APIResponse[None]):
    """Response for delete operations"""

    success: bool = True
    message: str = "Deleted successfully"
    data: None = None


class ListResponse(APIResponse[List[T]]):
    """Response for list operations"""

    success: bool = True
    message: str = "Data retrieved successfully"
    data: Optional[List[T]] = None
    meta: Optional[Dict[str, Any]] = None


class Messages:
    # Visit messages
    VISIT_RECORDED = "Visit recorded successfully"
    VISIT_ALREADY_RECORDED = "Attraction is already marked as visited"
    VISIT_REMOVED = "Visit removed successfully"
    VISITS_RETRIEVED = "Visits retrieved successfully"
    VISIT_STATS_RETRIEVED = "Visit statistics retrieved successfully"

    # Badge messages
    BADGES_RETRIEVED = "Badges retrieved successfully"
    BADGE_PROGRESS_RETRIEVED = "Badge progress retrieved successfully"
    BADGE_SUMMARY_RETRIEVED = "Badge summary retrieved successfully"
    BADGE_TIMELINE_RETRIEVED = "Badge timeline retrieved successfully"

    # Leaderboard messages
    LEADERBOARD_RETRIEVED = "Leaderboard retrieved successfully"
    LEADERBOARD_STATS_RETRIEVED = "Leaderboard statistics retrieved successfully"

    # Location messages
    LOCATIONS_RETRIEVED = "Locations retrieved successfully"
    ATTRACTIONS_RETRIEVED = "Attractions retrieved successfully"

    # General messages
    DATA_RETRIEVED = "Data retrieved successfully"
    INVALID_REQUEST = "Invalid request data"
    NOT_FOUND = "Resource not found"
