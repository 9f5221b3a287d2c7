from typing import Any

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from wandr.core.auth import get_current_user_id
from wandr.core.config import settings
from wandr.core.constants import LocationType
from wandr.core.database import get_db
from wandr.schemas.response import (
    CreateResponse,
    DeleteResponse,
    ListResponse,
    Messages,
    SuccessResponse,
)
from wandr.schemas.visit import (
    LocationStats,
    MarkVisitedResponse,
    UserStats,
    VisitCheck,
    VisitCreate,
    VisitResponse,
)
from wandr.services.visit_service import VisitService

router = APIRouter()


@router.post(
    "/",
    response_model=CreateResponse[MarkVisitedResponse],
    status_code=status.HTTP_201_CREATED,
)
def mark_visited(
    *,
    db: Session = Depends(get_db),
    visit_in: VisitCreate,
    response: Response,
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Mark an attraction as visited.
    Returns the visit and any badges it earned. Marking the same attraction
    again answers 200 with the existing visit and no badges.
    """
    result = VisitService(db).record_visit(user_id, visit_in)
    if result.already_visited:
        response.status_code = status.HTTP_200_OK
        return CreateResponse(message=Messages.VISIT_ALREADY_RECORDED, data=result)
    return CreateResponse(message=Messages.VISIT_RECORDED, data=result)


@router.get("/", response_model=ListResponse[VisitResponse])
def read_visits(
    db: Session = Depends(get_db),
    page: int = Query(default=1, ge=1),
    limit: int = Query(
        default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE
    ),
    sort_by: str = Query(default="recent", pattern="^(recent|name)$"),
    sort_order: str = Query(default="desc", pattern="^(asc|desc)$"),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Retrieve the current user's visits.
    """
    visits, total = VisitService(db).list_visits(
        user_id, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
    )
    return ListResponse(
        message=Messages.VISITS_RETRIEVED,
        data=visits,
        meta={
            "total": total,
            "page": page,
            "limit": limit,
            "total_pages": (total + limit - 1) // limit,
        },
    )


@router.get("/check/{attraction_id}", response_model=SuccessResponse[VisitCheck])
def check_visited(
    attraction_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Check whether the current user has visited an attraction.
    """
    visited = VisitService(db).is_visited(user_id, attraction_id)
    return SuccessResponse(
        message=Messages.DATA_RETRIEVED, data=VisitCheck(is_visited=visited)
    )


@router.get("/stats", response_model=SuccessResponse[UserStats])
def read_visit_stats(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Visit totals and the cities, countries and continents visited.
    """
    return SuccessResponse(
        message=Messages.VISIT_STATS_RETRIEVED,
        data=VisitService(db).get_user_stats(user_id),
    )


@router.get(
    "/stats/{location_type}/{name}", response_model=SuccessResponse[LocationStats]
)
def read_location_stats(
    location_type: LocationType,
    name: str,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Progress within a city, country or continent looked up by name.
    """
    return SuccessResponse(
        message=Messages.VISIT_STATS_RETRIEVED,
        data=VisitService(db).get_location_stats(user_id, location_type, name),
    )


@router.delete("/{attraction_id}", response_model=DeleteResponse)
def unmark_visited(
    attraction_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Remove a visit. Badges already earned are kept.
    """
    VisitService(db).remove_visit(user_id, attraction_id)
    return DeleteResponse(message=Messages.VISIT_REMOVED)
