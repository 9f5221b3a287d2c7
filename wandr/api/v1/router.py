from fastapi import APIRouter

from wandr.api.v1.endpoints import badges, leaderboard, locations, visits

api_router = APIRouter()

api_router.include_router(visits.router, prefix="/visits", tags=["visits"])
api_router.include_router(badges.router, prefix="/badges", tags=["badges"])
api_router.include_router(leaderboard.router, prefix="/leaderboard", tags=["leaderboard"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
