from fastapi import HTTPException, status


class AttractionNotFound(HTTPException):
    def __init__(self, attraction_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attraction with id {attraction_id} not found",
        )


class LocationNotFound(HTTPException):
    def __init__(self, location_type: str, location_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{location_type.capitalize()} with id {location_id} not found",
        )


class VisitNotFound(HTTPException):
    def __init__(self, attraction_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No visit recorded for attraction {attraction_id}",
        )


class InvalidCredentials(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
