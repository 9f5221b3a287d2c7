from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wandr.core.constants import LocationType
from wandr.core.database import get_db
from wandr.core.exceptions import LocationNotFound
from wandr.crud.attraction import crud_attraction
from wandr.crud.location import crud_city, crud_continent, crud_country
from wandr.schemas.attraction import AttractionResponse
from wandr.schemas.location import CityResponse, ContinentResponse, CountryResponse
from wandr.schemas.response import ListResponse, Messages

router = APIRouter()


@router.get("/continents", response_model=ListResponse[ContinentResponse])
def read_continents(db: Session = Depends(get_db)) -> Any:
    continents = crud_continent.get_all(db)
    return ListResponse(
        message=Messages.LOCATIONS_RETRIEVED,
        data=[ContinentResponse.model_validate(c) for c in continents],
        meta={"total": len(continents)},
    )


@router.get(
    "/continents/{continent_id}/countries",
    response_model=ListResponse[CountryResponse],
)
def read_countries(continent_id: int, db: Session = Depends(get_db)) -> Any:
    if crud_continent.get(db, id=continent_id) is None:
        raise LocationNotFound(LocationType.CONTINENT.value, continent_id)
    countries = crud_country.get_by_continent(db, continent_id=continent_id)
    return ListResponse(
        message=Messages.LOCATIONS_RETRIEVED,
        data=[CountryResponse.model_validate(c) for c in countries],
        meta={"total": len(countries)},
    )


@router.get("/countries/{country_id}/cities", response_model=ListResponse[CityResponse])
def read_cities(country_id: int, db: Session = Depends(get_db)) -> Any:
    if crud_country.get(db, id=country_id) is None:
        raise LocationNotFound(LocationType.COUNTRY.value, country_id)
    cities = crud_city.get_by_country(db, country_id=country_id)
    return ListResponse(
        message=Messages.LOCATIONS_RETRIEVED,
        data=[CityResponse.model_validate(c) for c in cities],
        meta={"total": len(cities)},
    )


@router.get(
    "/cities/{city_id}/attractions",
    response_model=ListResponse[AttractionResponse],
)
def read_attractions(
    city_id: int,
    db: Session = Depends(get_db),
    skip: int = 0,
    limit: int = Query(default=10000, le=10000),
) -> Any:
    city = crud_city.get(db, id=city_id)
    if city is None:
        raise LocationNotFound(LocationType.CITY.value, city_id)
    attractions = crud_attraction.get_by_city(db, city_id=city_id, skip=skip, limit=limit)
    return ListResponse(
        message=Messages.ATTRACTIONS_RETRIEVED,
        data=[AttractionResponse.model_validate(a) for a in attractions],
        meta={"total": city.attraction_count, "skip": skip, "limit": limit},
    )
