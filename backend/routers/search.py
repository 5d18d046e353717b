from fastapi import APIRouter, Depends, HTTPException

from models.country import Country
from services.country_service import Catalog, get_catalog, search
from services.matchers import InvalidPattern

router = APIRouter(prefix="/api", tags=["search"])


def _search_pattern(catalog: Catalog, field: str, pattern: str) -> list[Country]:
    try:
        return search(catalog, field, pattern)
    except InvalidPattern as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/name/{name}", response_model=list[Country])
async def by_name(name: str, catalog: Catalog = Depends(get_catalog)):
    return _search_pattern(catalog, "name", name)


@router.get("/capital/{capital}", response_model=list[Country])
async def by_capital(capital: str, catalog: Catalog = Depends(get_catalog)):
    return _search_pattern(catalog, "capital", capital)


@router.get("/language/{language}", response_model=list[Country])
async def by_language(language: str, catalog: Catalog = Depends(get_catalog)):
    return search(catalog, "language", language)


@router.get("/currency/{currency}", response_model=list[Country])
async def by_currency(currency: str, catalog: Catalog = Depends(get_catalog)):
    return _search_pattern(catalog, "currency", currency)


@router.get("/callingcode/{calling_code}", response_model=list[Country])
async def by_calling_code(calling_code: str, catalog: Catalog = Depends(get_catalog)):
    return search(catalog, "callingcode", calling_code)
