from fastapi import APIRouter, Depends, HTTPException, Request

from models.country import Country
from models.pagination import Paginated
from services import country_service
from services.country_service import Catalog, NotFound, get_catalog
from services.pagination import paginate

router = APIRouter(prefix="/api/countries", tags=["countries"])


@router.get("", response_model=Paginated)
async def list_countries(request: Request, catalog: Catalog = Depends(get_catalog)):
    return paginate(catalog.countries, request.url.path, request.url.query)


@router.get("/{cca3}", response_model=Country)
async def get_country(cca3: str, catalog: Catalog = Depends(get_catalog)):
    try:
        return country_service.get_by_cca3(catalog, cca3)
    except NotFound:
        raise HTTPException(status_code=404, detail="Country not found")
