import time

from fastapi import APIRouter, Depends

from services.country_service import Catalog, get_catalog

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(catalog: Catalog = Depends(get_catalog)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "countries": len(catalog),
    }
