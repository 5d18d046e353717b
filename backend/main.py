import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from config import settings
from routers import countries, health, search
from services.country_service import get_catalog

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="World Countries API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(search.router)


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    return HTMLResponse(settings.index_path.read_text(encoding="utf-8"))


@app.on_event("startup")
async def startup():
    # Build the catalog before the first request is accepted.
    catalog = get_catalog()
    logger.info("World Countries API is running with %d countries", len(catalog))


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port)
