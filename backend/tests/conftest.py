from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from models.country import Country
from services.country_service import Catalog, get_catalog


def make_country(
    cca3: str,
    common: str | None = None,
    official: str | None = None,
    capital: list[str] | None = None,
    languages: dict[str, str] | None = None,
    currencies: dict[str, tuple[str, str]] | None = None,
    root: str = "",
    suffixes: list[str] | None = None,
) -> Country:
    common = common or f"Country {cca3}"
    return Country.model_validate({
        "name": {"common": common, "official": official or common, "nativeName": {}},
        "cca3": cca3,
        "capital": capital or [],
        "languages": languages or {},
        "currencies": {
            code: {"name": name, "symbol": symbol}
            for code, (name, symbol) in (currencies or {}).items()
        },
        "idd": {"root": root, "suffixes": suffixes or []},
        "region": "Testland",
    })


@pytest.fixture
def countries() -> list[Country]:
    return [
        make_country(
            "USA", "United States", "United States of America",
            capital=["Washington, D.C."],
            languages={"eng": "English"},
            currencies={"USD": ("United States dollar", "$")},
            root="+1", suffixes=["201", "202"],
        ),
        make_country(
            "GBR", "United Kingdom", "United Kingdom of Great Britain and Northern Ireland",
            capital=["London"],
            languages={"eng": "English"},
            currencies={"GBP": ("British pound", "£")},
            root="+4", suffixes=["4"],
        ),
        make_country(
            "ARE", "United Arab Emirates", "United Arab Emirates",
            capital=["Abu Dhabi"],
            languages={"ara": "Arabic"},
            currencies={"AED": ("United Arab Emirates dirham", "د.إ")},
            root="+9", suffixes=["71"],
        ),
        make_country(
            "FRA", "France", "French Republic",
            capital=["Paris"],
            languages={"fra": "French"},
            currencies={"EUR": ("Euro", "€")},
            root="+3", suffixes=["3"],
        ),
        make_country(
            "AIA", "Anguilla", "Anguilla",
            capital=["The Valley"],
            languages={"eng": "English"},
            currencies={"XCD": ("Eastern Caribbean dollar", "$")},
            root="+1", suffixes=["264"],
        ),
        make_country(
            "ZAF", "South Africa", "Republic of South Africa",
            capital=["Pretoria", "Bloemfontein", "Cape Town"],
            languages={"afr": "Afrikaans", "eng": "English", "zul": "Zulu"},
            currencies={"ZAR": ("South African rand", "R")},
            root="+2", suffixes=["7"],
        ),
        make_country(
            "XUS", "Example Territory", "Territory of Example",
            capital=["Sample City"],
            languages={"enu": "English (US)"},
            currencies={"USD": ("United States dollar", "$")},
            root="+1", suffixes=["999"],
        ),
        make_country("ATA", "Antarctica", "Antarctica", root="", suffixes=["264"]),
    ]


@pytest.fixture
def catalog(countries) -> Catalog:
    return Catalog(countries)


@pytest.fixture
def big_catalog() -> Catalog:
    return Catalog(make_country(f"C{i:02d}") for i in range(45))


@asynccontextmanager
async def _client_for(catalog: Catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(catalog):
    async with _client_for(catalog) as ac:
        yield ac


@pytest.fixture
async def paged_client(big_catalog):
    async with _client_for(big_catalog) as ac:
        yield ac
