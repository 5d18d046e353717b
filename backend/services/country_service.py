import json
import logging
import threading
from pathlib import Path
from typing import Iterable, Iterator

from config import settings
from models.country import Country
from services.matchers import MATCHERS, PATTERN_FIELDS, compile_pattern, match_code

logger = logging.getLogger(__name__)


class NotFound(LookupError):
    pass


class Catalog:
    """Ordered, read-only collection of every country in the dataset."""

    def __init__(self, countries: Iterable[Country]):
        self._countries = tuple(countries)
        seen: set[str] = set()
        for position, country in enumerate(self._countries):
            if not country.cca3:
                raise ValueError(f"Country at position {position} has an empty cca3")
            if country.cca3 in seen:
                raise ValueError(f"Duplicate cca3 {country.cca3!r}")
            seen.add(country.cca3)

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)


def load_catalog(path: Path) -> Catalog:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return Catalog(Country.model_validate(c) for c in raw)


_catalog: Catalog | None = None
_lock = threading.Lock()


def get_catalog() -> Catalog:
    global _catalog
    if _catalog is None:
        with _lock:
            if _catalog is None:
                _catalog = load_catalog(settings.data_path)
                logger.info("Loaded %d countries from %s", len(_catalog), settings.data_path)
    return _catalog


def get_by_cca3(catalog: Catalog, cca3: str) -> Country:
    country = next((c for c in catalog if match_code(cca3, c)), None)
    if country is None:
        raise NotFound(cca3)
    return country.model_copy(deep=True)


def search(catalog: Catalog, field: str, query: str) -> list[Country]:
    """Return copies of every country whose ``field`` matches ``query``, in catalog order.

    Raises InvalidPattern for name, capital and currency queries that are not
    valid regular expressions, even if the catalog is empty.
    """
    matcher = MATCHERS[field]
    if field in PATTERN_FIELDS:
        compile_pattern(query)
    return [c.model_copy(deep=True) for c in catalog if matcher(query, c)]
