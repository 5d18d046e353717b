import logging
import math
from typing import Sequence

from models.country import Country
from models.pagination import Paginated

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


class MalformedQueryString(ValueError):
    pass


def parse_query(query: str) -> dict[str, str]:
    """Split a raw ``a=1&b=2`` query string, keeping values undecoded.

    Raises MalformedQueryString if any pair lacks an ``=``.
    """
    params: dict[str, str] = {}
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        if not sep:
            raise MalformedQueryString(query)
        params[key] = value.split("=", 1)[0]
    return params


def parse_maybe_query(query: str | None) -> dict[str, str]:
    if not query:
        return {}
    try:
        return parse_query(query)
    except MalformedQueryString:
        logger.info("Failed to parse query string: %r", query)
        return {}


def query_to_string(params: dict[str, str]) -> str:
    return "&".join(f"{key}={value}" for key, value in params.items())


def parse_page(value: str | None) -> int:
    # A single leading "+" is allowed, as in "page=+2".
    digits = value[1:] if value and value.startswith("+") else value
    if digits and digits.isascii() and digits.isdigit():
        page = int(digits)
        if page > 0:
            return page
    return 1


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total / page_size)


def paginate(
    items: Sequence[Country],
    path: str,
    query: str | None,
    page_size: int = PAGE_SIZE,
) -> Paginated:
    """Cut one page out of ``items`` and link to the following page.

    The page number comes from the ``page`` parameter of ``query``. The
    ``next`` link repeats the request's other parameters unchanged.
    """
    total_page_count = page_count(len(items), page_size)
    params = parse_maybe_query(query)
    page = parse_page(params.get("page"))

    next_link = None
    if page + 1 <= total_page_count:
        params["page"] = str(page + 1)
        next_link = f"{path}?{query_to_string(params)}"

    start = (page - 1) * page_size
    page_items = [country.model_copy(deep=True) for country in items[start:start + page_size]]
    return Paginated(
        total_page_count=total_page_count,
        next=next_link,
        items=page_items,
    )
