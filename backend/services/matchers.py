"""Per-field predicates used by the country search endpoints.

Every matcher takes the raw request value and a country and answers whether
that country matches. Name, capital and currency treat the value as a
case-insensitive RE2 regular expression, which matches in linear time and
has no look-around or backreferences. Language and calling code compare the
value literally.
"""

import logging
from functools import lru_cache
from typing import Callable

import re2

from models.country import Country

logger = logging.getLogger(__name__)

Matcher = Callable[[str, Country], bool]


class InvalidPattern(ValueError):
    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


def _case_insensitive() -> re2.Options:
    options = re2.Options()
    options.case_sensitive = False
    return options


@lru_cache(maxsize=512)
def compile_pattern(query: str):
    try:
        return re2.compile(query, _case_insensitive())
    except re2.error as e:
        logger.info("User request produced invalid pattern %r: %s", query, e)
        raise InvalidPattern(query, str(e)) from e


def match_code(query: str, country: Country) -> bool:
    return country.cca3 == query


def match_name(query: str, country: Country) -> bool:
    pattern = compile_pattern(query)
    return bool(pattern.search(country.name.common) or pattern.search(country.name.official))


def match_capital(query: str, country: Country) -> bool:
    pattern = compile_pattern(query)
    return any(pattern.search(capital) for capital in country.capital)


def match_language(query: str, country: Country) -> bool:
    language = query.lower()
    return any(
        code.lower() == language or full_name.lower() == language
        for code, full_name in country.languages.items()
    )


def match_currency(query: str, country: Country) -> bool:
    pattern = compile_pattern(query)
    return any(
        pattern.search(code) or pattern.search(currency.name)
        for code, currency in country.currencies.items()
    )


def match_calling_code(query: str, country: Country) -> bool:
    # Drops the leading "+" of the root, nothing else is normalized.
    return any(code[1:] == query for code in country.idd.calling_codes)


MATCHERS: dict[str, Matcher] = {
    "code": match_code,
    "name": match_name,
    "capital": match_capital,
    "language": match_language,
    "currency": match_currency,
    "callingcode": match_calling_code,
}

PATTERN_FIELDS = frozenset({"name", "capital", "currency"})
