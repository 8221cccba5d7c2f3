"""Filter compiler: untrusted query parameters to a typed search plan.

Parameters go through two separate passes:

- the structural pass (``page``, ``limit``, ``category``, ``sortBy``,
  ``sortOrder``) is strict. Every violation is collected and raised together
  as one ValidationError, and nothing is queried.
- the optional pass (``search``, ``minRating``, ``maxPrice``, ``verified``,
  ``available``) is lenient. A malformed value is treated as if it had not
  been sent, so a bad filter degrades to "no filter".

Blank values count as absent in both passes. Unrecognised keys are ignored.
"""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass

from persona.domain.auth.model.value import UserId
from persona.domain.catalog.model.category import TraitCategory, parse_category
from persona.domain.catalog.search.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_PAGE,
    MIN_LIMIT,
)
from persona.domain.catalog.search.sorting import (
    DEFAULT_SORT_KEY,
    DEFAULT_SORT_ORDER,
    SortKey,
    SortOrder,
)
from persona.domain.shared.error import FieldError, UnknownCategory, ValidationError
from persona.domain.shared.model.value import CamelModel

logger = logging.getLogger(__name__)

MAX_SEARCH_LENGTH = 100
MIN_RATING, MAX_RATING = 0.0, 5.0

# Longer digit strings cannot be a valid page, limit or price and are treated as malformed
MAX_INT_DIGITS = 18
_INT = re.compile(rf"-?\d{{1,{MAX_INT_DIGITS}}}")
_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})

RawParams = Mapping[str, str | None]


@dataclass(frozen=True)
class TraitFilters:
    """Predicate set for a trait query. ``None`` means "no constraint"."""

    search: str | None = None
    category: TraitCategory | None = None
    min_rating: float | None = None
    max_price: int | None = None
    verified: bool | None = None
    available: bool | None = True
    owner_id: UserId | None = None


@dataclass(frozen=True)
class StructuralParams:
    page: int = 1
    limit: int = DEFAULT_LIMIT
    category: TraitCategory | None = None
    sort_by: SortKey = DEFAULT_SORT_KEY
    sort_order: SortOrder = DEFAULT_SORT_ORDER


@dataclass(frozen=True)
class OptionalFilters:
    search: str | None = None
    min_rating: float | None = None
    max_price: int | None = None
    verified: bool | None = None
    available: bool = True


class AppliedFilters(CamelModel):
    search: str | None
    category: TraitCategory | None
    min_rating: float | None
    max_price: int | None
    verified: bool | None
    available: bool | None
    sort_by: SortKey
    sort_order: SortOrder


@dataclass(frozen=True)
class CompiledSearch:
    structural: StructuralParams
    filters: TraitFilters

    def echo(self) -> AppliedFilters:
        """The resolved filters as reported back to the client."""
        return AppliedFilters(
            search=self.filters.search,
            category=self.filters.category,
            min_rating=self.filters.min_rating,
            max_price=self.filters.max_price,
            verified=self.filters.verified,
            available=self.filters.available,
            sort_by=self.structural.sort_by,
            sort_order=self.structural.sort_order,
        )


def _value(params: RawParams, key: str) -> str | None:
    raw = params.get(key)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _parse_int(raw: str) -> int | None:
    return int(raw) if _INT.fullmatch(raw) else None


def _parse_bool(raw: str) -> bool | None:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return None


# -----------------------------------------------------------------------------
# Structural pass
# -----------------------------------------------------------------------------


def _page(params: RawParams, errors: list[FieldError]) -> int:
    raw = _value(params, "page")
    if raw is None:
        return 1
    page = _parse_int(raw)
    if page is None or page < 1:
        errors.append(FieldError("page", "Page must be a positive integer", raw))
        return 1
    if page > MAX_PAGE:
        errors.append(FieldError("page", f"Page must not exceed {MAX_PAGE}", raw))
        return 1
    return page


def _limit(params: RawParams, errors: list[FieldError], default: int) -> int:
    raw = _value(params, "limit")
    if raw is None:
        return default
    limit = _parse_int(raw)
    if limit is None or not MIN_LIMIT <= limit <= MAX_LIMIT:
        errors.append(FieldError("limit", f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}", raw))
        return default
    return limit


def _category(params: RawParams, errors: list[FieldError]) -> TraitCategory | None:
    raw = _value(params, "category")
    if raw is None:
        return None
    try:
        return parse_category(raw)
    except UnknownCategory as e:
        errors.extend(e.errors)
        return None


def _sort_by(params: RawParams, errors: list[FieldError]) -> SortKey:
    raw = _value(params, "sortBy")
    if raw is None:
        return DEFAULT_SORT_KEY
    try:
        return SortKey(raw)
    except ValueError:
        errors.append(FieldError("sortBy", "Invalid sort option", raw))
        return DEFAULT_SORT_KEY


def _sort_order(params: RawParams, errors: list[FieldError]) -> SortOrder:
    raw = _value(params, "sortOrder")
    if raw is None:
        return DEFAULT_SORT_ORDER
    try:
        return SortOrder(raw)
    except ValueError:
        errors.append(FieldError("sortOrder", "Sort order must be asc or desc", raw))
        return DEFAULT_SORT_ORDER


def _raise_if_any(errors: list[FieldError]) -> None:
    if errors:
        logger.info("Rejected query parameters: %s", ", ".join(e.field for e in errors))
        raise ValidationError("Validation failed", errors=errors)


def structural_pass(params: RawParams, *, default_limit: int = DEFAULT_LIMIT) -> StructuralParams:
    """Strict pass. Raises ValidationError listing every structural violation."""
    errors: list[FieldError] = []
    result = StructuralParams(
        page=_page(params, errors),
        limit=_limit(params, errors, default_limit),
        category=_category(params, errors),
        sort_by=_sort_by(params, errors),
        sort_order=_sort_order(params, errors),
    )
    _raise_if_any(errors)
    return result


def paging_pass(params: RawParams, *, default_limit: int) -> tuple[int, int]:
    """Strict pass restricted to ``page`` and ``limit``."""
    errors: list[FieldError] = []
    page = _page(params, errors)
    limit = _limit(params, errors, default_limit)
    _raise_if_any(errors)
    return page, limit


# -----------------------------------------------------------------------------
# Optional pass
# -----------------------------------------------------------------------------


def _search(params: RawParams) -> str | None:
    raw = _value(params, "search")
    if raw is None or len(raw) > MAX_SEARCH_LENGTH:
        return None
    return raw


def _min_rating(params: RawParams) -> float | None:
    raw = _value(params, "minRating")
    if raw is None:
        return None
    try:
        rating = float(raw)
    except ValueError:
        return None
    if not math.isfinite(rating) or not MIN_RATING <= rating <= MAX_RATING:
        return None
    return rating


def _max_price(params: RawParams) -> int | None:
    raw = _value(params, "maxPrice")
    if raw is None:
        return None
    price = _parse_int(raw)
    if price is None or price < 0:
        return None
    return price


def _flag(params: RawParams, key: str) -> bool | None:
    raw = _value(params, key)
    return None if raw is None else _parse_bool(raw)


def optional_pass(params: RawParams) -> OptionalFilters:
    """Lenient pass. Never raises; malformed values become absent."""
    available = _flag(params, "available")
    return OptionalFilters(
        search=_search(params),
        min_rating=_min_rating(params),
        max_price=_max_price(params),
        verified=_flag(params, "verified"),
        available=True if available is None else available,
    )


def compile_search(params: RawParams) -> CompiledSearch:
    """Run both passes. The structural pass runs first and may raise."""
    structural = structural_pass(params)
    optional = optional_pass(params)
    return CompiledSearch(
        structural=structural,
        filters=TraitFilters(
            search=optional.search,
            category=structural.category,
            min_rating=optional.min_rating,
            max_price=optional.max_price,
            verified=optional.verified,
            available=optional.available,
        ),
    )
