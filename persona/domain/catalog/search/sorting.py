"""Sort resolution.

Every sort key maps to an explicit ordering. Keys that can tie on their
primary column carry a fixed secondary column.
"""

from dataclasses import dataclass
from enum import StrEnum


class SortKey(StrEnum):
    RATING = "rating"
    PRICE = "price"
    POPULARITY = "popularity"
    NEWEST = "newest"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortField(StrEnum):
    """Trait attributes that can be ordered on."""

    AVERAGE_RATING = "average_rating"
    TOTAL_RENTALS = "total_rentals"
    HOURLY_RATE = "hourly_rate"
    CREATED_AT = "created_at"


@dataclass(frozen=True)
class OrderTerm:
    field: SortField
    direction: SortOrder


DEFAULT_SORT_KEY = SortKey.NEWEST
DEFAULT_SORT_ORDER = SortOrder.DESC


def resolve_sort(key: SortKey = DEFAULT_SORT_KEY, order: SortOrder = DEFAULT_SORT_ORDER) -> tuple[OrderTerm, ...]:
    match key:
        case SortKey.RATING:
            return (
                OrderTerm(SortField.AVERAGE_RATING, order),
                OrderTerm(SortField.TOTAL_RENTALS, SortOrder.DESC),
            )
        case SortKey.PRICE:
            return (OrderTerm(SortField.HOURLY_RATE, order),)
        case SortKey.POPULARITY:
            return (
                OrderTerm(SortField.TOTAL_RENTALS, order),
                OrderTerm(SortField.AVERAGE_RATING, SortOrder.DESC),
            )
        case SortKey.NEWEST:
            return (OrderTerm(SortField.CREATED_AT, order),)
