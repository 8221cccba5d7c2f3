"""Derived pricing.

All amounts are integer minor currency units (cents). Effective rates are
computed at read time and never persisted, so changing ``hourly_rate`` alone
moves the derived daily and weekly figures on the next read.

Rates are validated as independent ranges; no cross-field consistency is
enforced (a daily rate below eight hourly rates is accepted).
"""

from typing import Protocol

HOURS_PER_DAY = 8
DAYS_PER_WEEK = 5


class Priced(Protocol):
    hourly_rate: int
    daily_rate: int | None
    weekly_rate: int | None


def effective_daily_rate(trait: Priced) -> int:
    if trait.daily_rate is not None:
        return trait.daily_rate
    return trait.hourly_rate * HOURS_PER_DAY


def effective_weekly_rate(trait: Priced) -> int:
    if trait.weekly_rate is not None:
        return trait.weekly_rate
    return effective_daily_rate(trait) * DAYS_PER_WEEK


def is_affordable(trait: Priced, budget: int) -> bool:
    """True when one hour of the trait fits within ``budget``."""
    return trait.hourly_rate <= budget
