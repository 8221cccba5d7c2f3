"""Tests for derived daily and weekly rates."""

from dataclasses import dataclass

from persona.domain.catalog.model.rates import (
    effective_daily_rate,
    effective_weekly_rate,
    is_affordable,
)


@dataclass
class _Priced:
    hourly_rate: int
    daily_rate: int | None = None
    weekly_rate: int | None = None


class TestEffectiveRates:
    def test_daily_derived_from_hourly(self):
        assert effective_daily_rate(_Priced(hourly_rate=1000)) == 8000

    def test_weekly_derived_from_derived_daily(self):
        assert effective_weekly_rate(_Priced(hourly_rate=1000)) == 40000

    def test_explicit_daily_wins(self):
        assert effective_daily_rate(_Priced(hourly_rate=1000, daily_rate=6000)) == 6000

    def test_weekly_derived_from_explicit_daily(self):
        assert effective_weekly_rate(_Priced(hourly_rate=1000, daily_rate=6000)) == 30000

    def test_explicit_weekly_wins(self):
        priced = _Priced(hourly_rate=1000, daily_rate=6000, weekly_rate=25000)
        assert effective_weekly_rate(priced) == 25000

    def test_no_cross_field_consistency(self):
        # A daily rate below eight hourly rates is accepted as-is
        assert effective_daily_rate(_Priced(hourly_rate=10000, daily_rate=500)) == 500


class TestIsAffordable:
    def test_within_budget(self):
        assert is_affordable(_Priced(hourly_rate=1500), 1500)

    def test_over_budget(self):
        assert not is_affordable(_Priced(hourly_rate=1501), 1500)
