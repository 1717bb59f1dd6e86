"""Daily electricity consumption from meter readings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in the given month of the given year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, not {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _MONTH_DAYS[month - 1]


@dataclass(frozen=True)
class Reading:
    """A meter reading taken on a given date."""

    day: int
    month: int
    year: int
    consumption: int

    def follows(self, other: Reading) -> bool:
        """Tell whether this reading was taken on the day after `other`."""
        day, month, year = other.day + 1, other.month, other.year
        if day > days_in_month(month, year):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
        return (day, month, year) == (self.day, self.month, self.year)


def daily_consumption(readings: Iterable[Reading]) -> tuple[int, int]:
    """Count consecutive-day reading pairs and the consumption measured across them."""
    ordered = list(readings)
    days = 0
    total = 0
    for previous, current in zip(ordered, ordered[1:]):
        if current.follows(previous):
            days += 1
            total += current.consumption - previous.consumption
    return days, total