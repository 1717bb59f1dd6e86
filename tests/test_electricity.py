import calendar
import datetime

import pytest

from judgebox.electricity import Reading, daily_consumption, days_in_month, is_leap_year


@pytest.mark.parametrize("year", range(1890, 2110))
def test_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)


def test_century_rules():
    assert is_leap_year(2000)
    assert not is_leap_year(1900)


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
@pytest.mark.parametrize("month", range(1, 13))
def test_days_in_month_matches_calendar(month, year):
    assert days_in_month(month, year) == calendar.monthrange(year, month)[1]


@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(month, 2000)


def _reading(date, consumption=0):
    return Reading(date.day, date.month, date.year, consumption)


@pytest.mark.parametrize(
    "start",
    [
        datetime.date(2000, 2, 28),
        datetime.date(2000, 2, 29),
        datetime.date(1900, 2, 28),
        datetime.date(2023, 12, 31),
        datetime.date(2024, 4, 30),
        datetime.date(2024, 7, 15),
    ],
)
def test_follows_next_day(start):
    nxt = start + datetime.timedelta(days=1)
    assert _reading(nxt).follows(_reading(start))
    assert not _reading(start).follows(_reading(nxt))


def test_follows_rejects_gap():
    start = datetime.date(2024, 3, 1)
    later = start + datetime.timedelta(days=2)
    assert not _reading(later).follows(_reading(start))


def test_daily_consumption_chain():
    start = datetime.date(2011, 12, 30)
    readings = [
        _reading(start + datetime.timedelta(days=i), 100 + 7 * i) for i in range(4)
    ]
    days, total = daily_consumption(readings)
    assert days == len(readings) - 1
    assert total == readings[-1].consumption - readings[0].consumption


def test_daily_consumption_no_consecutive_days():
    readings = [
        Reading(1, 1, 2020, 10),
        Reading(3, 1, 2020, 20),
        Reading(5, 1, 2020, 30),
    ]
    assert daily_consumption(readings) == (0, 0)


def test_daily_consumption_empty():
    assert daily_consumption([]) == (0, 0)