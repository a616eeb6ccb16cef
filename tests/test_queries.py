# tests/test_queries.py

import random
from datetime import date

import pytest

from calconv.core.errors import DomainError, OutOfRangeError
from calconv.core.fixed import fixed_from_date
from calconv.core.types import GregorianDate, HebrewDate, JulianDate
from calconv.queries import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    day_of_week,
    days_between,
    kday_after,
    kday_before,
    kday_nearest,
    kday_on_or_after,
    kday_on_or_before,
    nth_kday,
    nth_kday_in_month,
)

Y2K = fixed_from_date(date(2000, 1, 1))  # a Saturday


def test_day_of_week_matches_datetime():
    random.seed(42)
    for _ in range(500):
        f = random.randint(1, 800_000)
        assert day_of_week(f) == date.fromordinal(f).isoweekday() % 7


def test_day_of_week_before_year_one():
    assert day_of_week(0) == SUNDAY
    assert day_of_week(-1) == SATURDAY
    assert day_of_week(Y2K) == SATURDAY


def test_kday_neighbours():
    assert kday_on_or_before(SATURDAY, Y2K) == Y2K
    assert kday_on_or_before(SUNDAY, Y2K) == Y2K - 6
    assert kday_on_or_after(SUNDAY, Y2K) == Y2K + 1
    assert kday_nearest(SUNDAY, Y2K) == Y2K + 1
    assert kday_nearest(THURSDAY, Y2K) == Y2K - 2
    assert kday_before(SATURDAY, Y2K) == Y2K - 7
    assert kday_after(SATURDAY, Y2K) == Y2K + 7


def test_kday_results_have_the_requested_weekday():
    random.seed(42)
    for _ in range(200):
        f = random.randint(-100_000, 800_000)
        k = random.randint(0, 6)
        for fn in (kday_on_or_before, kday_on_or_after, kday_nearest, kday_before, kday_after):
            assert day_of_week(fn(k, f)) == k
        assert f - 6 <= kday_on_or_before(k, f) <= f
        # a k-day is its own nearest, preceding and following k-day
        once = kday_on_or_before(k, f)
        assert kday_on_or_before(k, once) == kday_on_or_after(k, once) == kday_nearest(k, once) == once
        assert f <= kday_on_or_after(k, f) <= f + 6
        assert abs(kday_nearest(k, f) - f) <= 3


@pytest.mark.parametrize("k", [-1, 7, 1.0, True, "0"])
def test_bad_weekday_rejected(k):
    with pytest.raises(DomainError):
        kday_on_or_before(k, Y2K)


def test_nth_kday():
    assert nth_kday(1, SATURDAY, Y2K) == Y2K
    assert nth_kday(2, SATURDAY, Y2K) == Y2K + 7
    assert nth_kday(-1, SATURDAY, Y2K) == Y2K
    assert nth_kday(-2, FRIDAY, Y2K) == Y2K - 8
    with pytest.raises(DomainError):
        nth_kday(0, SUNDAY, Y2K)


def test_nth_kday_in_month():
    assert nth_kday_in_month(5, THURSDAY, 2, 2024) == fixed_from_date(date(2024, 2, 29))
    assert nth_kday_in_month(-1, MONDAY, 5, 2024) == fixed_from_date(date(2024, 5, 27))
    assert nth_kday_in_month(1, MONDAY, 9, 2024) == fixed_from_date(date(2024, 9, 2))
    with pytest.raises(OutOfRangeError):
        nth_kday_in_month(5, MONDAY, 2, 2024)
    with pytest.raises(OutOfRangeError):
        nth_kday_in_month(-5, MONDAY, 2, 2024)


def test_days_between_across_calendars():
    # the Gregorian reform: Thursday 4 October (Julian) was followed by Friday 15 October
    assert days_between(JulianDate(1582, 10, 4), GregorianDate(1582, 10, 15)) == 1
    assert days_between(GregorianDate(1945, 11, 12), HebrewDate(5706, 9, 7)) == 0
    assert days_between(GregorianDate(2024, 1, 1), GregorianDate(2023, 1, 1)) == -365
