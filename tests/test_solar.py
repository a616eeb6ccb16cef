# tests/test_solar.py

import random
from datetime import date

import pytest

from calconv.calendars.gregorian import (
    day_number,
    fixed_to_gregorian,
    gregorian_leap_year,
    gregorian_new_year,
    gregorian_to_fixed,
    gregorian_year_end,
    gregorian_year_from_fixed,
    last_day_of_gregorian_month,
)
from calconv.calendars.iso import fixed_to_iso, iso_long_year, iso_to_fixed, iso_weeks_in_year
from calconv.calendars.julian import JULIAN_EPOCH, fixed_to_julian, julian_leap_year, julian_to_fixed
from calconv.core.errors import DomainError
from calconv.core.fixed import fixed_from_date
from calconv.core.types import GregorianDate, IsoDate, JulianDate

# (fixed, gregorian, julian, iso)
REFERENCE = [
    (-214193, (-586, 7, 24), (-586, 7, 30), (-586, 29, 7)),
    (710347, (1945, 11, 12), (1945, 10, 30), (1945, 46, 1)),
    (730120, (2000, 1, 1), (1999, 12, 19), (1999, 52, 6)),
    (577736, (1582, 10, 15), (1582, 10, 5), (1582, 41, 5)),
]


@pytest.mark.parametrize("fixed,g,j,i", REFERENCE)
def test_reference_dates(fixed, g, j, i):
    assert gregorian_to_fixed(GregorianDate(*g)) == fixed
    assert fixed_to_gregorian(fixed) == GregorianDate(*g)
    assert julian_to_fixed(JulianDate(*j)) == fixed
    assert fixed_to_julian(fixed) == JulianDate(*j)
    assert iso_to_fixed(IsoDate(*i)) == fixed
    assert fixed_to_iso(fixed) == IsoDate(*i)


def test_epochs():
    assert gregorian_to_fixed(GregorianDate(1, 1, 1)) == 1
    assert julian_to_fixed(JulianDate(1, 1, 1)) == JULIAN_EPOCH
    assert fixed_to_gregorian(JULIAN_EPOCH) == GregorianDate(0, 12, 30)


def test_gregorian_matches_datetime():
    random.seed(42)
    for _ in range(5000):
        n = random.randint(1, 3652059)
        d = date.fromordinal(n)
        assert fixed_to_gregorian(n) == GregorianDate(d.year, d.month, d.day)
        assert gregorian_to_fixed(GregorianDate(d.year, d.month, d.day)) == n
        assert gregorian_year_from_fixed(n) == d.year


def test_iso_matches_datetime():
    random.seed(42)
    for _ in range(5000):
        n = random.randint(1000, 3650000)
        y, w, wd = date.fromordinal(n).isocalendar()
        assert fixed_to_iso(n) == IsoDate(y, w, wd)
        assert iso_to_fixed(IsoDate(y, w, wd)) == n


def test_gregorian_roundtrip_negative_years():
    random.seed(42)
    for _ in range(3000):
        n = random.randint(-2_000_000, 0)
        assert gregorian_to_fixed(fixed_to_gregorian(n)) == n
        assert julian_to_fixed(fixed_to_julian(n)) == n
        assert iso_to_fixed(fixed_to_iso(n)) == n


def test_year_boundaries():
    # last day of a 400-year cycle and of a leap year
    assert fixed_to_gregorian(gregorian_to_fixed(GregorianDate(2000, 12, 31))) == GregorianDate(2000, 12, 31)
    assert fixed_to_gregorian(gregorian_to_fixed(GregorianDate(1996, 12, 31))) == GregorianDate(1996, 12, 31)
    assert fixed_to_gregorian(0) == GregorianDate(0, 12, 31)
    assert fixed_to_julian(julian_to_fixed(JulianDate(-1, 12, 31)) + 1) == JulianDate(0, 1, 1)
    assert fixed_to_julian(julian_to_fixed(JulianDate(-5, 12, 31))) == JulianDate(-5, 12, 31)
    assert gregorian_new_year(2024) == fixed_from_date(date(2024, 1, 1))
    assert gregorian_year_end(2024) == fixed_from_date(date(2024, 12, 31))
    assert gregorian_year_end(0) == 0
    assert gregorian_new_year(1) == 1


def test_leap_rules():
    assert gregorian_leap_year(2000)
    assert gregorian_leap_year(2024)
    assert not gregorian_leap_year(1900)
    assert not gregorian_leap_year(2023)
    assert gregorian_leap_year(0)
    assert gregorian_leap_year(-4)
    assert julian_leap_year(1900)
    assert julian_leap_year(0)
    assert not julian_leap_year(-1)
    assert last_day_of_gregorian_month(2, 1900) == 28
    assert last_day_of_gregorian_month(2, 2000) == 29


def test_invalid_month_days_rejected():
    with pytest.raises(DomainError):
        gregorian_to_fixed(GregorianDate(2023, 2, 29))
    with pytest.raises(DomainError):
        gregorian_to_fixed(GregorianDate(1900, 2, 29))
    with pytest.raises(DomainError):
        gregorian_to_fixed(GregorianDate(2024, 4, 31))
    with pytest.raises(DomainError):
        julian_to_fixed(JulianDate(1901, 2, 29))
    assert julian_to_fixed(JulianDate(1900, 2, 29)) == julian_to_fixed(JulianDate(1900, 3, 1)) - 1


def test_day_number():
    assert day_number(GregorianDate(2024, 1, 1)) == 1
    assert day_number(GregorianDate(2024, 12, 31)) == 366
    assert day_number(GregorianDate(2023, 12, 31)) == 365


def test_iso_year_edges():
    # 2008-12-29 starts ISO 2009; 2010-01-03 still belongs to ISO 2009 (a long year)
    assert fixed_to_iso(fixed_from_date(date(2008, 12, 29))) == IsoDate(2009, 1, 1)
    assert fixed_to_iso(fixed_from_date(date(2010, 1, 3))) == IsoDate(2009, 53, 7)
    assert iso_long_year(2009)
    assert not iso_long_year(2010)
    assert iso_weeks_in_year(2015) == 53
    with pytest.raises(DomainError):
        iso_to_fixed(IsoDate(2010, 53, 1))
