"""Conversion engine tests: round trips, reference dates, metadata."""

from datetime import date, datetime, timedelta

import pytest

from hijri_date import (
    DAY_NAMES,
    HijriDate,
    MONTH_NAMES,
    days_in_month,
    gregorian_to_hijri,
    gregorian_to_julian,
    hijri_to_gregorian,
    hijri_to_julian,
    is_leap_year,
    julian_day_number,
    julian_to_gregorian,
    weekday,
    year_length,
)


# =========================================================
# Julian Day
# =========================================================

def test_julian_day_reference_points():
    assert gregorian_to_julian(2000, 1, 1) == 2451544.5
    assert julian_day_number(2000, 1, 1) == 2451545
    assert julian_day_number(2024, 7, 8) == 2460500
    assert julian_to_gregorian(2451545) == (2000, 1, 1)


def test_leap_day_survives_julian_round_trip():
    jdn = julian_day_number(2024, 2, 29)
    assert julian_to_gregorian(jdn) == (2024, 2, 29)
    assert julian_to_gregorian(jdn + 1) == (2024, 3, 1)


# =========================================================
# Round trips
# =========================================================

def test_gregorian_round_trip_1900_to_2100():
    d = date(1900, 1, 1)
    end = date(2100, 12, 31)
    one = timedelta(days=1)
    while d <= end:
        g = (d.year, d.month, d.day)
        h = gregorian_to_hijri(*g)
        assert hijri_to_gregorian(*h) == g, f"{g} -> {h}"
        assert weekday(julian_day_number(*g)) == d.isoweekday() % 7
        d += one


def test_hijri_round_trip_1350_to_1500():
    for year in range(1350, 1501):
        for month in range(1, 13):
            for day in range(1, days_in_month(year, month) + 1):
                g = hijri_to_gregorian(year, month, day)
                assert gregorian_to_hijri(*g) == (year, month, day)


def test_consecutive_hijri_days_are_consecutive_julian_days():
    prev = hijri_to_julian(1440, 1, 1) - 1
    for year in range(1440, 1460):
        for month in range(1, 13):
            for day in range(1, days_in_month(year, month) + 1):
                jdn = hijri_to_julian(year, month, day)
                assert jdn == prev + 1
                prev = jdn


# =========================================================
# Reference dates (pinned to the tabular algorithm)
# =========================================================

@pytest.mark.parametrize("greg, hijri", [
    ((2024, 7, 8), (1446, 1, 1)),
    ((2024, 7, 7), (1445, 12, 30)),
    ((2025, 3, 1), (1446, 9, 1)),
    ((2025, 6, 27), (1447, 1, 1)),
])
def test_reference_dates(greg, hijri):
    assert gregorian_to_hijri(*greg) == hijri
    assert hijri_to_gregorian(*hijri) == greg


# =========================================================
# Month / year lengths
# =========================================================

def test_leap_year_table():
    leaps = [y for y in range(1, 31) if is_leap_year(y)]
    assert leaps == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    assert is_leap_year(1445)
    assert not is_leap_year(1446)


def test_days_in_month_values():
    for year in range(1, 1601):
        for month in range(1, 13):
            n = days_in_month(year, month)
            assert n in (29, 30)
            if month == 12:
                assert (n == 30) == is_leap_year(year)
            else:
                assert n == (29 if month % 2 == 0 else 30)


def test_year_length_matches_julian_days():
    for year in range(1, 601):
        span = hijri_to_julian(year + 1, 1, 1) - hijri_to_julian(year, 1, 1)
        assert span == year_length(year)
        assert span == sum(days_in_month(year, m) for m in range(1, 13))


# =========================================================
# HijriDate value object
# =========================================================

def test_of_derives_weekday():
    h = HijriDate.of(1446, 1, 1)
    assert (h.year, h.month, h.date) == (1446, 1, 1)
    assert h.day == 1  # Monday
    assert h.day_name() == "Monday"
    assert h.to_gregorian() == date(2024, 7, 8)
    assert (h.hours, h.minutes, h.seconds) == (0, 0, 0)


def test_of_defaults_to_first_of_month():
    assert HijriDate.of(1446) == HijriDate.of(1446, 1, 1)
    assert HijriDate.of(1446, 9) == HijriDate.of(1446, 9, 1)


def test_today_captures_clock():
    h = HijriDate.today(datetime(2025, 3, 1, 13, 45, 10))
    assert (h.year, h.month, h.date) == (1446, 9, 1)
    assert h.day == 6  # Saturday
    assert (h.hours, h.minutes, h.seconds) == (13, 45, 10)
    assert h.same_day(HijriDate.of(1446, 9, 1))


def test_today_without_argument_uses_system_clock():
    h = HijriDate.today()
    assert 1 <= h.month <= 12
    assert 1 <= h.date <= h.days_in_month


def test_from_gregorian():
    h = HijriDate.from_gregorian(date(2024, 7, 7))
    assert (h.year, h.month, h.date, h.day) == (1445, 12, 30, 0)
    assert h.julian_day == 2460499


def test_hijri_date_is_immutable():
    h = HijriDate.of(1446, 1, 1)
    with pytest.raises(AttributeError):
        h.month = 2


def test_month_navigation_returns_new_instances():
    h = HijriDate.of(1446, 1, 15)
    prev = h.prev_month()
    assert (prev.year, prev.month, prev.date) == (1445, 12, 1)
    assert (h.year, h.month, h.date) == (1446, 1, 15)
    nxt = HijriDate.of(1446, 12, 3).next_month()
    assert (nxt.year, nxt.month, nxt.date) == (1447, 1, 1)
    assert h.first_of_month() == HijriDate.of(1446, 1, 1)


# =========================================================
# Names and formatting
# =========================================================

def test_name_lookups_in_bounds():
    for lang in ("en", "ar"):
        assert len(MONTH_NAMES[lang]) == 12
        assert len(DAY_NAMES[lang]) == 7
        for month in range(1, 13):
            h = HijriDate.of(1446, month, 1)
            assert h.month_name(lang) == MONTH_NAMES[lang][month - 1]
            assert h.day_name(lang) == DAY_NAMES[lang][h.day]


def test_month_names():
    assert HijriDate.of(1446, 9, 1).month_name() == "Ramadan"
    assert HijriDate.of(1446, 9, 1).month_name("ar") == "رمضان"
    assert HijriDate.of(1446, 1, 1).day_name("ar") == "الإثنين"


def test_unknown_language_raises():
    with pytest.raises(KeyError):
        HijriDate.of(1446, 1, 1).month_name("fr")


@pytest.mark.parametrize("template, expected", [
    ("YYYY-MM-DD", "1446-01-05"),
    ("D/M/YYYY", "5/1/1446"),
    ("DAY, D MONTH YYYY", "Friday, 5 Muharram 1446"),
    ("MONTH", "Muharram"),
    ("no tokens here", "no tokens here"),
    ("D/D MM-MM YYYY YYYY", "5/5 01-01 1446 1446"),
])
def test_format_tokens(template, expected):
    assert HijriDate.of(1446, 1, 5).format(template) == expected


def test_format_does_not_rescan_substituted_names():
    # "Dhu al-Hijjah" contains a D that must not be read as a token
    assert HijriDate.of(1445, 12, 30).format("MONTH D") == "Dhu al-Hijjah 30"


def test_format_arabic():
    assert HijriDate.of(1446, 9, 1).format("D MONTH YYYY", "ar") == "1 رمضان 1446"


def test_str():
    assert str(HijriDate.of(1446, 9, 1)) == "1446-09-01"


def test_format_replaces_every_occurrence():
    h = HijriDate.of(1446, 1, 5)
    assert h.format("MONTH / MONTH") == "Muharram / Muharram"
    assert h.format("DAY DAY", "ar") == "الجمعة الجمعة"
