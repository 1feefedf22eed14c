"""Hijri/Gregorian conversion — pure arithmetic, no UI dependencies.

Conversions go through the Julian Day Number (JDN).  The Hijri side is the
tabular ("Kuwaiti") calendar: a fixed 30-year cycle with 11 leap years, so
results may differ from moon-sighting calendars by a day or two.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from datetime import date as _date, datetime

# JDN of 1 Muharram 1 AH in the civil tabular reckoning
HIJRI_EPOCH = 1948440

LEAP_YEARS_IN_CYCLE = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})

MONTH_NAMES: dict[str, list[str]] = {
    "ar": [
        "محرم",
        "صفر",
        "ربيع الأول",
        "ربيع الثاني",
        "جمادى الأولى",
        "جمادى الآخرة",
        "رجب",
        "شعبان",
        "رمضان",
        "شوال",
        "ذو القعدة",
        "ذو الحجة",
    ],
    "en": [
        "Muharram",
        "Safar",
        "Rabi' al-Awwal",
        "Rabi' al-Thani",
        "Jumada al-Awwal",
        "Jumada al-Thani",
        "Rajab",
        "Sha'ban",
        "Ramadan",
        "Shawwal",
        "Dhu al-Qi'dah",
        "Dhu al-Hijjah",
    ],
}

DAY_NAMES: dict[str, list[str]] = {
    "ar": ["الأحد", "الإثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"],
    "en": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
}

LANGUAGES = ("en", "ar")


# --- Gregorian <-> JDN ------------------------------------------------------

def gregorian_to_julian(year: int, month: int, date: int) -> float:
    """Return the Julian Day at midnight (x.5) of a proleptic Gregorian date."""
    if month < 3:
        # Jan/Feb count as months 13/14 of the previous year
        year -= 1
        month += 12
    a = year // 100
    b = a // 4
    c = 2 - a + b
    e = math.floor(365.25 * (year + 4716))
    f = math.floor(30.6001 * (month + 1))
    return c + date + e + f - 1524.5


def julian_day_number(year: int, month: int, date: int) -> int:
    """Return the integer JDN (noon convention) of a Gregorian date."""
    return math.floor(gregorian_to_julian(year, month, date) + 0.5)


def julian_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Inverse of :func:`julian_day_number` (proleptic Gregorian)."""
    alpha = math.floor((jdn - 1867216.25) / 36524.25)
    a = jdn + 1 + alpha - alpha // 4
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def weekday(jdn: int) -> int:
    """Day of week for a JDN, 0 = Sunday … 6 = Saturday."""
    return (jdn + 1) % 7


# --- Hijri <-> JDN ----------------------------------------------------------

def julian_to_hijri(jdn: int) -> tuple[int, int, int]:
    """Return the tabular Hijri ``(year, month, date)`` for a JDN."""
    l = jdn - HIJRI_EPOCH + 10632
    n = (l - 1) // 10631  # complete 30-year cycles
    l1 = l - 10631 * n + 354
    j = ((10985 - l1) // 5316) * ((50 * l1) // 17719) + (l1 // 5670) * ((43 * l1) // 15238)
    l2 = l1 - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    # l2 is in [30, 384] here, so the quotient is already a 1-based month
    month = (24 * l2) // 709
    date = l2 - (709 * month) // 24
    year = 30 * n + j - 30
    return year, month, date


def hijri_to_julian(year: int, month: int, date: int) -> int:
    """Return the JDN of a tabular Hijri date."""
    return (
        (11 * year + 3) // 30
        + 354 * year
        + 30 * month
        - (month - 1) // 2
        + date
        + HIJRI_EPOCH
        - 385
    )


def gregorian_to_hijri(year: int, month: int, date: int) -> tuple[int, int, int]:
    """Convert a Gregorian date to a Hijri ``(year, month, date)`` triple."""
    return julian_to_hijri(julian_day_number(year, month, date))


def hijri_to_gregorian(year: int, month: int, date: int) -> tuple[int, int, int]:
    """Convert a Hijri date to a Gregorian ``(year, month, date)`` triple."""
    return julian_to_gregorian(hijri_to_julian(year, month, date))


# --- Calendar metadata ------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """True if Dhu al-Hijjah of *year* has 30 days."""
    return year % 30 in LEAP_YEARS_IN_CYCLE


def year_length(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def days_in_month(year: int, month: int) -> int:
    """Return 29 or 30.

    Odd months have 30 days and even months 29, except that the 12th month
    has 30 days in a leap year.
    """
    if month == 12 and is_leap_year(year):
        return 30
    if month % 2 == 0:
        return 29
    return 30


# --- Value object -----------------------------------------------------------

_FORMAT_TOKENS = re.compile(r"YYYY|MONTH|MM|M|DAY|DD|D")


@dataclass(frozen=True)
class HijriDate:
    """A single tabular Hijri date.

    ``day`` is the day of week (0 = Sunday).  ``hours``/``minutes``/
    ``seconds`` are only filled by :meth:`today`.
    """

    year: int
    month: int
    date: int
    day: int
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def of(cls, year: int, month: int = 1, date: int = 1) -> HijriDate:
        """Build a date from a Hijri triple, deriving the weekday."""
        return cls(year, month, date, weekday(hijri_to_julian(year, month, date)))

    @classmethod
    def from_gregorian(cls, d: _date) -> HijriDate:
        jdn = julian_day_number(d.year, d.month, d.day)
        year, month, date = julian_to_hijri(jdn)
        return cls(year, month, date, weekday(jdn))

    @classmethod
    def today(cls, now: datetime | None = None) -> HijriDate:
        """Return today's Hijri date from the system clock (or *now*)."""
        if now is None:
            now = datetime.now()
        base = cls.from_gregorian(now.date())
        return replace(base, hours=now.hour, minutes=now.minute, seconds=now.second)

    @property
    def julian_day(self) -> int:
        return hijri_to_julian(self.year, self.month, self.date)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def to_gregorian(self) -> _date:
        return _date(*hijri_to_gregorian(self.year, self.month, self.date))

    def first_of_month(self) -> HijriDate:
        return HijriDate.of(self.year, self.month, 1)

    def prev_month(self) -> HijriDate:
        """First day of the previous month."""
        if self.month == 1:
            return HijriDate.of(self.year - 1, 12, 1)
        return HijriDate.of(self.year, self.month - 1, 1)

    def next_month(self) -> HijriDate:
        """First day of the next month."""
        if self.month == 12:
            return HijriDate.of(self.year + 1, 1, 1)
        return HijriDate.of(self.year, self.month + 1, 1)

    def same_day(self, other: HijriDate) -> bool:
        """Compare calendar dates only, ignoring weekday and clock fields."""
        return (self.year, self.month, self.date) == (other.year, other.month, other.date)

    def month_name(self, lang: str = "en") -> str:
        return MONTH_NAMES[lang][self.month - 1]

    def day_name(self, lang: str = "en") -> str:
        return DAY_NAMES[lang][self.day]

    def format(self, template: str, lang: str = "en") -> str:
        """Substitute ``YYYY``, ``MM``/``M``, ``DD``/``D``, ``MONTH`` and ``DAY``.

        Tokens are matched longest-first in a single pass, so ``MONTH`` is
        never read as ``M`` and substituted names are not rescanned.
        """
        values = {
            "YYYY": str(self.year),
            "MONTH": self.month_name(lang),
            "MM": f"{self.month:02d}",
            "M": str(self.month),
            "DAY": self.day_name(lang),
            "DD": f"{self.date:02d}",
            "D": str(self.date),
        }
        return _FORMAT_TOKENS.sub(lambda m: values[m.group(0)], template)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.date:02d}"
