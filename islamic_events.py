"""Islamic occasions on fixed Hijri dates."""

from __future__ import annotations

from typing import NamedTuple

from hijri_date import HijriDate


class IslamicEvent(NamedTuple):
    key: str
    name_en: str
    name_ar: str
    month: int
    day: int


# --- Event registry: (key, English name, Arabic name, month, day) -----------

EVENTS: list[IslamicEvent] = [
    IslamicEvent("new_year",      "Islamic New Year", "رأس السنة الهجرية", 1, 1),
    IslamicEvent("ashura",        "Ashura",           "عاشوراء",           1, 10),
    IslamicEvent("mawlid",        "Mawlid al-Nabi",   "المولد النبوي",     3, 12),
    IslamicEvent("isra_miraj",    "Isra and Mi'raj",  "الإسراء والمعراج",  7, 27),
    IslamicEvent("ramadan_start", "Start of Ramadan", "بداية رمضان",       9, 1),
    IslamicEvent("laylat_qadr",   "Laylat al-Qadr",   "ليلة القدر",        9, 27),
    IslamicEvent("eid_fitr",      "Eid al-Fitr",      "عيد الفطر",         10, 1),
    IslamicEvent("arafah",        "Day of Arafah",    "يوم عرفة",          12, 9),
    IslamicEvent("eid_adha",      "Eid al-Adha",      "عيد الأضحى",        12, 10),
]

_BY_KEY = {e.key: e for e in EVENTS}

ALL_KEYS: list[str] = [e.key for e in EVENTS]


def event_name(event: IslamicEvent, lang: str = "en") -> str:
    return event.name_ar if lang == "ar" else event.name_en


def events_for_month(
    month: int, enabled_keys: set[str], lang: str = "en",
) -> dict[int, list[str]]:
    """Return {day: [name, ...]} for all enabled events in a Hijri month."""
    result: dict[int, list[str]] = {}
    for event in EVENTS:
        if event.key in enabled_keys and event.month == month:
            result.setdefault(event.day, []).append(event_name(event, lang))
    return result


def upcoming_events(
    today: HijriDate, enabled_keys: set[str], limit: int = 3,
) -> list[tuple[HijriDate, IslamicEvent, int]]:
    """Return the next occurrences of enabled events, nearest first.

    Each entry is ``(date, event, days_until)``; an event falling on
    *today* is included with ``days_until == 0``.
    """
    today_jdn = today.julian_day
    found: list[tuple[HijriDate, IslamicEvent, int]] = []
    for key in enabled_keys:
        event = _BY_KEY.get(key)
        if event is None:
            continue
        when = HijriDate.of(today.year, event.month, event.day)
        if when.julian_day < today_jdn:
            when = HijriDate.of(today.year + 1, event.month, event.day)
        found.append((when, event, when.julian_day - today_jdn))
    found.sort(key=lambda item: (item[2], ALL_KEYS.index(item[1].key)))
    return found[:limit]
