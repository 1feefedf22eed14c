"""Islamic occasion lookup tests."""

from hijri_date import HijriDate
from islamic_events import (
    ALL_KEYS,
    EVENTS,
    event_name,
    events_for_month,
    upcoming_events,
)


def test_registry_dates_exist_every_year():
    for ev in EVENTS:
        assert 1 <= ev.month <= 12
        assert 1 <= ev.day <= 29
    assert len(set(ALL_KEYS)) == len(EVENTS)


def test_events_for_ramadan():
    assert events_for_month(9, set(ALL_KEYS)) == {
        1: ["Start of Ramadan"],
        27: ["Laylat al-Qadr"],
    }


def test_events_for_month_respects_enabled_keys():
    assert events_for_month(12, {"eid_adha"}, "ar") == {10: ["عيد الأضحى"]}
    assert events_for_month(12, set()) == {}
    assert events_for_month(2, set(ALL_KEYS)) == {}


def test_event_name_languages():
    eid = next(e for e in EVENTS if e.key == "eid_fitr")
    assert event_name(eid) == "Eid al-Fitr"
    assert event_name(eid, "ar") == "عيد الفطر"


def test_upcoming_events_nearest_first():
    today = HijriDate.of(1446, 9, 1)
    result = upcoming_events(today, set(ALL_KEYS), limit=3)
    assert [(ev.key, days) for _when, ev, days in result] == [
        ("ramadan_start", 0),
        ("laylat_qadr", 26),
        ("eid_fitr", 30),
    ]
    when, _ev, _days = result[2]
    assert (when.year, when.month, when.date) == (1446, 10, 1)


def test_upcoming_events_wrap_into_next_year():
    today = HijriDate.of(1446, 12, 11)
    [(when, ev, days)] = upcoming_events(today, {"new_year"})
    assert ev.key == "new_year"
    assert (when.year, when.month, when.date) == (1447, 1, 1)
    assert days == 19


def test_upcoming_events_ignores_unknown_keys():
    today = HijriDate.of(1446, 1, 1)
    assert upcoming_events(today, {"not_an_event"}) == []
