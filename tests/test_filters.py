from datetime import date, datetime, timedelta, timezone

from schedule_viewer.application.ports.appointments_repo import AppointmentType
from schedule_viewer.application.scheduling.filters import (
    add_days,
    by_doctor_and_day,
    by_doctor_and_range,
    by_type,
    same_calendar_day,
    sort_by_start,
    start_of_day,
    week_days,
    week_start,
)

from fakes import appt


def _at(*args):
    return datetime(*args)


def test_day_filter_matches_doctor_and_calendar_day():
    appts = [
        appt("early", _at(2024, 10, 14, 0, 0), _at(2024, 10, 14, 0, 30)),
        appt("late", _at(2024, 10, 14, 23, 30), _at(2024, 10, 15, 0, 15)),
        appt("next", _at(2024, 10, 15, 0, 0), _at(2024, 10, 15, 0, 30)),
        appt("other-doc", _at(2024, 10, 14, 9, 0), _at(2024, 10, 14, 9, 30), doctor_id="doctor-2"),
    ]
    result = by_doctor_and_day("doctor-1", date(2024, 10, 14), appts)
    assert [a.id for a in result] == ["early", "late"]


def test_day_filter_uses_local_fields_of_aware_timestamps():
    tz = timezone(timedelta(hours=-7))
    late_local = appt("late", datetime(2024, 10, 14, 23, 0, tzinfo=tz), datetime(2024, 10, 14, 23, 30, tzinfo=tz))
    # 06:00 UTC on the 15th, but still the 14th locally
    assert by_doctor_and_day("doctor-1", date(2024, 10, 14), [late_local]) == [late_local]
    assert by_doctor_and_day("doctor-1", date(2024, 10, 15), [late_local]) == []


def test_day_filter_empty_input():
    assert by_doctor_and_day("doctor-1", date(2024, 10, 14), []) == []


def test_range_is_start_inclusive_end_exclusive():
    edge_in = appt("in", _at(2024, 10, 20, 23, 59), _at(2024, 10, 21, 0, 29))
    edge_out = appt("out", _at(2024, 10, 21, 0, 0), _at(2024, 10, 21, 0, 30))
    first = appt("first", _at(2024, 10, 14, 0, 0), _at(2024, 10, 14, 0, 30))
    before = appt("before", _at(2024, 10, 13, 23, 59), _at(2024, 10, 14, 0, 10))
    other_doc = appt("other", _at(2024, 10, 16, 9, 0), _at(2024, 10, 16, 9, 30), doctor_id="doc")

    result = by_doctor_and_range("doctor-1", date(2024, 10, 14), date(2024, 10, 21),
                                 [before, first, edge_in, edge_out, other_doc])

    assert [a.id for a in result] == ["first", "in"]


def test_range_ignores_time_of_day_on_bounds():
    a = appt("a", _at(2024, 10, 14, 8, 0), _at(2024, 10, 14, 8, 30))
    result = by_doctor_and_range("doctor-1", _at(2024, 10, 14, 17, 0), _at(2024, 10, 21, 1, 0), [a])
    assert result == [a]


def test_week_range_requested_doctor_only():
    a = appt("a", _at(2024, 10, 20, 23, 59), _at(2024, 10, 21, 0, 30), doctor_id="doc")
    b = appt("b", _at(2024, 10, 21, 0, 0), _at(2024, 10, 21, 0, 30), doctor_id="doc")
    assert by_doctor_and_range("doc", date(2024, 10, 14), date(2024, 10, 21), [a, b]) == [a]


def test_week_helpers():
    assert week_start(date(2024, 10, 17)) == date(2024, 10, 14)
    assert week_start(date(2024, 10, 14)) == date(2024, 10, 14)
    assert week_start(date(2024, 10, 20)) == date(2024, 10, 14)
    assert week_start(date(2024, 10, 17), week_starts_on=6) == date(2024, 10, 13)
    assert week_days(date(2024, 10, 28))[-1] == date(2024, 11, 3)
    assert len(week_days(date(2024, 10, 14))) == 7
    assert add_days(_at(2024, 12, 31, 22, 0), 1) == date(2025, 1, 1)


def test_calendar_day_helpers():
    assert same_calendar_day(_at(2024, 10, 14, 0, 0), date(2024, 10, 14))
    assert not same_calendar_day(_at(2024, 10, 14, 0, 0), _at(2024, 11, 14, 0, 0))
    assert start_of_day(_at(2024, 10, 14, 13, 45)) == date(2024, 10, 14)


def test_by_type_accepts_enum_or_raw_string():
    a = appt("a", _at(2024, 10, 14, 9, 0), _at(2024, 10, 14, 9, 30), type=AppointmentType.PROCEDURE)
    b = appt("b", _at(2024, 10, 14, 10, 0), _at(2024, 10, 14, 10, 30), type=AppointmentType.CHECKUP)
    assert by_type(AppointmentType.PROCEDURE, [a, b]) == [a]
    assert by_type("checkup", [a, b]) == [b]
    assert by_type("unknown", [a, b]) == []


def test_sort_by_start_returns_new_list():
    late = appt("late", _at(2024, 10, 14, 11, 0), _at(2024, 10, 14, 11, 30))
    early = appt("early", _at(2024, 10, 14, 9, 0), _at(2024, 10, 14, 9, 30))
    original = [late, early]
    assert sort_by_start(original) == [early, late]
    assert original == [late, early]
