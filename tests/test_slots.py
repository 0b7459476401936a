from datetime import date, datetime, timedelta, timezone

import pytest

from schedule_viewer.application.scheduling.slots import (
    CalendarConfig,
    TimeSlot,
    appointments_in_day_slot,
    appointments_in_slot,
    format_slot_label,
    generate_slots,
    slots_for,
)
from schedule_viewer.exceptions import InvalidWindow, ScheduleError

from fakes import appt, at

DAY = date(2024, 10, 14)


def test_default_window_has_twenty_half_hour_slots():
    slots = generate_slots(DAY)
    assert len(slots) == 20
    assert slots[0].start == datetime(2024, 10, 14, 8, 0)
    assert slots[-1].end == datetime(2024, 10, 14, 18, 0)
    assert [s.label for s in slots[:3]] == ["8:00 AM", "8:30 AM", "9:00 AM"]
    assert slots[-1].label == "5:30 PM"


@pytest.mark.parametrize("start,end,width", [(8, 18, 30), (0, 24, 15), (9, 12, 60), (6, 7, 5), (13, 14, 20)])
def test_slots_are_contiguous_and_cover_window(start, end, width):
    slots = generate_slots(DAY, start, end, width)
    assert len(slots) == (end - start) * 60 // width
    assert slots[0].start == datetime(2024, 10, 14) + timedelta(hours=start)
    assert slots[-1].end == datetime(2024, 10, 14) + timedelta(hours=end)
    for prev, nxt in zip(slots, slots[1:]):
        assert prev.end == nxt.start
        assert prev.end - prev.start == timedelta(minutes=width)


def test_time_of_day_of_reference_is_ignored():
    assert generate_slots(datetime(2024, 10, 14, 15, 47)) == generate_slots(DAY)


def test_aware_reference_keeps_its_timezone():
    tz = timezone(timedelta(hours=-5))
    slots = generate_slots(datetime(2024, 10, 14, 23, 0, tzinfo=tz))
    assert slots[0].start == datetime(2024, 10, 14, 8, 0, tzinfo=tz)


def test_slots_for_is_idempotent():
    config = CalendarConfig(start_hour=9, end_hour=17, slot_minutes=15)
    assert slots_for(DAY, config) == slots_for(DAY, config)


def test_labels_around_noon_and_midnight():
    assert format_slot_label(datetime(2024, 1, 1, 0, 0)) == "12:00 AM"
    assert format_slot_label(datetime(2024, 1, 1, 12, 30)) == "12:30 PM"
    assert format_slot_label(datetime(2024, 1, 1, 13, 5)) == "1:05 PM"


@pytest.mark.parametrize("start,end,width", [(18, 8, 30), (8, 8, 30), (8, 18, 7), (8, 18, 0), (8, 25, 30), (-1, 8, 30)])
def test_invalid_windows_are_rejected(start, end, width):
    with pytest.raises(InvalidWindow):
        generate_slots(DAY, start, end, width)


def test_invalid_window_is_a_schedule_error():
    with pytest.raises(ScheduleError):
        generate_slots(DAY, 10, 9, 30)


def test_boundary_inclusive_overlap():
    slot = TimeSlot(start=at(DAY, "09:30"), end=at(DAY, "10:00"), label="9:30 AM")
    ends_at_slot_start = appt("a", at(DAY, "09:00"), at(DAY, "09:30"))
    starts_at_slot_end = appt("b", at(DAY, "10:00"), at(DAY, "10:30"))
    inside = appt("c", at(DAY, "09:40"), at(DAY, "09:50"))
    before = appt("d", at(DAY, "08:00"), at(DAY, "09:29"))
    after = appt("e", at(DAY, "10:01"), at(DAY, "10:30"))

    result = appointments_in_slot(slot, [before, ends_at_slot_start, inside, starts_at_slot_end, after])

    assert [a.id for a in result] == ["a", "c", "b"]


def test_nine_to_nine_thirty_appears_in_both_adjacent_slots():
    slots = generate_slots(DAY)
    a = appt("a", at(DAY, "09:00"), at(DAY, "09:30"))
    containing = [s.label for s in slots if appointments_in_slot(s, [a])]
    assert containing == ["8:30 AM", "9:00 AM", "9:30 AM"]


def test_day_scoped_matching_requires_same_start_day():
    other_day = DAY + timedelta(days=1)
    slot = generate_slots(DAY)[2]  # 9:00 - 9:30
    same = appt("same", at(DAY, "09:00"), at(DAY, "09:30"))
    shifted = appt("shifted", at(other_day, "09:00"), at(other_day, "09:30"))

    assert appointments_in_day_slot(DAY, slot, [same, shifted]) == [same]
    assert appointments_in_day_slot(other_day, slot, [same, shifted]) == []
