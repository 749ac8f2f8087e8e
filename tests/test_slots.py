"""Tests for time-slot generation and room availability."""

import pytest

from roombook.domain.models import Booking
from roombook.services.slots import (
    availability_for_room_and_date,
    format_time_display,
    generate_time_slots,
    next_slot,
)


def test_default_slots():
    slots = generate_time_slots()
    assert len(slots) == 21
    assert slots[0] == "08:00"
    assert slots[1] == "08:30"
    assert slots[-2] == "17:30"
    assert slots[-1] == "18:00"


def test_hourly_slots():
    assert generate_time_slots(9, 12, 60) == ["09:00", "10:00", "11:00", "12:00"]


def test_slots_are_recomputed_each_call():
    first = generate_time_slots()
    first.append("99:99")
    assert generate_time_slots()[-1] == "18:00"


@pytest.mark.parametrize(
    "args", [(8, 18, 0), (8, 18, -15), (18, 8, 30), (8, 24, 30)]
)
def test_invalid_slot_arguments(args):
    with pytest.raises(ValueError):
        generate_time_slots(*args)


def test_next_slot():
    assert next_slot("09:30") == "10:00"
    assert next_slot("09:45", 15) == "10:00"


def test_format_time_display():
    assert format_time_display("09:00") == "9:00 AM"
    assert format_time_display("00:15") == "12:15 AM"
    assert format_time_display("12:00") == "12:00 PM"
    assert format_time_display("17:30") == "5:30 PM"


def test_availability_marks_booked_cells():
    booking = Booking(
        room_id="atlas",
        title="Standup",
        date="2026-02-03",
        start_time="09:00",
        end_time="10:00",
    )
    result = availability_for_room_and_date(
        "atlas", "2026-02-03", [booking], ["09:00", "09:30", "10:00", "10:30"]
    )

    assert [(r.slot, r.slot_end) for r in result] == [
        ("09:00", "09:30"),
        ("09:30", "10:00"),
        ("10:00", "10:30"),
    ]
    assert result[0].is_available is False
    assert result[0].booking is booking
    assert result[1].is_available is False
    assert result[2].is_available is True
    assert result[2].booking is None


def test_availability_ignores_other_rooms_and_dates():
    bookings = [
        Booking(
            room_id="nova",
            title="Other room",
            date="2026-02-03",
            start_time="09:00",
            end_time="10:00",
        ),
        Booking(
            room_id="atlas",
            title="Other day",
            date="2026-02-04",
            start_time="09:00",
            end_time="10:00",
        ),
    ]
    result = availability_for_room_and_date(
        "atlas", "2026-02-03", bookings, generate_time_slots()
    )
    assert len(result) == 20
    assert all(r.is_available for r in result)


def test_availability_attaches_first_overlapping_booking():
    first = Booking(
        room_id="atlas", title="A", date="2026-02-03", start_time="09:00", end_time="09:15"
    )
    second = Booking(
        room_id="atlas", title="B", date="2026-02-03", start_time="09:15", end_time="09:30"
    )
    result = availability_for_room_and_date(
        "atlas", "2026-02-03", [first, second], ["09:00", "09:30"]
    )
    assert result[0].booking is first
