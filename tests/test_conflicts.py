"""Tests for the conflict-detection service."""

import pytest

from roombook.domain.models import Booking, BookingRequest
from roombook.exceptions import ParseError, ParseErrorKind
from roombook.services.conflicts import (
    find_conflict,
    intervals_overlap,
    is_valid_time_range,
    time_to_minutes,
)


def _make_booking(
    start: str,
    end: str,
    room_id: str = "1",
    date: str = "2026-02-03",
    title: str = "Existing",
) -> Booking:
    return Booking(room_id=room_id, title=title, date=date, start_time=start, end_time=end)


def _candidate(start: str, end: str, room_id: str = "1", date: str = "2026-02-03"):
    return BookingRequest(
        room_id=room_id, title="Candidate", date=date, start_time=start, end_time=end
    )


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("23:59") == 1439


def test_time_to_minutes_is_monotonic():
    times = [f"{h:02d}:{m:02d}" for h in range(24) for m in (0, 1, 30, 59)]
    minutes = [time_to_minutes(t) for t in times]
    assert minutes == sorted(minutes)
    assert len(set(minutes)) == len(minutes)


def test_time_to_minutes_rejects_malformed():
    with pytest.raises(ParseError) as exc_info:
        time_to_minutes("9am")
    assert exc_info.value.kind == ParseErrorKind.MALFORMED


def test_adjacent_intervals_do_not_overlap():
    assert intervals_overlap("09:00", "10:00", "10:00", "11:00") is False
    assert intervals_overlap("10:00", "11:00", "09:00", "10:00") is False


@pytest.mark.parametrize(
    "a, b",
    [
        (("09:00", "10:00"), ("09:30", "10:30")),
        (("09:00", "12:00"), ("10:00", "11:00")),
        (("09:00", "10:00"), ("11:00", "12:00")),
        (("09:00", "10:00"), ("09:00", "10:00")),
    ],
)
def test_overlap_is_symmetric(a, b):
    assert intervals_overlap(*a, *b) == intervals_overlap(*b, *a)


def test_contained_interval_overlaps():
    assert intervals_overlap("09:00", "12:00", "10:00", "11:00") is True


def test_is_valid_time_range():
    assert is_valid_time_range("10:00", "09:00") is False
    assert is_valid_time_range("09:00", "09:00") is False
    assert is_valid_time_range("09:00", "09:01") is True


def test_no_conflict_without_bookings_for_room_and_date():
    assert find_conflict(_candidate("09:00", "10:00"), []) is None
    existing = [_make_booking("09:00", "10:00", room_id="2")]
    assert find_conflict(_candidate("09:00", "10:00"), existing) is None


def test_partial_overlap_is_a_conflict():
    existing = [_make_booking("09:00", "10:00")]
    conflict = find_conflict(_candidate("09:30", "10:30"), existing)
    assert conflict is existing[0]


def test_exact_boundary_no_conflict():
    """When existing.end_time == candidate.start_time, there is no conflict."""
    existing = [_make_booking("09:00", "10:00")]
    assert find_conflict(_candidate("10:00", "11:00"), existing) is None


def test_other_room_or_date_never_conflicts():
    existing = [
        _make_booking("09:00", "10:00", room_id="2"),
        _make_booking("09:00", "10:00", date="2026-02-04"),
    ]
    assert find_conflict(_candidate("09:00", "10:00"), existing) is None


def test_first_conflict_in_iteration_order():
    first = _make_booking("09:00", "10:00", title="First")
    second = _make_booking("09:30", "11:00", title="Second")
    conflict = find_conflict(_candidate("09:45", "10:15"), [second, first])
    assert conflict is second


def test_excluded_booking_is_skipped():
    existing = [_make_booking("09:00", "10:00")]
    candidate = _candidate("09:00", "10:00")
    assert find_conflict(candidate, existing, exclude_id=existing[0].id) is None
