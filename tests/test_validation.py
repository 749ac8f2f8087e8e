"""Tests for candidate-booking validation."""

import pytest

from roombook.domain.models import Booking, BookingRequest
from roombook.exceptions import (
    BookingConflictError,
    BookingRejected,
    EmptyTitleError,
    InvalidTimeRangeError,
)
from roombook.services.validation import validate_booking

_EXISTING = [
    Booking(
        room_id="atlas",
        title="Team Standup",
        date="2026-02-03",
        start_time="09:00",
        end_time="10:00",
    )
]


def _request(**overrides) -> BookingRequest:
    defaults = dict(
        room_id="atlas",
        title="Design review",
        date="2026-02-03",
        start_time="10:00",
        end_time="11:00",
    )
    defaults.update(overrides)
    return BookingRequest(**defaults)


def test_valid_request_passes():
    validate_booking(_request(), _EXISTING)


def test_blank_title_rejected_before_time_checks():
    with pytest.raises(EmptyTitleError) as exc_info:
        validate_booking(_request(title="   ", start_time="11:00", end_time="10:00"), _EXISTING)
    assert str(exc_info.value) == "Please enter a meeting title."


@pytest.mark.parametrize("start, end", [("10:00", "09:00"), ("09:00", "09:00")])
def test_invalid_time_range(start, end):
    with pytest.raises(InvalidTimeRangeError) as exc_info:
        validate_booking(_request(start_time=start, end_time=end), [])
    assert str(exc_info.value) == "End time must be after start time."


def test_conflict_names_the_existing_booking():
    with pytest.raises(BookingConflictError) as exc_info:
        validate_booking(_request(start_time="09:30", end_time="10:30"), _EXISTING)
    assert exc_info.value.conflict is _EXISTING[0]
    assert str(exc_info.value) == (
        'Time conflict: "Team Standup" is already booked from 9:00 AM to 10:00 AM.'
    )


def test_all_rejections_share_a_base_class():
    with pytest.raises(BookingRejected):
        validate_booking(_request(start_time="09:00", end_time="09:30"), _EXISTING)


def test_exclude_id_allows_rebooking_same_slot():
    validate_booking(
        _request(start_time="09:00", end_time="10:00"),
        _EXISTING,
        exclude_id=_EXISTING[0].id,
    )
