"""Service for detecting booking conflicts between half-open time intervals."""

from __future__ import annotations

from collections.abc import Iterable

from roombook.domain.models import Booking, BookingRequest
from roombook.services.timeparse import parse_time


def time_to_minutes(value: str) -> int:
    """Convert an ``HH:MM`` string to minutes since midnight."""
    parsed = parse_time(value)
    return parsed.hour * 60 + parsed.minute


def intervals_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """Return True if ``[start_a, end_a)`` and ``[start_b, end_b)`` overlap.

    Overlap rule: start_a < end_b AND end_a > start_b.
    Exact boundary touches (end_a == start_b) are NOT considered overlaps.
    """
    return (
        time_to_minutes(start_a) < time_to_minutes(end_b)
        and time_to_minutes(end_a) > time_to_minutes(start_b)
    )


def is_valid_time_range(start_time: str, end_time: str) -> bool:
    """Zero-length and inverted ranges are rejected."""
    return time_to_minutes(end_time) > time_to_minutes(start_time)


def find_conflict(
    candidate: Booking | BookingRequest,
    existing_bookings: Iterable[Booking],
    exclude_id: str | None = None,
) -> Booking | None:
    """Return the first existing booking that overlaps *candidate*, or None.

    Only bookings for the same room AND the same date are considered, and the
    booking with id *exclude_id* is skipped. Ties are resolved by the
    iteration order of *existing_bookings*.
    """
    for booking in existing_bookings:
        if booking.room_id != candidate.room_id or booking.date != candidate.date:
            continue
        if exclude_id is not None and booking.id == exclude_id:
            continue
        if intervals_overlap(
            candidate.start_time, candidate.end_time, booking.start_time, booking.end_time
        ):
            return booking
    return None
