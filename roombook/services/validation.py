"""Service for validating a candidate booking before the store accepts it."""

from __future__ import annotations

from collections.abc import Iterable

from roombook.domain.models import Booking, BookingRequest
from roombook.exceptions import (
    BookingConflictError,
    EmptyTitleError,
    InvalidTimeRangeError,
)
from roombook.services.conflicts import find_conflict, is_valid_time_range
from roombook.services.slots import format_time_display


def validate_booking(
    request: BookingRequest,
    existing_bookings: Iterable[Booking],
    exclude_id: str | None = None,
) -> None:
    """Raise a ``BookingRejected`` subclass if *request* cannot be accepted.

    Checks run in order: blank title, then time range, then overlap with an
    existing booking for the same room and date.
    """
    if not request.title.strip():
        raise EmptyTitleError()

    if not is_valid_time_range(request.start_time, request.end_time):
        raise InvalidTimeRangeError(request.start_time, request.end_time)

    conflict = find_conflict(request, existing_bookings, exclude_id=exclude_id)
    if conflict is not None:
        raise BookingConflictError(
            conflict,
            f'Time conflict: "{conflict.title}" is already booked from '
            f"{format_time_display(conflict.start_time)} to "
            f"{format_time_display(conflict.end_time)}.",
        )
