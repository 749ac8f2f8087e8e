"""Error taxonomy for booking validation and input parsing."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roombook.domain.models import Booking


class ParseErrorKind(StrEnum):
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


class ParseError(ValueError):
    """A date or time string could not be turned into a valid value."""

    def __init__(self, kind: ParseErrorKind, value: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class BookingRejected(Exception):
    """Base class for a candidate booking the store must not accept."""


class EmptyTitleError(BookingRejected):
    def __init__(self) -> None:
        super().__init__("Please enter a meeting title.")


class InvalidTimeRangeError(BookingRejected):
    def __init__(self, start_time: str, end_time: str) -> None:
        super().__init__("End time must be after start time.")
        self.start_time = start_time
        self.end_time = end_time


class BookingConflictError(BookingRejected):
    """Raised with the first existing booking that overlaps the candidate."""

    def __init__(self, conflict: Booking, message: str) -> None:
        super().__init__(message)
        self.conflict = conflict
