"""Time-slot generation and per-slot availability for a room and date."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from roombook.domain.models import Booking, SlotAvailability
from roombook.services.conflicts import intervals_overlap, time_to_minutes
from roombook.services.overview import bookings_for_room_and_date

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 18
DEFAULT_INTERVAL_MINUTES = 30


def _minutes_to_time(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def generate_time_slots(
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
    interval_minutes: int = DEFAULT_INTERVAL_MINUTES,
) -> list[str]:
    """Return every boundary time from ``start_hour:00`` to ``end_hour:00``.

    Both ends are included, so the defaults give 21 entries
    (08:00, 08:30, ..., 17:30, 18:00).
    """
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    if not 0 <= start_hour <= end_hour <= 23:
        raise ValueError("hours must satisfy 0 <= start_hour <= end_hour <= 23")

    end = end_hour * 60
    slots = [
        _minutes_to_time(minute)
        for minute in range(start_hour * 60, end, interval_minutes)
    ]
    slots.append(_minutes_to_time(end))
    return slots


def next_slot(value: str, interval_minutes: int = DEFAULT_INTERVAL_MINUTES) -> str:
    """Return the boundary *interval_minutes* after *value*."""
    return _minutes_to_time(time_to_minutes(value) + interval_minutes)


def format_time_display(value: str) -> str:
    """Format ``HH:MM`` for display, e.g. ``"09:00" -> "9:00 AM"``."""
    total = time_to_minutes(value)
    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def availability_for_room_and_date(
    room_id: str,
    date: str,
    bookings: Iterable[Booking],
    slots: Sequence[str],
) -> list[SlotAvailability]:
    """Mark each cell ``[slots[i], slots[i + 1])`` as available or booked.

    A cell is unavailable when it overlaps any booking of *room_id* on
    *date*; the first such booking is attached. The last boundary only closes
    the final cell and produces no entry of its own.
    """
    room_bookings = bookings_for_room_and_date(room_id, date, bookings)

    result: list[SlotAvailability] = []
    for slot, slot_end in zip(slots, slots[1:]):
        booking = next(
            (
                b
                for b in room_bookings
                if intervals_overlap(slot, slot_end, b.start_time, b.end_time)
            ),
            None,
        )
        result.append(
            SlotAvailability(
                slot=slot,
                slot_end=slot_end,
                is_available=booking is None,
                booking=booking,
            )
        )
    return result
