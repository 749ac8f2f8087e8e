"""Domain events emitted when the booking store changes."""

from __future__ import annotations

from pydantic import BaseModel


class BookingCreated(BaseModel):
    """Fired after a validated booking has been added to the store."""

    booking_id: str
    room_id: str
    date: str


class BookingDeleted(BaseModel):
    """Fired after a booking has been removed from the store."""

    booking_id: str
    room_id: str
    date: str
    title: str


class BookingRejected(BaseModel):
    """Fired when a candidate booking fails validation.

    ``conflicting_booking_id`` is set only for overlap rejections.
    """

    room_id: str
    date: str
    reason: str
    conflicting_booking_id: str | None = None
