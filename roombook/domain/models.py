"""Domain models for the meeting-room booking system."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roombook.services.timeparse import canonical_date, canonical_time


class GroupingMode(StrEnum):
    BY_DATE = "by-date"
    BY_ROOM = "by-room"


class ActivityType(StrEnum):
    CREATED = "created"
    DELETED = "deleted"
    REJECTED = "rejected"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    capacity: int = Field(gt=0)


class Booking(BaseModel):
    """A reservation of one room over ``[start_time, end_time)`` on ``date``.

    Dates and times are canonical zero-padded strings; the ordering of
    ``start_time < end_time`` is checked by ``validate_booking`` before the
    store accepts the booking, not here.
    """

    id: str = Field(default_factory=_new_id)
    room_id: str
    title: str
    date: str
    start_time: str
    end_time: str
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        return canonical_date(value)

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return canonical_time(value)


class SlotAvailability(BaseModel):
    slot: str
    slot_end: str
    is_available: bool
    booking: Booking | None = None


class OverviewGroup(BaseModel):
    key: str
    label: str
    bookings: list[Booking] = Field(default_factory=list)


class Overview(BaseModel):
    mode: GroupingMode
    filter: str | None = None
    total: int
    groups: list[OverviewGroup] = Field(default_factory=list)


class ActivityEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    booking_id: str | None = None
    timestamp: datetime = Field(default_factory=_utcnow)
    type: ActivityType
    payload: dict = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class BookingRequest(BaseModel):
    """Candidate booking as submitted by a client, before validation."""

    room_id: str
    title: str = ""
    date: str
    start_time: str
    end_time: str

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        return value.strip()

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        return canonical_date(value)

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return canonical_time(value)


class RoomSummary(BaseModel):
    room: Room
    booking_count: int


class CheckResult(BaseModel):
    ok: bool
    reason: str | None = None
    conflict: Booking | None = None
