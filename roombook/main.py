"""FastAPI application — entry point for the meeting-room booking service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query

from roombook.config import load_settings
from roombook.domain.bus import EventBus
from roombook.domain.events import BookingCreated, BookingDeleted, BookingRejected
from roombook.domain.handlers import HandlerRegistry
from roombook.domain.models import (
    ActivityEntry,
    Booking,
    BookingRequest,
    CheckResult,
    GroupingMode,
    Overview,
    Room,
    RoomSummary,
    SlotAvailability,
)
from roombook.exceptions import (
    BookingConflictError,
    BookingRejected as BookingRejectedError,
    ParseError,
)
from roombook.repos.memory import (
    ActivityRepository,
    BookingRepository,
    create_booking_repository,
    create_room_repository,
)
from roombook.services.overview import build_overview, filter_options, sort_bookings
from roombook.services.slots import (
    availability_for_room_and_date,
    generate_time_slots,
)
from roombook.services.timeparse import canonical_date
from roombook.services.validation import validate_booking

settings = load_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Meeting Room Booking Service")

# ── Singletons (created at import time for simplicity) ────────────────
event_bus = EventBus()
room_repo = create_room_repository()
booking_repo = (
    create_booking_repository() if settings.seed_data else BookingRepository()
)
activity_repo = ActivityRepository()

handler_registry = HandlerRegistry(
    bus=event_bus,
    booking_repo=booking_repo,
    activity_repo=activity_repo,
)


def _time_slots() -> list[str]:
    return generate_time_slots(
        settings.day_start_hour, settings.day_end_hour, settings.slot_minutes
    )


def _parse_date_param(value: str) -> str:
    try:
        return canonical_date(value)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _get_room_or_404(room_id: str) -> Room:
    room = room_repo.get(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/rooms", response_model=list[RoomSummary])
def list_rooms(date: str | None = None) -> list[RoomSummary]:
    """Return rooms in canonical order with their booking count for *date*."""
    day = _parse_date_param(date) if date is not None else None
    bookings = booking_repo.list_all()
    return [
        RoomSummary(
            room=room,
            booking_count=sum(
                1
                for b in bookings
                if b.room_id == room.id and (day is None or b.date == day)
            ),
        )
        for room in room_repo.list_all()
    ]


@app.get("/rooms/{room_id}", response_model=Room)
def get_room(room_id: str) -> Room:
    return _get_room_or_404(room_id)


@app.get("/rooms/{room_id}/availability", response_model=list[SlotAvailability])
def room_availability(room_id: str, date: str) -> list[SlotAvailability]:
    """Return per-slot availability for one room on one day."""
    room = _get_room_or_404(room_id)
    return availability_for_room_and_date(
        room.id, _parse_date_param(date), booking_repo.list_all(), _time_slots()
    )


@app.get("/slots", response_model=list[str])
def list_slots() -> list[str]:
    """Return the boundary times of the configured operating day."""
    return _time_slots()


@app.get("/bookings", response_model=list[Booking])
def list_bookings() -> list[Booking]:
    """Return all bookings sorted by date and start time."""
    return sort_bookings(booking_repo.list_all())


@app.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(booking_id: str) -> Booking:
    booking = booking_repo.get(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@app.post("/bookings/check", response_model=CheckResult)
def check_booking(payload: BookingRequest) -> CheckResult:
    """Validate a candidate booking without touching the store."""
    _get_room_or_404(payload.room_id)
    try:
        validate_booking(payload, booking_repo.list_all())
    except BookingConflictError as exc:
        return CheckResult(ok=False, reason=str(exc), conflict=exc.conflict)
    except BookingRejectedError as exc:
        return CheckResult(ok=False, reason=str(exc))
    return CheckResult(ok=True)


@app.post("/bookings", response_model=Booking, status_code=201)
def create_booking(payload: BookingRequest) -> Booking:
    """Validate a candidate booking and, if accepted, add it to the store."""
    _get_room_or_404(payload.room_id)
    try:
        validate_booking(payload, booking_repo.list_all())
    except BookingRejectedError as exc:
        conflict = getattr(exc, "conflict", None)
        event_bus.publish(
            BookingRejected(
                room_id=payload.room_id,
                date=payload.date,
                reason=str(exc),
                conflicting_booking_id=conflict.id if conflict else None,
            )
        )
        logger.info("Rejected booking for %s on %s: %s", payload.room_id, payload.date, exc)
        if conflict is not None:
            raise HTTPException(
                status_code=409,
                detail={"message": str(exc), "conflicting_booking_id": conflict.id},
            ) from exc
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    booking = Booking(**payload.model_dump())
    booking_repo.add(booking)
    logger.info(
        "Created booking %s for %s on %s %s-%s",
        booking.id,
        booking.room_id,
        booking.date,
        booking.start_time,
        booking.end_time,
    )

    event_bus.publish(
        BookingCreated(booking_id=booking.id, room_id=booking.room_id, date=booking.date)
    )
    return booking


@app.delete("/bookings/{booking_id}", status_code=200)
def delete_booking(booking_id: str) -> dict:
    """Remove a booking from the store."""
    booking = booking_repo.delete(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    logger.info("Deleted booking %s", booking_id)

    event_bus.publish(
        BookingDeleted(
            booking_id=booking.id,
            room_id=booking.room_id,
            date=booking.date,
            title=booking.title,
        )
    )
    return {"status": "deleted", "id": booking_id}


@app.get("/overview", response_model=Overview)
def overview(
    mode: GroupingMode = GroupingMode.BY_DATE,
    filter_value: str | None = Query(default=None, alias="filter"),
) -> Overview:
    """Return bookings grouped by date or by room."""
    if filter_value is not None and mode == GroupingMode.BY_DATE:
        filter_value = _parse_date_param(filter_value)
    return build_overview(
        booking_repo.list_all(), room_repo.list_all(), mode, filter_value
    )


@app.get("/overview/filters", response_model=list[str])
def overview_filters(mode: GroupingMode = GroupingMode.BY_DATE) -> list[str]:
    """Return the values accepted as the overview filter for *mode*."""
    return filter_options(booking_repo.list_all(), room_repo.list_all(), mode)


@app.get("/activity", response_model=list[ActivityEntry])
def list_activity() -> list[ActivityEntry]:
    """Return the activity log of created, deleted and rejected bookings."""
    return activity_repo.list_all()
