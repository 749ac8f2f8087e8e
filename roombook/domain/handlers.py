"""Domain event handlers — wired up at application startup."""

from __future__ import annotations

import logging

from roombook.domain.bus import EventBus
from roombook.domain.events import BookingCreated, BookingDeleted, BookingRejected
from roombook.domain.models import ActivityEntry, ActivityType
from roombook.repos.memory import ActivityRepository, BookingRepository

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Wires booking-event handlers to the bus with access to the repositories."""

    def __init__(
        self,
        bus: EventBus,
        booking_repo: BookingRepository,
        activity_repo: ActivityRepository,
    ) -> None:
        self.bus = bus
        self.booking_repo = booking_repo
        self.activity_repo = activity_repo
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(BookingCreated, self.on_booking_created)
        self.bus.subscribe(BookingDeleted, self.on_booking_deleted)
        self.bus.subscribe(BookingRejected, self.on_booking_rejected)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_booking_created(self, event: BookingCreated) -> None:
        stored = self.booking_repo.get(event.booking_id)
        if stored is None:
            return

        self.activity_repo.add(
            ActivityEntry(
                booking_id=event.booking_id,
                type=ActivityType.CREATED,
                payload={
                    "room_id": stored.room_id,
                    "date": stored.date,
                    "start_time": stored.start_time,
                    "end_time": stored.end_time,
                    "title": stored.title,
                },
            )
        )
        logger.debug("Recorded creation of booking %s", event.booking_id)

    def on_booking_deleted(self, event: BookingDeleted) -> None:
        # The booking is already gone from the store; the event carries what we need.
        self.activity_repo.add(
            ActivityEntry(
                booking_id=event.booking_id,
                type=ActivityType.DELETED,
                payload={
                    "room_id": event.room_id,
                    "date": event.date,
                    "title": event.title,
                },
            )
        )
        logger.debug("Recorded deletion of booking %s", event.booking_id)

    def on_booking_rejected(self, event: BookingRejected) -> None:
        self.activity_repo.add(
            ActivityEntry(
                booking_id=event.conflicting_booking_id,
                type=ActivityType.REJECTED,
                payload={
                    "room_id": event.room_id,
                    "date": event.date,
                    "reason": event.reason,
                },
            )
        )
        logger.debug("Recorded rejected booking for room %s", event.room_id)
