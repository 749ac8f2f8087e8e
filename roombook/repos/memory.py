"""In-memory repositories for rooms, bookings and booking activity."""

from __future__ import annotations

from datetime import date, timedelta

from roombook.domain.models import ActivityEntry, Booking, Room


class RoomRepository:
    """Dict-backed store for Room instances, in canonical (insertion) order."""

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._store: dict[str, Room] = {}
        for room in rooms or []:
            self.add(room)

    def add(self, room: Room) -> None:
        self._store[room.id] = room

    def get(self, room_id: str) -> Room | None:
        return self._store.get(room_id)

    def list_all(self) -> list[Room]:
        return list(self._store.values())


class BookingRepository:
    """Dict-backed store for Booking instances, keyed by id.

    Iteration follows insertion order, which is the order conflict checks see.
    """

    def __init__(self) -> None:
        self._store: dict[str, Booking] = {}

    def add(self, booking: Booking) -> None:
        self._store[booking.id] = booking

    def get(self, booking_id: str) -> Booking | None:
        return self._store.get(booking_id)

    def list_all(self) -> list[Booking]:
        return list(self._store.values())

    def delete(self, booking_id: str) -> Booking | None:
        return self._store.pop(booking_id, None)


class ActivityRepository:
    """List-backed store for ActivityEntry instances."""

    def __init__(self) -> None:
        self._entries: list[ActivityEntry] = []

    def add(self, entry: ActivityEntry) -> None:
        self._entries.append(entry)

    def list_all(self) -> list[ActivityEntry]:
        return sorted(self._entries, key=lambda e: e.timestamp)

    def list_for_booking(self, booking_id: str) -> list[ActivityEntry]:
        return [e for e in self.list_all() if e.booking_id == booking_id]


# ---------------------------------------------------------------------------
# Seed data – four rooms and a handful of bookings around today
# ---------------------------------------------------------------------------

SEED_ROOMS = [
    Room(id="atlas", name="Atlas", capacity=6),
    Room(id="nova", name="Nova", capacity=10),
    Room(id="ember", name="Ember", capacity=4),
    Room(id="zenith", name="Zenith", capacity=12),
]


def _seed_bookings(repo: BookingRepository, today: date) -> None:
    tomorrow = today + timedelta(days=1)

    repo.add(
        Booking(
            room_id="atlas",
            title="Sprint Planning",
            date=today.isoformat(),
            start_time="09:00",
            end_time="10:00",
        )
    )
    repo.add(
        Booking(
            room_id="nova",
            title="Design Review",
            date=today.isoformat(),
            start_time="11:00",
            end_time="12:30",
        )
    )
    repo.add(
        Booking(
            room_id="ember",
            title="1:1 Check-in",
            date=today.isoformat(),
            start_time="15:00",
            end_time="15:30",
        )
    )
    repo.add(
        Booking(
            room_id="zenith",
            title="Leadership Sync",
            date=tomorrow.isoformat(),
            start_time="10:30",
            end_time="11:30",
        )
    )


def create_room_repository() -> RoomRepository:
    """Return a RoomRepository loaded with the seed rooms."""
    return RoomRepository(SEED_ROOMS)


def create_booking_repository(today: date | None = None) -> BookingRepository:
    """Return a BookingRepository pre-loaded with sample data."""
    repo = BookingRepository()
    _seed_bookings(repo, today or date.today())
    return repo
