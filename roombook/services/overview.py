"""Sorting, filtering and grouping of bookings for the overview."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from roombook.domain.models import (
    Booking,
    GroupingMode,
    Overview,
    OverviewGroup,
    Room,
)


def bookings_for_room_and_date(
    room_id: str, date: str, bookings: Iterable[Booking]
) -> list[Booking]:
    return [b for b in bookings if b.room_id == room_id and b.date == date]


def bookings_for_date(date: str, bookings: Iterable[Booking]) -> list[Booking]:
    return [b for b in bookings if b.date == date]


def sort_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    """Stable sort by ``(date, start_time)``, both compared as strings."""
    return sorted(bookings, key=lambda b: (b.date, b.start_time))


def group_bookings(
    bookings: Iterable[Booking], key: Callable[[Booking], str]
) -> dict[str, list[Booking]]:
    """Group bookings by *key*, keeping groups in first-seen order.

    Groups are not sorted; pre-sort the input to get chronological groups.
    """
    groups: dict[str, list[Booking]] = {}
    for booking in bookings:
        groups.setdefault(key(booking), []).append(booking)
    return groups


def filter_options(
    bookings: Iterable[Booking], rooms: Sequence[Room], mode: GroupingMode
) -> list[str]:
    """Values a caller may pass as the overview filter for *mode*."""
    if mode == GroupingMode.BY_ROOM:
        return [room.id for room in rooms]
    return sorted({b.date for b in bookings})


def build_overview(
    bookings: Iterable[Booking],
    rooms: Sequence[Room],
    mode: GroupingMode,
    filter_value: str | None = None,
) -> Overview:
    """Build the grouped overview view model.

    ``by-date`` sorts globally and groups by date, so groups appear in
    chronological order. ``by-room`` yields one group per room in the
    canonical room order, including rooms without bookings; bookings for
    unknown rooms are appended after them.
    """
    ordered = sort_bookings(bookings)

    if mode == GroupingMode.BY_DATE:
        if filter_value is not None:
            ordered = [b for b in ordered if b.date == filter_value]
        grouped = group_bookings(ordered, key=lambda b: b.date)
        groups = [
            OverviewGroup(key=date, label=date, bookings=items)
            for date, items in grouped.items()
        ]
    else:
        if filter_value is not None:
            ordered = [b for b in ordered if b.room_id == filter_value]
        grouped = group_bookings(ordered, key=lambda b: b.room_id)
        groups = []
        for room in rooms:
            if filter_value is not None and room.id != filter_value:
                continue
            groups.append(
                OverviewGroup(
                    key=room.id, label=room.name, bookings=grouped.pop(room.id, [])
                )
            )
        for room_id, items in grouped.items():
            groups.append(
                OverviewGroup(key=room_id, label="Unknown Room", bookings=items)
            )

    return Overview(
        mode=mode,
        filter=filter_value,
        total=sum(len(g.bookings) for g in groups),
        groups=groups,
    )
