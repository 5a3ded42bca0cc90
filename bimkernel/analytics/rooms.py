"""Room recipes: schedules, batch numbering, tag selection."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from pydantic import BaseModel, Field

from bimkernel.models.entity import AttributeSource
from bimkernel.numbering.allocator import allocate_identifier, next_available_number
from bimkernel.numbering.taken import TakenSet

logger = logging.getLogger(__name__)


class RoomRow(BaseModel):
    """One exported room."""

    room_id: Any
    name: str = ""
    number: str = ""
    level: str = ""
    area: float = 0.0

    @property
    def placed(self) -> bool:
        return self.area > 0


class RoomSchedule(BaseModel):
    """Rooms exported for a document, with their summed area."""

    rows: list[RoomRow] = Field(default_factory=list)
    unplaced_skipped: int = 0

    @property
    def total_area(self) -> float:
        return sum(row.area for row in self.rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rooms": [row.model_dump(mode="json") for row in self.rows],
            "room_count": len(self.rows),
            "total_area": self.total_area,
            "unplaced_skipped": self.unplaced_skipped,
        }


def room_schedule(
    rooms: Iterable[AttributeSource],
    include_unplaced: bool = False,
) -> RoomSchedule:
    """Tabulate *rooms*.

    A room with no area, or an area of zero or less, is unplaced and is
    left out unless *include_unplaced* is set.
    """
    schedule = RoomSchedule()
    for room in rooms:
        area = room.get_number("area") or 0.0
        if area <= 0 and not include_unplaced:
            schedule.unplaced_skipped += 1
            continue
        schedule.rows.append(RoomRow(
            room_id=room.entity_id,
            name=room.get_string("name") or "",
            number=room.get_string("number") or "",
            level=room.get_string("level") or "",
            area=area,
        ))

    logger.info(
        "Room schedule: %d rooms, %.2f total area, %d unplaced skipped",
        len(schedule.rows), schedule.total_area, schedule.unplaced_skipped,
    )
    return schedule


def number_rooms(
    rooms: Iterable[AttributeSource],
    taken: TakenSet,
    attribute: str = "number",
) -> list[tuple[Hashable, str]]:
    """Give each room a unique number, recording each one in *taken*.

    A room keeps its requested number when it is free; otherwise the number
    is renumbered.  Rooms without a requested number get the next free
    plain number.  Returns ``(room_id, number)`` pairs in input order for
    the caller to write back.
    """
    assigned: list[tuple[Hashable, str]] = []
    for room in rooms:
        requested = room.get_string(attribute)
        if requested:
            number = allocate_identifier(requested, taken)
        else:
            number = next_available_number(taken)
        taken.add(number)
        assigned.append((room.entity_id, number))
    return assigned


def untagged_rooms(
    rooms: Iterable[AttributeSource],
    tagged_ids: Iterable[Hashable],
    room_ids: Iterable[Hashable] | None = None,
) -> list[AttributeSource]:
    """Rooms that still need a tag.

    Rooms in *tagged_ids* are skipped.  When *room_ids* is given, only
    those rooms are considered.
    """
    tagged = set(tagged_ids)
    wanted = set(room_ids) if room_ids is not None else None
    return [
        room for room in rooms
        if room.entity_id not in tagged
        and (wanted is None or room.entity_id in wanted)
    ]
