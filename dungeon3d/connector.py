"""Adjacency resolution for freshly placed rooms."""

from __future__ import annotations

import structlog

from dungeon3d.directions import DIRECTION_COUNT, DIRECTION_NAMES, step
from dungeon3d.occupancy import OccupancyIndex
from dungeon3d.room import Room, RoomArena

log = structlog.get_logger(__name__)


def connect(arena: RoomArena, a: Room, b: Room, direction: int) -> None:
    """Link ``a`` to ``b`` through slot ``direction`` and ``b`` back through ``5 - direction``."""
    arena.link(a, b, direction)


def connect_all_adjacent(arena: RoomArena, occupancy: OccupancyIndex, room: Room) -> int:
    """Link ``room`` with every placed room one unit away on a single axis.

    Returns the number of neighbours linked.  Already linked neighbours are
    simply linked again.
    """
    linked = 0
    for direction in range(DIRECTION_COUNT):
        neighbor = occupancy.find_room(*step(room.coordinates, direction))
        if neighbor is None or neighbor is room:
            continue
        connect(arena, room, neighbor, direction)
        linked += 1
        log.debug(
            "Linked adjacent rooms",
            room=room.index,
            neighbor=neighbor.index,
            direction=DIRECTION_NAMES[direction],
        )
    return linked


__all__ = ["connect", "connect_all_adjacent"]
