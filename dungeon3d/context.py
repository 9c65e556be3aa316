"""Per-call generation state shared by the path builder and branch grower."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import structlog

from dungeon3d.config import GeneratorSettings
from dungeon3d.connector import connect, connect_all_adjacent
from dungeon3d.directions import DIRECTION_NAMES, ORIGIN, step
from dungeon3d.dungeon_rng import DungeonRNG
from dungeon3d.occupancy import OccupancyIndex
from dungeon3d.room import Room, RoomArena

log = structlog.get_logger(__name__)


@dataclass
class GenerationContext:
    """Everything one ``generate`` call mutates.

    ``spare`` is the number of rooms still to be placed once the primary path
    exists; ``path_rooms`` holds the path in start-to-end order.
    """

    rng: DungeonRNG
    settings: GeneratorSettings
    arena: RoomArena = field(default_factory=RoomArena)
    occupancy: OccupancyIndex = field(init=False)
    path_rooms: List[Room] = field(default_factory=list)
    spare: int = 0

    def __post_init__(self) -> None:
        self.occupancy = OccupancyIndex(self.arena)

    def place_origin(self) -> Room:
        room = self.arena.create(ORIGIN)
        self.occupancy.add(room)
        log.debug("Placed start room", room=room.index, pos=room.coordinates)
        return room

    def place_room(self, parent: Room, direction: int) -> Room:
        """Create a room one step from ``parent`` and resolve all of its links.

        The room is linked to ``parent`` and to any other placed neighbour
        before this returns.
        """
        room = self.arena.create(step(parent.coordinates, direction))
        self.occupancy.add(room)
        connect(self.arena, parent, room, direction)
        connect_all_adjacent(self.arena, self.occupancy, room)
        log.debug(
            "Placed room",
            room=room.index,
            pos=room.coordinates,
            parent=parent.index,
            direction=DIRECTION_NAMES[direction],
        )
        return room


__all__ = ["GenerationContext"]
