"""Room entity and the arena that owns every room of a dungeon.

Rooms refer to their neighbours by arena index rather than by object, so a
dungeon full of cycles is still a flat list of plain records.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from dungeon3d.directions import (
    DIRECTION_COUNT,
    ORIGIN,
    Coordinate,
    check_direction,
    inverse,
)


class Room:
    """A single occupied lattice cell with up to six directional links."""

    __slots__ = ("index", "x", "y", "z", "is_end", "_links", "_arena")

    def __init__(self, arena: "RoomArena", index: int, x: int, y: int, z: int) -> None:
        self.index = index
        self.x = x
        self.y = y
        self.z = z
        self.is_end = False
        self._links: List[Optional[int]] = [None] * DIRECTION_COUNT
        self._arena = arena

    @property
    def coordinates(self) -> Coordinate:
        return self.x, self.y, self.z

    @property
    def is_start(self) -> bool:
        return self.coordinates == ORIGIN

    def connection(self, direction: int) -> Optional["Room"]:
        """Return the room linked in ``direction`` or ``None``."""
        index = self._links[check_direction(direction)]
        if index is None:
            return None
        return self._arena[index]

    def connection_index(self, direction: int) -> Optional[int]:
        return self._links[check_direction(direction)]

    def neighbors(self) -> Iterator[Tuple[int, "Room"]]:
        """Yield ``(direction, room)`` for every filled slot."""
        for direction, index in enumerate(self._links):
            if index is not None:
                yield direction, self._arena[index]

    @property
    def degree(self) -> int:
        return sum(1 for index in self._links if index is not None)

    def _set_link(self, direction: int, index: int) -> None:
        self._links[direction] = index

    def __repr__(self) -> str:
        flag = " end" if self.is_end else ""
        return f"Room(#{self.index} @ {self.coordinates}{flag})"


class RoomArena:
    """Owns rooms in creation order; a room's index never changes."""

    def __init__(self) -> None:
        self._rooms: List[Room] = []

    def create(self, coordinate: Coordinate) -> Room:
        x, y, z = coordinate
        room = Room(self, len(self._rooms), x, y, z)
        self._rooms.append(room)
        return room

    def link(self, a: Room, b: Room, direction: int) -> None:
        """Link ``a`` to ``b`` along ``direction`` and ``b`` back to ``a``."""
        a._set_link(direction, b.index)
        b._set_link(inverse(direction), a.index)

    def __getitem__(self, index: int) -> Room:
        return self._rooms[index]

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)


__all__ = ["Room", "RoomArena"]
