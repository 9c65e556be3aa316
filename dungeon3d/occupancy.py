"""Coordinate lookup for placed rooms."""

from __future__ import annotations

from typing import Dict, Optional

from dungeon3d.directions import Coordinate
from dungeon3d.room import Room, RoomArena


class OccupancyIndex:
    """Answers whether a lattice point already holds a room.

    Every room placed through :meth:`add` is visible to later lookups within
    the same generation pass.
    """

    def __init__(self, arena: RoomArena) -> None:
        self._arena = arena
        self._by_coordinate: Dict[Coordinate, int] = {}

    def add(self, room: Room) -> None:
        key = room.coordinates
        if key in self._by_coordinate:
            raise ValueError(f"Lattice point {key} is already occupied")
        self._by_coordinate[key] = room.index

    def find_room(self, x: int, y: int, z: int) -> Optional[Room]:
        index = self._by_coordinate.get((x, y, z))
        if index is None:
            return None
        return self._arena[index]


__all__ = ["OccupancyIndex"]
