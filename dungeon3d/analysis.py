"""Structural checks and connectivity queries over a generated dungeon.

These back the guarantees the generator makes: unique coordinates, a single
start and end, symmetric links, every adjacent pair linked, and an end room
reachable from the start.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np
import structlog

from dungeon3d.directions import (
    DIRECTION_COUNT,
    Coordinate,
    direction_between,
    inverse,
    step,
)
from dungeon3d.errors import DungeonInvariantError
from dungeon3d.room import Room

log = structlog.get_logger(__name__)


def _coordinates(rooms: Sequence[Room]) -> np.ndarray:
    if not len(rooms):
        return np.zeros((0, 3), dtype=np.int64)
    return np.array([room.coordinates for room in rooms], dtype=np.int64)


def adjacent_pairs(rooms: Sequence[Room]) -> List[Tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, whose coordinates differ by one unit on one axis.

    Each room checks its six lattice neighbours in a coordinate index, so the
    cost stays linear in the number of rooms.
    """
    by_coordinate: Dict[Coordinate, int] = {}
    for position, room in enumerate(rooms):
        by_coordinate.setdefault(room.coordinates, position)
    pairs = set()
    for i, room in enumerate(rooms):
        for direction in range(DIRECTION_COUNT):
            j = by_coordinate.get(step(room.coordinates, direction))
            if j is not None and i < j:
                pairs.add((i, j))
    return sorted(pairs)


def duplicate_coordinates(rooms: Sequence[Room]) -> List[Tuple[int, int, int]]:
    coords = _coordinates(rooms)
    if not len(coords):
        return []
    unique, counts = np.unique(coords, axis=0, return_counts=True)
    return [tuple(int(v) for v in row) for row in unique[counts > 1]]  # type: ignore[misc]


def find_missing_links(rooms: Sequence[Room]) -> List[Tuple[int, int]]:
    """Adjacent room pairs that are not linked to each other."""
    missing = []
    for i, j in adjacent_pairs(rooms):
        a, b = rooms[i], rooms[j]
        direction = direction_between(a.coordinates, b.coordinates)
        if direction is None or a.connection(direction) is not b:
            missing.append((a.index, b.index))
    return missing


def find_asymmetric_links(rooms: Sequence[Room]) -> List[Tuple[int, int]]:
    """``(room index, direction)`` slots whose target does not link back."""
    bad = []
    for room in rooms:
        for direction in range(DIRECTION_COUNT):
            other = room.connection(direction)
            if other is None:
                continue
            if other.connection(inverse(direction)) is not room:
                bad.append((room.index, direction))
    return bad


def reachable_from(room: Room) -> Set[int]:
    """Indices of every room reachable from ``room`` through filled slots."""
    seen = {room.index}
    queue = deque([room])
    while queue:
        current = queue.popleft()
        for _, neighbor in current.neighbors():
            if neighbor.index not in seen:
                seen.add(neighbor.index)
                queue.append(neighbor)
    return seen


def shortest_path(start: Room, goal: Room) -> Optional[List[Room]]:
    """Fewest-hop route from ``start`` to ``goal``, or ``None`` when unreachable."""
    previous = {start.index: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current is goal:
            route = [current]
            while previous[route[-1].index] is not None:
                route.append(previous[route[-1].index])
            return route[::-1]
        for _, neighbor in current.neighbors():
            if neighbor.index not in previous:
                previous[neighbor.index] = current
                queue.append(neighbor)
    return None


def collect_problems(
    rooms: Sequence[Room], expected_count: Optional[int] = None
) -> List[str]:
    problems: List[str] = []
    if expected_count is not None and len(rooms) != expected_count:
        problems.append(f"expected {expected_count} rooms, found {len(rooms)}")
    if not len(rooms):
        problems.append("dungeon has no rooms")
        return problems

    for coordinate in duplicate_coordinates(rooms):
        problems.append(f"several rooms share coordinate {coordinate}")

    starts = [room for room in rooms if room.is_start]
    ends = [room for room in rooms if room.is_end]
    if len(starts) != 1:
        problems.append(f"expected one start room, found {len(starts)}")
    if len(ends) != 1:
        problems.append(f"expected one end room, found {len(ends)}")

    for index, direction in find_asymmetric_links(rooms):
        problems.append(f"room {index} slot {direction} is not linked back")
    for a, b in find_missing_links(rooms):
        problems.append(f"adjacent rooms {a} and {b} are not linked")

    if len(starts) == 1 and len(ends) == 1:
        if ends[0].index not in reachable_from(starts[0]):
            problems.append("end room is not reachable from the start room")
    return problems


def check_invariants(rooms: Sequence[Room], expected_count: Optional[int] = None) -> None:
    """Raise :class:`DungeonInvariantError` if ``rooms`` is not a valid dungeon."""
    problems = collect_problems(rooms, expected_count)
    if problems:
        log.error("Dungeon failed invariant check", problems=len(problems), first=problems[0])
        raise DungeonInvariantError(problems)


__all__ = [
    "adjacent_pairs",
    "duplicate_coordinates",
    "find_missing_links",
    "find_asymmetric_links",
    "reachable_from",
    "shortest_path",
    "collect_problems",
    "check_invariants",
]
