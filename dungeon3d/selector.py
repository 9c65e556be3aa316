"""Random choice of a free neighbouring lattice point."""

from __future__ import annotations

from typing import Optional

from dungeon3d.directions import DIRECTION_COUNT, step
from dungeon3d.dungeon_rng import DungeonRNG
from dungeon3d.occupancy import OccupancyIndex
from dungeon3d.room import Room

# The legacy generator advanced the scan modulo 5, so a scan starting below
# 5 never reaches direction 5 and revisits direction 0 instead.
LEGACY_WRAP = DIRECTION_COUNT - 1


def random_valid_direction(
    room: Room,
    occupancy: OccupancyIndex,
    rng: DungeonRNG,
    legacy_wrap: bool = False,
) -> Optional[int]:
    """Return a direction from ``room`` toward an unoccupied point, or ``None``.

    The scan starts at a uniformly random direction and tries six candidates
    in turn.  ``None`` means every neighbour is taken.
    """
    wrap = LEGACY_WRAP if legacy_wrap else DIRECTION_COUNT
    direction = rng.get_randrange(DIRECTION_COUNT)
    for _ in range(DIRECTION_COUNT):
        if occupancy.find_room(*step(room.coordinates, direction)) is None:
            return direction
        direction = (direction + 1) % wrap
    return None


__all__ = ["random_valid_direction", "LEGACY_WRAP"]
