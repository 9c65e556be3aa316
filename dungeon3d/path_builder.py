"""Construction of the guaranteed start-to-end route."""

from __future__ import annotations

from typing import List

import structlog

from dungeon3d.context import GenerationContext
from dungeon3d.dungeon_rng import DungeonRNG
from dungeon3d.room import Room
from dungeon3d.selector import random_valid_direction

log = structlog.get_logger(__name__)

MIN_PATH_LENGTH = 2


def plan_path_length(room_count: int, rng: DungeonRNG, path_portion: float) -> int:
    """Draw the primary path length for a dungeon of ``room_count`` rooms.

    The draw is uniform in ``[1, floor(path_portion * room_count)]`` and the
    result is never shorter than two rooms.
    """
    upper = max(1, int(path_portion * room_count))
    path = rng.get_int(1, upper)
    return max(path, MIN_PATH_LENGTH)


def build_path(ctx: GenerationContext, path_length: int) -> List[Room]:
    """Walk ``path_length`` rooms out from the origin and flag the last one.

    A dead end stops the walk early; the unbuilt steps are handed to
    ``ctx.spare`` so the branch grower still reaches the requested total.
    """
    current = ctx.place_origin()
    ctx.path_rooms.append(current)

    steps = path_length - 1
    for attempt in range(steps):
        direction = random_valid_direction(
            current, ctx.occupancy, ctx.rng, ctx.settings.legacy_direction_wrap
        )
        if direction is None:
            remaining = steps - attempt
            ctx.spare += remaining
            log.warning(
                "Primary path hit a dead end",
                built=len(ctx.path_rooms),
                planned=path_length,
                returned_to_spare=remaining,
                pos=current.coordinates,
            )
            break
        current = ctx.place_room(current, direction)
        ctx.path_rooms.append(current)

    current.is_end = True
    log.debug(
        "Primary path complete",
        length=len(ctx.path_rooms),
        end=current.coordinates,
        spare=ctx.spare,
    )
    return ctx.path_rooms


__all__ = ["plan_path_length", "build_path", "MIN_PATH_LENGTH"]
