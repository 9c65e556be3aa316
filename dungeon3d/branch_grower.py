"""Side branches that use up the room budget left after the primary path.

Branches start from path rooms in path order.  The expected branch length
grows toward the end of the path, and the final path room takes whatever
budget is still left.
"""

from __future__ import annotations

from typing import List

import structlog

from dungeon3d.context import GenerationContext
from dungeon3d.room import Room
from dungeon3d.selector import random_valid_direction

log = structlog.get_logger(__name__)

MIN_HALF_LENGTH = 2


def branch_length_bound(
    path_size: int, index: int, spare: int, random_modifier: float
) -> int:
    """Exclusive upper bound of the half-length draw for path room ``index``.

    ``modifier`` is ``1 / (path_size - index)`` written in terms of
    ``random_modifier`` and reaches 1.0 at the final path room.  The bound is
    never below 2.
    """
    if not 0 <= index < path_size:
        raise ValueError(f"index {index} outside path of {path_size} rooms")
    modifier = (random_modifier / (path_size - index)) / random_modifier
    return max(MIN_HALF_LENGTH, int(modifier * spare / 2))


def choose_branch_length(ctx: GenerationContext, index: int) -> int:
    """How many rooms to try to grow off path room ``index``."""
    path_size = len(ctx.path_rooms)
    if index == path_size - 1:
        return ctx.spare
    half = branch_length_bound(
        path_size, index, ctx.spare, ctx.settings.random_modifier
    )
    return min(ctx.rng.get_randrange(half) * 2, ctx.spare)


def grow_branch(ctx: GenerationContext, origin: Room, length: int) -> int:
    """Grow up to ``length`` rooms in a chain starting at ``origin``.

    Returns the number of rooms placed; a dead end ends the chain early.
    """
    tip = origin
    placed = 0
    for _ in range(length):
        direction = random_valid_direction(
            tip, ctx.occupancy, ctx.rng, ctx.settings.legacy_direction_wrap
        )
        if direction is None:
            log.warning(
                "Branch hit a dead end",
                origin=origin.index,
                placed=placed,
                planned=length,
                pos=tip.coordinates,
            )
            break
        tip = ctx.place_room(tip, direction)
        ctx.spare -= 1
        placed += 1
    return placed


def grow_branches(ctx: GenerationContext) -> None:
    """Spend ``ctx.spare`` on branches hanging off the primary path."""
    path_rooms = list(ctx.path_rooms)
    for index, origin in enumerate(path_rooms):
        if ctx.spare == 0:
            break
        length = choose_branch_length(ctx, index)
        log.debug(
            "Growing branch",
            path_index=index,
            origin=origin.coordinates,
            length=length,
            spare=ctx.spare,
        )
        grow_branch(ctx, origin, length)

    if ctx.spare > 0:
        _recover_shortfall(ctx, path_rooms)


def _recover_shortfall(ctx: GenerationContext, path_rooms: List[Room]) -> None:
    """Place rooms lost to branch dead ends.

    Each pass grows fresh branches from the path rooms first and then from
    every other room.  The room with the largest ``x`` always has a free
    ``+x`` neighbour, so every pass places at least one room.
    """
    log.warning("Recovering rooms lost to dead ends", missing=ctx.spare)
    path_indices = {room.index for room in path_rooms}
    while ctx.spare > 0:
        origins = path_rooms + [r for r in ctx.arena if r.index not in path_indices]
        for origin in origins:
            if ctx.spare == 0:
                break
            grow_branch(ctx, origin, ctx.spare)


__all__ = [
    "branch_length_bound",
    "choose_branch_length",
    "grow_branch",
    "grow_branches",
    "MIN_HALF_LENGTH",
]
