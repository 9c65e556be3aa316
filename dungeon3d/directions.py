"""Coordinate space for the dungeon lattice.

Rooms sit on integer ``(x, y, z)`` points.  The six axis aligned steps are
numbered so that every direction and its opposite add up to five::

    0: +z    1: +x    2: +y    3: -y    4: -x    5: -z

which lets the inverse of ``d`` be computed as ``5 - d``.
"""

from __future__ import annotations

from typing import Final, Tuple

Coordinate = Tuple[int, int, int]

ORIGIN: Final[Coordinate] = (0, 0, 0)
DIRECTION_COUNT: Final[int] = 6

DIRECTION_OFFSETS: Final[Tuple[Coordinate, ...]] = (
    (0, 0, 1),
    (1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (-1, 0, 0),
    (0, 0, -1),
)

DIRECTION_NAMES: Final[Tuple[str, ...]] = ("+z", "+x", "+y", "-y", "-x", "-z")

INVERSE_DIRECTIONS: Final[Tuple[int, ...]] = tuple(
    DIRECTION_COUNT - 1 - d for d in range(DIRECTION_COUNT)
)


def check_direction(direction: int) -> int:
    """Return ``direction`` unchanged, raising ``ValueError`` outside 0..5."""
    if not 0 <= direction < DIRECTION_COUNT:
        raise ValueError(f"Direction must be in 0..5, got {direction!r}")
    return direction


def inverse(direction: int) -> int:
    """Return the direction pointing back along the same axis."""
    return INVERSE_DIRECTIONS[check_direction(direction)]


def offset(direction: int) -> Coordinate:
    return DIRECTION_OFFSETS[check_direction(direction)]


def step(coordinate: Coordinate, direction: int) -> Coordinate:
    """Return the lattice point one unit away from ``coordinate``."""
    dx, dy, dz = offset(direction)
    x, y, z = coordinate
    return x + dx, y + dy, z + dz


def direction_between(a: Coordinate, b: Coordinate) -> int | None:
    """Direction leading from ``a`` to ``b`` when they are adjacent, else ``None``."""
    delta = (b[0] - a[0], b[1] - a[1], b[2] - a[2])
    try:
        return DIRECTION_OFFSETS.index(delta)
    except ValueError:
        return None


__all__ = [
    "Coordinate",
    "ORIGIN",
    "DIRECTION_COUNT",
    "DIRECTION_OFFSETS",
    "DIRECTION_NAMES",
    "INVERSE_DIRECTIONS",
    "check_direction",
    "inverse",
    "offset",
    "step",
    "direction_between",
]
