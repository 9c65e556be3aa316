"""Exception types raised by the dungeon generator."""

from __future__ import annotations

from typing import List, Sequence


class DungeonError(Exception):
    """Base class for every error raised by :mod:`dungeon3d`."""


class InvalidRoomCountError(DungeonError, ValueError):
    """Raised when a dungeon is requested with fewer than two rooms."""

    def __init__(self, room_count: int, minimum: int = 2) -> None:
        super().__init__(
            f"A dungeon needs at least {minimum} rooms, {room_count} requested"
        )
        self.room_count = room_count
        self.minimum = minimum


class ConfigError(DungeonError, ValueError):
    """Invalid generator settings or an unreadable settings file."""


class DungeonInvariantError(DungeonError):
    """A generated dungeon violates one or more structural invariants.

    ``problems`` holds one human readable line per violation.
    """

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems: List[str] = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f" (+{len(self.problems) - 5} more)"
        super().__init__(summary)


__all__ = [
    "DungeonError",
    "InvalidRoomCountError",
    "ConfigError",
    "DungeonInvariantError",
]
