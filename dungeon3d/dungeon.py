"""Result of a generation run."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Sequence

import numpy as np

from dungeon3d.room import Room, RoomArena

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from dungeon3d.config import GeneratorSettings


class Dungeon(Sequence[Room]):
    """Rooms in creation order: path rooms first, then branch rooms.

    Behaves as a read-only sequence of :class:`Room`.
    """

    def __init__(
        self,
        arena: RoomArena,
        path_length: int,
        seed: int,
        rng_state: Optional[Dict[str, Any]] = None,
        settings: Optional["GeneratorSettings"] = None,
    ) -> None:
        self._arena = arena
        self.path_length = path_length
        self.seed = seed
        # RNG state captured before generation began; restoring it on a
        # generator and asking for the same room count rebuilds this dungeon.
        self.rng_state = rng_state
        self.settings = settings

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return [self._arena[i] for i in range(len(self._arena))[index]]
        return self._arena[index]

    def __len__(self) -> int:
        return len(self._arena)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._arena)

    @property
    def start(self) -> Room:
        return self._arena[0]

    @property
    def end(self) -> Room:
        for room in self.path:
            if room.is_end:
                return room
        raise LookupError("Dungeon has no end room")

    @property
    def path(self) -> List[Room]:
        """Primary path rooms in start-to-end order."""
        return [self._arena[i] for i in range(self.path_length)]

    @property
    def branch_rooms(self) -> List[Room]:
        return [self._arena[i] for i in range(self.path_length, len(self._arena))]

    def coordinates_array(self) -> np.ndarray:
        """``(N, 3)`` integer array of room coordinates in creation order."""
        if not len(self._arena):
            return np.zeros((0, 3), dtype=np.int64)
        return np.array([room.coordinates for room in self._arena], dtype=np.int64)

    def bounds(self) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
        """Smallest and largest coordinate on each axis."""
        coords = self.coordinates_array()
        low = tuple(int(v) for v in coords.min(axis=0))
        high = tuple(int(v) for v in coords.max(axis=0))
        return low, high  # type: ignore[return-value]

    def summary(self) -> Dict[str, Any]:
        low, high = self.bounds()
        return {
            "rooms": len(self),
            "path_length": self.path_length,
            "branch_rooms": len(self) - self.path_length,
            "end": self.end.coordinates,
            "seed": self.seed,
            "bounds": (low, high),
        }

    def __repr__(self) -> str:
        return f"Dungeon(rooms={len(self)}, path_length={self.path_length}, seed={self.seed})"


__all__ = ["Dungeon"]
