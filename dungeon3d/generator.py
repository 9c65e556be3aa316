"""Dungeon generation entry point.

``DungeonGenerator`` owns the random source.  Each call to
:meth:`DungeonGenerator.generate` builds a fresh room collection, while the
random cursor carries on from the previous call, so a seeded generator yields
the same sequence of dungeons every time it is replayed from construction.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import structlog

from dungeon3d.analysis import check_invariants
from dungeon3d.branch_grower import grow_branches
from dungeon3d.config import GeneratorSettings, load_settings
from dungeon3d.context import GenerationContext
from dungeon3d.dungeon import Dungeon
from dungeon3d.dungeon_rng import DungeonRNG
from dungeon3d.errors import InvalidRoomCountError
from dungeon3d.path_builder import MIN_PATH_LENGTH, build_path, plan_path_length

log = structlog.get_logger(__name__)


class DungeonGenerator:
    """Generates dungeons of N connected rooms on the integer lattice.

    An explicit ``seed`` wins over ``settings.seed``; with neither, a seed is
    drawn and exposed as :attr:`seed`.  Not safe for concurrent ``generate``
    calls on one instance.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        settings: Optional[GeneratorSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else GeneratorSettings()
        if seed is None:
            seed = self.settings.seed
        self.rng = DungeonRNG(seed=seed)

    @classmethod
    def from_config(cls, path: str | Path, seed: Optional[int] = None) -> "DungeonGenerator":
        return cls(seed=seed, settings=load_settings(path))

    @property
    def seed(self) -> int:
        return self.rng.initial_seed

    def generate(self, room_count: int) -> Dungeon:
        """Generate a dungeon of exactly ``room_count`` rooms.

        Raises :class:`InvalidRoomCountError` for fewer than two rooms; nothing
        is drawn from the random source in that case.
        """
        return self._generate(room_count, self.settings)

    def _generate(self, room_count: int, settings: GeneratorSettings) -> Dungeon:
        if room_count < MIN_PATH_LENGTH:
            log.error("Invalid room count requested", room_count=room_count)
            raise InvalidRoomCountError(room_count, MIN_PATH_LENGTH)

        rng_state = self.rng.get_state()
        log.info("Starting dungeon generation", room_count=room_count, seed=self.seed)

        path_length = plan_path_length(room_count, self.rng, settings.path_portion)
        ctx = GenerationContext(rng=self.rng, settings=settings)
        ctx.spare = room_count - path_length
        log.info("Planned primary path", path_length=path_length, spare=ctx.spare)

        build_path(ctx, path_length)
        grow_branches(ctx)

        dungeon = Dungeon(
            ctx.arena,
            path_length=len(ctx.path_rooms),
            seed=self.seed,
            rng_state=rng_state,
            settings=replace(settings),
        )
        if settings.validate:
            check_invariants(dungeon, expected_count=room_count)

        log.info(
            "Dungeon generation complete",
            rooms=len(dungeon),
            path_length=dungeon.path_length,
            end=dungeon.end.coordinates,
        )
        return dungeon

    def replay(self, dungeon: Dungeon) -> Dungeon:
        """Rebuild ``dungeon`` from the random state and settings it was made with.

        The random cursor is put back afterwards, so later ``generate`` calls
        continue exactly as if the replay had not happened.
        """
        if dungeon.rng_state is None:
            raise ValueError("Dungeon carries no random state to replay from")
        settings = dungeon.settings if dungeon.settings is not None else self.settings
        current = self.rng.get_state()
        self.rng.set_state(dungeon.rng_state)
        try:
            return self._generate(len(dungeon), settings)
        finally:
            self.rng.set_state(current)


__all__ = ["DungeonGenerator"]
