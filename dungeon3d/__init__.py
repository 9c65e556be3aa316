"""Procedural generation of 3D lattice dungeons.

A dungeon is a set of rooms on integer ``(x, y, z)`` points with a primary
path from the start room at the origin to a flagged end room, plus side
branches grown off that path.
"""

from __future__ import annotations

from dungeon3d.config import GeneratorSettings, load_settings
from dungeon3d.dungeon import Dungeon
from dungeon3d.errors import (
    ConfigError,
    DungeonError,
    DungeonInvariantError,
    InvalidRoomCountError,
)
from dungeon3d.generator import DungeonGenerator
from dungeon3d.room import Room

__all__ = [
    "DungeonGenerator",
    "Dungeon",
    "Room",
    "GeneratorSettings",
    "load_settings",
    "DungeonError",
    "InvalidRoomCountError",
    "ConfigError",
    "DungeonInvariantError",
]
