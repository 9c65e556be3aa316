from dungeon3d.directions import ORIGIN, step
from dungeon3d.occupancy import OccupancyIndex
from dungeon3d.room import RoomArena
from dungeon3d.selector import random_valid_direction


class DummyRNG:
    """Always starts the scan at ``start``."""

    def __init__(self, start=0):
        self.start = start
        self.calls = 0

    def get_randrange(self, stop):
        self.calls += 1
        return self.start


def _surround(occupied_directions):
    arena = RoomArena()
    occupancy = OccupancyIndex(arena)
    origin = arena.create(ORIGIN)
    occupancy.add(origin)
    for direction in occupied_directions:
        occupancy.add(arena.create(step(ORIGIN, direction)))
    return origin, occupancy


def test_first_free_direction_from_random_start():
    origin, occupancy = _surround([3, 4])
    assert random_valid_direction(origin, occupancy, DummyRNG(3)) == 5


def test_start_direction_returned_when_free():
    origin, occupancy = _surround([])
    rng = DummyRNG(4)
    assert random_valid_direction(origin, occupancy, rng) == 4
    assert rng.calls == 1


def test_scan_wraps_past_direction_five():
    origin, occupancy = _surround([4, 5])
    assert random_valid_direction(origin, occupancy, DummyRNG(4)) == 0


def test_enclosed_room_reports_none():
    origin, occupancy = _surround(range(6))
    for start in range(6):
        assert random_valid_direction(origin, occupancy, DummyRNG(start)) is None


def test_full_scan_reaches_last_direction():
    origin, occupancy = _surround([0, 1, 2, 3, 4])
    assert random_valid_direction(origin, occupancy, DummyRNG(0)) == 5


def test_legacy_wrap_skips_last_direction():
    origin, occupancy = _surround([0, 1, 2, 3, 4])
    assert random_valid_direction(origin, occupancy, DummyRNG(0), legacy_wrap=True) is None
    # Starting on direction 5 still sees it.
    assert random_valid_direction(origin, occupancy, DummyRNG(5), legacy_wrap=True) == 5
