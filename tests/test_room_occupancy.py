import pytest
from structlog.testing import capture_logs

from dungeon3d.connector import connect, connect_all_adjacent
from dungeon3d.directions import ORIGIN, step
from dungeon3d.occupancy import OccupancyIndex
from dungeon3d.room import RoomArena


def _place(arena, occupancy, coordinate):
    room = arena.create(coordinate)
    occupancy.add(room)
    return room


def test_new_room_has_empty_slots():
    arena = RoomArena()
    room = arena.create(ORIGIN)
    assert room.is_start
    assert not room.is_end
    assert room.degree == 0
    assert all(room.connection(d) is None for d in range(6))


def test_connect_links_inverse_slots():
    arena = RoomArena()
    a = arena.create(ORIGIN)
    b = arena.create(step(ORIGIN, 2))
    connect(arena, a, b, 2)
    assert a.connection(2) is b
    assert b.connection(3) is a
    assert dict(a.neighbors()) == {2: b}
    assert not b.is_start


def test_find_room_on_empty_point_returns_none():
    arena = RoomArena()
    occupancy = OccupancyIndex(arena)
    _place(arena, occupancy, ORIGIN)
    for _ in range(3):
        assert occupancy.find_room(1, 0, 0) is None
    assert occupancy.find_room(0, 0, 0) is arena[0]


def test_occupancy_rejects_second_room_on_same_point():
    arena = RoomArena()
    occupancy = OccupancyIndex(arena)
    _place(arena, occupancy, ORIGIN)
    with pytest.raises(ValueError):
        _place(arena, occupancy, ORIGIN)


def test_connect_all_adjacent_links_every_neighbor():
    arena = RoomArena()
    occupancy = OccupancyIndex(arena)
    # Ring around the point (1, 1, 0), then fill the middle.
    for coordinate in [(0, 1, 0), (2, 1, 0), (1, 0, 0), (1, 2, 0), (1, 1, 1), (3, 3, 3)]:
        _place(arena, occupancy, coordinate)
    middle = _place(arena, occupancy, (1, 1, 0))

    linked = connect_all_adjacent(arena, occupancy, middle)

    assert linked == 5
    assert middle.connection(4).coordinates == (0, 1, 0)
    assert middle.connection(1).coordinates == (2, 1, 0)
    assert middle.connection(3).coordinates == (1, 0, 0)
    assert middle.connection(2).coordinates == (1, 2, 0)
    assert middle.connection(0).coordinates == (1, 1, 1)
    assert middle.connection(5) is None
    for direction, neighbor in middle.neighbors():
        assert neighbor.connection(5 - direction) is middle
        assert neighbor is not middle


@pytest.mark.parametrize("bad", [-1, 6])
def test_connection_rejects_out_of_range_direction(bad):
    arena = RoomArena()
    a = arena.create(ORIGIN)
    b = arena.create(step(ORIGIN, 5))
    connect(arena, a, b, 5)
    with pytest.raises(ValueError):
        a.connection(bad)
    with pytest.raises(ValueError):
        a.connection_index(bad)
    assert a.connection(5) is b


def test_adjacent_link_logged_with_direction_name():
    arena = RoomArena()
    occupancy = OccupancyIndex(arena)
    _place(arena, occupancy, (1, 0, 0))
    room = _place(arena, occupancy, ORIGIN)
    with capture_logs() as logs:
        connect_all_adjacent(arena, occupancy, room)
    assert logs == [
        {
            "event": "Linked adjacent rooms",
            "log_level": "debug",
            "room": 1,
            "neighbor": 0,
            "direction": "+x",
        }
    ]
