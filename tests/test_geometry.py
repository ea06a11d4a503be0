import math

from floorplan_engine.models import Apartment, ApartmentMeta
from floorplan_engine.core.geometry import (
    are_adjacent, get_bounds, room_area, room_perimeter, rooms_overlap,
    total_area, wall_length_by_type,
)


def test_room_area_and_perimeter(make_room):
    room = make_room("r", 1, 2, 3, 4)
    assert room_area(room) == 12
    assert room_perimeter(room) == 14


def test_total_area_is_sum_of_room_areas(flat):
    assert total_area(flat) == sum(room_area(r) for r in flat.rooms)
    assert total_area(flat) == 20 + 14 + 5


def test_total_area_empty():
    assert total_area(Apartment(meta=ApartmentMeta(name="x"))) == 0


def test_side_by_side_example(two_rooms):
    a, b = two_rooms.rooms
    assert are_adjacent(a, b)
    bounds = get_bounds(two_rooms)
    assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (0, 0, 5, 4)
    assert (bounds.width, bounds.height) == (5, 4)
    assert total_area(two_rooms) == 20


def test_get_bounds_empty_is_infinite():
    bounds = get_bounds(Apartment())
    assert bounds.min_x == math.inf
    assert bounds.max_x == -math.inf


def test_wall_lengths(flat):
    lengths = wall_length_by_type(flat)
    # living: north 5 exterior, west 4 building, east 4 interior; bed: north 3.5 exterior
    assert lengths == {"building": 4, "exterior": 8.5, "interior": 4}


def test_wall_lengths_without_walls(two_rooms):
    assert wall_length_by_type(two_rooms) == {"building": 0, "exterior": 0, "interior": 0}


def test_adjacency_is_symmetric(flat):
    for a in flat.rooms:
        for b in flat.rooms:
            assert are_adjacent(a, b) == are_adjacent(b, a)


def test_stacked_rooms_adjacent(make_room):
    top = make_room("t", 0, 0, 4, 2)
    below = make_room("b", 1, 2, 2, 2)
    assert are_adjacent(top, below)


def test_corner_touch_is_not_adjacent(make_room):
    a = make_room("a", 0, 0, 2, 2)
    b = make_room("b", 2, 2, 2, 2)
    assert not are_adjacent(a, b)


def test_gap_is_not_adjacent(make_room):
    a = make_room("a", 0, 0, 2, 2)
    b = make_room("b", 2.5, 0, 2, 2)
    assert not are_adjacent(a, b)


def test_adjacency_exact_equality_by_default(make_room):
    a = make_room("a", 0, 0, 0.1 + 0.2, 1)
    b = make_room("b", 0.3, 0, 1, 1)
    assert not are_adjacent(a, b)
    assert are_adjacent(a, b, tolerance=1e-9)


def test_touching_rooms_do_not_overlap(make_room):
    a = make_room("a", 0, 0, 2, 2)
    b = make_room("b", 2, 0, 2, 2)
    assert not rooms_overlap(a, b)


def test_intersecting_rooms_overlap(make_room):
    a = make_room("a", 0, 0, 2, 2)
    b = make_room("b", 1, 1, 2, 2)
    assert rooms_overlap(a, b)
    assert rooms_overlap(b, a)
