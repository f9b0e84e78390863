import pytest

from layout.errors import OutOfBounds
from layout.grid import Grid, Offset
from layout.overlay import (
    BoundaryPolicy,
    CellAction,
    Placed,
    Rejected,
    can_place,
    classify,
    place,
)
from layout.parser import parse

SINGLE = parse("1,1 #")


@pytest.mark.parametrize("furniture_bit,room_bit,expected", [
    (True, True, CellAction.COLLIDE),
    (True, False, CellAction.STAMP),
    (False, True, CellAction.SKIP),
    (False, False, CellAction.SKIP),
])
def test_classify(furniture_bit, room_bit, expected):
    assert classify(furniture_bit, room_bit) is expected


def test_single_cell_into_corner():
    room = parse("2,2 .. ..")
    result = place(room, Offset(1, 1), SINGLE)
    assert isinstance(result, Placed)
    assert result.placed
    assert result.grid.occupied_cells() == [(1, 1)]


def test_collision_is_rejected():
    room = parse("1,2 ##")
    result = place(room, Offset(0, 0), SINGLE)
    assert isinstance(result, Rejected)
    assert not result.placed
    assert result.collision == (0, 0)


def test_anchor_out_of_bounds():
    room = parse("1,1 #")
    with pytest.raises(OutOfBounds):
        place(room, Offset(5, 0), SINGLE)


@pytest.mark.parametrize("offset", [Offset(2, 0), Offset(0, 2), Offset(-1, 0), Offset(0, -1)])
def test_anchor_bounds_all_sides(offset):
    room = parse("2,2 .. ..")
    with pytest.raises(OutOfBounds):
        place(room, offset, SINGLE)


def test_vertical_overflow_is_truncated():
    room = parse("1,3 ...")
    furniture = parse("2,2 ## ##")
    result = place(room, Offset(0, 0), furniture)
    assert result.placed
    assert result.grid.to_rows() == ["##."]


def test_horizontal_overflow_is_truncated():
    room = parse("2,3 ... ...")
    furniture = parse("1,3 ###")
    result = place(room, Offset(2, 1), furniture)
    assert result.placed
    assert result.grid.to_rows() == ["...", "..#"]


def test_collision_on_later_row():
    room = parse("2,2 .. ##")
    furniture = parse("2,1 # #")
    result = place(room, Offset(0, 0), furniture)
    assert isinstance(result, Rejected)
    assert result.collision == (1, 0)


def test_truncated_cells_cannot_collide():
    room = parse("1,2 .#")
    result = place(room, Offset(0, 0), parse("2,2 #. ##"))
    assert result.placed
    assert result.grid.to_rows() == ["##"]


def test_strict_policy_rejects_overflowing_footprint():
    room = parse("1,3 ...")
    furniture = parse("2,2 ## ##")
    with pytest.raises(OutOfBounds):
        place(room, Offset(0, 0), furniture, BoundaryPolicy.STRICT)
    with pytest.raises(OutOfBounds):
        place(room, Offset(2, 0), parse("1,2 ##"), BoundaryPolicy.STRICT)


def test_strict_policy_places_fitting_footprint():
    room = parse("2,3 ... ...")
    result = place(room, Offset(1, 0), parse("2,2 ## #."), BoundaryPolicy.STRICT)
    assert result.grid.to_rows() == [".##", ".#."]


def test_free_furniture_cells_never_clear_room():
    room = parse("3,3 ### #.# ###")
    ring_hole = parse("3,3 ... .#. ...")
    result = place(room, Offset(0, 0), ring_hole)
    assert result.placed
    assert result.grid.to_rows() == ["###", "###", "###"]


def test_any_collision_rejects_whole_placement():
    room = parse("2,3 ... ..#")
    furniture = parse("2,3 ### ###")
    result = place(room, Offset(0, 0), furniture)
    assert isinstance(result, Rejected)
    assert result.collision == (1, 2)
    assert room.to_rows() == ["...", "..#"]


def test_inputs_are_never_mutated():
    room = parse("3,3 ... .#. ...")
    furniture = parse("2,2 #. .#")
    room_before = room.cells.copy()
    furniture_before = furniture.cells.copy()

    place(room, Offset(0, 0), furniture)  # collides at (1, 1)
    place(room, Offset(1, 0), furniture)  # fits

    assert (room.cells == room_before).all()
    assert (furniture.cells == furniture_before).all()


def test_same_room_for_alternative_attempts():
    room = parse("2,4 .... ....")
    table = parse("2,2 ## ##")
    left = place(room, Offset(0, 0), table)
    right = place(room, Offset(2, 0), table)
    assert left.grid.to_rows() == ["##..", "##.."]
    assert right.grid.to_rows() == ["..##", "..##"]
    assert room.occupied_count() == 0


def test_results_can_be_chained():
    room = parse("2,4 .... ....")
    table = parse("2,2 ## ##")
    first = place(room, Offset(0, 0), table)
    second = place(first.grid, Offset(2, 0), table)
    assert second.grid.occupied_count() == 8
    assert not place(second.grid, Offset(1, 1), SINGLE).placed


def test_rejection_is_idempotent():
    room = parse("2,2 #. ..")
    furniture = parse("2,2 ## ..")
    assert place(room, Offset(0, 0), furniture) == place(room, Offset(0, 0), furniture)
    assert place(room, Offset(0, 1), furniture) == place(room, Offset(0, 1), furniture)


def test_tuple_offset_is_accepted():
    room = parse("1,2 ..")
    assert place(room, (1, 0), SINGLE).grid.to_rows() == [".#"]


def test_hook_sees_every_call():
    events = []
    room = parse("1,2 #.")
    place(room, Offset(1, 0), SINGLE, hook=events.append)
    place(room, Offset(0, 0), SINGLE, hook=events.append)
    assert [e.result.placed for e in events] == [True, False]
    assert events[0].room is room
    assert events[1].offset == Offset(0, 0)
    assert events[0].policy is BoundaryPolicy.TRUNCATE


def test_hook_not_called_on_out_of_bounds():
    events = []
    with pytest.raises(OutOfBounds):
        place(parse("1,1 ."), Offset(1, 0), SINGLE, hook=events.append)
    assert events == []


def test_can_place():
    room = parse("1,2 #.")
    assert can_place(room, Offset(1, 0), SINGLE)
    assert not can_place(room, Offset(0, 0), SINGLE)
    assert not can_place(room, Offset(3, 0), SINGLE)
    assert not can_place(room, Offset(1, 0), parse("1,2 ##"), BoundaryPolicy.STRICT)


def test_result_grid_is_a_new_grid():
    room = Grid.empty(2, 2)
    result = place(room, Offset(0, 0), SINGLE)
    assert result.grid is not room
    assert result.grid.cells is not room.cells
