"""
Overlay engine: stamp a furniture grid onto a room grid at an offset.

The engine is a pure function of (room, offset, furniture). It never mutates
its inputs; a successful placement returns a new room grid.
"""

from enum import Enum
from typing import Callable, Optional, Tuple, Union
from dataclasses import dataclass

from .errors import OutOfBounds
from .grid import Grid, Offset


class CellAction(Enum):
    """What happens to one room cell under one furniture cell"""
    STAMP = 'stamp'
    SKIP = 'skip'
    COLLIDE = 'collide'


class BoundaryPolicy(Enum):
    """How a footprint reaching past the room's right/bottom edge is handled"""
    TRUNCATE = 'truncate'  # cells past the edge are dropped
    STRICT = 'strict'      # raise OutOfBounds


def classify(furniture_bit: bool, room_bit: bool) -> CellAction:
    if not furniture_bit:
        return CellAction.SKIP
    if room_bit:
        return CellAction.COLLIDE
    return CellAction.STAMP


@dataclass(frozen=True)
class Placed:
    grid: Grid

    @property
    def placed(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    offset: Offset
    collision: Tuple[int, int]  # (row, column) in the room

    @property
    def placed(self) -> bool:
        return False


PlacementResult = Union[Placed, Rejected]


@dataclass(frozen=True)
class PlacementEvent:
    """Passed to the diagnostic hook once per place() call"""
    room: Grid
    offset: Offset
    furniture: Grid
    result: PlacementResult
    policy: BoundaryPolicy


PlacementHook = Callable[[PlacementEvent], None]


def _check_anchor(room: Grid, offset: Offset):
    x, y = offset
    if x < 0 or y < 0:
        raise OutOfBounds(f"Position ({x}, {y}) is negative", x=x, y=y,
                          width=room.width, height=room.height)
    if x >= room.width:
        raise OutOfBounds(f"Position X={x} overflows room width {room.width}", x=x, y=y,
                          width=room.width, height=room.height)
    if y >= room.height:
        raise OutOfBounds(f"Position Y={y} overflows room height {room.height}", x=x, y=y,
                          width=room.width, height=room.height)


def _check_footprint(room: Grid, offset: Offset, furniture: Grid):
    x, y = offset
    if x + furniture.width > room.width or y + furniture.height > room.height:
        raise OutOfBounds(
            f"Furniture {furniture.height}x{furniture.width} at ({x}, {y}) "
            f"does not fit room {room.height}x{room.width}",
            x=x, y=y, width=room.width, height=room.height)


def place(room: Grid,
          offset: Offset,
          furniture: Grid,
          policy: BoundaryPolicy = BoundaryPolicy.TRUNCATE,
          hook: Optional[PlacementHook] = None) -> PlacementResult:
    """
    Try to place furniture into room with its top-left cell at offset.

    Returns Placed(new_room) or Rejected(offset, collision). Raises OutOfBounds
    when the anchor is outside the room, or (STRICT only) when the furniture
    footprint reaches past the room edges. With TRUNCATE, furniture rows below
    the last room row and columns past the last room column are ignored.
    """
    offset = Offset(*offset)
    _check_anchor(room, offset)
    if policy is BoundaryPolicy.STRICT:
        _check_footprint(room, offset, furniture)

    flip = room.cells.copy()
    total = room.size
    columns = min(furniture.width, room.width - offset.x)

    result = None
    scan = offset.y * room.width + offset.x
    furniture_row = 0
    while scan < total and furniture_row < furniture.height:
        room_row = scan // room.width
        bits = furniture.row(furniture_row)
        for j in range(columns):
            action = classify(bits[j], flip[room_row, offset.x + j])
            if action is CellAction.COLLIDE:
                result = Rejected(offset, (room_row, offset.x + j))
                break
            if action is CellAction.STAMP:
                flip[room_row, offset.x + j] = True
        if result is not None:
            break
        furniture_row += 1
        scan += room.width

    if result is None:
        result = Placed(Grid(flip))

    if hook is not None:
        hook(PlacementEvent(room, offset, furniture, result, policy))
    return result


def can_place(room: Grid, offset: Offset, furniture: Grid,
              policy: BoundaryPolicy = BoundaryPolicy.TRUNCATE) -> bool:
    """Check if furniture fits at offset (out-of-bounds anchors count as not fitting)"""
    try:
        return place(room, offset, furniture, policy).placed
    except OutOfBounds:
        return False
