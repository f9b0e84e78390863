"""
Binary occupancy grid shared by rooms and furniture
"""

import numpy as np
from typing import Iterable, List, NamedTuple
from dataclasses import dataclass

OCCUPIED = '#'
FREE = '.'


class Offset(NamedTuple):
    """Room cell (column x, row y) where the furniture's top-left cell goes"""
    x: int
    y: int


@dataclass(frozen=True, eq=False)
class Grid:
    """
    Immutable width x height occupancy pattern.

    Cells are kept in a read-only boolean numpy array of shape (height, width),
    row-major, so the linear index of (row, column) is row * width + column.
    Every change produces a new Grid.
    """

    cells: np.ndarray

    def __post_init__(self):
        cells = np.array(self.cells, dtype=bool, copy=True)
        if cells.ndim != 2 or cells.shape[0] < 1 or cells.shape[1] < 1:
            raise ValueError(f"Grid needs a non-empty 2D cell array, got shape {cells.shape}")
        cells.flags.writeable = False
        object.__setattr__(self, 'cells', cells)

    @classmethod
    def empty(cls, height: int, width: int) -> 'Grid':
        return cls(np.zeros((height, width), dtype=bool))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Grid':
        """Build from equal-length strings, '#' occupied and anything else free"""
        rows = list(rows)
        if len({len(r) for r in rows}) > 1:
            raise ValueError(f"Rows have different lengths: {rows}")
        return cls(np.array([[c == OCCUPIED for c in r] for r in rows], dtype=bool))

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def size(self) -> int:
        return self.cells.size

    def get(self, row: int, column: int) -> bool:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"Cell ({row}, {column}) outside {self.height}x{self.width} grid")
        return bool(self.cells[row, column])

    def get_index(self, index: int) -> bool:
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} outside grid of {self.size} cells")
        row, column = divmod(index, self.width)
        return bool(self.cells[row, column])

    def row(self, row: int) -> np.ndarray:
        """Read-only occupancy vector of one row"""
        return self.cells[row]

    def rows(self) -> List[np.ndarray]:
        return [self.cells[r] for r in range(self.height)]

    def flat(self) -> np.ndarray:
        return self.cells.ravel()

    def occupied_count(self) -> int:
        return int(self.cells.sum())

    def occupied_cells(self) -> List[tuple]:
        """(row, column) of every occupied cell, row-major"""
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells)]

    def to_rows(self) -> List[str]:
        return [''.join(OCCUPIED if bit else FREE for bit in r) for r in self.cells]

    def to_definition(self) -> str:
        """Serialize back to the "<height>,<width> <row> ..." format"""
        return ' '.join([f"{self.height},{self.width}"] + self.to_rows())

    def tolist(self) -> List[List[int]]:
        return self.cells.astype(int).tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid({self.to_definition()!r})"

    def __str__(self) -> str:
        return '\n'.join(self.to_rows())
