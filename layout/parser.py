"""
Parser for textual room/furniture definitions.

Format: "<height>,<width> <row1> <row2> ... <rowHeight>", e.g.
    "5,6 ..###. .####. ###### ###### ...###"
Height comes first, width second. '#' marks an occupied cell, any other
character a free one.
"""

import re

import numpy as np
from typing import List

from .errors import (
    EmptyDefinition,
    InvalidRowCount,
    InvalidRowWidth,
    MalformedDimensions,
    NullDefinition,
)
from .grid import Grid, OCCUPIED

# Separator between the dimensions token and the row tokens
DEFINITION_SEPARATOR = ' '
# Separator between height and width
DIMENSION_SEPARATOR = ','

DIGITS = re.compile(r'[0-9]+')


def _split(text: str, separator: str) -> List[str]:
    """Split, trim, and drop empty parts"""
    return [part.strip() for part in text.split(separator) if part.strip()]


class DefinitionParser:
    """Builds a Grid from one textual definition"""

    def __init__(self, definition: str):
        if definition is None:
            raise NullDefinition("Definition is None")
        self.definition = definition

    def tokens(self) -> List[str]:
        tokens = _split(self.definition, DEFINITION_SEPARATOR)
        if not tokens:
            raise EmptyDefinition("Definition has no tokens", token=self.definition)
        return tokens

    def dimensions(self, token: str) -> tuple:
        """Return (height, width) from e.g. "5,6" """
        parts = _split(token, DIMENSION_SEPARATOR)
        if len(parts) != 2:
            raise MalformedDimensions(
                f"Dimensions {token!r} must be '<height>{DIMENSION_SEPARATOR}<width>'",
                token=token, expected=2, actual=len(parts))
        if not all(DIGITS.fullmatch(part) for part in parts):
            raise MalformedDimensions(f"Dimensions {token!r} are not integers", token=token)
        height, width = int(parts[0]), int(parts[1])
        if height < 1 or width < 1:
            raise MalformedDimensions(f"Dimensions {token!r} must be positive", token=token)
        return height, width

    def body(self, rows: List[str], height: int, width: int) -> np.ndarray:
        if len(rows) != height:
            raise InvalidRowCount(
                f"Expected {height} rows, got {len(rows)}",
                token=rows, expected=height, actual=len(rows))

        body = ''.join(rows)
        if len(body) % width != 0 or len(body) != width * height:
            raise InvalidRowWidth(
                f"Rows hold {len(body)} cells, expected {height}x{width}={height * width}",
                token=body, expected=height * width, actual=len(body))

        bits = np.fromiter((c == OCCUPIED for c in body), dtype=bool, count=len(body))
        return bits.reshape(height, width)

    def build(self) -> Grid:
        tokens = self.tokens()
        height, width = self.dimensions(tokens[0])
        return Grid(self.body(tokens[1:], height, width))


def parse(definition: str) -> Grid:
    """Parse a textual definition into a Grid"""
    return DefinitionParser(definition).build()
