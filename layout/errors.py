"""
Errors raised while building rooms/furniture and placing furniture.

A rejected placement is NOT an error: see layout.overlay.Rejected.
"""

from typing import Any


class LayoutError(Exception):
    """Base class for all layout errors"""


class DefinitionError(LayoutError, ValueError):
    """A textual definition could not be turned into a grid"""

    def __init__(self, message: str, token: Any = None, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.token = token
        self.expected = expected
        self.actual = actual


class NullDefinition(DefinitionError, TypeError):
    """The definition itself is missing (None)"""


class EmptyDefinition(DefinitionError):
    """The definition has no tokens at all"""


class MalformedDimensions(DefinitionError):
    """The dimensions token is not two positive integers"""


class InvalidRowCount(DefinitionError):
    """Number of row tokens differs from the declared height"""


class InvalidRowWidth(DefinitionError):
    """Concatenated rows do not fill a height x width rectangle"""


class OutOfBounds(LayoutError, ValueError):
    """Placement anchor (or footprint, in strict mode) lies outside the room"""

    def __init__(self, message: str, x: int = None, y: int = None, width: int = None, height: int = None):
        super().__init__(message)
        self.x = x
        self.y = y
        self.width = width
        self.height = height
