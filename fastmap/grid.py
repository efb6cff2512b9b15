"""A fixed-size two-dimensional container stored in a single linear buffer.

Grid replaces nested lists for tile maps, pixel buffers and game boards.
Every cell holds either a value or None, and coordinates map row-major onto
one numpy object array:

    index = y * width + x

Checked accessors (get, set, item access) validate coordinates and raise
OutOfBoundsError. The unchecked variants skip validation and are meant for
tight loops whose counters are already bounded by width and height.
"""

from __future__ import annotations

import operator
from numbers import Integral
from typing import Any, Generic, TypeVar

import numpy as np

from fastmap.errors import OutOfBoundsError, ValidationError
from fastmap.fastmap_logging import create_module_logger, method_logger

T = TypeVar("T")

_fastmap_logger = create_module_logger()


def _is_integer(value: Any) -> bool:
    """Return True for python and numpy integers, excluding booleans."""
    return isinstance(value, Integral) and not isinstance(value, bool)


class Grid(Generic[T]):
    """A rectangular field of optional values.

    Attributes:
        width (int): number of columns, fixed at construction
        height (int): number of rows, fixed at construction
        dimensions (tuple[int, int]): (width, height)

    Notes:
        Absence is represented by None, so falsy values such as 0, "" or
        False are stored and returned like any other value. Values are held
        by reference.

        A Grid is not thread safe. Guard it with an external lock when
        sharing it between threads.

    """

    # upper bound on width * height
    MAX_CELLS: int = 2**32 - 1

    @method_logger(__name__)
    def __init__(self, width: int, height: int) -> None:
        """Create a grid with every cell empty.

        Args:
            width: number of columns, a positive integer
            height: number of rows, a positive integer

        Raises:
            ValidationError: if a dimension is not an integer, is not
                positive, or if width * height exceeds MAX_CELLS
        """
        self._validate_dimensions(width, height)

        self._width = operator.index(width)
        self._height = operator.index(height)
        self._cells = np.full(self._width * self._height, None, dtype=object)

        _fastmap_logger.debug(
            f"allocated {self._width * self._height} cells for grid {self.dimensions}"
        )

    @classmethod
    def _validate_dimensions(cls, width: Any, height: Any) -> None:
        if not (_is_integer(width) and _is_integer(height)):
            raise ValidationError(ValidationError.NON_INTEGER, (width, height))

        if width <= 0 or height <= 0:
            raise ValidationError(ValidationError.NON_POSITIVE, (width, height))

        if operator.index(width) * operator.index(height) > cls.MAX_CELLS:
            raise ValidationError(ValidationError.TOO_LARGE, (width, height))

    @property
    def width(self) -> int:
        """The number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """The number of rows."""
        return self._height

    @property
    def dimensions(self) -> tuple[int, int]:
        """Convenience access to (width, height)."""
        return self._width, self._height

    def is_valid(self, x: Any, y: Any) -> bool:
        """Check whether (x, y) is an integer coordinate inside the grid."""
        return (
            _is_integer(x)
            and _is_integer(y)
            and 0 <= x < self._width
            and 0 <= y < self._height
        )

    def index_of(self, x: int, y: int) -> int:
        """Convert a coordinate to its position in the linear buffer.

        No bounds checking is done here.
        """
        return operator.index(y) * self._width + operator.index(x)

    def coordinate_of(self, index: int) -> tuple[int, int]:
        """Convert a position in the linear buffer back to (x, y).

        Args:
            index: position in the buffer, 0 <= index < width * height

        Raises:
            OutOfBoundsError: if index does not address a cell of this grid
        """
        if not _is_integer(index) or not 0 <= index < len(self._cells):
            raise OutOfBoundsError(index, (len(self._cells),))
        y, x = divmod(operator.index(index), self._width)
        return x, y

    def get(self, x: int, y: int) -> T | None:
        """Return the value at (x, y), or None if the cell is empty.

        Raises:
            OutOfBoundsError: if (x, y) is not a valid coordinate
        """
        if not self.is_valid(x, y):
            raise OutOfBoundsError((x, y), self.dimensions)
        return self._cells[self.index_of(x, y)]

    def set(self, x: int, y: int, value: T | None) -> None:
        """Store value at (x, y). Storing None empties the cell.

        Raises:
            OutOfBoundsError: if (x, y) is not a valid coordinate. The grid
                is left untouched in that case.
        """
        if not self.is_valid(x, y):
            raise OutOfBoundsError((x, y), self.dimensions)
        self._cells[self.index_of(x, y)] = value

    def get_unchecked(self, x: int, y: int) -> T | None:
        """Return the value at (x, y) without validating the coordinate.

        The caller must guarantee 0 <= x < width and 0 <= y < height.
        Anything else reads an unrelated cell or fails inside numpy.
        """
        return self._cells[y * self._width + x]

    def set_unchecked(self, x: int, y: int, value: T | None) -> None:
        """Store value at (x, y) without validating the coordinate.

        The caller must guarantee 0 <= x < width and 0 <= y < height.
        Anything else overwrites an unrelated cell or fails inside numpy.
        """
        self._cells[y * self._width + x] = value

    def _unpack(self, key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise OutOfBoundsError(key, self.dimensions)
        return key

    def __getitem__(self, key: tuple[int, int]) -> T | None:
        """Allow direct indexing (e.g., grid[x, y])."""
        return self.get(*self._unpack(key))

    def __setitem__(self, key: tuple[int, int], value: T | None) -> None:
        """Allow direct item assignment (e.g., grid[x, y] = value)."""
        self.set(*self._unpack(key), value)

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}(width={self._width}, height={self._height})"
