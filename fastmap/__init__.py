"""fastmap: a fixed-size two-dimensional container backed by one linear buffer.

Core Objects: Grid.
"""

import datetime

from fastmap.errors import FastMapError, OutOfBoundsError, ValidationError
from fastmap.grid import Grid

__all__ = [
    "FastMapError",
    "Grid",
    "OutOfBoundsError",
    "ValidationError",
]

__title__ = "fastmap"
__version__ = "1.0.0"
__license__ = "ISC"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} fastmap authors"
