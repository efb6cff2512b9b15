import fastmap


class FastMapError(Exception):
    """Base class for all fastmap-specific exceptions.
    It automatically prepends the fastmap version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.fastmap_version = getattr(fastmap, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[fastmap {self.fastmap_version}] {message}"
        super().__init__(full_message)


class ValidationError(FastMapError, ValueError):
    """Raised when grid dimensions are invalid.
    Examples: non-integer width/height, zero or negative dimensions, or a
    width * height product above the storage ceiling.
    """

    NON_INTEGER = "non_integer"
    NON_POSITIVE = "non_positive"
    TOO_LARGE = "too_large"

    _messages = {
        NON_INTEGER: "Width and height must be integer values",
        NON_POSITIVE: "Width and height must be greater than 0",
        TOO_LARGE: "Specified dimensions are too large",
    }

    def __init__(self, reason: str, dimensions=None):
        self.reason = reason
        self.dimensions = dimensions
        message = self._messages.get(reason, reason)
        if dimensions is not None:
            message = f"{message}, got {dimensions}"
        super().__init__(message)


class OutOfBoundsError(FastMapError, IndexError):
    """Raised when a coordinate lies outside the grid or is not an integer."""

    def __init__(self, pos, dimensions):
        self.pos = pos
        self.dimensions = dimensions
        message = f"Index out of bounds: {pos} for grid dimensions {dimensions}."
        super().__init__(message)
