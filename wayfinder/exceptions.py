"""
Exceptions raised by the Wayfinder graph engine.

A path that does not exist is not an error: traversals report it as
``found=False``, an empty path, or an infinite distance.
"""


class WayfinderError(Exception):
    """Base exception for the package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AllocationError(WayfinderError, MemoryError):
    """Raised when graph storage cannot be obtained. Fatal."""
    pass


class BoundsError(WayfinderError, IndexError):
    """Raised when a node index falls outside [0, num_nodes)."""
    pass


class MissingEndpointError(WayfinderError, LookupError):
    """Raised when a start or end point is absent from the input."""
    pass


class InvalidWeightError(WayfinderError, ValueError):
    """Raised when an edge weight is negative or not a number."""
    pass


class CycleDetectedError(WayfinderError, RuntimeError):
    """Raised when a predecessor array loops back on itself."""
    pass


class InvalidMazeError(WayfinderError, ValueError):
    """Raised when maze text is empty, ragged, or has duplicate markers."""
    pass


class InvalidNetworkError(WayfinderError, ValueError):
    """Raised when a transit network document is missing required fields."""
    pass
