"""Exceptions raised by the grid navigation package."""


class NavigationError(Exception):
    """Base class for grid navigation errors."""


class EmptyGridError(NavigationError, ValueError):
    """Raised when a bound query is made on a grid without any location."""

    def __init__(self, operation: str = "bounds"):
        super().__init__(f"Cannot compute {operation} of an empty grid")
        self.operation = operation


class MissingCoordinateError(NavigationError, KeyError):
    """Raised on a strict lookup of a location that was never set."""

    def __init__(self, location):
        super().__init__(location)
        self.location = location

    def __str__(self) -> str:
        return f"Location {self.location} is not part of the grid"
