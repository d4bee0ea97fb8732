"""Exception hierarchy for the Abalone engine.

Illegal moves are not errors at this layer: submitting one forfeits the game.
These exceptions cover contract violations by callers instead.
"""

__all__ = [
    "AbaloneError",
    "BoardIndexError",
    "ConfigurationError",
    "IllegalActionError",
    "InvalidCellError",
]


class AbaloneError(Exception):
    """Base exception for all Abalone errors."""


class BoardIndexError(AbaloneError, IndexError):
    """Raised when a board coordinate lies outside the grid."""


class InvalidCellError(AbaloneError, ValueError):
    """Raised on an attempt to change the Invalid mask of a board."""


class IllegalActionError(AbaloneError, ValueError):
    """Raised by front-ends that refuse illegal actions instead of forfeiting."""


class ConfigurationError(AbaloneError, ValueError):
    """Raised for invalid game parameters."""
