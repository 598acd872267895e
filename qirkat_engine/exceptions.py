"""
Engine Exceptions

All errors raised by the engine derive from QirkatError, which is itself a
ValueError so callers that only guard against bad values keep working.

Taxonomy:
    - MalformedMove: notation or coordinates cannot form a structurally
      valid move (bad pattern, square off the board, broken chain)
    - InvalidLayout: a board setup string or side to move is rejected

An illegal move is NOT an error: is_legal() simply returns False.
"""


class QirkatError(ValueError):
    """Base class for engine errors."""


class MalformedMove(QirkatError):
    """Raised when a move cannot be parsed or built from its squares."""


class InvalidLayout(QirkatError):
    """Raised when a board layout or side to move is rejected."""
