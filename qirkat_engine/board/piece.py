"""
Piece Colors

Every square holds exactly one PieceColor: EMPTY, WHITE or BLACK. The
enum values are the symbols used in board layouts and renderings.
"""

from enum import Enum

from qirkat_engine.exceptions import InvalidLayout


class PieceColor(Enum):
    """Contents of a square, and the identity of a player."""

    EMPTY = "-"
    WHITE = "w"
    BLACK = "b"

    @property
    def symbol(self) -> str:
        """Layout character for this color."""
        return self.value

    @property
    def is_piece(self) -> bool:
        return self is not PieceColor.EMPTY

    @property
    def forward(self) -> int:
        """Row direction this color advances in: +1 for White, -1 for Black."""
        if self is PieceColor.WHITE:
            return 1
        if self is PieceColor.BLACK:
            return -1
        return 0

    def opposite(self) -> "PieceColor":
        """Return the opposing color (EMPTY is its own opposite)."""
        if self is PieceColor.WHITE:
            return PieceColor.BLACK
        if self is PieceColor.BLACK:
            return PieceColor.WHITE
        return PieceColor.EMPTY

    @classmethod
    def from_symbol(cls, symbol: str) -> "PieceColor":
        """
        Parse a layout character ('w', 'b' or '-').

        Raises:
            InvalidLayout: If the character is not a piece symbol
        """
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidLayout(f"Invalid piece symbol: {symbol!r}")

    def __str__(self) -> str:
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK
