"""
Qirkat Position

A Position holds the 25 squares of the board, the side to move, the
reversal memory and the undo history.

Layouts:
    Compact layouts are 25 characters drawn from 'w', 'b' and '-',
    optionally interspersed with whitespace. They list the squares in
    row-major order starting with the bottom row (row 1) and the left
    column (column a). The initial position is:

        wwwww wwwww bb-ww bbbbb bbbbb

    A layout containing line breaks is read as a rendered board, top row
    (row 5) first, which is the format produced by to_canonical_string().

Rendering (to_canonical_string):

      b b b b b
      b b b b b
      b b - w w
      w w w w w
      w w w w w

Reversal memory:
    After a non-capturing step from X to Y the position remembers that the
    piece on Y came from X, and the step Y-X is illegal until that piece
    moves again. Captures never create entries, and any entry for a square
    is dropped as soon as the piece on it leaves or is captured.

History:
    apply() pushes a snapshot of the board, side to move and reversal
    memory before mutating; undo() pops it. The legal move list and the
    terminal flag are cached and recomputed after every change.
"""

import logging
import re
from typing import Dict, List, NamedTuple, Optional, Set, Tuple, Union

from qirkat_engine.board import square as sq
from qirkat_engine.board.move import Move
from qirkat_engine.board.piece import BLACK, EMPTY, WHITE, PieceColor
from qirkat_engine.exceptions import InvalidLayout
from qirkat_engine.rules import generator, validator

logger = logging.getLogger(__name__)

INITIAL_LAYOUT = "wwwww wwwww bb-ww bbbbb bbbbb"

LAYOUT_PATTERN = re.compile(r"[bw-]{25}")


class Snapshot(NamedTuple):
    """Saved state restored by undo()."""

    board: Tuple[PieceColor, ...]
    side_to_move: PieceColor
    reversals: Dict[int, int]


class Position:
    """
    A Qirkat board position with undo history.

    Attributes:
        side_to_move: Color of the player who moves next
        pieces: Tuple of the 25 square contents, indexed by linearized index
    """

    def __init__(self, layout: Optional[str] = None, side_to_move: PieceColor = WHITE):
        """
        Create a position.

        Args:
            layout: Board layout (default: the initial position)
            side_to_move: Color to move (default: White)

        Raises:
            InvalidLayout: If the layout or side to move is rejected
        """
        self._board: List[PieceColor] = [EMPTY] * sq.NUM_SQUARES
        self._side_to_move: PieceColor = WHITE
        self._reversals: Dict[int, int] = {}
        self._history: List[Snapshot] = []
        self._legal_moves: Optional[List[Move]] = None
        self.set_from_string(INITIAL_LAYOUT if layout is None else layout, side_to_move)

    @classmethod
    def from_layout(cls, layout: str, side_to_move: PieceColor) -> "Position":
        """Return a new position set up from layout with side_to_move to play."""
        return cls(layout, side_to_move)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def set_from_string(self, layout: str, side_to_move: PieceColor):
        """
        Reset the board to layout with side_to_move to play.

        History and reversal memory are cleared. Nothing changes if the
        layout is rejected.

        Spaces and tabs are ignored, but line breaks are not: a layout
        containing a line break is read as a rendered board, top row
        (row 5) first, as produced by to_canonical_string(). Without line
        breaks the layout lists row 1 first.

        Raises:
            InvalidLayout: If layout is not 25 symbols from {b, w, -}
                (ignoring whitespace), or side_to_move is not White or Black
        """
        if side_to_move not in (WHITE, BLACK):
            logger.debug(f"Rejected side to move: {side_to_move!r}")
            raise InvalidLayout(f"bad player color: {side_to_move!r}")
        if not isinstance(layout, str):
            raise InvalidLayout(f"bad board description: {layout!r}")

        symbols = re.sub(r"\s", "", layout)
        if not LAYOUT_PATTERN.fullmatch(symbols):
            logger.debug(f"Rejected layout: {layout!r}")
            raise InvalidLayout(f"bad board description: {layout!r}")

        if "\n" in layout.strip():
            rows = [symbols[i:i + sq.SIDE] for i in range(0, sq.NUM_SQUARES, sq.SIDE)]
            symbols = "".join(reversed(rows))

        self._board = [PieceColor.from_symbol(ch) for ch in symbols]
        self._side_to_move = side_to_move
        self._reversals.clear()
        self._history.clear()
        self._invalidate()

    def clear(self):
        """Reset to the initial position with White to move."""
        self.set_from_string(INITIAL_LAYOUT, WHITE)

    def copy(self) -> "Position":
        """
        Return an independent copy of this position.

        The copy shares nothing with the original and starts with an
        empty history.
        """
        clone = Position.__new__(Position)
        clone._board = list(self._board)
        clone._side_to_move = self._side_to_move
        clone._reversals = dict(self._reversals)
        clone._history = []
        clone._legal_moves = None if self._legal_moves is None else list(self._legal_moves)
        return clone

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def side_to_move(self) -> PieceColor:
        return self._side_to_move

    @property
    def pieces(self) -> Tuple[PieceColor, ...]:
        return tuple(self._board)

    @property
    def history_depth(self) -> int:
        """Number of moves that can be undone."""
        return len(self._history)

    def get(self, square: Union[int, str]) -> PieceColor:
        """Return the contents of a square given by index or label ('c3')."""
        if isinstance(square, str):
            square = sq.parse_square(square)
        return self._board[square]

    def __getitem__(self, square: Union[int, str]) -> PieceColor:
        return self.get(square)

    def pieces_of(self, color: PieceColor) -> Set[int]:
        """Return the set of squares holding color."""
        return {k for k in sq.SQUARES if self._board[k] is color}

    def count(self, color: PieceColor) -> int:
        return sum(1 for piece in self._board if piece is color)

    def reversal_source(self, square: int) -> Optional[int]:
        """Square the piece on square last stepped from, if it is remembered."""
        return self._reversals.get(square)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def legal_moves(self) -> List[Move]:
        """Return all legal moves for the side to move."""
        if self._legal_moves is None:
            self._legal_moves = generator.legal_moves(self)
        return list(self._legal_moves)

    def is_legal(self, move: Union[Move, str]) -> bool:
        """Return True iff move (a Move or its notation) is legal here."""
        return validator.is_legal(self, move)

    def is_terminal(self) -> bool:
        """True iff the side to move has no legal moves."""
        if self._legal_moves is None:
            self._legal_moves = generator.legal_moves(self)
        return not self._legal_moves

    @property
    def terminal(self) -> bool:
        return self.is_terminal()

    def jump_possible(self, square: Optional[int] = None) -> bool:
        """
        Return True iff the side to move can capture.

        Args:
            square: Restrict the check to the piece on this square
        """
        if square is None:
            return generator.has_capture(self)
        return bool(generator.single_jumps_from(self, square))

    # ------------------------------------------------------------------
    # Making and unmaking moves
    # ------------------------------------------------------------------

    def apply(self, move: Move):
        """
        Make move on this position. Assumes the move is legal.

        Every jumped piece is removed, the acting piece moves from the
        chain's source to its final destination and the side to move
        flips.
        """
        self._history.append(self._snapshot())

        piece = self._board[move.source]
        self._board[move.source] = EMPTY
        self._reversals.pop(move.source, None)

        if move.is_jump:
            for leg in move.legs():
                jumped = leg.jumped_index
                self._board[jumped] = EMPTY
                self._reversals.pop(jumped, None)
            destination = move.final_destination
            self._reversals.pop(destination, None)
        else:
            destination = move.destination
            self._reversals[destination] = move.source

        self._board[destination] = piece
        self._side_to_move = self._side_to_move.opposite()
        self._invalidate()

    def undo(self):
        """Undo the last move, if any."""
        if not self._history:
            return
        snapshot = self._history.pop()
        self._board = list(snapshot.board)
        self._side_to_move = snapshot.side_to_move
        self._reversals = snapshot.reversals
        self._invalidate()

    def _snapshot(self) -> Snapshot:
        return Snapshot(tuple(self._board), self._side_to_move, dict(self._reversals))

    def _invalidate(self):
        self._legal_moves = None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_layout(self) -> str:
        """Return the compact 25-character layout, row 1 first."""
        return "".join(piece.symbol for piece in self._board)

    def to_canonical_string(self) -> str:
        """Return the board as five indented rows, row 5 first."""
        return self.to_string(legend=False)

    def to_string(self, legend: bool = False) -> str:
        """
        Return a text depiction of the board.

        Args:
            legend: If True, label rows on the left and columns underneath
        """
        lines = []
        for r in reversed(range(sq.SIDE)):
            cells = " ".join(
                self._board[c + sq.SIDE * r].symbol for c in range(sq.SIDE)
            )
            prefix = f"{sq.ROWS[r]}  " if legend else "  "
            lines.append(prefix + cells)
        if legend:
            lines.append("   " + " ".join(sq.COLUMNS))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __repr__(self) -> str:
        return f"Position({self.to_layout()!r}, {self._side_to_move})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._side_to_move is other._side_to_move and self._board == other._board

    __hash__ = None
