"""
Qirkat Moves

A Move is an immutable value with three shapes:

    - step:     a1-b2       one square orthogonally, or diagonally from a
                            cross point
    - capture:  a1-a3       a jump of exactly two squares over the jumped
                            (middle) square
    - chain:    a1-a3-c3    a capture followed by another chain starting
                            where the first capture landed

A "vestigial" move has the same source and destination and no
continuation. It stands for a bare square and only serves as the base case
when capture chains are built recursively; it is never playable.

Notation:
    <col><row>(-<col><row>)+, e.g. "c2-c3" or "a3-c5-c3"

Moves compare by value: two moves are equal iff their source, destination
and continuation are equal.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from qirkat_engine.board import square as sq
from qirkat_engine.exceptions import MalformedMove

MOVE_PATTERN = re.compile(r"[a-e][1-5](?:-[a-e][1-5])+")


@dataclass(frozen=True, repr=False)
class Move:
    """
    A step, a single capture or a capture chain.

    Attributes:
        source: Linearized index of the starting square
        destination: Linearized index of the square this leg ends on
        next_jump: The rest of the chain for a multi-leg capture, or None
    """

    source: int
    destination: int
    next_jump: Optional["Move"] = None

    def __post_init__(self):
        if not sq.valid_index(self.source) or not sq.valid_index(self.destination):
            raise MalformedMove(
                f"Invalid squares for move: {self.source}, {self.destination}"
            )
        if self.next_jump is None:
            return
        if not isinstance(self.next_jump, Move):
            raise MalformedMove(f"Invalid continuation: {self.next_jump!r}")
        if not self.is_jump or not self.next_jump.is_jump:
            raise MalformedMove("bad jump: only captures can be chained")
        if self.next_jump.source != self.destination:
            raise MalformedMove(
                f"bad jump: {self.next_jump} does not start at "
                f"{sq.square_name(self.destination)}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_labels(
        cls,
        col0: str,
        row0: str,
        col1: str,
        row1: str,
        next_jump: Optional["Move"] = None,
    ) -> "Move":
        """Build the move col0 row0 - col1 row1, followed by next_jump."""
        return cls(sq.index(col0, row0), sq.index(col1, row1), next_jump)

    @classmethod
    def vestigial(cls, square: int) -> "Move":
        """Return the vestigial move standing for a single square."""
        return cls(square, square)

    @classmethod
    def concat(cls, first: Optional["Move"], second: Optional["Move"]) -> Optional["Move"]:
        """
        Return first followed by second.

        Either may be None, in which case the result is the other. A
        vestigial move is equivalent to a square and extends a move on
        either end by nothing.

        Raises:
            MalformedMove: If the result is not a valid chain
        """
        if first is None:
            return second
        if second is None:
            return first
        if first.is_vestigial:
            return second
        if second.is_vestigial:
            if second.source != first.final_destination:
                raise MalformedMove(f"Cannot extend {first} with {second}")
            return first
        tail = second if first.next_jump is None else cls.concat(first.next_jump, second)
        return cls(first.source, first.destination, tail)

    @classmethod
    def parse(cls, notation: str) -> "Move":
        """
        Parse move notation such as "c2-c3" or "a3-c5-c3".

        Raises:
            MalformedMove: If the notation is not a sequence of at least two
                squares joined by hyphens, or does not form a valid chain
        """
        if not isinstance(notation, str):
            raise MalformedMove(f"bad move denotation: {notation!r}")
        text = notation.strip()
        if not MOVE_PATTERN.fullmatch(text):
            raise MalformedMove(f"bad move denotation: {notation!r}")

        squares = [sq.parse_square(name) for name in text.split("-")]
        result = None
        for source, destination in reversed(list(zip(squares, squares[1:]))):
            result = cls(source, destination, result)
        return result

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def is_jump(self) -> bool:
        """True iff this is a capturing move (its first leg spans more than one square)."""
        dcol, drow = sq.distance(self.source, self.destination)
        return dcol > 1 or drow > 1

    @property
    def is_vestigial(self) -> bool:
        return self.source == self.destination and self.next_jump is None

    @property
    def is_left_move(self) -> bool:
        """True iff this is a non-capturing step one column to the left."""
        return (
            not self.is_jump
            and sq.row_index(self.source) == sq.row_index(self.destination)
            and sq.col_index(self.source) - sq.col_index(self.destination) == 1
        )

    @property
    def is_right_move(self) -> bool:
        """True iff this is a non-capturing step one column to the right."""
        return (
            not self.is_jump
            and sq.row_index(self.source) == sq.row_index(self.destination)
            and sq.col_index(self.destination) - sq.col_index(self.source) == 1
        )

    @property
    def jumped_index(self) -> Optional[int]:
        """
        Linearized index of the square jumped over by the first leg.

        Returns None unless the first leg is a jump of exactly two squares
        along a row, column or diagonal.
        """
        dcol, drow = sq.distance(self.source, self.destination)
        if dcol not in (0, 2) or drow not in (0, 2) or dcol + drow == 0:
            return None
        return (self.source + self.destination) // 2

    @property
    def jump_tail(self) -> Optional["Move"]:
        """The second and subsequent legs of a chain, or None."""
        return self.next_jump

    @property
    def final_destination(self) -> int:
        """Square the acting piece ends on after the whole chain."""
        move = self
        while move.next_jump is not None:
            move = move.next_jump
        return move.destination

    def legs(self) -> Iterator["Move"]:
        """Yield each leg of the move as a single-leg Move."""
        move = self
        while move is not None:
            yield Move(move.source, move.destination)
            move = move.next_jump

    def __len__(self) -> int:
        """Number of legs (1 for a step or a single capture)."""
        return 1 + (len(self.next_jump) if self.next_jump is not None else 0)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.is_vestigial:
            return sq.square_name(self.source)
        text = f"{sq.square_name(self.source)}-{sq.square_name(self.destination)}"
        move = self.next_jump
        while move is not None:
            text += f"-{sq.square_name(move.destination)}"
            move = move.next_jump
        return text

    def __repr__(self) -> str:
        return f"Move({str(self)!r})"
