"""
Square Coordinates

Squares are labeled by column ('a'..'e') and row ('1'..'5'). For most
purposes the engine refers to a square by its linearized index: the number
of the square in row-major order, starting from the bottom row.

    Row 5:  20 21 22 23 24
    Row 4:  15 16 17 18 19
    Row 3:  10 11 12 13 14
    Row 2:   5  6  7  8  9
    Row 1:   0  1  2  3  4
             a  b  c  d  e

Cross points are the squares with diagonal connections. They form a
checkerboard pattern: a square is a cross point iff the sum of its column
and row offsets is even (a1, c1, e1, b2, d2, ...).
"""

from typing import Optional, Tuple

from qirkat_engine.exceptions import MalformedMove

SIDE = 5
NUM_SQUARES = SIDE * SIDE
MAX_INDEX = NUM_SQUARES - 1

COLUMNS = "abcde"
ROWS = "12345"

SQUARES = range(NUM_SQUARES)


def valid_square(col: str, row: str) -> bool:
    """Return True iff col/row designate a square ('a' <= col <= 'e', '1' <= row <= '5')."""
    return (
        isinstance(col, str) and isinstance(row, str)
        and len(col) == 1 and len(row) == 1
        and col in COLUMNS and row in ROWS
    )


def valid_index(k: int) -> bool:
    """Return True iff k is a linearized index (0..24)."""
    return isinstance(k, int) and not isinstance(k, bool) and 0 <= k <= MAX_INDEX


def index(col: str, row: str) -> int:
    """
    Convert a column letter and row digit to a linearized index.

    Raises:
        MalformedMove: If the square is off the board
    """
    if not valid_square(col, row):
        raise MalformedMove(f"Invalid square: {col}{row}")
    return COLUMNS.index(col) + SIDE * ROWS.index(row)


def col(k: int) -> str:
    """Return the column letter of linearized index k."""
    return COLUMNS[k % SIDE]


def row(k: int) -> str:
    """Return the row digit of linearized index k."""
    return ROWS[k // SIDE]


def col_index(k: int) -> int:
    """Return the column offset (0 for 'a') of linearized index k."""
    return k % SIDE


def row_index(k: int) -> int:
    """Return the row offset (0 for '1') of linearized index k."""
    return k // SIDE


def square_name(k: int) -> str:
    """Return the label of linearized index k, e.g. 12 -> 'c3'."""
    if not valid_index(k):
        raise MalformedMove(f"Invalid square index: {k}")
    return col(k) + row(k)


def parse_square(name: str) -> int:
    """
    Parse a square label such as 'c3' into its linearized index.

    Raises:
        MalformedMove: If the label is not a square on the board
    """
    if not isinstance(name, str) or len(name) != 2:
        raise MalformedMove(f"Invalid square: {name!r}")
    return index(name[0], name[1])


def coordinates_to_square(col_offset: int, row_offset: int) -> Optional[int]:
    """
    Convert column/row offsets to a linearized index.

    Returns:
        The index, or None if the offsets fall off the board
    """
    if 0 <= col_offset < SIDE and 0 <= row_offset < SIDE:
        return col_offset + SIDE * row_offset
    return None


def offset(k: int, delta_col: int, delta_row: int) -> Optional[int]:
    """Return the square delta_col columns and delta_row rows away from k, or None."""
    return coordinates_to_square(col_index(k) + delta_col, row_index(k) + delta_row)


def distance(k0: int, k1: int) -> Tuple[int, int]:
    """Return the absolute (column, row) distance between two squares."""
    return abs(col_index(k0) - col_index(k1)), abs(row_index(k0) - row_index(k1))


def is_cross_point(k: int) -> bool:
    """Return True iff diagonal connections exist at square k."""
    return (col_index(k) + row_index(k)) % 2 == 0
