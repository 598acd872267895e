"""
Move Generation

Produces every legal move for the side to move.

Rules:
    1. Mandatory capture: if any piece of the side to move can capture,
       the only legal moves are capture chains.
    2. Maximality: a chain keeps capturing until no further capture is
       available from its landing square. Stopping early is illegal, at
       every leg, not only the first.
    3. Steps go one square left, right or forward (row + 1 for White,
       row - 1 for Black). From a cross point a piece may also step to the
       two forward diagonals. Pieces never step backward.
    4. A step may not return a piece to the square it just stepped from
       (reversal memory).

Chains fork whenever more than one capture is available from a landing
square; each branch becomes its own move. Branches are explored on scratch
copies of the board so the caller's position is never touched.

Geometry tables (step targets per color, jump legs per square) are derived
from the square layer once at import.
"""

from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from qirkat_engine.board import square as sq
from qirkat_engine.board.move import Move
from qirkat_engine.board.piece import BLACK, EMPTY, WHITE, PieceColor

if TYPE_CHECKING:
    from qirkat_engine.board.position import Position

Board = Sequence[PieceColor]


def _build_step_targets(color: PieceColor) -> Dict[int, Tuple[int, ...]]:
    """Squares a piece of color may step to from each square, in generation order."""
    forward = color.forward
    table = {}
    for k in sq.SQUARES:
        deltas = [(-1, 0), (1, 0), (0, forward)]
        if sq.is_cross_point(k):
            deltas += [(-1, forward), (1, forward)]
        targets = (sq.offset(k, dc, dr) for dc, dr in deltas)
        table[k] = tuple(t for t in targets if t is not None)
    return table


def _build_jump_legs() -> Dict[int, Tuple[Tuple[int, int], ...]]:
    """(jumped, landing) pairs reachable from each square, in generation order."""
    orthogonal = [(0, 2), (0, -2), (2, 0), (-2, 0)]
    diagonal = [(2, 2), (2, -2), (-2, 2), (-2, -2)]
    table = {}
    for k in sq.SQUARES:
        deltas = orthogonal + (diagonal if sq.is_cross_point(k) else [])
        legs = []
        for dc, dr in deltas:
            landing = sq.offset(k, dc, dr)
            if landing is not None:
                legs.append(((k + landing) // 2, landing))
        table[k] = tuple(legs)
    return table


STEP_TARGETS = {WHITE: _build_step_targets(WHITE), BLACK: _build_step_targets(BLACK)}
JUMP_LEGS = _build_jump_legs()


# ============================================================================
# Captures
# ============================================================================


def capture_legs(board: Board, square: int, mover: PieceColor) -> List[Tuple[int, int]]:
    """
    Return the (jumped, landing) pairs available to mover's piece on square.

    A leg is available iff the jumped square holds an opponent piece and the
    landing square is empty.
    """
    opponent = mover.opposite()
    return [
        (jumped, landing)
        for jumped, landing in JUMP_LEGS[square]
        if board[jumped] is opponent and board[landing] is EMPTY
    ]


def _extend_chains(board: Board, square: int, mover: PieceColor) -> List[Move]:
    """
    Return every maximal continuation from square.

    The base case, when no capture is available, is the vestigial move
    marking square itself.
    """
    legs = capture_legs(board, square, mover)
    if not legs:
        return [Move.vestigial(square)]

    chains = []
    for jumped, landing in legs:
        scratch = list(board)
        scratch[square] = EMPTY
        scratch[jumped] = EMPTY
        scratch[landing] = mover
        head = Move(square, landing)
        for tail in _extend_chains(scratch, landing, mover):
            chains.append(Move.concat(head, tail))
    return chains


def legal_capture_chains_from(position: "Position", square: int) -> List[Move]:
    """
    Return all maximal capture chains for the piece on square.

    Returns an empty list if square does not hold a piece of the side to
    move, or if that piece cannot capture.
    """
    board = position.pieces
    mover = position.side_to_move
    if board[square] is not mover:
        return []
    return [m for m in _extend_chains(board, square, mover) if not m.is_vestigial]


def single_jumps_from(position: "Position", square: int) -> List[Move]:
    """Return the single capture legs available to the piece on square."""
    board = position.pieces
    mover = position.side_to_move
    if board[square] is not mover:
        return []
    return [Move(square, landing) for _, landing in capture_legs(board, square, mover)]


def has_capture(position: "Position") -> bool:
    """Return True iff any piece of the side to move can capture."""
    board = position.pieces
    mover = position.side_to_move
    return any(
        capture_legs(board, k, mover) for k in sq.SQUARES if board[k] is mover
    )


# ============================================================================
# Steps
# ============================================================================


def is_step_shape(source: int, destination: int, mover: PieceColor) -> bool:
    """True iff source-destination is a lateral, forward or forward-diagonal step for mover."""
    return destination in STEP_TARGETS[mover][source]


def legal_steps_from(position: "Position", square: int) -> List[Move]:
    """
    Return the non-capturing steps available to the piece on square.

    Ignores the mandatory-capture rule; legal_moves() applies it.
    """
    board = position.pieces
    mover = position.side_to_move
    if board[square] is not mover:
        return []
    came_from = position.reversal_source(square)
    return [
        Move(square, target)
        for target in STEP_TARGETS[mover][square]
        if board[target] is EMPTY and target != came_from
    ]


def legal_steps(position: "Position") -> List[Move]:
    """Return every non-capturing step for the side to move."""
    moves = []
    for k in position.pieces_of(position.side_to_move):
        moves.extend(legal_steps_from(position, k))
    return sorted(moves, key=lambda m: (m.source, m.destination))


# ============================================================================
# All moves
# ============================================================================


def legal_moves(position: "Position") -> List[Move]:
    """
    Return all legal moves for the side to move.

    Either every maximal capture chain (when any capture exists) or every
    legal step; never both. Empty when the side to move is stuck.
    """
    board = position.pieces
    mover = position.side_to_move
    squares = [k for k in sq.SQUARES if board[k] is mover]

    if any(capture_legs(board, k, mover) for k in squares):
        moves = []
        for k in squares:
            moves.extend(legal_capture_chains_from(position, k))
    else:
        moves = []
        for k in squares:
            moves.extend(legal_steps_from(position, k))

    return list(dict.fromkeys(moves))
