"""
Legality Validation

Re-checks an arbitrary candidate move against a position, independently of
move generation. Used for moves typed in by a human as well as for
cross-checking the generator.

Checks, in order:
    1. The move is not vestigial
    2. The source holds a piece of the side to move
    3. The first destination is empty
    4. Step: no capture exists anywhere for the side to move, the step is
       lateral, forward, or forward-diagonal from a cross point, and it does
       not reverse the piece's last step
    5. Chain: every leg is a capture on the board as it stands after the
       previous legs, and no further capture exists from the final landing
       square

Illegal moves return False. Only structurally malformed input raises
MalformedMove.
"""

from typing import TYPE_CHECKING, Union

from qirkat_engine.board.move import Move
from qirkat_engine.board.piece import EMPTY
from qirkat_engine.exceptions import MalformedMove
from qirkat_engine.rules.generator import capture_legs, has_capture, is_step_shape

if TYPE_CHECKING:
    from qirkat_engine.board.position import Position


def is_legal(position: "Position", move: Union[Move, str]) -> bool:
    """
    Return True iff move is legal in position.

    Args:
        position: Position to check against (not modified)
        move: A Move, or move notation such as "a3-c5-c3"

    Raises:
        MalformedMove: If move is not a Move or its notation does not parse
    """
    if isinstance(move, str):
        move = Move.parse(move)
    if not isinstance(move, Move):
        raise MalformedMove(f"Not a move: {move!r}")

    if move.is_vestigial:
        return False

    mover = position.side_to_move
    board = position.pieces
    if board[move.source] is not mover:
        return False
    if board[move.destination] is not EMPTY:
        return False

    if move.is_jump:
        return is_legal_chain(position, move)
    return is_legal_step(position, move)


def is_legal_step(position: "Position", move: Move) -> bool:
    """Return True iff the non-capturing move is legal in position."""
    if move.is_jump or move.next_jump is not None:
        return False
    if has_capture(position):
        return False
    if not is_step_shape(move.source, move.destination, position.side_to_move):
        return False
    return position.reversal_source(move.source) != move.destination


def is_legal_chain(position: "Position", move: Move) -> bool:
    """Return True iff move is a complete, maximal capture chain in position."""
    mover = position.side_to_move
    scratch = list(position.pieces)
    if scratch[move.source] is not mover:
        return False

    for leg in move.legs():
        available = capture_legs(scratch, leg.source, mover)
        jumped = leg.jumped_index
        if (jumped, leg.destination) not in available:
            return False
        scratch[leg.source] = EMPTY
        scratch[jumped] = EMPTY
        scratch[leg.destination] = mover

    return not capture_legs(scratch, move.final_destination, mover)
