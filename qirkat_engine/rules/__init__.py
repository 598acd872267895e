"""
Rules Module

Move generation and legality checking for Qirkat.

Key Components:
    - legal_moves: Every legal move (all maximal capture chains, or all
      steps when no capture exists)
    - legal_capture_chains_from: Maximal chains for one piece
    - is_legal: Independent re-check of any candidate move

Both work on a Position without modifying it; capture chains are explored
on scratch copies of the board.
"""

from qirkat_engine.rules.generator import (
    has_capture,
    legal_capture_chains_from,
    legal_moves,
    legal_steps,
    legal_steps_from,
    single_jumps_from,
)
from qirkat_engine.rules.validator import is_legal

__all__ = [
    'legal_moves',
    'legal_capture_chains_from',
    'legal_steps',
    'legal_steps_from',
    'single_jumps_from',
    'has_capture',
    'is_legal',
]
