"""
Utilities Module

Regression fixtures, perft and fixture benchmarking for the engine.

Key Components:
    - REGRESSION_POSITIONS: Positions with known move counts and answers
    - perft: Leaf count of the legal move tree
    - run_fixture_suite: Check and search every fixture
    - export_fixture_tensors: Save fixture positions as numpy tensors
"""

from qirkat_engine.utils.testing import (
    REGRESSION_POSITIONS,
    FixturePosition,
    FixtureResult,
    evaluate_fixture,
    export_fixture_tensors,
    perft,
    run_fixture_suite,
)

__all__ = [
    'REGRESSION_POSITIONS',
    'FixturePosition',
    'FixtureResult',
    'evaluate_fixture',
    'export_fixture_tensors',
    'perft',
    'run_fixture_suite',
]
