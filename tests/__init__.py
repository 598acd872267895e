"""
Unit Tests for Qirkat Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_generator.py

    # Run with coverage
    pytest tests/ --cov=qirkat_engine --cov-report=html

    # Run specific test
    pytest tests/test_position.py::TestUndo::test_undo_restores_start

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
