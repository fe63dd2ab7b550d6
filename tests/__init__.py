"""
Unit Tests for Ataxx Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_board.py

    # Run specific test
    pytest tests/test_board.py::TestUndo::test_random_playout_round_trip

Dependencies:
    - pytest: Test framework
    - numpy: Array assertions for the tensor encoding
"""
