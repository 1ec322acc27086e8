"""
Unit Tests for connect4-engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=connect4_engine --cov-report=html

    # Run specific test
    pytest tests/test_board.py::TestWinner::test_vertical_win

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
