"""
Test cases for the exact Riemann solver.

Run tests with pytest:
    pytest exact_riemann/tests/ -v

Or run individual test files:
    pytest exact_riemann/tests/test_star_region.py -v
    pytest exact_riemann/tests/test_solution.py -v
"""

from .toro_cases import ToroCase, TORO_CASES, get_case, run_toro_tests

__all__ = [
    'ToroCase',
    'TORO_CASES',
    'get_case',
    'run_toro_tests',
]
