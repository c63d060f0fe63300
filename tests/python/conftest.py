"""
pytest configuration and fixtures for optverify tests.
"""

import pytest
import numpy as np
from scipy import sparse


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def simple_lp():
    """
    Simple LP problem for testing.

    minimize: x + y
    subject to: x + y <= 5
                0 <= x, y <= 10

    At x = (2, 3): feasible, objective 5.
    """
    return {
        "A": np.array([[1.0, 1.0]]),
        "b": np.array([5.0]),
        "csense": ["L"],
        "lb": np.array([0.0, 0.0]),
        "ub": np.array([10.0, 10.0]),
        "c": np.array([1.0, 1.0]),
    }


@pytest.fixture
def mixed_lp():
    """
    LP with one row of each sense.

    x + y  = 4
    x - y <= 1
    x     >= 1
    0 <= x, y <= 5

    x = (2, 2) satisfies every row.
    """
    return {
        "A": np.array([
            [1.0, 1.0],
            [1.0, -1.0],
            [1.0, 0.0],
        ]),
        "b": np.array([4.0, 1.0, 1.0]),
        "csense": "ELG",
        "lb": np.array([0.0, 0.0]),
        "ub": np.array([5.0, 5.0]),
        "c": np.array([1.0, 2.0]),
        "feasible_x": np.array([2.0, 2.0]),
    }


@pytest.fixture
def simple_qp():
    """
    Simple QP problem for testing.

    minimize: (1/2)(2x^2 + 2y^2) - 2x - 4y
    subject to: x + y <= 3
                0 <= x, y <= 10

    At x = (1, 2): objective 1 + 4 - 2 - 8 = -5.
    """
    return {
        "F": np.array([
            [2.0, 0.0],
            [0.0, 2.0],
        ]),
        "c": np.array([-2.0, -4.0]),
        "A": np.array([[1.0, 1.0]]),
        "b": np.array([3.0]),
        "csense": "L",
        "lb": np.array([0.0, 0.0]),
        "ub": np.array([10.0, 10.0]),
        "expected_obj": -5.0,
        "expected_x": np.array([1.0, 2.0]),
    }


@pytest.fixture
def simple_milp():
    """
    MILP with one integer, one binary and one continuous variable.

    x0 + x1 + x2 <= 10
    0 <= x0 <= 8, 0 <= x1 <= 1, 0 <= x2 <= 5
    """
    return {
        "A": np.array([[1.0, 1.0, 1.0]]),
        "b": np.array([10.0]),
        "csense": "L",
        "lb": np.array([0.0, 0.0, 0.0]),
        "ub": np.array([8.0, 1.0, 5.0]),
        "c": np.array([-1.0, -2.0, 0.5]),
        "vartype": "IBC",
    }


@pytest.fixture
def sparse_lp():
    """Generate a sparse LP with a known feasible point."""
    np.random.seed(42)
    n, m = 200, 80

    A = sparse.random(m, n, density=0.05, format='csr')
    x_feas = np.abs(np.random.randn(n))
    b = A @ x_feas + 0.1

    return {
        "A": A,
        "b": b,
        "csense": "L" * m,
        "lb": np.zeros(n),
        "ub": np.full(n, np.inf),
        "c": np.random.randn(n),
        "feasible_x": x_feas,
    }


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "property: marks hypothesis property tests")
