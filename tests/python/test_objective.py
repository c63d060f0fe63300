"""
Tests for objective evaluation at a candidate solution.
"""

import pytest
import numpy as np
from scipy import sparse

from optverify import Status, validate


class TestLinearObjective:

    def test_linear_value(self, simple_lp):
        result = validate(simple_lp, x=np.array([2.0, 3.0]), verbose=False)
        assert result.objective == pytest.approx(5.0)

    def test_computed_when_infeasible(self, simple_lp):
        result = validate(simple_lp, x=np.array([6.0, 0.0]), verbose=False)

        assert result.status == Status.INFEASIBLE
        assert result.objective == pytest.approx(6.0)

    def test_objective_is_float(self, simple_lp):
        result = validate(simple_lp, x=[2, 3], verbose=False)
        assert isinstance(result.objective, float)

    def test_absent_without_solution(self, simple_lp):
        assert validate(simple_lp, verbose=False).objective is None

    def test_matches_dot_product(self, sparse_lp):
        x = sparse_lp["feasible_x"]
        result = validate(sparse_lp, x=x, verbose=False)

        assert result.objective == pytest.approx(float(sparse_lp["c"] @ x))


class TestQuadraticObjective:

    def test_quadratic_value(self, simple_qp):
        result = validate(simple_qp, x=simple_qp["expected_x"], verbose=False)

        assert result.status == Status.VALID
        assert result.objective == pytest.approx(simple_qp["expected_obj"])

    def test_sparse_F(self, simple_qp):
        problem = dict(simple_qp, F=sparse.csc_matrix(simple_qp["F"]))
        result = validate(problem, x=simple_qp["expected_x"], verbose=False)

        assert result.objective == pytest.approx(simple_qp["expected_obj"])

    def test_non_symmetric_F(self):
        """The quadratic form uses F as given, not its symmetric part."""
        F = np.array([[0.0, 2.0], [0.0, 0.0]])
        problem = {
            "A": np.zeros((0, 2)),
            "b": np.zeros(0),
            "csense": "",
            "lb": np.full(2, -np.inf),
            "ub": np.full(2, np.inf),
            "c": np.zeros(2),
            "F": F,
        }
        x = np.array([1.0, 3.0])
        result = validate(problem, x=x, verbose=False)

        # 0.5 * (x0 * 2 * x1) = 3
        assert result.objective == pytest.approx(3.0)

    def test_quadratic_precedes_linear(self, simple_qp):
        x = np.array([0.5, 0.5])
        result = validate(simple_qp, x=x, verbose=False)

        expected = 0.5 * x @ simple_qp["F"] @ x + simple_qp["c"] @ x
        assert result.objective == pytest.approx(expected)
        assert result.objective != pytest.approx(simple_qp["c"] @ x)

    def test_column_solution(self, simple_qp):
        x = simple_qp["expected_x"].reshape(-1, 1)
        result = validate(simple_qp, x=x, verbose=False)

        assert result.objective == pytest.approx(simple_qp["expected_obj"])


class TestObjectiveUnavailable:

    def test_bad_solution_shape(self, simple_qp):
        result = validate(simple_qp, x=np.ones(3), verbose=False)
        assert result.objective is None

    def test_structural_error(self, simple_qp):
        problem = dict(simple_qp, c=np.ones(5))
        result = validate(problem, x=simple_qp["expected_x"], verbose=False)

        assert result.status == Status.STRUCTURAL_ERROR
        assert result.objective is None
