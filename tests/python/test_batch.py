"""
Tests for validate_batch.
"""

import pytest
import numpy as np

from optverify import Status, validate_batch


class TestValidateBatch:

    def test_structure_only(self, simple_lp, simple_qp):
        results = validate_batch([simple_lp, simple_qp])

        assert [r.status for r in results] == [Status.VALID, Status.VALID]
        assert results[1].problem_class.valid_qp

    def test_with_solutions(self, simple_lp, mixed_lp):
        results = validate_batch(
            [simple_lp, mixed_lp, simple_lp],
            solutions=[np.array([2.0, 3.0]), mixed_lp["feasible_x"], np.array([6.0, 0.0])],
        )

        assert [int(r.status) for r in results] == [1, 1, 0]
        assert results[2].invalid_constraints == [0]

    def test_none_solution_skips_check(self, simple_lp):
        results = validate_batch([simple_lp], solutions=[None])
        assert not results[0].solution_checked

    def test_tolerance_param(self, simple_lp):
        x = np.array([2.0, 3.0 + 1e-4])

        strict = validate_batch([simple_lp], [x], params={"tolerance": 1e-8})
        loose = validate_batch([simple_lp], [x], params={"tol": 1e-3})

        assert strict[0].status == Status.INFEASIBLE
        assert loose[0].status == Status.VALID

    def test_quiet_by_default(self, simple_lp, capsys):
        validate_batch([simple_lp])
        assert capsys.readouterr().out == ""

    def test_verbose_param(self, simple_lp, capsys):
        validate_batch([simple_lp], params={"verbose": True})
        assert "Valid LP problem" in capsys.readouterr().out

    def test_length_mismatch(self, simple_lp):
        with pytest.raises(ValueError):
            validate_batch([simple_lp, simple_lp], solutions=[None])
