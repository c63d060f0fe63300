"""
Tests for Status and ValidationResult.
"""

import pytest
import numpy as np

from optverify import ProblemClass, Status, ValidationResult, validate


class TestStatus:

    def test_integer_codes(self):
        assert Status.STRUCTURAL_ERROR == -1
        assert Status.INFEASIBLE == 0
        assert Status.VALID == 1

    def test_str(self):
        assert str(Status.VALID) == "valid"
        assert str(Status.STRUCTURAL_ERROR) == "structural_error"

    def test_from_int(self):
        assert Status(0) is Status.INFEASIBLE


class TestValidationResult:

    def test_defaults(self):
        result = ValidationResult(status=Status.VALID)

        assert result.invalid_constraints == []
        assert result.invalid_vars == []
        assert result.objective is None
        assert result.problem_class == ProblemClass()
        assert result.messages == []
        assert result.is_valid

    def test_unpacking(self):
        result = ValidationResult(
            status=Status.INFEASIBLE,
            invalid_constraints=[0, 2],
            invalid_vars=[1],
            objective=3.5,
        )
        status, rows, cols, obj = result

        assert status == Status.INFEASIBLE
        assert rows == [0, 2]
        assert cols == [1]
        assert obj == 3.5
        assert not result.is_valid

    def test_repr(self):
        result = ValidationResult(status=Status.VALID, objective=5.0)
        text = repr(result)

        assert "status=valid" in text
        assert "objective=5" in text

    def test_summary(self, simple_lp):
        result = validate(simple_lp, x=np.array([6.0, 0.0]), verbose=False)
        summary = result.summary()

        assert "optverify Validation Summary" in summary
        assert "infeasible (0)" in summary
        assert "Valid LP problem" in summary
        assert "L constraint off at rows 0" in summary

    def test_summary_without_objective(self):
        summary = ValidationResult(status=Status.STRUCTURAL_ERROR).summary()
        assert "Objective:           n/a" in summary
