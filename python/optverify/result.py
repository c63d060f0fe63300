"""
optverify Result Classes
========================

Data classes for validation results and status.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple


class Status(IntEnum):
    """
    Validation status codes.

    Attributes:
        STRUCTURAL_ERROR: The problem record or the solution vector is malformed
        INFEASIBLE: The structure is sound but the solution violates a check
        VALID: No solution given, or the solution passes every check
    """
    STRUCTURAL_ERROR = -1
    INFEASIBLE = 0
    VALID = 1

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class ProblemClass:
    """
    Problem classes a record qualifies for. Not mutually exclusive.

    Attributes:
        valid_lp: Sound linear objective and linear constraints
        valid_qp: Quadratic matrix present, square and sized n x n
        valid_mi: Variable types present, recognised, with consistent bounds
    """

    valid_lp: bool = False
    valid_qp: bool = False
    valid_mi: bool = False

    @property
    def valid_milp(self) -> bool:
        return self.valid_lp and self.valid_mi

    @property
    def valid_miqp(self) -> bool:
        return self.valid_qp and self.valid_mi

    def report_lines(self) -> List[str]:
        """One line per class: LP, MILP, QP, MIQP."""
        flags = [
            ("LP", self.valid_lp),
            ("MILP", self.valid_milp),
            ("QP", self.valid_qp),
            ("MIQP", self.valid_miqp),
        ]
        return [f"{'Valid' if ok else 'Invalid'} {name} problem" for name, ok in flags]


@dataclass
class ValidationResult:
    """
    Result of validating a problem and, optionally, a solution.

    Unpacks as ``(status, invalid_constraints, invalid_vars, objective)``.

    Attributes:
        status: Validation status
        invalid_constraints: 0-based indices of violated constraint rows
        invalid_vars: 0-based indices of variables outside their bounds
        objective: Objective value at the solution, if computed
        problem_class: Classes the problem qualifies for
        non_integral_vars: 0-based integer/binary indices with fractional values
        messages: Diagnostics emitted during validation, in order
        solution_checked: Whether the feasibility checks ran

    Example:
        >>> status, bad_rows, bad_vars, obj = validate(problem, x)
        >>> if status == Status.INFEASIBLE:
        ...     print(f"Violated rows: {bad_rows}")
    """

    status: Status
    invalid_constraints: List[int] = field(default_factory=list)
    invalid_vars: List[int] = field(default_factory=list)
    objective: Optional[float] = None
    problem_class: ProblemClass = field(default_factory=ProblemClass)
    non_integral_vars: List[int] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    solution_checked: bool = False

    def __iter__(self) -> Iterator:
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        objective = "None" if self.objective is None else f"{self.objective:.6g}"
        return (
            f"ValidationResult(status={str(self.status)}, "
            f"invalid_constraints={self.invalid_constraints}, "
            f"invalid_vars={self.invalid_vars}, "
            f"objective={objective})"
        )

    def as_tuple(self) -> Tuple[Status, List[int], List[int], Optional[float]]:
        """Return ``(status, invalid_constraints, invalid_vars, objective)``."""
        return self.status, self.invalid_constraints, self.invalid_vars, self.objective

    @property
    def is_valid(self) -> bool:
        """True if the status is VALID."""
        return self.status == Status.VALID

    def summary(self) -> str:
        """Return a formatted summary of the validation result."""
        objective = "n/a" if self.objective is None else f"{self.objective:.10g}"
        lines = [
            "=" * 50,
            "optverify Validation Summary",
            "=" * 50,
            f"Status:              {str(self.status)} ({int(self.status)})",
            f"Objective:           {objective}",
            f"Solution checked:    {self.solution_checked}",
            f"Invalid constraints: {self.invalid_constraints or 'none'}",
            f"Invalid variables:   {self.invalid_vars or 'none'}",
            f"Non-integral vars:   {self.non_integral_vars or 'none'}",
            "-" * 50,
        ]
        lines.extend(self.problem_class.report_lines())
        if self.messages:
            lines.append("-" * 50)
            lines.extend(self.messages)
        lines.append("=" * 50)
        return "\n".join(lines)
