"""
optverify Validator
===================

Checks that an optimization problem record is well formed, classifies it as
LP / QP / MILP / MIQP, and optionally verifies a candidate solution and
evaluates the objective at it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .exceptions import DimensionError, InvalidInputError, StructuralError
from .logging import get_logger
from .problem import ConstraintSense, OptimizationProblem, VarType, parse_codes
from .result import ProblemClass, Status, ValidationResult
from .utils.validation import (
    Matrix,
    check_tolerance,
    find_nonintegral,
    format_indices,
    is_empty,
    read_codes,
    read_matrix,
    read_vector,
)

logger = get_logger(__name__)

DEFAULT_TOLERANCE = 1e-8

_SENSE_LABELS = {
    ConstraintSense.EQUAL: "Equality",
    ConstraintSense.LESS_EQUAL: "L",
    ConstraintSense.GREATER_EQUAL: "G",
}


def _warn(messages: List[str], message: str) -> None:
    messages.append(message)
    logger.warning(message)


def validate(
    problem: Union[OptimizationProblem, Mapping[str, Any]],
    x: Optional[Any] = None,
    tol: float = DEFAULT_TOLERANCE,
    verbose: bool = True,
) -> ValidationResult:
    """
    Validate a problem record and, if given, a candidate solution.

    The record fields A, b, csense (with dsense), lb, ub and c are checked in
    that order and the first defect ends the call with STRUCTURAL_ERROR. A
    malformed quadratic matrix or variable type vector is recorded and forces
    STRUCTURAL_ERROR, but checking carries on so the caller sees every
    diagnostic.

    Args:
        problem: OptimizationProblem, or a mapping with the same field names
        x: Candidate solution of length n. None or an empty array means no
            solution is given.
        tol: Absolute tolerance for bound, row and integrality checks
        verbose: Print the problem classes and the solution verdict

    Returns:
        ValidationResult; unpacks as
        ``(status, invalid_constraints, invalid_vars, objective)``.

    Raises:
        ValueError: If ``tol`` is not a finite non-negative number. A bad
            tolerance is an error in the call itself, not in the problem,
            so it is raised instead of being reported through the status.

    Example:
        >>> problem = {
        ...     "A": [[1.0, 1.0]], "b": [5.0], "csense": "L",
        ...     "lb": [0.0, 0.0], "ub": [10.0, 10.0], "c": [1.0, 1.0],
        ... }
        >>> status, rows, cols, obj = validate(problem, x=[2.0, 3.0], verbose=False)
        >>> int(status), obj
        (1, 5.0)
    """
    tol = check_tolerance(tol)
    if isinstance(problem, Mapping):
        problem = OptimizationProblem.from_dict(problem)

    if x is not None and is_empty(x):
        x = None

    messages: List[str] = []

    try:
        A, b, senses, lb, ub, c = _check_structure(problem)
    except StructuralError as e:
        _warn(messages, e.message)
        return ValidationResult(status=Status.STRUCTURAL_ERROR, messages=messages)

    n = A.shape[1]
    status = Status.VALID

    F = None
    if problem.F is not None:
        try:
            F = _check_quadratic(problem.F, n, messages)
        except StructuralError as e:
            _warn(messages, e.message)
            return ValidationResult(
                status=Status.STRUCTURAL_ERROR,
                problem_class=ProblemClass(valid_lp=True),
                messages=messages,
            )
        if F is None:
            status = Status.STRUCTURAL_ERROR

    valid_mi = False
    integral = None
    if problem.vartype is not None:
        valid_mi, integral = _check_vartype(problem.vartype, lb, ub, n, tol, messages)
        if not valid_mi:
            status = Status.STRUCTURAL_ERROR

    problem_class = ProblemClass(valid_lp=True, valid_qp=F is not None, valid_mi=valid_mi)
    if verbose:
        for line in problem_class.report_lines():
            print(line)

    result = ValidationResult(status=status, problem_class=problem_class, messages=messages)
    if x is None or not (problem_class.valid_lp or problem_class.valid_qp):
        return result

    try:
        x = read_vector(x, "x", n)
    except StructuralError as e:
        _warn(messages, e.message)
        result.status = Status.STRUCTURAL_ERROR
        return result

    invalid_constraints, invalid_vars = _check_solution(A, b, senses, lb, ub, x, tol, messages)
    non_integral = np.array([], dtype=int)
    if integral is not None:
        non_integral = find_nonintegral(x, integral, tol)
        if len(non_integral):
            _warn(messages, f"Integer constraint off at {format_indices(non_integral)}")

    result.solution_checked = True
    result.invalid_constraints = invalid_constraints.tolist()
    result.invalid_vars = invalid_vars.tolist()
    result.non_integral_vars = non_integral.tolist()

    feasible = not (len(invalid_constraints) or len(invalid_vars))
    if (not feasible or len(non_integral)) and result.status != Status.STRUCTURAL_ERROR:
        result.status = Status.INFEASIBLE

    if verbose and feasible:
        if integral is not None and not len(non_integral):
            print("Valid x vector for MIXP problem")
        else:
            print("Valid x vector for XP problem")

    result.objective = _evaluate_objective(c, F, x, problem_class)
    return result


def validate_batch(
    problems: Sequence[Union[OptimizationProblem, Mapping[str, Any]]],
    solutions: Optional[Sequence[Optional[Any]]] = None,
    params: Optional[Dict[str, Any]] = None,
) -> List[ValidationResult]:
    """
    Validate several problems with shared settings.

    Args:
        problems: Problem records
        solutions: Candidate solutions, one per problem (None entries skip
            the feasibility check)
        params: ``tolerance`` (or ``tol``) and ``verbose`` (default False)

    Raises:
        ValueError: If ``solutions`` and ``problems`` differ in length
    """
    params = params or {}
    tol = params.get('tolerance', params.get('tol', DEFAULT_TOLERANCE))
    verbose = params.get('verbose', False)

    if solutions is None:
        solutions = [None] * len(problems)
    elif len(solutions) != len(problems):
        raise ValueError(f"Got {len(solutions)} solutions for {len(problems)} problems")

    return [validate(p, x=s, tol=tol, verbose=verbose) for p, s in zip(problems, solutions)]


def _check_structure(
    problem: OptimizationProblem,
) -> Tuple[Matrix, np.ndarray, List[ConstraintSense], np.ndarray, np.ndarray, np.ndarray]:
    """Hard gates, in order. Raises StructuralError on the first defect."""
    A = read_matrix(problem.A, "A")
    m, n = A.shape
    b = read_vector(problem.b, "b", m)
    senses = _check_senses(problem.csense, problem.dsense, m)
    lb = read_vector(problem.lb, "lb", n)
    ub = read_vector(problem.ub, "ub", n)

    inverted = np.flatnonzero(ub < lb)
    if len(inverted):
        raise InvalidInputError(
            f"Upper bound less than lower bound (ub<lb) at {format_indices(inverted)}",
            field="ub",
            indices=inverted.tolist(),
        )

    c = read_vector(problem.c, "c", n)
    return A, b, senses, lb, ub, c


def _check_senses(csense: Any, dsense: Any, m: int) -> List[ConstraintSense]:
    """
    Row senses, one per row of A.

    dsense is only read when csense is shorter than the row count; the row
    senses are then csense followed by dsense.
    """
    codes = read_codes(csense, "csense")
    extra: List[Any] = []
    if len(codes) != m:
        if dsense is None:
            raise DimensionError(
                f"Wrong size csense vector: csense dimensions {len(codes)}, "
                f"constraint dimensions {m}",
                field="csense",
            )
        extra = read_codes(dsense, "dsense")
        if len(codes) + len(extra) != m:
            raise DimensionError(
                f"Wrong size dsense vector: dsense dimensions {len(extra)}, "
                f"csense dimensions {len(codes)}, "
                f"sum sense dimensions {len(codes) + len(extra)}, "
                f"constraint dimensions {m}",
                field="dsense",
            )

    senses, invalid = parse_codes(codes, ConstraintSense)
    if invalid:
        raise InvalidInputError(
            f"Invalid csense entry(s) at {format_indices(invalid)}", field="csense", indices=invalid
        )
    secondary, invalid = parse_codes(extra, ConstraintSense)
    if invalid:
        raise InvalidInputError(
            f"Invalid dsense entry(s) at {format_indices(invalid)}", field="dsense", indices=invalid
        )
    return senses + secondary


def _check_quadratic(value: Any, n: int, messages: List[str]) -> Optional[Matrix]:
    """
    Read F. NaN or non-numeric entries raise; a non-square or mis-sized
    matrix is reported and None returned.
    """
    F = read_matrix(value, "F")
    rows, cols = F.shape
    if rows != cols:
        _warn(messages, f"F matrix not square: shape ({rows}, {cols})")
        return None
    if rows != n:
        _warn(messages, f"Wrong size F matrix: expected ({n}, {n}), got ({rows}, {cols})")
        return None
    return F


def _check_vartype(
    value: Any,
    lb: np.ndarray,
    ub: np.ndarray,
    n: int,
    tol: float,
    messages: List[str],
) -> Tuple[bool, Optional[np.ndarray]]:
    """
    Check variable types against the bounds.

    Returns:
        (valid_mi, integral) where ``integral`` holds the indices of integer
        and binary variables, or None if vartype could not be aligned with x.
    """
    try:
        codes = read_codes(value, "vartype")
    except StructuralError as e:
        _warn(messages, e.message)
        return False, None
    if len(codes) != n:
        _warn(messages, f"Wrong size vartype vector: expected {n} entries, got {len(codes)}")
        return False, None

    types, invalid = parse_codes(codes, VarType)
    valid = True
    if invalid:
        _warn(messages, f"Invalid vartype entry(s) at {format_indices(invalid)}")
        valid = False

    integral = np.array([i for i, t in enumerate(types) if t is not None and t.is_integral], dtype=int)
    binary = np.array([i for i, t in enumerate(types) if t is VarType.BINARY], dtype=int)

    empty = integral[np.floor(ub[integral] + tol) < np.ceil(lb[integral] - tol)]
    if len(empty):
        _warn(
            messages,
            "Integer or binary variables lb to ub range does not contain an integer "
            f"at {format_indices(empty)}",
        )
        valid = False

    bad_lb = binary[lb[binary] != 0]
    if len(bad_lb):
        _warn(
            messages,
            "Binary variables have lower bound not equal to zero at "
            f"{format_indices(bad_lb)}. This is inconsistent",
        )
        valid = False

    bad_ub = binary[ub[binary] != 1]
    if len(bad_ub):
        _warn(
            messages,
            "Binary variables have upper bound not equal to one at "
            f"{format_indices(bad_ub)}. This is inconsistent",
        )
        valid = False

    return valid, integral


def _row_violations(
    sense: ConstraintSense, product: np.ndarray, b: np.ndarray, tol: float
) -> np.ndarray:
    if sense is ConstraintSense.EQUAL:
        return np.abs(product - b) > tol
    if sense is ConstraintSense.LESS_EQUAL:
        return product > b + tol
    if sense is ConstraintSense.GREATER_EQUAL:
        return product < b - tol
    raise ValueError(f"Unknown constraint sense {sense!r}")


def _check_solution(
    A: Matrix,
    b: np.ndarray,
    senses: List[ConstraintSense],
    lb: np.ndarray,
    ub: np.ndarray,
    x: np.ndarray,
    tol: float,
    messages: List[str],
) -> Tuple[np.ndarray, np.ndarray]:
    """Bound and row checks. Returns (invalid_constraints, invalid_vars)."""
    above = np.flatnonzero(x > ub + tol)
    if len(above):
        _warn(messages, f"Upper bound violation at {format_indices(above)}")
    below = np.flatnonzero(x < lb - tol)
    if len(below):
        _warn(messages, f"Lower bound violation at {format_indices(below)}")
    invalid_vars = np.union1d(above, below).astype(int)

    product = np.asarray(A @ x, dtype=np.float64).ravel()
    invalid_rows = np.zeros(len(b), dtype=bool)
    for sense in ConstraintSense:
        rows = np.array([s is sense for s in senses], dtype=bool)
        off = np.flatnonzero(rows & _row_violations(sense, product, b, tol))
        if len(off):
            _warn(messages, f"{_SENSE_LABELS[sense]} constraint off at rows {format_indices(off)}")
            invalid_rows[off] = True

    return np.flatnonzero(invalid_rows), invalid_vars


def _evaluate_objective(
    c: np.ndarray, F: Optional[Matrix], x: np.ndarray, problem_class: ProblemClass
) -> Optional[float]:
    """(1/2) x'Fx + c'x for a valid QP, c'x for an LP."""
    if problem_class.valid_qp:
        return float(0.5 * x @ np.asarray(F @ x).ravel() + c @ x)
    if problem_class.valid_lp:
        return float(c @ x)
    return None
