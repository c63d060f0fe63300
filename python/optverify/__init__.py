"""
optverify: Structural and Feasibility Verifier for LP/QP/MILP/MIQP
=================================================================

optverify checks that a matrix-form optimization problem is well formed
before it is handed to a solver, reports which problem classes it qualifies
for (LP, QP, MILP, MIQP), and confirms independently of any solver that a
candidate solution is feasible, evaluating the objective at it.

Quick Start
-----------
>>> import numpy as np
>>> import optverify
>>> problem = optverify.OptimizationProblem(
...     A=np.array([[1.0, 1.0]]),
...     b=np.array([5.0]),
...     csense="L",
...     lb=np.zeros(2),
...     ub=np.full(2, 10.0),
...     c=np.ones(2),
... )
>>> result = optverify.validate(problem, x=np.array([2.0, 3.0]), verbose=False)
>>> print(result.status, result.objective)
valid 5.0

Sparse constraint and quadratic matrices are accepted as well, and the
result unpacks like a tuple:

>>> from scipy import sparse
>>> A = sparse.random(1000, 5000, density=0.01, format='csr')
>>> status, bad_rows, bad_vars, objective = optverify.validate(
...     {"A": A, "b": np.ones(1000), "csense": "L" * 1000,
...      "lb": np.zeros(5000), "ub": np.ones(5000), "c": np.ones(5000)},
...     x=np.zeros(5000),
...     verbose=False,
... )
"""

__version__ = "0.1.0"
__author__ = "optverify Contributors"

from .problem import OptimizationProblem, ConstraintSense, VarType
from .validator import validate, validate_batch, DEFAULT_TOLERANCE
from .result import ValidationResult, ProblemClass, Status
from .exceptions import (
    OptVerifyError,
    StructuralError,
    MissingFieldError,
    DimensionError,
    InvalidInputError,
    NaNError,
)

__all__ = [
    # Version
    "__version__",

    # Problem description
    "OptimizationProblem",
    "ConstraintSense",
    "VarType",

    # Validation
    "validate",
    "validate_batch",
    "DEFAULT_TOLERANCE",

    # Results
    "ValidationResult",
    "ProblemClass",
    "Status",

    # Exceptions
    "OptVerifyError",
    "StructuralError",
    "MissingFieldError",
    "DimensionError",
    "InvalidInputError",
    "NaNError",
]


def info() -> str:
    """Return information about the optverify installation."""
    import platform

    import numpy
    import scipy

    lines = [
        f"optverify version: {__version__}",
        f"Python version: {platform.python_version()}",
        f"Platform: {platform.platform()}",
        f"NumPy version: {numpy.__version__}",
        f"SciPy version: {scipy.__version__}",
    ]
    return "\n".join(lines)
