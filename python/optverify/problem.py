"""
optverify Problem Record
========================

Matrix-form description of an LP/QP/MILP/MIQP:

    minimize    (1/2) x'Fx + c'x
    subject to  A x  (=, <=, >=)  b      row senses from csense (+ dsense)
                lb <= x <= ub
                x[i] integer where vartype[i] is I or B
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import numpy as np
from scipy import sparse

ArrayLike = Union[np.ndarray, sparse.spmatrix, List[Any], Tuple[Any, ...]]

_E = TypeVar("_E", bound=Enum)


class ConstraintSense(Enum):
    """
    Relational operator of a constraint row.

    Attributes:
        EQUAL: ``A[j] x == b[j]``
        LESS_EQUAL: ``A[j] x <= b[j]``
        GREATER_EQUAL: ``A[j] x >= b[j]``
    """
    EQUAL = "E"
    LESS_EQUAL = "L"
    GREATER_EQUAL = "G"

    def __str__(self) -> str:
        return self.value


class VarType(Enum):
    """
    Domain of a decision variable.

    Attributes:
        CONTINUOUS: Real valued
        INTEGER: Integer valued
        BINARY: Integer valued in {0, 1}
    """
    CONTINUOUS = "C"
    INTEGER = "I"
    BINARY = "B"

    def __str__(self) -> str:
        return self.value

    @property
    def is_integral(self) -> bool:
        """True for INTEGER and BINARY."""
        return self in (VarType.INTEGER, VarType.BINARY)


def parse_codes(values: Iterable[Any], enum_cls: Type[_E]) -> Tuple[List[Optional[_E]], List[int]]:
    """
    Map raw codes (enum members or their one-letter values) onto ``enum_cls``.

    Returns:
        (members, invalid_positions) where unrecognised entries are None in
        ``members`` and their 0-based positions are listed in
        ``invalid_positions``.
    """
    members: List[Optional[_E]] = []
    invalid: List[int] = []
    for i, value in enumerate(values):
        if isinstance(value, enum_cls):
            members.append(value)
            continue
        if isinstance(value, np.str_):
            value = str(value)
        try:
            members.append(enum_cls(value))
        except (ValueError, TypeError):
            members.append(None)
            invalid.append(i)
    return members, invalid


@dataclass(frozen=True)
class OptimizationProblem:
    """
    Optimization problem record.

    Required fields may be None, which the validator reports as a missing
    field; the optional members ``F``, ``vartype`` and ``dsense`` being None
    means the problem has no quadratic term, no integrality and no secondary
    row senses respectively.

    Attributes:
        A: Constraint matrix (m x n), dense or scipy.sparse
        b: Right-hand side (m,)
        csense: Row senses, codes E/L/G
        lb: Variable lower bounds (n,)
        ub: Variable upper bounds (n,)
        c: Linear objective (n,)
        F: Quadratic objective (n x n)
        vartype: Variable types, codes C/I/B
        dsense: Senses of the trailing rows not covered by csense

    Example:
        >>> problem = OptimizationProblem(
        ...     A=[[1.0, 1.0]], b=[5.0], csense="L",
        ...     lb=[0.0, 0.0], ub=[10.0, 10.0], c=[1.0, 1.0],
        ... )
    """

    A: Optional[ArrayLike]
    b: Optional[ArrayLike]
    csense: Optional[Union[str, ArrayLike]]
    lb: Optional[ArrayLike]
    ub: Optional[ArrayLike]
    c: Optional[ArrayLike]
    F: Optional[ArrayLike] = None
    vartype: Optional[Union[str, ArrayLike]] = None
    dsense: Optional[Union[str, ArrayLike]] = None

    @property
    def is_quadratic(self) -> bool:
        """True if a quadratic objective matrix is present."""
        return self.F is not None

    @property
    def is_mixed_integer(self) -> bool:
        """True if variable types are present."""
        return self.vartype is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptimizationProblem":
        """
        Create a problem from a mapping with the field names as keys.

        Missing keys become None. Unknown keys are ignored.
        """
        return cls(
            A=data.get("A"),
            b=data.get("b"),
            csense=data.get("csense"),
            lb=data.get("lb"),
            ub=data.get("ub"),
            c=data.get("c"),
            F=data.get("F"),
            vartype=data.get("vartype"),
            dsense=data.get("dsense"),
        )
