"""
optverify Exception Classes
===========================

Exceptions raised by the structural hard gates.

``validate`` catches every :class:`StructuralError` and reports it through the
returned status code, so callers only see these when they use the field
checks in :mod:`optverify.utils.validation` directly.
"""

from typing import List, Optional, Sequence, Tuple, Union

Coordinate = Union[int, Tuple[int, int]]


class OptVerifyError(Exception):
    """Base exception for all optverify errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StructuralError(OptVerifyError):
    """
    Raised when the problem record (or the candidate solution) is malformed.

    Attributes:
        field: Name of the offending field, if known
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(StructuralError):
    """Raised when a required field is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Required field {field} not found", field=field)


class DimensionError(StructuralError):
    """
    Raised when matrix/vector dimensions are incompatible.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, field=field)


class InvalidInputError(StructuralError):
    """
    Raised when input data is invalid.

    Examples: non-numeric entries, unknown constraint sense or variable type
    codes, upper bounds below lower bounds, a negative tolerance.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        indices: Optional[Sequence[int]] = None,
    ) -> None:
        self.indices: List[int] = list(indices) if indices is not None else []
        super().__init__(message, field=field)


class NaNError(StructuralError):
    """
    Raised when a field contains NaN entries.

    Attributes:
        coordinates: Every NaN position, ``(row, col)`` for matrices and a
            plain index for vectors
    """

    def __init__(self, field: str, coordinates: Sequence[Coordinate], kind: str = "vector") -> None:
        self.coordinates: List[Coordinate] = list(coordinates)
        where = ", ".join(
            f"({c[0]}, {c[1]})" if isinstance(c, tuple) else str(c) for c in self.coordinates
        )
        super().__init__(f"NaN present in {field} {kind} at {where}.", field=field)
