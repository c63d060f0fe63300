"""Input validation utilities.

Each reader takes one named field of the problem record, checks that it is
present, real valued, NaN free and correctly shaped, and returns it in the
form the validator works with. Failures raise a
:class:`~optverify.exceptions.StructuralError` subclass whose message names
the field and the offending coordinates.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import sparse

from ..exceptions import DimensionError, InvalidInputError, MissingFieldError, NaNError

Matrix = Union[np.ndarray, sparse.spmatrix]


def format_indices(indices: Sequence[int]) -> str:
    """Render indices as ``"0, 3, 7"``."""
    return ", ".join(str(int(i)) for i in indices)


def is_real_dtype(dtype: np.dtype) -> bool:
    """True for boolean, integer and floating dtypes."""
    return (
        np.issubdtype(dtype, np.bool_)
        or np.issubdtype(dtype, np.integer)
        or np.issubdtype(dtype, np.floating)
    )


def _require(value: Any, name: str) -> None:
    if value is None:
        raise MissingFieldError(name)


def _to_array(value: Any, name: str) -> np.ndarray:
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be numeric ({e})", field=name)
    if not is_real_dtype(arr.dtype):
        raise InvalidInputError(f"{name} must be numeric", field=name)
    return arr


def read_matrix(value: Any, name: str) -> Matrix:
    """
    Read a matrix field.

    Dense input is returned as a float64 ndarray (a scalar is read as a 1x1
    matrix, a 1-D input as a single row); sparse input is returned as a
    float64 CSR matrix.

    Raises:
        MissingFieldError: If ``value`` is None
        InvalidInputError: If the entries are not real numbers
        NaNError: If any entry is NaN; lists every ``(row, col)``
        DimensionError: If the input has more than two dimensions
    """
    _require(value, name)

    if sparse.issparse(value):
        if not is_real_dtype(value.dtype):
            raise InvalidInputError(f"{name} must be numeric", field=name)
        coo = value.tocoo()
        mask = np.isnan(coo.data)
        if mask.any():
            coords = sorted(zip(coo.row[mask].tolist(), coo.col[mask].tolist()))
            raise NaNError(name, coords, kind="matrix")
        return value.tocsr().astype(np.float64)

    arr = _to_array(value, name)
    if arr.ndim == 0:
        arr = arr.reshape(1, 1)
    elif arr.ndim == 1:
        arr = arr.reshape(1, -1)
    elif arr.ndim != 2:
        raise DimensionError(f"{name} must be a 2-D matrix, got {arr.ndim} dimensions", field=name)

    arr = arr.astype(np.float64)
    nan_coords = np.argwhere(np.isnan(arr))
    if len(nan_coords):
        raise NaNError(name, [(int(r), int(c)) for r, c in nan_coords], kind="matrix")
    return arr


def is_empty(value: Any) -> bool:
    """True for a value with no entries, such as ``[]`` or ``np.zeros((0, 1))``."""
    try:
        return 0 in np.shape(value)
    except ValueError:
        # ragged input; left for read_vector to report
        return False


def vector_shape_ok(shape: Tuple[int, ...], length: int) -> bool:
    """True for ``(length,)`` and the column ``(length, 1)``."""
    return shape == (length,) or shape == (length, 1)


def read_vector(value: Any, name: str, length: int) -> np.ndarray:
    """
    Read a vector field of the given length as a flat float64 array.

    Raises:
        MissingFieldError: If ``value`` is None
        InvalidInputError: If the entries are not real numbers
        NaNError: If any entry is NaN; lists every index
        DimensionError: If the shape is neither ``(length,)`` nor ``(length, 1)``
    """
    _require(value, name)
    if sparse.issparse(value):
        value = value.toarray()

    arr = _to_array(value, name).astype(np.float64)
    nan_idx = np.flatnonzero(np.isnan(arr))
    if len(nan_idx):
        raise NaNError(name, nan_idx.tolist())

    if not vector_shape_ok(arr.shape, length):
        raise DimensionError(
            f"Wrong size {name} vector: expected ({length},) or ({length}, 1), got {arr.shape}",
            field=name,
        )
    return arr.reshape(-1)


def read_codes(value: Any, name: str) -> List[Any]:
    """
    Read a sequence of one-letter codes (e.g. ``"ELG"`` or ``['E', 'L']``).

    Returns the raw entries as a flat list; a single column is accepted,
    any other 2-D layout is not.

    Raises:
        MissingFieldError: If ``value`` is None
        DimensionError: If the codes are not laid out as a single column
    """
    _require(value, name)
    if isinstance(value, str):
        return list(value)

    arr = np.asarray(value, dtype=object)
    if arr.ndim == 0:
        return [arr.item()]
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise DimensionError(f"{name} should be a column vector, got shape {arr.shape}", field=name)
    return list(arr)


def find_nonintegral(x: np.ndarray, indices: np.ndarray, tol: float) -> np.ndarray:
    """Entries of ``indices`` where ``|x - round(x)| > tol``."""
    values = x[indices]
    return indices[np.abs(values - np.round(values)) > tol]


def check_tolerance(tol: Optional[float]) -> float:
    """Return ``tol`` as a float; it must be finite and non-negative."""
    try:
        value = float(tol)
    except (TypeError, ValueError):
        raise ValueError(f"tol must be a number, got {tol!r}")
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"tol must be finite and non-negative, got {tol!r}")
    return value
