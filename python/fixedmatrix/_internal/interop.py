from __future__ import annotations

import warnings
from typing import Any

from .warnings import FixedMatrixDTypeWarning


_np: Any | None = None


def configure(*, np_module: Any | None) -> None:
    global _np
    _np = np_module


def _require_numpy() -> Any:
    if _np is None:
        raise ImportError("NumPy is required for array conversion; install numpy.")
    return _np


def _object_array(np: Any, rows: list[list[Any]], shape: tuple[int, int]) -> Any:
    out = np.empty(shape, dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            out[i, j] = value
    return out


def to_numpy(matrix: Any, dtype: Any = None) -> Any:
    """Copy ``matrix`` into a new 2-D ``numpy.ndarray``.

    Cells that do not form a uniform numeric/bool/str array end up in an
    ``object`` array; a FixedMatrixDTypeWarning is emitted in that case unless
    ``dtype=object`` was requested explicitly.
    """
    np = _require_numpy()
    shape = (matrix.rows_count, matrix.columns_count)
    rows = [matrix.rows(i) for i in range(shape[0])]

    if shape[0] == 0 or shape[1] == 0:
        return np.empty(shape, dtype=float if dtype is None else dtype)

    if dtype is not None and np.dtype(dtype) == np.dtype(object):
        return _object_array(np, rows, shape)

    try:
        array = np.array(rows, dtype=dtype)
    except (TypeError, ValueError):
        if dtype is not None:
            raise
        array = None

    if array is not None and array.shape == shape and array.dtype != np.dtype(object):
        return array
    if dtype is not None:
        raise ValueError(f"cannot convert matrix cells to a {shape} array of dtype {dtype!r}")

    warnings.warn(
        "Matrix cells do not share a common NumPy dtype; returning an object array.",
        FixedMatrixDTypeWarning,
        stacklevel=3,
    )
    return _object_array(np, rows, shape)
