from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(
    candidate: Any, *, np_module: Any | None = None
) -> tuple[int, int, list[list[Any]]]:
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a rectangular nested sequence or a NumPy array."
        )
    rows: list[list[Any]] = []
    for row in candidate:
        if np_module is not None and isinstance(row, np_module.ndarray):
            if row.ndim != 1:
                raise ValueError("Each NumPy matrix row must be 1D.")
            rows.append(row.tolist())
            continue
        if not is_sequence_like(row):
            raise TypeError("Each matrix row must be a sequence of entries.")
        rows.append(list(row))
    if not rows:
        return 0, 0, rows
    cols = len(rows[0])
    if any(len(r) != cols for r in rows):
        raise ValueError("Matrix data must be rectangular (every row the same length).")
    return len(rows), cols, rows


def coerce_general_matrix(candidate: Any, *, np_module: Any | None) -> tuple[int, int, list[list[Any]]]:
    """Normalize matrix-like input into ``(rows, cols, nested lists)``.

    Accepts another matrix exposing ``rows_count``/``columns_count``/``get``,
    a 2-D NumPy array, or a rectangular nested sequence whose rows may be
    1-D NumPy arrays.
    """
    get_attr: Any = getattr(candidate, "get", None)
    if callable(get_attr) and hasattr(candidate, "rows_count") and hasattr(candidate, "columns_count"):
        n_rows = int(candidate.rows_count)
        n_cols = int(candidate.columns_count)
        rows: list[list[Any]] = []
        for i in range(n_rows):
            rows.append([get_attr(i, j) for j in range(n_cols)])
        return n_rows, n_cols, rows

    if np_module is not None and isinstance(candidate, np_module.ndarray):
        if candidate.ndim != 2:
            raise ValueError("Matrix input must be a 2D structure.")
        return int(candidate.shape[0]), int(candidate.shape[1]), candidate.tolist()

    return coerce_sequence_rows(candidate, np_module=np_module)
