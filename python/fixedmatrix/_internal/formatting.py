from __future__ import annotations

from typing import Any


_np: Any | None = None
_EDGE_ITEMS: int = 4


def configure(*, np_module: Any | None, edge_items: int = 4) -> None:
    global _np, _EDGE_ITEMS
    _np = np_module
    set_edge_items(edge_items)


def set_edge_items(edge_items: int) -> None:
    global _EDGE_ITEMS
    value = int(edge_items)
    if value < 1:
        raise ValueError("edge_items must be at least 1")
    _EDGE_ITEMS = value


def get_edge_items() -> int:
    return _EDGE_ITEMS


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if _np is not None and isinstance(value, _np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def cells_str(matrix: Any) -> str:
    """Render every cell as `` ~ value ~``, one line per row."""
    parts: list[str] = []
    for row in range(matrix.rows_count):
        for col in range(matrix.columns_count):
            parts.append(f" ~ {matrix.get(row, col)} ~")
        parts.append("\n")
    return "".join(parts)


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(matrix.get(row_index, col)) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(matrix.get(row_index, col)) for col in col_tail)
    return " ".join(entries)


def matrix_preview(matrix: Any) -> str:
    rows = matrix.rows_count
    cols = matrix.columns_count

    header = f"{matrix.__class__.__name__}(shape=({rows}, {cols}))"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return cells_str(self)

    def __repr__(self) -> str:
        shape = getattr(self, "shape", None)
        return f"<{self.__class__.__name__} shape={shape}>"

    def preview(self) -> str:
        return matrix_preview(self)
