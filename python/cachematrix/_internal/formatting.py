from __future__ import annotations

from typing import Any

import numpy as np

from .config import get_settings


def _edge_indices(length: int, edge_items: int) -> tuple[list[int], list[int], bool]:
    if length <= edge_items * 2:
        return list(range(length)), [], False
    head = list(range(edge_items))
    tail = list(range(length - edge_items, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_row(
    array: np.ndarray,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(array[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(array[row_index, col]) for col in col_tail)
    return " ".join(entries)


def _shape_of(value: Any) -> tuple[int, ...] | None:
    try:
        return tuple(int(d) for d in np.shape(value))
    except Exception:
        return None


def matrix_str(self: Any) -> str:
    value = self.get_matrix()
    shape = _shape_of(value)
    cached = "yes" if self.get_cached_inverse() is not None else "no"
    header = f"{self.__class__.__name__}(shape={shape}, inverse_cached={cached})"

    if shape is None or len(shape) != 2:
        return f"{header}\n{value!r}"

    rows, cols = shape
    if rows == 0 or cols == 0:
        return header + "\n[]"

    array = np.asarray(value)
    edge_items = get_settings().edge_items
    row_head, row_tail, rows_truncated = _edge_indices(rows, edge_items)
    col_head, col_tail, cols_truncated = _edge_indices(cols, edge_items)

    lines = [header, "["]
    for row_index in row_head:
        lines.append(f" [{_format_row(array, row_index, col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_row(array, row_index, col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        shape = _shape_of(self.get_matrix())
        cached = self.get_cached_inverse() is not None
        return f"<{self.__class__.__name__} shape={shape} inverse_cached={cached}>"
