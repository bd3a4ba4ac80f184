"""Fixed-size, bounds-checked 2-D containers."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _dist_version

try:
    __version__ = _dist_version("fixedmatrix")
except _PackageNotFoundError:
    __version__ = "unknown"

import os
import warnings

from ._internal import formatting as _formatting
from ._internal import interop as _interop
from ._internal import factories as _factories
from ._internal.capabilities import MatrixOperations, MatrixOpsAdvance
from ._internal.errors import InvalidDimensionError, MatrixIndexError
from ._internal.iteration import MatrixIterator
from ._internal.matrix_api import Matrix
from ._internal.warnings import FixedMatrixDTypeWarning, FixedMatrixWarning

try:  # NumPy is optional at runtime
    import numpy as _np
except ImportError:  # pragma: no cover - exercised when numpy is absent
    _np = None

PREVIEW_EDGE_ITEMS_ENV = "FIXEDMATRIX_PREVIEW_EDGE_ITEMS"
_DEFAULT_PREVIEW_EDGE_ITEMS = 4


def _edge_items_from_env() -> int:
    raw = os.environ.get(PREVIEW_EDGE_ITEMS_ENV)
    if not raw:
        return _DEFAULT_PREVIEW_EDGE_ITEMS
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        warnings.warn(
            f"Ignoring {PREVIEW_EDGE_ITEMS_ENV}={raw!r}; expected a positive integer.",
            FixedMatrixWarning,
            stacklevel=2,
        )
        return _DEFAULT_PREVIEW_EDGE_ITEMS
    return value


_formatting.configure(np_module=_np, edge_items=_edge_items_from_env())
_interop.configure(np_module=_np)
_factories.configure(np_module=_np)

matrix_of = _factories.matrix_of
matrix_from_rows = _factories.matrix_from_rows


def set_preview_edge_items(edge_items: int) -> None:
    """Set how many leading/trailing rows and columns ``Matrix.preview()`` shows."""
    _formatting.set_edge_items(edge_items)


def get_preview_edge_items() -> int:
    return _formatting.get_edge_items()


__all__ = [
    "Matrix",
    "MatrixIterator",
    "MatrixOperations",
    "MatrixOpsAdvance",
    "MatrixIndexError",
    "InvalidDimensionError",
    "FixedMatrixWarning",
    "FixedMatrixDTypeWarning",
    "matrix_of",
    "matrix_from_rows",
    "set_preview_edge_items",
    "get_preview_edge_items",
    "PREVIEW_EDGE_ITEMS_ENV",
]
