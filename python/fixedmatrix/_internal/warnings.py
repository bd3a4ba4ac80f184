"""fixedmatrix warning categories.

These exist so users can filter/suppress fixedmatrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class FixedMatrixWarning(UserWarning):
    """Base warning category for all fixedmatrix user-facing warnings."""


class FixedMatrixDTypeWarning(FixedMatrixWarning):
    """Warnings about dtype choices made during NumPy conversion."""
