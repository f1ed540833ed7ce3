"""
Caching Matrix Cell (Data Model)
================================
This module defines the container that owns one matrix and, optionally, its
inverse.

Why is this file needed?
------------------------
1. State Management: The matrix and its inverse live in one place, so the
   inverse can never outlive the matrix it was computed for.
2. Invalidation: Replacing the matrix is the only way to change it, and that
   path always drops the cached inverse.

Classes:
    CachingMatrixCell: The two-field container.

Functions:
    make_caching_matrix_cell: Construction helper with the default matrix.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from cachematrix.utils import absent_matrix, shape_of

logger = logging.getLogger(__name__)


class CachingMatrixCell:
    """
    Holds a matrix together with its cached inverse.

    The cached inverse is either ``None`` or the inverse of the current
    value. It is written by :func:`cachematrix.solvers.cached.compute_inverse_cached`
    and cleared every time the value is replaced.
    """

    def __init__(self, value: Any) -> None:
        """
        Initialize the cell with a matrix and an empty cache.

        Args:
            value: The initial matrix.
        """
        self._value = value
        self._cached_inverse: Optional[Any] = None

    def __repr__(self) -> str:
        state = "cached" if self.has_cached_inverse else "empty"
        return f"{self.__class__.__name__}(shape={shape_of(self._value)}, inverse={state})"

    def set_value(self, new_matrix: Any) -> None:
        """
        Replace the matrix and invalidate the cached inverse.

        Any matrix is accepted; whether it can be inverted is only
        discovered when the inverse is requested.
        """
        self._value = new_matrix
        if self._cached_inverse is not None:
            logger.info(f"Matrix replaced, cached inverse invalidated (new shape: {shape_of(new_matrix)}).")
        self._cached_inverse = None

    def get_value(self) -> Any:
        """Return the current matrix."""
        return self._value

    def set_cached_inverse(self, inv: Any) -> None:
        """
        Store ``inv`` as the inverse of the current matrix.

        No check is made that ``inv`` really is the inverse; the caller owns
        that guarantee.
        """
        self._cached_inverse = inv

    def get_cached_inverse(self) -> Optional[Any]:
        """Return the cached inverse, or ``None`` when nothing is cached."""
        return self._cached_inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None


def make_caching_matrix_cell(initial: Any = None) -> CachingMatrixCell:
    """
    Create a caching matrix cell.

    Args:
        initial: The starting matrix. Defaults to a 1x1 matrix with an absent
            (NaN) entry.

    Returns:
        A new cell with an empty inverse cache.
    """
    if initial is None:
        initial = absent_matrix()
    return CachingMatrixCell(initial)
