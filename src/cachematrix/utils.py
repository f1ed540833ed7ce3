from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import scipy as sp

from cachematrix.config import ABSENT_VALUE, DEFAULT_SHAPE, DEFAULT_DTYPE

if TYPE_CHECKING:
    import numpy.typing as npt


def absent_matrix() -> npt.NDArray[np.float64]:
    """Return the default matrix: a 1x1 array holding an absent (NaN) entry."""
    return np.full(DEFAULT_SHAPE, ABSENT_VALUE, dtype=DEFAULT_DTYPE)


def shape_of(matrix: object) -> tuple[int, ...] | None:
    """Shape of a dense or sparse matrix, ``None`` for objects without one."""
    return getattr(matrix, "shape", None)


def inverse_residual(
    matrix: npt.ArrayLike,
    inverse: npt.ArrayLike,
) -> float:
    """
    Measure how far ``matrix @ inverse`` is from the identity.

    Args:
        matrix: The square matrix that was inverted.
        inverse: The candidate inverse.

    Returns:
        Infinity norm of ``matrix @ inverse - I``.
    """
    if sp.sparse.issparse(matrix):
        matrix = matrix.toarray()
    if sp.sparse.issparse(inverse):
        inverse = inverse.toarray()

    product = np.asarray(matrix) @ np.asarray(inverse)
    identity = np.eye(product.shape[0], dtype=product.dtype)
    return float(np.linalg.norm(product - identity, ord=np.inf))
