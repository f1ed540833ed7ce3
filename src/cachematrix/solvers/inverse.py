from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Any, Optional

import numpy as np
import scipy as sp
import scipy.linalg
import scipy.sparse.linalg

from cachematrix.config import DEFAULT_TOL
from cachematrix.utils import shape_of

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InversionFailure(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted (non-square, singular or non-finite)."""


def _sparse_reciprocal_condition_number(matrix: Any) -> float:
    """Estimate 1/(||A||_1 * ||inv(A)||_1) without forming a dense inverse."""
    csc = matrix.tocsc()
    lu = sp.sparse.linalg.splu(csc)
    inverse_operator = sp.sparse.linalg.LinearOperator(
        shape=csc.shape,
        matvec=lu.solve,
        rmatvec=lambda x: lu.solve(x, trans="T"),
        dtype=np.float64,
    )
    norm_product = float(sp.sparse.linalg.onenormest(csc)) * float(sp.sparse.linalg.onenormest(inverse_operator))
    if norm_product == 0.0:
        return 0.0
    return 1.0 / norm_product


def _reciprocal_condition_number(matrix: Any) -> float:
    """Reciprocal of the 1-norm condition number, 0.0 for singular matrices."""
    with np.errstate(divide="ignore", invalid="ignore"):
        if sp.sparse.issparse(matrix):
            rcond = _sparse_reciprocal_condition_number(matrix)
        else:
            rcond = 1.0 / np.linalg.cond(np.asarray(matrix, dtype=np.float64), p=1)
    if not np.isfinite(rcond):
        return 0.0
    return float(rcond)


def _fail(matrix: Any, reason: str) -> InversionFailure:
    msg = f"Cannot invert matrix of shape {shape_of(matrix)}: {reason}"
    logger.error(msg)
    return InversionFailure(msg)


def invert(
    matrix: Any,
    b: Optional[npt.ArrayLike] = None,
    tol: Optional[float] = DEFAULT_TOL,
    **options: Any
) -> Any:
    """
    Invert a matrix, or solve ``matrix @ x = b`` when ``b`` is given.

    Dense input goes to ``scipy.linalg.inv`` / ``scipy.linalg.solve``, sparse
    input to ``scipy.sparse.linalg.inv`` / ``scipy.sparse.linalg.spsolve``.
    Any extra keyword arguments are forwarded to that routine untouched.

    Args:
        matrix: Square matrix to invert.
        b: Optional right-hand side. When given, the solution of the linear
            system is returned instead of the inverse.
        tol: Lower bound on the reciprocal condition number. Matrices
            conditioned worse than this are refused as computationally
            singular. Defaults to machine epsilon; ``None`` or ``0`` skips
            the check. Sparse input is estimated with ``onenormest`` and
            stays sparse.
        **options: Passed through to the SciPy routine.

    Raises:
        InversionFailure: If the matrix is not square, is singular, contains
            non-finite values or is conditioned worse than ``tol``.

    Returns:
        The inverse (or the solution for ``b``), dense or sparse like the input.
    """
    try:
        if tol:
            rcond = _reciprocal_condition_number(matrix)
            if rcond < tol:
                raise _fail(
                    matrix,
                    f"system is computationally singular: reciprocal condition number = {rcond:.6g}"
                )

        if sp.sparse.issparse(matrix):
            csc = matrix.tocsc()
            with warnings.catch_warnings():
                # SuperLU warns on singular input and returns NaNs; splu raises RuntimeError
                warnings.simplefilter("error", sp.sparse.linalg.MatrixRankWarning)
                if b is None:
                    return sp.sparse.linalg.inv(csc, **options)
                return sp.sparse.linalg.spsolve(csc, b, **options)

        if b is None:
            return sp.linalg.inv(matrix, **options)
        return sp.linalg.solve(matrix, b, **options)

    except InversionFailure:
        raise
    except (np.linalg.LinAlgError, ValueError, RuntimeError, sp.sparse.linalg.MatrixRankWarning) as e:
        raise _fail(matrix, str(e)) from e
