"""
Cached Inversion
================
The cache hit/miss protocol on top of :class:`CachingMatrixCell`.

The matrix held by the cell is assumed to be invertible. This is a
precondition, not something checked here: if it does not hold, the error
raised by the inverter reaches the caller unchanged and the cell's cache
stays empty.

The read-check-compute-store sequence is not atomic. Callers sharing a cell
between threads must hold a lock around the call.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from cachematrix.model.cell import CachingMatrixCell
from cachematrix.solvers.inverse import invert
from cachematrix.utils import inverse_residual, shape_of

logger = logging.getLogger(__name__)


def compute_inverse_cached(
    cell: CachingMatrixCell,
    *,
    inverter: Callable[..., Any] = invert,
    **solver_options: Any
) -> Any:
    """
    Return the inverse of the cell's matrix, computing it at most once.

    Args:
        cell: The cell holding the matrix.
        inverter: Routine used on a cache miss. Defaults to :func:`invert`.
        **solver_options: Forwarded verbatim to ``inverter``. They are not
            part of the cache key, so a cache hit ignores them.

    Raises:
        InversionFailure: Propagated from the inverter when the matrix is not
            invertible. Nothing is cached in that case.

    Returns:
        The cached inverse on a hit, the freshly computed one on a miss.
    """
    inv = cell.get_cached_inverse()
    if inv is not None:
        logger.debug("Inverse cache hit.")
        return inv

    m = cell.get_value()
    logger.debug(f"Inverse cache miss, inverting matrix of shape {shape_of(m)}.")
    inv = inverter(m, **solver_options)
    cell.set_cached_inverse(inv)

    if logger.isEnabledFor(logging.DEBUG) and inverter is invert and not solver_options:
        logger.debug(f"Residual ||A @ inv(A) - I|| = {inverse_residual(m, inv):.3e}")

    return inv
