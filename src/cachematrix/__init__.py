"""
cachematrix
===========
A matrix container that computes its inverse once and reuses it until the
matrix is replaced.

Usage:
    >>> from cachematrix import make_caching_matrix_cell, compute_inverse_cached
    >>> cell = make_caching_matrix_cell([[0, 0, 1], [2, -1, 3], [1, 1, 4]])
    >>> inv = compute_inverse_cached(cell)
"""
import logging

from cachematrix.model.cell import CachingMatrixCell, make_caching_matrix_cell
from cachematrix.solvers.cached import compute_inverse_cached
from cachematrix.solvers.inverse import InversionFailure, invert
from cachematrix.logging_config import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CachingMatrixCell",
    "InversionFailure",
    "compute_inverse_cached",
    "invert",
    "make_caching_matrix_cell",
    "setup_logging",
]
