"""
Configuration & Defaults
========================
This module serves as the central registry for numerical constants shared by
the cell and the solver layer.

Exports:
    ABSENT_VALUE (float): Placeholder for an entry that has not been set.
    DEFAULT_SHAPE (tuple): Shape of the matrix held by a freshly created cell.
    DEFAULT_DTYPE: Floating point type used for the default matrix.
    DEFAULT_TOL (float): Default conditioning threshold for inversion.
"""
import numpy as np


# Global Constants
ABSENT_VALUE: float = np.nan
DEFAULT_SHAPE: tuple[int, int] = (1, 1)
DEFAULT_DTYPE = np.float64

# Smallest accepted reciprocal condition number before inverting
DEFAULT_TOL: float = float(np.finfo(np.float64).eps)
