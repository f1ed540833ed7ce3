"""
Solver Layer
============
Computes inverses and decides when the cached one can be reused.

Note: Inversion itself is delegated to SciPy; nothing here implements a
factorization.
"""
