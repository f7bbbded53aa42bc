"""
cachematrix: memoized matrix inversion.

A CachedMatrix holds a square matrix together with a single cached inverse:
- compute_inverse fills the cache on first request and serves it afterwards
- CachedMatrix.set_matrix replaces the matrix and invalidates the cache
- invert is the inversion primitive, raising DimensionError for non-square
  input and SingularMatrixError for (computationally) singular input
"""

import logging

__version__ = "0.1.0"

from cachematrix.errors import CacheMatrixError, DimensionError, SingularMatrixError
from cachematrix.linalg import invert
from cachematrix.matrix import CachedMatrix
from cachematrix.solve import compute_inverse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CachedMatrix",
    "compute_inverse",
    "invert",
    "CacheMatrixError",
    "DimensionError",
    "SingularMatrixError",
]
