"""Exception types raised by the inversion primitive.

Both concrete errors also derive from the builtin or numpy error they
specialise, so existing ``except ValueError`` / ``except LinAlgError``
handlers keep working.
"""

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class DimensionError(CacheMatrixError, ValueError):
    """Matrix is not a square 2-D array, so its inverse is undefined."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """Matrix has no inverse, or is too ill-conditioned to invert reliably."""
