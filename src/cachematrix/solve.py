"""
Memoized inversion over a CachedMatrix.

compute_inverse serves the cached inverse when one exists and otherwise
inverts the current matrix, stores the result and returns it. Failures from
the inversion primitive propagate unchanged and leave the cache empty.
"""

import logging

import numpy as np
from typing import Callable

from cachematrix.linalg import invert
from cachematrix.matrix import CachedMatrix

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "getting cached inverse"


def compute_inverse(cached_matrix: CachedMatrix,
                    inverter: Callable[..., np.ndarray] = invert,
                    **kwargs) -> np.ndarray:
    """
    Return the inverse of cached_matrix's matrix, computing it at most once.

    On a cache hit an INFO record is logged on this module's logger and the
    inversion primitive is not called. The whole check-compute-store
    sequence runs under cached_matrix.lock.

    Args:
        cached_matrix: Holder of the matrix and its cached inverse
        inverter: Inversion primitive, called as inverter(matrix, **kwargs)
        **kwargs: Forwarded to inverter (e.g. method, tol for invert)

    Returns:
        np.ndarray: Inverse of the current matrix

    Raises:
        Whatever inverter raises (DimensionError, SingularMatrixError for
        the default primitive); nothing is cached in that case.
    """
    with cached_matrix.lock:
        inverse = cached_matrix.get_inverse()
        if inverse is not None:
            logger.info(CACHE_HIT_MESSAGE)
            return inverse

        matrix = cached_matrix.get_matrix()
        logger.debug("Cache miss, inverting matrix of shape %s", getattr(matrix, "shape", None))
        inverse = inverter(matrix, **kwargs)
        cached_matrix.set_inverse(inverse)
        return inverse
