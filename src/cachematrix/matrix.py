"""
Cached Matrix: a matrix paired with a lazily computed inverse.

The holder keeps exactly one (matrix, inverse) pair. The inverse slot starts
empty, is filled by compute_inverse after a successful inversion, and is
cleared whenever the matrix is replaced.
"""

import threading

import numpy as np
from typing import Optional


class CachedMatrix:
    """
    Square matrix with a single-entry inverse cache.

    Attributes:
        matrix: Shape (N, N) - current subject matrix
        inverse (Optional[np.ndarray]): Shape (N, N) cached inverse, or None
        lock (threading.RLock): Guards the (matrix, inverse) pair
    """

    def __init__(self, matrix=None):
        """
        Initialize with no cached inverse.

        Args:
            matrix: Initial matrix; defaults to an empty (0, 0) array
        """
        self.matrix = np.empty((0, 0)) if matrix is None else matrix
        self.inverse: Optional[np.ndarray] = None
        self.lock = threading.RLock()

    def set_matrix(self, matrix):
        """
        Replace the matrix and invalidate the cached inverse.

        Args:
            matrix: New subject matrix (not validated)
        """
        with self.lock:
            self.matrix = matrix
            self.inverse = None

    def get_matrix(self):
        """Return the current matrix."""
        return self.matrix

    def set_inverse(self, inverse: np.ndarray):
        """
        Store the inverse of the current matrix.

        The array is marked read-only in place. Not validated: callers must
        only pass the inverse of the matrix returned by get_matrix() under
        the same lock.

        Args:
            inverse: Shape (N, N) - inverse of the current matrix
        """
        with self.lock:
            # Read-only so callers holding the returned array cannot corrupt the cache
            if isinstance(inverse, np.ndarray):
                inverse.setflags(write=False)
            self.inverse = inverse

    def get_inverse(self) -> Optional[np.ndarray]:
        """
        Get the cached inverse.

        Returns:
            Optional[np.ndarray]: Cached inverse, or None if not computed
        """
        return self.inverse

    def has_inverse(self) -> bool:
        """Check if an inverse is cached."""
        return self.inverse is not None

    def __repr__(self):
        shape = getattr(self.matrix, "shape", None)
        return f"CachedMatrix(shape={shape}, cached={self.has_inverse()})"
