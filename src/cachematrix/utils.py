"""
Utility functions for checking inverses.
"""

import numpy as np


def inversion_residual(matrix: np.ndarray, inverse: np.ndarray) -> float:
    """
    Largest absolute deviation of matrix @ inverse from the identity.

    Args:
        matrix: Shape (N, N)
        inverse: Shape (N, N)

    Returns:
        float: max |(A A^-1 - I)_ij|, 0.0 for empty matrices
    """
    A = np.asarray(matrix)
    A_inv = np.asarray(inverse)
    if A.size == 0:
        return 0.0
    return float(np.max(np.abs(A @ A_inv - np.identity(A.shape[0]))))


def is_inverse(matrix: np.ndarray, inverse: np.ndarray, atol: float = 1e-8) -> bool:
    """Check that inverse is the inverse of matrix within atol."""
    A = np.asarray(matrix)
    A_inv = np.asarray(inverse)
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A_inv.shape != A.shape:
        return False
    return inversion_residual(A, A_inv) <= atol
