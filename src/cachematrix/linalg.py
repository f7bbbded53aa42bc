"""
Inversion primitive.

Thin wrapper over numpy's LAPACK routines that rejects non-square input and
matrices that are computationally singular, i.e. whose reciprocal condition
number rcond = s_min / s_max falls below a tolerance (machine epsilon by
default).
"""

import numpy as np
from typing import Optional

from cachematrix.errors import DimensionError, SingularMatrixError

METHODS = ("inv", "solve")


def reciprocal_condition(matrix: np.ndarray) -> float:
    """
    Reciprocal 2-norm condition number of a square matrix.
    
    Args:
        matrix: Shape (N, N) - float matrix
        
    Returns:
        float: s_min / s_max in [0, 1]; 0.0 for an all-zero matrix
    """
    s = np.linalg.svd(matrix, compute_uv=False)
    if s[0] == 0:
        return 0.0
    return float(s[-1] / s[0])


def invert(matrix, method: str = "inv", tol: Optional[float] = None) -> np.ndarray:
    """
    Compute the inverse of a square matrix.
    
    Args:
        matrix: Square real or complex 2-D array (anything np.asarray accepts)
        method: 'inv' (numpy.linalg.inv) or 'solve' (solve A X = I)
        tol: Reciprocal condition threshold below which the matrix is
            treated as singular. Defaults to float machine epsilon.
        
    Returns:
        np.ndarray: Shape (N, N) - inverse of matrix
        
    Raises:
        DimensionError: If matrix is not a square 2-D array
        SingularMatrixError: If matrix is singular or computationally singular
        ValueError: If method is unknown
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method!r} (expected one of {METHODS})")

    try:
        A = np.asarray(matrix)
    except (TypeError, ValueError) as exc:
        raise DimensionError(f"Matrix is not a numeric 2-D array: {exc}") from exc
    if A.dtype.kind not in "biufc":
        raise DimensionError(f"Matrix is not a numeric 2-D array: dtype {A.dtype}")
    # Integers promote to float, complex stays complex
    A = A.astype(np.result_type(A, float))

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionError(f"Expected a square 2-D matrix, got shape {A.shape}")

    n = A.shape[0]
    if n == 0:
        return np.empty((0, 0), dtype=A.dtype)

    if tol is None:
        tol = np.finfo(float).eps

    try:
        rcond = reciprocal_condition(A)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc
    if not np.isfinite(rcond) or rcond < tol:
        raise SingularMatrixError(
            f"Matrix is computationally singular: reciprocal condition number = {rcond:.6g}"
        )

    try:
        if method == "inv":
            return np.linalg.inv(A)
        return np.linalg.solve(A, np.identity(n))
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc
