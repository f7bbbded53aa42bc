"""
Sample session for the inverse cache.

Reproduces the canonical walk-through:
- construct a CachedMatrix from a 3x3 matrix and print it
- first compute_inverse call inverts and caches (no notification)
- second call is served from the cache ("getting cached inverse" is logged)
- set_matrix replaces the matrix, and the next call recomputes
"""

import logging
import time
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from cachematrix import CachedMatrix, compute_inverse
from cachematrix.utils import inversion_residual


def run_sample(method: str = 'inv', verbose: bool = True):
    """
    Run the sample session.
    
    Args:
        method: Inversion method passed through to invert ('inv' or 'solve')
        verbose: Whether to print progress
        
    Returns:
        dict: Inverses and timings of each call
    """
    x = np.array([[1, 3, 3], [1, 4, 3], [1, 3, 4]], dtype=float)
    cm = CachedMatrix(x)
    
    if verbose:
        print("="*70)
        print("CACHEMATRIX - Sample Run")
        print("="*70)
        print("Matrix:")
        print(cm.get_matrix())
    
    results = {}
    for label in ('first', 'second'):
        start = time.perf_counter()
        inv = compute_inverse(cm, method=method)
        elapsed = time.perf_counter() - start
        results[label] = {'inverse': inv, 'seconds': elapsed}
        
        if verbose:
            print(f"\n{label.capitalize()} run ({elapsed*1e6:.1f} us):")
            print(np.round(inv, 10))
    
    m2 = np.array([[4, 7], [2, 6]], dtype=float)
    cm.set_matrix(m2)
    inv2 = compute_inverse(cm, method=method)
    results['replaced'] = {'inverse': inv2, 'residual': inversion_residual(m2, inv2)}
    
    if verbose:
        print("\nAfter set_matrix:")
        print(cm.get_matrix())
        print(inv2)
        print(f"Residual |A A^-1 - I|_max: {results['replaced']['residual']:.2e}")
    
    return results


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    run_sample()
