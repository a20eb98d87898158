"""Pairwise reduction over aligned sequences.

Every loss in mlprim is a per-element formula applied to two aligned
sequences followed by a zero-initialized ``+`` fold. Formulas written with
NumPy ufuncs are applied to whole arrays at once; any other callable is
applied to each aligned pair in turn.
"""

from typing import Callable

import numpy as np

from mlprim.core import as_arrays

Formula = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _apply_vectorized(f: Formula, x0: np.ndarray, x1: np.ndarray):
    """Return f(x0, x1) if f maps whole arrays elementwise, else None."""
    try:
        y = f(x0, x1)
    except (TypeError, ValueError):
        # scalar-only formula (python conditionals, math.*)
        return None
    y = np.asarray(y)
    if y.shape != x0.shape:
        return None
    return y


def pairwise_map(f: Formula, x0, x1) -> np.ndarray:
    """Apply f to each aligned pair (x0[i], x1[i]).

    Raises LengthMismatch if the sequences differ in length.
    """
    x0, x1 = as_arrays(x0, x1)
    y = _apply_vectorized(f, x0, x1)
    if y is None:
        y = np.fromiter((f(a, b) for a, b in zip(x0, x1)), dtype=x0.dtype, count=len(x0))
    return np.asarray(y, dtype=x0.dtype)


def pairwise_reduce(f: Formula, x0, x1):
    """Sum f(x0[i], x1[i]) over all i, starting from zero.

    The result is a scalar of the common element type of x0 and x1. NumPy
    sums pairwise, so the last bits may differ from a strict left fold.
    """
    y = pairwise_map(f, x0, x1)
    return y.sum(dtype=y.dtype)
