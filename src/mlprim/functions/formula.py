"""Per-element formulas combined by the losses.

Each formula takes aligned values ``a`` (ground truth) and ``b`` (prediction)
as scalars or arrays and returns the per-element term. None of them check
their domain: log-based terms yield NaN/inf outside it.
"""

import numpy as np


def abs_diff(a, b):
    """|a - b|"""
    return np.abs(a - b)


def sq_diff(a, b):
    """(a - b)^2"""
    return np.square(a - b)


def huber_term(a, b, threshold):
    """Piecewise Huber term of the signed difference d = a - b.

    d^2 / 2 when d <= threshold, else threshold * |d| - threshold / 2.
    The comparison uses the signed difference, so large negative
    differences always take the quadratic branch.
    """
    d = a - b
    return np.where(d <= threshold, np.square(d) / 2, threshold * np.abs(d) - threshold / 2)


def bce_term(a, b):
    """a * log(b) + (a - 1) * log(1 - b); b must lie in (0, 1)."""
    return a * np.log(b) + (a - 1) * np.log(1 - b)


def ce_term(a, b):
    """a * log(b); b must lie in (0, 1)."""
    return a * np.log(b)


def kl_term(a, b):
    """a * log(a / b); a and b must be positive."""
    return a * np.log(a / b)


def hinge_term(a, b):
    """max(0, 1 - a * b)"""
    return np.maximum(0, 1 - a * b)
