"""Losses and distances over aligned sequences.

Every loss here is a pairwise reduction of one element formula followed by
a closing transform (square root, negated mean, max with zero). All inputs
must have equal length; the result is a scalar of their common float type.
"""

import functools
import logging

import numpy as np

from mlprim.core import as_arrays, check_open_unit, check_param, check_positive
from mlprim.functions import formula
from mlprim.functions.reduce import pairwise_reduce

logger = logging.getLogger(__name__)


def _finite(name, value):
    if not np.isfinite(value):
        logger.warning("Non-finite %s loss: %s", name, value)
    return value


def l1(ground, predicted):
    """Sum of absolute differences (Manhattan distance), not normalized."""
    return pairwise_reduce(formula.abs_diff, ground, predicted)


def squared_euclidean(x0, x1):
    """Sum of squared differences."""
    return pairwise_reduce(formula.sq_diff, x0, x1)


def l2(ground, predicted):
    """Euclidean distance sqrt(sum((ground - predicted)^2))."""
    return np.sqrt(squared_euclidean(ground, predicted))


def huber(ground, predicted, threshold):
    """Sum of the piecewise Huber term over the signed differences.

    Pairs whose signed difference ground - predicted is <= threshold
    contribute d^2 / 2, the rest threshold * |d| - threshold / 2.
    threshold should be finite and non-negative.
    """
    check_param(threshold, "threshold")
    ground, predicted = as_arrays(ground, predicted)
    f = functools.partial(formula.huber_term, threshold=ground.dtype.type(threshold))
    return pairwise_reduce(f, ground, predicted)


def _negated_mean(name, f, ground, predicted):
    ground, predicted = as_arrays(ground, predicted)
    check_open_unit(predicted, "predicted")
    with np.errstate(divide="ignore", invalid="ignore"):
        total = pairwise_reduce(f, ground, predicted)
        result = -total / ground.dtype.type(len(ground))
    return _finite(name, result)


def binary_cross_entropy(ground, predicted):
    """Binary cross entropy -mean(g*log(p) + (g-1)*log(1-p)).

    predicted must lie strictly inside (0, 1); ground is conventionally 0/1.
    Out-of-domain predictions give NaN/inf unless Config.validate_inputs is
    set, in which case DomainViolation is raised. Empty input gives NaN.
    """
    return _negated_mean("binary cross entropy", formula.bce_term, ground, predicted)


def cross_entropy(ground, predicted):
    """Cross entropy -mean(g * log(p)); predicted must lie in (0, 1)."""
    return _negated_mean("cross entropy", formula.ce_term, ground, predicted)


def kl_divergence(ground, predicted):
    """KL divergence sum(g * log(g / p)) for strictly positive inputs.

    Inputs are conventionally probability distributions; that they sum to
    one is not checked.
    """
    ground, predicted = as_arrays(ground, predicted)
    check_positive(ground, "ground")
    check_positive(predicted, "predicted")
    with np.errstate(divide="ignore", invalid="ignore"):
        result = pairwise_reduce(formula.kl_term, ground, predicted)
    return _finite("KL divergence", result)


def hinge(ground, predicted):
    """Hinge loss sum(max(0, 1 - g * p)); ground is conventionally -1/+1."""
    return pairwise_reduce(formula.hinge_term, ground, predicted)


def contrastive(is_same_pair: bool, features_a, features_b, margin):
    """Contrastive loss between two feature vectors.

    With D the squared Euclidean distance, returns D for a same pair and
    max(margin - sqrt(D), 0)^2 otherwise.
    """
    check_param(margin, "margin")
    features_a, features_b = as_arrays(features_a, features_b)
    dist = squared_euclidean(features_a, features_b)
    if is_same_pair:
        return dist
    margin = dist.dtype.type(margin)
    return np.square(np.maximum(margin - np.sqrt(dist), 0))


def triplet_ranking(anchor, positive, negative, margin):
    """Triplet ranking loss max(0, |a - p| - |a - n| + margin).

    Distances are Euclidean (square-rooted).
    """
    check_param(margin, "margin")
    anchor, positive, negative = as_arrays(anchor, positive, negative)
    dist_pos = l2(anchor, positive)
    dist_neg = l2(anchor, negative)
    margin = dist_pos.dtype.type(margin)
    return np.maximum(dist_pos - dist_neg + margin, 0)
