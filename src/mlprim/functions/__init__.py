"""Functions — activations, element formulas, reductions and losses.

NumPy-backed implementations of the numeric primitives used by training and
inference code: scalar activations, softmax, the per-element formulas that
losses are built from, the pairwise reducer that folds them over aligned
sequences, and the loss catalog itself.
"""

from mlprim.functions.activation import (
    elu,
    glu,
    mish,
    prelu,
    relu,
    sigmoid,
    softmax,
    softplus,
    swish,
    tanh,
)
from mlprim.functions.formula import (
    abs_diff,
    bce_term,
    ce_term,
    hinge_term,
    huber_term,
    kl_term,
    sq_diff,
)
from mlprim.functions.loss import (
    binary_cross_entropy,
    contrastive,
    cross_entropy,
    hinge,
    huber,
    kl_divergence,
    l1,
    l2,
    squared_euclidean,
    triplet_ranking,
)
from mlprim.functions.reduce import pairwise_map, pairwise_reduce
