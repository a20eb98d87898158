import numpy as np

from mlprim.core import Config, as_array, check_param


def _as_float(z) -> np.ndarray:
    z = np.asarray(z)
    if not np.issubdtype(z.dtype, np.floating):
        z = z.astype(np.float64)
    return z


def sigmoid(z):
    """Sigmoid 1 / (1 + e^-z), computed via tanh to avoid overflow."""
    z = _as_float(z)
    return (np.tanh(z * 0.5) * 0.5 + 0.5)[()]


def tanh(z):
    """Hyperbolic tangent."""
    return np.tanh(_as_float(z))[()]


def relu(z):
    """Rectified Linear Unit max(0, z)."""
    z = _as_float(z)
    return np.maximum(z, 0)[()]


def prelu(z, alpha):
    """Parametric ReLU: z if z > 0 else alpha * z."""
    z = _as_float(z)
    alpha = z.dtype.type(alpha)
    return np.where(z > 0, z, alpha * z)[()]


def elu(z, alpha):
    """Exponential Linear Unit: z if z > 0 else alpha * (e^z - 1)."""
    z = _as_float(z)
    alpha = z.dtype.type(alpha)
    return np.where(z > 0, z, alpha * np.expm1(np.minimum(z, 0)))[()]


def glu(z):
    """Gated linear unit z * sigmoid(z)."""
    z = _as_float(z)
    return (z * sigmoid(z))[()]


def swish(z):
    """Alias of glu."""
    return glu(z)


def softplus(z, beta=1.0):
    """Softplus log(1 + e^(beta * z)) / beta."""
    check_param(beta, "beta", strict=True)
    z = _as_float(z)
    beta = z.dtype.type(beta)
    return (np.logaddexp(0, z * beta) / beta)[()]


def mish(z):
    """Mish z * tanh(softplus(z))."""
    z = _as_float(z)
    return (z * np.tanh(softplus(z, 1.0)))[()]


def softmax(x) -> np.ndarray:
    """Softmax of a 1-D sequence: exp(x) / sum(exp(x)).

    With Config.stable_softmax (the default) the max is subtracted before
    exponentiating; the result is mathematically the same but does not
    overflow for large inputs.
    """
    x = as_array(x)
    if x.size == 0:
        return x.copy()
    if Config.stable_softmax.get():
        x = x - x.max()
    y = np.exp(x)
    return y / y.sum()
