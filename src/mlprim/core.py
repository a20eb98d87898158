"""Core — config flags, array coercion and input checks.

Config flags, the error types raised across mlprim, and the helpers
every catalog uses to turn caller sequences into 1-D floating NumPy arrays
of a common element type and to check their lengths and domains.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class Config:
    """Config flags affecting validation and numerical behavior.

    Each flag is a context variable, so a value set with using_config is only
    seen by the thread or task that set it. Read a flag with .get().
    """

    validate_inputs = contextvars.ContextVar("validate_inputs", default=False)
    stable_softmax = contextvars.ContextVar("stable_softmax", default=True)


@contextlib.contextmanager
def using_config(name: str, value: bool):
    """Temporarily set a Config attribute inside a context."""
    var = getattr(Config, name)
    token = var.set(value)
    try:
        yield
    finally:
        var.reset(token)


def validate_inputs():
    """Context manager enabling domain and parameter checks."""
    return using_config("validate_inputs", True)


def unstable_softmax():
    """Context manager selecting the plain exp/sum softmax."""
    return using_config("stable_softmax", False)


# --- errors -------------------------------------------------------------------------


class MlprimError(ValueError):
    """Base class for invalid arguments passed to mlprim functions."""


class LengthMismatch(MlprimError):
    """Sequences combined by a pairwise operation differ in length."""


class DomainViolation(MlprimError):
    """A value lies outside the mathematical domain of a formula."""


class InvalidParameter(MlprimError):
    """A scalar parameter (threshold, margin, beta) is out of range."""


# --- arrays -------------------------------------------------------------------------


def as_array(x, dtype=None) -> np.ndarray:
    """Convert x to a 1-D floating array.

    Floating input keeps its precision; integer and bool input becomes
    float64. The input is never modified: arrays that already have the
    requested dtype are returned as read-only views.
    """
    x = np.asarray(x)
    if dtype is None:
        dtype = x.dtype if np.issubdtype(x.dtype, np.floating) else np.float64
    if x.ndim != 1:
        raise ValueError(f"expected a 1-D sequence, got shape {x.shape}")
    x = x.astype(dtype, copy=False).view()
    x.flags.writeable = False
    return x


def result_dtype(*xs) -> np.dtype:
    """Common floating element type of the given sequences."""
    dtypes = [np.asarray(x).dtype for x in xs]
    dtype = np.result_type(*dtypes)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.result_type(dtype, np.float64)
    return np.dtype(dtype)


def as_arrays(*xs: Sequence[float]) -> Tuple[np.ndarray, ...]:
    """Convert aligned sequences to arrays of one dtype and check lengths."""
    dtype = result_dtype(*xs)
    arrays = tuple(as_array(x, dtype) for x in xs)
    check_lengths(*arrays)
    return arrays


def check_lengths(*xs) -> int:
    """Return the common length of xs or raise LengthMismatch."""
    lengths = [len(x) for x in xs]
    if len(set(lengths)) > 1:
        logger.debug("Length mismatch: %s", lengths)
        raise LengthMismatch(
            "sequences must have equal length, got "
            + ", ".join(str(n) for n in lengths)
        )
    return lengths[0] if lengths else 0


# --- domain / parameter checks ------------------------------------------------------


def check_open_unit(x: np.ndarray, name: str) -> None:
    """Require every element of x in (0, 1) when validation is enabled."""
    if not Config.validate_inputs.get():
        return
    if not np.all((x > 0) & (x < 1)):
        logger.debug("%s outside (0, 1): %s", name, x)
        raise DomainViolation(f"{name} must lie strictly inside (0, 1)")


def check_positive(x: np.ndarray, name: str) -> None:
    """Require every element of x > 0 when validation is enabled."""
    if not Config.validate_inputs.get():
        return
    if not np.all(x > 0):
        logger.debug("%s not strictly positive: %s", name, x)
        raise DomainViolation(f"{name} must be strictly positive")


def check_param(value: float, name: str, strict: bool = False) -> None:
    """Require a finite non-negative (or positive) scalar parameter.

    Only enforced when Config.validate_inputs is set.
    """
    if not Config.validate_inputs.get():
        return
    ok = np.isfinite(value) and (value > 0 if strict else value >= 0)
    if not ok:
        bound = "positive" if strict else "non-negative"
        logger.debug("Invalid %s=%r", name, value)
        raise InvalidParameter(f"{name} must be finite and {bound}, got {value!r}")
