import logging

from mlprim.core import (
    Config,
    DomainViolation,
    InvalidParameter,
    LengthMismatch,
    MlprimError,
    as_array,
    unstable_softmax,
    using_config,
    validate_inputs,
)
from mlprim import functions

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Explicit exports for `from mlprim import ...`
__all__ = [
    "Config",
    "DomainViolation",
    "InvalidParameter",
    "LengthMismatch",
    "MlprimError",
    "as_array",
    "functions",
    "unstable_softmax",
    "using_config",
    "validate_inputs",
]
