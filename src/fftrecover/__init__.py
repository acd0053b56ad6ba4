"""
fftrecover: Reed-Solomon Erasure Recovery with FFTs

Data is encoded as evaluations of a polynomial at the n-th roots of
unity. Up to n - d lost evaluations are recovered exactly using a zero
polynomial over the erased points, pointwise multiplication and
division in evaluation form, and a scaling step that keeps every
divisor non-zero.

Usage:
    from fftrecover import PrimeField, RecoveryPipeline, PARAMS_TOY, erase

    pipeline = RecoveryPipeline(PrimeField(17), PARAMS_TOY)
    received = erase(pipeline.encode([5, 7]), [1, 2])
    assert pipeline.recover_data(received) == [5, 7]

    # Same over the complex integers
    from fftrecover import GaussianIntegers
    pipeline = RecoveryPipeline(GaussianIntegers(), PARAMS_TOY)
"""

# Errors
from .errors import (
    RecoveryError,
    DivisionError,
    InvariantViolation,
    UnrecoverableErasure,
)

# Domains
from .field import (
    Field,
    PrimeField,
    ModElement,
    DEFAULT_MODULUS,
    mod_inverse,
    is_prime,
    is_power_of_two,
)
from .gaussian import GaussianInteger, GaussianIntegers, I

# Polynomials and transforms
from .poly import Polynomial
from .fft import (
    Transform,
    Length4Transform,
    RadixTwoTransform,
    get_transform,
    fft,
    ifft,
)

# Parameters
from .params import RecoveryParams, PARAMS_TOY, PARAMS_SMALL, PARAMS_MEDIUM

# Recovery
from .recovery import RecoveryPipeline, RecoveryResult, erase, recover

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Errors
    "RecoveryError",
    "DivisionError",
    "InvariantViolation",
    "UnrecoverableErasure",
    # Domains
    "Field",
    "PrimeField",
    "ModElement",
    "DEFAULT_MODULUS",
    "mod_inverse",
    "is_prime",
    "is_power_of_two",
    "GaussianInteger",
    "GaussianIntegers",
    "I",
    # Polynomials and transforms
    "Polynomial",
    "Transform",
    "Length4Transform",
    "RadixTwoTransform",
    "get_transform",
    "fft",
    "ifft",
    # Parameters
    "RecoveryParams",
    "PARAMS_TOY",
    "PARAMS_SMALL",
    "PARAMS_MEDIUM",
    # Recovery
    "RecoveryPipeline",
    "RecoveryResult",
    "erase",
    "recover",
]
