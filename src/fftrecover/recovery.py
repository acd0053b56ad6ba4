"""
Erasure Recovery via the Zero-Polynomial Trick

Data D of length d is zero-padded to n coefficients and encoded as its
evaluations at the n-th roots of unity. Given those evaluations with
some samples lost, the pipeline rebuilds D exactly:

    1. Z(x) = ∏(x - ω^j) over the erased indices j
    2. (E·Z)(ω^j) = E(ω^j)·Z(ω^j), which equals (D·Z)(ω^j) everywhere
       because Z vanishes exactly where E is unknown
    3. interpolate D·Z, scale both D·Z and Z by k so that no evaluation
       of Z is zero, divide pointwise, interpolate, unscale

Lost samples are represented as None, never as a zero placeholder, so a
genuine zero evaluation is not confused with an erasure.
"""

from __future__ import annotations
import copy
import logging
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .errors import RecoveryError, UnrecoverableErasure
from .fft import Transform, get_transform
from .field import Field
from .params import RecoveryParams
from .poly import Polynomial


logger = logging.getLogger(__name__)

Samples = Sequence[Optional[Any]]


@dataclass
class RecoveryResult:
    """Outcome of a recovery run."""
    data: List[Any]
    polynomial: Polynomial
    scale_factor: Any
    missing: List[int]
    trace: List[Tuple[str, List[Any]]] = dataclass_field(default_factory=list)

    def stage(self, label: str) -> List[Any]:
        """Snapshot recorded under label."""
        for name, values in self.trace:
            if name == label:
                return values
        raise KeyError(label)


def erase(evals: Sequence[Any], indices: Iterable[int]) -> List[Optional[Any]]:
    """Copy of evals with the given positions replaced by None."""
    received: List[Optional[Any]] = list(evals)
    for j in indices:
        if not 0 <= j < len(received):
            raise IndexError(f"Index {j} out of range [0, {len(received)})")
        received[j] = None
    return received


class RecoveryPipeline:
    """
    Encode / erase / recover over one domain and one parameter set.

    Example:
        >>> pipeline = RecoveryPipeline(PrimeField(17), PARAMS_TOY)
        >>> received = erase(pipeline.encode([5, 7]), [1, 2])
        >>> pipeline.recover_data(received)
        [ModElement(5, 17), ModElement(7, 17)]
    """

    def __init__(self, field: Field, params: Optional[RecoveryParams] = None):
        self.params = params or RecoveryParams()
        if field.check_invariants != self.params.check_invariants:
            # The caller's field keeps its own setting
            field = copy.copy(field)
            field.check_invariants = self.params.check_invariants
        self.field = field
        self.transform: Transform = get_transform(field, self.params.transform_length)

    @property
    def n(self) -> int:
        return self.params.transform_length

    @property
    def domain(self) -> List[Any]:
        return self.transform.domain

    # =========================================================================
    # Encoding
    # =========================================================================

    def encode(self, data: Sequence[Any]) -> List[Any]:
        """Evaluate the zero-padded data polynomial at the roots of unity."""
        if len(data) != self.params.data_length:
            raise ValueError(
                f"Expected {self.params.data_length} data values, got {len(data)}"
            )
        poly = Polynomial(self.field, data).padded(self.n)
        return self.transform.forward(list(poly))

    def erase(self, evals: Sequence[Any], indices: Iterable[int]) -> List[Optional[Any]]:
        return erase(evals, indices)

    # =========================================================================
    # Erasure Analysis
    # =========================================================================

    def missing_indices(self, samples: Samples) -> List[int]:
        if len(samples) != self.n:
            raise ValueError(f"Expected {self.n} samples, got {len(samples)}")
        return [j for j, v in enumerate(samples) if v is None]

    def check_recoverable(self, missing: Sequence[int]) -> None:
        """Fail fast when the erasure pattern cannot be recovered."""
        if len(set(missing)) != len(missing):
            raise UnrecoverableErasure(f"Duplicate erased indices: {list(missing)}")
        for j in missing:
            if not 0 <= j < self.n:
                raise UnrecoverableErasure(f"Erased index {j} out of range [0, {self.n})")
        if len(missing) > self.params.max_erasures:
            raise UnrecoverableErasure(
                f"{len(missing)} of {self.n} samples erased; at most "
                f"{self.params.max_erasures} can be recovered with "
                f"{self.params.data_length} data values"
            )

    def zero_poly(self, missing: Sequence[int]) -> Polynomial:
        """Z(x) = ∏(x - ω^j) for j in missing, padded to n coefficients."""
        self.check_recoverable(missing)
        domain = self.domain
        return Polynomial.zerofier(self.field, [domain[j] for j in missing], self.n)

    def choose_scale_factor(self) -> Any:
        """
        Configured scale factor, or the smallest integer k >= 2 that is
        neither zero nor a point of the evaluation domain.
        """
        if self.params.scale_factor is not None:
            return self.validate_scale_factor(self.params.scale_factor)

        domain = self.domain
        limit = getattr(self.field, 'modulus', self.n + 2)
        for candidate in range(2, limit):
            k = self.field.from_int(candidate)
            if not self.field.is_zero(k) and k not in domain:
                return k
        raise ValueError(
            f"No usable scale factor in {self.field.describe()} for n={self.n}"
        )

    def validate_scale_factor(self, k) -> Any:
        """Lift k into the domain; raise ValueError if it is zero there."""
        k = self.field.coerce(k)
        if self.field.is_zero(k):
            raise ValueError(f"Scale factor {k} is zero in {self.field.describe()}")
        return k

    # =========================================================================
    # Recovery
    # =========================================================================

    def recover(self, samples: Samples, scale_factor=None) -> RecoveryResult:
        """
        Rebuild the data polynomial from samples with None for lost entries.

        Raises:
            UnrecoverableErasure: too many samples lost
            DivisionError: the scale factor hits a root of the zerofier
            RecoveryError: the present samples are not a valid codeword
            ValueError: the scale factor is zero in the domain
        """
        field = self.field
        transform = self.transform
        trace: List[Tuple[str, List[Any]]] = []

        def record(label: str, values: Iterable[Any]) -> None:
            values = list(values)
            trace.append((label, values))
            logger.debug("%18s: %s", label, _render(values))

        missing = self.missing_indices(samples)
        self.check_recoverable(missing)
        if scale_factor is not None:
            k = self.validate_scale_factor(scale_factor)
        else:
            k = self.choose_scale_factor()
        record("Data with missing", samples)

        zero = self.zero_poly(missing)
        record("ZeroPoly", zero)
        zero_eval = transform.forward(list(zero))
        record("ZeroPoly eval", zero_eval)

        # Z vanishes at every erased index, so the placeholder is irrelevant
        placeholder = field.zero()
        ez_eval = [
            field.mul(placeholder if v is None else field.coerce(v), z)
            for v, z in zip(samples, zero_eval)
        ]
        record("EZ eval", ez_eval)

        dz_poly = Polynomial(field, transform.inverse(ez_eval))
        record("EZ = DZ poly", dz_poly)

        dz_scaled = dz_poly.scale(k)
        zero_scaled = zero.scale(k)
        record("DZ poly scaled", dz_scaled)
        record("ZeroPoly scaled", zero_scaled)

        dz_scaled_eval = transform.forward(list(dz_scaled))
        zero_scaled_eval = transform.forward(list(zero_scaled))
        record("DZ eval scaled", dz_scaled_eval)
        record("Zero eval scaled", zero_scaled_eval)

        quotient_eval = [field.div(a, b) for a, b in zip(dz_scaled_eval, zero_scaled_eval)]
        record("Quotient eval", quotient_eval)

        scaled_recovered = Polynomial(field, transform.inverse(quotient_eval))
        record("Scaled recovered", scaled_recovered)
        recovered = scaled_recovered.unscale(k)
        record("Recovered values", recovered)

        d = self.params.data_length
        if any(not field.is_zero(c) for c in recovered.coeffs[d:]):
            raise RecoveryError(
                "Recovered polynomial exceeds the data length; "
                "the present samples are not a valid codeword"
            )

        logger.info(
            "Recovered %d values from %d/%d samples over %s (k=%s)",
            d, self.n - len(missing), self.n, field.describe(), k,
        )
        return RecoveryResult(
            data=list(recovered.coeffs[:d]),
            polynomial=recovered,
            scale_factor=k,
            missing=missing,
            trace=trace,
        )

    def recover_data(self, samples: Samples, scale_factor=None) -> List[Any]:
        return self.recover(samples, scale_factor).data


def recover(field: Field, samples: Samples, params: Optional[RecoveryParams] = None) -> List[Any]:
    """Recover data values from samples using a one-off pipeline."""
    if params is None:
        params = RecoveryParams(transform_length=len(samples), data_length=len(samples) // 2)
    return RecoveryPipeline(field, params).recover_data(samples)


def _render(values: Iterable[Any]) -> str:
    return "[" + ", ".join("?" if v is None else str(v) for v in values) + "]"
