"""
Recovery Parameters

RecoveryParams fixes the shape of a recovery run: the transform length,
how many of its slots carry data, and the scale factor used to move the
evaluation points off the zerofier's roots before dividing.
"""

from dataclasses import dataclass
from typing import Optional

from .field import is_power_of_two


@dataclass(frozen=True)
class RecoveryParams:
    """
    Public parameters for erasure recovery.

    All parameters are immutable and hashable.
    """

    # ==========================================================================
    # Code Shape
    # ==========================================================================

    transform_length: int = 4
    """Number of evaluation samples. Must be a power of two."""

    data_length: int = 2
    """Number of data values; the rest of the polynomial is zero padding."""

    # ==========================================================================
    # Division
    # ==========================================================================

    scale_factor: Optional[int] = None
    """Shift applied before pointwise division. None picks one automatically."""

    check_invariants: bool = True
    """Verify every division by multiplying back."""

    def __post_init__(self):
        if not is_power_of_two(self.transform_length):
            raise ValueError(
                f"transform_length must be a power of 2, got {self.transform_length}"
            )
        if not 1 <= self.data_length <= self.transform_length // 2:
            raise ValueError(
                f"data_length must be in [1, {self.transform_length // 2}], "
                f"got {self.data_length}"
            )
        if self.scale_factor is not None and self.scale_factor == 0:
            raise ValueError("scale_factor must be non-zero")

    @property
    def redundancy(self) -> int:
        """Number of padding slots."""
        return self.transform_length - self.data_length

    @property
    def max_erasures(self) -> int:
        """
        Largest number of lost samples that can be recovered.

        D * Z must fit in transform_length coefficients, so
        data_length + |erased| <= transform_length.
        """
        return self.transform_length - self.data_length


# =============================================================================
# Preset Configurations
# =============================================================================

# Toy: 2 data values, 2 redundancy slots, scale by 2
PARAMS_TOY = RecoveryParams(transform_length=4, data_length=2, scale_factor=2)

# Small: 4 data values in 8 samples
PARAMS_SMALL = RecoveryParams(transform_length=8, data_length=4)

# Medium: 8 data values in 16 samples
PARAMS_MEDIUM = RecoveryParams(transform_length=16, data_length=8)
