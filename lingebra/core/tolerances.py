"""
Tolerance tiers for approximate numerical comparison.

Matrix equality and orthogonality are exact. These tiers exist for
callers (and the test-suite) that explicitly ask for approximate
comparison via Matrix.allclose or numpy.testing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, a few ulps of accumulated rounding
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, accumulated rounding only',
)

# Double precision after long chains of operations
FP64_LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='fp64_loose',
    description='double precision, long operation chains',
)

_TIERS = {tier.name: tier for tier in (FP64, FP64_LOOSE)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValueError(
            f"unknown tolerance tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
