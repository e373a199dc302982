"""
Core infrastructure for lingebra.

Shared abstractions used by the matrix and vector modules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Named tolerance tiers for explicit approximate comparison
"""

from lingebra.core.exceptions import (
    LingebraError,
    ValidationError,
    ShapeError,
    PreconditionError,
    MatrixIndexError,
)
from lingebra.core.tolerances import (
    ToleranceTier,
    FP64,
    FP64_LOOSE,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "LingebraError",
    "ValidationError",
    "ShapeError",
    "PreconditionError",
    "MatrixIndexError",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_LOOSE",
    "select_tolerance",
]
