"""
lingebra: simple linear-algebra primitives for Python.

A dense immutable Matrix type, free functions on plain numeric vectors
and the Gaussian density.

Submodules:
    matrix: Matrix type and operators
    vector: Vector norms, products, projections, orthogonality, change of basis
    gaussian: Normal probability density
    core: Exceptions, validation, tolerance tiers
"""

__version__ = "0.1.0"

from lingebra.core.exceptions import (
    LingebraError,
    ValidationError,
    ShapeError,
    PreconditionError,
    MatrixIndexError,
)
from lingebra.matrix import Matrix, MatrixRow
from lingebra.vector import (
    vector_size,
    vector_dot_product,
    vector_sum,
    scalar_projection,
    vector_projection,
    orthogonal,
    all_orthogonal,
    change_base,
)
from lingebra.gaussian import gaussian_function

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "MatrixRow",
    # Vector functions
    "vector_size",
    "vector_dot_product",
    "vector_sum",
    "scalar_projection",
    "vector_projection",
    "orthogonal",
    "all_orthogonal",
    "change_base",
    # Density
    "gaussian_function",
    # Exceptions
    "LingebraError",
    "ValidationError",
    "ShapeError",
    "PreconditionError",
    "MatrixIndexError",
]
