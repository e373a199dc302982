"""
Vector functions on plain numeric sequences.

Independent of the Matrix type.

Public API:
    vector_size(v)             - Euclidean norm
    vector_dot_product(a, b)   - inner product
    vector_sum(a, b)           - element-wise sum
    scalar_projection(a, b)    - dot(a, b) / |b|^2
    vector_projection(a, b)    - scalar_projection(a, b) * b
    orthogonal(a, b)           - dot(a, b) == 0.0
    all_orthogonal(vectors)    - pairwise orthogonality
    change_base(v, base)       - coordinates in an orthogonal basis
"""

from lingebra.vector.operations import (
    vector_size,
    vector_dot_product,
    vector_sum,
    scalar_projection,
    vector_projection,
)
from lingebra.vector.orthogonality import (
    orthogonal,
    all_orthogonal,
    change_base,
)

__all__ = [
    "vector_size",
    "vector_dot_product",
    "vector_sum",
    "scalar_projection",
    "vector_projection",
    "orthogonal",
    "all_orthogonal",
    "change_base",
]
