"""
Orthogonality tests and change of basis.

Orthogonality is exact: two vectors are orthogonal only when their dot
product is exactly 0.0. No tolerance is applied.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from lingebra.core.exceptions import PreconditionError
from lingebra.vector.operations import scalar_projection, vector_dot_product


def orthogonal(a: ArrayLike, b: ArrayLike) -> bool:
    """
    Check whether two vectors are orthogonal to each other.

    Examples:
        >>> orthogonal([2.0, 1.0, 0.0], [-1.0, 2.0, 5.0])
        True
    """
    return vector_dot_product(a, b) == 0.0


def all_orthogonal(vectors: Sequence[ArrayLike]) -> bool:
    """
    Check whether every pair of vectors is mutually orthogonal.

    The first vector is tested against all the others, then the same is
    done for the remaining vectors. Zero or one vectors are trivially
    orthogonal.

    Examples:
        >>> all_orthogonal([[1, 0, 0, 0], [0, 2, -1, 0], [0, 1, 2, 0], [0, 0, 0, 3]])
        True
    """
    vectors = list(vectors)
    for i, head in enumerate(vectors[:-1]):
        if not all(orthogonal(head, other) for other in vectors[i + 1:]):
            return False
    return True


def change_base(vector: ArrayLike, base: Sequence[ArrayLike]) -> NDArray[np.float64]:
    """
    Coordinates of a vector in an orthogonal basis.

    Parameters
    ----------
    vector : array-like
        Vector to express in the new basis.
    base : sequence of array-like
        Mutually orthogonal basis vectors (not necessarily unit length).

    Returns
    -------
    ndarray
        Scalar projection of `vector` onto each basis vector, in basis order.

    Raises
    ------
    PreconditionError
        If the basis vectors are not all orthogonal to each other.
    """
    base = list(base)
    if not all_orthogonal(base):
        raise PreconditionError(
            "base: the vectors in base are not all orthogonal to each other"
        )
    return np.array(
        [scalar_projection(vector, b) for b in base], dtype=np.float64
    )
