"""
Elementary operations on plain numeric vectors.

A vector is any 1-D sequence of numbers; no dedicated type is used.
Functions returning a vector return a 1-D float64 numpy array.

Lengths are checked: pairing two vectors of different lengths raises
ShapeError rather than silently dropping the tail of the longer one.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from lingebra.core.validation import check_consistent_length, check_vector


def _pair(a: ArrayLike, b: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    a_arr = check_vector(a, "a")
    b_arr = check_vector(b, "b")
    check_consistent_length(a_arr, b_arr, names=("a", "b"))
    return a_arr, b_arr


def vector_size(vector: ArrayLike) -> float:
    """
    Euclidean norm of a vector.

    Examples:
        >>> vector_size([3.0, 4.0])
        5.0
    """
    v = check_vector(vector, "vector")
    return float(np.sqrt(np.sum(v * v)))


def vector_dot_product(a: ArrayLike, b: ArrayLike) -> float:
    """
    Inner product of two vectors of equal length.

    Examples:
        >>> vector_dot_product([3.0, 4.0], [2.0, 1.0])
        10.0

    Raises:
        ShapeError: If the lengths differ
    """
    a_arr, b_arr = _pair(a, b)
    return float(np.sum(a_arr * b_arr))


def vector_sum(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """
    Element-wise sum of two vectors of equal length.

    Raises:
        ShapeError: If the lengths differ
    """
    a_arr, b_arr = _pair(a, b)
    return a_arr + b_arr


def scalar_projection(a: ArrayLike, b: ArrayLike) -> float:
    """
    Coefficient of the projection of `a` onto `b`: dot(a, b) / |b|^2.

    A zero vector `b` yields nan (0/0) or inf; it is not an error.
    """
    a_arr, b_arr = _pair(a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(vector_dot_product(a_arr, b_arr)) / vector_size(b_arr) ** 2)


def vector_projection(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Projection of `a` onto `b`: scalar_projection(a, b) * b."""
    a_arr, b_arr = _pair(a, b)
    scale = scalar_projection(a_arr, b_arr)
    return b_arr * scale
