"""
Input validation utilities for lingebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No padding, truncation or clamping of inputs
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Sequence

from lingebra.core.exceptions import (
    MatrixIndexError,
    ShapeError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and inputs of a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        ShapeError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ShapeError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ShapeError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ShapeError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_vector(vector: ArrayLike, name: str) -> NDArray[np.float64]:
    """Convert a vector argument to a 1-D float64 array, or raise."""
    arr = check_array(vector, name)
    check_1d(arr, name)
    return arr


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a sequence of rows forms a non-empty rectangular grid.

    Every row must have the same length as the first one. Ragged input
    is rejected, never padded or truncated.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (height, width) of the grid

    Raises:
        ShapeError: If rows is not a sized sequence, has no rows or an
            empty first row, or any row length differs from the first
    """
    try:
        height = len(rows)
    except TypeError:
        raise ShapeError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        ) from None
    if height == 0:
        raise ShapeError(f"{name}: matrix needs at least one row, got none")

    width = _row_length(rows[0], 0, name)
    if width == 0:
        raise ShapeError(f"{name}: matrix needs at least one column, got an empty first row")

    for i, row in enumerate(rows):
        length = _row_length(row, i, name)
        if length != width:
            raise ShapeError(
                f"{name}: invalid matrix dimensions, all rows should have the same size, "
                f"expected {width} found {length} in row {i}",
                expected=width,
                actual=length,
            )
    return height, width


def _row_length(row: Any, i: int, name: str) -> int:
    try:
        return len(row)
    except TypeError:
        raise ShapeError(
            f"{name}: row {i} is a {type(row).__name__}, expected a sequence of numbers"
        ) from None


def check_consistent_length(
    *arrays: NDArray[np.float64],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        ShapeError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise ShapeError(
            f"Inconsistent lengths: {details}",
            expected=lengths[0],
            actual=tuple(lengths[1:]) if len(lengths) > 2 else lengths[1],
        )


def check_same_shape(
    a: tuple[int, ...],
    b: tuple[int, ...],
    names: tuple[str, str],
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeError: If the shapes differ
    """
    if a != b:
        raise ShapeError(
            f"Dimension mismatch: {names[0]} has shape {a}, {names[1]} has shape {b}",
            expected=a,
            actual=b,
        )


def check_positive_size(size: int, name: str) -> int:
    """
    Verify a matrix size is a positive integer.

    Args:
        size: Requested size
        name: Parameter name for error messages

    Returns:
        size as a plain int

    Raises:
        ValidationError: If size is not an integer
        ShapeError: If size is less than 1
    """
    if isinstance(size, bool):
        raise ValidationError(f"{name}: expected an integer size, got bool")
    try:
        size = operator.index(size)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer size, got {type(size).__name__}"
        ) from e

    if size < 1:
        raise ShapeError(f"{name}: size must be at least 1, got {size}", actual=size)
    return size


def check_index(index: int, size: int, axis: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are out of range; they do not count from the end.

    Raises:
        MatrixIndexError: If index is outside [0, size)
        ValidationError: If index is not an integer
    """
    if isinstance(index, bool):
        raise ValidationError(f"{axis} index: expected an integer, got bool")
    try:
        index = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(index).__name__}"
        ) from e

    if not 0 <= index < size:
        raise MatrixIndexError(
            f"{axis} index out of bounds: the {axis} count is {size} but the index is {index}",
            index=index,
            axis=axis,
            size=size,
        )
    return index
