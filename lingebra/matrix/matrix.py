"""
Matrix: dense, immutable 2-D grid of doubles.

Storage is a read-only float64 numpy array. Every operator returns a new
Matrix; nothing mutates in place, so copies may share the same buffer.

Construction:
    Matrix.new(rows)            or Matrix(rows)
    Matrix.row_vector(values)   (1 x n)
    Matrix.column_vector(values) (n x 1)
    Matrix.zeroes(h, w), Matrix.ones(h, w), Matrix.identity(n)
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from lingebra.core.exceptions import ShapeError
from lingebra.core.tolerances import FP64, ToleranceTier
from lingebra.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_positive_size,
    check_rectangular,
    check_same_shape,
    check_vector,
)
from lingebra.matrix._render import render


class MatrixRow:
    """
    Read-only view of one matrix row.

    Returned by m[i]. Indexing it by column follows the same bounds rule
    as the matrix itself: 0 <= j < width, negative indices are rejected.
    Converts to a numpy array without copying.
    """

    __slots__ = ('_values',)

    def __init__(self, values: NDArray[np.float64]):
        self._values = values

    def __getitem__(self, index: int) -> float:
        j = check_index(index, self._values.shape[0], "column")
        return float(self._values[j])

    def __len__(self) -> int:
        return self._values.shape[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if copy:
            return np.array(self._values, dtype=dtype, copy=True)
        return np.asarray(self._values, dtype=dtype)

    def tolist(self) -> list[float]:
        return self._values.tolist()

    def __repr__(self) -> str:
        return f"MatrixRow({self._values.tolist()!r})"


class Matrix:
    """
    Dense 2-D matrix of float64 values.

    Dimensions are (height, width), both at least 1. Every row holds
    exactly `width` elements; ragged input is rejected at construction.

    Equality is exact element-wise IEEE comparison with no tolerance;
    use allclose() for an explicit approximate comparison.

    Examples:
        >>> m = Matrix([[0.0, 1.0, 2.0, 3.0],
        ...             [1.0, 0.0, 1.0, 0.0],
        ...             [5.0, 5.0, 5.0, 5.0]])
        >>> m.shape
        (3, 4)
        >>> m.col(1).tolist()
        [1.0, 0.0, 5.0]
    """

    __slots__ = ('_data',)

    # Make numpy defer to our reflected operators (e.g. np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[float]] | NDArray[Any]):
        check_rectangular(rows, "rows")
        data = check_array(rows, "rows")
        check_2d(data, "rows")
        self._data = _freeze(np.array(data, dtype=np.float64, copy=True))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly built 2-D array without re-validating it."""
        obj = cls.__new__(cls)
        obj._data = _freeze(data)
        return obj

    @classmethod
    def new(cls, rows: Sequence[Sequence[float]] | NDArray[Any]) -> Matrix:
        """
        Create a matrix from a sequence of rows.

        Args:
            rows: Non-empty sequence of equally long, non-empty sequences
                of numbers (or a 2-D array)

        Raises:
            ShapeError: If rows are ragged, or there are no rows/columns
            ValidationError: If an entry is not a real number
        """
        return cls(rows)

    @classmethod
    def row_vector(cls, values: ArrayLike) -> Matrix:
        """Create a 1 x n matrix from a vector."""
        arr = check_vector(values, "values")
        if arr.shape[0] == 0:
            raise ShapeError("values: row vector needs at least one element", actual=0)
        return cls._wrap(arr.reshape(1, -1).copy())

    from_vector = row_vector

    @classmethod
    def column_vector(cls, values: ArrayLike) -> Matrix:
        """Create an n x 1 matrix from a vector, one element per row."""
        arr = check_vector(values, "values")
        if arr.shape[0] == 0:
            raise ShapeError("values: column vector needs at least one element", actual=0)
        return cls._wrap(arr.reshape(-1, 1).copy())

    @classmethod
    def zeroes(cls, height: int, width: int) -> Matrix:
        """
        Create a height x width matrix of zeros.

        Adding it to a matrix of the same dimensions gives that matrix back.
        """
        height = check_positive_size(height, "height")
        width = check_positive_size(width, "width")
        return cls._wrap(np.zeros((height, width), dtype=np.float64))

    @classmethod
    def ones(cls, height: int, width: int) -> Matrix:
        """Create a height x width matrix of ones."""
        height = check_positive_size(height, "height")
        width = check_positive_size(width, "width")
        return cls._wrap(np.ones((height, width), dtype=np.float64))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Create a size x size matrix with ones on the main diagonal."""
        size = check_positive_size(size, "size")
        return cls._wrap(np.eye(size, dtype=np.float64))

    # ------------------------------------------------------------------
    # Dimensions and access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)"""
        height, width = self._data.shape
        return height, width

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    def row(self, index: int) -> NDArray[np.float64]:
        """
        Copy of row `index` as a 1-D array.

        Raises:
            MatrixIndexError: If index is not in [0, height)
        """
        index = check_index(index, self.height, "row")
        return self._data[index].copy()

    def col(self, index: int) -> NDArray[np.float64]:
        """
        Element `index` of every row, in row order, as a new 1-D array.

        Raises:
            MatrixIndexError: If index is not in [0, width)
        """
        index = check_index(index, self.width, "column")
        return self._data[:, index].copy()

    def __getitem__(self, key: int | tuple[int, int]) -> MatrixRow | float:
        # m[i] -> read-only row, m[i, j] -> float
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"Matrix index takes (row, column), got {len(key)} indices")
            i = check_index(key[0], self.height, "row")
            j = check_index(key[1], self.width, "column")
            return float(self._data[i, j])
        i = check_index(key, self.height, "row")
        return MatrixRow(self._data[i])

    def __len__(self) -> int:
        return self.height

    def __iter__(self) -> Iterator[MatrixRow]:
        return (MatrixRow(row) for row in self._data)

    def to_list(self) -> list[list[float]]:
        """Nested lists of Python floats."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the underlying grid."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Display and comparison
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return render(self._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Matrix, tolerance: ToleranceTier = FP64) -> bool:
        """
        Approximate element-wise comparison.

        Matrices of different dimensions are never close.
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"allclose expects a Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __copy__(self) -> Matrix:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, ("left operand", "right operand"))
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, ("left operand", "right operand"))
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, scalar: float) -> Matrix:
        if not _is_scalar(scalar):
            return NotImplemented
        return Matrix._wrap(self._data * _as_double(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Matrix:
        # No zero guard: numpy yields inf/nan and emits its RuntimeWarning
        if not _is_scalar(scalar):
            return NotImplemented
        return Matrix._wrap(self._data / _as_double(scalar))

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    def dot(self, vector: ArrayLike) -> NDArray[np.float64]:
        """
        Matrix-vector product.

        Args:
            vector: 1-D sequence of length `width`

        Returns:
            1-D array of length `height`; entry i is row i dotted with vector

        Raises:
            ShapeError: If the vector length does not match the width
        """
        v = check_vector(vector, "vector")
        if v.shape[0] != self.width:
            raise ShapeError(
                f"Size of matrix does not match with length of the vector: "
                f"matrix width is {self.width}, vector length is {v.shape[0]}",
                expected=self.width,
                actual=v.shape[0],
            )
        return self._data @ v

    def __matmul__(self, vector: ArrayLike) -> NDArray[np.float64]:
        if isinstance(vector, Matrix):
            return NotImplemented
        return self.dot(vector)

    def transpose(self) -> Matrix:
        """
        Swap rows and columns of a square matrix.

        Raises:
            ShapeError: If the matrix is not square
        """
        height, width = self.shape
        if height != width:
            raise ShapeError(
                f"Transposition works only for square matrices, got shape {self.shape}",
                expected=(width, width),
                actual=self.shape,
            )
        return Matrix._wrap(np.ascontiguousarray(self._data.T))

    @property
    def T(self) -> Matrix:
        return self.transpose()


def _freeze(data: NDArray[np.float64]) -> NDArray[np.float64]:
    data.flags.writeable = False
    return data


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_double(value: numbers.Real) -> float:
    # Integers beyond the double range round to +-inf, as IEEE-754 does
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
