"""
Dense matrix type.

Public API:
    Matrix                    - immutable 2-D grid of float64
    Matrix.new(rows)          - from a sequence of equally long rows
    Matrix.row_vector(v)      - 1 x n
    Matrix.column_vector(v)   - n x 1
    Matrix.zeroes / ones      - uniform fill
    Matrix.identity(n)        - n x n identity
    MatrixRow                 - read-only row returned by m[i]
"""

from lingebra.matrix.matrix import Matrix, MatrixRow

__all__ = [
    "Matrix",
    "MatrixRow",
]
