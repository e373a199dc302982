"""
Demo: build a few matrices, print them and run the operators.

    python -m lingebra
"""

from __future__ import annotations

from lingebra.matrix import Matrix


def main() -> int:
    sample = [1.0, 2.1, 3.0]
    print(f"This is sample: {sample}")

    mat = Matrix.row_vector(sample)
    print(f"This is matrix: {mat}")

    mat_a = Matrix.new([[0.0, 1.0, 55.0, 66.33], [1.0, 0.0, 1.0, 2.0]])
    print(f"This is also matrix: {mat_a}")

    mat_b = Matrix.zeroes(3, 5)
    print(f"This is also matrix: {mat_b}")

    mat_c = Matrix.identity(3)
    print(f"This is also matrix: {mat_c}")

    square = Matrix.new([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    print(f"Sum with identity: {square + mat_c}")
    print(f"Difference with identity: {square - mat_c}")
    print(f"Scaled by 2: {square * 2.0}")
    print(f"Divided by 2: {square / 2.0}")
    print(f"Transposed: {square.transpose()}")
    print(f"Times vector {sample}: {(square @ sample).tolist()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
