# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/products_demo.py
from densemat.core.errors import DimensionMismatch
from densemat.core.typedefs import Matrix2d, MatrixXd, RowVector2d, Vector2d, Vector3d


def matrix_product() -> MatrixXd:
    a = MatrixXd(2, 3)
    a << [1, 2, 3, 4, 5, 6]
    b = MatrixXd(3, 2)
    b << [1, 2, 3, 4, 5, 6]

    ab = a * b  # 2x3 times 3x2 -> 2x2
    print(ab, end="\n\n")

    m = Matrix2d()
    m << [1, 2, 3, 4]
    u = Vector2d()
    u << [-1, 1]
    w = RowVector2d()
    w << [2, 0]
    print(m * u, end="\n\n")  # matrix times column vector
    print(w * m, end="\n\n")  # row vector times matrix
    print(u * w, end="\n\n")  # outer product

    try:
        a * MatrixXd(4, 2)
    except DimensionMismatch as exc:
        print("Rejected:", exc)
    return ab


def dot_cross() -> None:
    v = Vector3d()
    v << [1, 2, 3]
    w = Vector3d()
    w << [0, 1, 2]

    print("Dot product:", v.dot(w))
    dp = (v.adjoint() * w)[0, 0]  # same thing as a 1x1 matrix product
    print("Dot product via a matrix product:", dp)
    print("Cross product:")
    print(v.cross(w))


def main() -> None:
    print("--- matrix product ---")
    matrix_product()
    print("--- dot and cross ---")
    dot_cross()


if __name__ == "__main__":
    main()
