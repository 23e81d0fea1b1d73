# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/basics_demo.py
from densemat.core.errors import InvalidDimension
from densemat.core.matrix import DYNAMIC, StorageOrder
from densemat.core.typedefs import Matrix4d, MatrixXd, Vector4d, VectorXd, matrix_type


def simple_matrix() -> MatrixXd:
    # MatrixXd holds doubles, MatrixXi holds int32
    m = MatrixXd(2, 2)
    m[0, 0] = 1
    m[0, 1] = 2
    m[1, 0] = 3
    m[1, 1] = m[1, 0] + m[0, 0]
    print(m)
    print()

    # Comma-list assignment reads row by row
    m << [1, 2, 3, 4]
    print(m)
    return m


def random_and_constant(seed: int | None = None) -> None:
    ran = MatrixXd.random(3, 3, seed=seed)  # uniform in [-1, 1]
    print(ran)
    print()

    con = MatrixXd.constant(3, 3, 5.2)
    print(con)


def vector() -> VectorXd:
    vec = VectorXd(3)  # column vector of doubles
    vec << [1, 2, 3.5]
    print(vec)
    return vec


def random_between_4_and_10(seed: int | None = None) -> MatrixXd:
    # [-1, 1] * 3 + 7 -> [4, 10]
    m = MatrixXd.random(3, 3, seed=seed)
    m = (m * (6 / 2)) + MatrixXd.constant(3, 3, 7.0)
    print(m)
    return m


def fixed_size(seed: int | None = None) -> None:
    m4 = Matrix4d.random(seed=seed)
    print(m4)
    print()

    v4 = Vector4d.random(seed=seed)
    print(v4)


def matrix_template_class() -> None:
    # Every matrix and vector is a Matrix; vectors have one row or one column.
    Matrix3x2d = matrix_type("float64", 3, 2)
    Matrix3x5d = matrix_type("float64", 3, 5, StorageOrder.ColMajor)
    # Maximum extents (at most 10x10) only bound allocation; nothing models them here.
    MatrixXdRow = matrix_type("float64", DYNAMIC, DYNAMIC, StorageOrder.RowMajor)
    Matrix3xXd = matrix_type("float64", 3, DYNAMIC)
    MatrixX5d = matrix_type("float64", DYNAMIC, 5)

    for m in (Matrix3x2d(), Matrix3x5d(), MatrixXdRow(), Matrix3xXd(3, 5), MatrixX5d()):
        print(f"{type(m).__name__}: {m.rows}x{m.cols}, storage {m.order.name}")

    # A fixed extent cannot be overridden at run time
    try:
        Matrix3xXd(1, 5)
    except InvalidDimension as exc:
        print("Rejected:", exc)


def resizing_and_assigning() -> MatrixXd:
    m = MatrixXd(2, 3)
    m.resize(3, 5)  # coefficients are not kept when the size changes
    m.conservative_resize(5, 4)  # coefficients in the overlap are kept
    print(m.rows, m.cols, m.size)

    m2 = MatrixXd(10, 15)
    m.assign(m2)  # m is resized to 10x15
    print(m.rows, m.cols, m.size)
    return m


def main(seed: int | None = None) -> None:
    print("--- simple matrix ---")
    simple_matrix()
    print("--- random and constant ---")
    random_and_constant(seed=seed)
    print("--- vector ---")
    vector()
    print("--- random between 4 and 10 ---")
    random_between_4_and_10(seed=seed)
    print("--- fixed size ---")
    fixed_size(seed=seed)
    print("--- matrix template class ---")
    matrix_template_class()
    print("--- resizing and assigning ---")
    resizing_and_assigning()


if __name__ == "__main__":
    main()
