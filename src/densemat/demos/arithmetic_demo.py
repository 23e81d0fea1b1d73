# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/arithmetic_demo.py
from densemat.core.typedefs import Matrix2cd, Matrix2d, Matrix2i, MatrixXd, Vector3d


def addition_subtraction() -> None:
    m1 = MatrixXd(2, 2)
    m1 << [1, 2, 3, 4]
    m2 = Matrix2d()
    m2 << [4, 3, 2, 1]

    print(m1 + m2, end="\n\n")
    print(m1 - m2, end="\n\n")
    print(-m1, end="\n\n")
    m1 += m2
    print(m1, end="\n\n")
    m1 -= m2
    print(m1)


def multiplication_division() -> None:
    a = Matrix2d()
    a << [1, 2, 3, 4]
    v = Vector3d()
    v << [1, 2, 3]

    print(a * 2.5, end="\n\n")
    print(0.1 * v, end="\n\n")
    print(a / 2, end="\n\n")
    v *= 2
    print(v, end="\n\n")
    v /= 4
    print(v, end="\n\n")

    # Integer matrices truncate toward zero
    k = Matrix2i()
    k << [7, -7, 9, -9]
    print(k / 2, end="\n\n")

    # Floating point division by zero gives inf/nan
    print(a / 0.0)


def transposition_conjugation() -> None:
    a = Matrix2cd()
    a << [1 + 1j, 2 + 2j, 3 + 3j, 4 + 4j]
    print("a\n", a, sep="")
    print("transpose\n", a.transpose(), sep="")
    print("conjugate\n", a.conjugate(), sep="")
    print("adjoint\n", a.adjoint(), sep="")

    b = MatrixXd(2, 3)
    b << [1, 2, 3, 4, 5, 6]
    b.transpose_in_place()
    print("b after transpose_in_place\n", b, sep="")


def aliasing() -> None:
    a = MatrixXd(2, 3)
    a << [1, 2, 3, 4, 5, 6]

    # Rebinding a name is never an alias: transpose() returns a new matrix
    a = a.transpose()
    print(a, end="\n\n")

    # Writing a matrix into itself goes through a temporary
    a.assign(a)
    sq = MatrixXd(2, 2)
    sq << [1, 2, 3, 4]
    sq *= sq
    print(sq, end="\n\n")

    # No temporary when the destination is known to be disjoint
    c = MatrixXd.constant(2, 2, 1.0)
    b = MatrixXd(2, 2)
    b << [1, 0, 0, 1]
    c.noalias().add_product(sq, b)
    print(c)


def main() -> None:
    print("--- addition and subtraction ---")
    addition_subtraction()
    print("--- multiplication and division ---")
    multiplication_division()
    print("--- transposition and conjugation ---")
    transposition_conjugation()
    print("--- aliasing ---")
    aliasing()


if __name__ == "__main__":
    main()
