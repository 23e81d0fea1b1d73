# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/reductions_demo.py
from densemat.core.typedefs import Matrix2d, Matrix3f


def reductions() -> None:
    m = Matrix2d()
    m << [1, 2, 3, 4]
    print("Here is m:")
    print(m)
    print("m.sum():      ", m.sum())
    print("m.prod():     ", m.prod())
    print("m.mean():     ", m.mean())
    print("m.min_coeff():", m.min_coeff())
    print("m.max_coeff():", m.max_coeff())
    print("m.trace():    ", m.trace())
    print("diagonal sum: ", m.diagonal().sum())


def min_max_with_index(seed: int | None = None) -> None:
    m = Matrix3f.random(seed=seed)
    print("Here is a random 3x3 matrix:")
    print(m)
    value, (r, c) = m.max_coeff(return_index=True)
    print(f"Its maximum coefficient ({value:.4f}) is at position ({r},{c})")
    value, (r, c) = m.min_coeff(return_index=True)
    print(f"Its minimum coefficient ({value:.4f}) is at position ({r},{c})")


def main(seed: int | None = None) -> None:
    print("--- reductions ---")
    reductions()
    print("--- min/max with index ---")
    min_max_with_index(seed=seed)


if __name__ == "__main__":
    main()
