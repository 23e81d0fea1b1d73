# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/demos/registry.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from densemat.demos import arithmetic_demo, basics_demo, products_demo, reductions_demo

__all__ = ["Demo", "DEMOS", "GROUPS", "get_demo", "demo_names"]


@dataclass(frozen=True)
class Demo:
    name: str
    title: str
    func: Callable[..., object]
    options: tuple[str, ...] = field(default=())  # keyword options the demo accepts

    def run(self, **options):
        """Run the demo, forwarding only the options it accepts."""
        return self.func(**{k: v for k, v in options.items() if k in self.options})


def _plot(**kwargs):
    # matplotlib is only imported when the plot demo actually runs
    from densemat.demos.plot_demo import random_heatmap

    return random_heatmap(**kwargs)


DEMOS: list[Demo] = [
    Demo("simple-matrix", "Simple matrix", basics_demo.simple_matrix),
    Demo("random-and-constant", "Random and constant", basics_demo.random_and_constant, ("seed",)),
    Demo("vector", "Vector", basics_demo.vector),
    Demo("random-between-4-and-10", "Random between 4 and 10", basics_demo.random_between_4_and_10, ("seed",)),
    Demo("fixed-size", "Fixed size", basics_demo.fixed_size, ("seed",)),
    Demo("matrix-template-class", "Matrix template class", basics_demo.matrix_template_class),
    Demo("resizing-and-assigning", "Resizing and assigning", basics_demo.resizing_and_assigning),
    Demo("addition-subtraction", "Addition and subtraction", arithmetic_demo.addition_subtraction),
    Demo("multiplication-division", "Multiplication and division", arithmetic_demo.multiplication_division),
    Demo("transposition", "Transposition and conjugation", arithmetic_demo.transposition_conjugation),
    Demo("aliasing", "Aliasing", arithmetic_demo.aliasing),
    Demo("matrix-product", "Matrix product", products_demo.matrix_product),
    Demo("dot-cross", "Dot and cross product", products_demo.dot_cross),
    Demo("reductions", "Reductions", reductions_demo.reductions),
    Demo("min-max-index", "Min/max with index", reductions_demo.min_max_with_index, ("seed",)),
    Demo("random-heatmap", "Random matrix heatmap", _plot, ("seed", "outputs_dir")),
]

GROUPS: dict[str, list[str]] = {
    "basics": [
        "simple-matrix",
        "random-and-constant",
        "vector",
        "random-between-4-and-10",
        "fixed-size",
        "matrix-template-class",
        "resizing-and-assigning",
    ],
    "arithmetic": ["addition-subtraction", "multiplication-division", "transposition", "aliasing"],
    "products": ["matrix-product", "dot-cross"],
    "reductions": ["reductions", "min-max-index"],
    "plot": ["random-heatmap"],
}


def demo_names() -> list[str]:
    return [d.name for d in DEMOS]


def get_demo(name: str) -> Demo:
    for demo in DEMOS:
        if demo.name == name:
            return demo
    raise KeyError(f"Unknown demo: {name}")
