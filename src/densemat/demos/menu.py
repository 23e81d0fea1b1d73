# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/demos/menu.py
"""Interactive numeric menu: read a demo number from a text stream and run it."""
from __future__ import annotations

import sys
from typing import TextIO

from densemat.demos.registry import DEMOS


def print_menu(out: TextIO) -> None:
    print("\nAvailable demos:", file=out)
    for i, demo in enumerate(DEMOS, start=1):
        print(f"  {i:2d}. {demo.title}", file=out)
    print("   0. Quit", file=out)


def run_menu(
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    seed: int | None = None,
    outputs_dir: str = "outputs",
) -> int:
    """
    Loop until the user enters 0 or the input is exhausted.

    Returns the number of demos that were run.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    ran = 0
    while True:
        print_menu(out)
        print("Select a demo (0 to quit): ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            break
        text = line.strip()
        try:
            choice = int(text)
        except ValueError:
            print(f"Not a number: {text!r}", file=out)
            continue
        if choice == 0:
            break
        if not 1 <= choice <= len(DEMOS):
            print(f"No demo numbered {choice}; pick 1-{len(DEMOS)}", file=out)
            continue

        demo = DEMOS[choice - 1]
        print(f"\n=== {demo.title} ===", file=out)
        demo.run(seed=seed, outputs_dir=outputs_dir)
        ran += 1
    return ran


def main(seed: int | None = None) -> int:
    return run_menu(seed=seed)


if __name__ == "__main__":
    main()
