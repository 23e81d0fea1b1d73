# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/densemat/cli.py
from __future__ import annotations

import argparse
import logging
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=None, help="Seed for random matrices")
    parser.add_argument("--outputs_dir", default="outputs", help="Where plots are written")


def _run_names(names: list[str], args: argparse.Namespace) -> None:
    from densemat.demos.registry import get_demo

    for name in names:
        demo = get_demo(name)
        print(f"=== {demo.title} ===")
        demo.run(seed=args.seed, outputs_dir=args.outputs_dir)


def cmd_group(args: argparse.Namespace) -> None:
    from densemat.demos.registry import GROUPS

    _run_names(GROUPS[args.cmd], args)


def cmd_all(args: argparse.Namespace) -> None:
    from densemat.demos.registry import demo_names

    _run_names(demo_names(), args)


def cmd_run(args: argparse.Namespace) -> None:
    _run_names([args.name], args)


def cmd_menu(args: argparse.Namespace) -> None:
    from densemat.demos.menu import run_menu

    run_menu(seed=args.seed, outputs_dir=args.outputs_dir)


def cmd_config(args: argparse.Namespace) -> None:
    from densemat.experiments.run_from_config import main

    main(["--config", args.config])


def main(argv: list[str] | None = None) -> int:
    from densemat.demos.registry import GROUPS, demo_names

    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="densemat-demo", description="Run densemat demos")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    helps = {
        "basics": "Construction, typedefs, resizing",
        "arithmetic": "Addition, scaling, transposition, aliasing",
        "products": "Matrix, dot and cross products",
        "reductions": "sum, prod, mean, min/max, trace",
        "plot": "Heatmap of a random matrix (PDF)",
    }
    for group in GROUPS:
        sp = sub.add_parser(group, help=helps.get(group))
        _add_common(sp)
        sp.set_defaults(func=cmd_group)

    sp = sub.add_parser("all", help="Every demo in menu order")
    _add_common(sp)
    sp.set_defaults(func=cmd_all)

    sp = sub.add_parser("run", help="A single demo by name")
    sp.add_argument("name", choices=demo_names())
    _add_common(sp)
    sp.set_defaults(func=cmd_run)

    sp = sub.add_parser("menu", help="Interactive numeric menu")
    _add_common(sp)
    sp.set_defaults(func=cmd_menu)

    sp = sub.add_parser("config", help="Demos listed in a YAML config")
    sp.add_argument("config", help="Path to YAML config")
    sp.set_defaults(func=cmd_config)

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
