# src/densemat/experiments/run_from_config.py
from __future__ import annotations
import argparse, logging, sys, os, yaml

from densemat.core.formatting import print_precision
from densemat.demos.registry import demo_names, get_demo

logger = logging.getLogger(__name__)

DEFAULTS = {"seed": None, "precision": 4, "outputs_dir": "outputs"}


def load_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}
    if not isinstance(cfg, dict):
        raise SystemExit(f"Config {path} must be a mapping, got {type(cfg).__name__}")
    cfg = {**DEFAULTS, **cfg}
    _check_types(cfg, path)
    return cfg


def _check_types(cfg: dict, path: str) -> None:
    precision = cfg["precision"]
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise SystemExit(f"Config {path}: precision must be a non-negative integer, got {precision!r}")
    seed = cfg["seed"]
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise SystemExit(f"Config {path}: seed must be an integer or empty, got {seed!r}")
    demos = cfg.get("demos")
    if demos is not None and not (isinstance(demos, list) and all(isinstance(n, str) for n in demos)):
        raise SystemExit(f"Config {path}: demos must be a list of demo names, got {demos!r}")
    if not isinstance(cfg["outputs_dir"], str):
        raise SystemExit(f"Config {path}: outputs_dir must be a path, got {cfg['outputs_dir']!r}")


def run(demos: list[str] | None = None, seed: int | None = None,
        precision: int = 4, outputs_dir: str = "outputs", **extras) -> list[str]:
    names = demos if demos else demo_names()
    unknown = [n for n in names if n not in demo_names()]
    if unknown:
        raise SystemExit(f"Unknown demo(s): {', '.join(unknown)}")
    if extras:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(extras)))

    with print_precision(precision):
        for name in names:
            demo = get_demo(name)
            print(f"=== {demo.title} ===")
            demo.run(seed=seed, outputs_dir=outputs_dir)
    return names


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run densemat demos from a YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(argv or sys.argv[1:])

    cfg = load_config(args.config)
    os.makedirs(cfg["outputs_dir"], exist_ok=True)
    run(**cfg)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
