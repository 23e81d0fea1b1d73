# src/densemat/core/formatting.py
from __future__ import annotations

from contextlib import contextmanager

import numpy as np
import pandas as pd

__all__ = ["get_precision", "set_precision", "print_precision", "format_array"]

_precision = 4


def get_precision() -> int:
    return _precision


def set_precision(precision: int) -> None:
    """Set the number of decimals shown when a matrix is printed."""
    global _precision
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    _precision = int(precision)


@contextmanager
def print_precision(precision: int):
    previous = get_precision()
    set_precision(precision)
    try:
        yield
    finally:
        set_precision(previous)


def format_array(data: np.ndarray) -> str:
    """Render a 2-D buffer as right-aligned rows, one line per matrix row."""
    if data.size == 0:
        return ""
    frame = pd.DataFrame(data)
    with pd.option_context("display.precision", _precision):
        return frame.to_string(header=False, index=False)
