# utils/format.py
"""Formatting helpers for NumPy outputs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
import numpy.typing as npt


@contextmanager
def numpy_print_options(*, precision: int = 4, suppress: bool = True) -> Iterator[None]:
    with np.printoptions(precision=precision, suppress=suppress):
        yield


def format_matrix(arr: npt.NDArray[np.float64], precision: int = 6) -> str:
    """Format a NumPy array as a clean multi-line string.

    Args:
        arr: NumPy array to format
        precision: Number of decimal places

    Returns:
        Formatted string representation
    """
    with numpy_print_options(precision=precision, suppress=True):
        return str(arr)


def format_column(vec: npt.NDArray[np.float64], precision: int = 6) -> str:
    """One coordinate per line, the way a column vector is printed."""
    values = np.asarray(vec, dtype=np.float64).reshape(-1)
    # + 0.0 folds -0.0 into 0.0
    rounded = np.round(values, precision) + 0.0
    return "\n".join(
        np.format_float_positional(v, precision=precision, trim="-") for v in rounded
    )


__all__ = ["numpy_print_options", "format_matrix", "format_column"]
