"""
Text rendering for matrices.

A tab-separated table for str(), an eval-style repr() and a print
helper. No alignment or precision control.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from densematrix.matrix.matrix import Matrix


def format_entry(value: np.float32) -> str:
    """Shortest text that round-trips the float32 value."""
    return str(np.float32(value))


def format_table(data: NDArray[np.float32]) -> str:
    """
    Tabular form: every entry followed by a tab, every row followed by
    a newline.
    """
    return "".join(
        "".join(format_entry(value) + "\t" for value in row) + "\n"
        for row in data
    )


def format_repr(data: NDArray[np.float32]) -> str:
    rows = ", ".join(
        "[" + ", ".join(format_entry(value) for value in row) + "]"
        for row in data
    )
    return f"Matrix([{rows}])"


def print_matrix(m: Matrix, file: TextIO | None = None) -> None:
    """
    Write the tabular form of a matrix followed by a line terminator.

    Args:
        m: Matrix to print
        file: Destination stream, stdout by default
    """
    stream = sys.stdout if file is None else file
    stream.write(format_table(m.to_array()) + "\n")
