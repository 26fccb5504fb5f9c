################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Human-readable rendering of vector and matrix elements."""

from __future__ import annotations

from typing import Iterable

import numpy as np


# Magnitudes at or above this render in scientific notation
SCIENTIFIC_UPPER: float = 1e16
# Non-zero magnitudes below this render in scientific notation
SCIENTIFIC_LOWER: float = 1e-4


def format_element(value: np.generic) -> str:
    """Render one element as the shortest text that round-trips its dtype.

    Integral floats drop the trailing ``.0``, so ``1.0`` renders as ``1`` and
    ``np.float32(0.05)`` renders as ``0.05``.
    """
    if isinstance(value, np.floating):
        if not np.isfinite(value):
            return str(float(value))
        magnitude: float = abs(float(value))
        if magnitude >= SCIENTIFIC_UPPER or 0.0 < magnitude < SCIENTIFIC_LOWER:
            return np.format_float_scientific(value, trim="-")
        return np.format_float_positional(value, trim="-")
    return str(int(value))


def format_vector(values: Iterable[np.generic]) -> str:
    """Render elements as ``[e0, e1, ..., eN-1]``."""
    return "[" + ", ".join(format_element(value) for value in values) + "]"


def format_matrix(grid: np.ndarray) -> str:
    """Render a 2D array as one ``| v, v, ... |`` line per row.

    Every column is right-aligned to one more than its widest value.
    """
    rows: int
    cols: int
    rows, cols = grid.shape
    values: list[list[str]] = [
        [format_element(grid[i, j]) for j in range(cols)] for i in range(rows)
    ]
    widths: list[int] = [
        max(len(values[i][j]) for i in range(rows)) + 1 for j in range(cols)
    ]

    lines: list[str] = []
    for row in values:
        cells: list[str] = [value.rjust(widths[j]) for j, value in enumerate(row)]
        lines.append("| " + ", ".join(cells) + " |")

    return "\n".join(lines)
