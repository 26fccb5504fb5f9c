################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Determinant, cofactor, adjugate and inverse of square matrices.

The determinant uses Laplace expansion along the first row, recursing on
submatrices. Its cost grows as O(N!), which is fine for the 2x2 to 4x4
matrices this package targets.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.element_types import to_element
from oasis_linalg.matrix import Mat


_LOG: logging.Logger = logging.getLogger(__name__)


@Mat.capability(lambda dtype, shape: shape[0] == shape[1])
class SquareMat(Mat):
    """Algebra available to N x N matrices."""

    @classmethod
    def identity(cls) -> SquareMat:
        """Return the N x N identity matrix."""
        return cls(np.eye(cls.ROWS, dtype=cls.DTYPE))

    def det(self) -> Any:
        """Return the determinant as an element of this matrix's type.

        Integer determinants are exact until the final conversion, where
        values outside the element range wrap.
        """
        warn_dim: int = get_config().det_warn_dim()
        if self.ROWS > warn_dim:
            _LOG.warning(
                "Determinant of a %dx%d matrix uses Laplace expansion, "
                "cost grows factorially above %d",
                self.ROWS,
                self.COLS,
                warn_dim,
            )
        return to_element(self._laplace(), self.DTYPE)

    def _laplace(self) -> int | float:
        """Expand along row 0 using Python scalars."""
        elements: list[Any] = self._data.tolist()
        size: int = self.ROWS
        if size == 1:
            return elements[0]
        if size == 2:
            return elements[0] * elements[3] - elements[1] * elements[2]

        total: int | float = 0
        for j in range(size):
            sign: int = 1 if j % 2 == 0 else -1
            total += sign * elements[j] * self._minor(0, j)._laplace()
        return total

    def _minor(self, row: int, col: int) -> SquareMat:
        """Return the submatrix without one row and one column."""
        return self.sub_matrix([row], [col])  # type: ignore[return-value]

    def invertible(self) -> bool:
        """Return True if the determinant is exactly non-zero."""
        return bool(self.det() != 0)

    def cofactor(self) -> SquareMat:
        """Return the matrix of signed minors.

        A 1x1 matrix has no minors, so its cofactor matrix is a copy.
        """
        size: int = self.ROWS
        if size == 1:
            return self.copy()  # type: ignore[return-value]

        values: list[np.generic] = []
        for i in range(size):
            for j in range(size):
                sign: int = 1 if (i + j) % 2 == 0 else -1
                minor: int | float = self._minor(i, j)._laplace()
                values.append(to_element(sign * minor, self.DTYPE))

        return type(self)(values)

    def adjugate(self) -> SquareMat:
        """Return the transpose of the cofactor matrix."""
        return self.cofactor().transpose()  # type: ignore[return-value]

    def inverse(self) -> SquareMat:
        """Return the inverse, computed as ``adjugate() / det()``.

        A singular floating matrix yields infinities and NaN. A singular
        integer matrix raises ZeroDivisionError, and integer inverses truncate
        towards zero.
        """
        determinant: Any = self.det()
        return self.adjugate().div(determinant)  # type: ignore[return-value]
