################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Affine transform builders for floating 3x3 and 4x4 matrices.

Every builder replaces the matrix with ``self . transform``, so chained calls
apply in the order they are written, each in the frame left by the previous
ones.
"""

from __future__ import annotations

import math
from typing import Any
from typing import Iterable

from oasis_linalg.element_types import is_floating
from oasis_linalg.matrix import Mat
from oasis_linalg.square_matrix import SquareMat
from oasis_linalg.vector import Vec


class AffineMat(SquareMat):
    """Shared composition for homogeneous transform matrices."""

    def _compose(self, transform: Iterable[Iterable[float]]) -> AffineMat:
        """Post-multiply by a transform given as nested rows."""
        product: Mat = self.multiply(type(self)(transform))
        self._data[:] = product._data
        return self


@Mat.capability(lambda dtype, shape: is_floating(dtype) and shape == (3, 3))
class Affine2D(AffineMat):
    """2D affine transforms in homogeneous 3x3 form."""

    def translate(self, dx: float, dy: float) -> Affine2D:
        """Apply a translation."""
        self._compose(
            [
                [1.0, 0.0, dx],
                [0.0, 1.0, dy],
                [0.0, 0.0, 1.0],
            ]
        )
        return self

    def rotate(self, theta: float) -> Affine2D:
        """Apply a counter-clockwise rotation by ``theta`` radians."""
        cos_theta: float = math.cos(theta)
        sin_theta: float = math.sin(theta)
        self._compose(
            [
                [cos_theta, -sin_theta, 0.0],
                [sin_theta, cos_theta, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )
        return self

    def scale(self, sx: float, sy: float | None = None) -> Affine2D:
        """Apply a scaling, uniform when ``sy`` is omitted."""
        if sy is None:
            sy = sx
        self._compose(
            [
                [sx, 0.0, 0.0],
                [0.0, sy, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )
        return self

    def shear(self, sx: float, sy: float) -> Affine2D:
        """Apply a shear with factors along x and y."""
        self._compose(
            [
                [1.0, sx, 0.0],
                [sy, 1.0, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )
        return self

    def map(self, v: Vec | Iterable[Any]) -> Vec:
        """Transform a 2D point, returning a 2-vector."""
        point: Vec = Vec[self.DTYPE, 2](v)
        mapped: Vec = self.multiply(Vec[self.DTYPE, 3](point[0], point[1], 1.0))
        return Vec[self.DTYPE, 2](mapped[0], mapped[1])


@Mat.capability(lambda dtype, shape: is_floating(dtype) and shape == (4, 4))
class Affine3D(AffineMat):
    """3D affine transforms in homogeneous 4x4 form."""

    def translate(self, dx: float, dy: float, dz: float) -> Affine3D:
        """Apply a translation."""
        self._compose(
            [
                [1.0, 0.0, 0.0, dx],
                [0.0, 1.0, 0.0, dy],
                [0.0, 0.0, 1.0, dz],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return self

    def scale(
        self,
        sx: float,
        sy: float | None = None,
        sz: float | None = None,
    ) -> Affine3D:
        """Apply a scaling, uniform when only ``sx`` is given."""
        if sy is None and sz is None:
            sy = sx
            sz = sx
        elif sy is None or sz is None:
            raise TypeError("scale takes one uniform factor or all three factors")
        self._compose(
            [
                [sx, 0.0, 0.0, 0.0],
                [0.0, sy, 0.0, 0.0],
                [0.0, 0.0, sz, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return self

    def rotate_x(self, theta: float) -> Affine3D:
        """Apply a right-handed rotation about the x-axis."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self._compose(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return self

    def rotate_y(self, theta: float) -> Affine3D:
        """Apply a right-handed rotation about the y-axis."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self._compose(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return self

    def rotate_z(self, theta: float) -> Affine3D:
        """Apply a right-handed rotation about the z-axis."""
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        self._compose(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return self

    def rotate(self, x: float, y: float, z: float) -> Affine3D:
        """Apply rotations about x, then y, then z.

        The order is fixed. Call the single-axis rotations directly for any
        other composition order.
        """
        self.rotate_x(x)
        self.rotate_y(y)
        self.rotate_z(z)
        return self

    def map(self, v: Vec | Iterable[Any]) -> Vec:
        """Transform a 3D point, returning a 3-vector."""
        point: Vec = Vec[self.DTYPE, 3](v)
        mapped: Vec = self.multiply(
            Vec[self.DTYPE, 4](point[0], point[1], point[2], 1.0)
        )
        return Vec[self.DTYPE, 3](mapped[0], mapped[1], mapped[2])
