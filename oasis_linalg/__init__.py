################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Fixed-size vector and matrix math for 2D, 3D and 4D geometry
"""

from __future__ import annotations

from oasis_linalg.config import LinalgConfig
from oasis_linalg.config import LinalgConfigError
from oasis_linalg.config import LinalgParams
from oasis_linalg.config import LinalgParamsError
from oasis_linalg.config import get_config
from oasis_linalg.config import reset_config
from oasis_linalg.config import set_config
from oasis_linalg.errors import BoundsError
from oasis_linalg.errors import ElementTypeError
from oasis_linalg.errors import LinalgError
from oasis_linalg.errors import ShapeError
from oasis_linalg.matrix import Mat
from oasis_linalg.matrix_types import Mat2d
from oasis_linalg.matrix_types import Mat2f
from oasis_linalg.matrix_types import Mat2i
from oasis_linalg.matrix_types import Mat3d
from oasis_linalg.matrix_types import Mat3f
from oasis_linalg.matrix_types import Mat3i
from oasis_linalg.matrix_types import Mat4d
from oasis_linalg.matrix_types import Mat4f
from oasis_linalg.matrix_types import Mat4i
from oasis_linalg.square_matrix import SquareMat
from oasis_linalg.transforms import Affine2D
from oasis_linalg.transforms import Affine3D
from oasis_linalg.vector import CrossVec
from oasis_linalg.vector import FloatVec
from oasis_linalg.vector import PolarVec
from oasis_linalg.vector import Vec
from oasis_linalg.vector_types import Vec2d
from oasis_linalg.vector_types import Vec2f
from oasis_linalg.vector_types import Vec2i
from oasis_linalg.vector_types import Vec3d
from oasis_linalg.vector_types import Vec3f
from oasis_linalg.vector_types import Vec3i
from oasis_linalg.vector_types import Vec4d
from oasis_linalg.vector_types import Vec4f
from oasis_linalg.vector_types import Vec4i


__all__ = [
    "Affine2D",
    "Affine3D",
    "BoundsError",
    "CrossVec",
    "ElementTypeError",
    "FloatVec",
    "LinalgConfig",
    "LinalgConfigError",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Mat",
    "Mat2d",
    "Mat2f",
    "Mat2i",
    "Mat3d",
    "Mat3f",
    "Mat3i",
    "Mat4d",
    "Mat4f",
    "Mat4i",
    "PolarVec",
    "ShapeError",
    "SquareMat",
    "Vec",
    "Vec2d",
    "Vec2f",
    "Vec2i",
    "Vec3d",
    "Vec3f",
    "Vec3i",
    "Vec4d",
    "Vec4f",
    "Vec4i",
    "get_config",
    "reset_config",
    "set_config",
]
