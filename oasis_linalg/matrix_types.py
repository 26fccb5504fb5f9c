################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Common square matrix specializations.

Suffix ``f`` is float32, ``d`` is float64 and ``i`` is int32.
"""

from __future__ import annotations

import numpy as np

from oasis_linalg.matrix import Mat
from oasis_linalg.square_matrix import SquareMat
from oasis_linalg.transforms import Affine2D
from oasis_linalg.transforms import Affine3D


Mat2f: type[SquareMat] = Mat[np.float32, 2, 2]
Mat3f: type[Affine2D] = Mat[np.float32, 3, 3]
Mat4f: type[Affine3D] = Mat[np.float32, 4, 4]

Mat2d: type[SquareMat] = Mat[np.float64, 2, 2]
Mat3d: type[Affine2D] = Mat[np.float64, 3, 3]
Mat4d: type[Affine3D] = Mat[np.float64, 4, 4]

Mat2i: type[SquareMat] = Mat[np.int32, 2, 2]
Mat3i: type[SquareMat] = Mat[np.int32, 3, 3]
Mat4i: type[SquareMat] = Mat[np.int32, 4, 4]
