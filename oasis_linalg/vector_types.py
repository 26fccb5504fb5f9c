################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Common vector specializations.

Suffix ``f`` is float32, ``d`` is float64 and ``i`` is int32.
"""

from __future__ import annotations

import numpy as np

from oasis_linalg.vector import Vec


Vec2f: type[Vec] = Vec[np.float32, 2]
Vec3f: type[Vec] = Vec[np.float32, 3]
Vec4f: type[Vec] = Vec[np.float32, 4]

Vec2d: type[Vec] = Vec[np.float64, 2]
Vec3d: type[Vec] = Vec[np.float64, 3]
Vec4d: type[Vec] = Vec[np.float64, 4]

Vec2i: type[Vec] = Vec[np.int32, 2]
Vec3i: type[Vec] = Vec[np.int32, 3]
Vec4i: type[Vec] = Vec[np.int32, 4]
