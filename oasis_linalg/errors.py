################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Errors raised by fixed-size vectors and matrices."""

from __future__ import annotations


class LinalgError(Exception):
    """Base class for linear algebra errors."""


class BoundsError(LinalgError, IndexError):
    """Raised when an index falls outside the fixed dimensions."""


class ShapeError(LinalgError, ValueError):
    """Raised when element counts or operand shapes are incompatible."""


class ElementTypeError(LinalgError, TypeError):
    """Raised when an element type is not a supported numeric dtype."""
