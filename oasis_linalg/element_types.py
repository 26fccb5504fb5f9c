################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element dtype resolution and scalar conversion helpers."""

from __future__ import annotations

import numbers
import operator
from typing import Any

import numpy as np

from oasis_linalg.errors import BoundsError
from oasis_linalg.errors import ElementTypeError
from oasis_linalg.errors import ShapeError


# numpy dtype kinds accepted as element types: signed, unsigned, floating
SUPPORTED_KINDS: tuple[str, ...] = ("i", "u", "f")


def resolve_dtype(dtype: Any) -> np.dtype:
    """Return the numpy dtype for an element type, rejecting non-numerics."""
    try:
        resolved: np.dtype = np.dtype(dtype)
    except TypeError as exc:
        raise ElementTypeError(f"{dtype!r} is not a numpy dtype") from exc

    if resolved.kind not in SUPPORTED_KINDS:
        raise ElementTypeError(
            f"{resolved.name} is not a supported element type, "
            "expected an integer or floating dtype"
        )

    return resolved


def is_floating(dtype: np.dtype) -> bool:
    """Return True if the dtype is a floating-point type."""
    return dtype.kind == "f"


def is_integer(dtype: np.dtype) -> bool:
    """Return True if the dtype is a signed or unsigned integer type."""
    return dtype.kind in ("i", "u")


def is_scalar(value: Any) -> bool:
    """Return True if the value is a real scalar usable as an element."""
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Real)


def wrap_integer(value: int, dtype: np.dtype) -> int:
    """Reduce a Python int into the range of an integer dtype.

    The result is the two's complement value with the dtype's bit width, the
    same value numpy stores when casting an in-range int64.
    """
    bits: int = dtype.itemsize * 8
    wrapped: int = value & ((1 << bits) - 1)
    if dtype.kind == "i" and wrapped >= 1 << (bits - 1):
        wrapped -= 1 << bits
    return wrapped


def to_element(value: Any, dtype: np.dtype) -> np.generic:
    """Convert a scalar to the element type using numpy's unsafe casting.

    Floating values converted to an integer dtype are truncated towards zero,
    matching how element assignment behaves for the underlying storage.
    Python ints of any size wrap into integer dtypes.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = wrap_integer(value, dtype) if is_integer(dtype) else float(value)

    array: np.ndarray = np.asarray(value)
    if array.ndim != 0:
        raise ElementTypeError("Expected a scalar element")
    if array.dtype.kind not in SUPPORTED_KINDS:
        raise ElementTypeError(f"Cannot convert {type(value).__name__} to an element")
    return array.astype(dtype)[()]


def as_element_array(values: Any, name: str) -> np.ndarray:
    """Return the values as a real-valued numpy array."""
    try:
        array: np.ndarray = np.asarray(values)
    except ValueError as exc:
        raise ShapeError(f"{name} elements must form a regular shape") from exc

    if array.dtype.kind not in ("b",) + SUPPORTED_KINDS:
        raise ShapeError(f"{name} elements must be real numbers")

    return array


def check_index(index: Any, size: int, name: str = "index") -> int:
    """Return the index as an int, raising BoundsError outside [0, size)."""
    try:
        i: int = operator.index(index)
    except TypeError as exc:
        raise BoundsError(f"{name} must be an integer, got {index!r}") from exc

    if i < 0 or i >= size:
        raise BoundsError(f"{name} {i} is out of range [0, {size})")

    return i


def divide_elements(numerator: Any, denominator: Any, dtype: np.dtype) -> np.ndarray:
    """Divide elementwise and convert the quotient into the element type.

    Integer element types raise ZeroDivisionError on a zero divisor. With
    integer operands the quotient is computed exactly and truncated towards
    zero. Floating division propagates infinities and NaN without warnings.
    """
    n: np.ndarray = np.asarray(numerator)
    d: np.ndarray = np.asarray(denominator)

    if is_integer(dtype):
        if np.any(d == 0):
            raise ZeroDivisionError("integer division by zero")
        if n.dtype.kind in ("i", "u") and d.dtype.kind in ("i", "u"):
            quotient: np.ndarray = np.abs(n) // np.abs(d)
            negative: np.ndarray = (n < 0) != (d < 0)
            return np.where(negative, -quotient, quotient).astype(dtype)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(n, d).astype(dtype)
