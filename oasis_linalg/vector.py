################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vectors generic over element dtype and length.

``Vec[dtype, size]`` returns a cached specialization with ``DTYPE`` and
``SIZE`` fixed. Floating specializations gain ``norm``, floating 2-vectors
gain polar conversions and floating 3-vectors gain ``cross``. The first four
elements are also reachable as ``x``, ``y``, ``z`` and ``w``, but only as far
as the length allows.

Arithmetic methods mutate the receiver and return it for chaining; the binary
operators return new vectors.
"""

from __future__ import annotations

import math
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Iterable
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.element_types import as_element_array
from oasis_linalg.element_types import check_index
from oasis_linalg.element_types import divide_elements
from oasis_linalg.element_types import is_floating
from oasis_linalg.element_types import is_scalar
from oasis_linalg.element_types import resolve_dtype
from oasis_linalg.element_types import to_element
from oasis_linalg.errors import ShapeError
from oasis_linalg.formatting import format_element
from oasis_linalg.formatting import format_vector
from oasis_linalg.specialization import CapabilityPredicate
from oasis_linalg.specialization import Specializer


# Names of the first four elements
ACCESSOR_NAMES: tuple[str, ...] = ("x", "y", "z", "w")

TWO_PI: float = 2.0 * math.pi


class Vec:
    """Vector of ``SIZE`` elements of type ``DTYPE``."""

    DTYPE: ClassVar[np.dtype]
    SIZE: ClassVar[int]
    _SPECIALIZED: ClassVar[bool] = False

    __hash__ = None  # type: ignore[assignment]

    def __class_getitem__(cls, params: tuple[Any, Any]) -> type[Vec]:
        """Return the specialization for ``(dtype, size)``."""
        if cls._SPECIALIZED:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Vec takes exactly two parameters: Vec[dtype, size]")
        dtype: Any = params[0]
        size: Any = params[1]
        return _SPECIALIZER.specialize(dtype, (size,))

    @classmethod
    def of(cls, size: int, dtype: Any = None) -> type[Vec]:
        """Return a specialization, using the configured dtype by default."""
        if dtype is None:
            dtype = get_config().default_dtype()
        return _SPECIALIZER.specialize(dtype, (size,))

    @classmethod
    def capability(cls, predicate: CapabilityPredicate) -> Callable[[type], type]:
        """Register a class adding methods to matching specializations."""
        return _SPECIALIZER.register(predicate)

    def __init__(self, *elements: Any) -> None:
        """Construct a vector.

        Accepts no arguments (all zeros), a single scalar broadcast to every
        element, another vector of the same length, one sequence of ``SIZE``
        elements or ``SIZE`` separate elements.
        """
        cls: type[Vec] = type(self)
        if not cls._SPECIALIZED:
            raise TypeError(
                "Vec must be specialized before use, e.g. Vec[np.float64, 3]"
            )

        self._data: NDArray[Any] = np.zeros(cls.SIZE, dtype=cls.DTYPE)

        if not elements:
            return

        if len(elements) == 1:
            value: Any = elements[0]
            if is_scalar(value):
                self._data[:] = to_element(value, cls.DTYPE)
                return
            if isinstance(value, Vec):
                self._assign(value._data)
                return
            self._assign(value)
            return

        self._assign(elements)

    def _assign(self, values: Any) -> None:
        array: NDArray[Any] = as_element_array(values, type(self).__name__)
        if array.ndim != 1 or array.shape[0] != self.SIZE:
            raise ShapeError(
                f"{type(self).__name__} requires {self.SIZE} elements, "
                f"got shape {array.shape}"
            )
        self._data[:] = array.astype(self.DTYPE)

    @classmethod
    def empty(cls) -> Vec:
        """Return a vector with every element zero."""
        return cls()

    @classmethod
    def sum(cls, vectors: Iterable[Vec]) -> Vec:
        """Return the elementwise sum of the given vectors."""
        total: Vec = cls()
        for vector in vectors:
            total.add(vector)
        return total

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the elements."""
        view: NDArray[Any] = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> NDArray[Any]:
        """Return a copy of the elements."""
        return self._data.copy()

    def copy(self) -> Vec:
        """Return an independent copy of this vector."""
        return type(self)(self)

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data.copy())

    def __getitem__(self, index: int) -> Any:
        return self._data[check_index(index, self.SIZE)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[check_index(index, self.SIZE)] = to_element(value, self.DTYPE)

    def _operand(self, other: Any) -> Any:
        """Return an elementwise operand, or None if the type is unsupported."""
        if isinstance(other, Vec):
            if other.SIZE != self.SIZE:
                raise ShapeError(
                    f"Vector length mismatch: {self.SIZE} and {other.SIZE}"
                )
            return other._data
        if is_scalar(other):
            return other
        return None

    def _require_operand(self, other: Any) -> Any:
        operand: Any = self._operand(other)
        if operand is None:
            raise TypeError(f"Unsupported operand type {type(other).__name__}")
        return operand

    def add(self, other: Vec | float) -> Vec:
        """Add a vector or scalar to every element."""
        np.add(
            self._data, self._require_operand(other), out=self._data, casting="unsafe"
        )
        return self

    def sub(self, other: Vec | float) -> Vec:
        """Subtract a vector or scalar from every element."""
        np.subtract(
            self._data, self._require_operand(other), out=self._data, casting="unsafe"
        )
        return self

    def mul(self, other: Vec | float) -> Vec:
        """Multiply every element by a vector or scalar."""
        np.multiply(
            self._data, self._require_operand(other), out=self._data, casting="unsafe"
        )
        return self

    def div(self, other: Vec | float) -> Vec:
        """Divide every element by a vector or scalar.

        Integer vectors truncate towards zero and raise ZeroDivisionError on
        a zero divisor. Floating vectors propagate infinities and NaN.
        """
        operand: Any = self._require_operand(other)
        self._data[:] = divide_elements(self._data, operand, self.DTYPE)
        return self

    def _binary(self, other: Any, method: Callable[[Vec, Any], Vec]) -> Any:
        if self._operand(other) is None:
            return NotImplemented
        return method(self.copy(), other)

    def _inplace(self, other: Any, method: Callable[[Vec, Any], Vec]) -> Any:
        if self._operand(other) is None:
            return NotImplemented
        return method(self, other)

    def __add__(self, other: Any) -> Any:
        return self._binary(other, Vec.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, Vec.add)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, Vec.sub)

    def __rsub__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        result: Vec = self.copy()
        np.subtract(other, self._data, out=result._data, casting="unsafe")
        return result

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, Vec.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, Vec.mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, Vec.div)

    def __rtruediv__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        result: Vec = self.copy()
        result._data[:] = divide_elements(other, self._data, self.DTYPE)
        return result

    def __iadd__(self, other: Any) -> Any:
        return self._inplace(other, Vec.add)

    def __isub__(self, other: Any) -> Any:
        return self._inplace(other, Vec.sub)

    def __imul__(self, other: Any) -> Any:
        return self._inplace(other, Vec.mul)

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace(other, Vec.div)

    def __neg__(self) -> Vec:
        return self.copy().mul(-1)

    def mag2(self) -> float:
        """Return the sum of squared elements in double precision."""
        values: NDArray[np.float64] = self._data.astype(np.float64)
        return float(np.dot(values, values))

    def mag(self) -> float:
        """Return the Euclidean magnitude."""
        return math.sqrt(self.mag2())

    def dot(self, other: Vec) -> Any:
        """Return the dot product as an element of this vector's type."""
        if not isinstance(other, Vec):
            raise TypeError("Can only calculate dot product with another vector")
        if other.SIZE != self.SIZE:
            raise ShapeError(f"Vector length mismatch: {self.SIZE} and {other.SIZE}")
        return to_element(np.dot(self._data, other._data), self.DTYPE)

    def compare(self, other: Vec) -> int:
        """Compare magnitudes, returning -1, 0 or 1.

        This is a magnitude ordering: distinct vectors of equal magnitude
        compare as 0 even though they are not equal.
        """
        a: float = self.mag2()
        b: float = other.mag2()
        if a == b:
            return 0
        if a < b:
            return -1
        return 1

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other: Any) -> bool:
        """Elementwise equality, independent of the magnitude ordering."""
        if not isinstance(other, Vec):
            return NotImplemented
        if other.SIZE != self.SIZE:
            return False
        return bool(np.array_equal(self._data, other._data))

    def almost_equal(
        self,
        other: Vec,
        atol: float | None = None,
        rtol: float | None = None,
    ) -> bool:
        """Check approximate elementwise equality."""
        if not isinstance(other, Vec):
            raise TypeError("Can only compare a vector with another vector")
        if other.SIZE != self.SIZE:
            return False
        if atol is None:
            atol = get_config().atol()
        if rtol is None:
            rtol = get_config().rtol()
        return bool(np.allclose(self._data, other._data, atol=atol, rtol=rtol))

    def cast(self, dtype: Any = None, size: int | None = None) -> Vec:
        """Return a copy with another element type and/or length.

        Growing zero-fills the new slots and shrinking drops trailing
        elements.
        """
        target_dtype: np.dtype = self.DTYPE if dtype is None else resolve_dtype(dtype)
        target_size: int = self.SIZE if size is None else size
        result: Vec = _SPECIALIZER.specialize(target_dtype, (target_size,))()
        count: int = min(self.SIZE, result.SIZE)
        result._data[:count] = self._data[:count].astype(result.DTYPE)
        return result

    def __str__(self) -> str:
        return format_vector(self._data)

    def __repr__(self) -> str:
        elements: str = ", ".join(format_element(value) for value in self._data)
        return f"{type(self).__name__}({elements})"


def _accessor(index: int) -> property:
    name: str = ACCESSOR_NAMES[index]

    def getter(self: Vec) -> Any:
        return self._data[index]

    def setter(self: Vec, value: Any) -> None:
        self._data[index] = to_element(value, self.DTYPE)

    return property(getter, setter, doc=f"Element {index} ({name}).")


def _vector_namespace(dtype: np.dtype, shape: tuple[int, ...]) -> dict[str, Any]:
    """Return named accessors for the first elements of a specialization."""
    size: int = shape[0]
    return {
        name: _accessor(index)
        for index, name in enumerate(ACCESSOR_NAMES)
        if index < size
    }


_SPECIALIZER: Specializer = Specializer(Vec, ("SIZE",), _vector_namespace)


@Vec.capability(lambda dtype, shape: is_floating(dtype))
class FloatVec(Vec):
    """Floating-point vector operations."""

    def norm(self) -> FloatVec:
        """Scale this vector to unit magnitude in place.

        A zero vector becomes NaN; the division is not guarded.
        """
        magnitude: float = self.mag()
        with np.errstate(divide="ignore", invalid="ignore"):
            np.true_divide(self._data, magnitude, out=self._data, casting="unsafe")
        return self


@Vec.capability(lambda dtype, shape: is_floating(dtype) and shape == (2,))
class PolarVec(FloatVec):
    """Polar and Cartesian conversions for floating 2-vectors."""

    def to_polar(self) -> PolarVec:
        """Rewrite (x, y) as (radius, angle) with the angle in [0, 2*pi)."""
        x: float = float(self._data[0])
        y: float = float(self._data[1])
        radius: float = self.mag()
        angle: float = math.atan2(y, x)
        if angle < 0.0:
            angle += TWO_PI
        self._data[0] = radius
        self._data[1] = angle

        # Rounding into the element type can land exactly on 2*pi
        if self._data[1] >= TWO_PI:
            self._data[1] = 0.0

        return self

    def to_cartesian(self) -> PolarVec:
        """Rewrite (radius, angle) as (x, y)."""
        radius: float = float(self._data[0])
        angle: float = float(self._data[1])
        self._data[0] = radius * math.cos(angle)
        self._data[1] = radius * math.sin(angle)
        return self


@Vec.capability(lambda dtype, shape: is_floating(dtype) and shape == (3,))
class CrossVec(FloatVec):
    """Cross product for floating 3-vectors."""

    def cross(self, other: Vec) -> CrossVec:
        """Overwrite this vector with ``self x other``."""
        if not isinstance(other, Vec) or other.SIZE != 3:
            raise ShapeError("Cross product requires another 3-vector")
        ax: float = float(self._data[0])
        ay: float = float(self._data[1])
        az: float = float(self._data[2])
        bx: float = float(other._data[0])
        by: float = float(other._data[1])
        bz: float = float(other._data[2])
        self._data[0] = ay * bz - az * by
        self._data[1] = az * bx - ax * bz
        self._data[2] = ax * by - ay * bx
        return self
