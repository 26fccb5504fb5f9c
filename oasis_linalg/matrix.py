################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size matrices stored in row-major order.

``Mat[dtype, rows, cols]`` returns a cached specialization with ``DTYPE``,
``ROWS`` and ``COLS`` fixed. Element ``(i, j)`` lives at flat index
``i * COLS + j``. Square specializations gain determinant and inverse support
and floating 3x3 and 4x4 specializations gain affine transform builders.

Shape-preserving arithmetic and row operations mutate the receiver and return
it. Operations that derive a new value (transpose, multiply, sub_matrix)
return new matrices.
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_config import get_config
from oasis_linalg.element_types import as_element_array
from oasis_linalg.element_types import check_index
from oasis_linalg.element_types import divide_elements
from oasis_linalg.element_types import is_scalar
from oasis_linalg.element_types import to_element
from oasis_linalg.errors import BoundsError
from oasis_linalg.errors import ShapeError
from oasis_linalg.formatting import format_element
from oasis_linalg.formatting import format_matrix
from oasis_linalg.specialization import CapabilityPredicate
from oasis_linalg.specialization import Specializer
from oasis_linalg.vector import Vec


class Mat:
    """Matrix of ``ROWS`` x ``COLS`` elements of type ``DTYPE``."""

    DTYPE: ClassVar[np.dtype]
    ROWS: ClassVar[int]
    COLS: ClassVar[int]
    _SPECIALIZED: ClassVar[bool] = False

    __hash__ = None  # type: ignore[assignment]

    def __class_getitem__(cls, params: tuple[Any, Any, Any]) -> type[Mat]:
        """Return the specialization for ``(dtype, rows, cols)``."""
        if cls._SPECIALIZED:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 3:
            raise TypeError(
                "Mat takes exactly three parameters: Mat[dtype, rows, cols]"
            )
        return _SPECIALIZER.specialize(params[0], (params[1], params[2]))

    @classmethod
    def of(cls, rows: int, cols: int, dtype: Any = None) -> type[Mat]:
        """Return a specialization, using the configured dtype by default."""
        if dtype is None:
            dtype = get_config().default_dtype()
        return _SPECIALIZER.specialize(dtype, (rows, cols))

    @classmethod
    def capability(cls, predicate: CapabilityPredicate) -> Callable[[type], type]:
        """Register a class adding methods to matching specializations."""
        return _SPECIALIZER.register(predicate)

    def __init__(self, *elements: Any) -> None:
        """Construct a matrix.

        Accepts no arguments (all zeros), a single scalar broadcast to every
        element, another matrix of the same shape, a nested ``ROWS`` x
        ``COLS`` sequence, one flat row-major sequence or ``ROWS * COLS``
        separate elements.
        """
        cls: type[Mat] = type(self)
        if not cls._SPECIALIZED:
            raise TypeError(
                "Mat must be specialized before use, e.g. Mat[np.float64, 3, 3]"
            )

        self._data: NDArray[Any] = np.zeros(cls.ROWS * cls.COLS, dtype=cls.DTYPE)

        if not elements:
            return

        if len(elements) == 1:
            value: Any = elements[0]
            if is_scalar(value):
                self._data[:] = to_element(value, cls.DTYPE)
                return
            if isinstance(value, Mat):
                if (value.ROWS, value.COLS) != (cls.ROWS, cls.COLS):
                    raise ShapeError(
                        f"Cannot copy a {value.ROWS}x{value.COLS} matrix "
                        f"into {cls.__name__}"
                    )
                self._data[:] = value._data.astype(cls.DTYPE)
                return
            self._assign(value)
            return

        self._assign(elements)

    def _assign(self, values: Any) -> None:
        array: NDArray[Any] = as_element_array(values, type(self).__name__)
        if array.ndim == 2:
            if array.shape != (self.ROWS, self.COLS):
                raise ShapeError(
                    f"{type(self).__name__} requires a {self.ROWS}x{self.COLS} "
                    f"grid, got shape {array.shape}"
                )
        elif array.ndim != 1 or array.shape[0] != self.ROWS * self.COLS:
            raise ShapeError(
                f"{type(self).__name__} requires {self.ROWS * self.COLS} "
                f"elements, got shape {array.shape}"
            )
        self._data[:] = array.astype(self.DTYPE).ravel()

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the row-major elements."""
        view: NDArray[Any] = self._data.view()
        view.flags.writeable = False
        return view

    def _grid(self) -> NDArray[Any]:
        """Return a writable ROWS x COLS view of the storage."""
        return self._data.reshape(self.ROWS, self.COLS)

    def to_array(self) -> NDArray[Any]:
        """Return a ROWS x COLS copy of the elements."""
        return self._grid().copy()

    def copy(self) -> Mat:
        """Return an independent copy of this matrix."""
        return type(self)(self)

    def set_data(self, elements: Iterable[Any]) -> Mat:
        """Overwrite every element from a flat row-major sequence."""
        array: NDArray[Any] = np.asarray(list(elements))
        if array.ndim != 1:
            raise ShapeError("set_data expects a flat sequence")
        self._assign(array)
        return self

    def _index(self, i: Any, j: Any) -> int:
        row: int = check_index(i, self.ROWS, "row")
        col: int = check_index(j, self.COLS, "column")
        return row * self.COLS + col

    def get(self, i: int, j: int) -> Any:
        """Return the element at row ``i``, column ``j``."""
        return self._data[self._index(i, j)]

    def set(self, i: int, j: int, value: Any) -> Mat:
        """Set the element at row ``i``, column ``j``."""
        self._data[self._index(i, j)] = to_element(value, self.DTYPE)
        return self

    def __getitem__(self, key: tuple[int, int]) -> Any:
        if not isinstance(key, tuple) or len(key) != 2:
            raise BoundsError("Matrix elements are indexed as m[row, col]")
        return self.get(key[0], key[1])

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise BoundsError("Matrix elements are indexed as m[row, col]")
        self.set(key[0], key[1], value)

    def __len__(self) -> int:
        return self.ROWS * self.COLS

    def row_type(self) -> type[Vec]:
        """Return the vector type of one row."""
        return Vec[self.DTYPE, self.COLS]

    def col_type(self) -> type[Vec]:
        """Return the vector type of one column."""
        return Vec[self.DTYPE, self.ROWS]

    def get_row(self, row: int) -> Vec:
        """Return a copy of a row."""
        i: int = check_index(row, self.ROWS, "row")
        start: int = i * self.COLS
        return self.row_type()(self._data[start : start + self.COLS])

    def set_row(self, row: int, vector: Vec | Iterable[Any]) -> Mat:
        """Overwrite a row with ``COLS`` elements."""
        i: int = check_index(row, self.ROWS, "row")
        values: Vec = self.row_type()(vector)
        start: int = i * self.COLS
        self._data[start : start + self.COLS] = values._data
        return self

    def get_col(self, col: int) -> Vec:
        """Return a copy of a column."""
        j: int = check_index(col, self.COLS, "column")
        return self.col_type()(self._data[j :: self.COLS])

    def set_col(self, col: int, vector: Vec | Iterable[Any]) -> Mat:
        """Overwrite a column with ``ROWS`` elements."""
        j: int = check_index(col, self.COLS, "column")
        values: Vec = self.col_type()(vector)
        self._data[j :: self.COLS] = values._data
        return self

    def _same_shape(self, other: Any) -> Mat:
        if not isinstance(other, Mat):
            raise TypeError(f"Expected a matrix, got {type(other).__name__}")
        if (other.ROWS, other.COLS) != (self.ROWS, self.COLS):
            raise ShapeError(
                f"Matrix shape mismatch: {self.ROWS}x{self.COLS} and "
                f"{other.ROWS}x{other.COLS}"
            )
        return other

    def add(self, other: Mat) -> Mat:
        """Add another matrix of the same shape elementwise."""
        operand: Mat = self._same_shape(other)
        np.add(self._data, operand._data, out=self._data, casting="unsafe")
        return self

    def sub(self, other: Mat) -> Mat:
        """Subtract another matrix of the same shape elementwise."""
        operand: Mat = self._same_shape(other)
        np.subtract(self._data, operand._data, out=self._data, casting="unsafe")
        return self

    def mul(self, factor: Any) -> Mat:
        """Multiply every element by a scalar."""
        if not is_scalar(factor):
            raise TypeError("Matrix mul takes a scalar, use multiply for products")
        np.multiply(self._data, factor, out=self._data, casting="unsafe")
        return self

    def div(self, factor: Any) -> Mat:
        """Divide every element by a scalar.

        Integer matrices truncate towards zero and raise ZeroDivisionError on
        a zero divisor. Floating matrices propagate infinities and NaN.
        """
        if not is_scalar(factor):
            raise TypeError("Matrix div takes a scalar")
        self._data[:] = divide_elements(self._data, factor, self.DTYPE)
        return self

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Mat):
            return NotImplemented
        return self.copy().add(other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Mat):
            return NotImplemented
        return self.copy().sub(other)

    def __mul__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        return self.copy().mul(other)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        return self.copy().div(other)

    def __iadd__(self, other: Any) -> Any:
        if not isinstance(other, Mat):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: Any) -> Any:
        if not isinstance(other, Mat):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        return self.mul(other)

    def __itruediv__(self, other: Any) -> Any:
        if not is_scalar(other):
            return NotImplemented
        return self.div(other)

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, (Mat, Vec)):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> Mat:
        """Return the COLS x ROWS transpose."""
        result_type: type[Mat] = Mat[self.DTYPE, self.COLS, self.ROWS]
        return result_type(self._grid().T.ravel())

    def multiply(self, other: Mat | Vec) -> Any:
        """Return the matrix product ``self . other``.

        A matrix operand must have ``COLS`` rows and yields a
        ``ROWS x other.COLS`` matrix. A vector operand must have ``COLS``
        elements and yields a ``ROWS`` vector.
        """
        if isinstance(other, Mat):
            if other.ROWS != self.COLS:
                raise ShapeError(
                    f"Cannot multiply {self.ROWS}x{self.COLS} by "
                    f"{other.ROWS}x{other.COLS}"
                )
            product: NDArray[Any] = self._grid() @ other._grid()
            result_type: type[Mat] = Mat[self.DTYPE, self.ROWS, other.COLS]
            return result_type(product.ravel())

        if isinstance(other, Vec):
            if other.SIZE != self.COLS:
                raise ShapeError(
                    f"Cannot multiply {self.ROWS}x{self.COLS} by a "
                    f"{other.SIZE}-vector"
                )
            return self.col_type()(self._grid() @ other._data)

        raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")

    def row_switch(self, row_i: int, row_j: int) -> Mat:
        """Swap two rows."""
        i: int = check_index(row_i, self.ROWS, "row")
        j: int = check_index(row_j, self.ROWS, "row")
        grid: NDArray[Any] = self._grid()
        grid[[i, j]] = grid[[j, i]]
        return self

    def row_multiply(self, row: int, factor: Any) -> Mat:
        """Scale one row in place."""
        i: int = check_index(row, self.ROWS, "row")
        values: NDArray[Any] = self._grid()[i]
        np.multiply(values, factor, out=values, casting="unsafe")
        return self

    def row_add(
        self,
        row_i: int,
        factor: Any,
        row_j: int,
        *,
        accumulate: bool = False,
    ) -> Mat:
        """Write ``factor * row_j`` into ``row_i``.

        By default the destination row is overwritten with the scaled source
        row, it is not accumulated. Pass ``accumulate=True`` for the
        elementary row operation ``row_i += factor * row_j``.
        """
        i: int = check_index(row_i, self.ROWS, "row")
        j: int = check_index(row_j, self.ROWS, "row")
        grid: NDArray[Any] = self._grid()
        scaled: NDArray[Any] = grid[j] * factor
        if accumulate:
            scaled = grid[i] + scaled
        grid[i] = scaled.astype(self.DTYPE)
        return self

    def sub_matrix(self, rows: Iterable[int], cols: Iterable[int]) -> Mat:
        """Return the matrix left after deleting the given rows and columns.

        Duplicate indices are removed once. The remaining rows and columns
        keep their relative order and at least one of each must remain.
        """
        removed_rows: list[int] = sorted(
            {check_index(row, self.ROWS, "row") for row in rows}
        )
        removed_cols: list[int] = sorted(
            {check_index(col, self.COLS, "column") for col in cols}
        )

        new_rows: int = self.ROWS - len(removed_rows)
        new_cols: int = self.COLS - len(removed_cols)
        if new_rows < 1 or new_cols < 1:
            raise ShapeError(
                f"Submatrix of {self.ROWS}x{self.COLS} would be "
                f"{new_rows}x{new_cols}, at least 1x1 must remain"
            )

        kept: NDArray[Any] = np.delete(
            self._grid(), np.asarray(removed_rows, dtype=np.intp), axis=0
        )
        kept = np.delete(kept, np.asarray(removed_cols, dtype=np.intp), axis=1)

        result_type: type[Mat] = Mat[self.DTYPE, new_rows, new_cols]
        return result_type(kept.ravel())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        if (other.ROWS, other.COLS) != (self.ROWS, self.COLS):
            return False
        return bool(np.array_equal(self._data, other._data))

    def almost_equal(
        self,
        other: Mat,
        atol: float | None = None,
        rtol: float | None = None,
    ) -> bool:
        """Check approximate elementwise equality."""
        if not isinstance(other, Mat):
            raise TypeError("Can only compare a matrix with another matrix")
        if (other.ROWS, other.COLS) != (self.ROWS, self.COLS):
            return False
        if atol is None:
            atol = get_config().atol()
        if rtol is None:
            rtol = get_config().rtol()
        return bool(np.allclose(self._data, other._data, atol=atol, rtol=rtol))

    def __str__(self) -> str:
        return format_matrix(self._grid())

    def __repr__(self) -> str:
        rows: list[str] = [
            "[" + ", ".join(format_element(value) for value in row) + "]"
            for row in self._grid()
        ]
        return f"{type(self).__name__}([{', '.join(rows)}])"


_SPECIALIZER: Specializer = Specializer(Mat, ("ROWS", "COLS"))
