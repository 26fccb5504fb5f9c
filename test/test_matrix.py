################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix storage, arithmetic, products and row operations."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_linalg.errors import BoundsError
from oasis_linalg.errors import ShapeError
from oasis_linalg.matrix import Mat
from oasis_linalg.matrix_types import Mat2d
from oasis_linalg.matrix_types import Mat2i
from oasis_linalg.matrix_types import Mat3d
from oasis_linalg.vector import Vec
from oasis_linalg.vector_types import Vec2d
from oasis_linalg.vector_types import Vec3d


Mat23d: type[Mat] = Mat[np.float64, 2, 3]
Mat34d: type[Mat] = Mat[np.float64, 3, 4]


def test_specialization_identity() -> None:
    """Ensure specializations are cached with fixed dimensions."""
    assert Mat[np.float64, 2, 2] is Mat2d
    assert Mat.of(2, 3) is Mat23d
    assert Mat23d.ROWS == 2
    assert Mat23d.COLS == 3
    assert Mat23d.DTYPE == np.dtype(np.float64)


def test_generic_matrix_cannot_be_constructed() -> None:
    with pytest.raises(TypeError):
        Mat(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(TypeError):
        Mat[np.float64, 2]  # type: ignore[misc]


def test_construction_forms() -> None:
    """Ensure flat, variadic, nested, broadcast and copy forms agree."""
    expected: list[float] = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    assert list(Mat23d([1, 2, 3, 4, 5, 6]).data) == expected
    assert list(Mat23d(1, 2, 3, 4, 5, 6).data) == expected
    assert list(Mat23d([[1, 2, 3], [4, 5, 6]]).data) == expected
    assert list(Mat23d(np.arange(1.0, 7.0).reshape(2, 3)).data) == expected
    assert list(Mat23d(Mat23d(expected)).data) == expected
    assert list(Mat23d(7.0).data) == [7.0] * 6
    assert list(Mat23d().data) == [0.0] * 6


@pytest.mark.parametrize(
    "args",
    [
        (1.0, 2.0, 3.0),
        ([1.0, 2.0, 3.0, 4.0, 5.0],),
        ([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]],),
    ],
)
def test_construction_wrong_shape_raises(args: tuple) -> None:
    """Ensure element counts and nested shapes are checked."""
    with pytest.raises(ShapeError):
        Mat23d(*args)


def test_copy_from_other_shape_raises() -> None:
    with pytest.raises(ShapeError):
        Mat23d(Mat2d())


def test_row_major_indexing() -> None:
    """Ensure element (i, j) lives at flat index i * COLS + j."""
    m: Mat = Mat23d(1, 2, 3, 4, 5, 6)

    assert m.get(1, 0) == 4.0
    assert m[0, 2] == 3.0
    assert m.data[1 * 3 + 2] == m[1, 2]

    m.set(0, 1, 9.0)
    m[1, 1] = -5.0

    assert list(m.data) == [1.0, 9.0, 3.0, 4.0, -5.0, 6.0]


def test_indexing_bounds() -> None:
    """Ensure out-of-range rows and columns raise BoundsError."""
    m: Mat = Mat23d()

    with pytest.raises(BoundsError):
        m.get(2, 0)
    with pytest.raises(BoundsError):
        m.get(0, 3)
    with pytest.raises(BoundsError):
        m[-1, 0]
    with pytest.raises(BoundsError):
        m[0]  # type: ignore[index]
    with pytest.raises(BoundsError):
        m.set(0, 5, 1.0)


def test_rows_and_columns() -> None:
    """Ensure rows and columns are exchanged as independent vectors."""
    m: Mat = Mat23d(1, 2, 3, 4, 5, 6)

    row: Vec = m.get_row(1)
    col: Vec = m.get_col(2)

    assert type(row) is Vec3d
    assert type(col) is Vec2d
    assert row == Vec3d(4.0, 5.0, 6.0)
    assert col == Vec2d(3.0, 6.0)

    row[0] = 100.0
    assert m[1, 0] == 4.0

    assert m.set_row(0, Vec3d(7.0, 8.0, 9.0)) is m
    m.set_col(1, [-1.0, -2.0])

    assert m == Mat23d(7, -1, 9, 4, -2, 6)


def test_row_and_column_length_checked() -> None:
    m: Mat = Mat23d()

    with pytest.raises(ShapeError):
        m.set_row(0, Vec2d(1.0, 2.0))
    with pytest.raises(ShapeError):
        m.set_col(0, [1.0, 2.0, 3.0])
    with pytest.raises(BoundsError):
        m.get_row(2)


def test_set_data_and_to_array() -> None:
    """Ensure set_data overwrites from a flat sequence."""
    m: Mat = Mat2d()

    assert m.set_data(range(4)) is m
    assert m == Mat2d(0, 1, 2, 3)

    grid: np.ndarray = m.to_array()
    assert grid.shape == (2, 2)
    grid[0, 0] = 10.0
    assert m[0, 0] == 0.0

    with pytest.raises(ShapeError):
        m.set_data([[0, 1], [2, 3]])
    with pytest.raises(ShapeError):
        m.set_data([1.0, 2.0])


def test_data_is_read_only() -> None:
    m: Mat = Mat2d(1, 2, 3, 4)

    with pytest.raises(ValueError):
        m.data[0] = 5.0


def test_elementwise_methods_mutate() -> None:
    """Ensure add, sub, mul and div update the receiver and return it."""
    m: Mat = Mat2d(1, 2, 3, 4)

    result: Mat = m.add(Mat2d(1.0)).mul(3.0).sub(Mat2d(0, 1, 2, 3)).div(2.0)

    assert result is m
    assert m == Mat2d(3.0, 4.0, 5.0, 6.0)


def test_operators_return_new_matrices() -> None:
    a: Mat = Mat2d(1, 2, 3, 4)
    b: Mat = Mat2d(4, 3, 2, 1)

    assert a + b == Mat2d(5.0)
    assert a - b == Mat2d(-3, -1, 1, 3)
    assert a * 2 == Mat2d(2, 4, 6, 8)
    assert 2 * a == Mat2d(2, 4, 6, 8)
    assert a / 2 == Mat2d(0.5, 1.0, 1.5, 2.0)
    assert a == Mat2d(1, 2, 3, 4)


def test_augmented_operators_mutate() -> None:
    m: Mat = Mat2d(1, 2, 3, 4)
    alias: Mat = m

    m += Mat2d(1.0)
    m *= 2
    m -= Mat2d(2.0)
    m /= 2

    assert alias is m
    assert m == Mat2d(1, 2, 3, 4)


def test_elementwise_shape_mismatch_raises() -> None:
    with pytest.raises(ShapeError):
        Mat2d().add(Mat3d())
    with pytest.raises(ShapeError):
        Mat2d() - Mat23d()
    with pytest.raises(TypeError):
        Mat2d().mul(Mat2d())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Mat2d().add(1.0)  # type: ignore[arg-type]


def test_integer_division() -> None:
    """Ensure integer division truncates and rejects zero."""
    m: Mat = Mat2i(7, -7, 5, 3)

    m.div(2)

    assert list(m.data) == [3, -3, 2, 1]
    with pytest.raises(ZeroDivisionError):
        m.div(0)


def test_float_division_by_zero_propagates() -> None:
    m: Mat = Mat2d(1, -1, 0, 2)

    m.div(0.0)

    assert math.isinf(m[0, 0]) and m[0, 0] > 0
    assert math.isinf(m[0, 1]) and m[0, 1] < 0
    assert math.isnan(m[1, 0])


def test_transpose() -> None:
    """Ensure transpose swaps rows and columns into a new matrix."""
    m: Mat = Mat23d(1, 2, 3, 4, 5, 6)

    t: Mat = m.transpose()

    assert type(t) is Mat[np.float64, 3, 2]
    assert t == Mat[np.float64, 3, 2]([[1, 4], [2, 5], [3, 6]])
    assert t.transpose() == m
    assert m == Mat23d(1, 2, 3, 4, 5, 6)


def test_multiply_matrices() -> None:
    """Ensure matrix products have ROWS x other.COLS shape."""
    a: Mat = Mat23d(1, 2, 3, 4, 5, 6)
    b: Mat = Mat[np.float64, 3, 2](7, 8, 9, 10, 11, 12)

    product: Mat = a.multiply(b)

    assert type(product) is Mat2d
    assert product == Mat2d(58, 64, 139, 154)
    assert a @ b == product


def test_multiply_by_identity() -> None:
    """Ensure identity is neutral on both sides."""
    m: Mat = Mat3d(2, -1, 0.5, 3, 7, -4, 1, 0, 9)
    identity: Mat = Mat3d.identity()

    assert m.multiply(identity) == m
    assert identity.multiply(m) == m


def test_multiply_vector() -> None:
    """Ensure a matrix maps a COLS-vector to a ROWS-vector."""
    m: Mat = Mat23d(1, -1, 2, 0, -3, 1)

    result: Vec = m.multiply(Vec3d(2.0, 1.0, 0.0))

    assert type(result) is Vec2d
    assert result == Vec2d(1.0, -3.0)
    assert m @ Vec3d(2.0, 1.0, 0.0) == result


def test_multiply_shape_mismatch_raises() -> None:
    with pytest.raises(ShapeError):
        Mat23d().multiply(Mat23d())
    with pytest.raises(ShapeError):
        Mat23d().multiply(Vec2d())
    with pytest.raises(TypeError):
        Mat23d().multiply(2.0)  # type: ignore[arg-type]


def test_row_switch() -> None:
    m: Mat = Mat[np.float64, 3, 2](1, 2, 3, 4, 5, 6)

    assert m.row_switch(0, 2) is m
    assert m == Mat[np.float64, 3, 2](5, 6, 3, 4, 1, 2)

    m.row_switch(1, 1)
    assert m == Mat[np.float64, 3, 2](5, 6, 3, 4, 1, 2)


def test_row_multiply() -> None:
    m: Mat = Mat2d(1, 2, 3, 4)

    m.row_multiply(1, -2.0)

    assert m == Mat2d(1, 2, -6, -8)


def test_row_multiply_integer_truncates() -> None:
    m: Mat = Mat2i(1, 2, 3, 4)

    m.row_multiply(1, 0.5)

    assert list(m.data) == [1, 2, 1, 2]


def test_row_add_overwrites() -> None:
    """Ensure row_add replaces the destination with the scaled source."""
    m: Mat = Mat2d(1, 2, 3, 4)

    m.row_add(0, 2.0, 1)

    assert m == Mat2d(6, 8, 3, 4)


def test_row_add_accumulates() -> None:
    """Ensure accumulate adds the scaled source to the destination."""
    m: Mat = Mat2d(1, 2, 3, 4)

    m.row_add(0, 2.0, 1, accumulate=True)

    assert m == Mat2d(7, 10, 3, 4)


def test_row_operation_bounds() -> None:
    m: Mat = Mat2d()

    with pytest.raises(BoundsError):
        m.row_switch(0, 2)
    with pytest.raises(BoundsError):
        m.row_multiply(-1, 2.0)
    with pytest.raises(BoundsError):
        m.row_add(0, 1.0, 5)


def test_sub_matrix() -> None:
    """Ensure rows and columns are removed preserving order."""
    m: Mat = Mat34d([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])

    sub: Mat = m.sub_matrix([2], [1])

    assert type(sub) is Mat23d
    assert sub == Mat23d([[1, 3, 4], [5, 7, 8]])
    assert m.ROWS == 3


def test_sub_matrix_columns_only() -> None:
    m: Mat = Mat[np.float64, 2, 4]([[1, 2, 3, 4], [5, 6, 7, 8]])

    sub: Mat = m.sub_matrix([], [0, 1])

    assert sub == Mat2d([[3, 4], [7, 8]])


def test_sub_matrix_ignores_duplicates() -> None:
    m: Mat = Mat34d(np.arange(12.0))

    sub: Mat = m.sub_matrix([0, 0], [3, 3, 1])

    assert sub == Mat[np.float64, 2, 2]([[4, 6], [8, 10]])


def test_sub_matrix_errors() -> None:
    m: Mat = Mat2d(1, 2, 3, 4)

    with pytest.raises(BoundsError):
        m.sub_matrix([2], [])
    with pytest.raises(ShapeError):
        m.sub_matrix([0, 1], [0])
    with pytest.raises(ShapeError):
        m.sub_matrix([], [0, 1])


def test_equality_and_hashing() -> None:
    assert Mat2d(1, 2, 3, 4) == Mat2d([[1, 2], [3, 4]])
    assert Mat2d(1, 2, 3, 4) != Mat2d(1, 2, 3, 5)
    assert Mat2d(1, 2, 3, 4) != Mat[np.float64, 1, 4](1, 2, 3, 4)
    with pytest.raises(TypeError):
        hash(Mat2d())


def test_almost_equal() -> None:
    m: Mat = Mat2d(1, 2, 3, 4)

    assert m.almost_equal(Mat2d(1, 2, 3, 4 + 1e-12))
    assert not m.almost_equal(Mat2d(1, 2, 3, 4.1))
    assert m.almost_equal(Mat2d(1, 2, 3, 4.1), atol=0.5)
    assert not m.almost_equal(Mat23d())


def test_string_rendering() -> None:
    """Ensure each row renders with right-aligned columns."""
    m: Mat = Mat2d(1, -2.5, 10, 0)

    assert str(m) == "|   1,  -2.5 |\n|  10,     0 |"
    assert repr(Mat2i(1, 2, 3, 4)) == "Mat[int32, 2, 2]([[1, 2], [3, 4]])"


def test_int64_division_is_exact() -> None:
    """Ensure 64-bit integer matrix division keeps every bit."""
    m: Mat = Mat[np.int64, 1, 2](2**62 + 1, -(2**62) - 1)

    m.div(1)

    assert m.to_array().tolist() == [[2**62 + 1, -(2**62) - 1]]


def test_almost_equal_requires_matrix() -> None:
    with pytest.raises(TypeError):
        Mat2d(1, 2, 3, 4).almost_equal([1, 2, 3, 4])  # type: ignore[arg-type]
