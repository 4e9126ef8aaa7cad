################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for vector types and arithmetic."""

from __future__ import annotations

import warnings

import numpy as np
import pytest

from oasis_vrmath.math_utils.vector import Vector2
from oasis_vrmath.math_utils.vector import Vector3
from oasis_vrmath.math_utils.vector import Vector3d
from oasis_vrmath.math_utils.vector import Vector4
from oasis_vrmath.math_utils.vector import add
from oasis_vrmath.math_utils.vector import divide
from oasis_vrmath.math_utils.vector import scale
from oasis_vrmath.math_utils.vector import sub


def test_add_literal() -> None:
    """Checks (1, 2, 3) + (4, 5, 6) = (5, 7, 9)."""
    result: Vector3d = Vector3d.from_xyz(1.0, 2.0, 3.0) + Vector3d.from_xyz(
        4.0, 5.0, 6.0
    )
    assert np.array_equal(result.v, np.array([5.0, 7.0, 9.0]))


def test_add_plain_triple() -> None:
    """Checks adding a plain sequence to a vector."""
    result: Vector3d = Vector3d.from_xyz(1.0, 2.0, 3.0) + [0.5, 0.5, 0.5]
    assert np.array_equal(result.v, np.array([1.5, 2.5, 3.5]))


def test_sub_vector_and_triple() -> None:
    """Checks subtraction of vectors and plain triples."""
    a: Vector3d = Vector3d.from_xyz(5.0, 7.0, 9.0)
    b: Vector3d = Vector3d.from_xyz(4.0, 5.0, 6.0)
    assert np.array_equal((a - b).v, np.array([1.0, 2.0, 3.0]))
    assert np.array_equal((a - (1.0, 1.0, 1.0)).v, np.array([4.0, 6.0, 8.0]))
    assert np.array_equal(sub(a, np.array([5.0, 7.0, 9.0])).v, np.zeros(3))


def test_scale_both_sides() -> None:
    """Checks scalar multiplication from either side."""
    v: Vector3d = Vector3d.from_xyz(1.0, 2.0, 3.0)
    assert np.array_equal((v * 2.0).v, np.array([2.0, 4.0, 6.0]))
    assert np.array_equal((2.0 * v).v, np.array([2.0, 4.0, 6.0]))
    assert np.array_equal(scale(v, -1.0).v, np.array([-1.0, -2.0, -3.0]))


def test_divide_literal() -> None:
    """Checks (2, 4, 6) / 2 = (1, 2, 3)."""
    result: Vector3d = Vector3d.from_xyz(2.0, 4.0, 6.0) / 2.0
    assert np.array_equal(result.v, np.array([1.0, 2.0, 3.0]))


def test_divide_by_zero_gives_infinity() -> None:
    """Division by a zero scalar yields inf/NaN components, not an error."""
    v: Vector3d = Vector3d.from_xyz(1.0, -2.0, 0.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result: Vector3d = divide(v, 0.0)
    assert result.v[0] == np.inf
    assert result.v[1] == -np.inf
    assert np.isnan(result.v[2])


def test_divide_by_zero_single_precision() -> None:
    """Single-precision division by zero also yields infinities."""
    result: Vector3 = Vector3.from_xyz(1.0, 2.0, 3.0) / 0.0
    assert np.all(np.isinf(result.v))
    assert result.v.dtype == np.float32


def test_precision_is_preserved() -> None:
    """Checks Vector3 stays float32 and Vector3d stays float64."""
    single: Vector3 = Vector3.from_xyz(0.1, 0.2, 0.3) + (0.1, 0.1, 0.1)
    double: Vector3d = Vector3d.from_xyz(0.1, 0.2, 0.3) + (0.1, 0.1, 0.1)
    assert single.v.dtype == np.float32
    assert double.v.dtype == np.float64
    assert (single * 3.0).v.dtype == np.float32
    assert isinstance(add(single, double), Vector3)


def test_no_normalization() -> None:
    """Arithmetic never normalizes its result."""
    v: Vector3d = Vector3d.from_xyz(3.0, 4.0, 0.0) * 10.0
    assert np.isclose(np.linalg.norm(v.v), 50.0)


def test_inputs_not_mutated() -> None:
    """Operators return new vectors and leave operands unchanged."""
    a: Vector3d = Vector3d.from_xyz(1.0, 2.0, 3.0)
    b: Vector3d = Vector3d.from_xyz(4.0, 5.0, 6.0)
    _ = a + b
    _ = a * 5.0
    assert np.array_equal(a.v, np.array([1.0, 2.0, 3.0]))
    assert np.array_equal(b.v, np.array([4.0, 5.0, 6.0]))


def test_shape_validation() -> None:
    """Wrong shapes raise ValueError."""
    with pytest.raises(ValueError):
        Vector3d(np.zeros(4))
    with pytest.raises(ValueError):
        Vector3d.zeros() + [1.0, 2.0]
    with pytest.raises(ValueError):
        Vector4(np.zeros(3))
    with pytest.raises(ValueError):
        Vector2(np.zeros(3))


def test_vector4_from_point() -> None:
    """Checks homogeneous point construction."""
    p: Vector4 = Vector4.from_point(Vector3d.from_xyz(1.0, 2.0, 3.0))
    assert np.array_equal(p.v, np.array([1.0, 2.0, 3.0, 1.0], dtype=np.float32))
    assert p.w == 1.0


def test_component_accessors() -> None:
    """Checks named component accessors."""
    v: Vector3d = Vector3d.from_xyz(1.0, 2.0, 3.0)
    assert v.to_tuple() == (1.0, 2.0, 3.0)
    q: Vector2 = Vector2.from_xy(-1.5, 2.5)
    assert (q.x, q.y) == (-1.5, 2.5)
