################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Affine 3x4 and projective 4x4 matrices.

Matrices are single precision and row major. For a Matrix34, rows 0..2 and
columns 0..2 hold the rotation/scale block and column 3 holds the
translation. Block operations touch only the 3x3 block.

Products are accumulated in k order, one term at a time, in the precision of
the operands so results do not depend on the BLAS backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Optional
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .quat import Quaternion
from .validation import RENDER_DTYPE
from .validation import ROTATION_DTYPE
from .validation import as_array
from .validation import as_triple
from .vector import Vector3
from .vector import Vector3d
from .vector import Vector4


_Vector3T = TypeVar("_Vector3T", Vector3, Vector3d)


@dataclass(frozen=True, eq=False)
class Matrix34:
    """Affine transform stored as a 3x4 float32 array."""

    m: NDArray[np.float32]

    def __post_init__(self) -> None:
        """Coerce storage to a float32 (3, 4) array."""
        object.__setattr__(self, "m", as_array(self.m, RENDER_DTYPE, (3, 4), "m"))

    @staticmethod
    def identity() -> "Matrix34":
        """Return the identity transform."""
        return Matrix34(np.eye(3, 4, dtype=RENDER_DTYPE))

    @staticmethod
    def from_rotation(q: Quaternion, translation: Optional[Any] = None) -> "Matrix34":
        """Build the rotation block of a quaternion plus an optional translation.

        The block maps column vectors, R @ v, and equals the rotation applied
        by Quaternion.rotate_vector(). The quaternion is used as given,
        without normalization.
        """
        w: float = q.w
        x: float = q.x
        y: float = q.y
        z: float = q.z
        mat: NDArray[np.float64] = np.zeros((3, 4), dtype=ROTATION_DTYPE)
        mat[:, :3] = [
            [
                1.0 - 2.0 * (y * y + z * z),
                2.0 * (x * y - z * w),
                2.0 * (x * z + y * w),
            ],
            [
                2.0 * (x * y + z * w),
                1.0 - 2.0 * (x * x + z * z),
                2.0 * (y * z - x * w),
            ],
            [
                2.0 * (x * z - y * w),
                2.0 * (y * z + x * w),
                1.0 - 2.0 * (x * x + y * y),
            ],
        ]
        if translation is not None:
            mat[:, 3] = as_triple(translation, ROTATION_DTYPE, "translation")
        return Matrix34(mat)

    @property
    def rotation(self) -> NDArray[np.float32]:
        """Return a copy of the 3x3 block."""
        return self.m[:, :3].copy()

    @property
    def translation(self) -> Vector3:
        """Return the translation column."""
        return Vector3(self.m[:, 3])


@dataclass(frozen=True, eq=False)
class Matrix44:
    """Projective transform stored as a 4x4 float32 array."""

    m: NDArray[np.float32]

    def __post_init__(self) -> None:
        """Coerce storage to a float32 (4, 4) array."""
        object.__setattr__(self, "m", as_array(self.m, RENDER_DTYPE, (4, 4), "m"))

    @staticmethod
    def zeros() -> "Matrix44":
        """Return the zero matrix."""
        return Matrix44(np.zeros((4, 4), dtype=RENDER_DTYPE))

    @staticmethod
    def identity() -> "Matrix44":
        """Return the identity matrix."""
        return Matrix44(np.eye(4, dtype=RENDER_DTYPE))


def _ensure_vector3(v: Any, name: str) -> None:
    if not isinstance(v, (Vector3, Vector3d)):
        raise TypeError(f"{name} must be a Vector3 or Vector3d")


class Mat33:
    """Operations on the 3x3 rotation block of a Matrix34."""

    @staticmethod
    def mul(a: Matrix34, b: Matrix34) -> Matrix34:
        """Multiply the 3x3 blocks of two affine matrices.

        The translation column of the result is zero; composing translations
        is left to the caller.
        """
        lhs: NDArray[np.float32] = a.m[:, :3]
        rhs: NDArray[np.float32] = b.m[:, :3]
        result: NDArray[np.float32] = np.zeros((3, 4), dtype=RENDER_DTYPE)
        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(3):
                result[:, :3] += np.outer(lhs[:, k], rhs[k, :])
        return Matrix34(result)

    @staticmethod
    def mul_vector(a: Matrix34, b: _Vector3T) -> _Vector3T:
        """Return the column-vector product result[i] = sum_k a[i][k] * b[k].

        A Vector3 is multiplied in single precision and a Vector3d in double
        precision; the result has the type of b.
        """
        _ensure_vector3(b, "b")
        dtype: type = b._DTYPE
        block: np.ndarray = a.m[:, :3].astype(dtype)
        vec: np.ndarray = b.v
        result: np.ndarray = np.zeros(3, dtype=dtype)
        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(3):
                result += block[:, k] * vec[k]
        return type(b)(result)

    @staticmethod
    def vector_mul(a: _Vector3T, b: Matrix34) -> _Vector3T:
        """Return the row-vector product result[i] = sum_k a[k] * b[k][i]."""
        _ensure_vector3(a, "a")
        dtype: type = a._DTYPE
        block: np.ndarray = b.m[:, :3].astype(dtype)
        vec: np.ndarray = a.v
        result: np.ndarray = np.zeros(3, dtype=dtype)
        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(3):
                result += vec[k] * block[k, :]
        return type(a)(result)

    @staticmethod
    def transpose(a: Matrix34) -> Matrix34:
        """Transpose the 3x3 block and keep the translation column.

        For an orthonormal rotation block this is the inverse rotation.
        """
        result: NDArray[np.float32] = np.empty((3, 4), dtype=RENDER_DTYPE)
        result[:, :3] = a.m[:, :3].T
        result[:, 3] = a.m[:, 3]
        return Matrix34(result)


class Mat44:
    """Operations on 4x4 matrices."""

    @staticmethod
    def vector_mul(a: Vector4, b: Matrix44) -> Vector4:
        """Return result[i] = sum_k a[k] * b[i][k].

        The vector is dotted with the rows of b, so this equals b @ a for a
        column vector a.
        """
        result: NDArray[np.float32] = np.zeros(4, dtype=RENDER_DTYPE)
        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(4):
                result += a.v[k] * b.m[:, k]
        return Vector4(result)
