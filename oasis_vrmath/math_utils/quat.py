################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion algebra using the wxyz convention.

Quaternions are double precision. Rotation helpers assume a unit quaternion
but never normalize; results of add, sub and multiply are returned raw.

Composition uses the Hamilton product. For q = q1 * q2 the rotation of q2 is
applied first, then q1, matching the sandwich product used by
rotate_vector():

    v' = q * (0, v) * conj(q)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .validation import RENDER_DTYPE
from .validation import ROTATION_DTYPE
from .validation import as_triple
from .vector import Vector3d
from .vector import Vector3Like


if TYPE_CHECKING:
    from .matrix import Matrix34


def _half_angle(angle: float) -> tuple[float, float]:
    """Return (cos(angle / 2), sin(angle / 2)) with IEEE semantics."""
    ha: np.float64 = np.float64(angle) / 2
    with np.errstate(invalid="ignore"):
        return float(np.cos(ha)), float(np.sin(ha))


@dataclass(frozen=True)
class Quaternion:
    """Quaternion w + xi + yj + zk stored as double-precision components."""

    w: float
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Coerce components to Python floats."""
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @staticmethod
    def identity() -> "Quaternion":
        """Return the identity quaternion."""
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> "Quaternion":
        """Create a quaternion from components."""
        return Quaternion(w, x, y, z)

    @staticmethod
    def from_array(wxyz: NDArray[np.float64]) -> "Quaternion":
        """Create a quaternion from a length-4 wxyz array."""
        arr: NDArray[np.float64] = np.asarray(wxyz, dtype=ROTATION_DTYPE)
        if arr.shape != (4,):
            raise ValueError("wxyz must be shape (4,)")
        return Quaternion(arr[0], arr[1], arr[2], arr[3])

    @staticmethod
    def from_rotation_axis(
        angle: float, ux: float, uy: float, uz: float
    ) -> "Quaternion":
        """Create a quaternion rotating by angle radians about a unit axis.

        The axis is not normalized; a non-unit axis gives a non-unit result.
        """
        cos_ha: float
        sin_ha: float
        cos_ha, sin_ha = _half_angle(angle)
        return Quaternion(cos_ha, ux * sin_ha, uy * sin_ha, uz * sin_ha)

    @staticmethod
    def from_rotation_x(angle: float) -> "Quaternion":
        """Create a rotation about the X axis."""
        cos_ha: float
        sin_ha: float
        cos_ha, sin_ha = _half_angle(angle)
        return Quaternion(cos_ha, sin_ha, 0.0, 0.0)

    @staticmethod
    def from_rotation_y(angle: float) -> "Quaternion":
        """Create a rotation about the Y axis."""
        cos_ha: float
        sin_ha: float
        cos_ha, sin_ha = _half_angle(angle)
        return Quaternion(cos_ha, 0.0, sin_ha, 0.0)

    @staticmethod
    def from_rotation_z(angle: float) -> "Quaternion":
        """Create a rotation about the Z axis."""
        cos_ha: float
        sin_ha: float
        cos_ha, sin_ha = _half_angle(angle)
        return Quaternion(cos_ha, 0.0, 0.0, sin_ha)

    @staticmethod
    def from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> "Quaternion":
        """Create a rotation as RotY(yaw) * RotX(pitch) * RotZ(roll)."""
        return (
            Quaternion.from_rotation_y(yaw)
            * Quaternion.from_rotation_x(pitch)
            * Quaternion.from_rotation_z(roll)
        )

    @staticmethod
    def from_rotation_matrix(mat: "Matrix34") -> "Quaternion":
        """Create a quaternion from the 3x3 rotation block of an affine matrix.

        The branch is chosen on the trace first, then on the largest diagonal
        element with ties resolved in m00, m11, m22 order. The vector part is
        negated after the branch, which yields the quaternion representing the
        same rotation as the column-vector matrix (up to overall sign).

        The trace and the pairwise element sums and differences are formed in
        single precision. Everything from the square root onward is double
        precision.
        """
        a: NDArray[np.float32] = np.asarray(mat.m, dtype=RENDER_DTYPE)
        m00: np.float32 = a[0, 0]
        m01: np.float32 = a[0, 1]
        m02: np.float32 = a[0, 2]
        m10: np.float32 = a[1, 0]
        m11: np.float32 = a[1, 1]
        m12: np.float32 = a[1, 2]
        m20: np.float32 = a[2, 0]
        m21: np.float32 = a[2, 1]
        m22: np.float32 = a[2, 2]
        one: np.float64 = ROTATION_DTYPE(1.0)

        w: np.float64
        x: np.float64
        y: np.float64
        z: np.float64
        s: np.float64
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            trace: np.float32 = m00 + m11 + m22
            if trace > 0:
                s = 0.5 / np.sqrt(ROTATION_DTYPE(trace) + one)
                w = 0.25 / s
                x = ROTATION_DTYPE(m12 - m21) * s
                y = ROTATION_DTYPE(m20 - m02) * s
                z = ROTATION_DTYPE(m01 - m10) * s
            elif m00 > m11 and m00 > m22:
                s = 2.0 * np.sqrt(
                    one
                    + ROTATION_DTYPE(m00)
                    - ROTATION_DTYPE(m11)
                    - ROTATION_DTYPE(m22)
                )
                w = ROTATION_DTYPE(m12 - m21) / s
                x = 0.25 * s
                y = ROTATION_DTYPE(m10 + m01) / s
                z = ROTATION_DTYPE(m20 + m02) / s
            elif m11 > m22:
                s = 2.0 * np.sqrt(
                    one
                    + ROTATION_DTYPE(m11)
                    - ROTATION_DTYPE(m00)
                    - ROTATION_DTYPE(m22)
                )
                w = ROTATION_DTYPE(m20 - m02) / s
                x = ROTATION_DTYPE(m10 + m01) / s
                y = 0.25 * s
                z = ROTATION_DTYPE(m21 + m12) / s
            else:
                s = 2.0 * np.sqrt(
                    one
                    + ROTATION_DTYPE(m22)
                    - ROTATION_DTYPE(m00)
                    - ROTATION_DTYPE(m11)
                )
                w = ROTATION_DTYPE(m01 - m10) / s
                x = ROTATION_DTYPE(m20 + m02) / s
                y = ROTATION_DTYPE(m21 + m12) / s
                z = 0.25 * s

        return Quaternion(w, -x, -y, -z)

    def to_wxyz(self) -> NDArray[np.float64]:
        """Return the components as a float64 array."""
        return np.array([self.w, self.x, self.y, self.z], dtype=ROTATION_DTYPE)

    def norm_squared(self) -> float:
        """Return w^2 + x^2 + y^2 + z^2."""
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def conjugate(self) -> "Quaternion":
        """Return the conjugate, which is the inverse for a unit quaternion."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def __add__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            self.w + other.w,
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
        )

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            self.w - other.w,
            self.x - other.x,
            self.y - other.y,
            self.z - other.z,
        )

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Multiply two quaternions using the Hamilton product."""
        w1: float = self.w
        x1: float = self.x
        y1: float = self.y
        z1: float = self.z
        w2: float = other.w
        x2: float = other.x
        y2: float = other.y
        z2: float = other.z
        return Quaternion(
            (w1 * w2) - (x1 * x2) - (y1 * y2) - (z1 * z2),
            (w1 * x2) + (x1 * w2) + (y1 * z2) - (z1 * y2),
            (w1 * y2) + (y1 * w2) + (z1 * x2) - (x1 * z2),
            (w1 * z2) + (z1 * w2) + (x1 * y2) - (y1 * x2),
        )

    def rotate_vector(
        self,
        vector: Vector3Like,
        reverse: bool = False,
        quat_inv: Optional["Quaternion"] = None,
    ) -> Vector3d:
        """Rotate a 3-vector with the sandwich product.

        Args:
            vector: Vector3d or plain 3-element sequence
            reverse: Apply the inverse rotation conj(q) * p * q
            quat_inv: Precomputed conjugate of this quaternion, for rotating
                many vectors by the same rotation

        Returns:
            The xyz part of the rotated pure quaternion. The w part is
            discarded without being checked.
        """
        return rotate_vector(self, vector, reverse=reverse, quat_inv=quat_inv)

    def almost_equal(self, other: "Quaternion", atol: float = 1e-9) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        q1: NDArray[np.float64] = self.to_wxyz()
        q2: NDArray[np.float64] = other.to_wxyz()
        if np.allclose(q1, q2, atol=atol):
            return True
        return bool(np.allclose(q1, -q2, atol=atol))


def rotate_vector(
    quat: Quaternion,
    vector: Vector3Like,
    reverse: bool = False,
    quat_inv: Optional[Quaternion] = None,
) -> Vector3d:
    """Rotate a 3-vector by a quaternion, see Quaternion.rotate_vector()."""
    v: NDArray[np.float64] = as_triple(vector, ROTATION_DTYPE, "vector")
    if quat_inv is None:
        quat_inv = quat.conjugate()

    pin: Quaternion = Quaternion(0.0, v[0], v[1], v[2])
    pout: Quaternion
    if reverse:
        pout = quat_inv * pin * quat
    else:
        pout = quat * pin * quat_inv

    return Vector3d.from_xyz(pout.x, pout.y, pout.z)
