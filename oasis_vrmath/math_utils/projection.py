################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Off-axis perspective projection for a single eye.

All arithmetic is single precision. The projection matrix is

    [ 2*idx  0      sx*idx            0                    ]
    [ 0      2*idy  sy*idy            0                    ]
    [ 0      0      (far+near)*idz    2*far*near*idz       ]
    [ 0      0      -1                0                    ]

with idx = 1/(right-left), idy = 1/(bottom-top), idz = 1/(near-far),
sx = right+left and sy = bottom+top. Points are projected with the row
convention of Mat44.vector_mul() followed by the perspective divide.

Degenerate frusta and points with w == 0 produce inf/NaN silently.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..config.vrmath_config import VrMathConfig
from .matrix import Mat44
from .matrix import Matrix44
from .rect import Rect2
from .validation import RENDER_DTYPE
from .validation import ensure_shape
from .vector import Vector3
from .vector import Vector4


class Projection:
    """Projection matrix construction and point projection."""

    @staticmethod
    def make_projection(
        left: float,
        right: float,
        top: float,
        bottom: float,
        z_near: float,
        z_far: float,
        out: Optional[NDArray[np.float32]] = None,
    ) -> Matrix44:
        """Build an asymmetric perspective projection matrix.

        Args:
            left: Left extent of the frustum slice
            right: Right extent of the frustum slice
            top: Top extent of the frustum slice
            bottom: Bottom extent of the frustum slice
            z_near: Near clip distance
            z_far: Far clip distance
            out: Optional (4, 4) array overwritten with the result

        Returns:
            The projection matrix
        """
        f_left: np.float32 = RENDER_DTYPE(left)
        f_right: np.float32 = RENDER_DTYPE(right)
        f_top: np.float32 = RENDER_DTYPE(top)
        f_bottom: np.float32 = RENDER_DTYPE(bottom)
        f_near: np.float32 = RENDER_DTYPE(z_near)
        f_far: np.float32 = RENDER_DTYPE(z_far)
        one: np.float32 = RENDER_DTYPE(1.0)
        two: np.float32 = RENDER_DTYPE(2.0)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            idx: np.float32 = one / (f_right - f_left)
            idy: np.float32 = one / (f_bottom - f_top)
            idz: np.float32 = one / (f_near - f_far)
            sx: np.float32 = f_right + f_left
            sy: np.float32 = f_bottom + f_top

            p: NDArray[np.float32] = np.zeros((4, 4), dtype=RENDER_DTYPE)
            p[0, 0] = two * idx
            p[0, 2] = sx * idx
            p[1, 1] = two * idy
            p[1, 2] = sy * idy
            p[2, 2] = (f_far + f_near) * idz
            p[2, 3] = two * f_far * f_near * idz
            p[3, 2] = RENDER_DTYPE(-1.0)

        if out is not None:
            ensure_shape(out, (4, 4), "out")
            out[...] = p

        return Matrix44(p)

    @staticmethod
    def make_projection_from_rect(
        eye: Rect2,
        z_near: float,
        z_far: float,
        out: Optional[NDArray[np.float32]] = None,
    ) -> Matrix44:
        """Build a projection matrix from an eye rectangle."""
        return Projection.make_projection(
            eye.top_left.x,
            eye.bottom_right.x,
            eye.top_left.y,
            eye.bottom_right.y,
            z_near,
            z_far,
            out=out,
        )

    @staticmethod
    def make_default_projection(eye: Rect2, config: VrMathConfig) -> Matrix44:
        """Build a projection matrix using the configured clip planes."""
        return Projection.make_projection_from_rect(
            eye, config.z_near(), config.z_far()
        )

    @staticmethod
    def project(proj_mat: Matrix44, p: Vector4) -> Vector3:
        """Project a homogeneous point to normalized device coordinates."""
        clip: Vector4 = Mat44.vector_mul(p, proj_mat)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            pd: np.float32 = RENDER_DTYPE(1.0) / clip.v[3]
            ndc: NDArray[np.float32] = clip.v[:3] * pd
        return Vector3(ndc)
