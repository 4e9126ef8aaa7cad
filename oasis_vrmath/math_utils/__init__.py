################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion, vector, matrix and projection math for VR poses."""

from __future__ import annotations

from oasis_vrmath.math_utils.matrix import Mat33
from oasis_vrmath.math_utils.matrix import Mat44
from oasis_vrmath.math_utils.matrix import Matrix34
from oasis_vrmath.math_utils.matrix import Matrix44
from oasis_vrmath.math_utils.projection import Projection
from oasis_vrmath.math_utils.quat import Quaternion
from oasis_vrmath.math_utils.quat import rotate_vector
from oasis_vrmath.math_utils.rect import Rect2
from oasis_vrmath.math_utils.scalar import signum
from oasis_vrmath.math_utils.vector import Vector2
from oasis_vrmath.math_utils.vector import Vector3
from oasis_vrmath.math_utils.vector import Vector3d
from oasis_vrmath.math_utils.vector import Vector4


__all__ = [
    "Mat33",
    "Mat44",
    "Matrix34",
    "Matrix44",
    "Projection",
    "Quaternion",
    "Rect2",
    "Vector2",
    "Vector3",
    "Vector3d",
    "Vector4",
    "rotate_vector",
    "signum",
]
