################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Eye rectangle on the near plane."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector2


@dataclass(frozen=True, eq=False)
class Rect2:
    """Frustum slice given by its top-left and bottom-right corners.

    Attributes:
        top_left: (left, top) tangent extents
        bottom_right: (right, bottom) tangent extents
    """

    top_left: Vector2
    bottom_right: Vector2

    def __post_init__(self) -> None:
        """Coerce corners to Vector2."""
        if not isinstance(self.top_left, Vector2):
            object.__setattr__(self, "top_left", Vector2(self.top_left))
        if not isinstance(self.bottom_right, Vector2):
            object.__setattr__(self, "bottom_right", Vector2(self.bottom_right))

    @staticmethod
    def from_extents(left: float, right: float, top: float, bottom: float) -> "Rect2":
        """Create a rect from the four frustum extents."""
        return Rect2(Vector2.from_xy(left, top), Vector2.from_xy(right, bottom))

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def right(self) -> float:
        return self.bottom_right.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def bottom(self) -> float:
        return self.bottom_right.y
