################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-size vector types and elementwise 3-vector arithmetic.

Vector3 is single precision and Vector3d is double precision. Arithmetic is
performed in the dtype of the left operand. Division by a zero scalar yields
inf/NaN components, following IEEE 754, and is not reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Sequence
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from .validation import RENDER_DTYPE
from .validation import ROTATION_DTYPE
from .validation import as_array
from .validation import as_triple


_VectorT = TypeVar("_VectorT", bound="_Vector3Base")


@dataclass(frozen=True, eq=False)
class _Vector3Base:
    """Shared storage and operators for 3-vectors."""

    v: np.ndarray

    _DTYPE = ROTATION_DTYPE

    def __post_init__(self) -> None:
        """Coerce storage to the vector dtype."""
        object.__setattr__(self, "v", as_array(self.v, self._DTYPE, (3,), "v"))

    @classmethod
    def from_xyz(cls: type[_VectorT], x: float, y: float, z: float) -> _VectorT:
        """Create a vector from components."""
        return cls(np.array([x, y, z], dtype=cls._DTYPE))

    @classmethod
    def zeros(cls: type[_VectorT]) -> _VectorT:
        """Return the zero vector."""
        return cls(np.zeros(3, dtype=cls._DTYPE))

    @property
    def x(self) -> float:
        return float(self.v[0])

    @property
    def y(self) -> float:
        return float(self.v[1])

    @property
    def z(self) -> float:
        return float(self.v[2])

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the components as Python floats."""
        return (self.x, self.y, self.z)

    def __add__(self: _VectorT, other: Any) -> _VectorT:
        return add(self, other)

    def __sub__(self: _VectorT, other: Any) -> _VectorT:
        return sub(self, other)

    def __mul__(self: _VectorT, scalar: float) -> _VectorT:
        return scale(self, scalar)

    def __rmul__(self: _VectorT, scalar: float) -> _VectorT:
        return scale(self, scalar)

    def __truediv__(self: _VectorT, scalar: float) -> _VectorT:
        return divide(self, scalar)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Vector3(_Vector3Base):
    """Single-precision 3-vector."""

    _DTYPE = RENDER_DTYPE


@dataclass(frozen=True, eq=False, repr=False)
class Vector3d(_Vector3Base):
    """Double-precision 3-vector."""

    _DTYPE = ROTATION_DTYPE


@dataclass(frozen=True, eq=False)
class Vector2:
    """Single-precision 2-vector."""

    v: NDArray[np.float32]

    def __post_init__(self) -> None:
        """Coerce storage to float32."""
        object.__setattr__(self, "v", as_array(self.v, RENDER_DTYPE, (2,), "v"))

    @staticmethod
    def from_xy(x: float, y: float) -> "Vector2":
        """Create a vector from components."""
        return Vector2(np.array([x, y], dtype=RENDER_DTYPE))

    @property
    def x(self) -> float:
        return float(self.v[0])

    @property
    def y(self) -> float:
        return float(self.v[1])


@dataclass(frozen=True, eq=False)
class Vector4:
    """Single-precision homogeneous 4-vector stored as (x, y, z, w)."""

    v: NDArray[np.float32]

    def __post_init__(self) -> None:
        """Coerce storage to float32."""
        object.__setattr__(self, "v", as_array(self.v, RENDER_DTYPE, (4,), "v"))

    @staticmethod
    def from_xyzw(x: float, y: float, z: float, w: float) -> "Vector4":
        """Create a vector from components."""
        return Vector4(np.array([x, y, z, w], dtype=RENDER_DTYPE))

    @staticmethod
    def from_point(point: Any) -> "Vector4":
        """Return the homogeneous point (x, y, z, 1)."""
        xyz: NDArray[np.float32] = as_triple(point, RENDER_DTYPE, "point")
        return Vector4(np.append(xyz, RENDER_DTYPE(1.0)))

    @property
    def x(self) -> float:
        return float(self.v[0])

    @property
    def y(self) -> float:
        return float(self.v[1])

    @property
    def z(self) -> float:
        return float(self.v[2])

    @property
    def w(self) -> float:
        return float(self.v[3])


Vector3Like = Union[_Vector3Base, Sequence[float], np.ndarray]


def add(lhs: _VectorT, rhs: Vector3Like) -> _VectorT:
    """Add a vector or a plain 3-element triple elementwise."""
    other: np.ndarray = as_triple(rhs, lhs._DTYPE, "rhs")
    with np.errstate(over="ignore", invalid="ignore"):
        result: np.ndarray = lhs.v + other
    return type(lhs)(result)


def sub(lhs: _VectorT, rhs: Vector3Like) -> _VectorT:
    """Subtract a vector or a plain 3-element triple elementwise."""
    other: np.ndarray = as_triple(rhs, lhs._DTYPE, "rhs")
    with np.errstate(over="ignore", invalid="ignore"):
        result: np.ndarray = lhs.v - other
    return type(lhs)(result)


def scale(lhs: _VectorT, scalar: float) -> _VectorT:
    """Multiply every component by a scalar."""
    factor: np.generic = lhs._DTYPE(scalar)
    with np.errstate(over="ignore", invalid="ignore"):
        result: np.ndarray = lhs.v * factor
    return type(lhs)(result)


def divide(lhs: _VectorT, scalar: float) -> _VectorT:
    """Divide every component by a scalar.

    A zero divisor gives signed infinities (or NaN for zero components)
    instead of raising.
    """
    divisor: np.generic = lhs._DTYPE(scalar)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        result: np.ndarray = lhs.v / divisor
    return type(lhs)(result)
