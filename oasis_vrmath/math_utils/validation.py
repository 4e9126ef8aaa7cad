################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Shape and dtype coercion helpers for the VR math value types.

Only structure is checked here. Values are never inspected, so NaN and Inf
pass through untouched.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike


# Storage dtype for rotation math
ROTATION_DTYPE: type = np.float64
# Storage dtype for render-side vectors, matrices and projection math
RENDER_DTYPE: type = np.float32


def ensure_shape(x: np.ndarray, shape: tuple[int, ...], name: str) -> None:
    """Ensure an array has the expected shape."""
    if x.shape != shape:
        raise ValueError(f"{name} must have shape {shape}")


def as_array(
    value: Any, dtype: DTypeLike, shape: tuple[int, ...], name: str
) -> np.ndarray:
    """Coerce a value to a new array with a fixed dtype and shape."""
    array: np.ndarray = np.array(value, dtype=dtype)
    ensure_shape(array, shape, name)
    return array


def as_triple(value: Any, dtype: DTypeLike, name: str) -> np.ndarray:
    """Coerce a vector type or a plain 3-element sequence to an array."""
    raw: Any = getattr(value, "v", value)
    return as_array(raw, dtype, (3,), name)
