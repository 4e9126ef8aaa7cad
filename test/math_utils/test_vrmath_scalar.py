################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for scalar helpers."""

from __future__ import annotations

import math

from oasis_vrmath.math_utils.scalar import signum


def test_signum_values() -> None:
    """Checks signum for positive, negative and zero inputs."""
    assert signum(2.5) == 1
    assert signum(-0.001) == -1
    assert signum(0.0) == 0
    assert signum(-0.0) == 0
    assert signum(7) == 1


def test_signum_nan_is_zero() -> None:
    """NaN compares false both ways and maps to zero."""
    assert signum(math.nan) == 0
    assert signum(-math.inf) == -1
