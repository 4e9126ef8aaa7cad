################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the degeneracy monitor."""

from __future__ import annotations

import dataclasses
import logging
import math

import numpy as np
import pytest

from oasis_vrmath.config.vrmath_config import VrMathConfig
from oasis_vrmath.config.vrmath_params import VrMathParams
from oasis_vrmath.diagnostics import DegeneracyMonitor
from oasis_vrmath.math_utils.matrix import Matrix34
from oasis_vrmath.math_utils.quat import Quaternion
from oasis_vrmath.math_utils.vector import Vector3d


def _disabled_config() -> VrMathConfig:
    params: VrMathParams = VrMathParams.defaults()
    return VrMathConfig(
        params.replace(
            diagnostics=dataclasses.replace(params.diagnostics, enabled=False)
        )
    )


def test_unit_quaternion_passes() -> None:
    """A unit quaternion passes without issues."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    q: Quaternion = Quaternion.from_yaw_pitch_roll(0.1, 0.2, 0.3)
    assert monitor.check_quaternion(q, "pose")
    assert monitor.issues == 0


def test_non_unit_quaternion_logged(caplog: pytest.LogCaptureFixture) -> None:
    """A non-unit quaternion is logged and counted but not changed."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    q: Quaternion = Quaternion(1.0, 1.0, 0.0, 0.0)
    with caplog.at_level(logging.WARNING):
        assert not monitor.check_quaternion(q, "pose")
    assert "pose is not unit length" in caplog.text
    assert monitor.issues == 1
    assert monitor.counts() == {"quaternion": 1}
    assert q == Quaternion(1.0, 1.0, 0.0, 0.0)


def test_axis_and_divisor_checks() -> None:
    """Zero axes and zero divisors are reported."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    assert monitor.check_axis(0.0, 0.0, 1.0, "axis")
    assert not monitor.check_axis(0.0, 0.0, 0.0, "axis")
    assert monitor.check_divisor(2.0, "scale")
    assert not monitor.check_divisor(0.0, "scale")
    assert not monitor.check_divisor(math.nan, "scale")
    assert monitor.counts() == {"axis": 1, "divisor": 2}


def test_finite_check_accepts_value_types() -> None:
    """Vectors, matrices, quaternions and arrays are inspected."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    assert monitor.check_finite(Vector3d.from_xyz(1.0, 2.0, 3.0), "v")
    assert monitor.check_finite(Matrix34.identity(), "m")
    assert monitor.check_finite(Quaternion.identity(), "q")
    assert not monitor.check_finite(Vector3d.from_xyz(1.0, 2.0, 3.0) / 0.0, "v")
    assert not monitor.check_finite(np.array([np.nan]), "raw")
    assert monitor.issues == 2


def test_frustum_check() -> None:
    """Each degenerate frustum extent is reported."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    assert monitor.check_frustum(-1.0, 1.0, -1.0, 1.0, 0.1, 100.0)
    assert not monitor.check_frustum(1.0, 1.0, -1.0, -1.0, 0.1, 100.0)
    assert monitor.counts() == {"frustum": 2}
    assert monitor.issues == 2


def test_frustum_failures_kept_apart_from_divisors(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Frustum failures are counted and logged under their own kind."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    with caplog.at_level(logging.WARNING):
        assert not monitor.check_frustum(-1.0, 1.0, -1.0, 1.0, 5.0, 5.0)
        assert not monitor.check_divisor(0.0, "scale")
    assert monitor.counts() == {"frustum": 1, "divisor": 1}
    assert "frustum depth is degenerate" in caplog.text


def test_disabled_monitor_skips_checks() -> None:
    """A disabled monitor accepts everything."""
    monitor: DegeneracyMonitor = DegeneracyMonitor(_disabled_config())
    assert not monitor.enabled
    assert monitor.check_quaternion(Quaternion(0.0, 0.0, 0.0, 0.0), "q")
    assert monitor.check_divisor(0.0, "d")
    assert monitor.check_finite(np.array([np.inf]), "x")
    assert monitor.issues == 0


def test_reset_clears_counts() -> None:
    """reset() clears all counters."""
    monitor: DegeneracyMonitor = DegeneracyMonitor()
    monitor.check_divisor(0.0, "d")
    monitor.reset()
    assert monitor.issues == 0
    assert monitor.counts() == {}
