################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for VR math configuration wrapper."""

from __future__ import annotations

import pytest

from oasis_vrmath.config.vrmath_config import VrMathConfig
from oasis_vrmath.config.vrmath_config import VrMathConfigError
from oasis_vrmath.config.vrmath_params import ProjectionParams
from oasis_vrmath.config.vrmath_params import VrMathParams


def test_defaults_construct() -> None:
    """Default parameters should construct a VrMathConfig."""
    config: VrMathConfig = VrMathConfig.defaults()
    assert config.diagnostics_enabled()
    assert config.z_near() < config.z_far()


def test_inverted_clip_planes() -> None:
    """A far plane in front of the near plane is rejected."""
    params: VrMathParams = VrMathParams.defaults().replace(
        projection=ProjectionParams(z_near=10.0, z_far=1.0)
    )
    with pytest.raises(VrMathConfigError):
        VrMathConfig(params)


def test_params_error_is_wrapped() -> None:
    """Parameter errors surface as VrMathConfigError."""
    params: VrMathParams = VrMathParams.defaults().replace(
        projection=ProjectionParams(z_near=0.0)
    )
    with pytest.raises(VrMathConfigError):
        VrMathConfig(params)
