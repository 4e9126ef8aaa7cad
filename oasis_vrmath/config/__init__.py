################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the VR math helpers."""

from oasis_vrmath.config.vrmath_config import VrMathConfig
from oasis_vrmath.config.vrmath_config import VrMathConfigError
from oasis_vrmath.config.vrmath_params import VrMathParams
from oasis_vrmath.config.vrmath_params import VrMathParamsError


__all__ = [
    "VrMathConfig",
    "VrMathConfigError",
    "VrMathParams",
    "VrMathParamsError",
]
