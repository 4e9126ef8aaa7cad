################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the VR math helpers."""

from __future__ import annotations

from dataclasses import dataclass

from .vrmath_params import VrMathParams
from .vrmath_params import VrMathParamsError


class VrMathConfigError(Exception):
    """Raised when VR math configuration validation fails."""


@dataclass(frozen=True)
class VrMathConfig:
    """Convenience wrapper around VR math parameters."""

    params: VrMathParams

    def __init__(self, params: VrMathParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def defaults(cls) -> VrMathConfig:
        """Return a configuration built from default parameters."""
        return cls(VrMathParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except VrMathParamsError as exc:
            raise VrMathConfigError(str(exc)) from exc

        if self.params.projection.z_far <= self.params.projection.z_near:
            raise VrMathConfigError("projection.z_far must exceed projection.z_near")

    def diagnostics_enabled(self) -> bool:
        """Return True when the optional degeneracy checks should run."""
        return self.params.diagnostics.enabled

    def z_near(self) -> float:
        """Return the configured near clip distance."""
        return self.params.projection.z_near

    def z_far(self) -> float:
        """Return the configured far clip distance."""
        return self.params.projection.z_far
