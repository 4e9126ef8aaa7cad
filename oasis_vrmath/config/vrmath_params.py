################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the VR math helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Run the optional degeneracy checks
DIAG_ENABLED: bool = True
# Allowed deviation of the squared quaternion norm from 1
DIAG_UNIT_NORM_TOL: float = 1e-6
# Smallest divisor magnitude treated as well-formed
DIAG_MIN_DIVISOR: float = 1e-12
# Report non-finite values in checked outputs
DIAG_CHECK_FINITE: bool = True

# Default near clip distance in meters
PROJECTION_Z_NEAR: float = 0.1
# Default far clip distance in meters
PROJECTION_Z_FAR: float = 100.0


class VrMathParamsError(Exception):
    """Raised when VR math parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a finite positive value."""
    if not math.isfinite(value) or value <= 0.0:
        raise VrMathParamsError(f"{name} must be positive")


def _require_bool(value: Any, name: str) -> None:
    """Require a bool value."""
    if not isinstance(value, bool):
        raise VrMathParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class DiagnosticsParams:
    """Optional degeneracy checks for caller-side diagnostics."""

    # Run the optional degeneracy checks
    enabled: bool = DIAG_ENABLED
    # Allowed deviation of the squared quaternion norm from 1
    unit_norm_tol: float = DIAG_UNIT_NORM_TOL
    # Smallest divisor magnitude treated as well-formed
    min_divisor: float = DIAG_MIN_DIVISOR
    # Report non-finite values in checked outputs
    check_finite: bool = DIAG_CHECK_FINITE


@dataclass(frozen=True)
class ProjectionParams:
    """Default clip planes for projection construction."""

    # Near clip distance in meters
    z_near: float = PROJECTION_Z_NEAR
    # Far clip distance in meters
    z_far: float = PROJECTION_Z_FAR


@dataclass(frozen=True)
class VrMathParams:
    """Complete configuration tree for the VR math helpers."""

    diagnostics: DiagnosticsParams
    projection: ProjectionParams

    @classmethod
    def defaults(cls) -> VrMathParams:
        """Return the default parameter tree."""
        return cls(
            diagnostics=DiagnosticsParams(),
            projection=ProjectionParams(),
        )

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> VrMathParams:
        """Build a parameter tree from nested namespace dicts.

        Missing namespaces and keys fall back to defaults.
        """
        namespaces: dict[str, type] = {
            "diagnostics": DiagnosticsParams,
            "projection": ProjectionParams,
        }
        unknown: set[str] = set(values) - set(namespaces)
        if unknown:
            raise VrMathParamsError(f"Unknown namespaces: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, params_cls in namespaces.items():
            overrides: dict[str, Any] = dict(values.get(name, {}))
            allowed: set[str] = {field.name for field in fields(params_cls)}
            unknown_keys: set[str] = set(overrides) - allowed
            if unknown_keys:
                raise VrMathParamsError(
                    f"Unknown keys in {name}: {sorted(unknown_keys)}"
                )
            kwargs[name] = params_cls(**overrides)
        return cls(**kwargs)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_bool(self.diagnostics.enabled, "diagnostics.enabled")
        _require_bool(self.diagnostics.check_finite, "diagnostics.check_finite")
        _require_positive(self.diagnostics.unit_norm_tol, "diagnostics.unit_norm_tol")
        _require_positive(self.diagnostics.min_divisor, "diagnostics.min_divisor")

        _require_positive(self.projection.z_near, "projection.z_near")
        _require_positive(self.projection.z_far, "projection.z_far")

    def replace(self, **namespace_overrides: Any) -> VrMathParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
