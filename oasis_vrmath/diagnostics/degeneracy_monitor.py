################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Optional degeneracy checks for VR math inputs and outputs."""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Tuple

import numpy as np

from ..config.vrmath_config import VrMathConfig
from ..math_utils.quat import Quaternion


_LOG: logging.Logger = logging.getLogger(__name__)


class DegeneracyMonitor:
    """Log numerically degenerate values without changing them.

    The VR math kernel never validates numeric inputs. Callers that want
    visibility into bad poses or frusta run the values through a monitor.
    Checks only read their arguments, never raise on numeric data, and
    return True for well-formed input.

    Attributes:
        issues: Total count of failed checks since the last reset
    """

    def __init__(self, config: Optional[VrMathConfig] = None) -> None:
        if config is None:
            config = VrMathConfig.defaults()
        self._config: VrMathConfig = config
        self.issues: int = 0
        self._counts: dict[str, int] = {}

    @property
    def enabled(self) -> bool:
        return self._config.diagnostics_enabled()

    def counts(self) -> dict[str, int]:
        """Return a copy of the failed-check counts keyed by check kind."""
        return dict(self._counts)

    def reset(self) -> None:
        """Clear all counters."""
        self.issues = 0
        self._counts.clear()

    def check_quaternion(self, q: Quaternion, name: str) -> bool:
        """Check that a quaternion is finite and unit length."""
        if not self.enabled:
            return True
        norm_sq: float = q.norm_squared()
        if not np.isfinite(norm_sq):
            return self._report("quaternion", "%s is not finite: %s", name, q)
        tol: float = self._config.params.diagnostics.unit_norm_tol
        if abs(norm_sq - 1.0) > tol:
            return self._report(
                "quaternion",
                "%s is not unit length, |q|^2 = %.9g",
                name,
                norm_sq,
            )
        return True

    def check_axis(self, ux: float, uy: float, uz: float, name: str) -> bool:
        """Check that a rotation axis is unit length."""
        if not self.enabled:
            return True
        norm_sq: float = ux * ux + uy * uy + uz * uz
        tol: float = self._config.params.diagnostics.unit_norm_tol
        if not np.isfinite(norm_sq) or abs(norm_sq - 1.0) > tol:
            return self._report(
                "axis", "%s is not a unit axis, |u|^2 = %.9g", name, norm_sq
            )
        return True

    def check_divisor(self, value: float, name: str) -> bool:
        """Check that a divisor is finite and not near zero."""
        if not self.enabled:
            return True
        if self._is_degenerate(value):
            return self._report("divisor", "%s is degenerate: %r", name, value)
        return True

    def check_finite(self, values: Any, name: str) -> bool:
        """Check that a vector, matrix or array has only finite values."""
        if not self.enabled or not self._config.params.diagnostics.check_finite:
            return True
        raw: Any = values
        if hasattr(values, "m"):
            raw = values.m
        elif hasattr(values, "v"):
            raw = values.v
        elif isinstance(values, Quaternion):
            raw = values.to_wxyz()
        array: np.ndarray = np.asarray(raw, dtype=np.float64)
        if not np.all(np.isfinite(array)):
            return self._report("finite", "%s has non-finite values", name)
        return True

    def check_frustum(
        self,
        left: float,
        right: float,
        top: float,
        bottom: float,
        z_near: float,
        z_far: float,
    ) -> bool:
        """Check that frustum extents give finite projection terms."""
        if not self.enabled:
            return True
        ok: bool = True
        extents: Tuple[Tuple[str, float], ...] = (
            ("width", right - left),
            ("height", bottom - top),
            ("depth", z_near - z_far),
        )
        for label, extent in extents:
            if self._is_degenerate(extent):
                ok = self._report(
                    "frustum", "frustum %s is degenerate: %r", label, extent
                )
        return ok

    def _is_degenerate(self, value: float) -> bool:
        min_divisor: float = self._config.params.diagnostics.min_divisor
        return not np.isfinite(value) or abs(value) < min_divisor

    def _report(self, kind: str, msg: str, *args: Any) -> bool:
        self.issues += 1
        self._counts[kind] = self._counts.get(kind, 0) + 1
        _LOG.warning(msg, *args)
        return False
