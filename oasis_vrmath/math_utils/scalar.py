################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Scalar helpers."""

from __future__ import annotations


def signum(v: float) -> int:
    """Return 1 for positive, -1 for negative and 0 otherwise (including NaN)."""
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0
