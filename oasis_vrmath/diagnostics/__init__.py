################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Diagnostics helpers for the VR math kernel."""

from oasis_vrmath.diagnostics.degeneracy_monitor import DegeneracyMonitor


__all__ = ["DegeneracyMonitor"]
