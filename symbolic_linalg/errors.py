# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised for invalid arguments.

Both derive from ValueError, so existing ``except ValueError`` handlers
keep catching them. Numerical degeneracies (near-zero norms, dependent
columns) are not errors and never raise.
"""


class DomainError(ValueError):
    """An integer argument is outside the domain of the operation."""


class ShapeError(ValueError):
    """An array argument does not have the required shape."""
