# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import DomainError


def variance_explained(variances) -> np.ndarray:
    """
    Cumulative share of the total variance explained by the components,
    largest variance first.
    """
    v = np.sort(np.asarray(variances, dtype=float).ravel())[::-1]
    if v.size == 0:
        raise DomainError("variance_explained needs at least one variance")
    total = v.sum()
    if total == 0:
        raise DomainError("total variance is zero")
    return np.cumsum(v) / total
