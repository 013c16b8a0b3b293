# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import ShapeError
from .utils import is_zero_norm


def normalize(v) -> np.ndarray:
    """
    Scale `v` to unit Euclidean norm.

    If the norm rounds to 0 at 5 decimals the zero vector of the same
    length is returned instead, so near-zero residuals never blow up.
    """
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise ShapeError(f"normalize expects a 1-D vector, got shape {v.shape}")

    norm = np.sqrt(v @ v)
    if is_zero_norm(norm):
        return np.zeros_like(v)
    return v / norm


def sgn(v) -> np.ndarray:
    """
    Vectorized sign with sgn(0) = +1, so that |v|_i = v_i * sgn(v)_i.
    """
    return np.sign(0.5 + np.sign(np.asarray(v, dtype=float)))
