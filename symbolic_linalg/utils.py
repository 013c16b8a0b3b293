# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import ShapeError

# A norm is treated as zero when it rounds to 0 at this many decimals.
ZERO_NORM_DIGITS: int = 5
# Width of the integer used to index sign patterns.
SIGN_BITS: int = 32


def is_zero_norm(norm: float) -> bool:
    """Return True if `norm` rounds to 0 at ZERO_NORM_DIGITS decimals."""
    return not round(float(norm), ZERO_NORM_DIGITS) > 0


def as_column_matrix(M, name: str = "M") -> np.ndarray:
    """
    Read `M` as an (n, k) float matrix of column vectors.

    A 1-D input is a single column. Ragged rows, non-numeric entries and
    arrays with more than two dimensions raise ShapeError.
    """
    try:
        A = np.array(M, dtype=float)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"{name} is not a rectangular numeric matrix: {e}") from e

    if A.ndim == 1:
        A = A[:, None]
    if A.ndim != 2:
        raise ShapeError(f"{name} must be 1-D or 2-D, got {A.ndim} dimensions")
    return A


def to_column(v) -> np.ndarray:
    """Reshape a vector, or a row/column matrix, into an (n, 1) column."""
    v = np.asarray(v, dtype=float).ravel()
    return v.reshape(-1, 1)


def random_full_rank(m, n, seed=None) -> np.ndarray:
    """
    Build an m-by-n matrix (m >= n) whose columns are linearly independent.

    The upper n-by-n block is upper-triangular with a diagonal bounded away
    from zero, the remaining rows are random noise.

    Returns
    -------
    Matrix with float64 dtype
    """
    if m < n:
        raise ShapeError("random_full_rank needs m >= n")
    rng = np.random.default_rng(seed)
    A = rng.uniform(-10, 10, size=(m, n))
    A[:n] = np.triu(A[:n])
    # keep the diagonal well away from zero
    A[np.diag_indices(n)] = rng.uniform(1, 10, size=n) * rng.choice([-1.0, 1.0], n)
    return np.asarray(A)
