# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import ShapeError


def diagonal_matrix(vM) -> np.ndarray:
    """
    Build a diagonal matrix from a vector or from a matrix.

    - vector (or scalar, or a one-row / one-column matrix): the entries
      become the main diagonal.
    - matrix with more than one row and column: the result keeps the
      main diagonal of `vM` and zeros everywhere else.

    Returns
    -------
    D : (d, d) ndarray, d the length of the diagonal
    """
    try:
        vM = np.asarray(vM, dtype=float)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"expected a rectangular numeric vector or matrix: {e}") from e
    if vM.ndim > 2:
        raise ShapeError(f"expected a vector or a matrix, got {vM.ndim} dimensions")

    if vM.ndim == 2 and min(vM.shape) > 1:
        d = np.diag(vM)
    else:
        # scalars, vectors and row/column matrices
        d = vM.ravel()
    return np.diag(d)
