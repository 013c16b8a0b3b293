# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .utils import as_column_matrix
from .vectors import normalize

logger = logging.getLogger(__name__)


def orthogonalize(M, reorth: bool = False, return_degenerate: bool = False):
    """
    Modified Gram-Schmidt orthogonalization of the columns of M.

    Column i is projected against the already orthonormalized columns
    Q[:, 0..i-1], one at a time, and then normalized. A residual whose
    norm rounds to 0 at 5 decimals (zero column, or a column dependent
    on the previous ones) becomes the exact zero vector; no error is
    raised.

    Parameters
    ----------
    M : (n, k) array_like
        Input vectors as columns. A 1-D input is a single column and
        k may be 0.
    reorth : bool
        Run a second Gram-Schmidt pass to recover orthogonality
    return_degenerate : bool
        If True, also return the mask of zero columns.

    Returns
    -------
    Q : (n, k) ndarray
        Orthonormal columns, or zero columns where the input was degenerate
    degenerate : (k,) ndarray of bool, optional
        True where Q[:, i] is the zero vector.
    """
    A = as_column_matrix(M)
    n, k = A.shape

    def _mgs(V):
        Q = np.zeros((n, k))
        for i in range(k):
            v = V[:, i].copy()
            for j in range(i):
                v = v - (v @ Q[:, j]) * Q[:, j]
            Q[:, i] = normalize(v)
        return Q

    Q = _mgs(A)
    if reorth:
        Q = _mgs(Q)

    degenerate = ~Q.any(axis=0)
    for i in np.flatnonzero(degenerate):
        logger.debug("orthogonalize(): column %d is degenerate, set to zero", i)

    return (Q, degenerate) if return_degenerate else Q
