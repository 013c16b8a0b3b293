#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Projection operations
"""

import logging

import numpy as np

from .errors import ShapeError
from .gram_schmidt import orthogonalize
from .utils import as_column_matrix

logger = logging.getLogger(__name__)


def orthogonal_projection(M) -> np.ndarray:
    """
    Return P such that P v is orthogonal to every column of M.

    P = I - sum_i m_i m_iᵀ. This is a true (symmetric, idempotent)
    projector only when the columns of M are orthonormal, which is not
    checked; zero columns subtract nothing.

    Returns
    -------
    P : (n, n) ndarray
    """
    A = as_column_matrix(M)
    n, k = A.shape
    P = np.eye(n)
    for i in range(k):
        P = P - np.outer(A[:, i], A[:, i])
    return P


def _orthonormal_basis(A, b):
    A = as_column_matrix(A, "A")
    b = np.asarray(b, dtype=float)
    if b.ndim not in (1, 2) or b.shape[0] != A.shape[0]:
        raise ShapeError(
            f"b with shape {b.shape} does not match A with {A.shape[0]} rows"
        )

    Q, degenerate = orthogonalize(A, return_degenerate=True)
    if degenerate.any():
        logger.debug(
            "%d dependent column(s) of A ignored", int(np.count_nonzero(degenerate))
        )
    return Q, b


def project_onto_complement(A, b) -> np.ndarray:
    """
    Component of b orthogonal to the column space of A.

    Returns
    -------
    r : ndarray, same shape as b
        r is orthogonal to every column of A.
    """
    Q, b = _orthonormal_basis(A, b)
    return orthogonal_projection(Q) @ b


def project_onto_colspace(A, b) -> np.ndarray:
    """
    Find p, the orthogonal projection of b onto the column-space of A.

    The columns of A are orthonormalized first, so dependent columns are
    dropped instead of falling back to a pseudo-inverse.

    Returns
    -------
    p : ndarray, same shape as b
    """
    Q, b = _orthonormal_basis(A, b)
    return Q @ (Q.T @ b)
