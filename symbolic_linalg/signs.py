# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Sign patterns: the 2**p vertices of the hypercube {+1, -1}**p.

Pattern I (1-based) is read off the low p bits of I - 1, bit 0 first;
a clear bit gives +1 and a set bit gives -1.
"""

import functools
import operator
from typing import Callable

import numpy as np

from .errors import DomainError
from .utils import SIGN_BITS


def _as_int(x, name: str) -> int:
    if isinstance(x, bool):
        raise DomainError(f"{name} must be an integer, got bool")
    try:
        return operator.index(x)
    except TypeError as e:
        raise DomainError(f"{name} must be an integer, got {type(x).__name__}") from e


def _check_length(p) -> int:
    p = _as_int(p, "p")
    if p < 1:
        raise DomainError(f"pattern length must be positive, got {p}")
    if p > SIGN_BITS:
        raise DomainError(
            f"pattern length exceeds representable bit width ({p} > {SIGN_BITS})"
        )
    return p


def _bits_to_signs(codes: np.ndarray, p: int) -> np.ndarray:
    """
    Map unsigned codes to sign patterns, one row per bit position.

    Returns
    -------
    S : (p, len(codes)) ndarray with entries +1.0 / -1.0
    """
    S = np.empty((p, codes.size), dtype=float)
    for k in range(p):
        bit = (codes >> np.uint32(k)) & np.uint32(1)
        S[k] = np.where(bit == 1, -1.0, 1.0)
    return S


def sign_vector(p: int, index: int) -> np.ndarray:
    """
    Return the sign pattern of length `p` with 1-based `index`.

    Parameters
    ----------
    p : int
        Pattern length, 1 <= p <= 32.
    index : int
        Pattern number in [1, 2**p].

    Returns
    -------
    d : (p,) ndarray of +1.0 / -1.0
    """
    p = _check_length(p)
    index = _as_int(index, "index")
    if not 1 <= index <= 2**p:
        raise DomainError(f"index must lie in [1, {2 ** p}], got {index}")

    code = np.array([index - 1], dtype=np.uint32)
    return _bits_to_signs(code, p)[:, 0]


def sign_vectors(p: int) -> np.ndarray:
    """
    Return every sign pattern of length `p` as the columns of a
    (p, 2**p) matrix, in index order.
    """
    p = _check_length(p)
    codes = np.arange(2**p, dtype=np.uint64).astype(np.uint32)
    return _bits_to_signs(codes, p)


def sign_vector_factory(p: int) -> Callable[[int], np.ndarray]:
    """Curry the pattern length into `sign_vector`."""
    p = _check_length(p)
    return functools.partial(sign_vector, p)
