# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from symbolic_linalg.errors import ShapeError
from symbolic_linalg.vectors import normalize, sgn


def test_normalize_unit_norm():
    np.testing.assert_allclose(normalize([3, 4]), [0.6, 0.8])

    rng = np.random.default_rng(0)
    for _ in range(20):
        v = rng.normal(size=7) * rng.uniform(1e-3, 1e3)
        assert np.isclose(np.linalg.norm(normalize(v)), 1.0)


@pytest.mark.parametrize(
    "v", [[0.0, 0.0], [1e-7, 0.0], [4e-6, 0.0], [0.0, -3e-6, 1e-6]]
)
def test_normalize_near_zero_is_zero(v):
    out = normalize(v)
    assert out.shape == (len(v),)
    assert np.array_equal(out, np.zeros(len(v)))


def test_normalize_rounding_threshold():
    # 6e-6 rounds up to 1e-5 at five decimals, so it is not zero
    np.testing.assert_allclose(normalize([6e-6, 0.0]), [1.0, 0.0])
    np.testing.assert_allclose(normalize([0.0, -1e-5]), [0.0, -1.0])


def test_normalize_does_not_mutate():
    v = np.array([3.0, 4.0])
    normalize(v)
    np.testing.assert_array_equal(v, [3.0, 4.0])


def test_normalize_rejects_matrix():
    with pytest.raises(ShapeError):
        normalize(np.ones((2, 2)))


def test_sgn_zero_is_positive():
    np.testing.assert_array_equal(sgn([-2, 0, 3]), [-1, 1, 1])
    np.testing.assert_array_equal(sgn([-0.0, 1e-300, -1e-300]), [1, 1, -1])


def test_sgn_recovers_absolute_value():
    rng = np.random.default_rng(3)
    M = rng.normal(size=(4, 5))
    M[0, 0] = 0.0
    np.testing.assert_array_equal(M * sgn(M), np.abs(M))
    assert sgn(0) == 1.0
