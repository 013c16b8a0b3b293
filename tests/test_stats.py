# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from symbolic_linalg.errors import DomainError
from symbolic_linalg.stats import variance_explained


def test_cumulative_share_sorted_descending():
    np.testing.assert_allclose(variance_explained([1, 3, 2]), [0.5, 5 / 6, 1.0])


def test_eigenvalues_of_covariance():
    rng = np.random.default_rng(2)
    X = rng.normal(size=(200, 4)) * [5.0, 2.0, 1.0, 0.1]
    eigvals = np.linalg.eigvalsh(np.cov(X, rowvar=False))
    share = variance_explained(eigvals)
    assert np.all(np.diff(share) >= 0)
    assert share[-1] == pytest.approx(1.0)
    assert share[0] > 0.7


@pytest.mark.parametrize("variances", [[], [0.0, 0.0]])
def test_degenerate_input_raises(variances):
    with pytest.raises(DomainError):
        variance_explained(variances)
