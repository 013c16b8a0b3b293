# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
symbolic_linalg
===============

The small linear-algebra kernel behind a symbolic (interval) data
analysis workflow, where every observation is a center and a radius
per variable.

Public API
~~~~~~~~~~
- Sign patterns
    - `sign_vector`, `sign_vectors`, `sign_vector_factory`
- Vectors
    - `normalize`, `sgn`, `to_column`
- Matrices
    - `diagonal_matrix`
- Orthogonalization / projections
    - `orthogonalize`
    - `orthogonal_projection`, `project_onto_complement`,
      `project_onto_colspace`
- Statistics
    - `variance_explained`
- Errors
    - `DomainError`, `ShapeError`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import numpy as np, symbolic_linalg as sl
>>> M = np.random.randn(5, 3)
>>> Q = sl.orthogonalize(M)
>>> np.allclose(Q.T @ Q, np.eye(3))
True
>>> P = sl.orthogonal_projection(Q)
>>> np.allclose(M.T @ (P @ np.random.randn(5)), 0)
True
"""

from importlib.metadata import version as _pkg_version

from .diagonal import diagonal_matrix
from .errors import DomainError, ShapeError
from .gram_schmidt import orthogonalize
from .projections import (
    orthogonal_projection,
    project_onto_colspace,
    project_onto_complement,
)
from .signs import sign_vector, sign_vector_factory, sign_vectors
from .stats import variance_explained
from .utils import to_column
from .vectors import normalize, sgn

__all__ = [
    "sign_vector",
    "sign_vectors",
    "sign_vector_factory",
    "normalize",
    "sgn",
    "to_column",
    "diagonal_matrix",
    "orthogonalize",
    "orthogonal_projection",
    "project_onto_complement",
    "project_onto_colspace",
    "variance_explained",
    "DomainError",
    "ShapeError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show symbolic-linalg”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version("symbolic-linalg")
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
