#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Timing of the Gram-Schmidt and projection kernels against NumPy.

    python -m symbolic_linalg.benchmark --sizes 300x300 1000x200 --repeats 5
"""

import argparse
import logging
import time

import numpy as np
import pandas as pd

from .gram_schmidt import orthogonalize
from .projections import orthogonal_projection

logger = logging.getLogger(__name__)

COLUMNS = ["kernel", "size", "sec", "sec/NumPy", "orth_err"]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run_benchmark(sizes, repeats: int = 5, seed=0) -> pd.DataFrame:
    """
    Time each kernel on random (m, n) matrices, m >= n.

    Returns
    -------
    DataFrame with one row per (kernel, size); `sec` is the best of
    `repeats` runs and `orth_err` an infinity-norm error against the
    NumPy reference.
    """
    rng = np.random.default_rng(seed)
    records = []
    for m, n in sizes:
        A = rng.standard_normal((m, n))
        label = f"{m}x{n}"
        logger.info("benchmarking %s", label)

        # reference
        t_np = min(wall(np.linalg.qr, A) for _ in range(repeats))

        # Modified Gram-Schmidt
        t_mgs = min(wall(orthogonalize, A) for _ in range(repeats))
        Q = orthogonalize(A)
        ortho = np.linalg.norm(Q.T @ Q - np.eye(n), np.inf)
        records.append(("MGS", label, t_mgs, t_mgs / t_np, ortho))

        # ---------- MGS with a second pass --------------------------
        t_re = min(wall(orthogonalize, A, reorth=True) for _ in range(repeats))
        Q2 = orthogonalize(A, reorth=True)
        ortho2 = np.linalg.norm(Q2.T @ Q2 - np.eye(n), np.inf)
        records.append(("MGS-reorth", label, t_re, t_re / t_np, ortho2))

        # ---------- projection onto the orthogonal complement --------
        t_ref = min(wall(lambda: np.eye(m) - Q @ Q.T) for _ in range(repeats))
        t_proj = min(wall(orthogonal_projection, Q) for _ in range(repeats))
        err = np.linalg.norm(orthogonal_projection(Q) - (np.eye(m) - Q @ Q.T), np.inf)
        records.append(("projection", label, t_proj, t_proj / t_ref, err))

    return pd.DataFrame(records, columns=COLUMNS)


def _size(text: str):
    try:
        m, n = (int(x) for x in text.lower().split("x"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected MxN, got {text!r}") from e
    if m < n:
        raise argparse.ArgumentTypeError(f"need m >= n, got {text!r}")
    return m, n


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Benchmark Gram-Schmidt and projection kernels against NumPy."
    )
    parser.add_argument(
        "--sizes", type=_size, nargs="+", default=[(300, 300), (1000, 200)]
    )
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--csv", type=str, default=None, help="also write results here")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    df = run_benchmark(args.sizes, repeats=args.repeats, seed=args.seed)
    print(df.to_markdown(index=False))

    if args.csv:
        df.to_csv(args.csv, index=False)


if __name__ == "__main__":
    main()
