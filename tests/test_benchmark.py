# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import argparse

import pytest

from symbolic_linalg.benchmark import COLUMNS, _size, main, run_benchmark


def test_run_benchmark_frame():
    df = run_benchmark([(20, 5), (8, 8)], repeats=1, seed=0)
    assert list(df.columns) == COLUMNS
    assert len(df) == 6
    assert set(df["kernel"]) == {"MGS", "MGS-reorth", "projection"}
    assert (df["sec"] >= 0).all()
    assert (df["orth_err"] < 1e-8).all()


def test_size_parsing():
    assert _size("300x200") == (300, 200)
    assert _size("4X4") == (4, 4)
    for bad in ["3x5", "abc", "1x2x3"]:
        with pytest.raises(argparse.ArgumentTypeError):
            _size(bad)


def test_main_prints_markdown(capsys, tmp_path):
    out_csv = tmp_path / "bench.csv"
    main(["--sizes", "6x3", "--repeats", "1", "--csv", str(out_csv)])
    out = capsys.readouterr().out
    assert "MGS-reorth" in out
    assert out_csv.exists()
