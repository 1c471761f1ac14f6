"""
Tests for growpack.layout (builder and CLI).
"""

from __future__ import annotations

import pandas as pd
import pytest

from growpack.evaluation import LAYOUT_COLUMNS, has_any_overlap
from growpack.geometry import Block
from growpack.layout import build_layout, layout_to_df, main, write_layout_csv


def test_build_layout_sorts_and_does_not_mutate_inputs():
    originals = [
        Block(width=10, height=10, key="small"),
        Block(width=80, height=60, key="big"),
        Block(width=40, height=40, key="mid"),
    ]
    packed, packer = build_layout(originals, gap=0, sort="maxside")

    assert [b.key for b in packed] == ["big", "mid", "small"]
    assert packed[0].placement.x == 0 and packed[0].placement.y == 0
    assert all(b.placement is None for b in originals)
    assert [(b.width, b.height) for b in originals] == [(10, 10), (80, 60), (40, 40)]
    assert not has_any_overlap(packed)
    assert packer.stats.placed == 3


def test_build_layout_keeps_input_order_with_sort_none():
    originals = [Block(width=10, height=10, key="a"), Block(width=20, height=20, key="b")]
    packed, _ = build_layout(originals, gap=0, constrained_size=50, sort="none")
    assert [b.key for b in packed] == ["a", "b"]


def test_write_layout_csv(tmp_path):
    packed, _ = build_layout([Block(width=5, height=5, key="k")], gap=1)
    out = write_layout_csv(packed, tmp_path / "out.csv")

    df = pd.read_csv(out)
    assert list(df.columns) == LAYOUT_COLUMNS
    assert df.loc[0, "width"] == 7
    assert list(layout_to_df(packed).columns) == LAYOUT_COLUMNS


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def test_cli_random_blocks(tmp_path, capsys):
    out = tmp_path / "layout.csv"
    main(["--random", "12", "--seed", "3", "--constrained-size", "300", "--output", str(out)])

    df = pd.read_csv(out)
    assert len(df) == 12
    assert df["placed"].all()
    assert "Layout written to" in capsys.readouterr().out


def test_cli_reads_csv_input(tmp_path):
    src = tmp_path / "blocks.csv"
    src.write_text("key,width,height\na,30,30\nb,20,10\n")
    out = tmp_path / "layout.csv"
    main(["--input", str(src), "--direction", "down", "--gap", "0", "--output", str(out)])

    df = pd.read_csv(out)
    assert df["key"].tolist() == ["a", "b"]
    assert df.loc[0, "x"] == 0 and df.loc[0, "y"] == 0


def test_cli_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "o.csv")])


def test_cli_invalid_gap_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--random", "3", "--gap", "-1", "--output", str(tmp_path / "o.csv")])


@pytest.mark.integration
def test_cli_writes_plot(tmp_path):
    plot = tmp_path / "layout.png"
    main(["--random", "8", "--seed", "1", "--output", str(tmp_path / "o.csv"), "--plot", str(plot)])
    assert plot.exists()
