"""
Tests for growpack.utils.plotting (rendered off-screen with the Agg backend).
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from growpack.packers.growing import pack_blocks
from growpack.utils.plotting import plot_layout, plot_layouts_grid
from growpack.utils.samples import random_blocks


@pytest.fixture
def packed_layout():
    blocks, packer = pack_blocks(random_blocks(12, seed=4), constrained_size=300)
    yield blocks, packer.root
    plt.close("all")


def test_plot_layout_draws_blocks_and_container(packed_layout):
    blocks, root = packed_layout
    ax = plot_layout(blocks, root=root, title="demo", show_keys=True)

    placed = sum(1 for b in blocks if b.is_placed)
    assert len(ax.patches) == placed + 1
    assert ax.get_title() == "demo"
    # y axis points down: top limit is larger than bottom limit.
    bottom, top = ax.get_ylim()
    assert bottom > top


def test_plot_layouts_grid_hides_unused_axes(packed_layout):
    blocks, root = packed_layout
    fig, axes = plot_layouts_grid([(blocks, root)] * 3, titles=["a", "b", "c"], ncols=2)

    assert len(axes) == 4
    assert [ax.get_title() for ax in axes[:3]] == ["a", "b", "c"]
    assert not axes[3].axison


def test_plot_layouts_grid_rejects_bad_input(packed_layout):
    blocks, root = packed_layout
    with pytest.raises(ValueError):
        plot_layouts_grid([])
    with pytest.raises(ValueError):
        plot_layouts_grid([(blocks, root)], titles=["a", "b"])
