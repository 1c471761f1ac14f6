"""
Tests for growpack.packers.growing

These tests focus on:
- The reference scenarios (square tiles, single padded block, empty input,
  rejection when a block outgrows both axes)
- Right-before-down search order and split geometry
- Growth direction choice, including the fallback to the other axis
- Validation, the on_grow hook and run bookkeeping
"""

from __future__ import annotations

import math

import pytest

from growpack.geometry import Block, Node, Placement
from growpack.packers.growing import GrowingPacker, GrowthEvent, pack_blocks


def _blocks(*sizes):
    return [Block(width=w, height=h) for w, h in sizes]


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------

def test_square_tiles_grow_right_without_overlap():
    blocks = _blocks((100, 100), (100, 100), (80, 80), (80, 80))
    packer = GrowingPacker(growth_direction="right", constrained_size=100, gap=0)
    packer.fit(blocks)

    assert all(b.is_placed for b in blocks)
    assert [(b.placement.x, b.placement.y) for b in blocks] == [
        (0, 0),
        (100, 0),
        (200, 0),
        (280, 0),
    ]
    assert (packer.root.w, packer.root.h) == (360, 100)


@pytest.mark.parametrize("direction", ["right", "down"])
def test_single_block_is_padded_and_placed_at_origin(direction):
    blocks = _blocks((50, 50))
    GrowingPacker(growth_direction=direction, constrained_size=100, gap=10).fit(blocks)

    assert blocks[0].placement == Placement(0, 0, 70, 70)
    assert (blocks[0].width, blocks[0].height) == (70, 70)


def test_empty_block_list_gives_zero_root():
    packer = GrowingPacker(constrained_size=100)
    result = packer.fit([])

    assert result == []
    assert (packer.root.w, packer.root.h) == (0, 0)
    assert packer.stats.placed == 0
    assert packer.history == []


@pytest.mark.parametrize("direction", ["right", "down"])
def test_block_larger_on_both_axes_is_rejected(direction):
    blocks = _blocks((10, 10), (50, 50))
    packer = GrowingPacker(growth_direction=direction, constrained_size=20, gap=0)
    packer.fit(blocks)

    assert blocks[0].placement == Placement(0, 0, 10, 10)
    assert blocks[1].placement is None
    assert packer.stats.rejected == 1
    assert packer.history == []


def test_rejection_does_not_stop_later_blocks():
    blocks = _blocks((10, 10), (50, 50), (10, 10))
    packer = GrowingPacker(growth_direction="right", constrained_size=20, gap=0)
    packer.fit(blocks)

    assert blocks[1].placement is None
    # Fits in the free strip below the first block.
    assert blocks[2].placement == Placement(0, 10, 10, 10)


def test_default_gap_is_ten():
    blocks = _blocks((30, 40))
    GrowingPacker().fit(blocks)
    assert (blocks[0].width, blocks[0].height) == (50, 60)


# ---------------------------------------------------------------------------
# Search and split
# ---------------------------------------------------------------------------

def test_split_node_geometry():
    node = Node(10, 20, 100, 80)
    result = GrowingPacker.split_node(node, 30, 50)

    assert result is node
    assert node.used
    assert node.down == Node(10, 70, 100, 30)
    assert node.right == Node(40, 20, 70, 50)


def test_find_node_prefers_right_then_down():
    packer = GrowingPacker(gap=0)
    root = Node(0, 0, 100, 100)
    packer.split_node(root, 50, 50)

    # Both children fit a small block; right wins.
    assert packer.find_node(root, 10, 10) is root.right
    # Only the full-width down strip fits a wide block.
    assert packer.find_node(root, 60, 10) is root.down
    assert packer.find_node(root, 200, 10) is None


def test_find_node_never_returns_used_node():
    packer = GrowingPacker(gap=0)
    root = Node(0, 0, 100, 100)
    packer.split_node(root, 100, 100)
    assert packer.find_node(root, 10, 10) is None


def test_negative_area_node_never_fits():
    assert not Node(0, 0, -5, 10).fits(0, 0)
    assert Node(0, 0, 0, 10).fits(0, 10)


def test_zero_size_block_fits_in_exhausted_strip():
    blocks = _blocks((10, 10), (0, 0))
    GrowingPacker(constrained_size=None, gap=0).fit(blocks)
    assert blocks[1].placement == Placement(10, 0, 0, 0)


# ---------------------------------------------------------------------------
# Growth direction
# ---------------------------------------------------------------------------

def test_grow_right_wraps_old_root():
    packer = GrowingPacker(growth_direction="right", constrained_size=100, gap=0)
    blocks = _blocks((100, 100))
    packer.fit(blocks)
    old_root = packer.root

    node = packer.grow_right(40, 60)

    assert packer.root.down is old_root
    assert (packer.root.w, packer.root.h) == (140, 100)
    assert packer.root.used
    assert (node.x, node.y) == (100, 0)
    assert node.right == Node(140, 0, 0, 60)
    assert node.down == Node(100, 60, 40, 40)


def test_grow_down_wraps_old_root():
    packer = GrowingPacker(growth_direction="down", constrained_size=100, gap=0)
    packer.fit(_blocks((100, 100)))
    old_root = packer.root

    node = packer.grow_down(60, 40)

    assert packer.root.right is old_root
    assert (packer.root.w, packer.root.h) == (100, 140)
    assert (node.x, node.y) == (0, 100)


def _node_fields(node):
    return (node.x, node.y, node.w, node.h, node.used, node.down, node.right)


@pytest.mark.parametrize(
    "direction, grow, size",
    [
        ("right", "grow_right", (40, 60)),
        ("down", "grow_down", (60, 40)),
    ],
)
def test_growth_leaves_old_root_unchanged(direction, grow, size):
    packer = GrowingPacker(growth_direction=direction, constrained_size=100, gap=0)
    packer.fit(_blocks((100, 100)))
    old_root = packer.root
    before = _node_fields(old_root)
    old_down, old_right = old_root.down, old_root.right

    getattr(packer, grow)(*size)

    assert packer.root is not old_root
    assert _node_fields(old_root) == before
    assert old_root.down is old_down
    assert old_root.right is old_right


def test_right_growth_prefers_right_even_when_container_is_wide():
    # First growth: 100 >= 20 + 20, the container is tall.
    # Second growth: 100 < 40 + 70, no longer tall, but right is still legal.
    packer = GrowingPacker(growth_direction="right", constrained_size=100, gap=0)
    blocks = _blocks((20, 100), (20, 50), (70, 100))
    packer.fit(blocks)

    assert [(b.placement.x, b.placement.y) for b in blocks] == [(0, 0), (20, 0), (40, 0)]
    assert [e.direction for e in packer.history] == ["right", "right"]
    assert (packer.root.w, packer.root.h) == (110, 100)


def test_right_growth_falls_back_to_down_when_block_too_tall():
    blocks = _blocks((40, 50), (30, 60))
    packer = GrowingPacker(growth_direction="right", constrained_size=50, gap=0)
    packer.fit(blocks)

    assert blocks[1].placement == Placement(0, 50, 30, 60)
    assert packer.history == [GrowthEvent("down", 40, 50, 40, 110)]


def test_down_growth_falls_back_to_right_when_block_too_wide():
    blocks = _blocks((50, 40), (60, 30))
    packer = GrowingPacker(growth_direction="down", constrained_size=50, gap=0)
    packer.fit(blocks)

    assert blocks[1].placement == Placement(50, 0, 60, 30)
    assert packer.history == [GrowthEvent("right", 50, 40, 110, 40)]


def test_down_growth_keeps_growing_down_when_container_is_tall():
    # After two blocks the container is 100x100. The third block could go
    # either way and the container is no longer wide, but downward growth
    # is still preferred while it is legal.
    blocks = _blocks((100, 50), (100, 50), (50, 50))
    packer = GrowingPacker(growth_direction="down", constrained_size=100, gap=0)
    packer.fit(blocks)

    assert [b.placement for b in blocks] == [
        Placement(0, 0, 100, 50),
        Placement(0, 50, 100, 50),
        Placement(0, 100, 50, 50),
    ]
    assert [e.direction for e in packer.history] == ["down", "down"]
    assert (packer.root.w, packer.root.h) == (100, 150)


def test_unconstrained_root_starts_at_first_block():
    blocks = _blocks((30, 20), (30, 20))
    packer = GrowingPacker(growth_direction="right", constrained_size=None, gap=0)
    packer.fit(blocks)

    assert packer.history[0].old_width == 30
    assert packer.history[0].old_height == 20
    assert blocks[1].placement == Placement(30, 0, 30, 20)


# ---------------------------------------------------------------------------
# Hook and bookkeeping
# ---------------------------------------------------------------------------

def test_on_grow_reports_new_container_size():
    calls = []
    packer = GrowingPacker(
        growth_direction="right",
        constrained_size=100,
        gap=0,
        on_grow=lambda direction, w, h: calls.append((direction, w, h)),
    )
    packer.fit(_blocks((100, 100), (100, 100), (80, 80), (80, 80)))

    assert calls == [("right", 200, 100), ("right", 280, 100), ("right", 360, 100)]


def test_stats_summarize_run():
    packer = GrowingPacker(growth_direction="right", constrained_size=100, gap=0)
    packer.fit(_blocks((100, 100), (100, 100), (80, 80), (80, 80)))
    stats = packer.stats

    assert stats.placed == 4
    assert stats.rejected == 0
    assert stats.grown_right == 3
    assert stats.grown_down == 0
    assert (stats.width, stats.height) == (360, 100)
    assert stats.fill_ratio == pytest.approx(32_800 / 36_000)


def test_refit_starts_from_a_fresh_tree():
    packer = GrowingPacker(constrained_size=100, gap=0)
    packer.fit(_blocks((100, 100), (100, 100)))
    packer.fit(_blocks((20, 20)))

    assert (packer.root.w, packer.root.h) == (20, 100)
    assert packer.history == []
    assert packer.stats.placed == 1


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "kwargs",
    [
        {"growth_direction": "sideways"},
        {"constrained_size": 0},
        {"constrained_size": -10},
        {"gap": -1},
        {"gap": math.nan},
    ],
)
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ValueError):
        GrowingPacker(**kwargs)


@pytest.mark.parametrize("bad", [-1, math.nan, math.inf, "10", None])
def test_invalid_block_size_fails_before_padding(bad):
    blocks = [Block(width=10, height=10), Block(width=bad, height=10)]
    with pytest.raises(ValueError):
        GrowingPacker(gap=5).fit(blocks)

    # Nothing was mutated.
    assert (blocks[0].width, blocks[0].height) == (10, 10)
    assert blocks[0].placement is None


# ---------------------------------------------------------------------------
# Non-mutating wrapper
# ---------------------------------------------------------------------------

def test_pack_blocks_leaves_originals_untouched():
    originals = [Block(width=50, height=50, key="a"), Block(width=20, height=30, key="b")]
    packed, packer = pack_blocks(originals, constrained_size=200, gap=10)

    assert [(b.width, b.height) for b in originals] == [(50, 50), (20, 30)]
    assert all(b.placement is None for b in originals)

    assert [b.key for b in packed] == ["a", "b"]
    assert [(b.width, b.height) for b in packed] == [(70, 70), (40, 50)]
    assert all(b.is_placed for b in packed)
    assert packer.stats.placed == 2
