"""
Evaluation utilities for the growpack block-layout project.

Given a list of packed blocks (each with a `placement` or None), this
module answers the questions you ask of a layout:

1. Which blocks were placed, which were rejected?
2. Do any two placed rectangles overlap? (Touching is fine.)
3. Does every placement lie inside the container?
4. How big is the layout, how full is it, how square is it?

It also turns a layout into a pandas DataFrame for inspection or CSV
export.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from shapely.strtree import STRtree

from .geometry import Node, rect_within, rects_overlap


# Type alias for clarity
LayoutTable = pd.DataFrame

LAYOUT_COLUMNS = ["key", "width", "height", "x", "y", "placed"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def placed_blocks(blocks: Sequence[Any]) -> List[Any]:
    return [b for b in blocks if getattr(b, "placement", None) is not None]


def rejected_blocks(blocks: Sequence[Any]) -> List[Any]:
    return [b for b in blocks if getattr(b, "placement", None) is None]


def has_any_overlap(blocks: Sequence[Any]) -> bool:
    """
    Check whether any pair of placed blocks has a *true* overlap.

    Rectangles that only touch along edges or points are considered OK.
    Zero-area placements cannot overlap anything and are skipped.
    """
    placements = [
        b.placement
        for b in placed_blocks(blocks)
        if b.placement.width > 0 and b.placement.height > 0
    ]
    if len(placements) < 2:
        return False

    # STRtree narrows the candidates; rects_overlap decides.
    index = STRtree([p.to_box() for p in placements])
    for i, p in enumerate(placements):
        for j in index.query(p.to_box()):
            if i != j and rects_overlap(p, placements[j]):
                return True
    return False


def all_within(blocks: Sequence[Any], width: float, height: float) -> bool:
    """
    True if every placed block lies inside [0, width] x [0, height].
    """
    return all(rect_within(b.placement, width, height) for b in placed_blocks(blocks))


def layout_bounds(blocks: Sequence[Any]) -> Tuple[float, float]:
    """
    Width and height of the bounding box of all placements, measured from
    the origin. (0, 0) if nothing was placed.
    """
    placed = placed_blocks(blocks)
    if not placed:
        return 0.0, 0.0
    rights = np.array([b.placement.right for b in placed], dtype=float)
    bottoms = np.array([b.placement.bottom for b in placed], dtype=float)
    return float(rights.max()), float(bottoms.max())


# ---------------------------------------------------------------------------
# Tables and summaries
# ---------------------------------------------------------------------------

def layout_table(blocks: Sequence[Any]) -> LayoutTable:
    """
    Build a DataFrame with one row per block, in input order.

    Columns
    -------
    - key: the block's caller label (None if absent)
    - width, height: the packed (padded) size
    - x, y: placement position, NaN for rejected blocks
    - placed: bool
    """
    records = []
    for b in blocks:
        p = getattr(b, "placement", None)
        records.append(
            {
                "key": getattr(b, "key", None),
                "width": float(b.width),
                "height": float(b.height),
                "x": float(p.x) if p is not None else np.nan,
                "y": float(p.y) if p is not None else np.nan,
                "placed": p is not None,
            }
        )
    return pd.DataFrame(records, columns=LAYOUT_COLUMNS)


def summarize_layout(blocks: Sequence[Any], root: Optional[Node] = None) -> Dict[str, float]:
    """
    Summarize a packed layout.

    Parameters
    ----------
    blocks:
        Packed blocks.
    root:
        Optional final root of the packer. If given, the container size is
        taken from it; otherwise the placements' bounding box is used.

    Returns
    -------
    dict with keys:
        - 'blocks', 'placed', 'rejected'
        - 'width', 'height': container size
        - 'fill_ratio': placed area / container area
        - 'aspect_ratio': max side / min side of the container (inf if a
          side is zero and the other is not, 1.0 for an empty container)
    """
    placed = placed_blocks(blocks)
    if root is not None:
        width, height = float(root.w), float(root.h)
    else:
        width, height = layout_bounds(blocks)

    used = float(sum(b.placement.width * b.placement.height for b in placed))
    area = width * height
    long_side, short_side = max(width, height), min(width, height)
    if short_side > 0:
        aspect = long_side / short_side
    else:
        aspect = float("inf") if long_side > 0 else 1.0

    return {
        "blocks": len(blocks),
        "placed": len(placed),
        "rejected": len(blocks) - len(placed),
        "width": width,
        "height": height,
        "fill_ratio": used / area if area > 0 else 0.0,
        "aspect_ratio": aspect,
    }


__all__ = [
    "LayoutTable",
    "LAYOUT_COLUMNS",
    "placed_blocks",
    "rejected_blocks",
    "has_any_overlap",
    "all_within",
    "layout_bounds",
    "layout_table",
    "summarize_layout",
]
