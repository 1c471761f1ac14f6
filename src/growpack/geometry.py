"""
Geometry types for the growpack block-layout project.

This module defines:

- `Block`: a caller-owned rectangle request, annotated with a placement
  once packed.
- `Placement`: where a block ended up, plus the padded extents reserved
  for it.
- `Node`: one rectangular region of the packing tree, either free or
  split around a placed block.
- Small rectangle helpers shared by the packer and the evaluation code.

Coordinate convention
---------------------

Screen coordinates: the origin (0, 0) is the **top-left corner** of the
container, x grows to the right and y grows downward. A rectangle at
(x, y) with extents (w, h) covers [x, x + w) x [y, y + h).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from shapely.geometry import Polygon, box


# ---------------------------------------------------------------------------
# Placement / Block
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Placement:
    """
    Result of packing a single block.

    - (x, y): top-left corner inside the container
    - (width, height): padded extents actually reserved for the block
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_box(self) -> Polygon:
        """
        Return the reserved rectangle as a Shapely polygon.
        """
        return box(self.x, self.y, self.right, self.bottom)


@dataclass
class Block:
    """
    A rectangle to be packed.

    `width` and `height` are mutated in place when the packer adds its
    padding, and `placement` is set only if the block was positioned.
    `key` is an optional caller label (an id, a filename, ...) that the
    packer never looks at.
    """

    width: float
    height: float
    placement: Optional[Placement] = None
    key: Any = None

    @classmethod
    def from_size(cls, width: float, height: float, key: Any = None) -> "Block":
        return cls(width=width, height=height, key=key)

    @property
    def is_placed(self) -> bool:
        return self.placement is not None


# ---------------------------------------------------------------------------
# Node: one region of the packing tree
# ---------------------------------------------------------------------------

@dataclass
class Node:
    """
    A rectangular region of the packing tree.

    A free node (`used` is False) has no children and can take exactly one
    block. A used node holds a block at its top-left corner and owns two
    children that partition what is left:

    - `down`: the full-width strip below the block
    - `right`: the block-height strip to the right of the block

    Either child may end up with zero or negative extents; such a node
    stays in the tree and simply never fits anything.
    """

    x: float
    y: float
    w: float
    h: float
    used: bool = False
    down: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_free(self) -> bool:
        return not self.used

    def fits(self, w: float, h: float) -> bool:
        return w <= self.w and h <= self.h

    def iter_nodes(self) -> Iterator["Node"]:
        """
        Walk the subtree in search order: the node itself, then its right
        subtree, then its down subtree.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.used:
                # Push down first so right is visited first.
                if node.down is not None:
                    stack.append(node.down)
                if node.right is not None:
                    stack.append(node.right)


# ---------------------------------------------------------------------------
# Rectangle helpers
# ---------------------------------------------------------------------------

def rects_overlap(a: Placement, b: Placement) -> bool:
    """
    True if two placements share interior area. Rectangles that only touch
    along an edge or a corner do not overlap.
    """
    return a.x < b.right and b.x < a.right and a.y < b.bottom and b.y < a.bottom


def rect_within(p: Placement, width: float, height: float) -> bool:
    """
    True if the placement lies inside the container [0, width] x [0, height].
    """
    return p.x >= 0 and p.y >= 0 and p.right <= width and p.bottom <= height


__all__ = [
    "Placement",
    "Block",
    "Node",
    "rects_overlap",
    "rect_within",
]
