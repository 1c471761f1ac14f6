"""
Growing binary-tree packer for the growpack block-layout project.

The packer places a sequence of rectangular blocks into a single container
that starts at the size of the first block and grows on demand:

- Free space is a binary tree of `Node`s. Placing a block in a free node
  splits it into a `down` strip (full width, below the block) and a
  `right` strip (block height, beside the block).
- Searching visits `right` before `down`, depth first, and takes the
  first free node large enough. No best-fit scoring.
- When nothing fits, the root is wrapped in a new, larger root that adds
  a strip to the right or below. The strip is sized exactly for the
  incoming block, so the retry always succeeds.

Growth is single-axis only: a block that is both wider and taller than the
current container is rejected. Pre-sort the input (by height, or better
by max(width, height), descending) so the first block is a sensible seed.

The primary API is:

    packer = GrowingPacker(growth_direction="right", constrained_size=600)
    packer.fit(blocks)

which pads every block in place and sets `block.placement` on each one it
could position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple
import logging
import math
import numbers

from ..config import DEFAULT_GAP, GROWTH_DIRECTIONS, GROWTH_DOWN, GROWTH_RIGHT
from ..geometry import Block, Node, Placement


logger = logging.getLogger(__name__)

# Called after every growth event with (direction, new_width, new_height).
GrowCallback = Callable[[str, float, float], None]


# ---------------------------------------------------------------------------
# Run records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GrowthEvent:
    """
    One enlargement of the root: which way it grew and the extents before
    and after.
    """

    direction: str
    old_width: float
    old_height: float
    new_width: float
    new_height: float


@dataclass
class PackStats:
    """
    Simple statistics object summarizing a `fit` run.
    """

    placed: int = 0
    rejected: int = 0
    grown_right: int = 0
    grown_down: int = 0
    width: float = 0.0
    height: float = 0.0
    used_area: float = 0.0

    @property
    def fill_ratio(self) -> float:
        area = self.width * self.height
        return self.used_area / area if area > 0 else 0.0


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _check_dimension(value: Any, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{what} must be finite and non-negative, got {value!r}")


def _validate_blocks(blocks: Sequence[Any]) -> None:
    """
    Reject malformed blocks before anything is mutated.
    """
    for i, block in enumerate(blocks):
        _check_dimension(getattr(block, "width", None), f"blocks[{i}].width")
        _check_dimension(getattr(block, "height", None), f"blocks[{i}].height")


# ---------------------------------------------------------------------------
# Packer
# ---------------------------------------------------------------------------

class GrowingPacker:
    """
    Binary-tree packer whose container grows as blocks arrive.

    Parameters
    ----------
    growth_direction:
        "right" or "down". The container prefers to grow along this axis;
        the other axis starts at `constrained_size`.
    constrained_size:
        Initial extent of the axis orthogonal to growth. If None, the
        container starts at the first (padded) block's own size.
    gap:
        Padding added to every side of every block. Each block grows by
        2 * gap in both dimensions before packing.
    on_grow:
        Optional callback `on_grow(direction, width, height)` invoked with
        the new container size whenever the root grows, e.g. to resize a
        visual container.
    """

    def __init__(
        self,
        growth_direction: str = GROWTH_RIGHT,
        constrained_size: Optional[float] = None,
        gap: float = DEFAULT_GAP,
        on_grow: Optional[GrowCallback] = None,
    ) -> None:
        if growth_direction not in GROWTH_DIRECTIONS:
            raise ValueError(
                f"growth_direction must be one of {GROWTH_DIRECTIONS}, "
                f"got {growth_direction!r}"
            )
        if constrained_size is not None:
            _check_dimension(constrained_size, "constrained_size")
            if constrained_size <= 0:
                raise ValueError(
                    f"constrained_size must be positive, got {constrained_size!r}"
                )
        _check_dimension(gap, "gap")

        self.growth_direction = growth_direction
        self.constrained_size = constrained_size
        self.gap = gap
        self.on_grow = on_grow

        self.root = Node(0, 0, 0, 0)
        self.history: List[GrowthEvent] = []
        self.stats = PackStats()

    # -- padding ------------------------------------------------------------

    def add_padding_to_blocks(self, blocks: Sequence[Any]) -> Sequence[Any]:
        """
        Add 2 * gap to the width and height of every block, in place.

        This is permanent: callers that need the unpadded sizes afterwards
        must keep their own copy (or use `pack_blocks`).
        """
        pad = self.gap * 2
        for block in blocks:
            block.width += pad
            block.height += pad
        return blocks

    # -- entry point --------------------------------------------------------

    def fit(self, blocks: Sequence[Any]) -> Sequence[Any]:
        """
        Pad and place `blocks` in order.

        Each block gets `placement` set to a `Placement` if it was
        positioned, or None if it was rejected. A rejection does not stop
        the run. Returns `blocks` for convenience.
        """
        _validate_blocks(blocks)
        self.add_padding_to_blocks(blocks)

        self.root = self._initial_root(blocks)
        self.history = []
        self.stats = PackStats()

        for block in blocks:
            w, h = block.width, block.height
            node = self.find_node(self.root, w, h)
            if node is not None:
                node = self.split_node(node, w, h)
            else:
                node = self.grow_node(w, h)

            if node is not None:
                block.placement = Placement(node.x, node.y, w, h)
                self.stats.placed += 1
                self.stats.used_area += w * h
            else:
                block.placement = None
                self.stats.rejected += 1

        self.stats.width = self.root.w
        self.stats.height = self.root.h
        logger.info(
            "Packed %d/%d blocks into %gx%g (%d right, %d down growths)",
            self.stats.placed,
            len(blocks),
            self.root.w,
            self.root.h,
            self.stats.grown_right,
            self.stats.grown_down,
        )
        return blocks

    def _initial_root(self, blocks: Sequence[Any]) -> Node:
        if len(blocks) == 0:
            return Node(0, 0, 0, 0)

        first = blocks[0]
        if self.constrained_size is None:
            return Node(0, 0, first.width, first.height)
        if self.growth_direction == GROWTH_RIGHT:
            return Node(0, 0, first.width, self.constrained_size)
        return Node(0, 0, self.constrained_size, first.height)

    # -- search / commit ----------------------------------------------------

    def find_node(self, node: Node, w: float, h: float) -> Optional[Node]:
        """
        Return the first free node under `node` that is at least (w, h),
        searching right before down, or None.

        Uses `Node.iter_nodes`, which walks with an explicit stack: every
        growth adds a level to the tree, so long runs would otherwise hit
        the recursion limit.
        """
        for current in node.iter_nodes():
            if current.is_free and current.fits(w, h):
                return current
        return None

    @staticmethod
    def split_node(node: Node, w: float, h: float) -> Node:
        """
        Commit a (w, h) block to the top-left of a free node that fits it.

        The node becomes used and gets its `down` and `right` children.
        Returns the node; its (x, y) is the block's position.
        """
        node.used = True
        node.down = Node(node.x, node.y + h, node.w, node.h - h)
        node.right = Node(node.x + w, node.y, node.w - w, h)
        return node

    # -- growth -------------------------------------------------------------

    def grow_node(self, w: float, h: float) -> Optional[Node]:
        """
        Enlarge the root to make room for a (w, h) block nothing fits.

        The configured direction is preferred, and preferred first when
        doing so keeps the container roughly square. If that axis is
        illegal the other one is used. Returns None (rejection) only when
        the block is both wider and taller than the root.
        """
        root = self.root
        can_grow_down = w <= root.w
        can_grow_right = h <= root.h

        if self.growth_direction == GROWTH_RIGHT:
            # Grow right while the container is tall relative to its width.
            # Both of the first two branches grow right; the heuristic only
            # names the preferred case.
            should_grow_right = can_grow_right and root.h >= root.w + w
            if should_grow_right:
                return self.grow_right(w, h)
            elif can_grow_right:
                return self.grow_right(w, h)
            elif can_grow_down:
                return self.grow_down(w, h)
        else:
            should_grow_down = can_grow_down and root.w >= root.h + h
            if should_grow_down:
                return self.grow_down(w, h)
            elif can_grow_down:
                return self.grow_down(w, h)
            elif can_grow_right:
                return self.grow_right(w, h)

        logger.debug(
            "Rejected %gx%g block: exceeds %gx%g container on both axes",
            w,
            h,
            root.w,
            root.h,
        )
        return None

    def grow_right(self, w: float, h: float) -> Optional[Node]:
        old = self.root
        self.root = Node(
            0,
            0,
            old.w + w,
            old.h,
            used=True,
            down=old,
            right=Node(old.w, 0, w, old.h),
        )
        self._record_growth(GROWTH_RIGHT, old)

        node = self.find_node(self.root, w, h)
        return self.split_node(node, w, h) if node is not None else None

    def grow_down(self, w: float, h: float) -> Optional[Node]:
        old = self.root
        self.root = Node(
            0,
            0,
            old.w,
            old.h + h,
            used=True,
            down=Node(0, old.h, old.w, h),
            right=old,
        )
        self._record_growth(GROWTH_DOWN, old)

        node = self.find_node(self.root, w, h)
        return self.split_node(node, w, h) if node is not None else None

    def _record_growth(self, direction: str, old: Node) -> None:
        event = GrowthEvent(direction, old.w, old.h, self.root.w, self.root.h)
        self.history.append(event)
        if direction == GROWTH_RIGHT:
            self.stats.grown_right += 1
        else:
            self.stats.grown_down += 1

        logger.debug(
            "Grew %s: %gx%g -> %gx%g",
            direction,
            old.w,
            old.h,
            self.root.w,
            self.root.h,
        )
        if self.on_grow is not None:
            self.on_grow(direction, self.root.w, self.root.h)


# ---------------------------------------------------------------------------
# Non-mutating convenience wrapper
# ---------------------------------------------------------------------------

def pack_blocks(
    blocks: Sequence[Any],
    growth_direction: str = GROWTH_RIGHT,
    constrained_size: Optional[float] = None,
    gap: float = DEFAULT_GAP,
    on_grow: Optional[GrowCallback] = None,
) -> Tuple[List[Block], GrowingPacker]:
    """
    Pack fresh copies of `blocks`, leaving the originals untouched.

    Returns
    -------
    (packed, packer)
        `packed` holds one new `Block` per input, in input order, with the
        padded size and the placement (or None). `packer` is kept for
        inspection of the final root, history and stats.
    """
    copies = [
        Block(width=b.width, height=b.height, key=getattr(b, "key", None))
        for b in blocks
    ]
    packer = GrowingPacker(
        growth_direction=growth_direction,
        constrained_size=constrained_size,
        gap=gap,
        on_grow=on_grow,
    )
    packer.fit(copies)
    return copies, packer


__all__ = [
    "GrowCallback",
    "GrowthEvent",
    "PackStats",
    "GrowingPacker",
    "pack_blocks",
]
