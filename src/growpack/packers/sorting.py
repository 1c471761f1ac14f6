"""
Pre-sort helpers for the growing packer.

The packer only grows along one axis at a time, so a block that is both
wider and taller than the container so far is rejected. Feeding blocks
largest-first avoids that almost entirely; sorting by max(width, height)
tends to give the squarest layouts, sorting by height the next best.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from ..config import DEFAULT_SORT_MODE, SORT_MODES


def _max_side(block: Any) -> float:
    return max(block.width, block.height)


def _area(block: Any) -> float:
    return block.width * block.height


_SORT_KEYS: Dict[str, Callable[[Any], float]] = {
    "height": lambda b: b.height,
    "width": lambda b: b.width,
    "area": _area,
    "maxside": _max_side,
}


def sort_blocks(blocks: Sequence[Any], mode: str = DEFAULT_SORT_MODE) -> List[Any]:
    """
    Return a new list of `blocks` ordered for packing.

    Modes
    -----
    - 'none': input order
    - 'height', 'width', 'area', 'maxside': descending by that measure

    Sorting is stable, so ties keep their input order. The blocks
    themselves are not copied.
    """
    mode = mode.lower()
    if mode not in SORT_MODES:
        raise ValueError(f"Unknown sort mode {mode!r}; expected one of {SORT_MODES}")
    if mode == "none":
        return list(blocks)
    return sorted(blocks, key=_SORT_KEYS[mode], reverse=True)


__all__ = [
    "sort_blocks",
]
