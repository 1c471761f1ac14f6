"""
Packing algorithms for the growpack block-layout project.

- Growing binary-tree packer (`growing.py`)
- Pre-sort helpers that give the packer a sensible block order (`sorting.py`)

High-level code (e.g. `growpack.layout`) should import from here rather
than from the individual modules.
"""

from .growing import GrowingPacker, GrowthEvent, PackStats, pack_blocks
from .sorting import sort_blocks

__all__ = [
    "GrowingPacker",
    "GrowthEvent",
    "PackStats",
    "pack_blocks",
    "sort_blocks",
]
