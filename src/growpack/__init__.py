"""
growpack – growing binary-tree block layout

This package places rectangular blocks (tiles, cards, sprites) into a
single container that starts at the size of the first block and grows
right or down on demand, keeping the layout roughly square or within a
fixed size along one axis. See the `packers` and `utils` subpackages for
the algorithm and helpers.

    from growpack import Block, GrowingPacker

    blocks = [Block(100, 100), Block(80, 80)]
    GrowingPacker(constrained_size=300, gap=0).fit(blocks)
"""

from .geometry import Block, Node, Placement
from .packers import GrowingPacker, pack_blocks, sort_blocks

__all__ = [
    "Block",
    "Node",
    "Placement",
    "GrowingPacker",
    "pack_blocks",
    "sort_blocks",
]

__version__ = "0.1.0"
