"""
Sample block sets for demos and tests.

Real callers bring their own block sizes (tiles, cards, sprites); these
helpers produce reproducible random ones so the CLI and the test suite
have something to pack.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config import DEFAULT_SEED
from ..geometry import Block


def random_blocks(
    n: int,
    min_size: int = 20,
    max_size: int = 200,
    seed: Optional[int] = None,
) -> List[Block]:
    """
    Generate `n` blocks with integer sides drawn uniformly from
    [min_size, max_size].

    Parameters
    ----------
    n:
        Number of blocks (>= 0).
    min_size, max_size:
        Inclusive bounds on each side. Must satisfy 0 <= min_size <= max_size.
    seed:
        Seed for the generator. If None, `DEFAULT_SEED` is used, so calls
        are reproducible unless a seed is passed explicitly.

    Returns
    -------
    List[Block]
        Unplaced blocks keyed "b0", "b1", ...
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if min_size < 0 or min_size > max_size:
        raise ValueError(
            f"Expected 0 <= min_size <= max_size, got min_size={min_size}, max_size={max_size}"
        )

    # Local generator: the global random state is left alone.
    rng = np.random.default_rng(DEFAULT_SEED if seed is None else seed)
    sizes = rng.integers(min_size, max_size, size=(n, 2), endpoint=True)
    return [
        Block.from_size(int(w), int(h), key=f"b{i}")
        for i, (w, h) in enumerate(sizes)
    ]


__all__ = [
    "random_blocks",
]
