"""
Global configuration for the growpack block-layout project.

This module centralizes:

- Project-root and data paths
- Random seeds for reproducibility
- Packing defaults (padding gap, growth direction, sort modes)
- Logging setup used by the command-line entry points

All of these are kept in one place so that layouts are easy to
reproduce and configuration changes don't require hunting through
multiple files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging
import random

import numpy as np


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/growpack/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

DATA_DIR: Path = PROJECT_ROOT / "data"
DATA_LAYOUTS_DIR: Path = DATA_DIR / "layouts"


# ---------------------------------------------------------------------------
# Randomness / reproducibility
# ---------------------------------------------------------------------------

# Default global seed for demo block sets. You can override per run.
DEFAULT_SEED: int = 1234


def set_global_seeds(seed: Optional[int] = None) -> int:
    """
    Set Python's and NumPy's global random seeds and return the seed used.

        from growpack.config import set_global_seeds
        set_global_seeds(2025)
    """
    if seed is None:
        seed = DEFAULT_SEED

    random.seed(seed)
    np.random.seed(seed)
    return seed


# ---------------------------------------------------------------------------
# Packing defaults
# ---------------------------------------------------------------------------

# Padding added to each side of every block before packing. The total
# added per dimension is 2 * gap.
DEFAULT_GAP: float = 10

# Growth directions. The packer prefers to enlarge the container along
# this axis and keeps the other one at the constrained size.
GROWTH_RIGHT: str = "right"
GROWTH_DOWN: str = "down"
GROWTH_DIRECTIONS = (GROWTH_RIGHT, GROWTH_DOWN)
DEFAULT_GROWTH_DIRECTION: str = GROWTH_RIGHT

# Pre-sort modes understood by `growpack.packers.sorting.sort_blocks`.
# Sorting by max side (or height) descending gives the best layouts.
SORT_MODES = ("none", "height", "width", "area", "maxside")
DEFAULT_SORT_MODE: str = "maxside"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Install a basic stderr handler for the `growpack` loggers.

    Only the CLI calls this; library code never touches handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("growpack").setLevel(level)


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "DATA_LAYOUTS_DIR",
    # Seeds / randomness
    "DEFAULT_SEED",
    "set_global_seeds",
    # Packing defaults
    "DEFAULT_GAP",
    "GROWTH_RIGHT",
    "GROWTH_DOWN",
    "GROWTH_DIRECTIONS",
    "DEFAULT_GROWTH_DIRECTION",
    "SORT_MODES",
    "DEFAULT_SORT_MODE",
    # Logging
    "LOG_FORMAT",
    "configure_logging",
]
