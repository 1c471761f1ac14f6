"""
I/O utilities for the growpack block-layout project.

This module centralizes common file and path operations so that:
- Scripts do *not* hard-code paths.
- Reading block lists and writing layouts is consistent across the project.

Typical usage
-------------

    from growpack.utils.io import load_blocks_csv, save_layout_df
    from growpack.layout import build_layout, layout_to_df

    blocks = load_blocks_csv("tiles.csv")
    packed, packer = build_layout(blocks, constrained_size=800)
    csv_path = save_layout_df(layout_to_df(packed))
    print("Wrote layout to:", csv_path)

Block CSV format: a header row with `width` and `height` columns and an
optional `key` column. Extra columns are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import datetime as dt
import pandas as pd

from ..config import DATA_LAYOUTS_DIR
from ..geometry import Block


PathLike = Union[str, Path]

REQUIRED_BLOCK_COLUMNS = ("width", "height")


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def get_layouts_dir() -> Path:
    """
    Return the layouts directory path (`data/layouts/`), creating it
    if needed.
    """
    DATA_LAYOUTS_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_LAYOUTS_DIR


def get_timestamped_layout_path(
    prefix: str = "layout",
    suffix: str = ".csv",
) -> Path:
    """
    Build a timestamped path under `data/layouts/`.

    Example output filename:
        layout_20251126_153045.csv
    """
    get_layouts_dir()
    timestamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
    return DATA_LAYOUTS_DIR / f"{prefix}_{timestamp}{suffix}"


# ---------------------------------------------------------------------------
# Loading helpers
# ---------------------------------------------------------------------------

def blocks_from_df(df: pd.DataFrame) -> List[Block]:
    """
    Convert a DataFrame with `width`, `height` (and optionally `key`)
    columns into unplaced blocks, in row order.

    Raises
    ------
    ValueError
        If a required column is missing or a size is negative or not a number.
    """
    missing = [c for c in REQUIRED_BLOCK_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Block table is missing required columns: {missing}")

    try:
        widths = pd.to_numeric(df["width"]).astype(float)
        heights = pd.to_numeric(df["height"]).astype(float)
    except (TypeError, ValueError) as exc:
        raise ValueError("Block widths and heights must be numeric.") from exc

    if widths.isna().any() or heights.isna().any():
        raise ValueError("Block widths and heights must not be empty.")
    if (widths < 0).any() or (heights < 0).any():
        raise ValueError("Block widths and heights must be non-negative.")

    keys = df["key"].tolist() if "key" in df.columns else [None] * len(df)
    return [
        Block.from_size(float(w), float(h), key=k)
        for w, h, k in zip(widths, heights, keys)
    ]


def load_blocks_csv(path: PathLike) -> List[Block]:
    """
    Load a block list from CSV.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the table is malformed (see `blocks_from_df`).
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Block CSV not found: {csv_path}")
    return blocks_from_df(pd.read_csv(csv_path))


# ---------------------------------------------------------------------------
# Saving helpers
# ---------------------------------------------------------------------------

def save_layout_df(
    layout_df: pd.DataFrame,
    path: Optional[PathLike] = None,
    prefix: str = "layout",
) -> Path:
    """
    Save a layout DataFrame (see `growpack.evaluation.layout_table`) to CSV.

    Parameters
    ----------
    layout_df:
        One row per block with columns key, width, height, x, y, placed.
    path:
        Optional explicit output path. If None, a timestamped filename is
        created under `data/layouts/` via `get_timestamped_layout_path`.
    prefix:
        Filename prefix when generating a timestamped path.

    Returns
    -------
    Path
        The path to the written CSV.
    """
    if path is None:
        out_path = get_timestamped_layout_path(prefix=prefix)
    else:
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)

    layout_df.to_csv(out_path, index=False)
    return out_path


__all__ = [
    "REQUIRED_BLOCK_COLUMNS",
    "get_layouts_dir",
    "get_timestamped_layout_path",
    "blocks_from_df",
    "load_blocks_csv",
    "save_layout_df",
]
