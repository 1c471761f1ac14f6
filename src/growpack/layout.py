"""
High-level layout builder for the growpack block-layout project.

This module glues together:

- A pre-sort from `growpack.packers.sorting`.
- The growing packer from `growpack.packers.growing`.
- The layout table / CSV helpers from `growpack.evaluation` and
  `growpack.utils.io`.

It exposes functions to:

- Pack a list of blocks without touching the caller's originals.
- Turn the result into a DataFrame or a CSV on disk.
- Use a small CLI for convenience:

      python -m growpack.layout --random 40 --constrained-size 600
      python -m growpack.layout --input tiles.csv --direction down --plot out.png
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from .config import (
    DEFAULT_GAP,
    DEFAULT_GROWTH_DIRECTION,
    DEFAULT_SORT_MODE,
    GROWTH_DIRECTIONS,
    SORT_MODES,
    configure_logging,
    set_global_seeds,
)
from .evaluation import layout_table, summarize_layout
from .geometry import Block
from .packers import GrowingPacker, pack_blocks, sort_blocks
from .utils.io import get_timestamped_layout_path, load_blocks_csv, save_layout_df


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core layout builder
# ---------------------------------------------------------------------------

def build_layout(
    blocks: Sequence[Any],
    growth_direction: str = DEFAULT_GROWTH_DIRECTION,
    constrained_size: Optional[float] = None,
    gap: float = DEFAULT_GAP,
    sort: str = DEFAULT_SORT_MODE,
) -> Tuple[List[Block], GrowingPacker]:
    """
    Sort and pack `blocks`.

    Pipeline:

    1. Order the blocks with `sort_blocks` (descending by `sort`).
    2. Pack padded copies with `pack_blocks`; the inputs are not mutated.

    Parameters
    ----------
    blocks:
        Objects with `width` and `height` (and optionally `key`).
    growth_direction:
        "right" or "down".
    constrained_size:
        Initial extent of the axis orthogonal to growth, or None to start
        from the first block's size.
    gap:
        Padding per side.
    sort:
        One of `SORT_MODES`; 'none' keeps the input order.

    Returns
    -------
    (packed, packer)
        Packed copies in *packing* order, and the packer for inspection.
    """
    ordered = sort_blocks(blocks, mode=sort)
    logger.debug("Packing %d blocks (sort=%s, direction=%s)", len(ordered), sort, growth_direction)
    return pack_blocks(
        ordered,
        growth_direction=growth_direction,
        constrained_size=constrained_size,
        gap=gap,
    )


def layout_to_df(blocks: Sequence[Any]) -> pd.DataFrame:
    """
    Convenience wrapper: one row per block, see `evaluation.layout_table`.
    """
    return layout_table(blocks)


# ---------------------------------------------------------------------------
# Write CSV helper
# ---------------------------------------------------------------------------

def write_layout_csv(
    blocks: Sequence[Any],
    output_path: Optional[Path] = None,
) -> Path:
    """
    Write a packed layout to CSV.

    Parameters
    ----------
    blocks:
        Packed blocks.
    output_path:
        If provided, the CSV will be written here. If None, a timestamped
        name will be created under `data/layouts/`.

    Returns
    -------
    Path
        The path to the written CSV.
    """
    if output_path is None:
        output_path = get_timestamped_layout_path()
    return save_layout_df(layout_to_df(blocks), output_path)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Pack rectangular blocks into a growing container.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        type=str,
        default=None,
        help="CSV with width,height[,key] columns.",
    )
    source.add_argument(
        "--random",
        type=int,
        default=None,
        metavar="N",
        help="Pack N random blocks instead of reading a CSV.",
    )
    parser.add_argument(
        "--direction",
        choices=GROWTH_DIRECTIONS,
        default=DEFAULT_GROWTH_DIRECTION,
        help="Preferred growth direction.",
    )
    parser.add_argument(
        "--constrained-size",
        type=float,
        default=None,
        help=(
            "Initial size of the axis orthogonal to growth. "
            "If omitted, the container starts at the first block's size."
        ),
    )
    parser.add_argument(
        "--gap",
        type=float,
        default=DEFAULT_GAP,
        help="Padding added to each side of every block.",
    )
    parser.add_argument(
        "--sort",
        choices=SORT_MODES,
        default=DEFAULT_SORT_MODE,
        help="Pre-sort order (descending).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --random (optional).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=(
            "Optional output path for the layout CSV. If omitted, a timestamped "
            "name will be created under data/layouts/."
        ),
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Optional path for a PNG rendering of the layout.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every growth event.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.input is not None:
            blocks = load_blocks_csv(args.input)
        else:
            from .utils.samples import random_blocks

            blocks = random_blocks(args.random, seed=set_global_seeds(args.seed))

        packed, packer = build_layout(
            blocks,
            growth_direction=args.direction,
            constrained_size=args.constrained_size,
            gap=args.gap,
            sort=args.sort,
        )
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"[growpack] {exc}") from exc

    summary = summarize_layout(packed, packer.root)
    print(
        f"[growpack] Placed {summary['placed']}/{summary['blocks']} blocks "
        f"in {summary['width']:g}x{summary['height']:g} "
        f"(fill {summary['fill_ratio']:.1%})"
    )
    if summary["rejected"]:
        print(f"[growpack] Rejected: {summary['rejected']}")

    output = Path(args.output) if args.output is not None else None
    out_path = write_layout_csv(packed, output)
    print(f"[growpack] Layout written to: {out_path}")

    if args.plot is not None:
        # Lazy import: matplotlib is only needed when rendering.
        import matplotlib

        matplotlib.use("Agg")
        from .utils.plotting import plot_layout

        ax = plot_layout(packed, root=packer.root)
        plot_path = Path(args.plot)
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        ax.figure.savefig(plot_path, dpi=150, bbox_inches="tight")
        print(f"[growpack] Plot written to: {plot_path}")


if __name__ == "__main__":
    main()
