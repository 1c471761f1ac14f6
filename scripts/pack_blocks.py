#!/usr/bin/env python
"""
CLI helper to pack a block list and save the layout.

This script is a thin wrapper around the library entry point
`growpack.layout.main`, runnable from a checkout without installation.

Typical usage from the project root
-----------------------------------

    python scripts/pack_blocks.py --random 50 --constrained-size 600
    python scripts/pack_blocks.py --input tiles.csv --direction down --gap 5
    python scripts/pack_blocks.py --random 50 --seed 7 --plot data/layouts/demo.png

The script automatically adds `src/` to PYTHONPATH so that it can import the
`growpack` package without requiring installation.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import List, Optional


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/pack_blocks.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def main(argv: Optional[List[str]] = None) -> None:
    project_root = _ensure_src_on_path()

    # Import after path configuration
    from growpack.layout import main as layout_main

    print(f"[pack_blocks] Project root: {project_root}")
    layout_main(argv)


if __name__ == "__main__":
    main()
