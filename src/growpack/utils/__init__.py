"""
Utility helpers for the growpack block-layout project.

Small, reusable helpers that don't naturally belong in `geometry`,
`evaluation`, or `packers`:

- CSV / path utilities for block lists and layouts (`io.py`)
- Reproducible sample block sets (`samples.py`)
- matplotlib rendering of layouts (`plotting.py`)

`plotting` is not imported here so that matplotlib stays optional at
import time.
"""

__all__ = []
