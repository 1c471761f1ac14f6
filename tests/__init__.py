"""
Test package for the growpack block-layout project.

This directory collects unit and integration tests for the core modules:

- Growing packer search / split / growth rules (`test_growing_packer.py`)
- Layout-wide properties over random inputs (`test_packing_properties.py`)
- Evaluation helpers (`test_evaluation.py`)
- Sorting and sample blocks (`test_sorting.py`, `test_samples.py`)
- CSV I/O, plotting and the CLI (`test_io.py`, `test_plotting.py`, `test_layout.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root.
"""

__all__ = []
