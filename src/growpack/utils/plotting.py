"""
Visualization helpers for the growpack block-layout project.

These are thin convenience wrappers around matplotlib for:
- Drawing a packed layout (placed blocks plus the container outline).
- Drawing several layouts side by side for comparison.

Layouts use screen coordinates (y grows downward), so the y axis is
inverted to show the first block in the top-left corner.

Typical usage
-------------

    import matplotlib.pyplot as plt
    from growpack.utils.plotting import plot_layout

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_layout(packed, root=packer.root, ax=ax, title="My layout")

You remain in control of figure creation and display.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..evaluation import layout_bounds, placed_blocks
from ..geometry import Node


def plot_layout(
    blocks: Sequence[Any],
    root: Optional[Node] = None,
    ax=None,
    title: Optional[str] = None,
    show_container: bool = True,
    show_keys: bool = False,
    padding: float = 10.0,
):
    """
    Plot the placed blocks of a layout.

    Parameters
    ----------
    blocks:
        Packed blocks; rejected ones are skipped.
    root:
        Optional final packer root. Its extents are drawn as the container
        outline; otherwise the placements' bounding box is used.
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    title:
        Optional plot title.
    show_container:
        If True, draw the container outline as a dashed rectangle.
    show_keys:
        If True, label each block with its `key`.
    padding:
        Extra margin around the container, in layout units.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    for b in placed_blocks(blocks):
        p = b.placement
        ax.add_patch(Rectangle((p.x, p.y), p.width, p.height, alpha=0.4, linewidth=0.8))
        if show_keys and getattr(b, "key", None) is not None:
            ax.text(p.x + p.width / 2, p.y + p.height / 2, str(b.key), ha="center", va="center", fontsize=6)

    if root is not None:
        width, height = root.w, root.h
    else:
        width, height = layout_bounds(blocks)

    if show_container:
        ax.add_patch(
            Rectangle((0, 0), width, height, fill=False, linestyle="--", linewidth=2)
        )

    ax.set_xlim(-padding, width + padding)
    ax.set_ylim(height + padding, -padding)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    if title is not None:
        ax.set_title(title)

    return ax


def plot_layouts_grid(
    layouts: Sequence[Tuple[Sequence[Any], Optional[Node]]],
    titles: Optional[Sequence[str]] = None,
    ncols: int = 2,
    figsize_per_plot: Tuple[float, float] = (5.0, 5.0),
):
    """
    Plot several `(blocks, root)` layouts in a grid of subplots.

    Returns
    -------
    (fig, axes):
        The matplotlib Figure and the flat list of Axes.
    """
    num = len(layouts)
    if num == 0:
        raise ValueError("plot_layouts_grid called with an empty list of layouts.")

    if titles is not None and len(titles) != num:
        raise ValueError("If provided, 'titles' must match the number of layouts.")

    nrows = (num + ncols - 1) // ncols
    fig, axes = plt.subplots(
        nrows,
        ncols,
        figsize=(figsize_per_plot[0] * ncols, figsize_per_plot[1] * nrows),
        squeeze=False,
    )
    axes_flat = list(axes.ravel())

    for i, (blocks, root) in enumerate(layouts):
        title_i = titles[i] if titles is not None else None
        plot_layout(blocks, root=root, ax=axes_flat[i], title=title_i)

    # Hide any unused axes
    for j in range(num, len(axes_flat)):
        axes_flat[j].axis("off")

    fig.tight_layout()
    return fig, axes_flat


__all__ = [
    "plot_layout",
    "plot_layouts_grid",
]
