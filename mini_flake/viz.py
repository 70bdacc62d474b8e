"""
VISUALIZATION: PLOTTING SNOWFLAKES
==================================

PURPOSE:
--------
Draw a snowflake with matplotlib: the filled outline polygon, and on top of
it the skeleton (each parent-child branch as a line, each origin as a dot).

Seeing both together is the quickest way to check a spec: the outline
should hug every branch at half the parent's branch_width, and elbows should
sit in the corners between neighbouring branches. Overlapping specs show up
immediately as crossed edges.
"""

import os
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.patches import Polygon

from .config import CONFIG, RenderConfig
from .kernel.outline import Snowflake
from .model import PositionedNode
from .post import iter_nodes, vertices_array


def _web_segments(web: PositionedNode) -> np.ndarray:
    """(M, 2, 2) array of parent→child segments."""
    segments = [
        [[node.origin.x, node.origin.y], [child.origin.x, child.origin.y]]
        for node in iter_nodes(web)
        for child in node.children
    ]
    return np.array(segments, dtype=float).reshape(-1, 2, 2)


def create_snowflake_figure(
    flake: Snowflake,
    show_web: bool = True,
    title: str = "Snowflake",
    config: Optional[RenderConfig] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Build the figure without saving it.

    Parameters:
    -----------
    flake : Snowflake
        Result of kernel.snowflake()
    show_web : bool
        Draw the skeleton lines and origin markers
    title : str
        Axes title
    config : RenderConfig, optional
        Colours and figure size (default: CONFIG)

    Returns:
    --------
    (fig, ax)
        The caller owns the figure (close it when done).
    """
    config = config or CONFIG
    fig, ax = plt.subplots(figsize=config.figsize, facecolor=config.background)

    xy = vertices_array(flake.vertices)
    outline = Polygon(
        xy,
        closed=True,
        facecolor=config.fill_color,
        edgecolor=config.stroke_color,
        linewidth=config.stroke_width,
        alpha=0.85,
        label=f"Outline ({len(xy)} vertices)",
    )
    ax.add_patch(outline)

    if show_web:
        segments = _web_segments(flake.web)
        if len(segments):
            ax.add_collection(LineCollection(segments, colors=config.web_color, linewidths=1.0))
        origins = np.array([[n.origin.x, n.origin.y] for n in iter_nodes(flake.web)])
        ax.plot(origins[:, 0], origins[:, 1], 'o', color=config.web_color,
                markersize=3, label="Branch origins")

    # SVG convention: y grows downward, so flip to match the SVG output
    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.invert_yaxis()
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right', fontsize=9)

    return fig, ax


def plot_snowflake(
    flake: Snowflake,
    outpath: str,
    show_web: bool = True,
    title: str = "Snowflake",
    config: Optional[RenderConfig] = None,
) -> None:
    """
    Plot a snowflake and save it to outpath (.png, .pdf, .svg).

    Creates the output directory if needed. Doesn't display the figure.
    """
    config = config or CONFIG
    fig, _ = create_snowflake_figure(flake, show_web=show_web, title=title, config=config)

    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.savefig(outpath, dpi=config.dpi, bbox_inches='tight', facecolor=config.background)
    plt.close(fig)  # Close to free memory
