"""
Visualization utilities for point sets and their circle covers.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch
from typing import Optional

from .geometry import Cover
from .planner import as_coordinates


def visualize_cover(cover: Cover,
                    points=None,
                    output_file: Optional[str] = None,
                    alpha: float = 0.25,
                    figsize: tuple = (10, 10)):
    """
    Plot circles of a cover with optional point overlay.

    Args:
        cover: Cover to draw
        points: Optional points to scatter on top
        output_file: If given, the figure is saved there and closed
        alpha: Transparency of circles
        figsize: Figure size

    Returns:
        The matplotlib figure (None once saved and closed)
    """
    fig, ax = plt.subplots(figsize=figsize)
    colors = plt.cm.viridis(np.linspace(0, 1, max(len(cover), 1)))

    for circle, color in zip(cover.circles, colors):
        ax.add_patch(CirclePatch(circle.center.as_tuple(), circle.radius,
                                 facecolor=color, edgecolor=color, alpha=alpha))
        ax.plot(circle.center.x, circle.center.y, '+', color=color)

    if points is not None:
        coords = as_coordinates(points)
        if len(coords):
            ax.scatter(coords[:, 0], coords[:, 1], s=6, c='black')

    if len(cover):
        min_bounds, max_bounds = cover.bounds()
        ax.set_xlim(min_bounds[0], max_bounds[0])
        ax.set_ylim(min_bounds[1], max_bounds[1])
    ax.set_aspect('equal')
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(f'{len(cover)} circles')

    if output_file is not None:
        fig.savefig(output_file, dpi=100, bbox_inches='tight')
        plt.close(fig)
        return None
    return fig
