# mini_flake/post.py
"""
POSTPROCESSING: Measuring Outlines and Webs
===========================================

Once a snowflake is built, these helpers answer the usual follow-up
questions: how big is it, how much area does the filled shape cover, how
long is the cut path, how deep is the tree.

Vertex lists are converted to (N, 2) numpy arrays so everything below is a
handful of vectorised operations.
"""

import numpy as np
from typing import Dict, Iterator, Sequence, Tuple

from .model import Point, PositionedNode


def vertices_array(vertices: Sequence[Point]) -> np.ndarray:
    """Vertices as a float array of shape (N, 2)."""
    return np.array([[p.x, p.y] for p in vertices], dtype=float).reshape(-1, 2)


def polygon_area(vertices: Sequence[Point]) -> float:
    """
    Area enclosed by the closed outline (shoelace formula).

    Returns the absolute value, so winding order doesn't matter. Outlines
    that cross themselves are not handled specially.
    """
    xy = vertices_array(vertices)
    if len(xy) < 3:
        return 0.0
    x, y = xy[:, 0], xy[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2.0)


def polygon_perimeter(vertices: Sequence[Point]) -> float:
    """Length of the closed path through the vertices (last joins first)."""
    xy = vertices_array(vertices)
    if len(xy) < 2:
        return 0.0
    edges = np.roll(xy, -1, axis=0) - xy
    return float(np.hypot(edges[:, 0], edges[:, 1]).sum())


def bounding_box(vertices: Sequence[Point]) -> Tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of the vertices."""
    xy = vertices_array(vertices)
    if len(xy) == 0:
        raise ValueError("bounding_box of an empty vertex list")
    min_x, min_y = xy.min(axis=0)
    max_x, max_y = xy.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def rotate_points(
    vertices: Sequence[Point],
    angle_degrees: float,
    center: Point = Point(0.0, 0.0),
) -> np.ndarray:
    """Vertices rotated about center, as an (N, 2) array."""
    theta = np.radians(angle_degrees)
    c, s = np.cos(theta), np.sin(theta)
    R = np.array([[c, -s], [s, c]])
    xy = vertices_array(vertices) - [center.x, center.y]
    return xy @ R.T + [center.x, center.y]


def is_rotationally_symmetric(
    vertices: Sequence[Point],
    angle_degrees: float,
    center: Point = Point(0.0, 0.0),
    tol: float = 1e-6,
) -> bool:
    """
    True if rotating the vertex set by angle_degrees maps it onto itself.

    Compares the sets, not the sequences: every rotated vertex must land
    within tol of some original vertex.
    """
    xy = vertices_array(vertices)
    rotated = rotate_points(vertices, angle_degrees, center)
    # Pairwise distances (N, N)
    d = np.linalg.norm(rotated[:, None, :] - xy[None, :, :], axis=2)
    return bool(np.all(d.min(axis=1) <= tol))


def iter_nodes(node: PositionedNode) -> Iterator[PositionedNode]:
    """All nodes of the web, depth-first pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def web_summary(node: PositionedNode) -> Dict[str, float]:
    """
    Basic statistics of a laid-out web.

    Returns:
    --------
    dict with:
        'n_nodes':   total node count
        'n_leaves':  endpoint count (branch tips)
        'depth':     longest root-to-leaf path, in branches
        'reach':     farthest node distance from the root origin
    """
    n_nodes = 0
    n_leaves = 0
    depth = 0
    reach = 0.0
    root = node.origin

    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        n_nodes += 1
        depth = max(depth, level)
        reach = max(reach, float(np.hypot(current.origin.x - root.x, current.origin.y - root.y)))
        if current.is_leaf:
            n_leaves += 1
        stack.extend((child, level + 1) for child in current.children)

    return {
        'n_nodes': n_nodes,
        'n_leaves': n_leaves,
        'depth': depth,
        'reach': reach,
    }
