# mini_flake/kernel/layout.py
"""
TREE LAYOUT: From Abstract BranchSpec to Positioned Nodes
==========================================================

PURPOSE:
--------
A BranchSpec says "spread N children over S degrees, each L long". This
module turns that into absolute positions: every child gets a direction
(angle_offset) and an origin one branch_length away from its parent.

ANGLE RULES:
------------
Given a node arriving at direction A with N children and spread S:

    N == 1           → the child continues straight on: angle A
    N > 1, S == 360  → full circle, step 360/N, first child at A − 180
                       (no duplicate edge: the last child stops one step
                        short of the first)
    N > 1, S < 360   → fan, step S/(N−1), first child at A − S/2,
                       last child at A + S/2 (one on each edge)

Example (S=180, N=3, A=0):   −90, 0, +90

VALIDATION:
-----------
layout() validates the whole tree up front so that a bad spec fails before
any node is built, with an error that names where the problem is.
"""

import logging
from typing import List

import numpy as np

from ..model import BranchSpec, InvalidSpec, ORIGIN, Point, PositionedNode
from .points import polar_point

_LOGGER = logging.getLogger(__name__)

FULL_CIRCLE = 360.0


def validate_spec(spec: BranchSpec) -> None:
    """
    Check every node of a spec tree.

    Raises:
    -------
    InvalidSpec
        - branch_length <= 0 or branch_width <= 0
        - any field not finite
        - spread_angle outside [0, 360]
        - more than one child with spread_angle == 0 (children would coincide)

    The message starts with the node's path, e.g. "root.children[1].children[0]".
    """
    # Iterative walk: depth is bounded by the caller, not by this check
    stack = [(spec, "root")]
    while stack:
        node, path = stack.pop()
        if not isinstance(node, BranchSpec):
            raise InvalidSpec(f"{path}: expected BranchSpec, got {type(node).__name__}")

        for name in ('spread_angle', 'branch_length', 'branch_width'):
            value = getattr(node, name)
            if not np.isfinite(value):
                raise InvalidSpec(f"{path}: {name} must be finite, got {value}")

        if node.branch_length <= 0:
            raise InvalidSpec(f"{path}: branch_length must be positive, got {node.branch_length}")
        if node.branch_width <= 0:
            raise InvalidSpec(f"{path}: branch_width must be positive, got {node.branch_width}")
        if not 0 <= node.spread_angle <= FULL_CIRCLE:
            raise InvalidSpec(f"{path}: spread_angle must be in [0, 360], got {node.spread_angle}")
        if len(node.children) > 1 and node.spread_angle == 0:
            raise InvalidSpec(
                f"{path}: {len(node.children)} children cannot share a spread_angle of 0"
            )

        for i in reversed(range(len(node.children))):
            stack.append((node.children[i], f"{path}.children[{i}]"))


def child_angles(spec: BranchSpec, angle_offset: float) -> List[float]:
    """Directions (degrees) of spec's children for a node arriving at angle_offset."""
    n_children = len(spec.children)
    if n_children == 0:
        return []

    if n_children == 1:
        angle_increment = 0.0
        start_offset = angle_offset
    else:
        if spec.spread_angle == FULL_CIRCLE:
            # Even spacing around the circle; no child on the closing edge
            angle_increment = spec.spread_angle / n_children
        else:
            # One child on each edge of the spread
            angle_increment = spec.spread_angle / (n_children - 1)
        start_offset = angle_offset - spec.spread_angle / 2.0

    return [start_offset + i * angle_increment for i in range(n_children)]


def _layout_node(spec: BranchSpec, origin: Point, angle_offset: float) -> PositionedNode:
    children = []
    for child_spec, child_angle in zip(spec.children, child_angles(spec, angle_offset)):
        child_origin = polar_point(origin, spec.branch_length, child_angle)
        children.append(_layout_node(child_spec, child_origin, child_angle))

    return PositionedNode(
        origin=origin,
        angle_offset=angle_offset,
        branch_width=spec.branch_width,
        children=tuple(children),
    )


def layout(
    spec: BranchSpec,
    origin: Point = ORIGIN,
    angle_offset: float = 0.0,
    validate: bool = True,
) -> PositionedNode:
    """
    Place a BranchSpec tree in the plane.

    Parameters:
    -----------
    spec : BranchSpec
        Root of the abstract tree
    origin : Point
        Where the root sits (default: (0, 0))
    angle_offset : float
        Direction of the (imaginary) trunk arriving at the root, in degrees.
        Children are spread symmetrically around it.
    validate : bool
        Run validate_spec() on the whole tree first (default True).

    Returns:
    --------
    PositionedNode
        Tree with the same shape as spec; children in input order.

    Raises:
    -------
    InvalidSpec
        If validate is True and the spec is invalid.

    Example:
    --------
    >>> leaf = branch_spec(0, 5, 1)
    >>> web = layout(branch_spec(180, 10, 2, [leaf, leaf, leaf]))
    >>> [c.angle_offset for c in web.children]
    [-90.0, 0.0, 90.0]
    """
    if validate:
        validate_spec(spec)

    node = _layout_node(spec, origin, float(angle_offset))
    _LOGGER.debug(
        "layout: root at (%.6g, %.6g), angle_offset=%.6g, %d root children",
        origin.x, origin.y, angle_offset, len(node.children),
    )
    return node
