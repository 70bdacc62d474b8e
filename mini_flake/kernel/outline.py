# mini_flake/kernel/outline.py
"""
OUTLINE BUILDER: Giving the Branches Width
==========================================

PURPOSE:
--------
A PositionedNode tree is a skeleton of zero-width lines. This module walks
around it and produces the closed polygon that outlines the branches when
each one has its node's branch_width.

HOW THE WALK WORKS:
-------------------
At each internal node we sweep the children in order, starting from the
direction straight back along the incoming trunk (angle_offset − 180) and
ending on the far side of the trunk (angle_offset + 180):

    previous = angle_offset − 180
    for each child:
        elbow between previous and child   (skipped if they coincide)
        the child's own outline            (recursive)
        previous = child direction
    elbow between previous and angle_offset + 180

A leaf contributes only its own origin (the branch tip).

The first elbow is skipped when the first child points straight back down
the trunk, which happens for the first child of a 360° node. Single-child
nodes never hit the skip: their child continues along the trunk, 180° away
from the starting direction.

Nothing here checks whether the outline crosses itself; specs whose
branches overlap produce overlapping outlines.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..model import BranchSpec, NestedOutline, ORIGIN, OutlineFragment, Point, PositionedNode
from .layout import layout
from .points import angles_coincide, elbow_point

_LOGGER = logging.getLogger(__name__)


def build_outline(node: PositionedNode) -> NestedOutline:
    """
    Build the nested outline of node's subtree.

    Returns:
    --------
    NestedOutline
        Leaf: (origin,)
        Internal: elbow points and child outlines, in boundary order

    Raises:
    -------
    DegenerateElbowAngle
        If a structurally required elbow has coinciding directions.
    """
    if node.is_leaf:
        return NestedOutline((node.origin,))

    components: List[OutlineFragment] = []
    previous_angle = node.angle_offset - 180.0

    for child in node.children:
        if not angles_coincide(previous_angle, child.angle_offset):
            components.append(
                elbow_point(node.origin, node.branch_width, previous_angle, child.angle_offset)
            )
        components.append(build_outline(child))
        previous_angle = child.angle_offset

    final_angle = node.angle_offset + 180.0
    components.append(elbow_point(node.origin, node.branch_width, previous_angle, final_angle))

    return NestedOutline(tuple(components))


def flatten(fragment: OutlineFragment) -> List[Point]:
    """
    Depth-first, left-to-right list of the vertices in fragment.

    A Point yields itself; a NestedOutline yields its components' vertices
    concatenated in order.
    """
    vertices: List[Point] = []
    # Explicit stack of iterators so deep trees don't hit the recursion limit
    stack = [iter((fragment,))]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if isinstance(item, Point):
            vertices.append(item)
        elif isinstance(item, NestedOutline):
            stack.append(iter(item.components))
        else:
            raise TypeError(f"Unexpected outline component: {type(item).__name__}")
    return vertices


def outline_vertices(node: PositionedNode) -> List[Point]:
    """Polygon vertices of node's subtree (build_outline + flatten)."""
    return flatten(build_outline(node))


@dataclass(frozen=True)
class Snowflake:
    """
    Everything produced from one BranchSpec.

    web : PositionedNode
        The laid-out skeleton (for drawing origins and branch lines)
    outline : NestedOutline
        Nested boundary fragments
    vertices : tuple of Point
        Closed outline polygon (first and last implicitly connected)
    """
    web: PositionedNode
    outline: NestedOutline
    vertices: Tuple[Point, ...]


def snowflake(
    spec: BranchSpec,
    origin: Point = ORIGIN,
    angle_offset: float = 0.0,
) -> Snowflake:
    """
    Run the full pipeline: validate → layout → outline → flatten.

    Raises:
    -------
    InvalidSpec
        If spec is invalid (nothing is built).
    DegenerateElbowAngle
        If an elbow corner is undefined.
    """
    web = layout(spec, origin, angle_offset)
    outline = build_outline(web)
    vertices = tuple(flatten(outline))
    _LOGGER.debug("snowflake: %d outline vertices", len(vertices))
    return Snowflake(web=web, outline=outline, vertices=vertices)
