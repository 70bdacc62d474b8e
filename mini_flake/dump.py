# mini_flake/dump.py
"""
Plain-text dumps of spec, web and outline trees, for debugging.

Each node prints one "name: value" line per field, then "children:" and the
children's dumps indented by two spaces:

    spread_angle: 360.0
    branch_length: 10.0
    branch_width: 2.0
    children:
      spread_angle: 0.0
      ...
"""

from typing import List

from .model import BranchSpec, NestedOutline, Point, PositionedNode

INDENT = "  "


def format_point(p: Point) -> str:
    """Rounded coordinates, e.g. '(10, -3)'."""
    return f"({round(p.x)}, {round(p.y)})"


def indent_block(block: str) -> str:
    """Prefix every line of block with two spaces."""
    return "".join(INDENT + line + "\n" for line in block.splitlines())


def _children_block(dumps: List[str]) -> str:
    if not dumps:
        return ""
    return "children:\n" + "".join(indent_block(d) for d in dumps)


def dump_spec(spec: BranchSpec) -> str:
    output = (
        f"spread_angle: {spec.spread_angle}\n"
        f"branch_length: {spec.branch_length}\n"
        f"branch_width: {spec.branch_width}\n"
    )
    return output + _children_block([dump_spec(c) for c in spec.children])


def dump_node(node: PositionedNode) -> str:
    output = (
        f"origin: {format_point(node.origin)}\n"
        f"angle_offset: {node.angle_offset}\n"
        f"branch_width: {node.branch_width}\n"
    )
    return output + _children_block([dump_node(c) for c in node.children])


def dump_outline(outline: NestedOutline) -> str:
    """One line per vertex; nested outlines become indented 'outline:' blocks."""
    output = ""
    for component in outline.components:
        if isinstance(component, Point):
            output += f"vertex: {format_point(component)}\n"
        else:
            output += "outline:\n" + indent_block(dump_outline(component))
    return output
