# mini_flake/model.py
"""
MODEL DEFINITIONS: Point, BranchSpec, PositionedNode, NestedOutline
===================================================================

PURPOSE:
--------
This module defines the immutable values that flow through the pipeline:

    BranchSpec ──layout──> PositionedNode ──build_outline──> NestedOutline
                                                                  │
                                                       flatten ───┘──> [Point, ...]

- BranchSpec:     what the caller asks for (abstract, no coordinates)
- PositionedNode: a spec resolved to an absolute origin and direction
- NestedOutline:  one subtree's contribution to the boundary polygon
- Point:          a 2D coordinate (also a polygon vertex)

All of them are frozen dataclasses. Children are stored as tuples so that a
finished tree can never be modified in place.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Tuple, Union


class InvalidSpec(ValueError):
    """Raised when a BranchSpec cannot be laid out."""
    pass


@dataclass(frozen=True)
class Point:
    """
    A point in the drawing plane.

    Parameters:
    -----------
    x : float
        Horizontal coordinate
    y : float
        Vertical coordinate (SVG convention: grows downward on screen)

    Examples:
    ---------
    >>> Point(0.0, 0.0)
    Point(x=0.0, y=0.0)
    >>> Point(3.0, 4.0).as_tuple()
    (3.0, 4.0)
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class BranchSpec:
    """
    Abstract description of one branch and everything growing out of it.

    Parameters:
    -----------
    spread_angle : float
        Angular range (degrees) over which the children are distributed.
        - 360: children evenly spaced around a full circle
        - < 360: children placed from one edge of the range to the other
    branch_length : float
        Distance from this node's origin to each child origin (> 0)
    branch_width : float
        Width of the branches leaving this node (> 0)
    children : tuple of BranchSpec
        Sub-branches, in drawing order. Empty for an endpoint.

    Notes:
    ------
    - branch_length and branch_width describe the segments from this node
      to its children, so they only matter for geometry when children exist.
    - Use branch_spec() to build one from any sequence of children.
    """
    spread_angle: float
    branch_length: float
    branch_width: float
    children: Tuple["BranchSpec", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0


@dataclass(frozen=True)
class PositionedNode:
    """
    A BranchSpec placed in the plane.

    Parameters:
    -----------
    origin : Point
        Absolute position of this node
    angle_offset : float
        Direction (degrees) of the branch that arrives at this node.
        The root uses the caller's angle_offset.
    branch_width : float
        Copied from the spec; the outline uses it for elbow offsets.
    children : tuple of PositionedNode
        Index-aligned with the spec's children.
    """
    origin: Point
    angle_offset: float
    branch_width: float
    children: Tuple["PositionedNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0


@dataclass(frozen=True)
class NestedOutline:
    """
    One node's contribution to the outline polygon.

    components holds Points (elbow corners at this node, or a leaf's own
    origin) interleaved with the NestedOutline of each child, in boundary
    order. Flattening the tree depth-first gives the polygon vertices.
    """
    components: Tuple["OutlineFragment", ...] = field(default_factory=tuple)


# Tagged variant: a fragment is either a vertex or a nested list of fragments
OutlineFragment = Union[Point, NestedOutline]


# =============================================================================
# CONSTRUCTION HELPERS
# =============================================================================

def branch_spec(
    spread_angle: float,
    branch_length: float,
    branch_width: float,
    children: Sequence[BranchSpec] = (),
) -> BranchSpec:
    """Build a BranchSpec, accepting any sequence of children."""
    return BranchSpec(
        spread_angle=float(spread_angle),
        branch_length=float(branch_length),
        branch_width=float(branch_width),
        children=tuple(children),
    )


# Input keys accepted by spec_from_dict (camelCase matches hand-written JSON)
_KEY_ALIASES = {
    'spread_angle': ('spread_angle', 'spreadAngle'),
    'branch_length': ('branch_length', 'branchLength'),
    'branch_width': ('branch_width', 'branchWidth'),
}


def _lookup(data: Mapping[str, Any], name: str, path: str) -> Any:
    for key in _KEY_ALIASES[name]:
        if key in data:
            return data[key]
    raise InvalidSpec(f"{path}: missing '{name}'")


def spec_from_dict(data: Mapping[str, Any], path: str = "root") -> BranchSpec:
    """
    Convert a nested mapping into a BranchSpec tree.

    Parameters:
    -----------
    data : Mapping
        {'spread_angle': ..., 'branch_length': ..., 'branch_width': ...,
         'children': [ ...nested mappings... ]}
        camelCase keys (spreadAngle, branchLength, branchWidth) are accepted.
        'children' is optional and defaults to no children.
    path : str
        Location used in error messages.

    Raises:
    -------
    InvalidSpec
        If a field is missing or not a number, or children is not a list.
    """
    if not isinstance(data, Mapping):
        raise InvalidSpec(f"{path}: expected a mapping, got {type(data).__name__}")

    values = {}
    for name in _KEY_ALIASES:
        raw = _lookup(data, name, path)
        try:
            values[name] = float(raw)
        except (TypeError, ValueError) as e:
            raise InvalidSpec(f"{path}: '{name}' must be a number, got {raw!r}") from e

    raw_children = data.get('children', ())
    if isinstance(raw_children, (str, bytes, Mapping)) or not isinstance(raw_children, Sequence):
        raise InvalidSpec(f"{path}: 'children' must be a list")

    children = tuple(
        spec_from_dict(child, f"{path}.children[{i}]")
        for i, child in enumerate(raw_children)
    )
    return BranchSpec(children=children, **values)


def spec_to_dict(spec: BranchSpec) -> Dict[str, Any]:
    """Convert a BranchSpec tree into nested plain dicts (snake_case keys)."""
    return {
        'spread_angle': spec.spread_angle,
        'branch_length': spec.branch_length,
        'branch_width': spec.branch_width,
        'children': [spec_to_dict(child) for child in spec.children],
    }
