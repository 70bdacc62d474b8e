# mini_flake/kernel - Geometric core
"""
KERNEL: THE GEOMETRIC ENGINE
============================

Three pure steps, each over immutable values:

    points.py    point / polar_point / elbow_point
    layout.py    BranchSpec → PositionedNode   (validate_spec, layout)
    outline.py   PositionedNode → NestedOutline → [Point]  (build_outline, flatten)

snowflake() chains them for the common case.
"""

from ..model import InvalidSpec
from .points import (
    ANGLE_TOLERANCE,
    DegenerateElbowAngle,
    angles_coincide,
    elbow_point,
    point,
    polar_point,
)
from .layout import child_angles, layout, validate_spec
from .outline import Snowflake, build_outline, flatten, outline_vertices, snowflake

__all__ = [
    'ANGLE_TOLERANCE', 'DegenerateElbowAngle', 'InvalidSpec',
    'angles_coincide', 'elbow_point', 'point', 'polar_point',
    'child_angles', 'layout', 'validate_spec',
    'Snowflake', 'build_outline', 'flatten', 'outline_vertices', 'snowflake',
]
