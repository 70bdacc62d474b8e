# mini_flake - Branching Snowflake Geometry
"""
MINI-FLAKE: Snowflake Outlines from Branching Specs
===================================================

This package provides:
- Recursive layout of an abstract branching spec into positioned nodes
- Outline construction: one closed polygon around all branches
- SVG and matplotlib rendering, text dumps, outline metrics
- Parametric spec generation and a catalog of presets

ARCHITECTURE:
-------------
    model.py        Point, BranchSpec, PositionedNode, NestedOutline
    kernel/         Geometric core (points, layout, outline)
    generative/     FlakeParams → BranchSpec
    catalog.py      Named preset specs
    post.py         Area, perimeter, bounds, symmetry, web statistics
    svg.py          SVG markup
    viz.py          matplotlib figures
    dump.py         Indented text dumps
    config.py       Render settings
"""

from .model import (
    BranchSpec, InvalidSpec, NestedOutline, ORIGIN, Point, PositionedNode,
    branch_spec, spec_from_dict, spec_to_dict,
)
from .kernel import (
    DegenerateElbowAngle, Snowflake, build_outline, elbow_point, flatten,
    layout, outline_vertices, point, polar_point, snowflake, validate_spec,
)

# Version
__version__ = "0.1.0"
