# mini_flake/generative/flake.py
"""
FLAKE GENERATOR: Parametric Branch Specs
========================================

PURPOSE:
--------
Writing a BranchSpec tree by hand gets tedious past two levels. This module
builds one from a few design parameters, the way a real snowflake is
described: a number of arms, each of which keeps forking.

STRUCTURE OF A GENERATED SPEC:
------------------------------
    root            spread 360, `arms` children
     └─ arm level 1 spread `spread_angle`, `branching` children
         └─ level 2 spread `spread_angle`, `branching` children
             ...
             └─ level `depth`: leaf (branch tip)

Each level's branch_length and branch_width are the previous level's
multiplied by length_decay and width_decay, so branches get shorter and
thinner toward the tips.

Example: arms=6, depth=2, branching=3 gives 1 + 6 + 18 = 25 nodes
(6 arms, each forking into 3 tips).
"""

import logging
from dataclasses import dataclass

from ..model import BranchSpec, branch_spec

_LOGGER = logging.getLogger(__name__)


@dataclass
class FlakeParams:
    """
    Parameters defining a generated snowflake.

    Arms:
    -----
    arms : int
        Branches leaving the centre, evenly spaced around 360° (>= 1)
    depth : int
        Levels below the centre, counting the arms themselves (>= 1).
        depth=1 gives a plain star.

    Forking:
    --------
    branching : int
        Children of every non-tip arm node (>= 1). 1 gives straight arms.
    spread_angle : float
        Fan angle (degrees) of each fork, in [0, 360). Must be > 0 when
        branching > 1.

    Size:
    -----
    branch_length : float
        Length of the branches leaving the centre (> 0)
    branch_width : float
        Width of the branches leaving the centre (> 0)
    length_decay : float
        Length multiplier per level, in (0, 1]
    width_decay : float
        Width multiplier per level, in (0, 1]
    """
    arms: int = 6
    depth: int = 2
    branching: int = 3
    spread_angle: float = 90.0

    branch_length: float = 40.0
    branch_width: float = 6.0
    length_decay: float = 0.5
    width_decay: float = 0.6


def _validate_params(params: FlakeParams) -> None:
    if params.arms < 1:
        raise ValueError(f"arms must be at least 1, got {params.arms}")
    if params.depth < 1:
        raise ValueError(f"depth must be at least 1, got {params.depth}")
    if params.branching < 1:
        raise ValueError(f"branching must be at least 1, got {params.branching}")
    if not 0 <= params.spread_angle < 360:
        raise ValueError(f"spread_angle must be in [0, 360), got {params.spread_angle}")
    if params.branching > 1 and params.spread_angle == 0:
        raise ValueError("spread_angle must be positive when branching > 1")
    if params.branch_length <= 0:
        raise ValueError(f"branch_length must be positive, got {params.branch_length}")
    if params.branch_width <= 0:
        raise ValueError(f"branch_width must be positive, got {params.branch_width}")
    if not 0 < params.length_decay <= 1:
        raise ValueError(f"length_decay must be in (0, 1], got {params.length_decay}")
    if not 0 < params.width_decay <= 1:
        raise ValueError(f"width_decay must be in (0, 1], got {params.width_decay}")


def _arm_spec(params: FlakeParams, level: int) -> BranchSpec:
    """Spec for an arm node `level` branches away from the centre."""
    length = params.branch_length * params.length_decay ** level
    width = params.branch_width * params.width_decay ** level

    if level >= params.depth:
        return branch_spec(0.0, length, width)

    # Identical children share one subtree value (specs are immutable)
    child = _arm_spec(params, level + 1)
    return branch_spec(params.spread_angle, length, width, [child] * params.branching)


def generate_flake(params: FlakeParams) -> BranchSpec:
    """
    Build the BranchSpec for a snowflake.

    Raises:
    -------
    ValueError
        If any parameter is out of range.

    Example:
    --------
    >>> spec = generate_flake(FlakeParams(arms=4, depth=1))
    >>> len(spec.children)
    4
    """
    _validate_params(params)

    arm = _arm_spec(params, 1)
    spec = branch_spec(360.0, params.branch_length, params.branch_width, [arm] * params.arms)

    _LOGGER.info(
        "generate_flake: arms=%d depth=%d branching=%d spread=%.6g",
        params.arms, params.depth, params.branching, params.spread_angle,
    )
    return spec


def count_nodes(params: FlakeParams) -> int:
    """Node count of generate_flake(params) without building it."""
    total = 1
    per_level = params.arms
    for _ in range(params.depth):
        total += per_level
        per_level *= params.branching
    return total
