"""
CATALOG: PRESET BRANCH SPECS
============================

PURPOSE:
--------
A small library of ready-made specs that can be referenced by name, so
demos and tests don't each rebuild the same trees by hand.

PRESETS:
--------
- 'cross':    four leaf arms at 90° spacing (the smallest full-circle flake)
- 'star':     six plain arms
- 'fern':     six arms, three levels of three-way forks
- 'dendrite': six arms, each forking five ways over a wide fan
- 'trident':  a single stem continuing straight, then a three-way fork
"""

from typing import Dict, List

from .generative.flake import FlakeParams, generate_flake
from .model import BranchSpec, branch_spec


def _cross() -> BranchSpec:
    leaf = branch_spec(0, 5, 1)
    return branch_spec(360, 10, 2, [leaf] * 4)


def _trident() -> BranchSpec:
    tip = branch_spec(0, 4, 1)
    fork = branch_spec(180, 12, 2, [tip] * 3)
    stem = branch_spec(0, 20, 3, [fork])
    return branch_spec(0, 20, 4, [stem])


PRESETS: Dict[str, BranchSpec] = {
    'cross': _cross(),
    'star': generate_flake(FlakeParams(arms=6, depth=1, branch_length=40.0, branch_width=6.0)),
    'fern': generate_flake(FlakeParams(
        arms=6, depth=3, branching=3, spread_angle=60.0,
        branch_length=40.0, branch_width=6.0, length_decay=0.55, width_decay=0.6,
    )),
    'dendrite': generate_flake(FlakeParams(
        arms=6, depth=2, branching=5, spread_angle=120.0,
        branch_length=40.0, branch_width=5.0, length_decay=0.45, width_decay=0.5,
    )),
    'trident': _trident(),
}


def list_presets() -> List[str]:
    return sorted(PRESETS)


def get_preset(name: str) -> BranchSpec:
    """
    Preset spec by name.

    Raises:
    -------
    KeyError
        If name is unknown (the message lists the available presets).
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(list_presets())}") from None
