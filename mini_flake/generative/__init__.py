# mini_flake/generative - Parametric Spec Generators
"""
GENERATIVE: Parametric Snowflake Specs
======================================

Turns a handful of design parameters into a BranchSpec tree.

USAGE:
------
    from mini_flake.generative import generate_flake, FlakeParams
    from mini_flake.kernel import snowflake

    params = FlakeParams(arms=6, depth=2, branching=3, spread_angle=90.0)
    flake = snowflake(generate_flake(params))
"""

from .flake import generate_flake, count_nodes, FlakeParams

__all__ = ['generate_flake', 'count_nodes', 'FlakeParams']
