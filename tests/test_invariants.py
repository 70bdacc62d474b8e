# File: tests/test_invariants.py
"""
END-TO-END INVARIANTS: Spec → Web → Outline
===========================================

These tests run complete snowflakes and check properties that must hold
for any sane spec:

1. SHAPE: the web has the same tree shape as the spec
2. COUNT: vertex count follows from the tree (elbows + tips)
3. SYMMETRY: identical arms give a rotationally symmetric outline
4. FINITE: no NaN/inf ever reaches the polygon

If these pass, the layout and outline passes agree with each other.
"""

import numpy as np
import pytest

from mini_flake.generative import FlakeParams, generate_flake
from mini_flake.kernel import snowflake
from mini_flake.model import Point, branch_spec
from mini_flake.post import is_rotationally_symmetric, iter_nodes, polygon_area, vertices_array


def make_cross():
    """
    Four identical leaves on a 360° root:
        {spread 360, length 10, width 2, children: 4 × {spread 0, length 5, width 1}}
    """
    leaf = branch_spec(0, 5, 1)
    return branch_spec(360, 10, 2, [leaf] * 4)


def expected_vertex_count(spec):
    """
    Elbows per node: N for a 360° node with N > 1 children (first one
    skipped), N + 1 otherwise. Each leaf adds its tip.
    """
    if not spec.children:
        return 1
    n = len(spec.children)
    elbows = n if (spec.spread_angle == 360 and n > 1) else n + 1
    return elbows + sum(expected_vertex_count(c) for c in spec.children)


def test_cross_layout():
    """
    Children sit at −180°, −90°, 0°, 90° (first child opposite the trunk),
    each 10 from the origin.
    """
    flake = snowflake(make_cross(), Point(0.0, 0.0), 0.0)

    angles = [c.angle_offset for c in flake.web.children]
    assert angles == [-180.0, -90.0, 0.0, 90.0]
    for child in flake.web.children:
        assert np.hypot(child.origin.x, child.origin.y) == pytest.approx(10.0)


def test_cross_outline():
    """
    Exactly 8 vertices: 4 tips at radius 10 alternating with 4 elbows at
    radius √2 (width 2 at 90° spacing), and the whole outline maps onto
    itself under a 90° rotation about the origin.
    """
    flake = snowflake(make_cross(), Point(0.0, 0.0), 0.0)
    xy = vertices_array(flake.vertices)

    assert len(xy) == 8
    radii = np.hypot(xy[:, 0], xy[:, 1])
    assert np.allclose(radii[0::2], 10.0)
    assert np.allclose(radii[1::2], np.sqrt(2))

    assert is_rotationally_symmetric(flake.vertices, 90.0)
    # Sequence-level check: rotating by 90° shifts the vertex list by 2
    rotated = xy @ np.array([[0.0, 1.0], [-1.0, 0.0]])
    assert np.allclose(rotated, np.roll(xy, -2, axis=0), atol=1e-9)


def test_cross_outline_area():
    """
    8 triangles fan out from the origin, each with area 5 (base 10, height 1).
    """
    flake = snowflake(make_cross())
    assert polygon_area(flake.vertices) == pytest.approx(40.0)


@pytest.mark.parametrize("params", [
    FlakeParams(arms=6, depth=1),
    FlakeParams(arms=6, depth=2, branching=3, spread_angle=90.0),
    FlakeParams(arms=5, depth=3, branching=2, spread_angle=60.0),
    FlakeParams(arms=8, depth=2, branching=1, spread_angle=0.0),
])
def test_generated_flakes(params):
    spec = generate_flake(params)
    flake = snowflake(spec, angle_offset=-90.0)

    # SHAPE
    n_spec = 0
    stack = [spec]
    while stack:
        s = stack.pop()
        n_spec += 1
        stack.extend(s.children)
    assert n_spec == sum(1 for _ in iter_nodes(flake.web))

    # COUNT
    assert len(flake.vertices) == expected_vertex_count(spec)

    # FINITE
    assert np.all(np.isfinite(vertices_array(flake.vertices)))

    # SYMMETRY
    assert is_rotationally_symmetric(flake.vertices, 360.0 / params.arms, tol=1e-6)


def test_generated_flake_vertex_count_by_hand():
    """
    arms=6, depth=2, branching=3:
        root:  6 elbows (360°, first skipped)
        arms:  6 × 4 elbows
        tips:  18
        total: 48
    """
    flake = snowflake(generate_flake(FlakeParams(arms=6, depth=2, branching=3)))
    assert len(flake.vertices) == 48


def test_every_leaf_tip_appears_once():
    flake = snowflake(generate_flake(FlakeParams(arms=4, depth=2, branching=3)))
    tips = [n.origin for n in iter_nodes(flake.web) if n.is_leaf]
    for tip in tips:
        assert list(flake.vertices).count(tip) == 1
