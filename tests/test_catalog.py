# File: tests/test_catalog.py
"""
Test the catalog.py module to verify the preset specs build cleanly.
"""

import numpy as np
import pytest

from mini_flake.catalog import PRESETS, get_preset, list_presets
from mini_flake.kernel import snowflake, validate_spec
from mini_flake.post import is_rotationally_symmetric, vertices_array


def test_list_presets():
    names = list_presets()
    assert names == sorted(names)
    for name in ['cross', 'star', 'fern', 'dendrite', 'trident']:
        assert name in names


def test_get_preset_unknown():
    with pytest.raises(KeyError, match="Available"):
        get_preset('no-such-flake')


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_every_preset_builds(name):
    spec = get_preset(name)
    validate_spec(spec)
    flake = snowflake(spec)
    assert len(flake.vertices) > 1
    assert np.all(np.isfinite(vertices_array(flake.vertices)))


def test_cross_preset():
    flake = snowflake(get_preset('cross'))
    assert len(flake.vertices) == 8


@pytest.mark.parametrize("name", ['star', 'fern', 'dendrite'])
def test_six_fold_presets_are_symmetric(name):
    flake = snowflake(get_preset(name))
    assert is_rotationally_symmetric(flake.vertices, 60.0)


def test_trident_vertex_count():
    """
    root (1 child):  2 elbows
    stem (1 child):  2 elbows
    fork (3, 180°):  4 elbows
    tips:            3
    """
    flake = snowflake(get_preset('trident'))
    assert len(flake.vertices) == 11
