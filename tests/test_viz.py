# File: tests/test_viz.py
"""
SMOKE TEST: matplotlib rendering
================================

Checks that figures build and save without crashing. Correctness of the
geometry itself is covered by the kernel tests.
"""

import matplotlib
matplotlib.use("Agg")  # No display needed

import matplotlib.pyplot as plt

from mini_flake.catalog import get_preset
from mini_flake.kernel import snowflake
from mini_flake.viz import create_snowflake_figure, plot_snowflake


def test_create_snowflake_figure():
    flake = snowflake(get_preset('fern'))
    fig, ax = create_snowflake_figure(flake, title="Fern")

    assert len(ax.patches) == 1
    assert len(ax.collections) == 1
    assert ax.get_title() == "Fern"
    plt.close(fig)


def test_create_snowflake_figure_without_web():
    flake = snowflake(get_preset('cross'))
    fig, ax = create_snowflake_figure(flake, show_web=False)

    assert len(ax.patches) == 1
    assert len(ax.collections) == 0
    plt.close(fig)


def test_plot_snowflake_writes_file(tmp_path):
    flake = snowflake(get_preset('dendrite'))
    outpath = tmp_path / "plots" / "dendrite.png"

    plot_snowflake(flake, str(outpath))

    assert outpath.exists()
    assert outpath.stat().st_size > 0
