#!/usr/bin/env python3
"""
RUN_SNOWFLAKE: Build, Measure and Render a Snowflake
====================================================

This demo runs the whole pipeline on one spec:
1. Pick a spec (catalog preset, generator parameters, or a JSON file)
2. Lay it out and build the outline polygon
3. Print web statistics and outline metrics
4. Write the SVG and a matplotlib preview

Run with:
    python demos/run_snowflake.py --preset fern
    python demos/run_snowflake.py --arms 8 --depth 3 --branching 3 --spread 70
    python demos/run_snowflake.py --spec-json my_flake.json --dump

Outputs:
    artifacts/<name>.svg  - Filled outline (plus skeleton with --web)
    artifacts/<name>.png  - matplotlib preview
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mini_flake.catalog import get_preset, list_presets
from mini_flake.dump import dump_spec
from mini_flake.generative import FlakeParams, generate_flake
from mini_flake.kernel import snowflake
from mini_flake.model import spec_from_dict
from mini_flake.post import (
    bounding_box, is_rotationally_symmetric, polygon_area, polygon_perimeter, web_summary,
)
from mini_flake.svg import snowflake_svg
from mini_flake.viz import plot_snowflake


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def choose_spec(args):
    """Return (name, spec) from the command-line arguments."""
    if args.spec_json:
        with open(args.spec_json) as f:
            return Path(args.spec_json).stem, spec_from_dict(json.load(f))
    if args.arms is not None:
        params = FlakeParams(
            arms=args.arms,
            depth=args.depth,
            branching=args.branching,
            spread_angle=args.spread,
        )
        return f"flake_{args.arms}x{args.depth}x{args.branching}", generate_flake(params)
    return args.preset, get_preset(args.preset)


def main():
    parser = argparse.ArgumentParser(
        description='Build a snowflake outline and write SVG/PNG renderings',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Presets: {', '.join(list_presets())}

Examples:
  python demos/run_snowflake.py --preset dendrite --web
  python demos/run_snowflake.py --arms 6 --depth 2 --branching 3 --spread 90
        """
    )
    parser.add_argument('--preset', default='fern', choices=list_presets(),
                        help='Catalog preset to render (default: fern)')
    parser.add_argument('--spec-json', default=None,
                        help='JSON file holding a nested spec (overrides --preset)')
    parser.add_argument('--arms', type=int, default=None,
                        help='Generate a flake with this many arms (overrides --preset)')
    parser.add_argument('--depth', type=int, default=2, help='Generator depth (default: 2)')
    parser.add_argument('--branching', type=int, default=3, help='Generator forks (default: 3)')
    parser.add_argument('--spread', type=float, default=90.0,
                        help='Generator fork spread in degrees (default: 90)')
    parser.add_argument('--angle', type=float, default=-90.0,
                        help='Root angle offset in degrees (default: -90)')
    parser.add_argument('--outdir', default='artifacts', help='Output directory (default: artifacts)')
    parser.add_argument('--web', action='store_true', help='Draw the skeleton in the SVG')
    parser.add_argument('--dump', action='store_true', help='Print the spec tree')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # =========================================================================
    # STEP 1: CHOOSE THE SPEC
    # =========================================================================
    print_header("STEP 1: Spec")
    name, spec = choose_spec(args)
    print(f"    Spec:          {name}")
    print(f"    Root children: {len(spec.children)}")
    if args.dump:
        print()
        print(dump_spec(spec))

    # =========================================================================
    # STEP 2: LAYOUT + OUTLINE
    # =========================================================================
    print_header("STEP 2: Layout and Outline")
    flake = snowflake(spec, angle_offset=args.angle)
    stats = web_summary(flake.web)
    print(f"""
    Nodes:         {stats['n_nodes']}
    Branch tips:   {stats['n_leaves']}
    Depth:         {stats['depth']}
    Reach:         {stats['reach']:.2f}
    Vertices:      {len(flake.vertices)}
    """)

    # =========================================================================
    # STEP 3: METRICS
    # =========================================================================
    print_header("STEP 3: Outline Metrics")
    min_x, min_y, max_x, max_y = bounding_box(flake.vertices)
    n_arms = len(flake.web.children)
    symmetric = n_arms > 1 and is_rotationally_symmetric(
        flake.vertices, 360.0 / n_arms, flake.web.origin,
    )
    print(f"""
    Area:          {polygon_area(flake.vertices):.2f}
    Perimeter:     {polygon_perimeter(flake.vertices):.2f}
    Bounds:        x [{min_x:.2f}, {max_x:.2f}]  y [{min_y:.2f}, {max_y:.2f}]
    {n_arms}-fold symmetric: {'yes' if symmetric else 'no'}
    """)

    # =========================================================================
    # STEP 4: RENDER
    # =========================================================================
    print_header("STEP 4: Render")
    os.makedirs(args.outdir, exist_ok=True)
    svg_path = os.path.join(args.outdir, f"{name}.svg")
    with open(svg_path, 'w') as f:
        f.write(snowflake_svg(flake, show_web=args.web))
    print(f"SVG written to: {svg_path}")

    png_path = os.path.join(args.outdir, f"{name}.png")
    plot_snowflake(flake, png_path, title=f"Snowflake: {name}")
    print(f"Preview written to: {png_path}")


if __name__ == "__main__":
    main()
