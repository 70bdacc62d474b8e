# mini_flake/svg.py
"""
SVG OUTPUT: Markup for Webs and Outlines
========================================

Two kinds of drawable output:

- the web (skeleton): every node origin as a small circle; internal nodes
  become a <g> holding their own marker followed by their children
- the outline: one <polygon> whose points are the flattened vertices

Coordinates are written as-is (SVG y grows downward, so a flake laid out
with angle 90° grows toward the bottom of the page). The namespace and
styling come from RenderConfig.
"""

import xml.etree.ElementTree as ET
from typing import Optional, Sequence

from .config import CONFIG, RenderConfig
from .kernel.outline import Snowflake
from .model import Point, PositionedNode
from .post import bounding_box, iter_nodes


def _num(value: float, config: RenderConfig) -> str:
    return config.number_format.format(value)


def point_element(p: Point, config: Optional[RenderConfig] = None) -> ET.Element:
    """<circle> marker centred on p."""
    config = config or CONFIG
    return ET.Element("circle", {
        "cx": _num(p.x, config),
        "cy": _num(p.y, config),
        "r": _num(config.marker_radius, config),
    })


def web_element(node: PositionedNode, config: Optional[RenderConfig] = None) -> ET.Element:
    """Marker for a leaf; for an internal node, a <g> of its marker and its children."""
    config = config or CONFIG
    marker = point_element(node.origin, config)
    if node.is_leaf:
        return marker

    group = ET.Element("g")
    group.append(marker)
    for child in node.children:
        group.append(web_element(child, config))
    return group


def polygon_points_data(vertices: Sequence[Point], config: Optional[RenderConfig] = None) -> str:
    """Value of a polygon 'points' attribute: 'x1 y1 x2 y2 ...'."""
    config = config or CONFIG
    return " ".join(f"{_num(p.x, config)} {_num(p.y, config)}" for p in vertices)


def polygon_element(vertices: Sequence[Point], config: Optional[RenderConfig] = None) -> ET.Element:
    config = config or CONFIG
    return ET.Element("polygon", {
        "points": polygon_points_data(vertices, config),
        "fill": config.fill_color,
        "stroke": config.stroke_color,
        "stroke-width": _num(config.stroke_width, config),
    })


def snowflake_svg(
    flake: Snowflake,
    config: Optional[RenderConfig] = None,
    show_web: bool = False,
) -> str:
    """
    Complete SVG document for a snowflake.

    Parameters:
    -----------
    flake : Snowflake
        Result of kernel.snowflake()
    config : RenderConfig, optional
        Namespace, colours, margin (default: CONFIG)
    show_web : bool
        Also draw the skeleton markers on top of the outline

    Returns:
    --------
    str
        SVG markup; the viewBox covers the outline (and web, if shown) plus
        config.margin on every side.
    """
    config = config or CONFIG

    points = list(flake.vertices)
    if show_web:
        points.extend(node.origin for node in iter_nodes(flake.web))
    min_x, min_y, max_x, max_y = bounding_box(points)
    pad = config.margin + (config.marker_radius if show_web else 0.0)
    x0, y0 = min_x - pad, min_y - pad
    width, height = (max_x - min_x) + 2 * pad, (max_y - min_y) + 2 * pad

    root = ET.Element("svg", {
        "xmlns": config.svg_namespace,
        "version": "1.1",
        "viewBox": " ".join(_num(v, config) for v in (x0, y0, width, height)),
        "width": _num(width, config),
        "height": _num(height, config),
    })
    root.append(polygon_element(flake.vertices, config))

    if show_web:
        web = web_element(flake.web, config)
        if web.tag != "g":
            # Single-node web: wrap so fill can be set on the group
            group = ET.Element("g")
            group.append(web)
            web = group
        web.set("fill", config.web_color)
        root.append(web)

    return ET.tostring(root, encoding="unicode")
