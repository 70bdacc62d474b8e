# File: tests/test_svg.py
"""
Test svg.py: markup for webs and outline polygons.

The output is parsed back with ElementTree so the checks are on structure,
not on exact attribute ordering.
"""

import xml.etree.ElementTree as ET

from mini_flake.catalog import get_preset
from mini_flake.config import RenderConfig
from mini_flake.kernel import layout, snowflake
from mini_flake.model import Point, branch_spec
from mini_flake.svg import (
    point_element, polygon_element, polygon_points_data, snowflake_svg, web_element,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_point_element():
    circle = point_element(Point(1.5, -2.0))
    assert circle.tag == "circle"
    assert circle.get("cx") == "1.5"
    assert circle.get("cy") == "-2"
    assert circle.get("r") == "1"


def test_point_element_uses_config_radius():
    circle = point_element(Point(0.0, 0.0), RenderConfig(marker_radius=2.5))
    assert circle.get("r") == "2.5"


def test_polygon_points_data():
    data = polygon_points_data([Point(1.0, 2.0), Point(3.5, -4.0)])
    assert data == "1 2 3.5 -4"


def test_polygon_element():
    polygon = polygon_element([Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)])
    assert polygon.tag == "polygon"
    assert polygon.get("points") == "0 0 1 0 0 1"
    assert polygon.get("fill") == RenderConfig().fill_color


def test_web_element_leaf_is_marker():
    node = layout(branch_spec(0, 5, 1), Point(3.0, 4.0))
    element = web_element(node)
    assert element.tag == "circle"
    assert element.get("cx") == "3"


def test_web_element_groups_children():
    """
    Internal node → <g> with its own marker first, then one element per child.
    """
    leaf = branch_spec(0, 5, 1)
    inner = branch_spec(90, 4, 1, [leaf, leaf])
    node = layout(branch_spec(360, 10, 2, [leaf, inner, leaf]))
    group = web_element(node)

    assert group.tag == "g"
    children = list(group)
    assert len(children) == 4
    assert children[0].tag == "circle"
    assert [c.tag for c in children[1:]] == ["circle", "g", "circle"]
    assert len(list(children[2])) == 3


def test_snowflake_svg_document():
    flake = snowflake(get_preset('cross'))
    root = ET.fromstring(snowflake_svg(flake))

    assert root.tag == SVG_NS + "svg"
    polygons = root.findall(SVG_NS + "polygon")
    assert len(polygons) == 1
    numbers = polygons[0].get("points").split()
    assert len(numbers) == 2 * len(flake.vertices)

    # Tips reach ±10 on both axes; default margin is 5
    assert root.get("viewBox") == "-15 -15 30 30"


def test_snowflake_svg_with_web():
    flake = snowflake(get_preset('cross'))
    root = ET.fromstring(snowflake_svg(flake, show_web=True))

    groups = root.findall(SVG_NS + "g")
    assert len(groups) == 1
    circles = groups[0].findall(SVG_NS + "circle")
    assert len(circles) == 5
    assert groups[0].get("fill") == RenderConfig().web_color


def test_snowflake_svg_single_node_web():
    flake = snowflake(branch_spec(0, 5, 1), Point(2.0, 2.0))
    root = ET.fromstring(snowflake_svg(flake, show_web=True))
    group = root.find(SVG_NS + "g")
    assert group is not None
    assert len(group.findall(SVG_NS + "circle")) == 1


def test_snowflake_svg_custom_namespace():
    """The namespace is a render setting, not hard-wired."""
    flake = snowflake(get_preset('cross'))
    root = ET.fromstring(snowflake_svg(flake, RenderConfig(svg_namespace="urn:test")))
    assert root.tag == "{urn:test}svg"
