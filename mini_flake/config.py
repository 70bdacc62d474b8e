# mini_flake/config.py
"""
Render configuration and defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class RenderConfig:
    """Settings shared by the SVG and matplotlib renderers."""

    # SVG markup
    svg_namespace: str = "http://www.w3.org/2000/svg"
    marker_radius: float = 1.0
    margin: float = 5.0
    number_format: str = "{:.6g}"

    # Colours
    fill_color: str = "#3498DB"      # Sky blue (outline fill)
    stroke_color: str = "#2C3E50"    # Dark blue-gray (outline edge)
    web_color: str = "#E74C3C"       # Coral red (skeleton + markers)
    background: str = "#FAFAFA"      # Off-white

    stroke_width: float = 0.5

    # matplotlib
    figsize: Tuple[float, float] = (8.0, 8.0)
    dpi: int = 150


# Global config instance
CONFIG = RenderConfig()
