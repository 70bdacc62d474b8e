# mini_flake/kernel/points.py
"""Point construction, polar offsets, and the elbow-corner formula."""

import numpy as np

from ..model import Point


# Angles closer than this (degrees, modulo 360) are treated as the same direction
ANGLE_TOLERANCE = 1e-9


class DegenerateElbowAngle(ValueError):
    """Raised when two branch directions coincide and no elbow corner exists."""
    pass


def point(x: float, y: float) -> Point:
    return Point(float(x), float(y))


def polar_point(origin: Point, radius: float, angle_degrees: float) -> Point:
    """
    Point at distance radius from origin, in direction angle_degrees.

    0° points along +x, 90° along +y.
    """
    theta = np.radians(angle_degrees)
    return Point(
        float(origin.x + radius * np.cos(theta)),
        float(origin.y + radius * np.sin(theta)),
    )


def angles_coincide(a: float, b: float, tolerance: float = ANGLE_TOLERANCE) -> bool:
    """True if a and b name the same direction (equal modulo 360)."""
    diff = (a - b) % 360.0
    return min(diff, 360.0 - diff) <= tolerance


def elbow_point(
    origin: Point,
    line_width: float,
    angle_a: float,
    angle_b: float,
) -> Point:
    """
    Corner where two branches leaving origin meet on their shared outer edge.

    Each branch is a strip of width line_width centred on its direction line.
    The edges facing each other are offset by line_width/2; they intersect on
    the bisector of the two directions at distance

        line_width / (2·sin(|Δ|/2))        with Δ = angle_b − angle_a

    from the origin. The bisector is taken as the plain average
    (angle_a + angle_b)/2, so the caller's angle order decides which side
    of the pair the corner lands on.

    Parameters:
    -----------
    origin : Point
        Shared start point of both branches
    line_width : float
        Branch width
    angle_a, angle_b : float
        Branch directions in degrees

    Raises:
    -------
    DegenerateElbowAngle
        If the directions coincide (sin(0) = 0, the offset is undefined) or
        the result is not finite.
    """
    if angles_coincide(angle_a, angle_b):
        raise DegenerateElbowAngle(
            f"Elbow angles coincide ({angle_a:g}° and {angle_b:g}°); no corner exists."
        )

    angle_between = angle_b - angle_a
    middle_angle = (angle_a + angle_b) / 2.0
    half_sine = np.sin(abs(angle_between) * np.pi / 360.0)
    with np.errstate(divide='ignore', invalid='ignore'):
        offset = line_width / (2.0 * half_sine)

    if not np.isfinite(offset):
        raise DegenerateElbowAngle(
            f"Elbow offset is not finite for angles {angle_a:g}° and {angle_b:g}°."
        )
    return polar_point(origin, float(offset), middle_angle)
