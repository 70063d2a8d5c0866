"""Geometry helpers used by the face renderer."""

import math
from typing import Tuple


def coordinates_on_circle(
    radius: float, degree: float, center: Tuple[float, float] = (0.0, 0.0)
) -> Tuple[float, float]:
    """Return the point at ``degree`` on a circle around ``center``.

    0° is the top of the circle and angles grow clockwise (screen
    coordinates, y pointing down).
    """
    theta = math.radians(180.0 - degree)
    return (
        center[0] + radius * math.sin(theta),
        center[1] + radius * math.cos(theta),
    )


def dash_gap(radius: float, count: int, dash: float) -> float:
    """Gap length so that ``count`` dashes of ``dash`` tile the circumference."""
    return (2.0 * math.pi * radius - count * dash) / count


def circular_distance(a: float, b: float) -> float:
    """Shortest angular distance in degrees between ``a`` and ``b``."""
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


__all__ = ["coordinates_on_circle", "dash_gap", "circular_distance"]
