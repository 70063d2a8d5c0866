"""Dial arithmetic: durations, scrubbing and label emphasis."""

from __future__ import annotations

import math

from .utils import circular_distance

DEGREES_PER_SECOND = 6.0
SCRUB_FACTOR = 0.5
ANIMATION_TARGET = 1.0
INITIAL_ANGLE = 1.0

HOUR_MARKS = 12
DEGREES_PER_MARK = 30.0
MINUTES_PER_MARK = 5
EMPHASIS_WINDOW_DEG = 5.0


def degrees_to_millis(degrees: float) -> int:
    """Animation length for sweeping ``degrees`` at 6°/s, truncated to ms."""
    return int(abs(degrees) / DEGREES_PER_SECOND * 1000.0)


def scrub_angle(current: float, delta: float) -> float:
    """Angle after a manual drag of ``delta`` pixels.

    The result lies in (-360, 0]. ``abs`` is applied before negating, so
    the drag direction is lost once the sum changes sign.
    """
    return math.fmod(-abs(current + delta * SCRUB_FACTOR), 360.0)


def mark_degrees(mark: int) -> float:
    return mark * DEGREES_PER_MARK


def label_text(mark: int) -> str:
    """Clock-style countdown numbering: 60, 55, ..., 5."""
    minutes = (60 - mark * MINUTES_PER_MARK) % 60
    return str(minutes or 60)


def label_amplifier(sweep: float, label_degrees: float, emphasis: float = 1.2) -> float:
    """Font scale for a label: ``emphasis`` when the sweep points at it."""
    actual = sweep % 360.0
    if circular_distance(actual, label_degrees) <= EMPHASIS_WINDOW_DEG:
        return emphasis
    return 1.0


__all__ = [
    "DEGREES_PER_SECOND",
    "SCRUB_FACTOR",
    "ANIMATION_TARGET",
    "INITIAL_ANGLE",
    "HOUR_MARKS",
    "degrees_to_millis",
    "scrub_angle",
    "mark_degrees",
    "label_text",
    "label_amplifier",
]
