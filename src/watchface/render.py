"""Pure face renderer producing an ordered list of draw commands.

The renderer knows nothing about Qt. :func:`build_frame` maps a sweep
angle and a viewport size to a tuple of small frozen dataclasses; the
painter in :mod:`watchface.painting` turns those into ``QPainter`` calls.
Keeping the two apart lets the geometry be compared and tested without
a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .dial import HOUR_MARKS, label_amplifier, label_text, mark_degrees
from .models import FaceStyle
from .utils import coordinates_on_circle, dash_gap

Point = Tuple[float, float]

PIE_START_DEG = -90.0


@dataclass(frozen=True)
class DashedCircle:
    """A ring of ``count`` evenly spaced dashes."""

    center: Point
    radius: float
    stroke_width: float
    dash: float
    gap: float
    color: str


@dataclass(frozen=True)
class Disc:
    center: Point
    radius: float
    color: str


@dataclass(frozen=True)
class Pie:
    """Filled sector; angles in degrees, 0 at 3 o'clock, clockwise positive."""

    center: Point
    radius: float
    start_deg: float
    sweep_deg: float
    color: str
    alpha: float


@dataclass(frozen=True)
class Label:
    """Text centered on ``anchor``."""

    text: str
    anchor: Point
    font_px: float
    color: str


DrawCommand = Union[DashedCircle, Disc, Pie, Label]
Frame = Tuple[DrawCommand, ...]


def build_frame(
    sweep_deg: float, width: float, height: float, style: FaceStyle = FaceStyle()
) -> Frame:
    """Describe one frame of the watch face for the given sweep angle."""
    center = (width / 2.0, height / 2.0)
    small_radius = width / 4.0
    big_radius = small_radius - style.ring_inset_px
    text_radius = small_radius + style.label_offset_px

    commands: list[DrawCommand] = [
        DashedCircle(
            center=center,
            radius=small_radius,
            stroke_width=style.small_tick_width_px,
            dash=style.small_dash_px,
            gap=dash_gap(small_radius, style.small_tick_count, style.small_dash_px),
            color=style.dark_gray,
        ),
        DashedCircle(
            center=center,
            radius=big_radius,
            stroke_width=style.big_tick_width_px,
            dash=style.big_dash_px,
            gap=dash_gap(big_radius, style.big_tick_count, style.big_dash_px),
            color=style.dark_gray,
        ),
        Disc(center=center, radius=small_radius / 5.0, color=style.dark_gray),
        Disc(center=center, radius=small_radius / 12.0, color=style.red),
        Pie(
            center=center,
            radius=small_radius + style.small_tick_width_px / 2.0,
            start_deg=PIE_START_DEG,
            sweep_deg=sweep_deg,
            color=style.red,
            alpha=style.pie_alpha,
        ),
        Disc(center=center, radius=small_radius / 20.0, color=style.dark_gray),
    ]

    for mark in range(HOUR_MARKS):
        degrees = mark_degrees(mark)
        scale = label_amplifier(sweep_deg, degrees, style.label_emphasis)
        commands.append(
            Label(
                text=label_text(mark),
                anchor=coordinates_on_circle(text_radius, degrees, center),
                font_px=style.label_font_px * scale,
                color=style.dark_gray,
            )
        )

    return tuple(commands)


__all__ = [
    "DashedCircle",
    "Disc",
    "Pie",
    "Label",
    "DrawCommand",
    "Frame",
    "PIE_START_DEG",
    "build_frame",
]
