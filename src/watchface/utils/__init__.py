"""Helper utilities shared by the renderer and the UI layer."""

from .geometry import circular_distance, coordinates_on_circle, dash_gap

__all__ = ["circular_distance", "coordinates_on_circle", "dash_gap"]
