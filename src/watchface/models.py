"""Dataclasses describing configuration and style for the watch face."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
import json
from typing import Any, Dict, Type, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class FaceStyle:
    """Colors and metrics used by the face renderer (logical pixels)."""

    dark_gray: str = "#444444"
    red: str = "#E53935"
    background: str = "#FFFFFF"
    ring_inset_px: float = 1.0
    label_offset_px: float = 24.0
    small_tick_width_px: float = 4.0
    big_tick_width_px: float = 12.0
    small_dash_px: float = 1.0
    big_dash_px: float = 2.0
    small_tick_count: int = 60
    big_tick_count: int = 12
    label_font_px: float = 18.0
    label_emphasis: float = 1.2
    pie_alpha: float = 0.8


@dataclass
class UIState:
    """User-interface level preferences for the main window."""

    window_width: int = 360
    window_height: int = 640
    always_on_top: bool = False


@dataclass
class AppConfig:
    """Persisted configuration for the application."""

    style: FaceStyle = field(default_factory=FaceStyle)
    ui: UIState = field(default_factory=UIState)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("config root must be a JSON object")
        return AppConfig(
            style=_coerce(FaceStyle, data.get("style", {})),
            ui=_coerce(UIState, data.get("ui", {})),
        )


def _coerce(cls: Type[_T], raw: Any) -> _T:
    """Build ``cls`` from ``raw``, keeping defaults for missing keys."""
    if not isinstance(raw, dict):
        raw = {}
    defaults = cls()
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        default = getattr(defaults, f.name)
        if f.name not in raw:
            kwargs[f.name] = default
            continue
        value = raw[f.name]
        # bool is checked first because it is a subclass of int
        if isinstance(default, bool):
            kwargs[f.name] = bool(value)
        elif isinstance(default, int):
            kwargs[f.name] = int(value)
        elif isinstance(default, float):
            kwargs[f.name] = float(value)
        else:
            kwargs[f.name] = str(value)
    return cls(**kwargs)


__all__ = ["FaceStyle", "UIState", "AppConfig"]
