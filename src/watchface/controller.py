"""Sweep angle state and the animation that drives it."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6 import QtCore

from .dial import ANIMATION_TARGET, INITIAL_ANGLE, degrees_to_millis, scrub_angle

logger = logging.getLogger(__name__)


class SweepController(QtCore.QObject):
    """Owns the sweep angle and the running flag.

    Two states: idle and running. A tap toggles between them; a drag
    always lands in idle. Leaving the running state stops the single
    owned animation synchronously, freezing the angle where it is.
    """

    angleChanged = QtCore.Signal(float)
    runningChanged = QtCore.Signal(bool)

    def __init__(
        self,
        parent: Optional[QtCore.QObject] = None,
        initial_angle: float = INITIAL_ANGLE,
    ) -> None:
        super().__init__(parent)
        self._angle = float(initial_angle)
        self._running = False
        self._last_duration_ms = 0

        self._animation = QtCore.QVariantAnimation(self)
        self._animation.setEasingCurve(QtCore.QEasingCurve.Type.Linear)
        self._animation.valueChanged.connect(self._on_animation_value)
        self._animation.finished.connect(self._on_animation_finished)

    # ----------------------------- Properties ---------------------------------

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def running(self) -> bool:
        return self._running

    @property
    def last_duration_ms(self) -> int:
        """Duration of the most recently started sweep."""
        return self._last_duration_ms

    def is_animating(self) -> bool:
        return self._animation.state() == QtCore.QAbstractAnimation.State.Running

    # ----------------------------- Interaction --------------------------------

    def on_button_tap(self) -> None:
        self._set_running(not self._running)
        if self._running:
            self._start_sweep()
        else:
            self._animation.stop()
            logger.debug("Sweep stopped at %.2f°", self._angle)

    def on_drag(self, delta: float) -> None:
        self._set_running(False)
        self._animation.stop()
        self._set_angle(scrub_angle(self._angle, float(delta)))

    toggle = on_button_tap
    scrub = on_drag

    # ------------------------------ Internals ---------------------------------

    def _start_sweep(self) -> None:
        duration = degrees_to_millis(self._angle)
        self._last_duration_ms = duration
        self._animation.stop()
        self._animation.setStartValue(self._angle)
        self._animation.setEndValue(ANIMATION_TARGET)
        self._animation.setDuration(duration)
        logger.debug(
            "Sweep started from %.2f° to %.1f° over %d ms",
            self._angle,
            ANIMATION_TARGET,
            duration,
        )
        self._animation.start()

    def _set_running(self, running: bool) -> None:
        if running == self._running:
            return
        self._running = running
        self.runningChanged.emit(running)

    def _set_angle(self, angle: float) -> None:
        if angle == self._angle:
            return
        self._angle = angle
        self.angleChanged.emit(angle)

    def _on_animation_value(self, value: object) -> None:
        self._set_angle(float(value))  # type: ignore[arg-type]

    def _on_animation_finished(self) -> None:
        # The flag stays set; only a tap or a drag leaves the running state.
        logger.debug("Sweep reached %.2f°", self._angle)


__all__ = ["SweepController"]
