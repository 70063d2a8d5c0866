"""Qt application entry point for the watchface timer."""

from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .config import load_config, save_config
from .controller import SweepController
from .dial import INITIAL_ANGLE
from .logging_config import level_from_env, setup_logging
from .models import AppConfig, FaceStyle
from .painting import paint_frame
from .render import Frame, build_frame

logger = logging.getLogger(__name__)

# ------------------------------ Face Widget -----------------------------------


class WatchFace(QtWidgets.QWidget):
    """Canvas painting the dial; horizontal drags are reported as deltas."""

    scrolled = QtCore.Signal(float)

    def __init__(
        self, style: FaceStyle, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._style = style
        self._sweep: float = INITIAL_ANGLE
        self._last_x: Optional[float] = None
        self.setMinimumSize(160, 160)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    def sweep(self) -> float:
        return self._sweep

    def set_sweep(self, degrees: float) -> None:
        self._sweep = float(degrees)
        self.update()

    def frame(self) -> Frame:
        return build_frame(self._sweep, self.width(), self.height(), self._style)

    # ----------------------------- Interaction --------------------------------

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._last_x = float(e.position().x())
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if self._last_x is None:
            return
        x = float(e.position().x())
        delta = x - self._last_x
        self._last_x = x
        if delta:
            self.scrolled.emit(delta)

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        self._last_x = None
        e.accept()

    def wheelEvent(self, e: QtGui.QWheelEvent) -> None:
        # Trackpads report pixels; mouse wheels report eighths of a degree
        delta = float(e.pixelDelta().x())
        if not delta:
            delta = e.angleDelta().x() / 8.0
        if delta:
            self.scrolled.emit(delta)
            e.accept()
        else:
            e.ignore()

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        try:
            painter.fillRect(self.rect(), QtGui.QColor(self._style.background))
            paint_frame(painter, self.frame())
        finally:
            painter.end()


# ------------------------------- Main Window ----------------------------------


class MainWindow(QtWidgets.QWidget):
    """Face on the upper three quarters, Start/Stop button centered below."""

    def __init__(self, controller: SweepController, cfg: AppConfig) -> None:
        super().__init__(None)
        self.controller = controller
        self.setWindowTitle(f"watchface {APP_VERSION}")
        self.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, cfg.ui.always_on_top
        )
        self.resize(cfg.ui.window_width, cfg.ui.window_height)

        palette = self.palette()
        palette.setColor(
            QtGui.QPalette.ColorRole.Window, QtGui.QColor(cfg.style.background)
        )
        self.setPalette(palette)
        self.setAutoFillBackground(True)

        self.face = WatchFace(cfg.style, self)
        self.face.set_sweep(controller.angle)

        self.button = QtWidgets.QPushButton(self)
        self.button.setFlat(True)
        self.button.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)
        self.button.setStyleSheet(
            f"color: {cfg.style.red}; font-weight: bold; padding: 8px 16px;"
        )
        self._on_running_changed(controller.running)

        button_row = QtWidgets.QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.button)
        button_row.addStretch(1)

        v = QtWidgets.QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        v.addWidget(self.face, stretch=3)
        v.addLayout(button_row, stretch=1)

        # Wire signals
        self.button.clicked.connect(self._on_button_clicked)
        self.face.scrolled.connect(controller.on_drag)
        controller.angleChanged.connect(self.face.set_sweep)
        controller.runningChanged.connect(self._on_running_changed)

    def _on_button_clicked(self) -> None:
        self.controller.on_button_tap()

    def _on_running_changed(self, running: bool) -> None:
        self.button.setText("Stop" if running else "Start")


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(
        self, app: QtWidgets.QApplication, config_file: Optional[Path] = None
    ) -> None:
        super().__init__(None)
        self.app = app
        self._config_file = config_file
        self.cfg = load_config(config_file)

        self.sweep = SweepController(self)
        self.window = MainWindow(self.sweep, self.cfg)
        self.window.show()
        logger.info("watchface %s started", APP_VERSION)

    def save_config(self) -> bool:
        size = self.window.size()
        self.cfg.ui.window_width = int(size.width())
        self.cfg.ui.window_height = int(size.height())
        return save_config(self.cfg, self._config_file)


# ---------------------------------- Main --------------------------------------


def main() -> None:
    setup_logging(level_from_env())

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("watchface")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()
    ctrl.save_config()

    sys.exit(ret)

