"""UI smoke tests for the watch face window and offscreen rendering."""

from __future__ import annotations

import numpy as np
from PySide6 import QtCore, QtGui
import pytest

from watchface.app import MainController, MainWindow, WatchFace
from watchface.controller import SweepController
from watchface.models import AppConfig, FaceStyle
from watchface.painting import render_to_image
from watchface.render import build_frame
from watchface.utils.qt import qimage_to_rgba


def _mouse(kind: QtCore.QEvent.Type, x: float) -> QtGui.QMouseEvent:
    pos = QtCore.QPointF(x, 50.0)
    return QtGui.QMouseEvent(
        kind,
        pos,
        pos,
        QtCore.Qt.MouseButton.LeftButton,
        QtCore.Qt.MouseButton.LeftButton,
        QtCore.Qt.KeyboardModifier.NoModifier,
    )


def test_button_label_follows_running_flag(qapp) -> None:
    ctrl = SweepController(initial_angle=-60.0)
    window = MainWindow(ctrl, AppConfig())
    assert window.button.text() == "Start"

    window.button.click()
    assert ctrl.running is True
    assert window.button.text() == "Stop"

    window.button.click()
    assert ctrl.running is False
    assert window.button.text() == "Start"
    window.close()


def test_scroll_signal_snaps_and_updates_face(qapp) -> None:
    ctrl = SweepController()
    window = MainWindow(ctrl, AppConfig())
    window.button.click()

    window.face.scrolled.emit(100.0)

    assert window.button.text() == "Start"
    assert ctrl.angle == pytest.approx(-51.0)
    assert window.face.sweep() == ctrl.angle
    window.close()


def test_mouse_drag_reports_horizontal_deltas(qapp) -> None:
    face = WatchFace(FaceStyle())
    deltas: list[float] = []
    face.scrolled.connect(deltas.append)

    face.mousePressEvent(_mouse(QtCore.QEvent.Type.MouseButtonPress, 10.0))
    face.mouseMoveEvent(_mouse(QtCore.QEvent.Type.MouseMove, 30.0))
    face.mouseMoveEvent(_mouse(QtCore.QEvent.Type.MouseMove, 25.0))
    face.mouseMoveEvent(_mouse(QtCore.QEvent.Type.MouseMove, 25.0))
    face.mouseReleaseEvent(_mouse(QtCore.QEvent.Type.MouseButtonRelease, 25.0))
    face.mouseMoveEvent(_mouse(QtCore.QEvent.Type.MouseMove, 90.0))

    assert deltas == [20.0, -5.0]


def test_face_frame_matches_widget_size(qapp) -> None:
    face = WatchFace(FaceStyle())
    face.resize(360, 480)
    face.set_sweep(-45.0)
    assert face.frame() == build_frame(-45.0, 360, 480, FaceStyle())


def test_window_paints_offscreen(qapp) -> None:
    ctrl = SweepController(initial_angle=-90.0)
    window = MainWindow(ctrl, AppConfig())
    window.resize(360, 640)
    pixmap = window.grab()
    assert not pixmap.isNull()
    rgba = qimage_to_rgba(pixmap.toImage())
    assert rgba.shape[2] == 4
    window.close()


def test_render_to_image_draws_pie_counter_clockwise_for_negative_sweep(
    qapp,
) -> None:
    image = render_to_image(-90.0, 360, 480)
    rgba = qimage_to_rgba(image)
    assert rgba.shape == (480, 360, 4)

    # Centre (180, 240); the sector covers the top-left quadrant only.
    r, g, b, _ = (int(v) for v in rgba[202, 142])
    assert r > g + 60 and r > b + 60
    assert (rgba[202, 218, :3] > 240).all()


def test_rendering_is_idempotent(qapp) -> None:
    a = qimage_to_rgba(render_to_image(-123.0, 300, 400))
    b = qimage_to_rgba(render_to_image(-123.0, 300, 400))
    assert np.array_equal(a, b)


def test_zero_size_viewport_does_not_raise(qapp) -> None:
    image = render_to_image(0.0, 0, 0)
    assert image.width() == 1 and image.height() == 1


def test_main_controller_saves_window_size(qapp, tmp_path) -> None:
    path = tmp_path / "cfg.json"
    ctrl = MainController(qapp, config_file=path)
    ctrl.window.resize(300, 500)
    assert ctrl.save_config() is True
    saved = AppConfig.from_json(path.read_text(encoding="utf-8"))
    assert (saved.ui.window_width, saved.ui.window_height) == (300, 500)
    ctrl.window.close()
