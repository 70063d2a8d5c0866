"""Execute renderer frames on a ``QPainter``."""

from __future__ import annotations

from PySide6 import QtCore, QtGui

from .models import FaceStyle
from .render import DashedCircle, Disc, DrawCommand, Frame, Label, Pie, build_frame


def _dashed_pen(cmd: DashedCircle) -> QtGui.QPen:
    pen = QtGui.QPen(QtGui.QColor(cmd.color))
    pen.setWidthF(cmd.stroke_width)
    pen.setCapStyle(QtCore.Qt.PenCapStyle.FlatCap)
    if cmd.gap > 0 and cmd.dash > 0:
        # Qt dash patterns are expressed in units of the pen width
        pen.setDashPattern([cmd.dash / cmd.stroke_width, cmd.gap / cmd.stroke_width])
    return pen


def _paint_command(painter: QtGui.QPainter, cmd: DrawCommand) -> None:
    if isinstance(cmd, DashedCircle):
        if cmd.radius <= 0 or cmd.stroke_width <= 0:
            return
        painter.setPen(_dashed_pen(cmd))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QtCore.QPointF(*cmd.center), cmd.radius, cmd.radius)
    elif isinstance(cmd, Disc):
        if cmd.radius <= 0:
            return
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QBrush(QtGui.QColor(cmd.color)))
        painter.drawEllipse(QtCore.QPointF(*cmd.center), cmd.radius, cmd.radius)
    elif isinstance(cmd, Pie):
        if cmd.radius <= 0:
            return
        cx, cy = cmd.center
        r = cmd.radius
        path = QtGui.QPainterPath()
        path.moveTo(cx, cy)
        # QPainterPath angles run counter-clockwise, the frame's run clockwise
        rect = QtCore.QRectF(cx - r, cy - r, 2 * r, 2 * r)
        path.arcTo(rect, -cmd.start_deg, -cmd.sweep_deg)
        path.closeSubpath()
        color = QtGui.QColor(cmd.color)
        color.setAlphaF(max(0.0, min(1.0, cmd.alpha)))
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QBrush(color))
        painter.drawPath(path)
    elif isinstance(cmd, Label):
        font = QtGui.QFont(painter.font())
        font.setBold(True)
        font.setPixelSize(max(1, round(cmd.font_px)))
        bounds = QtGui.QFontMetricsF(font).tightBoundingRect(cmd.text)
        x = cmd.anchor[0] - bounds.width() / 2.0
        y = cmd.anchor[1] + bounds.height() / 2.0
        painter.setFont(font)
        painter.setPen(QtGui.QPen(QtGui.QColor(cmd.color)))
        painter.drawText(QtCore.QPointF(x, y), cmd.text)
    else:  # pragma: no cover - exhaustive over DrawCommand
        raise TypeError(f"unknown draw command: {cmd!r}")


def paint_frame(painter: QtGui.QPainter, frame: Frame) -> None:
    """Replay ``frame`` on ``painter`` in order."""
    painter.save()
    try:
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QtGui.QPainter.RenderHint.TextAntialiasing, True)
        for cmd in frame:
            _paint_command(painter, cmd)
    finally:
        painter.restore()


def render_to_image(
    sweep_deg: float, width: int, height: int, style: FaceStyle = FaceStyle()
) -> QtGui.QImage:
    """Paint one frame offscreen onto a fresh ``QImage``."""
    image = QtGui.QImage(
        max(1, width), max(1, height), QtGui.QImage.Format.Format_ARGB32
    )
    image.fill(QtGui.QColor(style.background))
    painter = QtGui.QPainter(image)
    try:
        paint_frame(painter, build_frame(sweep_deg, width, height, style))
    finally:
        painter.end()
    return image


__all__ = ["paint_frame", "render_to_image"]
