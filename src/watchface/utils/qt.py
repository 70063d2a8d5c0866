"""Qt helper utilities."""

from PySide6 import QtGui
import numpy as np


def qimage_to_rgba(image: QtGui.QImage) -> np.ndarray:
    """Convert a :class:`~PySide6.QtGui.QImage` into an RGBA NumPy array."""
    fmt = getattr(QtGui.QImage, "Format_RGBA8888", None)
    if fmt is None:
        fmt = QtGui.QImage.Format.Format_RGBA8888
    img: QtGui.QImage = image.convertToFormat(fmt)
    width = img.width()
    height = img.height()
    bytes_per_line = img.bytesPerLine()
    buf = img.constBits()  # memoryview in PySide6
    arr = np.frombuffer(buf, np.uint8)
    arr = arr.reshape((height, bytes_per_line))  # include stride
    arr = arr[:, : width * 4]  # crop padding
    arr = arr.reshape((height, width, 4))
    return arr.copy()  # detach from the QImage buffer


__all__ = ["qimage_to_rgba"]
