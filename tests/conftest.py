"""Shared fixtures: a headless QApplication for widget and animation tests."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtWidgets  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> Iterator[QtWidgets.QApplication]:
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app  # type: ignore[misc]
