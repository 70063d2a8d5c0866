"""Minimal version helper for the watchface application."""

from importlib import metadata
import json
from os import PathLike
from pathlib import Path
import sys

PACKAGE_NAME = "watchface"
VERSION_FILENAME = "version.json"


def get_embedded_path(name: str | PathLike[str]) -> Path:
    """Return the path to an embedded resource shipped with the binary."""

    base = Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parent))
    return base / Path(name)


def get_version() -> str:
    """
    Get version for application.

    :return: Version number.
    """
    if getattr(sys, "frozen", False):  # *.exe
        with open(get_embedded_path(VERSION_FILENAME), "r") as f:
            return str(json.load(f)["version"])
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev checkout, not installed
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        return str(setuptools_scm.get_version(root=root, fallback_version="0.0.0"))


__all__ = ["get_version", "get_embedded_path"]
