"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Exports:
    PLACES_URL (str): Remote endpoint serving the place list.
    REQUEST_TIMEOUT (float): Timeout of the remote fetch in seconds.
    get_cache_path(): Location of the local place store.
"""
import os
from pathlib import Path

from PySide6.QtCore import QStandardPaths

DEFAULT_PLACES_URL = "http://localhost:8000/api/places"
CACHE_FILE_NAME = "places.h5"


def get_cache_path() -> str:
    """Path of the HDF5 file holding the last fetched places."""
    override = os.environ.get("CALIFORNICATION_CACHE")
    if override:
        return override

    data_dir = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not data_dir:
        data_dir = os.path.join(str(Path.home()), ".californication")
    return os.path.join(data_dir, CACHE_FILE_NAME)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"WARNING: {name}={raw!r} is not a number, using {default}")
        return default


# Global Constants
PLACES_URL: str = os.environ.get("CALIFORNICATION_PLACES_URL", DEFAULT_PLACES_URL)
REQUEST_TIMEOUT: float = _env_float("CALIFORNICATION_TIMEOUT", 15.0)
