"""
Input/Output Manager (HDF5)
Handles saving and loading the local copy of the place list to .h5 files.
"""
import json
import logging
import os
import tempfile
from importlib.metadata import version, PackageNotFoundError
from typing import List, Optional, Sequence

import h5py
import numpy as np

from californication.model.place import Place

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("californication")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# HDF5 attributes are limited to 64KB, keep a safety margin
ATTRIBUTE_SIZE_LIMIT = 60000


class PlaceStorage:
    """Persists a list of places to a single HDF5 file."""

    def __init__(self, filepath: str) -> None:
        self.filepath = filepath

    def exists(self) -> bool:
        return os.path.exists(self.filepath)

    def save(self, places: Sequence[Place]) -> None:
        logger.info(f"Saving {len(places)} places to: {self.filepath}")
        directory = os.path.dirname(os.path.abspath(self.filepath))
        os.makedirs(directory, exist_ok=True)

        payload = json.dumps([place.to_dict() for place in places])

        # Write next to the target, then swap it in
        fd, temp_path = tempfile.mkstemp(suffix=".h5", dir=directory)
        os.close(fd)
        try:
            with h5py.File(temp_path, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["count"] = len(places)

                # Use dataset if data exceeds HDF5 attribute size limit
                if len(payload) > ATTRIBUTE_SIZE_LIMIT:
                    logger.debug(f"Place list is large ({len(payload)} bytes), using dataset")
                    f.create_dataset("places", data=np.void(payload.encode("utf-8")))
                else:
                    f.attrs["places_json"] = payload

            os.replace(temp_path, self.filepath)

        except Exception as e:
            logger.exception(f"Failed to save places: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

    def load(self) -> Optional[List[Place]]:
        """
        Read the stored places.

        Returns:
            The stored list, or None if nothing has been saved yet.

        Raises:
            ValueError: if the file exists but is not a valid place store.
        """
        if not self.exists():
            logger.debug(f"No stored places at: {self.filepath}")
            return None

        logger.info(f"Loading places from: {self.filepath}")
        if not h5py.is_hdf5(self.filepath):
            msg = f"File '{self.filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

        with h5py.File(self.filepath, "r") as f:
            payload = None
            if "places" in f:
                # Large data stored as dataset
                payload = bytes(f["places"][()]).decode("utf-8")
            elif "places_json" in f.attrs:
                # Small data stored as attribute
                payload = f.attrs["places_json"]
                if isinstance(payload, bytes):
                    payload = payload.decode("utf-8")

            stored_version = f.attrs.get("version", "unknown")

        if payload is None:
            raise ValueError(f"File '{self.filepath}' contains no place list.")

        try:
            records = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupted place list in '{self.filepath}': {e}") from e

        if not isinstance(records, list) or not all(isinstance(record, dict) for record in records):
            raise ValueError(f"Corrupted place list in '{self.filepath}': expected a list of place records.")

        places = [Place.from_dict(record) for record in records]
        logger.debug(f"Loaded {len(places)} places (written by version {stored_version}).")
        return places

