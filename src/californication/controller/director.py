"""
Place Director (Data Facade)
============================
Single entry point the presenter uses for place data.

It combines the remote client with the local HDF5 store:
- `persisted_places()` reads the local copy (synchronous, may return None).
- `fetch_places()` asks the remote service (blocking, run on a worker thread).
- `save_places()` writes the local copy.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from californication.controller.places_client import PlacesClient
from californication.model.io import PlaceStorage
from californication.model.place import Place

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one remote fetch: either places or an error."""
    places: Optional[List[Place]] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.places is not None and self.error is None

    @staticmethod
    def success(places: Sequence[Place]) -> FetchResult:
        return FetchResult(places=list(places))

    @staticmethod
    def failure(error: Optional[Exception]) -> FetchResult:
        return FetchResult(error=error)


class PlaceDirector:
    def __init__(self, client: PlacesClient, storage: PlaceStorage) -> None:
        self.client = client
        self.storage = storage

    def persisted_places(self) -> Optional[List[Place]]:
        try:
            return self.storage.load()
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable place store: {e}")
            return None

    def fetch_places(self) -> List[Place]:
        return self.client.fetch_places()

    def save_places(self, places: Sequence[Place]) -> None:
        self.storage.save(places)
