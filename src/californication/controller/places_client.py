"""
Remote Places Client
====================
Fetches the place list from the web service.

The service answers with JSON: either a bare list of place objects, or an
object wrapping that list under "places" or "results".
"""
import logging
from typing import Any, List, Optional

import requests

from californication import config
from californication.model.place import Place

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The remote place list could not be fetched."""


class PlacesClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url or config.PLACES_URL
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch_places(self) -> List[Place]:
        logger.info(f"Fetching places from {self.base_url}")
        try:
            response = self.session.get(self.base_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            raise FetchError("The request timed out.") from e
        except requests.ConnectionError as e:
            raise FetchError("Could not connect to the server.") from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise FetchError(f"The server responded with status {status}.") from e
        except requests.RequestException as e:
            raise FetchError(f"Request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError("The server returned an invalid response.") from e

        places = self.parse_places(payload)
        logger.info(f"Fetched {len(places)} places.")
        return places

    @staticmethod
    def parse_places(payload: Any) -> List[Place]:
        if isinstance(payload, dict):
            payload = payload.get("places", payload.get("results"))
        if not isinstance(payload, list):
            raise FetchError("The server response contains no place list.")

        places = []
        for record in payload:
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed place record: {record!r}")
                continue
            try:
                places.append(Place.from_dict(record))
            except ValueError as e:
                logger.warning(f"Skipping place record: {e}")
        return places
