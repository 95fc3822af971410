import json

import h5py
import pytest

from californication.controller.director import FetchResult, PlaceDirector
from californication.model.io import PlaceStorage


class StubClient:
    def __init__(self, places):
        self.places = places

    def fetch_places(self):
        return list(self.places)


def test_round_trip_through_storage(tmp_path, places):
    director = PlaceDirector(StubClient(places), PlaceStorage(str(tmp_path / "places.h5")))

    assert director.persisted_places() is None
    director.save_places(director.fetch_places())
    assert director.persisted_places() == places


def test_unreadable_store_reads_as_nothing(tmp_path):
    path = tmp_path / "places.h5"
    path.write_bytes(b"\x00\x01corrupt")
    director = PlaceDirector(StubClient([]), PlaceStorage(str(path)))

    assert director.persisted_places() is None


def test_fetch_result():
    assert FetchResult.success([]).ok
    assert not FetchResult.failure(RuntimeError("x")).ok
    assert not FetchResult.failure(None).ok


@pytest.mark.parametrize("payload", [
    {"name": "Lands End", "rating": 4.8},
    ["Lands End", "Baker Beach"],
    "Lands End",
])
def test_wrong_shaped_store_reads_as_nothing(tmp_path, payload):
    path = tmp_path / "places.h5"
    with h5py.File(path, "w") as f:
        f.attrs["places_json"] = json.dumps(payload)
    director = PlaceDirector(StubClient([]), PlaceStorage(str(path)))

    assert director.persisted_places() is None
