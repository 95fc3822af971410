import os

# Tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QObject, QSettings, Signal

from californication.controller.director import FetchResult
from californication.controller.places_client import FetchError
from californication.model.place import Place
from californication.model.preferences import SortPreference


class FakeDirector:
    """In-memory stand-in for PlaceDirector."""

    def __init__(self, persisted=None, remote=None, error=None, save_error=None):
        self.persisted = persisted
        self.remote = remote if remote is not None else []
        self.error = error
        self.save_error = save_error
        self.saved = []

    def persisted_places(self):
        return self.persisted

    def fetch_places(self):
        if self.error is not None:
            raise self.error
        return list(self.remote)

    def save_places(self, places):
        if self.save_error is not None:
            raise self.save_error
        self.saved.append(list(places))


class ManualWorker(QObject):
    """Worker that completes only when the test says so."""
    completed = Signal(object)
    finished = Signal()

    def __init__(self, director, parent=None):
        super().__init__(parent)
        self.director = director
        self.started = False

    def start(self):
        self.started = True

    def succeed(self):
        self.completed.emit(FetchResult.success(self.director.fetch_places()))
        self.finished.emit()

    def fail(self, error=FetchError("The request timed out.")):
        self.completed.emit(FetchResult.failure(error))
        self.finished.emit()


class SignalRecorder:
    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def places():
    return [
        Place(name="Cafe", rating=4.0, city="San Francisco"),
        Place(name="Deli", rating=5.0, city="Los Angeles"),
        Place(name="Bistro", rating=4.0, city="San Diego"),
    ]


@pytest.fixture
def settings(qapp, tmp_path):
    return QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def preference(settings):
    return SortPreference(settings)


@pytest.fixture
def workers():
    created = []

    def factory(director, parent):
        worker = ManualWorker(director, parent)
        created.append(worker)
        return worker

    factory.created = created
    return factory
