"""
Background Workers (Threading)
==============================
QThread subclasses for long-running tasks.

The remote fetch must not run on the GUI thread, or the window freezes while
waiting for the network. The worker reports back through a Qt signal, which
is delivered on the thread owning the receiver.

Classes:
    FetchWorker: Runs one remote place fetch.
"""
import logging
from PySide6.QtCore import QThread, Signal

from californication.controller.director import FetchResult, PlaceDirector

logger = logging.getLogger(__name__)


class FetchWorker(QThread):
    # Emitted exactly once with a FetchResult
    completed = Signal(object)

    def __init__(self, director: PlaceDirector, parent=None):
        super().__init__(parent)
        self.director = director

    def run(self):
        try:
            logger.info("Starting place fetch in background thread...")
            places = self.director.fetch_places()
            result = FetchResult.success(places)
        except Exception as e:
            logger.error(f"Error in FetchWorker: {e}")
            result = FetchResult.failure(e)

        self.completed.emit(result)
