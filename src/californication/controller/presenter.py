"""
Place List Presenter
====================
Holds the current places and sort mode, and tells the view what to show.

Why is this file needed?
------------------------
1. State: The place list and the sort mode live here, not in the widgets.
2. Loading: It runs the fetch -> persist -> re-render cycle and the busy state.
3. Decoupling: The view only listens to signals and forwards user actions,
   so the whole flow can be driven without a window.

Signals:
    places_changed(list): Re-render with the given (sorted) places.
    loading_changed(bool): Busy state, True while a fetch is in flight.
    error_occurred(str, str): Title and text of a one-shot error message.
    place_selected(object): The place the user picked.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from californication.controller.director import FetchResult, PlaceDirector
from californication.controller.workers import FetchWorker
from californication.model.place import Place
from californication.model.preferences import SortPreference
from californication.model.sorting import SortMode, sorted_places

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error"
UNKNOWN_ERROR_MESSAGE = "The places could not be loaded."

WorkerFactory = Callable[[PlaceDirector, QObject], FetchWorker]


class PlaceListPresenter(QObject):
    places_changed = Signal(object)
    loading_changed = Signal(bool)
    error_occurred = Signal(str, str)
    place_selected = Signal(object)

    def __init__(
        self,
        director: PlaceDirector,
        preference: SortPreference,
        worker_factory: WorkerFactory = FetchWorker,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.director = director
        self.preference = preference
        self.worker_factory = worker_factory

        self._places: Optional[List[Place]] = None
        self._sort_mode: SortMode = preference.load()
        self._loading = False
        self._worker = None

    # --- PROPERTIES ---

    @property
    def places(self) -> Optional[List[Place]]:
        return list(self._places) if self._places is not None else None

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @property
    def is_loading(self) -> bool:
        return self._loading

    # --- DATA ---

    def initialize(self) -> None:
        """Show the locally persisted places, if there are any."""
        places = self.director.persisted_places()
        if places is None:
            logger.info("No persisted places to show.")
            return
        self._update_with_new_data(places)

    def begin_load(self) -> bool:
        """
        Start fetching places in the background.

        Returns:
            False if a fetch is already running (nothing is started).
        """
        if self._loading:
            logger.debug("Fetch already in progress, ignoring refresh request.")
            return False

        self._set_loading(True)

        worker = self.worker_factory(self.director, self)
        worker.completed.connect(self._on_fetch_completed)
        worker.finished.connect(worker.deleteLater)
        self._worker = worker
        worker.start()
        return True

    def shutdown(self) -> None:
        """Block until running fetches return, so no thread outlives the app."""
        for worker in self.findChildren(FetchWorker):
            if worker.isRunning():
                logger.info("Waiting for a running fetch to finish before quitting...")
                worker.wait()

    def _on_fetch_completed(self, result: FetchResult) -> None:
        self._worker = None
        self._set_loading(False)

        if not result.ok:
            message = str(result.error) if result.error is not None else ""
            if not message:
                message = UNKNOWN_ERROR_MESSAGE
            logger.warning(f"Loading places failed: {message}")
            self.error_occurred.emit(ERROR_TITLE, message)
            return

        try:
            self.director.save_places(result.places)
        except OSError as e:
            logger.error(f"Could not persist fetched places: {e}")

        self._update_with_new_data(result.places)

    def _update_with_new_data(self, places: Sequence[Place]) -> None:
        self._places = list(places)
        self._reload_data()

    def _reload_data(self) -> None:
        # Nothing loaded yet, nothing to sort
        if self._places is None:
            return
        self._places = sorted_places(self._places, self._sort_mode)
        self.places_changed.emit(list(self._places))

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.loading_changed.emit(loading)

    # --- SORTING ---

    def sort_options(self) -> List[Tuple[str, SortMode]]:
        return [(mode.label, mode) for mode in SortMode]

    def sorted_sequence(self) -> Optional[List[Place]]:
        if self._places is None:
            return None
        return sorted_places(self._places, self._sort_mode)

    def set_sort_mode(self, mode: SortMode) -> None:
        if mode == self._sort_mode:
            return
        logger.info(f"Sort mode changed: {self._sort_mode.name} -> {mode.name}")
        self._sort_mode = mode
        self.preference.save(mode)
        self._reload_data()

    def choose_sort_option(self, mode: Optional[SortMode]) -> None:
        """Result of the sort menu, None when it was cancelled."""
        if mode is None:
            return
        self.set_sort_mode(mode)

    # --- SELECTION ---

    def place_at(self, row: int) -> Optional[Place]:
        if self._places is None or not 0 <= row < len(self._places):
            return None
        return self._places[row]

    def select_place(self, row: int) -> None:
        place = self.place_at(row)
        if place is None:
            return
        self.place_selected.emit(place)
