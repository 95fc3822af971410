"""
Application Initialization
==========================
Builds the model, presenter and window, and starts the Qt event loop.

This is the dependency injection root:
1. Configures logging.
2. Creates the Qt application (which fixes where QSettings are stored).
3. Builds the data facade (remote client + local store) and the preference.
4. Hands them to the presenter, and the presenter to the window.
"""
import logging
import os
import sys

from PySide6.QtCore import QSettings

from californication import config
from californication.application import create_app
from californication.controller.director import PlaceDirector
from californication.controller.places_client import PlacesClient
from californication.controller.presenter import PlaceListPresenter
from californication.logging_config import setup_logging
from californication.model.io import PlaceStorage
from californication.model.preferences import SortPreference
from californication.view.main_window import PlaceListWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    level = logging.DEBUG if os.environ.get("CALIFORNICATION_DEBUG") else logging.INFO
    setup_logging(level=level, log_file=os.environ.get("CALIFORNICATION_LOG_FILE"))

    # 2. Create the Qt Application
    app = create_app()

    # 3. Data facade & preferences
    director = PlaceDirector(
        client=PlacesClient(config.PLACES_URL, config.REQUEST_TIMEOUT),
        storage=PlaceStorage(config.get_cache_path()),
    )
    preference = SortPreference(QSettings())

    # 4. Presenter & window
    presenter = PlaceListPresenter(director, preference)
    window = PlaceListWindow(presenter)
    presenter.initialize()
    window.show()
    app.aboutToQuit.connect(presenter.shutdown)

    # Nothing stored locally yet, ask the server
    if presenter.places is None:
        presenter.begin_load()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
