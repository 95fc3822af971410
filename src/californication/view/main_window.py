"""
Main Application Window
=======================
The place list screen: a table of places, a toolbar with Refresh and Sort,
and a busy indicator in the status bar.

The window owns no data. It forwards user actions to the presenter and
re-renders whenever the presenter says so.
"""
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QTableView, QAbstractItemView, QHeaderView, QMessageBox, QProgressBar, QLabel
)
from PySide6.QtCore import Qt, QModelIndex
from PySide6.QtGui import QAction, QKeySequence

from californication.controller.presenter import PlaceListPresenter
from californication.model.place import Place
from californication.model.sorting import SortMode
from californication.view.place_table_model import PlaceTableModel
from californication.view.dialogs.place_dialog import PlaceDetailDialog

VISIBLE_APP_NAME = "Californication"


class PlaceListWindow(QMainWindow):
    def __init__(self, presenter: PlaceListPresenter) -> None:
        super().__init__()
        self.presenter = presenter

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(720, 560)

        # --- TABLE ---
        self.table_model = PlaceTableModel(self)
        self.table_view = QTableView()
        self.table_view.setModel(self.table_model)
        self.table_view.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table_view.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table_view.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table_view.setAlternatingRowColors(True)
        self.table_view.verticalHeader().setVisible(False)
        self.table_view.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        self.setCentralWidget(self.table_view)

        # --- BUSY INDICATOR ---
        self.lbl_loading = QLabel("Loading")
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)  # Indeterminate
        self.progress_bar.setMaximumWidth(160)
        self.statusBar().addPermanentWidget(self.lbl_loading)
        self.statusBar().addPermanentWidget(self.progress_bar)
        self.lbl_loading.setVisible(False)
        self.progress_bar.setVisible(False)

        # --- ACTIONS & TOOLBAR ---
        self._create_actions()
        self._create_toolbar()

        # --- SIGNAL CONNECTIONS ---
        self.presenter.places_changed.connect(self.on_places_changed)
        self.presenter.loading_changed.connect(self.on_loading_changed)
        self.presenter.error_occurred.connect(self.on_error)
        self.presenter.place_selected.connect(self.on_place_selected)
        self.table_view.activated.connect(self.on_row_activated)

    def _create_actions(self) -> None:
        self.act_refresh = QAction("Refresh", self)
        self.act_refresh.setShortcuts(QKeySequence.StandardKey.Refresh)
        self.act_refresh.triggered.connect(self.presenter.begin_load)

        self.act_sort = QAction("Sort", self)
        self.act_sort.triggered.connect(self.on_sort_pressed)

        self.act_exit = QAction("Quit", self)
        self.act_exit.setShortcuts(QKeySequence.StandardKey.Quit)
        self.act_exit.triggered.connect(self.close)

    def _create_toolbar(self) -> None:
        toolbar = self.addToolBar("Places")
        toolbar.setMovable(False)
        toolbar.addAction(self.act_refresh)
        toolbar.addAction(self.act_sort)

        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_refresh)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_places_changed(self, places: List[Place]) -> None:
        self.table_model.set_places(places)
        self.statusBar().showMessage(f"{len(places)} places", 3000)

    def on_loading_changed(self, loading: bool) -> None:
        self.lbl_loading.setVisible(loading)
        self.progress_bar.setVisible(loading)
        self.act_sort.setEnabled(not loading)

    def on_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)

    def on_row_activated(self, index: QModelIndex) -> None:
        if index.isValid():
            self.presenter.select_place(index.row())
            self.table_view.clearSelection()

    def on_place_selected(self, place: Place) -> None:
        dlg = PlaceDetailDialog(place, self)
        dlg.exec()

    def on_sort_pressed(self) -> None:
        self.presenter.choose_sort_option(self.ask_sort_mode())

    def ask_sort_mode(self) -> Optional[SortMode]:
        """Shows the sort choices. Returns None if the user cancelled."""
        box = QMessageBox(self)
        box.setWindowTitle("Sorting")
        box.setText("Sorting")
        choices = [
            (box.addButton(label, QMessageBox.ActionRole), mode)
            for label, mode in self.presenter.sort_options()
        ]
        box.addButton(QMessageBox.Cancel)
        box.exec()

        clicked = box.clickedButton()
        for button, mode in choices:
            if button == clicked:
                return mode
        return None
