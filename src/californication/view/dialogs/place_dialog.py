"""
Modal Dialog showing the details of one place
"""
from PySide6.QtWidgets import QDialog, QVBoxLayout, QFormLayout, QLabel, QDialogButtonBox

from californication.model.place import Place


class PlaceDetailDialog(QDialog):
    def __init__(self, place: Place, parent=None):
        super().__init__(parent)
        self.setWindowTitle(place.name)
        self.resize(420, 300)
        self.place = place

        layout = QVBoxLayout(self)

        form = QFormLayout()
        form.addRow("Name:", QLabel(place.name))
        form.addRow("Rating:", QLabel(f"{place.rating:.1f}"))
        if place.city:
            form.addRow("City:", QLabel(place.city))
        if place.types:
            form.addRow("Types:", QLabel(", ".join(place.types)))
        if place.phone_number:
            form.addRow("Phone:", QLabel(place.phone_number))
        if place.website:
            link = QLabel(f'<a href="{place.website}">{place.website}</a>')
            link.setOpenExternalLinks(True)
            form.addRow("Website:", link)
        if place.has_coordinate:
            form.addRow("Location:", QLabel(f"{place.latitude:.5f}, {place.longitude:.5f}"))
        layout.addLayout(form)

        if place.summary:
            summary = QLabel(place.summary)
            summary.setWordWrap(True)
            layout.addWidget(summary)

        layout.addStretch()

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
