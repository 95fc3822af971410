from PySide6.QtCore import QSettings

from californication.model.preferences import SortPreference, SORTING_TYPE_KEY
from californication.model.sorting import SortMode


def test_defaults_to_rating_when_absent(preference):
    assert preference.load() is SortMode.RATING


def test_saved_mode_survives_new_instance(settings, tmp_path):
    SortPreference(settings).save(SortMode.NAME)

    reopened = QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)
    assert SortPreference(reopened).load() is SortMode.NAME


def test_unknown_integer_falls_back_to_rating(settings, preference):
    settings.setValue(SORTING_TYPE_KEY, 7)
    assert preference.load() is SortMode.RATING


def test_non_integer_falls_back_to_rating(settings, preference):
    settings.setValue(SORTING_TYPE_KEY, "by-name")
    assert preference.load() is SortMode.RATING
