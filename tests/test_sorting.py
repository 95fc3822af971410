import pytest

from californication.model.place import Place
from californication.model.sorting import SortMode, sorted_places, DEFAULT_SORT_MODE


def test_by_name_is_ascending(places):
    result = sorted_places(places, SortMode.NAME)
    assert [p.name for p in result] == ["Bistro", "Cafe", "Deli"]


def test_by_name_is_stable_for_equal_names():
    first = Place(name="Diner", rating=3.0)
    second = Place(name="Diner", rating=4.5)
    other = Place(name="Bar", rating=2.0)

    result = sorted_places([first, other, second], SortMode.NAME)

    assert result == [other, first, second]


def test_by_rating_breaks_ties_by_name(places):
    result = sorted_places(places, SortMode.RATING)
    assert [(p.name, p.rating) for p in result] == [
        ("Deli", 5.0),
        ("Bistro", 4.0),
        ("Cafe", 4.0),
    ]


def test_by_rating_ordering_holds_for_larger_input():
    names = ["Zuni", "Anchor", "Mission", "Bodega", "Tartine", "Nopa", "Flour"]
    ratings = [4.5, 3.0, 4.5, 5.0, 3.0, 4.5, 2.5]
    result = sorted_places([Place(n, r) for n, r in zip(names, ratings)], SortMode.RATING)

    for a, b in zip(result, result[1:]):
        assert a.rating >= b.rating
        if a.rating == b.rating:
            assert a.name <= b.name


def test_sorting_does_not_mutate_input(places):
    original = list(places)
    sorted_places(places, SortMode.RATING)
    assert places == original


def test_labels_and_default():
    assert SortMode.NAME.label == "By name"
    assert SortMode.RATING.label == "By rating"
    assert DEFAULT_SORT_MODE is SortMode.RATING


def test_unknown_mode_raises(places):
    with pytest.raises(ValueError):
        sorted_places(places, 5)
