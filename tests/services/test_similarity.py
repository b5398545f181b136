# tests/services/test_similarity.py
import pytest

from app.services.variations.similarity import similarity


def test_identical_strings():
    assert similarity("Energy Potion Gel", "Energy Potion Gel") == 1.0


def test_case_insensitive():
    assert similarity("ABC", "abc") == 1.0


def test_empty_strings():
    assert similarity("", "") == 1.0
    assert similarity("", "abc") == 0.0


def test_edit_distance_ratio():
    # kitten -> sitting takes three edits
    assert similarity("kitten", "sitting") == pytest.approx(4 / 7)


def test_symmetric():
    assert similarity("Energy Potion", "Energy Potion Gel") == similarity(
        "Energy Potion Gel", "Energy Potion"
    )
