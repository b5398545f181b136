# tests/services/test_normalizer.py
import pytest

from app.services.variations.normalizer import base_name, base_sku_pattern, sku_number


def test_base_name_strips_volume():
    assert base_name("Energy Potion Gel 4 OZ") == "Energy Potion Gel"
    assert base_name("Energy Potion Gel 2 OZ") == "Energy Potion Gel"


def test_base_name_strips_every_occurrence():
    assert base_name("Lube 4 OZ Travel 4 OZ") == "Lube Travel"


def test_base_name_strips_all_categories():
    assert base_name("Silicone Dildo Black 8 Inch") == "Dildo"
    assert base_name("Logo Tee Small") == "Logo Tee"


def test_base_name_collapses_whitespace():
    assert base_name("  Pleasure   Kit  ") == "Pleasure Kit"


@pytest.mark.parametrize(
    "sku, expected",
    [
        ("EPG02", "EPG"),
        ("EPG0202", "EPG"),
        ("TEEXL", "TEE"),
        ("teexl", "tee"),
        ("TEEXL2", "TEE"),
        ("EPG", "EPG"),
        ("TEE2XL", "TEE2"),
    ],
)
def test_base_sku_pattern(sku, expected):
    assert base_sku_pattern(sku) == expected


def test_base_sku_pattern_strips_one_suffix_only():
    assert base_sku_pattern("ABCXLXL") == "ABCXL"


def test_sku_number():
    assert sku_number("EPG04", 999) == 4
    assert sku_number("EPG10", 999) == 10
    assert sku_number("EPGSM", 999) == 999
    assert sku_number("EPG", 5) == 5


def test_base_name_keeps_possessive():
    assert base_name("Men's Tee Large") == "Men's Tee"


def test_base_name_with_empty_pattern_list():
    assert base_name("Lotion  4 OZ", []) == "Lotion 4 OZ"
