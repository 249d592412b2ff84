"""
Unit tests for color naming.
"""

import pytest

from huematch.exceptions import InvalidColorError
from huematch.services.colors.naming import (
    FALLBACK_NAME, NAMED_COLORS, lookup_color_name, name_colors, simple_color_name
)
from tests.conftest import make_palette


class TestLookupColorName:
    """Test nearest reference name lookup"""

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FF0000", "Red"),
        ("#DC143C", "Crimson"),
        ("#000080", "Navy"),
        ("#F5F5DC", "Beige"),
        ("#FFFFFF", "White"),
        ("#000000", "Black"),
    ])
    def test_exact_reference_colors(self, hex_color, expected):
        assert lookup_color_name(hex_color) == expected

    def test_near_match(self):
        assert lookup_color_name("#FE0101") == "Red"
        assert lookup_color_name("#010183") == "Navy"

    def test_lowercase_and_bare_hex(self):
        assert lookup_color_name("dc143c") == "Crimson"

    def test_tie_uses_first_entry(self):
        table = (("First", "#000000"), ("Second", "#000000"))
        assert lookup_color_name("#111111", table) == "First"

    def test_custom_table(self):
        table = (("Dark", "#000000"), ("Light", "#FFFFFF"))
        assert lookup_color_name("#EEEEEE", table) == "Light"
        assert lookup_color_name("#222222", table) == "Dark"

    def test_empty_table_fallback(self):
        assert lookup_color_name("#123456", ()) == FALLBACK_NAME

    def test_invalid_hex(self):
        with pytest.raises(InvalidColorError):
            lookup_color_name("#12345")

    def test_table_names_unique(self):
        names = [name for name, _ in NAMED_COLORS]
        assert len(names) == len(set(names))


class TestSimpleColorName:
    """Test common-language buckets"""

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FF0000", "Red"),
        ("#00FF00", "Green"),
        ("#0000FF", "Blue"),
        ("#000080", "Blue"),
        ("#FFFFFF", "White"),
        ("#000000", "Black"),
        ("#808080", "Gray"),
        ("#D3D3D3", "Light Gray"),
        ("#8B4513", "Brown"),
        ("#FFA500", "Orange"),
        ("#FFFF00", "Yellow"),
        ("#00FFFF", "Cyan"),
        ("#800080", "Magenta"),
        ("#FFC0CB", "Pink"),
    ])
    def test_buckets(self, hex_color, expected):
        assert simple_color_name(hex_color) == expected


class TestNameColors:
    """Test palette decoration"""

    def test_populates_names(self):
        palette = make_palette([("#000080", 70.0), ("#F5F5DC", 30.0)])
        named = name_colors(palette)

        assert [(s.name, s.simple_name) for s in named] == [("Navy", "Blue"), ("Beige", "White")]
        assert [s.percentage for s in named] == [70.0, 30.0]

    def test_original_palette_untouched(self):
        palette = make_palette([("#FF0000", 100.0)])
        name_colors(palette)
        assert palette[0].name is None

    def test_idempotent(self):
        palette = make_palette([("#DC143C", 55.5), ("#40E0D0", 30.0), ("#36454F", 14.5)])
        once = name_colors(palette)
        twice = name_colors(once)
        assert once == twice

    def test_simple_name_alias(self):
        named = name_colors(make_palette([("#FF0000", 100.0)]))
        dumped = named[0].model_dump(by_alias=True)
        assert dumped["simpleName"] == "Red"
