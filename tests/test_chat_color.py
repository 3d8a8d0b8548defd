"""
Tests for chat color codes.
"""

import pytest

from plugin_config.chat_color import (
    COLOR_CHAR,
    ChatColor,
    strip_color,
    to_ansi,
    translate_alternate_color_codes,
)


class TestChatColor:
    """Test the ChatColor enum."""

    @pytest.mark.unit
    def test_str(self):
        assert str(ChatColor.RED) == "§c"
        assert f"{ChatColor.GOLD}Gold" == "§6Gold"

    @pytest.mark.unit
    def test_get_by_char(self):
        assert ChatColor.get_by_char("a") is ChatColor.GREEN
        assert ChatColor.get_by_char("L") is ChatColor.BOLD
        assert ChatColor.get_by_char("z") is None

    @pytest.mark.unit
    def test_format_flags(self):
        assert ChatColor.BOLD.is_format
        assert not ChatColor.BOLD.is_color
        assert ChatColor.AQUA.is_color
        assert not ChatColor.RESET.is_color
        assert not ChatColor.RESET.is_format


class TestTranslateAlternateColorCodes:
    """Test '&' to '§' translation."""

    @pytest.mark.unit
    def test_translates_valid_codes(self):
        assert translate_alternate_color_codes("&", "&6Example &8> &r") == "§6Example §8> §r"

    @pytest.mark.unit
    def test_lowercases_codes(self):
        assert translate_alternate_color_codes("&", "&AGreen&L!") == "§aGreen§l!"

    @pytest.mark.unit
    def test_leaves_other_ampersands(self):
        assert translate_alternate_color_codes("&", "Salt & Pepper &z") == "Salt & Pepper &z"

    @pytest.mark.unit
    def test_trailing_alt_char(self):
        assert translate_alternate_color_codes("&", "Ends with &") == "Ends with &"

    @pytest.mark.unit
    def test_custom_alt_char(self):
        assert translate_alternate_color_codes("$", "$cRed &cNot") == "§cRed &cNot"

    @pytest.mark.unit
    def test_hex_marker(self):
        assert translate_alternate_color_codes("&", "&x") == COLOR_CHAR + "x"


class TestStripColor:
    """Test removing color codes."""

    @pytest.mark.unit
    def test_strip(self):
        assert strip_color("§6Example §8> §rHello") == "Example > Hello"

    @pytest.mark.unit
    def test_strip_uppercase_codes(self):
        assert strip_color("§AHi") == "Hi"

    @pytest.mark.unit
    def test_strip_none(self):
        assert strip_color(None) is None

    @pytest.mark.unit
    def test_untranslated_codes_kept(self):
        assert strip_color("&6Hello") == "&6Hello"


class TestToAnsi:
    """Test terminal rendering."""

    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        assert to_ansi("Hello") == "Hello"

    @pytest.mark.unit
    def test_colors_rendered_and_reset(self):
        rendered = to_ansi("§cError")

        assert COLOR_CHAR not in rendered
        assert rendered.startswith("\033[0;91m")
        assert rendered.endswith("Error\033[0m")
