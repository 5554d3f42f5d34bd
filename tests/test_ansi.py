"""ANSI-aware width measurement and theme selection tests."""

from __future__ import annotations

import unittest

from weathersearch.ansi import clip_ansi_line, display_width, fit_ansi_line
from weathersearch.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class AnsiWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        self.assertEqual(display_width("\033[1;36mOslo\033[0m"), 4)

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(display_width("東京"), 4)

    def test_clip_preserves_escapes_and_drops_straddling_wide_char(self) -> None:
        self.assertEqual(clip_ansi_line("\033[31mab東c", 3), "\033[31mab")

    def test_fit_pads_to_exact_width(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 5), "ab   ")
        self.assertEqual(fit_ansi_line("abcdef", 3), "abc")


class ThemeSelectionTests(unittest.TestCase):
    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name("neon"), "default")
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertIs(resolve_theme("neon"), DEFAULT_THEME)

    def test_names_are_case_insensitive(self) -> None:
        self.assertIs(resolve_theme(" Ocean "), OCEAN_THEME)

    def test_no_color_forces_plain_palette(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_available_names(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean", "plain"))


if __name__ == "__main__":
    unittest.main()
