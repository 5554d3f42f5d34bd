"""Frame composition tests: geometry, pane content, and cursor drawing."""

from __future__ import annotations

import unittest
from dataclasses import replace

from weathersearch.ansi import display_width, strip_ansi
from weathersearch.render import RenderContext, build_frame, render_context_for
from weathersearch.render.panes import draw_box, prompt_line
from weathersearch.history import HistoryEntry, HistoryRing
from weathersearch.state import AppState, Focus, Mode, Phase
from weathersearch.ui_theme import DEFAULT_THEME, PLAIN_THEME
from weathersearch.weather.models import CurrentConditions, Location, Units, WeatherReport

PARIS = Location("Paris", 48.85, 2.35, "France", "Île-de-France")


def _context(**overrides) -> RenderContext:
    base = RenderContext(
        width=80,
        height=24,
        phase=Phase.INPUT,
        mode=Mode.NORMAL,
        focus=Focus.SEARCH,
        buffer_text="",
        cursor=0,
        theme=PLAIN_THEME,
    )
    return replace(base, **overrides)


def _text(rows: list[str]) -> str:
    return "\n".join(strip_ansi(row) for row in rows)


class FrameGeometryTests(unittest.TestCase):
    def test_frame_fills_exact_height_and_width(self) -> None:
        for width, height in ((80, 24), (120, 40), (33, 9), (10, 4), (5, 2)):
            with self.subTest(width=width, height=height):
                rows = build_frame(_context(width=width, height=height, theme=DEFAULT_THEME))
                self.assertEqual(len(rows), height)
                for row in rows:
                    self.assertEqual(display_width(row), width)

    def test_zero_sized_terminal_renders_nothing(self) -> None:
        self.assertEqual(build_frame(_context(width=0, height=0)), [])

    def test_wide_characters_do_not_overflow_row(self) -> None:
        rows = build_frame(_context(mode=Mode.INSERT, buffer_text="東京" * 40, cursor=80))
        for row in rows:
            self.assertEqual(display_width(row), 80)

    def test_draw_box_borders(self) -> None:
        rows = draw_box(["hi"], 6, 3, title="T", theme=PLAIN_THEME)
        self.assertEqual(rows, ["┌T───┐", "│hi  │", "└────┘"])


class FrameContentTests(unittest.TestCase):
    def test_header_and_footer_follow_mode(self) -> None:
        normal = _text(build_frame(_context()))
        self.assertIn("Weather TUI Search -- NORMAL --", normal)
        self.assertIn("NORMAL: i=insert", normal)

        insert = _text(build_frame(_context(mode=Mode.INSERT)))
        self.assertIn("Weather TUI Search -- INSERT --", insert)
        self.assertIn("Search City (Mode: INSERT)", insert)

    def test_visible_suggestions_are_listed(self) -> None:
        frame = _text(
            build_frame(
                _context(
                    mode=Mode.INSERT,
                    buffer_text="par",
                    cursor=3,
                    suggestions=(PARIS,),
                    suggestions_visible=True,
                )
            )
        )
        self.assertIn("Suggestions", frame)
        self.assertIn("Paris, Île-de-France (France)", frame)

    def test_hidden_suggestions_are_not_listed(self) -> None:
        frame = _text(build_frame(_context(buffer_text="par", suggestions=(PARIS,))))
        self.assertNotIn("Île-de-France", frame)

    def test_loading_error_and_display_panes(self) -> None:
        self.assertIn("Loading weather data...", _text(build_frame(_context(phase=Phase.LOADING))))

        error = _text(build_frame(_context(phase=Phase.ERROR, error_message="'Atlantis' not found.")))
        self.assertIn("Error (Press 'i' to try again)", error)
        self.assertIn("'Atlantis' not found.", error)

        report = WeatherReport(
            location=PARIS,
            current=CurrentConditions(18.46, 60, 17.9, 0.0, 3, 11.24, 1013.25),
            units=Units(temperature="°C", wind_speed="km/h", pressure="hPa"),
        )
        display = _text(build_frame(_context(phase=Phase.DISPLAY, weather=report)))
        self.assertIn("Condition: Overcast", display)
        self.assertIn("Temperature: 18.5°C", display)
        self.assertIn("Humidity: 60%", display)
        self.assertIn("Wind Speed: 11.2 km/h", display)

    def test_history_highlight_only_when_focused(self) -> None:
        history = ("London", "Oslo")
        focused = build_frame(
            _context(theme=DEFAULT_THEME, focus=Focus.HISTORY, history=history, history_selected=1)
        )
        unfocused = build_frame(_context(theme=DEFAULT_THEME, history=history, history_selected=1))
        marker = DEFAULT_THEME.selected_row + "Oslo"
        self.assertTrue(any(marker in row for row in focused))
        self.assertFalse(any(marker in row for row in unfocused))

    def test_context_snapshot_from_state(self) -> None:
        state = AppState(history=HistoryRing([HistoryEntry("Rome", 1)]))
        state.buffer.set_text("Paris")
        context = render_context_for(state, 100, 30)
        self.assertEqual(context.buffer_text, "Paris")
        self.assertEqual(context.cursor, 5)
        self.assertEqual(context.history, ("Rome",))
        self.assertEqual((context.width, context.height), (100, 30))


class PromptLineTests(unittest.TestCase):
    def test_normal_mode_brackets_character_under_cursor(self) -> None:
        self.assertEqual(prompt_line("paris", 2, Mode.NORMAL, 40), "pa[r]is")

    def test_normal_mode_at_end_draws_block(self) -> None:
        self.assertEqual(prompt_line("paris", 5, Mode.NORMAL, 40), "paris█")

    def test_insert_mode_draws_block_at_cursor(self) -> None:
        self.assertEqual(prompt_line("paris", 2, Mode.INSERT, 40), "pa█ris")

    def test_leading_text_scrolls_to_keep_cursor_visible(self) -> None:
        line = prompt_line("abcdefghij", 10, Mode.INSERT, 4)
        self.assertTrue(line.startswith("hij█"))


if __name__ == "__main__":
    unittest.main()
