"""
Tests for the window renderer.

Covers short texts, forward/reverse scanning, cursor reset and Unicode
safety.
"""

import pytest

from marquee.window import (
    Frame,
    WindowRenderer,
    advance_cursor,
    build_wrap_buffer,
    render_window,
    reset_cursor,
)


class TestWrapBuffer:
    """Test wrap buffer construction."""

    def test_forward_appends_separator(self):
        assert build_wrap_buffer("abc", "--") == "abc--abc--"

    def test_reverse_prepends_separator(self):
        assert build_wrap_buffer("abc", "--", reverse=True) == "--abc--abc"


class TestShortText:
    """Texts that fit the window are not animated."""

    @pytest.mark.parametrize("text", ["", "a", "hello", "exactly twenty chars"])
    def test_text_unchanged(self, text):
        frame = render_window(text, "    ", 0, 20)
        assert frame == Frame(text, 0)

    def test_cursor_not_advanced(self):
        frame = render_window("hello", "    ", 3, 20, reverse=True)
        assert frame.cursor == 3


class TestForwardScan:
    """Test forward scanning."""

    def test_first_window(self):
        frame = render_window("abcdef", "--", 0, 4)
        assert frame.window == "abcd"
        assert frame.cursor == 1

    def test_window_crosses_separator(self):
        frame = render_window("abcdef", "--", 5, 4)
        assert frame.window == "f--a"
        assert frame.cursor == 6

    def test_cursor_wraps(self):
        frame = render_window("abcdef", "--", 7, 4)
        assert frame.window == "-abc"
        assert frame.cursor == 0

    def test_full_cycle_reconstructs_buffer(self):
        text, separator, width = "the quick brown fox", " | ", 7
        period = len(text) + len(separator)
        cursor = 0
        leading = []
        for _ in range(period):
            window, cursor = render_window(text, separator, cursor, width)
            assert len(window) == width
            leading.append(window[0])
        assert "".join(leading) == text + separator
        assert cursor == 0

    def test_rotate_disabled_freezes_cursor(self):
        frame = render_window("abcdef", "--", 2, 4, rotate=False)
        assert frame.window == "cdef"
        assert frame.cursor == 2


class TestReverseScan:
    """Test reverse scanning."""

    def test_reset_position(self):
        assert reset_cursor("abcdef", 4, reverse=True) == 8

    def test_reset_never_negative(self):
        assert reset_cursor("ab", 10, reverse=True) == 0

    def test_first_window_after_reset(self):
        frame = render_window("abcdef", "--", 8, 4, reverse=True)
        assert frame.window == "--ab"
        assert frame.cursor == 7

    def test_moves_right_to_left(self):
        frame = render_window("abcdef", "--", 7, 4, reverse=True)
        assert frame.window == "f--a"
        assert frame.cursor == 6

    def test_wraps_to_end_of_buffer(self):
        frame = render_window("abcdef", "--", 0, 4, reverse=True)
        assert frame.window == "--ab"
        assert frame.cursor == 15

    def test_window_at_buffer_end_is_truncated(self):
        frame = render_window("abcdef", "--", 15, 4, reverse=True)
        assert frame.window == "f"


class TestCursorHelpers:
    """Test reset/advance helpers."""

    def test_forward_reset_is_zero(self):
        assert reset_cursor("abcdef", 4) == 0

    def test_forward_advance_modulo(self):
        assert advance_cursor(3, "abc", "-") == 0

    def test_reverse_advance_from_zero(self):
        assert advance_cursor(0, "abc", "-", reverse=True) == 7


class TestUnicode:
    """Windows are cut on character boundaries."""

    def test_multibyte_characters_not_split(self):
        frame = render_window("héllo wörld ✓", "  ", 0, 5)
        assert frame.window == "héllo"

    def test_window_counts_characters_not_bytes(self):
        text = "日本語のテキストです"
        frame = render_window(text, "・", 8, 4)
        assert frame.window == "です・日"
        assert len(frame.window) == 4

    def test_emoji_text_within_width(self):
        frame = render_window("🎉🎉🎉", "  ", 0, 3)
        assert frame == Frame("🎉🎉🎉", 0)


class TestWindowRenderer:
    """Test the bound renderer."""

    def test_render_uses_settings(self):
        renderer = WindowRenderer(width=3, separator="..", reverse=False)
        assert renderer.render("abcd", 0) == Frame("abc", 1)

    def test_reset_uses_direction(self):
        renderer = WindowRenderer(width=3, separator="..", reverse=True)
        assert renderer.reset("abcd") == 5
