"""
Window Renderer

Computes the visible window of a marquee for one frame, and the cursor for
the next one.

The window is cut from a "wrap buffer": the text joined with the separator
(appended when scrolling forward, prepended when scrolling in reverse) and
repeated twice, so a window that runs past the end of the text continues
into its start without modular splicing. Python strings index by code
point, so a multi-byte character is never split.
"""

from typing import NamedTuple


class Frame(NamedTuple):
    """Visible window for one tick and the cursor to use on the next."""
    window: str
    cursor: int


def build_wrap_buffer(text: str, separator: str, reverse: bool = False) -> str:
    if reverse:
        return (separator + text) * 2
    return (text + separator) * 2


def reset_cursor(text: str, width: int, reverse: bool = False) -> int:
    """
    Cursor to start a newly received text at.

    Forward scanning starts at 0. Reverse scanning starts near the tail of
    the doubled buffer, at len(text) * 2 - width (never below 0).
    """
    if not reverse:
        return 0
    return max(0, len(text) * 2 - width)


def advance_cursor(cursor: int, text: str, separator: str, reverse: bool = False) -> int:
    """
    Move the cursor one step.

    Forward wraps modulo len(text) + len(separator). Reverse decrements and
    jumps to the last index of the wrap buffer when it is at 0.
    """
    if reverse:
        if cursor == 0:
            return len(build_wrap_buffer(text, separator, reverse)) - 1
        return cursor - 1
    return (cursor + 1) % (len(text) + len(separator))


def render_window(text: str, separator: str, cursor: int, width: int,
                  reverse: bool = False, rotate: bool = True) -> Frame:
    """
    Render one frame.

    Args:
        text: The undecorated text to scroll
        separator: Gap inserted between repetitions of the text
        cursor: Offset into the wrap buffer where the window starts
        width: Window width in characters
        reverse: Scan right-to-left
        rotate: Advance the cursor (only relevant when the text overflows)

    Returns:
        Frame with the visible window and the next cursor
    """
    if len(text) <= width:
        return Frame(text, cursor)

    buffer = build_wrap_buffer(text, separator, reverse)
    window = buffer[cursor:cursor + width]

    if rotate:
        cursor = advance_cursor(cursor, text, separator, reverse)
    return Frame(window, cursor)


class WindowRenderer:
    """Window rendering bound to one width/separator/direction."""

    def __init__(self, width: int, separator: str = "    ", reverse: bool = False):
        self.width = width
        self.separator = separator
        self.reverse = reverse

    def reset(self, text: str) -> int:
        return reset_cursor(text, self.width, self.reverse)

    def render(self, text: str, cursor: int, rotate: bool = True) -> Frame:
        return render_window(text, self.separator, cursor, self.width,
                             reverse=self.reverse, rotate=rotate)
