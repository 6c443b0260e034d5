"""
Output Sink

Terminal write primitives used by the engine: one frame per line, or
in-place overwrites of the current line.
"""

import sys
from typing import Optional, TextIO


class OutputSink:
    """Writes frames to a text stream, flushing after every write."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def overwrite_line(self, text: str) -> None:
        """Return to the start of the current line and write text over it."""
        self.stream.write("\r" + text)
        self.stream.flush()
