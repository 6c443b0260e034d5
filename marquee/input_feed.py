"""
Input Feed

Reads discrete text values from a stream, one per line, and writes each
into the text register. End of input is not signalled to the engine: in
loop mode the last value keeps scrolling.
"""

import sys
import threading
from typing import Optional, TextIO

from marquee.exceptions import InputSourceError, MarqueeError
from marquee.logging_config import get_logger
from marquee.register import TextRegister

logger = get_logger(__name__)


class InputFeed:
    """Producer side of the marquee."""

    def __init__(self, register: TextRegister, stream: Optional[TextIO] = None):
        """
        Initialize the input feed.

        Args:
            register: Register that receives each line
            stream: Text stream to read (defaults to stdin)
        """
        self.register = register
        self.stream = stream or sys.stdin
        self.lines_read = 0
        self.error: Optional[MarqueeError] = None
        self.finished = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def run(self) -> None:
        """
        Read lines until end of input.

        Raises:
            InputSourceError: If reading the stream fails
        """
        try:
            for line in self.stream:
                value = line.rstrip("\r\n")
                self.register.set(value)
                self.lines_read += 1
                logger.debug("Read input line %d (%d chars)", self.lines_read, len(value))
        except (OSError, UnicodeDecodeError) as e:
            raise InputSourceError(
                f"Failed while reading input: {e}",
                context={'lines_read': self.lines_read}
            ) from e

        logger.debug("Input closed after %d lines", self.lines_read)

    def _run_thread(self) -> None:
        try:
            self.run()
        except MarqueeError as e:
            self.error = e
            logger.error("Input feed stopped: %s", e)
        finally:
            self.finished.set()

    def start(self) -> threading.Thread:
        """Run the feed on a daemon thread."""
        self._thread = threading.Thread(target=self._run_thread, name="marquee-input", daemon=True)
        self._thread.start()
        return self._thread
