"""
Marquee Controller

Wires the input feed, text register, engine and output sink together and
owns the process lifecycle: the feed and the engine each run on their own
thread and only communicate through the register.
"""

import sys
import threading
from typing import Optional, TextIO

from marquee.config import MarqueeConfig
from marquee.engine import MarqueeEngine
from marquee.exceptions import MarqueeError
from marquee.input_feed import InputFeed
from marquee.logging_config import get_logger
from marquee.output import OutputSink
from marquee.register import TextRegister

logger = get_logger(__name__)


class MarqueeController:
    """Runs one marquee from an input stream to an output stream."""

    def __init__(
        self,
        config: MarqueeConfig,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        poll_interval: float = 0.1
    ):
        self.config = config
        self.register = TextRegister()
        self.sink = OutputSink(output_stream or sys.stdout)
        self.engine = MarqueeEngine(config, self.register, self.sink)
        self.feed = InputFeed(self.register, input_stream or sys.stdin)
        self.poll_interval = poll_interval
        self.stop_event = threading.Event()
        self._engine_error: Optional[MarqueeError] = None

    def _run_engine(self) -> None:
        try:
            self.engine.run(self.stop_event)
        except MarqueeError as e:
            self._engine_error = e
            logger.error("Marquee engine failed: %s", e)
        except Exception as e:
            self._engine_error = MarqueeError(
                "Marquee engine crashed",
                context={"error": f"{type(e).__name__}: {e}"}
            )
            self._engine_error.__cause__ = e
            logger.exception("Marquee engine crashed")

    def stop(self) -> None:
        """Cancel the engine at its next tick."""
        self.stop_event.set()

    def run(self) -> None:
        """
        Run until the engine stops.

        End of input does not stop the engine; in loop mode this returns only
        when stop() is called.

        Raises:
            MarqueeError: If the input feed or the engine failed fatally
        """
        engine_thread = threading.Thread(target=self._run_engine, name="marquee-engine", daemon=True)
        self.feed.start()
        engine_thread.start()

        try:
            while engine_thread.is_alive():
                engine_thread.join(self.poll_interval)
                if self.feed.error is not None:
                    self.stop()
                    engine_thread.join()
                    raise self.feed.error
        finally:
            self.stop()

        if self._engine_error is not None:
            raise self._engine_error

        logger.debug("Marquee finished: %s", self.engine.get_status())
