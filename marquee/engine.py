"""
Marquee Engine

The periodic driver of the marquee. Once per tick it samples the text
register, optionally decodes a structured payload, renders the visible
window, decorates it and writes the frame to the output sink.

States:
- IDLE: the register is empty, nothing is emitted
- RENDERING: a value is being scrolled
- STOPPED: the non-loop termination condition was met (terminal)
"""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from marquee.config import MarqueeConfig
from marquee.exceptions import DecodeError
from marquee.logging_config import get_logger, log_with_context
from marquee.output import OutputSink
from marquee.payload import Payload, PayloadDecoder
from marquee.register import TextRegister
from marquee.window import WindowRenderer

logger = get_logger(__name__)


class EngineState(Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    STOPPED = "stopped"


@dataclass
class AnimationState:
    """Animation state owned by the engine."""
    cursor: int = 0
    previous_text: Optional[str] = None  # Undecorated text of the last rendered tick
    previous_frame: str = ""  # Last frame written in same-line mode


class MarqueeEngine:
    """
    Tick loop that turns the latest register value into marquee frames.

    The register lock is only held for the snapshot read; decoding,
    rendering, output and sleeping all happen outside it.
    """

    def __init__(
        self,
        config: MarqueeConfig,
        register: TextRegister,
        sink: Optional[OutputSink] = None,
        decoder: Optional[PayloadDecoder] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the engine.

        Args:
            config: Marquee configuration
            register: Shared register written by the input feed
            sink: Output sink (defaults to stdout)
            decoder: Payload decoder used in JSON mode
            clock: Monotonic clock in seconds
            sleep: Sleep function used between ticks
        """
        self.config = config
        self.register = register
        self.sink = sink or OutputSink()
        self.decoder = decoder or PayloadDecoder()
        self.renderer = WindowRenderer(config.width, config.separator, config.reverse)
        self._clock = clock
        self._sleep = sleep

        self.state = EngineState.IDLE
        self.animation = AnimationState()

        self.stats = {
            'ticks': 0,
            'frames_emitted': 0,
            'idle_ticks': 0,
            'decode_errors': 0,
            'overruns': 0,
        }

        logger.debug(
            "MarqueeEngine initialized: width=%d, interval=%.3fs, loop=%s, reverse=%s, json=%s",
            config.width, config.tick_interval, config.loop, config.reverse, config.json
        )

    @property
    def is_stopped(self) -> bool:
        return self.state is EngineState.STOPPED

    def _decode(self, raw: str) -> Optional[Payload]:
        try:
            return self.decoder.decode(raw)
        except DecodeError as e:
            self.stats['decode_errors'] += 1
            log_with_context(
                logger, logging.ERROR,
                e.message,
                context={'cause': e.cause, 'raw': raw}
            )
            # Wait for a new value instead of retrying the same one every tick
            self.register.clear_if(raw)
            return None

    def decorate(self, window: str, payload: Optional[Payload] = None) -> str:
        """
        Apply prefixes and suffixes to a rendered window.

        The static prefix is prepended first and the payload prefix in front
        of it; the payload suffix is appended first and the static suffix
        after it.
        """
        out = window
        if self.config.prefix is not None:
            out = self.config.prefix + out
        if payload is not None:
            out = payload.prefix + out
            out = out + payload.suffix
        if self.config.suffix is not None:
            out = out + self.config.suffix
        return out

    def _reached_end(self, text: str) -> bool:
        # Stops once the window has passed the end of one full pass
        return self.animation.cursor + self.config.width == len(text) + 2

    def _emit(self, frame: str) -> None:
        if self.config.same_line:
            padding = " " * max(0, len(self.animation.previous_frame) - len(frame))
            self.sink.overwrite_line(frame + padding)
            self.animation.previous_frame = frame
        else:
            self.sink.write_line(frame)
        self.stats['frames_emitted'] += 1

    def tick(self) -> Optional[str]:
        """
        Run one tick without sleeping.

        Returns:
            The emitted frame, or None if nothing was emitted
        """
        if self.is_stopped:
            return None

        self.stats['ticks'] += 1
        raw = self.register.read()
        if not raw:
            self.state = EngineState.IDLE
            self.stats['idle_ticks'] += 1
            return None

        payload = None
        text = raw
        if self.config.json:
            payload = self._decode(raw)
            if payload is None:
                return None
            text = payload.content

        self.state = EngineState.RENDERING
        animation = self.animation
        if text != animation.previous_text:
            animation.cursor = self.renderer.reset(text)
            logger.debug("New text (%d chars), cursor reset to %d", len(text), animation.cursor)
        animation.previous_text = text

        rotate = payload.rotate if payload is not None else True
        window, animation.cursor = self.renderer.render(text, animation.cursor, rotate)
        frame = self.decorate(window, payload)

        if not self.config.loop and self._reached_end(text):
            self.state = EngineState.STOPPED
            logger.debug("Non-loop pass complete at cursor %d", animation.cursor)
            return None

        self._emit(frame)
        return frame

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """
        Run the tick loop until the engine stops.

        Args:
            stop_event: Optional cancellation token checked at the top of each
                tick. Without one, loop mode runs until the process is killed.
        """
        interval = self.config.tick_interval
        logger.info("Marquee engine started")

        while not self.is_stopped:
            if stop_event is not None and stop_event.is_set():
                logger.info("Marquee engine cancelled")
                break

            start = self._clock()
            self.tick()
            if self.is_stopped:
                break

            remaining = interval - (self._clock() - start)
            if remaining > 0:
                if stop_event is not None:
                    stop_event.wait(remaining)
                else:
                    self._sleep(remaining)
            elif remaining < 0:
                self.stats['overruns'] += 1

        logger.info("Marquee engine finished: %s", self.stats)

    def get_status(self) -> Dict[str, Any]:
        """Get current engine state information."""
        return {
            'state': self.state.value,
            'cursor': self.animation.cursor,
            'previous_text_length': len(self.animation.previous_text or ""),
            'stats': dict(self.stats),
        }
