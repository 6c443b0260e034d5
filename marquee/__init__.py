"""
Marquee - scroll the latest line of standard input.

Components:
- TextRegister: latest-value cell shared by the input feed and the engine
- PayloadDecoder: structured (JSON) input decoding
- WindowRenderer: visible window and cursor computation
- MarqueeEngine: periodic tick loop that emits frames
- MarqueeConfig: configuration
"""

__version__ = "0.4.0"

from marquee.config import MarqueeConfig
from marquee.engine import MarqueeEngine, EngineState
from marquee.payload import Payload, PayloadDecoder
from marquee.register import TextRegister
from marquee.window import WindowRenderer, render_window

__all__ = [
    'MarqueeConfig',
    'MarqueeEngine',
    'EngineState',
    'Payload',
    'PayloadDecoder',
    'TextRegister',
    'WindowRenderer',
    'render_window',
]
