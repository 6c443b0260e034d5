"""
Pytest configuration and fixtures for Marquee tests.

Provides a fake clock, an in-memory output sink and an engine factory.
"""

import io
import sys
from pathlib import Path
from typing import Optional

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from marquee.config import MarqueeConfig
from marquee.engine import MarqueeEngine
from marquee.output import OutputSink
from marquee.register import TextRegister


class FakeClock:
    """Monotonic clock that only moves when slept on or advanced."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def output_stream():
    return io.StringIO()


@pytest.fixture
def register():
    return TextRegister()


@pytest.fixture
def make_engine(register, output_stream, fake_clock):
    """Factory building an engine over the shared fixtures."""
    def _make(config: Optional[MarqueeConfig] = None, **overrides) -> MarqueeEngine:
        config = config or MarqueeConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        return MarqueeEngine(
            config,
            register,
            OutputSink(output_stream),
            clock=fake_clock,
            sleep=fake_clock.sleep
        )
    return _make
