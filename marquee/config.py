"""
Marquee Configuration

Immutable settings for one marquee run: tick cadence, window width,
looping, decorations, scroll direction and output/input modes.
"""

import logging
from dataclasses import dataclass, asdict, replace
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "    "


@dataclass(frozen=True)
class MarqueeConfig:
    """Configuration for the marquee engine."""

    # Cadence
    delay_ms: int = 1000  # Milliseconds between frames

    # Window
    width: int = 20  # Animated characters, excluding prefix/suffix
    separator: str = DEFAULT_SEPARATOR
    reverse: bool = False
    loop: bool = True

    # Decorations
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    # Modes
    same_line: bool = False
    json: bool = False

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.delay_ms / 1000.0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'MarqueeConfig':
        """
        Create MarqueeConfig from a configuration dictionary.

        Args:
            config: Config dict (expects config['marquee'])

        Returns:
            MarqueeConfig instance
        """
        section = config.get('marquee', {})

        return cls(
            delay_ms=int(section.get('delay_ms', 1000)),
            width=int(section.get('width', 20)),
            separator=section.get('separator', DEFAULT_SEPARATOR),
            reverse=section.get('reverse', False),
            loop=section.get('loop', True),
            prefix=section.get('prefix'),
            suffix=section.get('suffix'),
            same_line=section.get('same_line', False),
            json=section.get('json', False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {'marquee': asdict(self)}

    def with_overrides(self, **overrides: Any) -> 'MarqueeConfig':
        """Return a copy with the given non-None fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if changes:
            logger.debug("Applying config overrides: %s", changes)
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.delay_ms < 0:
            errors.append(f"delay_ms must be >= 0, got {self.delay_ms}")
        if self.width < 1:
            errors.append(f"width must be >= 1, got {self.width}")
        if self.prefix is not None and not isinstance(self.prefix, str):
            errors.append(f"prefix must be a string, got {type(self.prefix).__name__}")
        if self.suffix is not None and not isinstance(self.suffix, str):
            errors.append(f"suffix must be a string, got {type(self.suffix).__name__}")
        if not isinstance(self.separator, str):
            errors.append(f"separator must be a string, got {type(self.separator).__name__}")
        for name in ('loop', 'reverse', 'same_line', 'json'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                errors.append(f"{name} must be a boolean, got {value!r}")

        return errors
