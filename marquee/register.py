"""
Text Register

Single-slot holder for the most recently requested marquee text, shared
between the input feed (one writer) and the engine (one reader).

The lock is held only for a single assignment or a single read. Writes are
last-write-wins: a value overwritten before the engine reads it is lost.
"""

import threading
from typing import Optional

from marquee.exceptions import SynchronizationError
from marquee.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_LOCK_TIMEOUT = 5.0


class TextRegister:
    """Thread-safe latest-value cell for the marquee text."""

    def __init__(self, value: Optional[str] = None, lock_timeout: float = DEFAULT_LOCK_TIMEOUT):
        self._value: Optional[str] = value
        self._lock = threading.Lock()
        self.lock_timeout = lock_timeout

    def _acquire(self) -> None:
        if not self._lock.acquire(timeout=self.lock_timeout):
            raise SynchronizationError(
                "Could not acquire text register lock",
                timeout=self.lock_timeout
            )

    def set(self, value: Optional[str]) -> None:
        """Replace the held value. None or "" pauses the marquee."""
        self._acquire()
        try:
            self._value = value
        finally:
            self._lock.release()

    def read(self) -> Optional[str]:
        """Return a snapshot of the held value."""
        self._acquire()
        try:
            return self._value
        finally:
            self._lock.release()

    def clear_if(self, expected: Optional[str]) -> bool:
        """
        Clear the register only if it still holds `expected`.

        A newer value written since `expected` was read is kept.

        Returns:
            True if the register was cleared
        """
        self._acquire()
        try:
            if self._value != expected:
                return False
            self._value = None
        finally:
            self._lock.release()
        logger.debug("Text register cleared")
        return True
