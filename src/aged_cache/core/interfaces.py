"""Core protocol definitions.

Defines the Clock protocol the cache uses to stamp and evaluate entry
expiry, so tests can swap in a controllable time source.
"""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Contract for any time source (system, manual, etc.)."""
    def millis(self) -> int:
        ...
