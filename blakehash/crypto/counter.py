"""128-bit byte counter kept as two unsigned 64-bit words."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MASK64


@dataclass(slots=True)
class ByteCounter:
    """Count of bytes already fed to the compression function.

    Buffered bytes that have not been compressed yet are not included.
    """

    low: int = 0
    high: int = 0

    def increment(self, amount: int) -> None:
        """Add ``amount`` bytes, carrying into :attr:`high` when :attr:`low` wraps."""

        self.low = (self.low + amount) & MASK64
        if self.low < amount:
            self.high = (self.high + 1) & MASK64

    def reset(self) -> None:
        self.low = 0
        self.high = 0

    @property
    def value(self) -> int:
        """The full 128-bit count."""

        return (self.high << 64) | self.low
