"""32-bit sequence numbers that wrap around relative to a zero point."""

from __future__ import annotations

from dataclasses import dataclass

_MODULUS = 1 << 32


@dataclass(frozen=True)
class Wrap32:
    """A 32-bit unsigned value that wraps back to zero after 2**32 - 1."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value % _MODULUS)

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return Wrap32(zero_point.raw_value + n)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self.raw_value - zero_point.raw_value) % _MODULUS
        base = (checkpoint // _MODULUS) * _MODULUS

        closest = base + offset
        lower = closest - _MODULUS if closest >= _MODULUS else closest
        upper = closest + _MODULUS
        for candidate in (lower, upper):
            if abs(checkpoint - candidate) < abs(checkpoint - closest):
                closest = candidate
        return closest

    def __add__(self, n: int) -> Wrap32:
        return Wrap32(self.raw_value + n)

    def __str__(self) -> str:
        return f"Wrap32<{self.raw_value}>"