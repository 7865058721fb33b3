"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_HALF32 = 1 << 31
_MOD64 = 1 << 64


def _check_uint64(value: int, name: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")
    return value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around modulo 2**32.

    Used for TCP sequence and acknowledgment numbers.  Values outside the
    32-bit range are reduced modulo 2**32 on construction.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int):
            raise TypeError(
                f"raw_value must be an integer, not {type(self.raw_value).__name__}"
            )
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step ``other`` places past this value."""
        if isinstance(other, WrappingInt32) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __radd__(self, other: int) -> WrappingInt32:
        return self.__add__(other)

    def __sub__(self, other):
        """Offset to another WrappingInt32, or step back by an integer.

        With a WrappingInt32, the result is the signed 32-bit number of
        increments needed to get from ``other`` to ``self``; it is negative
        when the number of decrements needed is no larger than the number
        of increments.  With an integer, the result is the value ``other``
        places before this one.
        """
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_uint64(n, "n")
    return isn + n


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` closest to ``checkpoint``.

    Of two candidates equally close to ``checkpoint`` the smaller one is
    chosen.  The result is always a valid unsigned 64-bit number.
    """
    _check_uint64(checkpoint, "checkpoint")
    offset = (n.raw_value - isn.raw_value) & _MASK32
    base = (checkpoint & ~_MASK32) + offset
    candidates = (
        c for c in (base - _MOD32, base, base + _MOD32) if 0 <= c < _MOD64
    )
    return min(candidates, key=lambda c: (abs(c - checkpoint), c))