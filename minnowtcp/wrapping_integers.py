"""32-bit wrapping sequence numbers relative to an arbitrary zero point."""

from __future__ import annotations

_MODULUS = 1 << 32
_MASK = _MODULUS - 1


class Wrap32:
    """A 32-bit unsigned integer that wraps to zero after 2**32 - 1."""

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        if not 0 <= raw_value <= _MASK:
            raise ValueError(f"Wrap32 raw value out of range: {raw_value}")
        self._raw = raw_value

    @property
    def raw_value(self) -> int:
        """The underlying 32-bit value."""
        return self._raw

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Convert the absolute sequence number ``n`` to a wrapped one."""
        return cls((n + zero_point._raw) & _MASK)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self._raw - zero_point._raw) & _MASK
        era = checkpoint >> 32
        current = (era << 32) + offset
        candidates = [current, current + _MODULUS]
        if era > 0:
            candidates.append(current - _MODULUS)
        # min() keeps the first of equally close candidates: current, next, previous.
        return min(candidates, key=lambda candidate: abs(candidate - checkpoint))

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32((self._raw + n) & _MASK)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"

    def __str__(self) -> str:
        return f"Wrap32<{self._raw}>"