"""Pseudorandom number generators: a 48-bit LCG and a 32-bit Mersenne Twister."""

from __future__ import annotations

import math
import random
import time

from algolab.exceptions import IllegalArgumentError

_MASK32 = 0xFFFFFFFF
_MT_SIZE = 624


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_int64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


class Random48:
    """Uniform generator built on a 48-bit linear congruential recurrence."""

    _A = 25214903917
    _C = 11
    _MASK = (1 << 48) - 1

    def __init__(self, initial_value: int | None = None) -> None:
        if initial_value is None:
            initial_value = time.time_ns() // 1000
        self._state = initial_value & self._MASK

    def _next(self, bits: int) -> int:
        self._state = (self._A * self._state + self._C) & self._MASK
        return _to_int32(self._state >> (48 - bits))

    def next_int(self) -> int:
        """Return a signed 32-bit pseudorandom integer."""
        return self._next(32)

    def next_below(self, high: int) -> int:
        """Return a pseudorandom integer in [0, |high|)."""
        if high == 0:
            raise IllegalArgumentError("high must be non-zero")
        return abs(self.next_long()) % abs(high)

    def next_in_range(self, low: int, high: int) -> int:
        """Return a pseudorandom integer in the closed range [low, high]."""
        if low > high:
            raise IllegalArgumentError("low must not exceed high")
        return self.next_below(high - low + 1) + low

    def next_double(self) -> float:
        """Return a pseudorandom float in [0, 1)."""
        return ((self._next(26) << 27) + self._next(27)) / float(1 << 53)

    def next_long(self) -> int:
        """Return a signed 64-bit pseudorandom integer."""
        return _to_int64((self._next(32) << 32) + self._next(32))


def _mt19937_state(seed: int) -> list[int]:
    state = [seed & _MASK32]
    for i in range(1, _MT_SIZE):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    return state


class UniformRandom:
    """Uniform generator driven by the 32-bit Mersenne Twister."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(time.time())
        self._generator = random.Random()
        self._generator.setstate((3, tuple(_mt19937_state(seed)) + (_MT_SIZE,), None))

    def _raw(self) -> int:
        return self._generator.getrandbits(32)

    def next_int(self) -> int:
        """Return a signed 32-bit pseudorandom integer."""
        return _to_int32(self._raw())

    def next_below(self, high: int) -> int:
        """Return a pseudorandom integer in [0, high)."""
        return self.next_in_range(0, high - 1)

    def next_in_range(self, low: int, high: int) -> int:
        """Return a pseudorandom integer in the closed range [low, high]."""
        if low > high:
            raise IllegalArgumentError("low must not exceed high")
        span = high - low
        if span > _MASK32:
            raise IllegalArgumentError("range is wider than 32 bits")
        if span == _MASK32:
            return low + self._raw()
        buckets = span + 1
        scaling = _MASK32 // buckets
        past = buckets * scaling
        value = self._raw()
        while value >= past:
            value = self._raw()
        return low + value // scaling

    def next_double(self) -> float:
        """Return a pseudorandom float in [0, 1)."""
        low_word = self._raw()
        high_word = self._raw()
        result = (low_word + high_word * float(1 << 32)) / float(1 << 64)
        if result >= 1.0:
            result = math.nextafter(1.0, 0.0)
        return result