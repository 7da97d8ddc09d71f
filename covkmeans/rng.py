"""The 64-bit Mersenne Twister and an unbiased bounded integer draw."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_N = 312
_M = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UPPER_MASK = 0xFFFFFFFF80000000
_LOWER_MASK = 0x7FFFFFFF
_INIT_MULTIPLIER = 6364136223846793005

DEFAULT_SEED = 5489


class Mt19937_64:
    """64-bit Mersenne Twister producing the standard mt19937_64 sequence."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK64]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULTIPLIER * (prev ^ (prev >> 62)) + i) & _MASK64)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def next(self) -> int:
        """Return the next 64-bit unsigned output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & _MASK64

    def uniform_int(self, low: int, high: int) -> int:
        """Draw an integer in ``[low, high]`` by multiply-and-shift rejection."""
        if low > high:
            raise ValueError(f"empty range: [{low}, {high}]")
        span = high - low
        if span > _MASK64:
            raise ValueError("range wider than 64 bits")
        if span == _MASK64:
            return self.next() + low
        size = span + 1
        product = self.next() * size
        low_bits = product & _MASK64
        if low_bits < size:
            threshold = ((1 << 64) - size) % size
            while low_bits < threshold:
                product = self.next() * size
                low_bits = product & _MASK64
        return (product >> 64) + low