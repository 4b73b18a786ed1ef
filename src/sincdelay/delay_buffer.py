"""
DelayBuffer - circular sample store with fractional readout.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

from __future__ import annotations

import math

import numpy as np

from sincdelay.errors import InvalidConfigurationError


class DelayBuffer:
    """
    Fixed-capacity circular buffer of past samples.

    Samples are written sequentially; each write stores at the cursor and
    advances it by one position, wrapping at capacity. Reads address the
    past by lag relative to the most recently written sample, so lag 0
    returns the last sample written, lag 1 the one before it, and so on.
    Fractional lags are linearly interpolated between neighbouring samples.

    Reads beyond capacity - 1 wrap around into the oldest (or not yet
    written) storage. Callers keep lags inside [0, capacity - 1) to get
    meaningful history.

    Args:
        capacity: Number of samples held (at least 2)

    Example:
        buf = DelayBuffer(8)
        for x in (1.0, 2.0, 3.0):
            buf.write(x)
        buf.read_interpolated(0.0)   # 3.0
        buf.read_interpolated(1.5)   # 1.5, halfway between 2.0 and 1.0
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or int(capacity) != capacity:
            raise InvalidConfigurationError(
                f"capacity must be an integer, got {capacity!r}"
            )
        capacity = int(capacity)
        if capacity == 0:
            raise InvalidConfigurationError("capacity must be greater than 0")
        if capacity < 2:
            # [0, capacity - 1) would be empty: no delay target fits
            raise InvalidConfigurationError(
                f"capacity must be at least 2 samples, got {capacity}"
            )
        self._capacity = capacity
        self._buffer = np.zeros(capacity, dtype=np.float64)
        self._cursor = 0

    @property
    def capacity(self) -> int:
        """Number of samples the buffer holds."""
        return self._capacity

    @property
    def cursor(self) -> int:
        """Index the next write will store into."""
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        value = int(value)
        if not 0 <= value < self._capacity:
            raise ValueError(
                f"cursor must be in [0, {self._capacity}), got {value}"
            )
        self._cursor = value

    @property
    def storage(self) -> np.ndarray:
        """The backing float64 array. Block kernels write it in place."""
        return self._buffer

    def __len__(self) -> int:
        return self._capacity

    def write(self, sample: float) -> None:
        """Store one sample, overwriting the oldest, and advance the cursor."""
        self._buffer[self._cursor] = sample
        self._cursor += 1
        if self._cursor >= self._capacity:
            self._cursor = 0

    def read_interpolated(self, lag: float) -> float:
        """
        Read the sample `lag` samples before the most recent write.

        Args:
            lag: Delay in (fractional) samples, 0 is the last written sample

        Returns:
            Linearly interpolated sample value
        """
        capacity = self._capacity
        # Python's float modulo is floored, so negative positions land in
        # [0, capacity). A tiny negative can round up to capacity itself.
        idx = (self._cursor - 1 - lag) % capacity
        if idx >= capacity:
            idx = 0.0
        i0 = math.floor(idx)
        frac = idx - i0
        i1 = i0 + 1
        if i1 >= capacity:
            i1 = 0
        buf = self._buffer
        return float(buf[i0] * (1.0 - frac) + buf[i1] * frac)

    def reset(self) -> None:
        """Silence the stored history and rewind the cursor."""
        self._buffer.fill(0.0)
        self._cursor = 0

    def __repr__(self) -> str:
        return f"DelayBuffer(capacity={self._capacity}, cursor={self._cursor})"
