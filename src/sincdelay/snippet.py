"""
Snippet class for containing a block of rendered samples.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray


class Snippet:
    """
    A thin wrapper around a numpy array of samples starting at a known index.
    
    Data layout: shape (samples, channels). Delay lines are mono, so most
    snippets have shape (N, 1); control signals and sources may carry more
    channels, of which only channel 0 is consumed.
    
    Samples are stored as float64 so that the delay line's fractional
    reads are not limited by single-precision rounding.
    """
    
    def __init__(self, start: int, data: NDArray[np.floating]):
        """
        Create a Snippet.
        
        Args:
            start: Starting sample index for this snippet
            data: Numpy array of shape (samples,) or (samples, channels)
        
        Raises:
            ValueError: If data is not 1D or 2D
        """
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        elif data.ndim != 2:
            raise ValueError(f"data must be 1D or 2D, got {data.ndim}D")
        
        if data.dtype != np.float64:
            data = data.astype(np.float64, copy=False)

        self._start = int(start)
        self._data = data
    
    @property
    def start(self) -> int:
        """Starting sample index of this snippet."""
        return self._start
    
    @property
    def end(self) -> int:
        """Ending sample index (exclusive) of this snippet."""
        return self._start + self._data.shape[0]
    
    @property
    def duration(self) -> int:
        """Number of samples in this snippet."""
        return self._data.shape[0]
    
    @property
    def channels(self) -> int:
        return self._data.shape[1]
    
    @property
    def data(self) -> NDArray[np.floating]:
        """
        The underlying numpy array of shape (samples, channels).
        
        Note: Returns the actual array, not a copy. Treat as immutable.
        """
        return self._data

    def mono(self) -> NDArray[np.floating]:
        """Channel 0 as a 1D array (a view, treat as immutable)."""
        return self._data[:, 0]
    
    @classmethod
    def from_zeros(cls, start: int, duration: int, channels: int = 1) -> Snippet:
        """Create a snippet filled with zeros (silence)."""
        return cls(start, np.zeros((duration, channels), dtype=np.float64))
    
    def __repr__(self) -> str:
        return (
            f"Snippet(start={self._start}, duration={self.duration}, "
            f"channels={self.channels})"
        )
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snippet):
            return NotImplemented
        return (
            self._start == other._start
            and self._data.shape == other._data.shape
            and np.allclose(self._data, other._data)
        )
