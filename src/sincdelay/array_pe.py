"""
ArrayPE - outputs samples from a numpy array.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike

from sincdelay.processing_element import ExtendMode, SourcePE
from sincdelay.snippet import Snippet


class ArrayPE(SourcePE):
    """
    A SourcePE that outputs values from a provided array, starting at index 0.
    
    This is useful for:
    - Feeding recorded or synthesized test signals into a delay line
    - Creating control signals (delay or alpha curves) from pre-computed tables
    
    Output behavior outside the array is controlled by extend_mode.
    
    Args:
        data: Sample data. Can be 1D (mono) or 2D (samples, channels).
        extend_mode: Behavior outside the array (default: ZERO)
                     - ZERO: Output zeros outside array
                     - HOLD_FIRST: Hold first array value before index 0
                     - HOLD_LAST: Hold last array value after the end
                     - HOLD_BOTH: Hold first before, last after
    
    Example:
        # Mono test signal
        signal_stream = ArrayPE([0.0, 0.5, 1.0, 0.5, 0.0])
        
        # Delay curve that stays at its final value
        tau_stream = ArrayPE(np.linspace(10.0, 20.0, 1000), extend_mode=ExtendMode.HOLD_LAST)
    """
    
    def __init__(self, data: ArrayLike, extend_mode: ExtendMode = ExtendMode.ZERO):
        table = np.asarray(data, dtype=np.float64)
        
        # Ensure 2D shape (samples, channels)
        if table.ndim == 1:
            table = table.reshape(-1, 1)
        elif table.ndim != 2:
            raise ValueError(f"{self.__class__.__name__} data must be 1D or 2D, got {table.ndim}D")
        
        if table.shape[0] == 0:
            raise ValueError(f"{self.__class__.__name__} data cannot be empty")
        
        self._data = table
        self._extend_mode = extend_mode
    
    @property
    def data(self) -> np.ndarray:
        """The underlying (samples, channels) array."""
        return self._data
    
    @property
    def extend_mode(self) -> ExtendMode:
        """Behavior for samples outside the array."""
        return self._extend_mode
    
    def __len__(self) -> int:
        return self._data.shape[0]
    
    def channel_count(self) -> int:
        return self._data.shape[1]
    
    def _render(self, start: int, duration: int) -> Snippet:
        """
        Copy the part of the array overlapping [start, start + duration).
        
        Args:
            start: Starting sample index
            duration: Number of samples to generate (> 0)
        
        Returns:
            Snippet with array data, extended outside the array per extend_mode
        """
        length = self._data.shape[0]
        req_end = start + duration
        out = np.zeros((duration, self._data.shape[1]), dtype=np.float64)
        
        overlap_start = max(0, start)
        overlap_end = min(length, req_end)
        if overlap_start < overlap_end:
            out[overlap_start - start:overlap_end - start] = self._data[overlap_start:overlap_end]
        
        if self._extend_mode in (ExtendMode.HOLD_FIRST, ExtendMode.HOLD_BOTH):
            if start < 0:
                out[:min(duration, -start), :] = self._data[0]
        
        if self._extend_mode in (ExtendMode.HOLD_LAST, ExtendMode.HOLD_BOTH):
            if req_end > length:
                after_start = max(0, length - start)
                out[after_start:, :] = self._data[-1]
        
        return Snippet(start, out)
    
    def __repr__(self) -> str:
        extend_str = f", extend_mode={self._extend_mode.value}" if self._extend_mode != ExtendMode.ZERO else ""
        return f"ArrayPE(shape={self._data.shape}{extend_str})"
