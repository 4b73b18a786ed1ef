"""
ConstantPE - a source that outputs a constant value.

Copyright (c) 2026 R. Dunbar Poor and sincdelay contributors

MIT License
"""

import numpy as np

from sincdelay.processing_element import SourcePE
from sincdelay.snippet import Snippet


class ConstantPE(SourcePE):
    """
    A SourcePE that outputs a constant value forever.
    
    Useful as a DC test input, or as a fixed control signal where a
    parameter expects a ProcessingElement.
    
    Args:
        value: The constant value to output
        channels: Number of output channels (default: 1)
    """
    
    def __init__(self, value: float, channels: int = 1):
        self._value = float(value)
        self._channels = int(channels)
    
    @property
    def value(self) -> float:
        return self._value
    
    def _render(self, start: int, duration: int) -> Snippet:
        data = np.full((duration, self._channels), self._value, dtype=np.float64)
        return Snippet(start, data)
    
    def channel_count(self) -> int:
        return self._channels
    
    def __repr__(self) -> str:
        return f"ConstantPE(value={self._value}, channels={self._channels})"
