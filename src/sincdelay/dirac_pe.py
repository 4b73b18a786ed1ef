"""
DiracPE - outputs a unit impulse (1.0 at sample 0, 0.0 elsewhere).

Copyright (c) 2026 R. Dunbar Poor and sincdelay contributors

MIT License
"""

import numpy as np

from sincdelay.processing_element import SourcePE
from sincdelay.snippet import Snippet


class DiracPE(SourcePE):
    """
    A SourcePE that outputs a unit impulse (Dirac delta in discrete time).
    
    Outputs 1.0 at sample index 0 and 0.0 everywhere else. Feeding it to a
    delay line renders the line's impulse response: each tap shows up as
    its gain at its delay.
    
    Args:
        channels: Number of output channels (default: 1)
    
    Example:
        impulse = DiracPE()
        line = SincDelayPE(impulse, tau1=10.0, tau2=14.0, alpha=0.5, k=1)
        response = line.render(0, 32)
    """
    
    def __init__(self, channels: int = 1):
        self._channels = int(channels)
    
    def _render(self, start: int, duration: int) -> Snippet:
        data = np.zeros((duration, self._channels), dtype=np.float64)
        
        if start <= 0 < start + duration:
            data[-start, :] = 1.0
        
        return Snippet(start, data)
    
    def channel_count(self) -> int:
        """Return the number of output channels."""
        return self._channels
    
    def __repr__(self) -> str:
        return f"DiracPE(channels={self._channels})"
