"""
RampPE - a linear ramp, typically used to drive the interpolation factor.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import numpy as np

from sincdelay.array_pe import ArrayPE
from sincdelay.processing_element import ExtendMode


class RampPE(ArrayPE):
    """
    A SourcePE that moves linearly from start_value to end_value.

    The first sample (index 0) is exactly start_value and the last sample
    (index duration - 1) is exactly end_value. Behavior outside the ramp is
    controlled by extend_mode, as for ArrayPE.

    Ramping alpha from 0 to 1 across a window moves a SincDelayPE smoothly
    from tau1 to tau2.

    Args:
        start_value: Value at the beginning of the ramp
        end_value: Value at the end of the ramp
        duration: Length of the ramp in samples (>= 1)
        channels: Number of output channels (default: 1)
        extend_mode: Behavior outside the ramp range (default: ZERO)

    Example:
        # Glide from tau1 to tau2 over 50 ms, then stay there
        alpha_stream = RampPE(0.0, 1.0, duration=2205, extend_mode=ExtendMode.HOLD_LAST)
    """

    def __init__(
        self,
        start_value: float,
        end_value: float,
        duration: int,
        *,
        channels: int = 1,
        extend_mode: ExtendMode = ExtendMode.ZERO,
    ):
        self._start_value = float(start_value)
        self._end_value = float(end_value)
        duration = int(duration)
        if duration < 1:
            raise ValueError(f"RampPE duration must be >= 1, got {duration}")

        if duration == 1:
            ramp = np.array([self._start_value], dtype=np.float64)
        else:
            # computed by index so both endpoints are exact
            t = np.arange(duration, dtype=np.float64) / (duration - 1)
            ramp = self._start_value + (self._end_value - self._start_value) * t
            ramp[-1] = self._end_value
        super().__init__(np.repeat(ramp.reshape(-1, 1), int(channels), axis=1), extend_mode)

    @property
    def start_value(self) -> float:
        """Value at the beginning of the ramp."""
        return self._start_value

    @property
    def end_value(self) -> float:
        """Value at the end of the ramp."""
        return self._end_value

    @property
    def ramp_duration(self) -> int:
        """Length of the ramp in samples."""
        return len(self)

    def __repr__(self) -> str:
        parts = [
            f"start_value={self._start_value}",
            f"end_value={self._end_value}",
            f"duration={len(self)}",
            f"channels={self.channel_count()}",
        ]
        if self.extend_mode != ExtendMode.ZERO:
            parts.append(f"extend_mode={self.extend_mode.value}")
        return f"RampPE({', '.join(parts)})"
