"""
SincDelayPE - variable delay line with sinc-interpolated delay changes.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

from __future__ import annotations

import math
from typing import Optional, Union

from sincdelay.conversions import seconds_to_samples
from sincdelay.errors import InvalidConfigurationError
from sincdelay.logger import get_logger
from sincdelay.processing_element import ProcessingElement
from sincdelay.sinc_interpolator import MultiTapSincInterpolator
from sincdelay.snippet import Snippet

logger = get_logger(__name__)

Param = Union[float, ProcessingElement]


class SincDelayPE(ProcessingElement):
    """
    A ProcessingElement that runs its source through a MultiTapSincInterpolator.

    The delay endpoints and the interpolation factor may each be a constant
    or a ProcessingElement sampled once per output sample (channel 0). The
    usual pattern keeps tau1 and tau2 constant for a glide and ramps alpha
    from 0 to 1 across the glide window with a RampPE.

    Delays are in samples. Control values are validated a block at a time
    before any of the block is processed: an out-of-range delay raises
    OutOfRangeError and an alpha outside [0, 1] raises
    InvalidConfigurationError from render(). A block that raises leaves
    the delay history and parameters untouched, so the same range can be
    rendered again once the control input is fixed.

    The element is stateful (not pure): render requests must be contiguous.
    reset_state() silences the delay history.

    Args:
        source: Mono input ProcessingElement
        tau1: Reference delay in samples (float or PE)
        tau2: Target delay in samples (float or PE)
        alpha: Interpolation factor in [0, 1] (float or PE, default 0.0)
        k: Auxiliary tap-pair count (default: 1)
        max_delay_samples: Delay line capacity in samples
        max_delay_seconds: Delay line capacity in seconds (alternative to
            max_delay_samples; default is one second when neither is given)

    Example:
        set_sample_rate(44100)
        line = SincDelayPE(
            source_stream,
            tau1=441.0,
            tau2=882.0,
            alpha=RampPE(0.0, 1.0, duration=4410, extend_mode=ExtendMode.HOLD_LAST),
            k=2,
        )
        snippet = line.render(0, 44100)
    """

    def __init__(
        self,
        source: ProcessingElement,
        tau1: Param,
        tau2: Param,
        alpha: Param = 0.0,
        *,
        k: int = 1,
        max_delay_samples: Optional[int] = None,
        max_delay_seconds: Optional[float] = None,
    ):
        channels = source.channel_count()
        if channels is not None and channels != 1:
            raise InvalidConfigurationError(
                f"SincDelayPE requires a mono source, got {channels} channels"
            )

        self._source = source
        self._tau1 = tau1
        self._tau2 = tau2
        self._alpha = alpha

        capacity = self._resolve_capacity(max_delay_samples, max_delay_seconds)

        # Scalars are validated here; PE values block by block. PE-driven
        # delays start at 0.0, which fits any capacity.
        initial = {
            "tau1": 0.0 if isinstance(tau1, ProcessingElement) else tau1,
            "tau2": 0.0 if isinstance(tau2, ProcessingElement) else tau2,
        }
        if not isinstance(alpha, ProcessingElement):
            initial["alpha"] = alpha
        self._line = MultiTapSincInterpolator(
            capacity, k, self.sample_rate, **initial
        )
        logger.debug("created %r", self)

    def _resolve_capacity(
        self,
        max_delay_samples: Optional[int],
        max_delay_seconds: Optional[float],
    ) -> int:
        if max_delay_samples is not None and max_delay_seconds is not None:
            raise InvalidConfigurationError(
                "specify either max_delay_samples or max_delay_seconds, not both "
                f"(got {max_delay_samples}, {max_delay_seconds})"
            )
        if max_delay_samples is not None:
            return max_delay_samples
        if max_delay_seconds is None:
            max_delay_seconds = 1.0
        seconds = float(max_delay_seconds)
        if not seconds > 0.0:
            raise InvalidConfigurationError(
                f"max_delay_seconds must be positive, got {max_delay_seconds}"
            )
        return int(math.ceil(float(seconds_to_samples(seconds, self.sample_rate))))

    @property
    def source(self) -> ProcessingElement:
        """The input ProcessingElement."""
        return self._source

    @property
    def tau1(self) -> Param:
        return self._tau1

    @property
    def tau2(self) -> Param:
        return self._tau2

    @property
    def alpha(self) -> Param:
        return self._alpha

    @property
    def k(self) -> int:
        return self._line.k

    @property
    def max_delay_samples(self) -> int:
        return self._line.capacity

    @property
    def interpolator(self) -> MultiTapSincInterpolator:
        """The delay line doing the per-sample work."""
        return self._line

    def inputs(self) -> list[ProcessingElement]:
        """Return input PEs (source and any parameter PEs)."""
        return [self._source] + [
            p for p in (self._tau1, self._tau2, self._alpha)
            if isinstance(p, ProcessingElement)
        ]

    def is_pure(self) -> bool:
        """SincDelayPE holds delay history and is not pure."""
        return False

    def channel_count(self) -> int:
        return 1

    def _reset_state(self) -> None:
        self._line.reset()

    def _has_control_inputs(self) -> bool:
        return len(self.inputs()) > 1

    def _render(self, start: int, duration: int) -> Snippet:
        """
        Render delayed audio.

        Args:
            start: Starting sample index
            duration: Number of samples to render (> 0)

        Returns:
            Mono Snippet of delayed audio
        """
        x = self._source.render(start, duration).mono()
        line = self._line

        if not self._has_control_inputs():
            return Snippet(start, line.process(x))

        tau1_values = self._scalar_or_pe_values(self._tau1, start, duration)
        tau2_values = self._scalar_or_pe_values(self._tau2, start, duration)
        alpha_values = self._scalar_or_pe_values(self._alpha, start, duration)

        return Snippet(
            start, line.process_controlled(x, tau1_values, tau2_values, alpha_values)
        )

    def __repr__(self) -> str:
        return (
            f"SincDelayPE(source={self._source.__class__.__name__}, "
            f"tau1={self._param_repr(self._tau1)}, "
            f"tau2={self._param_repr(self._tau2)}, "
            f"alpha={self._param_repr(self._alpha)}, "
            f"k={self.k}, max_delay_samples={self.max_delay_samples})"
        )
