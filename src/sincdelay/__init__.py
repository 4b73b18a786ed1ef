"""
sincdelay - a continuously variable delay line with sinc-interpolated taps.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

from sincdelay.errors import (
    SincDelayError,
    InvalidConfigurationError,
    OutOfRangeError,
)
from sincdelay.config import (
    DEFAULT_TOLERANCE,
    set_sample_rate,
    get_sample_rate,
    set_tolerance,
    get_tolerance,
)
from sincdelay.delay_buffer import DelayBuffer
from sincdelay.sinc_interpolator import (
    DelayParameters,
    MultiTapSincInterpolator,
    Tap,
    compute_taps,
    sinc,
    tap_gain,
    tap_position,
)
from sincdelay.snippet import Snippet
from sincdelay.processing_element import ProcessingElement, SourcePE, ExtendMode
from sincdelay.array_pe import ArrayPE
from sincdelay.constant_pe import ConstantPE
from sincdelay.dirac_pe import DiracPE
from sincdelay.ramp_pe import RampPE
from sincdelay.sinc_delay_pe import SincDelayPE
from sincdelay.conversions import (
    samples_to_seconds,
    seconds_to_samples,
    samples_to_ms,
    ms_to_samples,
)
from sincdelay.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Errors
    "SincDelayError",
    "InvalidConfigurationError",
    "OutOfRangeError",
    # Configuration
    "DEFAULT_TOLERANCE",
    "set_sample_rate",
    "get_sample_rate",
    "set_tolerance",
    "get_tolerance",
    # Core
    "DelayBuffer",
    "DelayParameters",
    "MultiTapSincInterpolator",
    "Tap",
    "compute_taps",
    "sinc",
    "tap_gain",
    "tap_position",
    # Block rendering
    "Snippet",
    "ProcessingElement",
    "SourcePE",
    "ExtendMode",
    "ArrayPE",
    "ConstantPE",
    "DiracPE",
    "RampPE",
    "SincDelayPE",
    # Conversions
    "samples_to_seconds",
    "seconds_to_samples",
    "samples_to_ms",
    "ms_to_samples",
    # Logging
    "set_global_logging",
    "get_logger",
]
