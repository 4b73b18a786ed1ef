"""
Exception types raised by sincdelay.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""


class SincDelayError(Exception):
    """Base class for all sincdelay errors."""


class InvalidConfigurationError(SincDelayError, ValueError):
    """
    A structural setting was rejected.

    Raised for a delay-line capacity too small to hold any delay target,
    a negative tap-pair count, an interpolation factor outside [0, 1],
    a non-positive sample rate or tolerance, or a multi-channel source.
    """


class OutOfRangeError(SincDelayError, ValueError):
    """A delay target does not leave room for interpolated readout."""
