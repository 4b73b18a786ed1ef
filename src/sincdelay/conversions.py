"""
Time unit conversions.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike


def samples_to_seconds(samples: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert sample count to seconds.
    
    Args:
        samples: Number of samples (may be fractional)
        sample_rate: Sample rate in Hz
    
    Returns:
        Duration in seconds
    
    Example:
        >>> samples_to_seconds(44100, 44100)
        1.0
        >>> samples_to_seconds(22050, 44100)
        0.5
    """
    samples = np.asarray(samples, dtype=np.float64)
    return samples / sample_rate


def seconds_to_samples(seconds: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert seconds to sample count.
    
    Args:
        seconds: Duration in seconds
        sample_rate: Sample rate in Hz
    
    Returns:
        Number of samples (float, caller may want to round)
    """
    seconds = np.asarray(seconds, dtype=np.float64)
    return seconds * sample_rate


def samples_to_ms(samples: ArrayLike, sample_rate: float) -> np.ndarray:
    """Convert a (fractional) sample count to milliseconds."""
    return samples_to_seconds(samples, sample_rate) * 1000.0


def ms_to_samples(ms: ArrayLike, sample_rate: float) -> np.ndarray:
    """Convert milliseconds to a (fractional) sample count."""
    return seconds_to_samples(np.asarray(ms, dtype=np.float64) / 1000.0, sample_rate)
