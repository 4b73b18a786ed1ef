"""
Process-wide configuration for sincdelay.

Copyright (c) 2026 R. Dunbar Poor and sincdelay contributors

MIT License
"""

from typing import Optional

import numpy as np

from sincdelay.errors import InvalidConfigurationError
from sincdelay.logger import get_logger

logger = get_logger(__name__)


# Near-equality tolerance for the fixed/variable mode switch and for the
# removable singularity of sinc at zero.
DEFAULT_TOLERANCE: float = float(np.finfo(np.float64).eps) * 100.0

_tolerance: float = DEFAULT_TOLERANCE

# Global sample rate, required before any ProcessingElement is constructed.
_sample_rate: Optional[float] = None


def set_sample_rate(rate: Optional[float]) -> None:
    """
    Set the global sample rate in Hz.

    The sample rate is documentary: it labels delays in seconds for humans
    and sizes default delay lines, but never changes computed samples.

    Args:
        rate: Sample rate in Hz, or None to clear it

    Raises:
        InvalidConfigurationError: If rate is not positive
    """
    global _sample_rate
    if rate is not None:
        rate = float(rate)
        if not rate > 0.0:
            raise InvalidConfigurationError(
                f"sample_rate must be positive, got {rate}"
            )
    _sample_rate = rate
    logger.debug("global sample rate set to %s", rate)


def get_sample_rate() -> Optional[float]:
    """Return the global sample rate in Hz, or None if unset."""
    return _sample_rate


def set_tolerance(tolerance: float) -> None:
    """
    Set the tolerance used to detect coincident delays and sinc(0).

    Interpolators capture the tolerance when they are constructed, so
    changing it does not affect existing instances.

    Args:
        tolerance: Positive tolerance

    Raises:
        InvalidConfigurationError: If tolerance is not a positive finite number
    """
    global _tolerance
    tolerance = float(tolerance)
    if not (np.isfinite(tolerance) and tolerance > 0.0):
        raise InvalidConfigurationError(
            f"tolerance must be a positive finite number, got {tolerance}"
        )
    _tolerance = tolerance
    logger.debug("tolerance set to %g", tolerance)


def get_tolerance() -> float:
    """Return the current near-equality tolerance."""
    return _tolerance
