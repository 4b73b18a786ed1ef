"""
ProcessingElement and SourcePE abstract base classes.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np

from sincdelay.config import get_sample_rate
from sincdelay.snippet import Snippet


class ExtendMode(Enum):
    """Behavior of a finite source outside its defined range."""
    ZERO = "zero"           # Output zeros (default)
    HOLD_FIRST = "hold_first"  # Hold first value before the range
    HOLD_LAST = "hold_last"    # Hold last value after the range
    HOLD_BOTH = "hold_both"    # Hold first before, last after


class ProcessingElement(ABC):
    """
    Abstract base class for block-rendering signal elements.

    A ProcessingElement generates samples on demand via render(start,
    duration). Elements form a directed acyclic graph:
    - Sources (SourcePE subclasses) have no inputs
    - Processors have one or more input ProcessingElements

    render() always returns a Snippet of exactly the requested size.

    The global sample rate (sincdelay.set_sample_rate) must be set before
    any element is constructed; it is stamped onto each element.
    """

    _sample_rate: Optional[float] = None

    # For impure PEs: end of last render request; used to enforce contiguous requests
    _last_rendered_end: Optional[int] = None

    def __new__(cls, *args, **kwargs):
        """
        Enforce the global sample rate requirement before any PE is constructed.

        This runs even when subclasses override __init__ (no super().__init__ needed).
        """
        sample_rate = get_sample_rate()
        if sample_rate is None:
            raise RuntimeError(
                "Global sample_rate is required but not set. "
                "Call sincdelay.set_sample_rate(rate) before constructing PEs."
            )
        obj = super().__new__(cls)
        obj._sample_rate = sample_rate
        return obj

    @property
    def sample_rate(self) -> Optional[float]:
        """The sample rate in Hz this element was constructed under."""
        return self._sample_rate

    def render(self, start: int, duration: int) -> Snippet:
        """
        Generate samples for the given range.

        Args:
            start: Starting sample index
            duration: Number of samples to generate (must be >= 0)

        Returns:
            Snippet containing exactly `duration` samples

        Raises:
            ValueError: If duration is negative, or if this element is
                stateful and the request does not continue the previous one
        """
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")

        if duration == 0:
            channels = self.channel_count() or 1
            return Snippet.from_zeros(start, 0, int(channels))

        # Impure PEs require contiguous requests (state precludes arbitrary render times)
        if not self.is_pure():
            if self._last_rendered_end is not None and start != self._last_rendered_end:
                raise ValueError(
                    f"{self.__class__.__name__} is not pure; render requests must be contiguous. "
                    f"Expected start={self._last_rendered_end}, got start={start}."
                )

        result = self._render(start, duration)

        if not self.is_pure():
            self._last_rendered_end = start + duration

        return result

    @abstractmethod
    def _render(self, start: int, duration: int) -> Snippet:
        """
        Actual rendering logic, implemented by subclasses.

        Called by render() when duration > 0.
        """
        pass

    @abstractmethod
    def inputs(self) -> list[ProcessingElement]:
        """
        Return the list of input ProcessingElements.

        Returns:
            List of input PEs (empty for sources)
        """
        pass

    def is_pure(self) -> bool:
        """
        Returns True if this PE is pure (arbitrary render times).

        pure == True: render() may be called with arbitrary (start, duration)
        in any order; same (start, duration) always yields the same output.

        pure == False: the PE has state. After the first call, each
        render(start, duration) must start where the previous one ended.
        The framework enforces this.

        Default: False (safe default for stateful PEs)
        """
        return False

    def channel_count(self) -> Optional[int]:
        """
        Number of output channels this PE produces.

        Returns:
            int: Fixed channel count
            None: Same as primary input (pass-through)
        """
        return None

    def reset_state(self) -> None:
        """
        Reset this PE's internal state.

        Calls _reset_state() if the subclass implements it. For impure PEs,
        also resets the contiguous-request watermark so the next render()
        may use any start (new stream).
        """
        if not self.is_pure():
            self._last_rendered_end = None
        if hasattr(self, '_reset_state'):
            self._reset_state()

    def _scalar_or_pe_values(
        self,
        param: Union[float, int, "ProcessingElement"],
        start: int,
        duration: int,
    ) -> np.ndarray:
        """
        Protected helper for "scalar-or-PE" parameters.

        Returns a float64 array of shape (duration,): the scalar repeated,
        or channel 0 of the rendered ProcessingElement.
        """
        if isinstance(param, ProcessingElement):
            return param.render(start, duration).mono().astype(np.float64, copy=False)
        return np.full(duration, float(param), dtype=np.float64)

    def _param_repr(self, param: Union[float, int, "ProcessingElement"]) -> str:
        if isinstance(param, ProcessingElement):
            return f"{param.__class__.__name__}(...)"
        return repr(param)


class SourcePE(ProcessingElement):
    """
    A ProcessingElement with no inputs.

    Sources generate samples as a pure function of the sample index.
    """

    def inputs(self) -> list[ProcessingElement]:
        return []

    def is_pure(self) -> bool:
        return True

    @abstractmethod
    def channel_count(self) -> int:
        """Sources must declare a fixed channel count."""
        pass
