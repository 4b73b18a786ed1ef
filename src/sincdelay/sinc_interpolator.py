"""
MultiTapSincInterpolator - variable delay by sinc-weighted multi-tap reads.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License

Moving a delay tap from tau1 to tau2 by crossfading two fixed taps colors
the spectrum (comb filtering while both are audible) and clicks when the
read position jumps. Instead, the output at interpolation factor alpha is a
band-limited interpolation of the delayed signal between the two endpoints:
2K+2 taps are laid out on a grid of spacing delta = tau2 - tau1 around the
endpoints, and each tap is weighted by a normalized sinc of its distance to
the instantaneous target delay tau, measured in units of delta.

Tap layout for K=1 (delta > 0):

    tap:    0          1          2          3
    delay:  tau1-d     tau1       tau2       tau2+d
                       |<-- tau -->|

At alpha=0 the tap at tau1 has gain 1 and every other tap sits on a zero of
sinc; at alpha=1 the same holds for the tap at tau2. When tau1 and tau2
coincide the grid collapses and the line falls back to a single
fractional read.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional

import numba as nb
import numpy as np
from numpy.typing import ArrayLike

from sincdelay.config import get_tolerance
from sincdelay.conversions import samples_to_ms
from sincdelay.delay_buffer import DelayBuffer
from sincdelay.errors import InvalidConfigurationError, OutOfRangeError
from sincdelay.logger import get_logger

logger = get_logger(__name__)


def sinc(x: float, tolerance: Optional[float] = None) -> float:
    """
    Normalized sinc, sin(pi*x) / (pi*x), with sinc(0) = 1.

    Args:
        x: Argument
        tolerance: |x| below this is treated as zero (default: global tolerance)
    """
    if tolerance is None:
        tolerance = get_tolerance()
    if abs(x) < tolerance:
        return 1.0
    pi_x = math.pi * x
    return math.sin(pi_x) / pi_x


@dataclass(frozen=True)
class DelayParameters:
    """
    Immutable snapshot of the delay-line controls.

    Attributes:
        tau1: Reference delay in samples (alpha = 0)
        tau2: Target delay in samples (alpha = 1)
        alpha: Interpolation factor in [0, 1]
        k: Auxiliary tap-pair count; the line uses 2k + 2 taps
    """

    tau1: float
    tau2: float
    alpha: float
    k: int

    @property
    def delta(self) -> float:
        """Spacing of the tap grid, tau2 - tau1."""
        return self.tau2 - self.tau1

    @property
    def num_taps(self) -> int:
        return 2 * self.k + 2

    @property
    def tau(self) -> float:
        """Instantaneous target delay."""
        return (1.0 - self.alpha) * self.tau1 + self.alpha * self.tau2


class Tap(NamedTuple):
    """One weighted read of the delay line."""

    index: int
    position: float
    gain: float


def tap_position(params: DelayParameters, i: int) -> float:
    """
    Delay of tap i.

    Taps 0..k step backwards from tau1 by delta; taps k+1..2k+1 step
    forwards from tau2.
    """
    k = params.k
    delta = params.delta
    if i <= k:
        return params.tau1 - (k - i) * delta
    return params.tau2 + (i - k - 1) * delta


def tap_gain(params: DelayParameters, position: float, tolerance: Optional[float] = None) -> float:
    """
    Sinc weight of a tap at `position` relative to the target delay.

    Raises:
        InvalidConfigurationError: If the delays coincide (the weight is
            measured in units of delta)
    """
    if tolerance is None:
        tolerance = get_tolerance()
    if abs(params.delta) < tolerance:
        raise InvalidConfigurationError(
            f"tap gains are undefined for coincident delays "
            f"(tau1={params.tau1}, tau2={params.tau2})"
        )
    return sinc((position - params.tau) / params.delta, tolerance)


def compute_taps(params: DelayParameters, tolerance: Optional[float] = None) -> list[Tap]:
    """
    Lay out the taps for a parameter snapshot.

    Args:
        params: Parameter snapshot with tau1 != tau2
        tolerance: Tolerance for sinc(0) (default: global tolerance)

    Returns:
        The 2k + 2 taps, in index order

    Raises:
        InvalidConfigurationError: If the delays coincide, which leaves
            the tap grid undefined
    """
    if tolerance is None:
        tolerance = get_tolerance()
    if abs(params.delta) < tolerance:
        raise InvalidConfigurationError(
            f"tap grid is undefined for coincident delays "
            f"(tau1={params.tau1}, tau2={params.tau2})"
        )
    taps = []
    for i in range(params.num_taps):
        position = tap_position(params, i)
        taps.append(Tap(i, position, tap_gain(params, position, tolerance)))
    return taps


class MultiTapSincInterpolator:
    """
    Continuously variable delay line with sinc-interpolated delay changes.

    Each call to process_sample() writes one input sample and returns one
    output sample. Callers move the effective delay from tau1 to tau2 by
    driving alpha from 0 to 1 over time, typically linearly over a window
    of samples, then promoting tau2 to the new tau1.

    Parameter setters validate and then publish a fresh immutable
    DelayParameters snapshot with a single assignment, so they may be
    called from a control thread while another thread processes samples.
    A rejected setter leaves the previous parameters untouched.

    Args:
        max_delay_samples: Capacity of the delay buffer in samples
        k: Auxiliary tap-pair count (default: 1, i.e. 4 taps)
        sample_rate: Sample rate in Hz, used only for diagnostics
        tau1: Initial reference delay in samples
        tau2: Initial target delay in samples
        alpha: Initial interpolation factor

    Example:
        line = MultiTapSincInterpolator(4096, k=2)
        line.set_delays(100.5, 500.7)
        for n, x in enumerate(signal):
            line.set_interpolation(n / (len(signal) - 1))
            y = line.process_sample(x)
    """

    def __init__(
        self,
        max_delay_samples: int,
        k: int = 1,
        sample_rate: float = 44100.0,
        *,
        tau1: float = 1.0,
        tau2: float = 2.0,
        alpha: float = 0.0,
    ):
        self._buffer = DelayBuffer(max_delay_samples)
        sample_rate = float(sample_rate)
        if not sample_rate > 0.0:
            raise InvalidConfigurationError(
                f"sample_rate must be positive, got {sample_rate}"
            )
        self._sample_rate = sample_rate
        self._tolerance = get_tolerance()
        self._lock = threading.Lock()

        self._validate_k(k)
        self._validate_tau("tau1", tau1)
        self._validate_tau("tau2", tau2)
        self._validate_alpha(alpha)
        self._params = DelayParameters(float(tau1), float(tau2), float(alpha), int(k))

        logger.debug(
            "created %r (%.3f ms of history)",
            self,
            float(samples_to_ms(self.capacity, self._sample_rate)),
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Delay buffer capacity in samples."""
        return self._buffer.capacity

    @property
    def sample_rate(self) -> float:
        """Documentary sample rate in Hz."""
        return self._sample_rate

    @property
    def tolerance(self) -> float:
        """Near-equality tolerance captured at construction."""
        return self._tolerance

    @property
    def parameters(self) -> DelayParameters:
        """The current parameter snapshot."""
        return self._params

    @property
    def k(self) -> int:
        return self._params.k

    @property
    def num_taps(self) -> int:
        """Taps used by the variable-delay path, 2k + 2."""
        return self._params.num_taps

    @property
    def tau1(self) -> float:
        return self._params.tau1

    @property
    def tau2(self) -> float:
        return self._params.tau2

    @property
    def alpha(self) -> float:
        return self._params.alpha

    @property
    def buffer(self) -> DelayBuffer:
        """The owned delay buffer."""
        return self._buffer

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_k(self, k: int) -> None:
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise InvalidConfigurationError(f"K must be an integer, got {k!r}")
        if k < 0:
            raise InvalidConfigurationError(f"K cannot be negative, got {k}")

    def _validate_tau(self, name: str, value: float) -> None:
        limit = float(self.capacity) - 1.0
        # NaN fails both comparisons, so test for the valid range directly
        if not (0.0 <= value < limit):
            raise OutOfRangeError(
                f"{name} must be in [0.0, {limit}) for a {self.capacity}-sample "
                f"delay line, got {value}"
            )

    def _validate_alpha(self, alpha: float) -> None:
        if not (0.0 <= alpha <= 1.0):
            raise InvalidConfigurationError(
                f"alpha must be between 0.0 and 1.0, got {alpha}"
            )

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def _publish(self, **changes) -> None:
        with self._lock:
            self._params = replace(self._params, **changes)

    def configure(self, k: int) -> None:
        """
        Set the auxiliary tap-pair count.

        Larger k uses more taps (2k + 2), approximating the ideal sinc
        kernel more closely at higher cost per sample.

        Raises:
            InvalidConfigurationError: If k is negative or not an integer
        """
        self._validate_k(k)
        self._publish(k=int(k))
        logger.debug("K set to %d (%d taps)", k, 2 * int(k) + 2)

    set_k = configure

    def set_delays(self, tau1: float, tau2: float) -> None:
        """
        Set both delay endpoints together.

        Both values are validated before either is applied.

        Raises:
            OutOfRangeError: If either delay is outside [0, capacity - 1)
        """
        self._validate_tau("tau1", tau1)
        self._validate_tau("tau2", tau2)
        self._publish(tau1=float(tau1), tau2=float(tau2))
        logger.debug("delays set to tau1=%s, tau2=%s", tau1, tau2)

    def set_tau1(self, tau1: float) -> None:
        """Set the reference delay (alpha = 0) in samples."""
        self._validate_tau("tau1", tau1)
        self._publish(tau1=float(tau1))

    def set_tau2(self, tau2: float) -> None:
        """Set the target delay (alpha = 1) in samples."""
        self._validate_tau("tau2", tau2)
        self._publish(tau2=float(tau2))

    def set_interpolation(self, alpha: float) -> None:
        """
        Set the interpolation factor.

        Raises:
            InvalidConfigurationError: If alpha is outside [0, 1]
        """
        self._validate_alpha(alpha)
        self._publish(alpha=float(alpha))

    set_alpha = set_interpolation

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def is_fixed_mode(self, params: Optional[DelayParameters] = None) -> bool:
        """True when tau1 and tau2 are close enough to use a single read."""
        if params is None:
            params = self._params
        return abs(params.delta) < self._tolerance

    def taps(self) -> list[Tap]:
        """
        The taps the variable-delay path would use for the next sample.

        In fixed mode this is a single unit-gain tap at tau1.
        """
        params = self._params
        if self.is_fixed_mode(params):
            return [Tap(0, params.tau1, 1.0)]
        return compute_taps(params, self._tolerance)

    def process_sample(self, sample: float) -> float:
        """
        Push one input sample through the delay line.

        Args:
            sample: Input sample

        Returns:
            Output sample
        """
        buffer = self._buffer
        buffer.write(sample)

        # one snapshot per sample
        params = self._params
        delta = params.tau2 - params.tau1
        tolerance = self._tolerance

        if abs(delta) < tolerance:
            return buffer.read_interpolated(params.tau1)

        k = params.k
        tau1 = params.tau1
        tau2 = params.tau2
        tau = (1.0 - params.alpha) * tau1 + params.alpha * tau2

        output = 0.0
        for i in range(2 * k + 2):
            if i <= k:
                tk = tau1 - (k - i) * delta
            else:
                tk = tau2 + (i - k - 1) * delta
            hk = sinc((tk - tau) / delta, tolerance)
            output += buffer.read_interpolated(tk) * hk
        return output

    def process(self, samples: ArrayLike) -> np.ndarray:
        """
        Process a block of samples with the current parameters.

        The whole block uses one parameter snapshot and runs in a compiled
        kernel; the output matches calling process_sample() per sample.

        Args:
            samples: 1D sequence of input samples

        Returns:
            float64 array of output samples, same length as the input
        """
        x = np.ascontiguousarray(samples, dtype=np.float64).reshape(-1)
        n = x.shape[0]
        params = self._params
        return self._run_block(
            x,
            np.full(n, params.tau1),
            np.full(n, params.tau2),
            np.full(n, params.alpha),
            params.k,
        )

    def process_controlled(
        self,
        samples: ArrayLike,
        tau1: ArrayLike,
        tau2: ArrayLike,
        alpha: ArrayLike,
    ) -> np.ndarray:
        """
        Process a block with per-sample delay and interpolation values.

        Every control value is validated before any sample is written, so a
        block that raises leaves the buffer and parameters as they were.
        On success the last values of the block become the current
        parameters.

        Args:
            samples: 1D sequence of input samples
            tau1: Reference delay per sample
            tau2: Target delay per sample
            alpha: Interpolation factor per sample

        Returns:
            float64 array of output samples

        Raises:
            OutOfRangeError: If any tau1 or tau2 is outside [0, capacity - 1)
            InvalidConfigurationError: If any alpha is outside [0, 1]
        """
        x = np.ascontiguousarray(samples, dtype=np.float64).reshape(-1)
        n = x.shape[0]
        tau1_values = self._control_block("tau1", tau1, n)
        tau2_values = self._control_block("tau2", tau2, n)
        alpha_values = self._control_block("alpha", alpha, n)

        limit = float(self.capacity) - 1.0
        for name, values in (("tau1", tau1_values), ("tau2", tau2_values)):
            bad = np.flatnonzero(~((values >= 0.0) & (values < limit)))
            if bad.size:
                i = int(bad[0])
                raise OutOfRangeError(
                    f"{name} must be in [0.0, {limit}) for a {self.capacity}-sample "
                    f"delay line, got {values[i]} at sample {i}"
                )
        bad = np.flatnonzero(~((alpha_values >= 0.0) & (alpha_values <= 1.0)))
        if bad.size:
            i = int(bad[0])
            raise InvalidConfigurationError(
                f"alpha must be between 0.0 and 1.0, got {alpha_values[i]} "
                f"at sample {i}"
            )

        y = self._run_block(x, tau1_values, tau2_values, alpha_values, self._params.k)
        if n > 0:
            self._publish(
                tau1=float(tau1_values[-1]),
                tau2=float(tau2_values[-1]),
                alpha=float(alpha_values[-1]),
            )
        return y

    @staticmethod
    def _control_block(name: str, values: ArrayLike, n: int) -> np.ndarray:
        arr = np.ascontiguousarray(values, dtype=np.float64).reshape(-1)
        if arr.shape[0] != n:
            raise ValueError(f"{name} has {arr.shape[0]} values for {n} samples")
        return arr

    def _run_block(
        self,
        x: np.ndarray,
        tau1_values: np.ndarray,
        tau2_values: np.ndarray,
        alpha_values: np.ndarray,
        k: int,
    ) -> np.ndarray:
        buffer = self._buffer
        y, cursor = _sinc_delay_numba(
            x,
            buffer.storage,
            buffer.cursor,
            tau1_values,
            tau2_values,
            alpha_values,
            k,
            self._tolerance,
        )
        buffer.cursor = cursor
        return y

    def reset(self) -> None:
        """Clear the delay history. Parameters are kept."""
        self._buffer.reset()

    def __repr__(self) -> str:
        p = self._params
        return (
            f"MultiTapSincInterpolator(max_delay_samples={self.capacity}, "
            f"k={p.k}, sample_rate={self._sample_rate}, tau1={p.tau1}, "
            f"tau2={p.tau2}, alpha={p.alpha})"
        )


@nb.njit(cache=True)
def _read_interpolated_numba(buffer, cursor, lag):
    capacity = buffer.shape[0]
    idx = (cursor - 1 - lag) % capacity
    if idx >= capacity:
        idx = 0.0
    i0 = int(np.floor(idx))
    frac = idx - i0
    i1 = i0 + 1
    if i1 >= capacity:
        i1 = 0
    return buffer[i0] * (1.0 - frac) + buffer[i1] * frac


@nb.njit(cache=True)
def _sinc_numba(x, tolerance):
    if abs(x) < tolerance:
        return 1.0
    pi_x = np.pi * x
    return np.sin(pi_x) / pi_x


@nb.njit(cache=True)
def _sinc_delay_numba(x, buffer, cursor, tau1_values, tau2_values, alpha_values, k, tolerance):
    capacity = buffer.shape[0]
    n_samples = x.shape[0]
    y = np.empty(n_samples)
    for n in range(n_samples):
        buffer[cursor] = x[n]
        cursor += 1
        if cursor >= capacity:
            cursor = 0

        tau1 = tau1_values[n]
        tau2 = tau2_values[n]
        delta = tau2 - tau1
        if abs(delta) < tolerance:
            y[n] = _read_interpolated_numba(buffer, cursor, tau1)
            continue

        alpha = alpha_values[n]
        tau = (1.0 - alpha) * tau1 + alpha * tau2
        acc = 0.0
        for i in range(2 * k + 2):
            if i <= k:
                tk = tau1 - (k - i) * delta
            else:
                tk = tau2 + (i - k - 1) * delta
            hk = _sinc_numba((tk - tau) / delta, tolerance)
            acc += _read_interpolated_numba(buffer, cursor, tk) * hk
        y[n] = acc
    return y, cursor
