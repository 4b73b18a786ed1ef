"""
Tests for ProcessingElement, SourcePE and Snippet.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import pytest
import numpy as np
from sincdelay import ProcessingElement, Snippet, SourcePE, set_sample_rate


# Concrete test implementations

class CountingSourcePE(SourcePE):
    """A source whose value at index n is n."""

    def _render(self, start: int, duration: int) -> Snippet:
        return Snippet(start, np.arange(start, start + duration, dtype=np.float64))

    def channel_count(self) -> int:
        return 1


class AccumulatorPE(ProcessingElement):
    """A processor with internal state (non-pure): running sum of its input."""

    def __init__(self, source: ProcessingElement):
        self._source = source
        self._total = 0.0

    def _render(self, start: int, duration: int) -> Snippet:
        x = self._source.render(start, duration).mono()
        y = self._total + np.cumsum(x)
        self._total = float(y[-1])
        return Snippet(start, y)

    def _reset_state(self) -> None:
        self._total = 0.0

    def inputs(self) -> list[ProcessingElement]:
        return [self._source]


class TestProcessingElement:
    def test_requires_sample_rate(self):
        set_sample_rate(None)
        with pytest.raises(RuntimeError):
            CountingSourcePE()

    def test_sample_rate_stamped(self):
        set_sample_rate(22050)
        assert CountingSourcePE().sample_rate == 22050.0

    def test_source_is_pure(self):
        pe = CountingSourcePE()
        assert pe.is_pure() is True
        assert pe.inputs() == []
        # pure: any order
        pe.render(100, 5)
        np.testing.assert_array_equal(pe.render(0, 3).mono(), [0.0, 1.0, 2.0])

    def test_stateful_requires_contiguous(self):
        acc = AccumulatorPE(CountingSourcePE())
        acc.render(0, 4)
        with pytest.raises(ValueError):
            acc.render(0, 4)

    def test_stateful_contiguous(self):
        acc = AccumulatorPE(CountingSourcePE())
        np.testing.assert_array_equal(acc.render(0, 3).mono(), [0.0, 1.0, 3.0])
        np.testing.assert_array_equal(acc.render(3, 2).mono(), [6.0, 10.0])

    def test_reset_state(self):
        acc = AccumulatorPE(CountingSourcePE())
        acc.render(0, 3)
        acc.reset_state()
        np.testing.assert_array_equal(acc.render(0, 3).mono(), [0.0, 1.0, 3.0])

    def test_scalar_or_pe_values(self):
        acc = AccumulatorPE(CountingSourcePE())
        np.testing.assert_array_equal(acc._scalar_or_pe_values(2.5, 0, 3), [2.5, 2.5, 2.5])
        np.testing.assert_array_equal(
            acc._scalar_or_pe_values(CountingSourcePE(), 4, 2), [4.0, 5.0]
        )


class TestSnippet:
    def test_1d_becomes_column(self):
        snippet = Snippet(10, np.array([1.0, 2.0, 3.0]))
        assert snippet.data.shape == (3, 1)
        assert snippet.start == 10
        assert snippet.end == 13
        assert snippet.duration == 3
        assert snippet.channels == 1

    def test_dtype_is_float64(self):
        snippet = Snippet(0, np.array([1, 2], dtype=np.float32))
        assert snippet.data.dtype == np.float64

    def test_3d_rejected(self):
        with pytest.raises(ValueError):
            Snippet(0, np.zeros((2, 2, 2)))

    def test_from_zeros(self):
        snippet = Snippet.from_zeros(5, 4, channels=2)
        assert snippet.data.shape == (4, 2)
        assert np.all(snippet.data == 0.0)

    def test_mono(self):
        snippet = Snippet(0, np.array([[1.0, 9.0], [2.0, 9.0]]))
        np.testing.assert_array_equal(snippet.mono(), [1.0, 2.0])

    def test_equality(self):
        assert Snippet(0, np.array([1.0, 2.0])) == Snippet(0, np.array([1.0, 2.0]))
        assert Snippet(0, np.array([1.0, 2.0])) != Snippet(1, np.array([1.0, 2.0]))

    def test_repr(self):
        assert repr(Snippet(0, np.zeros(4))) == "Snippet(start=0, duration=4, channels=1)"
