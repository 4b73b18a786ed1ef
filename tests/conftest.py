import pytest
import sincdelay as sd
from sincdelay.config import DEFAULT_TOLERANCE


@pytest.fixture(autouse=True)
def _set_sample_rate():
    sd.set_sample_rate(44100)
    sd.set_tolerance(DEFAULT_TOLERANCE)
    yield
    sd.set_sample_rate(44100)
    sd.set_tolerance(DEFAULT_TOLERANCE)
