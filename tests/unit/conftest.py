import pytest

from approxeq.config import reload_settings
from approxeq.constants import ENV_NAN_EQUALITY


@pytest.fixture
def nan_equality_off():
    """Process settings with NaN-equality disabled, regardless of the CI stage."""
    reload_settings(environ={ENV_NAN_EQUALITY: "0"})
    yield
    reload_settings()


@pytest.fixture
def nan_equality_on():
    """Process settings with NaN-equality enabled."""
    reload_settings(environ={ENV_NAN_EQUALITY: "1"})
    yield
    reload_settings()


class RecordingEvaluator:
    """
    Duck-typed evaluator (no base class) that records every call and
    delegates to an absolute margin.
    """

    kind = "recording"

    def __init__(self, margin: float = 0.5) -> None:
        self.margin = margin
        self.calls = []

    def decide(self, expected, actual):
        self.calls.append((expected, actual))
        return abs(actual - expected) <= self.margin


@pytest.fixture
def recording_evaluator() -> RecordingEvaluator:
    return RecordingEvaluator()
