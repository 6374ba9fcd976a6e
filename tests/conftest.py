"""Pytest configuration for tickbar tests."""

import io
import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeTimer:
    """Monotonic time source that only moves when a test advances it."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingRenderer:
    """Renderer stand-in that records (done, time) for every redraw."""

    def __init__(self, timer: FakeTimer):
        self.timer = timer
        self.draws = []

    def draw(self, state):
        self.draws.append((state.done, self.timer.now, state.suffix))


@pytest.fixture
def fake_timer():
    return FakeTimer()


@pytest.fixture
def recorder(fake_timer):
    return RecordingRenderer(fake_timer)


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset tickbar logger state after each test.

    This prevents test pollution from tests that call setup_logging(),
    which sets propagate=False and breaks caplog in subsequent tests.
    """
    yield
    app_logger = logging.getLogger("tickbar")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
