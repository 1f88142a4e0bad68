import io

import pytest

from bootlog.application.dispatcher import StructuredEventLogger
from bootlog.infrastructure.json_sink import JsonLineSink


class RecordingSink:
    def __init__(self) -> None:
        self.entries = []

    def emit(self, entry) -> None:
        self.entries.append(entry)


@pytest.fixture
def some_error():
    return RuntimeError("some error")


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def render():
    """Log one event through a JSON sink and return the written text."""

    def _render(event) -> str:
        buffer = io.StringIO()
        StructuredEventLogger(JsonLineSink(buffer)).log_event(event)
        return buffer.getvalue()

    return _render
