"""Test configuration including import path adjustments."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from debug_output import debug as debug_module  # noqa: E402
from debug_output.diagnostics import reset_reported  # noqa: E402
from debug_output.sinks.base import DebugSink  # noqa: E402


class RecordingSink(DebugSink):
    name = "recording"

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def write(self, chunk: str) -> None:
        self.chunks.append(chunk)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture(autouse=True)
def _isolate_debug_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the user's DEBUG_OUTPUT_* settings and the process singleton out of tests."""
    for name in (
        "DEBUG_OUTPUT_DISABLE",
        "DEBUG_OUTPUT_SINK",
        "DEBUG_OUTPUT_ASSERT",
        "DEBUG_OUTPUT_TRACE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_reported()
    previous = debug_module.install(None)
    yield
    debug_module.install(previous)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
