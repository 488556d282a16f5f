"""Sink writing chunks to a text stream, stderr by default."""

from __future__ import annotations

import sys
from typing import TextIO

from .base import DebugSink


class StreamSink(DebugSink):
    name = "stderr"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def write(self, chunk: str) -> None:
        stream = self.stream
        stream.write(chunk)
        stream.flush()
