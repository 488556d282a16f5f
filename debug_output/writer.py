"""
Serialized, chunked delivery of debug messages to a sink.

Every message is sent while holding a single lock, so chunks of two messages
written from different threads never interleave at the sink.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

from .diagnostics import warn_once
from .sinks.base import DebugSink

# Debuggers truncate OutputDebugString payloads past this many characters.
MAX_CHUNK_LEN = 4091

# Same terminator on every platform so stream consumers see one format.
LINE_TERMINATOR = "\r\n"


def iter_chunks(message: str, size: int = MAX_CHUNK_LEN) -> Iterator[str]:
    """
    Split ``message`` into consecutive slices of at most ``size`` characters.

    A message that fits is yielded whole, including the empty string, so every
    emit reaches the sink at least once.
    """
    if size < 1:
        msg = f"chunk size must be positive, got {size}"
        raise ValueError(msg)
    if len(message) <= size:
        yield message
        return
    for offset in range(0, len(message), size):
        yield message[offset : offset + size]


class WriteSerializer:
    """Delivers whole messages to one sink, one message at a time."""

    def __init__(self, sink: DebugSink, *, max_chunk_len: int = MAX_CHUNK_LEN) -> None:
        if max_chunk_len < 1:
            msg = f"max_chunk_len must be positive, got {max_chunk_len}"
            raise ValueError(msg)
        self.sink = sink
        self.max_chunk_len = max_chunk_len
        # Reentrant so a sink that writes debug output itself cannot deadlock.
        self._lock = threading.RLock()

    def emit(self, message: str | None) -> None:
        text = "" if message is None else message
        with self._lock:
            for chunk in iter_chunks(text, self.max_chunk_len):
                self._send(chunk)

    def emit_line(self, message: str | None) -> None:
        self.emit(("" if message is None else message) + LINE_TERMINATOR)

    def _send(self, chunk: str) -> None:
        try:
            self.sink.write(chunk)
        except Exception as exc:
            sink_name = getattr(self.sink, "name", type(self.sink).__name__)
            key = (type(self.sink).__name__, type(exc).__name__)
            warn_once(key, f"debug sink {sink_name!r} failed; output dropped", exc)
