"""
Base sink abstraction for the debug output stream.
"""

from __future__ import annotations


class DebugSink:
    """Abstract base class for a destination of debug chunks."""

    name: str = "unknown"

    def write(self, chunk: str) -> None:
        """Append one chunk to the debug channel. Subclasses must implement."""
        raise NotImplementedError


class NullSink(DebugSink):
    """Discards every chunk."""

    name = "null"

    def write(self, chunk: str) -> None:
        return None
