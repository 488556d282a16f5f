"""
Sinks receiving the chunked debug output stream.
"""

from .base import DebugSink, NullSink
from .registry import (
    SINK_REGISTRY,
    SinkEntry,
    create_sink,
    default_sink_slug,
    get_sink_entry,
    list_sinks,
)
from .stream import StreamSink
from .windows import WindowsDebuggerSink

__all__ = [
    "DebugSink",
    "NullSink",
    "StreamSink",
    "WindowsDebuggerSink",
    "SinkEntry",
    "SINK_REGISTRY",
    "create_sink",
    "default_sink_slug",
    "get_sink_entry",
    "list_sinks",
]
