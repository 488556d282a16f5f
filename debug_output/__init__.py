"""
Process-wide debug output: chunked, serialized writes to a single debug sink.
"""

from .assertions import DebugAssertionError
from .debug import (
    Debug,
    NullDebug,
    assert_,
    build_debug,
    fail,
    get_debug,
    install,
    write,
    write_if,
    write_line,
    write_line_format,
    write_line_if,
)
from .writer import LINE_TERMINATOR, MAX_CHUNK_LEN, WriteSerializer, iter_chunks

__all__ = [
    "Debug",
    "NullDebug",
    "DebugAssertionError",
    "WriteSerializer",
    "MAX_CHUNK_LEN",
    "LINE_TERMINATOR",
    "iter_chunks",
    "build_debug",
    "get_debug",
    "install",
    "write",
    "write_line",
    "write_line_format",
    "write_if",
    "write_line_if",
    "assert_",
    "fail",
]
