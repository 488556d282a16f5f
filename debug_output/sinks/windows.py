"""Sink forwarding chunks to the Windows debugger via OutputDebugStringW."""

from __future__ import annotations

import sys
from collections.abc import Callable

from .base import DebugSink


def _load_output_debug_string() -> Callable[[str], None]:
    if sys.platform != "win32":
        msg = "OutputDebugStringW is only available on Windows"
        raise OSError(msg)
    import ctypes

    func = ctypes.windll.kernel32.OutputDebugStringW
    func.argtypes = [ctypes.c_wchar_p]
    func.restype = None
    return func


class WindowsDebuggerSink(DebugSink):
    """
    Writes each chunk to the attached debugger (or DbgView).

    Debuggers truncate very long OutputDebugString payloads, which is why the
    serializer bounds every chunk before it reaches this sink.
    """

    name = "windows-debugger"

    def __init__(self, output: Callable[[str], None] | None = None) -> None:
        self._output = output or _load_output_debug_string()

    def write(self, chunk: str) -> None:
        self._output(chunk)
