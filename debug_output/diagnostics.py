"""Internal diagnostics for the facility itself."""

from __future__ import annotations

import sys
import threading

from .config import trace_enabled

_reported: set[tuple[str, str]] = set()
_reported_lock = threading.Lock()


def debug_warning(message: str, exc: BaseException | None = None) -> None:
    """
    Report a problem inside the facility on stderr, only under DEBUG_OUTPUT_TRACE.

    These reports bypass the serializer: the sink they describe may be the one
    that is failing.
    """
    if not trace_enabled():
        return
    suffix = f": {exc}" if exc else ""
    print(f"[debug-output] {message}{suffix}", file=sys.stderr)


def warn_once(key: tuple[str, str], message: str, exc: BaseException | None = None) -> bool:
    """Report ``message`` the first time ``key`` is seen while tracing is on."""
    if not trace_enabled():
        return False
    with _reported_lock:
        if key in _reported:
            return False
        _reported.add(key)
    debug_warning(message, exc)
    return True


def reset_reported() -> None:
    with _reported_lock:
        _reported.clear()
