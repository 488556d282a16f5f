"""
Public debug output surface and the process-wide facility singleton.
"""

from __future__ import annotations

import threading
from typing import Any

from .assertions import (
    AssertPresenter,
    StackTraceProvider,
    capture_stack_trace,
    compose_assert_message,
    get_presenter,
    safe_stack_trace,
)
from .config import DEFAULT_ASSERT_MODE, DebugSettings
from .diagnostics import debug_warning
from .sinks.base import DebugSink
from .sinks.registry import create_sink
from .sinks.stream import StreamSink
from .writer import WriteSerializer


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def with_category(value: Any, category: str | None) -> str:
    text = to_text(value)
    if category is None:
        return text
    return f"{category}:{text}"


class Debug:
    """Formats diagnostic messages and hands them to a write serializer."""

    enabled = True

    def __init__(
        self,
        serializer: WriteSerializer,
        *,
        presenter: AssertPresenter | None = None,
        stack_trace_provider: StackTraceProvider | None = None,
    ) -> None:
        self.serializer = serializer
        self.presenter = presenter or get_presenter(DEFAULT_ASSERT_MODE)
        self._stack_trace_provider = stack_trace_provider or capture_stack_trace

    @classmethod
    def for_sink(cls, sink: DebugSink, **kwargs: Any) -> Debug:
        return cls(WriteSerializer(sink), **kwargs)

    def write(self, value: Any = None, category: str | None = None) -> None:
        self.serializer.emit(with_category(value, category))

    def write_line(self, value: Any = None, category: str | None = None) -> None:
        self.serializer.emit_line(with_category(value, category))

    def write_line_format(self, format_string: str, *args: Any) -> None:
        self.write_line(format_string.format(*args))

    def write_if(self, condition: Any, value: Any = None, category: str | None = None) -> None:
        if condition:
            self.write(value, category)

    def write_line_if(
        self, condition: Any, value: Any = None, category: str | None = None
    ) -> None:
        if condition:
            self.write_line(value, category)

    def assert_(
        self,
        condition: Any,
        message: str | None = "",
        detail_message: str | None = "",
        *args: Any,
    ) -> None:
        """
        Write an assertion banner and notify the presenter when ``condition`` is false.

        Extra positional arguments format ``detail_message`` with ``str.format``;
        a malformed format raises to the caller even when the condition holds.
        """
        detail = to_text(detail_message)
        if args:
            detail = detail.format(*args)
        if condition:
            return
        message = to_text(message)
        stack_trace = safe_stack_trace(self._stack_trace_provider)
        self.write_line(compose_assert_message(stack_trace, message, detail))
        self.presenter.show(stack_trace, message, detail)

    def fail(self, message: str | None = "", detail_message: str | None = "") -> None:
        self.assert_(False, message, detail_message)


class NullDebug:
    """Inert stand-in used when debug output is compiled out or disabled."""

    enabled = False

    def write(self, value: Any = None, category: str | None = None) -> None:
        pass

    def write_line(self, value: Any = None, category: str | None = None) -> None:
        pass

    def write_line_format(self, format_string: str, *args: Any) -> None:
        pass

    def write_if(self, condition: Any, value: Any = None, category: str | None = None) -> None:
        pass

    def write_line_if(
        self, condition: Any, value: Any = None, category: str | None = None
    ) -> None:
        pass

    def assert_(
        self,
        condition: Any,
        message: str | None = "",
        detail_message: str | None = "",
        *args: Any,
    ) -> None:
        pass

    def fail(self, message: str | None = "", detail_message: str | None = "") -> None:
        pass


def _resolve_sink(slug: str | None) -> DebugSink:
    try:
        return create_sink(slug)
    except (ValueError, OSError) as exc:
        debug_warning("falling back to the stderr debug sink", exc)
    return StreamSink()


def _resolve_presenter(slug: str) -> AssertPresenter:
    try:
        return get_presenter(slug)
    except ValueError as exc:
        debug_warning("falling back to the default assert presenter", exc)
    return get_presenter(DEFAULT_ASSERT_MODE)


def build_debug(settings: DebugSettings | None = None) -> Debug | NullDebug:
    settings = settings or DebugSettings.from_env()
    if __debug__:
        if settings.enabled:
            return Debug.for_sink(
                _resolve_sink(settings.sink),
                presenter=_resolve_presenter(settings.assert_mode),
            )
    return NullDebug()


_instance: Debug | NullDebug | None = None
_instance_lock = threading.Lock()


def get_debug() -> Debug | NullDebug:
    global _instance
    instance = _instance
    if instance is not None:
        return instance
    with _instance_lock:
        if _instance is None:
            _instance = build_debug()
        return _instance


def install(debug: Debug | NullDebug | None) -> Debug | NullDebug | None:
    """Replace the process-wide facility; ``None`` rebuilds it from the environment on next use."""
    global _instance
    with _instance_lock:
        previous = _instance
        _instance = debug
    return previous


def write(value: Any = None, category: str | None = None) -> None:
    get_debug().write(value, category)


def write_line(value: Any = None, category: str | None = None) -> None:
    get_debug().write_line(value, category)


def write_line_format(format_string: str, *args: Any) -> None:
    get_debug().write_line_format(format_string, *args)


def write_if(condition: Any, value: Any = None, category: str | None = None) -> None:
    get_debug().write_if(condition, value, category)


def write_line_if(condition: Any, value: Any = None, category: str | None = None) -> None:
    get_debug().write_line_if(condition, value, category)


def assert_(
    condition: Any,
    message: str | None = "",
    detail_message: str | None = "",
    *args: Any,
) -> None:
    get_debug().assert_(condition, message, detail_message, *args)


def fail(message: str | None = "", detail_message: str | None = "") -> None:
    get_debug().fail(message, detail_message)
