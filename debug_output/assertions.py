"""
Assertion banner composition, stack capture and failure presenters.
"""

from __future__ import annotations

import os
import traceback
from collections.abc import Callable
from pathlib import Path

from .writer import LINE_TERMINATOR

ASSERT_BANNER = "---- DEBUG ASSERTION FAILED ----"
SHORT_MESSAGE_HEADER = "---- Assert Short Message ----"
LONG_MESSAGE_HEADER = "---- Assert Long Message ----"

_PACKAGE_DIR = Path(__file__).resolve().parent

StackTraceProvider = Callable[[], str]


class DebugAssertionError(AssertionError):
    """Raised by the default presenter when a debug assertion fails."""

    def __init__(self, message: str, detail_message: str = "", stack_trace: str = "") -> None:
        super().__init__(message or "debug assertion failed")
        self.message = message
        self.detail_message = detail_message
        self.stack_trace = stack_trace


def compose_assert_message(stack_trace: str, message: str, detail_message: str) -> str:
    return LINE_TERMINATOR.join(
        (
            ASSERT_BANNER,
            SHORT_MESSAGE_HEADER,
            message,
            LONG_MESSAGE_HEADER,
            detail_message,
            stack_trace,
        )
    )


def _is_internal(filename: str) -> bool:
    try:
        return Path(filename).resolve().is_relative_to(_PACKAGE_DIR)
    except (OSError, ValueError):
        return False


def capture_stack_trace() -> str:
    """
    Return the current call stack without this package's own frames.

    Any failure while walking the stack yields an empty string.
    """
    try:
        frames = [frame for frame in traceback.extract_stack() if not _is_internal(frame.filename)]
        return "".join(traceback.format_list(frames))
    except Exception:
        return ""


def safe_stack_trace(provider: StackTraceProvider) -> str:
    try:
        return provider() or ""
    except Exception:
        return ""


class AssertPresenter:
    """Reacts to a failed assertion after its banner has been written."""

    name: str = "unknown"

    def show(self, stack_trace: str, message: str, detail_message: str) -> None:
        raise NotImplementedError


class RaisingAssertPresenter(AssertPresenter):
    name = "raise"

    def show(self, stack_trace: str, message: str, detail_message: str) -> None:
        raise DebugAssertionError(message, detail_message, stack_trace)


class IgnoringAssertPresenter(AssertPresenter):
    name = "ignore"

    def show(self, stack_trace: str, message: str, detail_message: str) -> None:
        return None


class AbortingAssertPresenter(AssertPresenter):
    """Fail fast: the banner is already on the debug stream."""

    name = "abort"

    def show(self, stack_trace: str, message: str, detail_message: str) -> None:
        os.abort()


PRESENTER_REGISTRY: dict[str, type[AssertPresenter]] = {
    RaisingAssertPresenter.name: RaisingAssertPresenter,
    IgnoringAssertPresenter.name: IgnoringAssertPresenter,
    AbortingAssertPresenter.name: AbortingAssertPresenter,
}


def get_presenter(slug: str) -> AssertPresenter:
    presenter_cls = PRESENTER_REGISTRY.get(slug)
    if presenter_cls is None:
        msg = f"unknown assert presenter: {slug!r}"
        raise ValueError(msg)
    return presenter_cls()
