"""Environment-driven settings for the debug output facility."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}

DEFAULT_ASSERT_MODE = "raise"


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUE_VALUES


def output_disabled() -> bool:
    return env_flag("DEBUG_OUTPUT_DISABLE")


def trace_enabled() -> bool:
    return env_flag("DEBUG_OUTPUT_TRACE")


def sink_slug_from_env() -> str | None:
    value = os.getenv("DEBUG_OUTPUT_SINK", "").strip().lower()
    return value or None


def assert_mode_from_env() -> str:
    value = os.getenv("DEBUG_OUTPUT_ASSERT", "").strip().lower()
    return value or DEFAULT_ASSERT_MODE


@dataclass(frozen=True, slots=True)
class DebugSettings:
    enabled: bool = True
    sink: str | None = None
    assert_mode: str = DEFAULT_ASSERT_MODE

    @classmethod
    def from_env(cls) -> DebugSettings:
        return cls(
            enabled=not output_disabled(),
            sink=sink_slug_from_env(),
            assert_mode=assert_mode_from_env(),
        )
