"""Central registry for sink metadata."""

from __future__ import annotations

import sys
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass

from .base import DebugSink, NullSink
from .stream import StreamSink
from .windows import WindowsDebuggerSink


@dataclass(frozen=True)
class SinkEntry:
    slug: str
    label: str
    sink_cls: type[DebugSink]
    platforms: tuple[str, ...] = ()

    def available(self, platform: str | None = None) -> bool:
        if not self.platforms:
            return True
        return (platform or sys.platform) in self.platforms


SINK_REGISTRY: OrderedDict[str, SinkEntry] = OrderedDict(
    (
        (
            StreamSink.name,
            SinkEntry(slug=StreamSink.name, label="standard error", sink_cls=StreamSink),
        ),
        (
            WindowsDebuggerSink.name,
            SinkEntry(
                slug=WindowsDebuggerSink.name,
                label="OutputDebugString",
                sink_cls=WindowsDebuggerSink,
                platforms=("win32",),
            ),
        ),
        (
            NullSink.name,
            SinkEntry(slug=NullSink.name, label="discard", sink_cls=NullSink),
        ),
    )
)


def list_sinks() -> Iterable[SinkEntry]:
    return SINK_REGISTRY.values()


def get_sink_entry(slug: str) -> SinkEntry | None:
    return SINK_REGISTRY.get(slug)


def default_sink_slug(platform: str | None = None) -> str:
    if (platform or sys.platform) == "win32":
        return WindowsDebuggerSink.name
    return StreamSink.name


def create_sink(slug: str | None = None) -> DebugSink:
    entry = get_sink_entry(slug or default_sink_slug())
    if entry is None:
        msg = f"unknown debug sink: {slug!r}"
        raise ValueError(msg)
    if not entry.available():
        msg = f"debug sink {entry.slug!r} is not available on {sys.platform}"
        raise ValueError(msg)
    return entry.sink_cls()
