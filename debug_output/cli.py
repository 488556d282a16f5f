"""Command line entrypoint for writing to the debug output stream."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from .config import DebugSettings
from .debug import build_debug
from .sinks.registry import SINK_REGISTRY, get_sink_entry


def main(argv: list[str] | None = None) -> None:
    """Send the given message, or each line of stdin, to the debug sink."""
    parser = argparse.ArgumentParser(description="Write a message to the debug output stream.")
    parser.add_argument("message", nargs="*", help="Message text (reads stdin when omitted)")
    parser.add_argument("--category", default=None, help="Prefix rendered as CATEGORY:message")
    parser.add_argument(
        "--sink",
        default=None,
        choices=list(SINK_REGISTRY.keys()),
        help="Debug sink to write to (default: DEBUG_OUTPUT_SINK or the platform debug channel)",
    )
    parser.add_argument(
        "--no-newline",
        action="store_true",
        help="Do not terminate each message with CRLF",
    )

    args = parser.parse_args(argv)

    settings = DebugSettings.from_env()
    if args.sink:
        entry = get_sink_entry(args.sink)
        if entry is not None and not entry.available():
            parser.error(f"debug sink {args.sink!r} is not available on {sys.platform}")
        settings = replace(settings, sink=args.sink)

    # Same gate as the library: inert under python -O or DEBUG_OUTPUT_DISABLE.
    debug = build_debug(settings)
    emit = debug.write if args.no_newline else debug.write_line

    if args.message:
        emit(" ".join(args.message), args.category)
        return
    for line in sys.stdin:
        emit(line.rstrip("\r\n"), args.category)


if __name__ == "__main__":
    main(sys.argv[1:])
