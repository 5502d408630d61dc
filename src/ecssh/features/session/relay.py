"""Filtered relay of session-manager-plugin diagnostics."""

from __future__ import annotations

from collections.abc import Callable
from io import BufferedIOBase
from typing import TextIO

SESSION_START_NOTICE = "Starting session with SessionId:"
READ_CHUNK_SIZE = 4096


def is_session_start_notice(line: str) -> bool:
    return SESSION_START_NOTICE in line


def keep_diagnostic_line(line: str) -> bool:
    return not is_session_start_notice(line)


class FilteredLineWriter:
    """Splits written byte chunks into lines and forwards the ones to keep.

    Partial lines are buffered across writes; close() flushes whatever is left.
    Once the sink fails, further lines are discarded so the source can still be
    drained to EOF.
    """

    def __init__(self, sink: TextIO, keep_line: Callable[[str], bool] = keep_diagnostic_line) -> None:
        self.sink = sink
        self.keep_line = keep_line
        self._buffer = b""
        self.sink_failed = False

    def write(self, chunk: bytes) -> int:
        self._buffer += chunk
        *lines, self._buffer = self._buffer.split(b"\n")
        for line in lines:
            self._emit(line)
        return len(chunk)

    def close(self) -> None:
        if self._buffer:
            self._emit(self._buffer)
            self._buffer = b""

    def _emit(self, raw: bytes) -> None:
        line = raw.decode("utf-8", errors="replace").rstrip("\r")
        if self.sink_failed or not self.keep_line(line):
            return
        try:
            self.sink.write(line + "\n")
            self.sink.flush()
        except (OSError, ValueError):
            self.sink_failed = True


def relay_stream(source: BufferedIOBase, writer: FilteredLineWriter) -> None:
    """Copy source into writer until EOF."""
    try:
        while True:
            chunk = source.read1(READ_CHUNK_SIZE)
            if not chunk:
                break
            writer.write(chunk)
    finally:
        writer.close()
