# mklint/output.py
"""
Output sink that rules write their reports to.

Rules never print.  They enqueue text on the :class:`OutputSink` they are
handed, and whoever owns the sink decides when (and whether) to flush it
to a real stream.  This keeps rules testable and lets the CLI put a
per-file header in front of a file's output only if there is any.
"""

from __future__ import annotations

import io
import sys
from typing import List, Optional, TextIO

from termcolor import colored

from mklint.settings import LintSettings


def paint(text: str, color: str, settings: LintSettings) -> str:
    """Colour *text* with termcolor unless *settings* disable colour."""
    if settings.no_color:
        return text
    # The sink may not be a TTY even when colour was asked for explicitly.
    return colored(text, color, force_color=True)


class OutputSink:
    """Buffers rule output until :meth:`flush` writes it to *stream*."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._pending: List[str] = []

    def enqueue(self, text: str) -> None:
        self._pending.append(text)

    def write_line(self, text: str = "") -> None:
        self.enqueue(text + "\n")

    @property
    def has_output(self) -> bool:
        return any(self._pending)

    def getvalue(self) -> str:
        """Return pending text without consuming it."""
        return "".join(self._pending)

    def flush(self) -> int:
        """Write pending text to the stream; return characters written."""
        text = self.getvalue()
        self._pending.clear()
        if text:
            self.stream.write(text)
            self.stream.flush()
        return len(text)

    @classmethod
    def to_string(cls) -> "OutputSink":
        """A sink backed by an in-memory buffer."""
        return cls(io.StringIO())


__all__ = ["OutputSink", "paint"]
