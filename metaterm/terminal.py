"""
Terminal collaborators — size lookup and an ANSI output sink.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO, Tuple

logger = logging.getLogger(__name__)

CSI = "\033["


class TerminalUnavailableError(RuntimeError):
    """The terminal size could not be determined."""


def get_terminal_size(stream: TextIO = sys.stdout) -> Tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal attached to *stream*.

    There is no fallback size: a stream that is not a terminal raises
    :class:`TerminalUnavailableError`.
    """
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError) as exc:
        raise TerminalUnavailableError("Unable to get terminal size") from exc
    logger.debug("Terminal size: %dx%d", size.columns, size.lines)
    return size.columns, size.lines


class AnsiTerminal:
    """Write-only terminal driven by ANSI escape sequences.

    Output is buffered by the underlying stream until :meth:`flush`.
    """

    def __init__(self, stream: TextIO = sys.stdout) -> None:
        self.stream = stream

    def clear(self) -> None:
        self.stream.write(f"{CSI}2J")

    def hide_cursor(self) -> None:
        self.stream.write(f"{CSI}?25l")

    def show_cursor(self) -> None:
        self.stream.write(f"{CSI}?25h")

    def move_to(self, col: int, row: int) -> None:
        """Move to zero-based (col, row)."""
        self.stream.write(f"{CSI}{row + 1};{col + 1}H")

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()
