"""TerminalPrinter — plain black & white output to stdout / stderr."""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

from cdprinter.dates import DateFormat
from cdprinter.printers.base import AbstractPrinter


class TerminalPrinter(AbstractPrinter):
    """Writes to ``sys.stdout`` and errors to ``sys.stderr``.

    Streams default to whatever ``sys.stdout``/``sys.stderr`` are at call
    time, so output redirection (and pytest capture) keeps working.
    """

    def __init__(
        self,
        level: int = 0,
        timestamping: bool = False,
        date_format: DateFormat | str | None = None,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        super().__init__(level, timestamping, date_format)
        self._stdout = stdout
        self._stderr = stderr
        self._lock = threading.Lock()

    @property
    def out(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._stderr or sys.stderr

    def _emit(self, stream: TextIO, text: str) -> None:
        with self._lock:
            stream.write(text)
            stream.flush()

    def print_timestamp(self) -> None:
        self._emit(self.out, f"{self.get_date_formatted()} ")

    def print_error_timestamp(self) -> None:
        self._emit(self.err, f"{self.get_date_formatted()} ")

    def print(self, msg: Any) -> None:
        self._emit(self.out, f"{self._prefix()}{msg}")

    def println(self, msg: Any) -> None:
        self._emit(self.out, f"{self._prefix()}{msg}\n")

    def error_print(self, msg: Any) -> None:
        self._emit(self.err, f"{self._prefix()}{msg}")

    def error_println(self, msg: Any) -> None:
        self._emit(self.err, f"{self._prefix()}{msg}\n")

    class Builder:
        def __init__(self, level: int, timestamping: bool) -> None:
            self._level = level
            self._timestamping = timestamping
            self._date_format: DateFormat | str | None = None

        def with_format(self, date_format: DateFormat | str) -> TerminalPrinter.Builder:
            self._date_format = date_format
            return self

        def build(self) -> TerminalPrinter:
            return TerminalPrinter(self._level, self._timestamping, self._date_format)
