"""FilePrinter — a printer that appends to a file through a shared writer.

Every ``FilePrinter`` pointing at the same absolute path shares one
``WriterHandle`` from its registry, so many printers (and threads) can log
to one file without tearing each other's lines.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from cdprinter.dates import DateFormat
from cdprinter.logging.registry import WriterRegistry, default_registry
from cdprinter.logging.writer import WriterHandle
from cdprinter.printers.base import AbstractPrinter


class FilePrinter(AbstractPrinter):
    """Printer writing whole lines to a registry-managed file handle.

    Each call composes its full line (timestamp, level tag, message) and
    hands it to the writer in a single ``write``.

    Raises ``OSError`` from the constructor if the file cannot be opened.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        level: int = 0,
        timestamping: bool = False,
        date_format: DateFormat | str | None = None,
        *,
        registry: WriterRegistry | None = None,
        encoding: str | None = None,
    ) -> None:
        super().__init__(level, timestamping, date_format)
        self._registry = registry if registry is not None else default_registry()
        self._writer = self._registry.acquire(path, encoding=encoding)

    @property
    def writer(self) -> WriterHandle:
        return self._writer

    @property
    def path(self) -> Path:
        return self._writer.path

    # -- Output --------------------------------------------------------------

    def print_timestamp(self) -> None:
        self._writer.write(f"{self.get_date_formatted()} ")

    def print_error_timestamp(self) -> None:
        self.print_timestamp()

    def print(self, msg: Any) -> None:
        self._writer.write(f"{self._prefix()}{msg}")

    def println(self, msg: Any) -> None:
        self._writer.write(f"{self._prefix()}{msg}\n")

    def error_print(self, msg: Any) -> None:
        self.print(msg)

    def error_println(self, msg: Any) -> None:
        self.println(msg)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        """Close the shared handle; every printer on this path goes quiet."""
        self._writer.close()

    def __str__(self) -> str:
        return f"{super().__str__()} | {self.path}"

    # -- Builder -------------------------------------------------------------

    class Builder:
        """Fluent construction; the timestamp format defaults to ISO 8601."""

        def __init__(self, path: str | os.PathLike[str], level: int, timestamping: bool) -> None:
            self._path = path
            self._level = level
            self._timestamping = timestamping
            self._date_format: DateFormat | str | None = None
            self._registry: WriterRegistry | None = None
            self._encoding: str | None = None

        def with_format(self, date_format: DateFormat | str) -> FilePrinter.Builder:
            self._date_format = date_format
            return self

        def with_registry(self, registry: WriterRegistry) -> FilePrinter.Builder:
            self._registry = registry
            return self

        def with_encoding(self, encoding: str) -> FilePrinter.Builder:
            self._encoding = encoding
            return self

        def build(self) -> FilePrinter:
            return FilePrinter(
                self._path,
                self._level,
                self._timestamping,
                self._date_format,
                registry=self._registry,
                encoding=self._encoding,
            )
