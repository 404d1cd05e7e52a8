"""AbstractPrinter — level, timestamp and date-format state shared by all printers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from cdprinter.dates import DateFormat


class AbstractPrinter(ABC):
    """Base for terminal, colored and file printers.

    ``level`` is the maximum debug level the printer emits; ``0`` turns
    debug output off entirely. Regular and error output ignore the level.
    """

    def __init__(
        self,
        level: int = 0,
        timestamping: bool = False,
        date_format: DateFormat | str | None = None,
    ) -> None:
        self._level = 0
        self._timestamping = False
        self._date_format = DateFormat()
        self.set_level(level)
        self.set_timestamping(timestamping)
        if date_format is not None:
            self.set_date_format(date_format)

    # -- Configuration -------------------------------------------------------

    @property
    def level(self) -> int:
        return self._level

    def set_level(self, level: int) -> None:
        if level < 0:
            raise ValueError(f"Debug level must be >= 0, got {level}")
        self._level = level

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    def set_date_format(self, date_format: DateFormat | str) -> None:
        if isinstance(date_format, str):
            date_format = DateFormat(date_format)
        self._date_format = date_format

    def set_timestamping(self, flag: bool) -> None:
        self._timestamping = bool(flag)

    def is_logging_timestamps(self) -> bool:
        return self._timestamping

    def is_logging_debug(self) -> bool:
        return self._level > 0

    def can_print(self, level: int) -> bool:
        return self._level == 0 or level <= self._level

    def get_date_formatted(self) -> str:
        return self._date_format.format()

    # -- Line composition ----------------------------------------------------

    def _prefix(self) -> str:
        return f"{self.get_date_formatted()} " if self._timestamping else ""

    @staticmethod
    def _tagged(msg: Any, level: int) -> str:
        return f"[ {level} ] {msg}"

    def _debug_text(self, msg: Any, level: int | None, newline: bool) -> str | None:
        """The debug message to emit, or ``None`` when filtered out."""
        if not self.is_logging_debug():
            return None
        if level is not None and not self.can_print(level):
            return None
        text = str(msg) if level is None else self._tagged(msg, level)
        return text + "\n" if newline else text

    # -- Output --------------------------------------------------------------

    @abstractmethod
    def print_timestamp(self) -> None: ...

    @abstractmethod
    def print_error_timestamp(self) -> None: ...

    @abstractmethod
    def print(self, msg: Any) -> None: ...

    @abstractmethod
    def println(self, msg: Any) -> None: ...

    @abstractmethod
    def error_print(self, msg: Any) -> None: ...

    @abstractmethod
    def error_println(self, msg: Any) -> None: ...

    def debug_print(self, msg: Any, level: int | None = None) -> None:
        text = self._debug_text(msg, level, newline=False)
        if text is not None:
            self.print(text)

    def debug_println(self, msg: Any, level: int | None = None) -> None:
        text = self._debug_text(msg, level, newline=True)
        if text is not None:
            self.print(text)

    def __str__(self) -> str:
        return (
            f"{type(self).__name__} | level: {self._level}"
            f" | timestamping: {self._timestamping}"
        )
