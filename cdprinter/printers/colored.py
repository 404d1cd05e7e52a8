"""ColoredPrinter — terminal printer with attribute and color styling via rich."""

from __future__ import annotations

from typing import Any, TextIO

from rich.console import Console
from rich.text import Text

from cdprinter.ansi import Attribute, BColor, FColor, style_for
from cdprinter.dates import DateFormat
from cdprinter.printers.base import AbstractPrinter


class ColoredPrinter(AbstractPrinter):
    """Prints styled messages; the timestamp prefix is never styled.

    The printer keeps a current attribute, foreground and background which
    apply to every message; ``print`` and ``println`` accept per-call
    overrides. rich drops the styling when the stream is not a terminal.
    """

    def __init__(
        self,
        level: int = 0,
        timestamping: bool = False,
        date_format: DateFormat | str | None = None,
        *,
        attribute: Attribute = Attribute.NONE,
        foreground: FColor = FColor.NONE,
        background: BColor = BColor.NONE,
        no_color: bool = False,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        super().__init__(level, timestamping, date_format)
        self._attribute = attribute
        self._foreground = foreground
        self._background = background
        common = {"highlight": False, "markup": False, "emoji": False, "soft_wrap": True}
        self._out = Console(file=stdout, no_color=no_color or None, **common)
        self._err = Console(file=stderr, stderr=stderr is None, no_color=no_color or None, **common)

    # -- Colors --------------------------------------------------------------

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    @property
    def foreground(self) -> FColor:
        return self._foreground

    @property
    def background(self) -> BColor:
        return self._background

    def set_attribute(self, attribute: Attribute) -> None:
        self._attribute = attribute

    def set_foreground_color(self, foreground: FColor) -> None:
        self._foreground = foreground

    def set_background_color(self, background: BColor) -> None:
        self._background = background

    def clear(self) -> None:
        """Reset attribute and colors to the terminal defaults."""
        self._attribute = Attribute.NONE
        self._foreground = FColor.NONE
        self._background = BColor.NONE

    def style(
        self,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> str:
        return style_for(
            self._attribute if attribute is None else attribute,
            self._foreground if foreground is None else foreground,
            self._background if background is None else background,
        )

    # -- Output --------------------------------------------------------------

    def _emit(self, console: Console, msg: Any, style: str, end: str = "") -> None:
        text = Text.assemble(self._prefix(), (str(msg), style), end="")
        console.print(text, end=end)

    def print_timestamp(self) -> None:
        self._out.print(f"{self.get_date_formatted()} ", end="")

    def print_error_timestamp(self) -> None:
        self._err.print(f"{self.get_date_formatted()} ", end="")

    def print(
        self,
        msg: Any,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        self._emit(self._out, msg, self.style(attribute, foreground, background))

    def println(
        self,
        msg: Any,
        attribute: Attribute | None = None,
        foreground: FColor | None = None,
        background: BColor | None = None,
    ) -> None:
        self._emit(self._out, msg, self.style(attribute, foreground, background), end="\n")

    def error_print(self, msg: Any) -> None:
        self._emit(self._err, msg, self.style())

    def error_println(self, msg: Any) -> None:
        self._emit(self._err, msg, self.style(), end="\n")

    def __str__(self) -> str:
        return (
            f"{super().__str__()} | attribute: {self._attribute.name}"
            f" | foreground: {self._foreground.name} | background: {self._background.name}"
        )

    class Builder:
        def __init__(self, level: int, timestamping: bool) -> None:
            self._level = level
            self._timestamping = timestamping
            self._date_format: DateFormat | str | None = None
            self._attribute = Attribute.NONE
            self._foreground = FColor.NONE
            self._background = BColor.NONE
            self._no_color = False

        def with_format(self, date_format: DateFormat | str) -> ColoredPrinter.Builder:
            self._date_format = date_format
            return self

        def attribute(self, attribute: Attribute) -> ColoredPrinter.Builder:
            self._attribute = attribute
            return self

        def foreground(self, foreground: FColor) -> ColoredPrinter.Builder:
            self._foreground = foreground
            return self

        def background(self, background: BColor) -> ColoredPrinter.Builder:
            self._background = background
            return self

        def no_color(self, flag: bool = True) -> ColoredPrinter.Builder:
            self._no_color = flag
            return self

        def build(self) -> ColoredPrinter:
            return ColoredPrinter(
                self._level,
                self._timestamping,
                self._date_format,
                attribute=self._attribute,
                foreground=self._foreground,
                background=self._background,
                no_color=self._no_color,
            )
