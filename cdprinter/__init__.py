"""cdprinter — colored debug printer for terminals and files."""

from __future__ import annotations

__version__ = "1.0.0"

from cdprinter.ansi import Attribute, BColor, FColor  # noqa: E402
from cdprinter.dates import DateFormat  # noqa: E402
from cdprinter.logging import WriterHandle, WriterRegistry, default_registry  # noqa: E402
from cdprinter.printers import (  # noqa: E402
    AbstractPrinter,
    ColoredPrinter,
    FilePrinter,
    TerminalPrinter,
)

__all__ = [
    "AbstractPrinter",
    "Attribute",
    "BColor",
    "ColoredPrinter",
    "DateFormat",
    "FColor",
    "FilePrinter",
    "TerminalPrinter",
    "WriterHandle",
    "WriterRegistry",
    "default_registry",
]
