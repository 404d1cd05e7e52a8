"""Printers — terminal, colored terminal and file output."""

from __future__ import annotations

from cdprinter.printers.base import AbstractPrinter
from cdprinter.printers.colored import ColoredPrinter
from cdprinter.printers.file import FilePrinter
from cdprinter.printers.terminal import TerminalPrinter

__all__ = ["AbstractPrinter", "ColoredPrinter", "FilePrinter", "TerminalPrinter"]
