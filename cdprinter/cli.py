"""Typer CLI — print leveled, timestamped, colored messages."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from cdprinter import __version__
from cdprinter.ansi import Attribute, BColor, FColor
from cdprinter.config import PrinterSettings, build_printer
from cdprinter.logging.registry import default_registry
from cdprinter.printers import AbstractPrinter, ColoredPrinter, FilePrinter, TerminalPrinter

app = typer.Typer(
    name="cdprinter",
    help="cdprinter — colored debug printer for terminals and files",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_settings(config: str | None, **overrides: object) -> PrinterSettings:
    try:
        return PrinterSettings.load(config, **overrides)
    except ValueError as exc:
        err_console.print(f"[red]Invalid configuration:[/] {exc}")
        raise typer.Exit(1) from exc


def _build(settings: PrinterSettings) -> AbstractPrinter:
    try:
        return build_printer(settings)
    except OSError as exc:
        err_console.print(f"[red]Cannot open log file:[/] {exc}")
        raise typer.Exit(1) from exc
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/]")
        raise typer.Exit(1) from exc


@app.command("print")
def print_message(
    message: str = typer.Argument(help="Message to print"),
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Append to this file instead of the terminal",
    ),
    level: int | None = typer.Option(None, "--level", "-l", help="Maximum debug level printed"),
    timestamp: bool = typer.Option(False, "--timestamp", "-t", help="Prefix a timestamp"),
    no_timestamp: bool = typer.Option(
        False, "--no-timestamp", help="Never prefix a timestamp, even if configured",
    ),
    date_format: str | None = typer.Option(
        None, "--format", help="Timestamp pattern, e.g. 'yyyy-MM-dd HH:mm:ss'",
    ),
    debug_level: int | None = typer.Option(
        None, "--debug-level", "-d", help="Print as a debug message at this level",
    ),
    error: bool = typer.Option(False, "--error", "-e", help="Print to the error stream"),
    no_newline: bool = typer.Option(False, "--no-newline", "-n", help="Do not end the line"),
    attribute: str | None = typer.Option(None, "--attribute", help="bold, underline, ..."),
    foreground: str | None = typer.Option(None, "--foreground", "--fg", help="Text color"),
    background: str | None = typer.Option(None, "--background", "--bg", help="Background color"),
    plain: bool = typer.Option(False, "--plain", help="Black & white terminal output"),
    config: str | None = typer.Option(None, help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Print MESSAGE to the terminal or append it to a file."""
    if timestamp and no_timestamp:
        err_console.print("[red]--timestamp and --no-timestamp are mutually exclusive[/]")
        raise typer.Exit(2)

    printer_type = None
    if file is not None:
        printer_type = "file"
    elif plain:
        printer_type = "terminal"
    elif attribute or foreground or background:
        printer_type = "colored"

    timestamping = None
    if timestamp:
        timestamping = True
    elif no_timestamp:
        timestamping = False

    settings = _load_settings(
        config,
        printer=printer_type,
        log_file=file,
        level=level,
        timestamping=timestamping,
        date_format=date_format,
        attribute=attribute,
        foreground=foreground,
        background=background,
    )
    _setup_logging(verbose, config_level=settings.log_level)
    printer = _build(settings)

    if debug_level is not None:
        if no_newline:
            printer.debug_print(message, debug_level)
        else:
            printer.debug_println(message, debug_level)
    elif error:
        if no_newline:
            printer.error_print(message)
        else:
            printer.error_println(message)
    elif no_newline:
        printer.print(message)
    else:
        printer.println(message)

    if isinstance(printer, FilePrinter):
        printer.flush()


@app.command()
def demo(
    file: Path | None = typer.Option(None, "--file", "-f", help="Also write the demo to this file"),
):
    """Showcase every printer."""
    term = TerminalPrinter.Builder(2, True).with_format("HH:mm:ss").build()
    term.println(term)
    term.println("This is a normal message.")
    term.error_println("This is an error message.")
    term.debug_println("This debug message is always shown.")
    term.debug_println("This level 2 message is shown.", 2)
    term.debug_println("This level 3 message is hidden.", 3)

    colored = (
        ColoredPrinter.Builder(1, False)
        .foreground(FColor.WHITE)
        .background(BColor.BLUE)
        .build()
    )
    colored.println(colored)
    colored.set_attribute(Attribute.REVERSE)
    colored.println("This is a reversed message.")
    colored.clear()
    colored.print("Mixed: ")
    colored.print("RED", foreground=FColor.RED)
    colored.print(" GREEN", foreground=FColor.GREEN)
    colored.println(" BOLD", attribute=Attribute.BOLD)
    for color in (FColor.RED, FColor.GREEN, FColor.YELLOW, FColor.BLUE, FColor.MAGENTA, FColor.CYAN):
        colored.print(f" {color.name} ", foreground=FColor.BLACK, background=BColor[color.name])
    colored.println("")

    if file is not None:
        try:
            printer = FilePrinter.Builder(file, 1, True).build()
        except OSError as exc:
            err_console.print(f"[red]Cannot open log file:[/] {exc}")
            raise typer.Exit(1) from exc
        printer.println(printer)
        printer.println("This is a normal message.")
        printer.debug_println("This is a level 1 debug message.", 1)
        printer.flush()
        console.print(f"[green]Demo written to[/] {printer.path}")


@app.command()
def version():
    """Show version."""
    console.print(f"cdprinter v{__version__}")


def main() -> None:
    try:
        app()
    finally:
        default_registry().close_all()
