"""Tests for PrinterSettings loading and printer construction."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cdprinter.ansi import Attribute, BColor, FColor
from cdprinter.config import DEFAULT_CONFIG_PATH, PrinterSettings, build_printer
from cdprinter.printers import ColoredPrinter, FilePrinter, TerminalPrinter


class TestSettingsDefaults:
    def test_defaults(self):
        s = PrinterSettings()
        assert s.printer == "terminal"
        assert s.level == 0
        assert s.timestamping is False
        assert s.date_format == "yyyy-MM-dd HH:mm:ss"
        assert s.encoding == "utf-8"
        assert s.log_file is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CDPRINTER_LEVEL", "3")
        monkeypatch.setenv("CDPRINTER_TIMESTAMPING", "true")
        s = PrinterSettings()
        assert s.level == 3
        assert s.timestamping is True


class TestSettingsValidation:
    def test_negative_level(self):
        with pytest.raises(ValidationError):
            PrinterSettings(level=-1)

    def test_unknown_printer(self):
        with pytest.raises(ValidationError):
            PrinterSettings(printer="html")

    def test_bad_date_format(self):
        with pytest.raises(ValidationError):
            PrinterSettings(date_format="yyyy-qq")

    def test_bad_color(self):
        with pytest.raises(ValidationError):
            PrinterSettings(foreground="purple")


class TestSettingsLoad:
    def test_load_default(self):
        s = PrinterSettings.load()
        assert isinstance(s, PrinterSettings)

    def test_default_config_ships_with_package(self):
        import cdprinter

        assert DEFAULT_CONFIG_PATH.parent == Path(cdprinter.__file__).parent
        assert DEFAULT_CONFIG_PATH.is_file()
        s = PrinterSettings.load()
        assert s.printer == "colored"
        assert s.level == 1

    def test_load_from_yaml(self, tmp_path):
        config_file = tmp_path / "printer.yaml"
        config_file.write_text(
            "printer: file\n"
            "log_file: app.log\n"
            "level: 2\n"
            "timestamping: true\n"
            "date_format: HH:mm\n"
        )
        s = PrinterSettings.load(config_file)
        assert s.printer == "file"
        assert s.log_file.name == "app.log"
        assert s.level == 2
        assert s.timestamping is True
        assert s.date_format == "HH:mm"

    def test_load_nonexistent_path(self, tmp_path):
        """Non-existent config should use defaults."""
        s = PrinterSettings.load(tmp_path / "nonexistent.yaml")
        assert s.printer == "terminal"

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        s = PrinterSettings.load(config_file)
        assert s.level == 0

    def test_overrides_win(self, tmp_path):
        config_file = tmp_path / "printer.yaml"
        config_file.write_text("level: 2\nforeground: red\n")
        s = PrinterSettings.load(str(config_file), level=5, foreground=None)
        assert s.level == 5
        assert s.foreground == "red"


class TestBuildPrinter:
    def test_terminal(self):
        printer = build_printer(PrinterSettings(level=2, timestamping=True))
        assert isinstance(printer, TerminalPrinter)
        assert printer.level == 2
        assert printer.is_logging_timestamps()

    def test_colored(self):
        s = PrinterSettings(printer="colored", attribute="bold", foreground="red", background="white")
        printer = build_printer(s)
        assert isinstance(printer, ColoredPrinter)
        assert printer.attribute is Attribute.BOLD
        assert printer.foreground is FColor.RED
        assert printer.background is BColor.WHITE

    def test_file(self, registry, tmp_path):
        s = PrinterSettings(printer="file", log_file=tmp_path / "out.log", date_format="yyyy")
        printer = build_printer(s, registry=registry)
        assert isinstance(printer, FilePrinter)
        assert printer.writer is registry.get(tmp_path / "out.log")
        assert printer.date_format.pattern == "yyyy"

    def test_file_requires_path(self):
        with pytest.raises(ValueError, match="log_file"):
            build_printer(PrinterSettings(printer="file"))

    def test_file_open_failure(self, registry, tmp_path):
        s = PrinterSettings(printer="file", log_file=tmp_path / "missing" / "out.log")
        with pytest.raises(OSError):
            build_printer(s, registry=registry)
