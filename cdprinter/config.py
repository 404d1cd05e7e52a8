"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cdprinter.ansi import Attribute, BColor, FColor, parse_enum
from cdprinter.dates import DEFAULT_PATTERN, DateFormat
from cdprinter.logging.registry import WriterRegistry
from cdprinter.printers import AbstractPrinter, ColoredPrinter, FilePrinter, TerminalPrinter

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


class PrinterSettings(BaseSettings):
    """Root settings — merges defaults, YAML config, and env vars."""

    model_config = SettingsConfigDict(env_prefix="CDPRINTER_")

    printer: Literal["terminal", "colored", "file"] = "terminal"
    log_file: Path | None = None
    level: int = Field(default=0, ge=0)
    timestamping: bool = False
    date_format: str = DEFAULT_PATTERN
    encoding: str = "utf-8"
    attribute: str = "none"
    foreground: str = "none"
    background: str = "none"
    no_color: bool = False
    log_level: str = "WARNING"

    @field_validator("date_format")
    @classmethod
    def _check_date_format(cls, v: str) -> str:
        DateFormat(v)
        return v

    @field_validator("attribute")
    @classmethod
    def _check_attribute(cls, v: str) -> str:
        parse_enum(Attribute, v)
        return v

    @field_validator("foreground")
    @classmethod
    def _check_foreground(cls, v: str) -> str:
        parse_enum(FColor, v)
        return v

    @field_validator("background")
    @classmethod
    def _check_background(cls, v: str) -> str:
        parse_enum(BColor, v)
        return v

    @classmethod
    def load(cls, config_path: Path | str | None = None, **overrides: Any) -> PrinterSettings:
        """Load settings from YAML file, falling back to defaults.

        Keyword *overrides* that are not ``None`` win over the file.
        """
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


def build_printer(
    settings: PrinterSettings,
    *,
    registry: WriterRegistry | None = None,
) -> AbstractPrinter:
    """Instantiate the printer described by *settings*.

    ``printer: file`` requires ``log_file``; a file that cannot be opened
    raises ``OSError``.
    """
    if settings.printer == "file":
        if settings.log_file is None:
            raise ValueError("printer 'file' requires log_file")
        return FilePrinter(
            settings.log_file,
            settings.level,
            settings.timestamping,
            settings.date_format,
            registry=registry,
            encoding=settings.encoding,
        )
    if settings.printer == "colored":
        return ColoredPrinter(
            settings.level,
            settings.timestamping,
            settings.date_format,
            attribute=parse_enum(Attribute, settings.attribute),
            foreground=parse_enum(FColor, settings.foreground),
            background=parse_enum(BColor, settings.background),
            no_color=settings.no_color,
        )
    return TerminalPrinter(settings.level, settings.timestamping, settings.date_format)
