"""Shared, lock-guarded file writers keyed by absolute path."""

from __future__ import annotations

from cdprinter.logging.registry import WriterRegistry, default_registry
from cdprinter.logging.writer import WriterHandle

__all__ = ["WriterHandle", "WriterRegistry", "default_registry"]
