"""WriterHandle — one lock-guarded append-mode text sink per file path."""

from __future__ import annotations

import codecs
import contextlib
import locale
import logging
import threading
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def resolve_encoding(encoding: str | None = None) -> str:
    """Return *encoding* if Python knows the codec, else the platform default."""
    wanted = encoding or DEFAULT_ENCODING
    try:
        return codecs.lookup(wanted).name
    except LookupError:
        fallback = locale.getpreferredencoding(False)
        logger.debug("Encoding %r unavailable, falling back to %r", wanted, fallback)
        return fallback


class WriterHandle:
    """Append-mode text writer serialized by its own re-entrant lock.

    Once closed, ``write``/``flush`` become no-ops so late writers racing
    the exit hook never raise.
    """

    def __init__(self, path: Path, *, encoding: str | None = None) -> None:
        self._path = path
        self._encoding = resolve_encoding(encoding)
        self._lock = threading.RLock()
        # Raises OSError to the caller; nothing is registered on failure
        self._sink: IO[str] | None = open(  # noqa: SIM115
            path, mode="a", encoding=self._encoding,
        )
        self._open = True
        logger.debug("Opened writer for %s (%s)", path, self._encoding)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def is_open(self) -> bool:
        return self._open

    def write(self, text: str) -> None:
        with self._lock:
            if self._open:
                self._sink.write(text)

    def append(self, text: str) -> WriterHandle:
        self.write(text)
        return self

    def flush(self) -> None:
        with self._lock:
            if self._open:
                self._sink.flush()

    def close(self) -> None:
        """Flush and release the file. Safe to call any number of times."""
        with self._lock:
            if not self._open:
                return
            self._open = False
            sink, self._sink = self._sink, None
            # each step on its own so a failed flush still releases the file
            with contextlib.suppress(OSError, ValueError):
                sink.flush()
            with contextlib.suppress(OSError, ValueError):
                sink.close()
            logger.debug("Closed writer for %s", self._path)

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"WriterHandle({str(self._path)!r}, {state})"
