"""WriterRegistry — deduplicates writer handles by absolute file path."""

from __future__ import annotations

import atexit
import logging
import os
import threading
from pathlib import Path

from cdprinter.logging.writer import WriterHandle

logger = logging.getLogger(__name__)


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Absolute, user-expanded form of *path*, used as the registry key."""
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


class WriterRegistry:
    """Owns one ``WriterHandle`` per absolute path.

    Handles are created lazily on the first ``acquire`` for a path and stay
    registered until the process exits; each new handle registers its
    ``close`` with :mod:`atexit` so buffered output survives a clean exit.

    The registry lock only guards the map. Writes go through the handle's
    own lock, so printers on different files never contend.
    """

    def __init__(self, *, encoding: str | None = None, register_atexit: bool = True) -> None:
        self._handles: dict[Path, WriterHandle] = {}
        self._lock = threading.Lock()
        self._encoding = encoding
        self._register_atexit = register_atexit

    def acquire(
        self,
        path: str | os.PathLike[str],
        *,
        encoding: str | None = None,
    ) -> WriterHandle:
        """Return the shared handle for *path*, opening the file if needed.

        The encoding only applies when this call creates the handle; an
        existing handle keeps the encoding it was opened with.
        """
        key = normalize_path(path)
        with self._lock:
            handle = self._handles.get(key)
        if handle is not None:
            return handle

        # open outside the map lock so a slow filesystem only stalls this path
        created = WriterHandle(key, encoding=encoding or self._encoding)
        with self._lock:
            handle = self._handles.setdefault(key, created)
        if handle is not created:
            # lost the race, another thread registered this path first
            created.close()
            return handle

        if self._register_atexit:
            atexit.register(handle.close)
        logger.debug("Registered writer for %s", key)
        return handle

    def get(self, path: str | os.PathLike[str]) -> WriterHandle | None:
        with self._lock:
            return self._handles.get(normalize_path(path))

    def paths(self) -> list[Path]:
        with self._lock:
            return list(self._handles)

    def close_all(self) -> None:
        """Close every registered handle. Entries stay in the map."""
        with self._lock:
            handles = list(self._handles.values())
        for handle in handles:
            handle.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.get(path) is not None

    def __enter__(self) -> WriterRegistry:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_all()


_default: WriterRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> WriterRegistry:
    """The process-wide registry used when a printer is not given one."""
    global _default
    with _default_lock:
        if _default is None:
            _default = WriterRegistry()
        return _default
