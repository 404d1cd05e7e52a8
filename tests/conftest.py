"""Shared test fixtures."""

import pytest

from cdprinter.logging.registry import WriterRegistry


@pytest.fixture
def registry():
    """A fresh registry per test; handles are closed on teardown."""
    reg = WriterRegistry(register_atexit=False)
    yield reg
    reg.close_all()


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "log.txt"
