import io
import os

import pytest
from rich.console import Console


@pytest.fixture
def buffer():
    """In-memory stream machines write to."""
    return io.StringIO()


@pytest.fixture
def console(buffer):
    """Rich console writing plain text into `buffer`."""
    return Console(file=buffer, width=80, color_system=None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep host DRINK_MACHINES_* variables and any local .env out of the tests."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("DRINK_MACHINES_"):
            monkeypatch.delenv(key)
