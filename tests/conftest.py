"""Root test configuration: keep LINEDIFF_* settings from the environment out of tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop any LINEDIFF_* env vars set by the caller's shell."""
    for name in list(os.environ):
        if name.startswith("LINEDIFF_"):
            monkeypatch.delenv(name)
