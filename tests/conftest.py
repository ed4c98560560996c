"""Root test configuration — isolate tests from the developer's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop PASTEBLOCKS_* env vars so local settings never leak into a test."""
    for name in list(os.environ):
        if name.startswith("PASTEBLOCKS_"):
            monkeypatch.delenv(name, raising=False)
