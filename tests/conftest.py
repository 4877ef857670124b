"""
Shared fixtures.
"""

import os

import pytest


def _gridsnake_keys():
    return [k for k in os.environ if k.startswith("GRIDSNAKE_")]


@pytest.fixture(autouse=True)
def isolated_environ(monkeypatch):
    """Hide GRIDSNAKE_* variables and keep .env loading from leaking between tests."""
    for key in _gridsnake_keys():
        monkeypatch.delenv(key)
    yield
    # load_dotenv writes straight to os.environ, outside monkeypatch
    for key in _gridsnake_keys():
        os.environ.pop(key, None)
