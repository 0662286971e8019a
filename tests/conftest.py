"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from text_tables.configuration import MODE_ENV, SHOW_STATUS_ENV

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the text-tables settings from the environment for one test."""
    for name in (MODE_ENV, SHOW_STATUS_ENV):
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
