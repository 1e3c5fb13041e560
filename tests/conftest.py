"""
Pytest configuration for the Foodbase test suite.

Puts the project root on sys.path and keeps the developer's environment
variables out of the Settings objects built by the tests.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.config import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Drop any environment variable that would override a Settings field"""
    for field_name in Settings.model_fields:
        monkeypatch.delenv(field_name.upper(), raising=False)
        monkeypatch.delenv(field_name, raising=False)
