"""
Pytest configuration and shared fixtures.

Provides common fixtures for testing:
- A log collaborator recording every message by level
- Property mappings for supported and unsupported runtimes
"""

import pytest


class RecordingLog:
    """Log collaborator that keeps messages per level."""

    def __init__(self):
        self.debugs = []
        self.warnings = []
        self.errors = []

    def debug(self, message):
        self.debugs.append(message)

    def warn(self, message):
        self.warnings.append(message)

    def error(self, message):
        self.errors.append(message)


@pytest.fixture
def log():
    """Fresh recording log for each test."""
    return RecordingLog()


@pytest.fixture
def jdk17_properties():
    """Properties of a runtime that needs the multi-release version."""
    return {"java.version": "17.0.2"}


@pytest.fixture
def jdk11_properties():
    """Properties of an 11.0.x runtime before the backport."""
    return {"java.version": "11.0.10"}


@pytest.fixture(autouse=True)
def clear_java_version_env(monkeypatch):
    """Keep the host environment out of property lookups."""
    monkeypatch.delenv("JAVA_VERSION", raising=False)
    yield
