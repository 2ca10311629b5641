"""Root-level test conftest — fixtures shared across all test files.

Keeps environment-driven configuration (COMPLIANCE_TODAY) from leaking into
tests, so every evaluation date in a test is explicit.
"""
import pytest


@pytest.fixture(autouse=True)
def _clear_compliance_env(monkeypatch):
    """Remove evaluation-date overrides set outside the test."""
    monkeypatch.delenv("COMPLIANCE_TODAY", raising=False)
