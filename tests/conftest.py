"""
Pytest configuration and fixtures for qrgate tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
from datetime import datetime, timezone
from pathlib import Path

import pytest

from qrgate.formatting import StaticIdentityProvider


PROJECT_ROOT = Path(__file__).resolve().parent.parent


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run parse, validate and format together"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command line"
    )


# =======================
# CODE FIXTURES
# =======================

@pytest.fixture
def valid_code() -> str:
    """A well-formed wristband code"""
    return "1234/5678/01/2024-01-15/10:30/12345678"


@pytest.fixture
def valid_fields() -> dict[str, str]:
    """The six fields of valid_code"""
    return {
        "event": "1234",
        "location": "5678",
        "zone": "01",
        "date": "2024-01-15",
        "time": "10:30",
        "wristband_id": "12345678",
    }


@pytest.fixture
def rules_yaml_path() -> Path:
    """Path to the shipped field rules"""
    return PROJECT_ROOT / "config" / "wristband_rules.yaml"


@pytest.fixture
def codes_file(tmp_path) -> Path:
    """File with two good codes, one bad code and a blank line"""
    path = tmp_path / "scans.txt"
    path.write_text(
        "1234/5678/01/2024-01-15/10:30/12345678\n"
        "\n"
        "9876/5432/99/2024-01-16/14:00/87654321\n"
        "123/5678/01/2024-01-15/10:30/12345678\n",
        encoding="utf-8",
    )
    return path


# =======================
# FORMATTING FIXTURES
# =======================

@pytest.fixture
def operator_provider() -> StaticIdentityProvider:
    """Identity provider for a signed-in checker"""
    return StaticIdentityProvider("checker@example.com")


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 10, 31, 2, 123000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now):
    """Clock that always returns fixed_now"""
    return lambda: fixed_now
