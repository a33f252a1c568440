"""Shared test fixtures for the numf test suite.

WHY: numf.config reads NUMF_* variables (and a .env file) at import time.
A developer's shell defaults must not change what the tests expect, so
every test runs against the built-in defaults.

HOW: An autouse fixture pins the config module's constants with
monkeypatch; tests that exercise environment defaults override them
again locally.

RULES:
- Every test sees hex output, no prefix, no padding, upper case
- SAMPLE_VALUES covers zero, single-byte, multi-byte and huge values
"""

import pytest

from numf import config

SAMPLE_VALUES = [
    0,
    1,
    0xFF,
    0x100,
    1337,
    0xDEADBEEF,
    0x4141414141414141,
    2 ** 200 + 12345,
]


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Reset environment-derived defaults for every test."""
    monkeypatch.setattr(config, "DEFAULT_FORMAT", "hex")
    monkeypatch.setattr(config, "DEFAULT_PREFIX", False)
    monkeypatch.setattr(config, "DEFAULT_PADDING", False)
    monkeypatch.setattr(config, "DEFAULT_UPPERCASE", True)
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")


@pytest.fixture
def sample_values():
    """Representative non-negative integers, including one beyond 64 bits."""
    return list(SAMPLE_VALUES)
