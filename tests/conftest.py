"""
y86asm Test Configuration
=========================

Shared fixtures for the assembler test suite.
"""

import pytest

from y86asm.config import set_default_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """
    Fixture: isolate every test from Y86ASM_* environment variables.

    Resets the cached default configuration before and after the test so
    values set with monkeypatch are picked up.
    """
    monkeypatch.delenv("Y86ASM_STRICT", raising=False)
    monkeypatch.delenv("Y86ASM_CHECK_OVERLAPS", raising=False)
    set_default_config(None)
    yield
    set_default_config(None)
