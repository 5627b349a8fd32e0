"""
Shared fixtures for the dollcode test suite
"""

import pytest

from dollcode import CharacterSet
from dollcode.constants import ENV_CHAR1, ENV_CHAR2, ENV_CHAR3, ENV_SEPARATOR, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DOLLCODE_* variables from the host out of every test."""
    for name in (ENV_CHAR1, ENV_CHAR2, ENV_CHAR3, ENV_SEPARATOR, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def digit_charset():
    """Readable ASCII character set: digits 1-3 and a pipe separator."""
    return CharacterSet(char1='1', char2='2', char3='3', separator='|')
