"""Shared fixtures for the test suite."""

import io

import pytest

from core import config
from core.terminal import InputError


class FakeTerminal:
    """Terminal double that replays scripted keys and records mode changes.

    A key given as an exception instance is raised from read_key instead.
    """

    def __init__(self, keys=(), fail_enable=False):
        self.keys = list(keys)
        self.fail_enable = fail_enable
        self.calls = []
        self.reads = 0

    def enable_raw_mode(self):
        self.calls.append("enable")
        if self.fail_enable:
            raise InputError("not a terminal")

    def disable_raw_mode(self):
        self.calls.append("disable")

    def read_key(self):
        self.reads += 1
        if not self.keys:
            raise InputError("End of input while waiting for a key")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


@pytest.fixture
def fake_terminal():
    """Factory for FakeTerminal instances."""
    return FakeTerminal


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def store_file(tmp_path, monkeypatch):
    """Point the credential store at a temporary file."""
    path = tmp_path / "passwords.txt"
    monkeypatch.setattr(config, "PASSWORDS_FILE", str(path))
    return path
