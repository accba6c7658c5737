"""Shared fixtures for bigram tests."""

import pytest


@pytest.fixture
def write_text(tmp_path):
    """Factory: write str content to a file under tmp_path, return its path."""
    def _write(content, name="input.txt", newline=None):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline=newline) as f:
            f.write(content)
        return path
    return _write


@pytest.fixture
def write_bytes(tmp_path):
    """Factory: write raw bytes to a file under tmp_path, return its path."""
    def _write(data, name="input.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
