"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the home directory at an empty temporary location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def frozen_clock():
    """Clock pinned to 2026-02-23 18:00 in whichever tz is requested."""
    def clock(tz):
        return datetime(2026, 2, 23, 18, 0, 0, tzinfo=tz)

    return clock


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
[defaults]
format = "timestamp"
utc = true
'''
    config_file = temp_dir / "after.toml"
    config_file.write_text(config_content)
    return config_file
