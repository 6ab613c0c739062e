"""Shared test fixtures for slice-text."""

import pytest

from slice_text.slicer import TextSlicer


@pytest.fixture(autouse=True)
def isolated_config_dirs(tmp_path, monkeypatch):
    """Point user and project preset lookups at empty temporary directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def slicer():
    """Create a TextSlicer with default options."""
    return TextSlicer()
