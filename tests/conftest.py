"""Shared fixtures: an application base path with a representations folder."""

import textwrap
from pathlib import Path

import pytest

from representations.support import Config, Finder, Storage


@pytest.fixture(autouse=True)
def app_base(tmp_path, monkeypatch):
    """Point the framework at a fresh application directory."""
    monkeypatch.delenv("REPRESENTATIONS_FOLDER", raising=False)
    Storage.initialize(tmp_path)
    Finder.clear_paths()
    Config.clear_runtime_overrides()
    yield tmp_path
    Finder.clear_paths()
    Config.clear_runtime_overrides()


@pytest.fixture
def representations_dir(app_base) -> Path:
    path = app_base / "views" / "representations"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_representation(representations_dir):
    """Write a representation file and return its path."""

    def write(name: str, source: str) -> Path:
        path = representations_dir / f"{name}.py"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source))
        return path

    return write
