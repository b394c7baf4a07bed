"""Shared fixtures: keep tests away from the real config, cache and logging setup."""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point config/cache lookups at a temp dir and restore root logging afterwards."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "cache"))

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def workspace(tmp_path):
    """A directory tree with two components: a and b/c."""
    root = tmp_path / "workspace"
    (root / "a").mkdir(parents=True)
    (root / "a" / "main.tf").write_text('resource "null_resource" "a" {}')
    (root / "a" / "variables.tf").write_text("")
    (root / "b" / "c").mkdir(parents=True)
    (root / "b" / "c" / "main.tf").write_text('resource "null_resource" "c" {}')
    (root / "b" / "README.md").write_text("not a component")
    return root
