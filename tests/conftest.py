"""Pytest fixtures for sexptree tests."""

import pytest

import sexptree.cli.config_cmd
import sexptree.config
from sexptree.log import configure_logging


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty project with no user config.

    The project directory holds a .git marker so config discovery never
    climbs above it.
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()

    user_config = tmp_path / "user" / "config.toml"
    monkeypatch.setattr(sexptree.config, "USER_CONFIG_PATH", user_config)
    monkeypatch.setattr(sexptree.cli.config_cmd, "USER_CONFIG_PATH", user_config)
    monkeypatch.chdir(project)

    yield project

    configure_logging(verbose=False)


@pytest.fixture
def project_dir(isolated_config):
    """Path of the current (empty) project directory."""
    return isolated_config


@pytest.fixture
def user_config_path(tmp_path):
    """Path the user-level config is read from during tests."""
    return tmp_path / "user" / "config.toml"


@pytest.fixture
def expr_file(tmp_path):
    """A file with one expression per line and a blank line in between."""
    path = tmp_path / "exprs.txt"
    path.write_text("((car cdr) cdr)\n\n(1 2)\n", encoding="utf-8")
    return path
