"""Global test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
	"""
	Keep user configuration out of the tests.

	Drops ESCAPEKIT_* variables and points HOME and XDG_CONFIG_HOME at an
	empty directory so no config file from the machine running the tests is
	picked up.

	"""
	for name in list(os.environ):
		if name.startswith("ESCAPEKIT_"):
			monkeypatch.delenv(name)

	home = tmp_path_factory.mktemp("home")
	monkeypatch.setenv("HOME", str(home))
	monkeypatch.setattr("escapekit.utils.config_loader.xdg_config_home", str(home / ".config"))


@pytest.fixture(autouse=True)
def reset_root_logger() -> None:
	"""Remove handlers added by setup_logging during a test."""
	root_logger = logging.getLogger()
	handlers = root_logger.handlers[:]
	level = root_logger.level
	yield
	for handler in root_logger.handlers[:]:
		if handler not in handlers:
			root_logger.removeHandler(handler)
			handler.close()
	root_logger.setLevel(level)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
	"""Path for a temporary config file."""
	return tmp_path / ".escapekit.yml"
