"""Base classes shared by the test suites."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner


class FileSystemTestBase:
	"""Run each test inside its own temporary working directory."""

	temp_dir: Path

	@pytest.fixture(autouse=True)
	def setup_temp_dir(self, tmp_path: Path) -> None:
		"""Change into a fresh temporary directory for the test."""
		self.temp_dir = tmp_path
		old_cwd = Path.cwd()
		os.chdir(tmp_path)
		yield
		os.chdir(old_cwd)

	def create_test_file(self, relative_path: str, content: str) -> Path:
		"""Create a file below the temporary directory."""
		path = self.temp_dir / relative_path
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(content, encoding="utf-8")
		return path


class CLITestBase(FileSystemTestBase):
	"""Base class for tests that invoke the command-line interface."""

	runner: CliRunner

	@pytest.fixture(autouse=True)
	def setup_cli(self) -> None:
		"""Create a CLI runner."""
		self.runner = CliRunner()
