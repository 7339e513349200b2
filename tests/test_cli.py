"""Tests for the CLI functionality."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import yaml

from escapekit import __version__
from escapekit.cli import app, main
from tests.base import CLITestBase


@pytest.mark.cli
@pytest.mark.unit
class TestCliApp(CLITestBase):
	"""Test cases for the application and its global options."""

	def test_version(self) -> None:
		"""Test the --version option."""
		result = self.runner.invoke(app, ["--version"])
		assert result.exit_code == 0
		assert __version__ in result.stdout

	def test_main_function(self) -> None:
		"""Test that main calls the app and returns its result."""
		with patch("escapekit.cli.app") as mock_app:
			mock_app.return_value = 0
			assert main() == 0
			mock_app.assert_called_once()

	def test_save_log(self) -> None:
		"""Test that --save-log writes a log file."""
		result = self.runner.invoke(app, ["--save-log", "escape", "x"])
		assert result.exit_code == 0
		assert list((self.temp_dir / "logs").glob("escapekit_*.log"))


@pytest.mark.cli
@pytest.mark.unit
class TestEscapeCommand(CLITestBase):
	"""Test cases for the escape command."""

	def test_escape_arguments(self) -> None:
		"""Test that each argument is printed on its own line."""
		result = self.runner.invoke(app, ["escape", "hello world", "it's", ""])
		assert result.exit_code == 0
		assert result.stdout.splitlines() == ["'hello world'", "it\\'s", "''"]

	@pytest.mark.parametrize(
		("style", "expected"),
		[("url", "a%20b%2Fc"), ("var", "a@0020b@002Fc"), ("REGEX", "a b/c")],
	)
	def test_styles(self, style: str, expected: str) -> None:
		"""Test the --style option."""
		result = self.runner.invoke(app, ["escape", "--style", style, "a b/c"])
		assert result.exit_code == 0
		assert result.stdout.splitlines() == [expected]

	def test_script_flags(self) -> None:
		"""Test the script flag options."""
		result = self.runner.invoke(app, ["escape", "--no-quoted", "--no-tilde", "~ a"])
		assert result.exit_code == 0
		assert result.stdout.splitlines() == ["~\\ a"]

		result = self.runner.invoke(app, ["escape", "--symbolic", "bell\x07"])
		assert result.stdout.splitlines() == ["bell\u2407"]

	def test_flags_with_other_style(self) -> None:
		"""Test that script flags are rejected for other styles."""
		result = self.runner.invoke(app, ["escape", "--style", "url", "--symbolic", "x"])
		assert result.exit_code == 1
		assert "Script flags cannot be used" in result.output

	def test_stdin(self) -> None:
		"""Test reading values from stdin."""
		result = self.runner.invoke(app, ["escape", "-s", "regex"], input="a.b\n(c)\n")
		assert result.exit_code == 0
		assert result.stdout.splitlines() == ["a\\.b", "\\(c\\)"]

	def test_config_default_style(self) -> None:
		"""Test that the configured style and flags are used."""
		self.create_test_file(".escapekit.yml", yaml.dump({"escape": {"no_quoted": True}}))
		result = self.runner.invoke(app, ["escape", "a b"])
		assert result.stdout.splitlines() == ["a\\ b"]

		result = self.runner.invoke(app, ["escape", "--style", "url", "a b"])
		assert result.stdout.splitlines() == ["a%20b"]

	def test_invalid_config(self) -> None:
		"""Test that a broken config file is reported."""
		config = self.create_test_file("broken.yml", yaml.dump({"escape": {"style": "shell"}}))
		result = self.runner.invoke(app, ["escape", "--config", str(config), "x"])
		assert result.exit_code == 1
		assert "Invalid configuration" in result.output


@pytest.mark.cli
@pytest.mark.unit
class TestUnescapeCommand(CLITestBase):
	"""Test cases for the unescape command."""

	def test_unescape(self) -> None:
		"""Test decoding arguments."""
		result = self.runner.invoke(app, ["unescape", "'hello world'", "it\\'s"])
		assert result.exit_code == 0
		assert result.stdout.splitlines() == ["hello world", "it's"]

	def test_unescape_style(self) -> None:
		"""Test decoding with another style."""
		result = self.runner.invoke(app, ["unescape", "--style", "url", "caf%C3%A9"])
		assert result.exit_code == 0
		assert result.stdout.splitlines() == ["caf\xe9"]

	def test_unescape_error(self) -> None:
		"""Test that invalid input is reported."""
		result = self.runner.invoke(app, ["unescape", "ok", "'open"])
		assert result.exit_code == 1
		assert "Cannot unescape value 2" in result.output


@pytest.mark.cli
@pytest.mark.unit
class TestCheckNameCommand(CLITestBase):
	"""Test cases for the check-name command."""

	def test_valid_names(self) -> None:
		"""Test that valid names exit cleanly."""
		result = self.runner.invoke(app, ["check-name", "foo", "bar-baz"])
		assert result.exit_code == 0

	def test_invalid_names(self) -> None:
		"""Test that invalid names are listed."""
		result = self.runner.invoke(app, ["check-name", "ok", "a/b", "", "--", "-x"])
		assert result.exit_code == 1
		assert "Invalid function name: a/b" in result.output
		assert "Invalid function name: ''" in result.output
		assert "Invalid function name: -x" in result.output
		assert "Invalid function name: ok" not in result.output


@pytest.mark.cli
@pytest.mark.unit
class TestInitCommand(CLITestBase):
	"""Test cases for the init command."""

	def test_init_creates_config(self) -> None:
		"""Test that init writes the defaults."""
		result = self.runner.invoke(app, ["init", str(self.temp_dir)])
		assert result.exit_code == 0
		config = yaml.safe_load((self.temp_dir / ".escapekit.yml").read_text())
		assert config["escape"]["style"] == "script"

	def test_init_ignores_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Test that ESCAPEKIT_* variables are not written to the config file."""
		monkeypatch.setenv("ESCAPEKIT_ESCAPE_STYLE", "url")
		monkeypatch.setenv("ESCAPEKIT_SECRET_TOKEN", "abc123")
		result = self.runner.invoke(app, ["init", str(self.temp_dir)])
		assert result.exit_code == 0
		config = yaml.safe_load((self.temp_dir / ".escapekit.yml").read_text())
		assert config["escape"]["style"] == "script"
		assert "secret" not in config

		result = self.runner.invoke(app, ["init", "--force", str(self.temp_dir)])
		assert result.exit_code == 0
		config = yaml.safe_load((self.temp_dir / ".escapekit.yml").read_text())
		assert config["escape"]["style"] == "script"
		assert "secret" not in config

	def test_init_existing_file(self) -> None:
		"""Test that init refuses to overwrite without --force."""
		self.create_test_file(".escapekit.yml", yaml.dump({"escape": {"style": "var"}}))
		result = self.runner.invoke(app, ["init", str(self.temp_dir)])
		assert result.exit_code == 1
		assert "already exists" in result.output

		result = self.runner.invoke(app, ["init", "--force", str(self.temp_dir)])
		assert result.exit_code == 0
		config = yaml.safe_load((self.temp_dir / ".escapekit.yml").read_text())
		assert config["escape"]["style"] == "var"
		assert config["escape"]["no_quoted"] is False
