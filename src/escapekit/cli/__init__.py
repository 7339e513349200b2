"""Command-line interface package for EscapeKit."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from escapekit import __version__
from escapekit.utils.log_setup import setup_logging

from .check_cmd import register_command as register_check_command
from .escape_cmd import register_command as register_escape_command
from .init_cmd import register_command as register_init_command
from .unescape_cmd import register_command as register_unescape_command

logger = logging.getLogger(__name__)

# Load ESCAPEKIT_* overrides from .env.local first, then fall back to .env
env_local = Path(".env.local")
if env_local.exists():
	load_dotenv(dotenv_path=env_local)
	logger.debug("Loaded environment variables from %s", env_local)
else:
	env_file = Path(".env")
	if env_file.exists():
		load_dotenv(dotenv_path=env_file)
		logger.debug("Loaded environment variables from %s", env_file)

# Determine the invoked command name for help message customization
invoked_command = Path(sys.argv[0]).name
if invoked_command == "ek":
	alias_note = "\n\nNote: 'ek' is an alias for 'escapekit'."
elif invoked_command == "escapekit":
	alias_note = "\n\nNote: You can also use 'ek' as a shorter alias."
else:
	alias_note = ""

app = typer.Typer(
	help=f"EscapeKit - Escape text for shells, URLs, variable names and regexes\n\nVersion: {__version__}{alias_note}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"EscapeKit version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/escapekit_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["is_output_log"] = is_output_log

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"escapekit_{current_time}.log"

	setup_logging(is_verbose=is_verbose or is_output_log, log_file_path=log_file_path_to_use)


# --- Register commands ---

register_escape_command(app)
register_unescape_command(app)
register_check_command(app)
register_init_command(app)


# --- Main Entry Point ---
def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
