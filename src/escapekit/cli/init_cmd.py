"""Implementation of the init command, which writes a default config file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from escapekit.utils.cli_utils import exit_with_error
from escapekit.utils.config_loader import ConfigError, ConfigLoader

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".escapekit.yml"

PathArg = Annotated[
	Path,
	typer.Argument(
		exists=True,
		file_okay=False,
		dir_okay=True,
		help="Directory to write the config file to",
		show_default=True,
	),
]

ForceFlag = Annotated[
	bool,
	typer.Option(
		"--force",
		"-f",
		help="Force overwrite an existing config file",
	),
]


def register_command(app: typer.Typer) -> None:
	"""Register the init command with the CLI app."""

	@app.command(name="init")
	def init_command(path: PathArg = Path(), force_flag: ForceFlag = False) -> None:
		"""Write a config file with the default settings."""
		config_file = path.resolve() / CONFIG_FILE_NAME
		if config_file.exists() and not force_flag:
			typer.echo(f"Config file already exists: {config_file}", err=True)
			typer.echo("Use --force to overwrite.", err=True)
			raise typer.Exit(1)

		try:
			# An existing file keeps its settings and gains any missing defaults.
			# Environment overrides are runtime only and never written out.
			loader = ConfigLoader(
				config_file if config_file.exists() else None,
				search=False,
				apply_env=False,
			)
			loader.save(config_file)
		except ConfigError as e:
			exit_with_error("Could not write the config file", exception=e)

		typer.echo(f"Created config file: {config_file}")
