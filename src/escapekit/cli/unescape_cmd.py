"""CLI command for decoding escaped text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from escapekit.escape import EscapeStyle, StyleKind, UnescapeError, unescape
from escapekit.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, iter_input_values
from escapekit.utils.config_loader import ConfigError, ConfigLoader

logger = logging.getLogger(__name__)

TextArg = Annotated[
	list[str] | None,
	typer.Argument(help="Escaped strings to decode (read from stdin, one per line, when omitted)."),
]

StyleOpt = Annotated[
	StyleKind | None,
	typer.Option(
		"--style",
		"-s",
		case_sensitive=False,
		help="Style the text was escaped with. Defaults to unescape.style from the config (script).",
	),
]

ConfigOpt = Annotated[Path | None, typer.Option("--config", "-c", help="Path to config file")]


def register_command(app: typer.Typer) -> None:
	"""Register the unescape command with the CLI app."""

	@app.command(name="unescape")
	def unescape_command(
		text: TextArg = None,
		style: StyleOpt = None,
		config_path: ConfigOpt = None,
	) -> None:
		"""Decode each escaped string and print one result per line."""
		_unescape_command_impl(text, style, config_path)


def _unescape_command_impl(text: list[str] | None, kind: StyleKind | None, config_path: Path | None) -> None:
	"""Implementation of the unescape command."""
	if kind is None:
		try:
			kind = ConfigLoader(config_path).get_style("unescape").kind
		except ConfigError as e:
			exit_with_error("Invalid configuration", exception=e)
	style = EscapeStyle(kind)

	try:
		for index, value in enumerate(iter_input_values(text), start=1):
			try:
				decoded = unescape(value, style)
			except UnescapeError as e:
				exit_with_error(f"Cannot unescape value {index} as {style.name}: {e}")
			typer.echo(decoded)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
