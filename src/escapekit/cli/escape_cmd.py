"""CLI command for escaping text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from escapekit.escape import EscapeStyle, ScriptFlags, StyleKind, escape
from escapekit.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, iter_input_values
from escapekit.utils.config_loader import ConfigError, ConfigLoader

logger = logging.getLogger(__name__)

# --- Command Argument Annotations ---

TextArg = Annotated[
	list[str] | None,
	typer.Argument(help="Strings to escape (read from stdin, one per line, when omitted)."),
]

StyleOpt = Annotated[
	StyleKind | None,
	typer.Option(
		"--style",
		"-s",
		case_sensitive=False,
		help="Target style. Defaults to escape.style from the config (script).",
	),
]

NoPrintablesFlag = Annotated[
	bool,
	typer.Option("--no-printables", help="Script style: only escape non-printable characters and backslashes."),
]

NoQuotedFlag = Annotated[
	bool,
	typer.Option("--no-quoted", help="Script style: never use single quotes, keep empty strings empty."),
]

NoTildeFlag = Annotated[
	bool,
	typer.Option("--no-tilde", help="Script style: do not escape tildes."),
]

SymbolicFlag = Annotated[
	bool,
	typer.Option("--symbolic", help="Script style: show control characters as visible symbols."),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]


def register_command(app: typer.Typer) -> None:
	"""Register the escape command with the CLI app."""

	@app.command(name="escape")
	def escape_command(
		text: TextArg = None,
		style: StyleOpt = None,
		no_printables: NoPrintablesFlag = False,
		no_quoted: NoQuotedFlag = False,
		no_tilde: NoTildeFlag = False,
		symbolic: SymbolicFlag = False,
		config_path: ConfigOpt = None,
	) -> None:
		"""Escape each string and print one result per line."""
		cli_flags = ScriptFlags(
			no_printables=no_printables,
			no_quoted=no_quoted,
			no_tilde=no_tilde,
			symbolic=symbolic,
		)
		_escape_command_impl(text, style, cli_flags, config_path)


def resolve_style(config: ConfigLoader, kind: StyleKind | None, cli_flags: ScriptFlags) -> EscapeStyle:
	"""
	Combine the configured style with the command-line options.

	Flags given on the command line are added to the configured ones; an
	explicit ``--style`` replaces the configured style.

	Raises:
	        ConfigError: If the configuration is invalid
	        ValueError: If script flags are combined with another style

	"""
	configured = config.get_style("escape")
	kind = kind or configured.kind
	if kind is not StyleKind.SCRIPT:
		if not cli_flags.is_default():
			msg = f"Script flags cannot be used with the {kind.value} style"
			raise ValueError(msg)
		return EscapeStyle(kind)

	config_flags = config.get_script_flags("escape")
	merged = {name: getattr(cli_flags, name) or getattr(config_flags, name) for name in ScriptFlags.names()}
	return EscapeStyle(kind, ScriptFlags(**merged))


def _escape_command_impl(
	text: list[str] | None,
	kind: StyleKind | None,
	cli_flags: ScriptFlags,
	config_path: Path | None,
) -> None:
	"""Implementation of the escape command."""
	try:
		style = resolve_style(ConfigLoader(config_path), kind, cli_flags)
	except ConfigError as e:
		exit_with_error("Invalid configuration", exception=e)
	except ValueError as e:
		exit_with_error(str(e))

	logger.debug("Escaping with style %s and flags %s", style.name, style.flags)
	try:
		for value in iter_input_values(text):
			typer.echo(escape(value, style))
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
