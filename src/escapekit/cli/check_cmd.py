"""CLI command for validating function names."""

from __future__ import annotations

from typing import Annotated

import typer

from escapekit.escape import escape
from escapekit.utils.names import valid_func_name

NamesArg = Annotated[list[str], typer.Argument(help="Names to check.")]


def register_command(app: typer.Typer) -> None:
	"""Register the check-name command with the CLI app."""

	@app.command(name="check-name")
	def check_name_command(names: NamesArg) -> None:
		"""Check that each name can be used as a function name."""
		invalid = [name for name in names if not valid_func_name(name)]
		for name in invalid:
			# Escape so empty names and control characters stay visible
			typer.echo(f"Invalid function name: {escape(name)}", err=True)
		if invalid:
			raise typer.Exit(1)
