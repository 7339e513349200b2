"""Utility functions for CLI operations in EscapeKit."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import typer

from escapekit.utils.log_setup import display_error_summary, display_warning_summary

if TYPE_CHECKING:
	from collections.abc import Iterator

logger = logging.getLogger(__name__)


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(error_text)


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_warning_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> NoReturn:
	"""Handles KeyboardInterrupt by printing a message and exiting cleanly."""
	show_warning("Operation cancelled by user.")
	raise typer.Exit(130)  # Standard exit code for SIGINT


def iter_input_values(values: list[str] | None) -> Iterator[str]:
	"""
	Yield the values given on the command line, or stdin lines without them.

	Trailing newlines are stripped from stdin lines; nothing else is touched.

	"""
	if values:
		yield from values
		return

	if sys.stdin.isatty():
		logger.debug("No arguments given and stdin is a terminal; reading until EOF")
	for line in sys.stdin:
		yield line.removesuffix("\n")
