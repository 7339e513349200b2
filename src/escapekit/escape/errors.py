"""Errors raised while decoding escaped text."""

from __future__ import annotations


class UnescapeError(ValueError):
	"""Base class for decoding errors."""

	def __init__(self, message: str, position: int) -> None:
		"""
		Initialize the error.

		Args:
		        message: Human readable description
		        position: Index of the offending character in the input

		"""
		super().__init__(f"{message} (at position {position})")
		self.position = position


class InvalidEscapeError(UnescapeError):
	"""An escape sequence or character is not valid for the style."""


class TruncatedEscapeError(UnescapeError):
	"""The input ends in the middle of an escape sequence."""


class UnterminatedQuoteError(TruncatedEscapeError):
	"""The input ends inside a quoted section."""
