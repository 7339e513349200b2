"""Tests for the variable name escape style."""

from __future__ import annotations

import string

import pytest

from escapekit.escape import VAR, InvalidEscapeError, TruncatedEscapeError, escape, unescape

VAR_SAFE = set(string.ascii_letters + string.digits + "_@")

SAMPLES = [
	"",
	"foo_bar",
	"9lives",
	"12",
	"a-b c",
	"@",
	"@0041",
	"caf\xe9",
	"\U0001f600",
	"\x00\n",
	"\U00010000",
	"__init__",
]


@pytest.mark.unit
@pytest.mark.escape
class TestVarStyle:
	"""Test cases for encoding variable names."""

	def test_identifier_characters_pass_through(self) -> None:
		"""Test that letters, digits and underscores are untouched."""
		assert escape("foo_bar", VAR) == "foo_bar"
		assert escape("FOO9", VAR) == "FOO9"
		assert escape("_1", VAR) == "_1"

	def test_other_characters_are_encoded(self) -> None:
		"""Test the marker and four hex digits."""
		assert escape("a-b", VAR) == "a@002Db"
		assert escape("a b", VAR) == "a@0020b"
		assert escape("@", VAR) == "@0040"
		assert escape("caf\xe9", VAR) == "caf@00E9"
		assert escape("\x00", VAR) == "@0000"

	def test_astral_characters_use_double_marker(self) -> None:
		"""Test code points above the BMP."""
		assert escape("\U0001f600", VAR) == "@@01F600"

	def test_leading_digit_is_encoded(self) -> None:
		"""Test that the result never starts with a digit."""
		assert escape("9lives", VAR) == "@0039lives"
		assert escape("12", VAR) == "@00312"

	def test_empty_string(self) -> None:
		"""Test that the empty string stays empty."""
		assert escape("", VAR) == ""

	@pytest.mark.parametrize("text", SAMPLES)
	def test_output_is_a_name(self, text: str) -> None:
		"""Test the safe set and the leading character."""
		escaped = escape(text, VAR)
		assert set(escaped) <= VAR_SAFE
		assert not escaped[:1].isdigit()

	@pytest.mark.parametrize("text", SAMPLES)
	def test_round_trip(self, text: str) -> None:
		"""Test that decoding restores the original text."""
		assert unescape(escape(text, VAR), VAR) == text

	@pytest.mark.parametrize(
		("text", "error"),
		[
			("a-b", InvalidEscapeError),
			("1abc", InvalidEscapeError),
			("@00", TruncatedEscapeError),
			("@@01F6", TruncatedEscapeError),
			("@00ZZ", InvalidEscapeError),
			("@@00FFFF", InvalidEscapeError),
			("@@110000", InvalidEscapeError),
		],
	)
	def test_errors(self, text: str, error: type[Exception]) -> None:
		"""Test malformed input."""
		with pytest.raises(error):
			unescape(text, VAR)
