"""Regex style: turn text into a pattern that matches it literally."""

from __future__ import annotations

from .charclass import (
	HEX_DIGITS,
	REGEX_METACHARACTERS,
	REGEX_NAMED_CONTROLS,
	hex_escape,
	is_printable,
)
from .errors import InvalidEscapeError, TruncatedEscapeError

_DECODE_NAMED = {code: char for char, code in REGEX_NAMED_CONTROLS.items()}
_DECODE_NAMED.update({"a": "\a", "v": "\v"})

_HEX_WIDTHS = {"x": 2, "u": 4, "U": 8}


def escape_regex(text: str) -> str:
	r"""
	Escape regex metacharacters and non-printable characters.

	Each character is classified on its own, so a backslash in the input
	becomes ``\\`` and whatever follows it is escaped independently.

	Examples:
	        >>> escape_regex("$17.42 is your total?")
	        '\\$17\\.42 is your total\\?'

	"""
	out: list[str] = []
	for char in text:
		if char in REGEX_METACHARACTERS:
			out.append("\\" + char)
		elif char in REGEX_NAMED_CONTROLS:
			out.append("\\" + REGEX_NAMED_CONTROLS[char])
		elif not is_printable(char):
			out.append(hex_escape(char))
		else:
			out.append(char)
	return "".join(out)


def unescape_regex(text: str) -> str:
	"""
	Decode a literal pattern produced by :func:`escape_regex`.

	Raises:
	        InvalidEscapeError: On an unescaped metacharacter or an escape that
	                does not stand for a literal character
	        TruncatedEscapeError: If the text ends inside an escape

	"""
	out: list[str] = []
	pos = 0
	while pos < len(text):
		char = text[pos]
		if char != "\\":
			if char in REGEX_METACHARACTERS:
				msg = f"Unescaped metacharacter {char!r}"
				raise InvalidEscapeError(msg, pos)
			out.append(char)
			pos += 1
			continue

		if pos + 1 >= len(text):
			msg = "Trailing backslash"
			raise TruncatedEscapeError(msg, pos)
		code = text[pos + 1]
		if code in REGEX_METACHARACTERS:
			out.append(code)
			pos += 2
		elif code in _DECODE_NAMED:
			out.append(_DECODE_NAMED[code])
			pos += 2
		elif code in _HEX_WIDTHS:
			width = _HEX_WIDTHS[code]
			digits = text[pos + 2 : pos + 2 + width]
			if len(digits) < width:
				msg = f"Incomplete \\{code} escape"
				raise TruncatedEscapeError(msg, pos)
			if not all(c in HEX_DIGITS for c in digits):
				msg = f"Invalid hex digits '{digits}'"
				raise InvalidEscapeError(msg, pos)
			value = int(digits, 16)
			if value > 0x10FFFF:
				msg = f"Code point U+{value:X} is out of range"
				raise InvalidEscapeError(msg, pos)
			out.append(chr(value))
			pos += 2 + width
		else:
			msg = f"Escape \\{code} does not stand for a literal character"
			raise InvalidEscapeError(msg, pos)
	return "".join(out)
