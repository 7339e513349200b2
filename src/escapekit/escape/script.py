"""
Script style: escape text for the interactive shell language.

The encoder makes a single pass over the text. While emitting the
backslashed form it records whether anything needed escaping at all and
whether any of it needs more than single quotes can express (a backslash, a
single quote, or a non-printable character). Text that only has simple
specials is then returned wrapped in single quotes, which is shorter and
easier to read than the backslashed form.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .charclass import (
	HEX_DIGITS,
	SCRIPT_NAMED_CONTROLS,
	SCRIPT_SPECIALS,
	control_picture,
	hex_escape,
	is_printable,
)
from .errors import InvalidEscapeError, TruncatedEscapeError, UnterminatedQuoteError

if TYPE_CHECKING:
	from .models import ScriptFlags

EMPTY_QUOTES = "''"

_DECODE_NAMED = {code: char for char, code in SCRIPT_NAMED_CONTROLS.items()}

# Maximum number of hex digits for each numeric escape
_HEX_WIDTHS = {"x": 2, "X": 2, "u": 4, "U": 8}

_OCTAL_DIGITS = frozenset("01234567")
_MAX_OCTAL_WIDTH = 3
_MAX_CODE_POINT = 0x10FFFF


def _escape_non_printable(char: str, *, symbolic: bool) -> str:
	if symbolic:
		picture = control_picture(char)
		if picture is not None:
			return picture
	code = SCRIPT_NAMED_CONTROLS.get(char)
	if code is not None:
		return "\\" + code
	return hex_escape(char)


def escape_script(text: str, flags: ScriptFlags) -> str:
	"""
	Escape text for the script language.

	Args:
	        text: Text to escape
	        flags: Script style options

	Returns:
	        str: Escaped text

	"""
	if not text and not flags.no_quoted:
		return EMPTY_QUOTES

	escape_printables = not flags.no_printables
	need_escape = False
	need_complex_escape = False
	out: list[str] = []

	for char in text:
		if char == "\\":
			need_complex_escape = True
			out.append("\\\\")
		elif not is_printable(char):
			need_complex_escape = True
			out.append(_escape_non_printable(char, symbolic=flags.symbolic))
		elif char == "'":
			need_complex_escape = True
			out.append("\\'" if escape_printables else char)
		elif char in SCRIPT_SPECIALS or (char == "~" and not flags.no_tilde):
			need_escape = True
			out.append("\\" + char if escape_printables else char)
		else:
			out.append(char)

	if escape_printables and not flags.no_quoted and need_escape and not need_complex_escape:
		return f"'{text}'"
	return "".join(out)


def _take(text: str, start: int, width: int, allowed: frozenset[str]) -> str:
	"""Return up to ``width`` characters from ``start`` that are in ``allowed``."""
	end = start
	while end < len(text) and end - start < width and text[end] in allowed:
		end += 1
	return text[start:end]


def _control_value(char: str) -> str | None:
	if char == "?":
		return "\x7f"
	code_point = ord(char)
	if 0x40 <= code_point <= 0x5F or 0x61 <= code_point <= 0x7A:
		return chr(code_point & 0x1F)
	return None


def _read_backslash(text: str, start: int) -> tuple[str, int]:
	"""
	Decode the unquoted backslash escape starting at ``start``.

	Returns:
	        tuple[str, int]: The decoded text and the index after the escape

	"""
	pos = start + 1
	if pos >= len(text):
		msg = "Trailing backslash"
		raise TruncatedEscapeError(msg, start)

	code = text[pos]
	if code in _DECODE_NAMED:
		return _DECODE_NAMED[code], pos + 1

	if code in _HEX_WIDTHS:
		digits = _take(text, pos + 1, _HEX_WIDTHS[code], HEX_DIGITS)
		if not digits:
			if pos + 1 >= len(text):
				msg = f"Missing hex digits after \\{code}"
				raise TruncatedEscapeError(msg, start)
			msg = f"Invalid hex digit after \\{code}"
			raise InvalidEscapeError(msg, pos + 1)
		value = int(digits, 16)
		if value > _MAX_CODE_POINT:
			msg = f"Code point U+{value:X} is out of range"
			raise InvalidEscapeError(msg, start)
		return chr(value), pos + 1 + len(digits)

	if code == "c":
		if pos + 1 >= len(text):
			msg = "Missing character after \\c"
			raise TruncatedEscapeError(msg, start)
		control = _control_value(text[pos + 1])
		if control is None:
			msg = f"Invalid control character '{text[pos + 1]}'"
			raise InvalidEscapeError(msg, pos + 1)
		return control, pos + 2

	if code in _OCTAL_DIGITS:
		digits = _take(text, pos, _MAX_OCTAL_WIDTH, _OCTAL_DIGITS)
		value = int(digits, 8)
		if value > 0xFF:
			msg = f"Octal escape \\{digits} is out of range"
			raise InvalidEscapeError(msg, start)
		return chr(value), pos + len(digits)

	if code == "\n":
		# Line continuation
		return "", pos + 1

	return code, pos + 1


def _read_quoted(text: str, start: int, escapable: str) -> tuple[str, int]:
	"""
	Decode a quoted section whose opening quote is at ``start``.

	Inside the quotes only the characters in ``escapable`` can follow a
	backslash; any other backslash is literal. A backslash-newline inside
	double quotes is a line continuation.

	"""
	quote = text[start]
	out: list[str] = []
	pos = start + 1
	while pos < len(text):
		char = text[pos]
		if char == quote:
			return "".join(out), pos + 1
		if char == "\\" and pos + 1 < len(text):
			following = text[pos + 1]
			if following in escapable:
				out.append(following)
				pos += 2
				continue
			if quote == '"' and following == "\n":
				pos += 2
				continue
		out.append(char)
		pos += 1

	msg = f"Unterminated {quote} quote"
	raise UnterminatedQuoteError(msg, start)


def unescape_script(text: str) -> str:
	"""
	Decode text produced by :func:`escape_script`.

	Quotes and backslash escapes are resolved. Expansions, wildcards and the
	other special characters are returned literally: decoding does not
	evaluate anything.

	Args:
	        text: Escaped text

	Returns:
	        str: The original text

	Raises:
	        InvalidEscapeError: If an escape sequence is malformed
	        TruncatedEscapeError: If the text ends inside an escape or a quote

	"""
	out: list[str] = []
	pos = 0
	while pos < len(text):
		char = text[pos]
		if char == "\\":
			decoded, pos = _read_backslash(text, pos)
		elif char == "'":
			decoded, pos = _read_quoted(text, pos, "'\\")
		elif char == '"':
			decoded, pos = _read_quoted(text, pos, '"\\$')
		else:
			decoded, pos = char, pos + 1
		out.append(decoded)
	return "".join(out)
