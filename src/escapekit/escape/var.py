"""
Var style: turn arbitrary text into a bare variable name.

ASCII letters, digits and underscores are kept. Every other character is
written as ``@`` and four hex digits of its code point (``@@`` and six hex
digits above U+FFFF). A leading digit is encoded too, so the result never
starts with one.

"""

from __future__ import annotations

from .charclass import HEX_DIGITS, IDENTIFIER_CHARS
from .errors import InvalidEscapeError, TruncatedEscapeError

VAR_MARKER = "@"

_BMP_WIDTH = 4
_ASTRAL_WIDTH = 6


def _encode_char(char: str) -> str:
	code_point = ord(char)
	if code_point <= 0xFFFF:
		return f"{VAR_MARKER}{code_point:04X}"
	return f"{VAR_MARKER}{VAR_MARKER}{code_point:06X}"


def escape_var(text: str) -> str:
	"""
	Encode text as a variable name.

	Args:
	        text: Text to encode

	Returns:
	        str: A string of identifier characters and ``@`` escapes

	"""
	out: list[str] = []
	for index, char in enumerate(text):
		if char in IDENTIFIER_CHARS and not (index == 0 and char.isdigit()):
			out.append(char)
		else:
			out.append(_encode_char(char))
	return "".join(out)


def unescape_var(text: str) -> str:
	"""
	Decode text produced by :func:`escape_var`.

	Raises:
	        InvalidEscapeError: On a character that cannot appear in an encoded
	                name or an escape with bad hex digits
	        TruncatedEscapeError: If the text ends inside an escape

	"""
	out: list[str] = []
	pos = 0
	while pos < len(text):
		char = text[pos]
		if char != VAR_MARKER:
			if char not in IDENTIFIER_CHARS or (pos == 0 and char.isdigit()):
				msg = f"Character {char!r} is not allowed in an encoded name"
				raise InvalidEscapeError(msg, pos)
			out.append(char)
			pos += 1
			continue

		start = pos
		width = _BMP_WIDTH
		pos += 1
		if pos < len(text) and text[pos] == VAR_MARKER:
			width = _ASTRAL_WIDTH
			pos += 1
		digits = text[pos : pos + width]
		if len(digits) < width:
			msg = "Incomplete escape"
			raise TruncatedEscapeError(msg, start)
		if not all(c in HEX_DIGITS for c in digits):
			msg = f"Invalid hex digits '{digits}'"
			raise InvalidEscapeError(msg, start)
		value = int(digits, 16)
		if value > 0x10FFFF or (width == _ASTRAL_WIDTH and value <= 0xFFFF):
			msg = f"Code point U+{value:X} is not valid here"
			raise InvalidEscapeError(msg, start)
		out.append(chr(value))
		pos += width
	return "".join(out)
