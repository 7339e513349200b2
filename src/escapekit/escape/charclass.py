"""
Character classification tables shared by the escape styles.

All tables are frozensets of single characters so membership checks are
order independent and work for any code point.

"""

from __future__ import annotations

import string

# Characters with a meaning of their own in the script language. The tilde
# and the single quote are handled separately by the script encoder.
SCRIPT_SPECIALS = frozenset("&$#<>()[]{}?*|;\"%^! ")

REGEX_METACHARACTERS = frozenset(".^$*+?()[]{}|\\-")

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")

URL_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")

HEX_DIGITS = frozenset(string.hexdigits)

# Named escapes understood by the script language
SCRIPT_NAMED_CONTROLS = {
	"\a": "a",
	"\b": "b",
	"\x1b": "e",
	"\f": "f",
	"\n": "n",
	"\r": "r",
	"\t": "t",
	"\v": "v",
}

# \v is a character class in some dialects, so it is left to \x0b
REGEX_NAMED_CONTROLS = {
	"\t": "t",
	"\n": "n",
	"\r": "r",
	"\f": "f",
}

DEL = "\x7f"
CONTROL_PICTURES_BASE = 0x2400
CONTROL_PICTURE_DEL = "\u2421"


def is_printable(char: str) -> bool:
	"""Whether a character renders as a visible glyph (space counts)."""
	return char.isprintable()


def control_picture(char: str) -> str | None:
	"""
	Return the Unicode control picture for a C0 control or DEL.

	Args:
	        char: A single character

	Returns:
	        str | None: The visible glyph, or None if the character has none

	"""
	code_point = ord(char)
	if code_point < 0x20:
		return chr(CONTROL_PICTURES_BASE + code_point)
	if char == DEL:
		return CONTROL_PICTURE_DEL
	return None


def hex_escape(char: str) -> str:
	r"""
	Format a character as ``\xHH``, ``\uHHHH`` or ``\UHHHHHHHH``.

	The narrowest form that fits is used and every form is full width so a
	following hex digit can never be mistaken for part of the escape.

	"""
	code_point = ord(char)
	if code_point <= 0xFF:
		text = f"x{code_point:02x}"
	elif code_point <= 0xFFFF:
		text = f"u{code_point:04x}"
	else:
		text = f"U{code_point:08x}"
	return "\\" + text
