"""URL style: percent-encode everything outside the unreserved set."""

from __future__ import annotations

import re
from urllib.parse import quote, unquote_to_bytes

from .charclass import HEX_DIGITS, URL_UNRESERVED
from .errors import InvalidEscapeError, TruncatedEscapeError

_PERCENT_ESCAPE = re.compile(r"%[0-9A-Fa-f]{2}")


def escape_url(text: str) -> str:
	"""
	Percent-encode text as UTF-8.

	Args:
	        text: Text to encode

	Returns:
	        str: Encoded text using only unreserved characters and ``%HH``

	"""
	# quote() already leaves exactly the RFC 3986 unreserved set alone
	return quote(text, safe="", encoding="utf-8", errors="surrogatepass")


def unescape_url(text: str) -> str:
	"""
	Decode text produced by :func:`escape_url`.

	Raises:
	        InvalidEscapeError: On a malformed escape, a character that should
	                have been encoded, or bytes that are not valid UTF-8
	        TruncatedEscapeError: If the text ends inside a ``%HH`` escape

	"""
	# Index in text of each byte unquote_to_bytes will produce
	byte_positions: list[int] = []
	pos = 0
	while pos < len(text):
		char = text[pos]
		if char == "%":
			if _PERCENT_ESCAPE.match(text, pos):
				byte_positions.append(pos)
				pos += 3
				continue
			if len(text) - pos < 3 and all(c in HEX_DIGITS for c in text[pos + 1 :]):
				msg = "Incomplete percent escape"
				raise TruncatedEscapeError(msg, pos)
			msg = "Invalid percent escape"
			raise InvalidEscapeError(msg, pos)
		if char not in URL_UNRESERVED:
			msg = f"Character {char!r} must be percent-encoded"
			raise InvalidEscapeError(msg, pos)
		byte_positions.append(pos)
		pos += 1

	try:
		return unquote_to_bytes(text).decode("utf-8", errors="surrogatepass")
	except UnicodeDecodeError as e:
		msg = f"Encoded bytes are not valid UTF-8: {e.reason}"
		raise InvalidEscapeError(msg, byte_positions[e.start]) from e
