"""
Style dispatch for escaping and unescaping.

Every function here is pure: the result only depends on the arguments and a
fresh string is returned on each call, so they are safe to call from any
number of threads.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import SCRIPT, EscapeStyle, StyleKind
from .regex import escape_regex, unescape_regex
from .script import escape_script, unescape_script
from .url import escape_url, unescape_url
from .var import escape_var, unescape_var

if TYPE_CHECKING:
	from collections.abc import Iterable

logger = logging.getLogger(__name__)


def escape(text: str, style: EscapeStyle = SCRIPT) -> str:
	"""
	Escape text so it can be embedded in the syntax named by ``style``.

	This never fails: every string, including empty strings, NUL and lone
	surrogates, has an escaped form in every style.

	Args:
	        text: Text to escape
	        style: Target style (defaults to the script style)

	Returns:
	        str: The escaped text

	"""
	kind = style.kind
	if kind is StyleKind.SCRIPT:
		return escape_script(text, style.flags)
	if kind is StyleKind.URL:
		return escape_url(text)
	if kind is StyleKind.VAR:
		return escape_var(text)
	return escape_regex(text)


def unescape(text: str, style: EscapeStyle = SCRIPT) -> str:
	"""
	Reverse :func:`escape` for the given style.

	Script flags are ignored: the decoder accepts the output of every flag
	combination except ``symbolic``, whose control pictures are display only
	and decode to themselves.

	Args:
	        text: Escaped text
	        style: Style the text was escaped with

	Returns:
	        str: The original text

	Raises:
	        UnescapeError: If the text is not a valid escaped string for the style

	"""
	kind = style.kind
	logger.debug("Unescaping %d characters as %s", len(text), kind.value)
	if kind is StyleKind.SCRIPT:
		return unescape_script(text)
	if kind is StyleKind.URL:
		return unescape_url(text)
	if kind is StyleKind.VAR:
		return unescape_var(text)
	return unescape_regex(text)


def escape_strings(items: Iterable[str], style: EscapeStyle = SCRIPT) -> str:
	"""
	Escape each item and join the results with single spaces.

	This is how a command line is built from separate arguments; with the
	script style each argument stays a single word.

	"""
	return " ".join(escape(item, style) for item in items)


def needs_escaping(text: str, style: EscapeStyle = SCRIPT) -> bool:
	"""Whether :func:`escape` would change the text."""
	return escape(text, style) != text
