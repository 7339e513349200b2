"""
Escaping engine for EscapeKit.

This package converts text into a form that can be embedded in another
syntax without being misread: the shell script language, URLs, variable
names and regular expressions. Each style also has a decoder.

"""

from .engine import escape, escape_strings, needs_escaping, unescape
from .errors import (
	InvalidEscapeError,
	TruncatedEscapeError,
	UnescapeError,
	UnterminatedQuoteError,
)
from .models import REGEX, SCRIPT, URL, VAR, EscapeStyle, ScriptFlags, StyleKind

__all__ = [
	"REGEX",
	"SCRIPT",
	"URL",
	"VAR",
	"EscapeStyle",
	# Errors
	"InvalidEscapeError",
	"ScriptFlags",
	"StyleKind",
	"TruncatedEscapeError",
	"UnescapeError",
	"UnterminatedQuoteError",
	# Functions
	"escape",
	"escape_strings",
	"needs_escaping",
	"unescape",
]
