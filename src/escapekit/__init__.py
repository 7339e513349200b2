"""
EscapeKit - escape text for shells, URLs, variable names and regexes.

"""

from __future__ import annotations

from escapekit.escape import (
	REGEX,
	SCRIPT,
	URL,
	VAR,
	EscapeStyle,
	ScriptFlags,
	StyleKind,
	escape,
	unescape,
)

__version__ = "0.3.0"

__all__ = [
	"REGEX",
	"SCRIPT",
	"URL",
	"VAR",
	"EscapeStyle",
	"ScriptFlags",
	"StyleKind",
	"__version__",
	"escape",
	"unescape",
]
