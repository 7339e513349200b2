"""Models describing the escape styles."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class StyleKind(Enum):
	"""Target syntaxes an escaped string can be embedded into."""

	SCRIPT = "script"  # Interactive shell / script language
	URL = "url"  # Percent-encoded URL segment
	VAR = "var"  # Bare variable name
	REGEX = "regex"  # Literal regular-expression pattern


@dataclass(frozen=True)
class ScriptFlags:
	"""Options that only apply to the script style."""

	no_printables: bool = False
	"""Only escape non-printable characters and backslashes."""

	no_quoted: bool = False
	"""Never wrap the result in single quotes and keep the empty string empty."""

	no_tilde: bool = False
	"""Leave tildes alone."""

	symbolic: bool = False
	"""Render control characters as visible control pictures (display only)."""

	@classmethod
	def names(cls) -> tuple[str, ...]:
		"""Return the flag names in declaration order."""
		return tuple(f.name for f in fields(cls))

	def is_default(self) -> bool:
		"""Whether every flag is unset."""
		return self == ScriptFlags()


@dataclass(frozen=True)
class EscapeStyle:
	"""
	A single escape style.

	Only the script style carries flags; every other style rejects them so a
	style value always means exactly one encoding.

	"""

	kind: StyleKind
	flags: ScriptFlags = field(default_factory=ScriptFlags)

	def __post_init__(self) -> None:
		"""Reject flags on styles that do not take any."""
		if self.kind is not StyleKind.SCRIPT and not self.flags.is_default():
			msg = f"The {self.kind.value} style does not accept script flags"
			raise ValueError(msg)

	@classmethod
	def script(
		cls,
		*,
		no_printables: bool = False,
		no_quoted: bool = False,
		no_tilde: bool = False,
		symbolic: bool = False,
	) -> EscapeStyle:
		"""Build a script style with the given flags."""
		return cls(
			StyleKind.SCRIPT,
			ScriptFlags(
				no_printables=no_printables,
				no_quoted=no_quoted,
				no_tilde=no_tilde,
				symbolic=symbolic,
			),
		)

	@classmethod
	def from_name(cls, name: str, flags: ScriptFlags | None = None) -> EscapeStyle:
		"""
		Build a style from its name.

		Args:
		        name: One of ``script``, ``url``, ``var`` or ``regex`` (any case)
		        flags: Script flags, only allowed with the script style

		Returns:
		        EscapeStyle: The matching style

		Raises:
		        ValueError: If the name is unknown or flags are given to a
		                non-script style

		"""
		try:
			kind = StyleKind(name.strip().lower())
		except ValueError:
			valid = ", ".join(k.value for k in StyleKind)
			msg = f"Unknown escape style '{name}' (expected one of: {valid})"
			raise ValueError(msg) from None
		return cls(kind, flags or ScriptFlags())

	@property
	def name(self) -> str:
		"""Lower-case style name."""
		return self.kind.value


SCRIPT = EscapeStyle(StyleKind.SCRIPT)
URL = EscapeStyle(StyleKind.URL)
VAR = EscapeStyle(StyleKind.VAR)
REGEX = EscapeStyle(StyleKind.REGEX)
