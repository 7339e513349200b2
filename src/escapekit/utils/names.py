"""Validation of user supplied function names."""

from __future__ import annotations


def valid_func_name(name: str) -> bool:
	"""
	Check whether a string can be used as a function name.

	A valid name is non-empty, does not start with ``-`` (it would be read as
	an option) and contains neither ``/`` nor NUL (it is stored as a file
	name).

	Args:
	        name: Candidate name

	Returns:
	        bool: True if the name is acceptable

	"""
	if not name or name.startswith("-"):
		return False
	return "/" not in name and "\0" not in name
