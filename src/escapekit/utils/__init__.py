"""Utility module for EscapeKit package."""

from .names import valid_func_name
from .scoped import ScopedPush, scoped_push

__all__ = [
	"ScopedPush",
	"scoped_push",
	"valid_func_name",
]
