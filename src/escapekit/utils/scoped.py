"""Temporarily replace an attribute and put the old value back afterwards."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
	from collections.abc import Iterator


class ScopedPush:
	"""
	Save an attribute, set a new value and restore the old one later.

	The old value is restored by :meth:`restore`, which can be called any
	number of times, or by leaving the ``with`` block.

	"""

	def __init__(self, target: object, attr: str, value: Any) -> None:
		"""
		Replace ``target.attr`` with ``value``.

		Args:
		        target: Object holding the attribute
		        attr: Attribute name
		        value: Value to set for the lifetime of the guard

		"""
		self._target = target
		self._attr = attr
		self.saved_value = getattr(target, attr)
		self._restored = False
		setattr(target, attr, value)

	def restore(self) -> None:
		"""Put the saved value back (only the first call has an effect)."""
		if not self._restored:
			setattr(self._target, self._attr, self.saved_value)
			self._restored = True

	def __enter__(self) -> Self:
		"""Return the guard itself."""
		return self

	def __exit__(self, *exc_info: object) -> None:
		"""Restore the saved value."""
		self.restore()


@contextlib.contextmanager
def scoped_push(target: object, attr: str, value: Any) -> Iterator[Any]:
	"""
	Set ``target.attr`` to ``value`` for the duration of a ``with`` block.

	Yields:
	        The previous value

	"""
	with ScopedPush(target, attr, value) as guard:
		yield guard.saved_value
