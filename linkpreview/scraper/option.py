"""A minimal option type for chains of lookups that may come up empty.

Each step either produces a value or ends the chain::

    Option.of(doc.select_one("title")).map(lambda tag: tag.get_text()).get()

Once a step yields ``None`` every later ``bind``/``map`` is skipped and the
whole chain is empty.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """An immutable value that is either present or absent."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[T] = None) -> None:
        self._value = value

    @classmethod
    def of(cls, value: Optional[T]) -> "Option[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "Option[T]":
        return cls(None)

    @property
    def is_present(self) -> bool:
        return self._value is not None

    def __bool__(self) -> bool:
        return self.is_present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        if self._value is None:
            return "Option.empty()"
        return f"Option.of({self._value!r})"

    def bind(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Chain a step that itself returns an :class:`Option`."""
        if self._value is None:
            return Option.empty()
        return fn(self._value)

    def map(self, fn: Callable[[T], Optional[U]]) -> "Option[U]":
        """Apply *fn* to the value; a ``None`` result empties the option."""
        if self._value is None:
            return Option.empty()
        return Option.of(fn(self._value))

    def or_else(self, fn: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return this option if present, otherwise the lazily built fallback."""
        if self._value is not None:
            return self
        return fn()

    def get(self) -> Optional[T]:
        """Return the wrapped value, or ``None`` when empty."""
        return self._value
