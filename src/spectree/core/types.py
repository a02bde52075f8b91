"""
Core type definitions for spectree.

Schema expressions are plain Python data: qualified names are `Symbol` values,
registered schema names are `Keyword` values, literal expressions are tuples
headed by a `Symbol`, enumerations are sets and anything else is a leaf
predicate.
"""

from collections.abc import Callable
from typing import Any, TypeAlias

from attrs import field, frozen


def _split_qualified(text: str) -> tuple[str | None, str]:
    if "/" in text and text != "/":
        namespace, name = text.split("/", 1)
        return (namespace or None), name
    return None, text


@frozen
class Symbol:
    """Qualified name of a combinator or predicate, e.g. `clojure.spec.alpha/and`."""

    namespace: str | None
    name: str = field()

    @name.validator
    def _check_name(self, attribute, value):
        if not value:
            raise ValueError("Symbol name must be a non-empty string")

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        """Build a symbol from its `namespace/name` spelling."""
        return cls(*_split_qualified(text))

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}" if self.namespace else self.name


@frozen
class Keyword:
    """Name under which a schema is registered, e.g. `:user/email`."""

    namespace: str | None
    name: str = field()

    @name.validator
    def _check_name(self, attribute, value):
        if not value:
            raise ValueError("Keyword name must be a non-empty string")

    @classmethod
    def parse(cls, text: str) -> "Keyword":
        """Build a keyword from `:namespace/name` (leading colon optional)."""
        return cls(*_split_qualified(text.removeprefix(":")))

    def __str__(self) -> str:
        if self.namespace:
            return f":{self.namespace}/{self.name}"
        return f":{self.name}"


def sym(text: str) -> Symbol:
    """Shorthand for `Symbol.parse`."""
    return Symbol.parse(text)


def kw(text: str) -> Keyword:
    """Shorthand for `Keyword.parse`."""
    return Keyword.parse(text)


# Returned by form resolvers for handles without an inspectable form
UNKNOWN = Keyword("clojure.spec.alpha", "unknown")

SchemaNode: TypeAlias = Any

# accept(dispatch_key, node, child_results, context) -> result
Accept: TypeAlias = Callable[[Any, SchemaNode, list[Any], Any], Any]


def is_expression(value: Any) -> bool:
    """Check whether a value is a literal expression (a tuple headed by a name)."""
    return isinstance(value, tuple) and len(value) > 0


def is_enumeration(value: Any) -> bool:
    """Check whether a value is a raw set used as an enumeration predicate."""
    return isinstance(value, (set, frozenset))
