"""
One-line textual descriptions of schemas.

`describe` is a pure `accept` function: the result for a node is a string
built only from its dispatch key and its children's strings, so walking the
same schema twice yields the same text.
"""

from typing import Any

from spectree.core.types import Keyword, Symbol
from spectree.core.utils import only
from spectree.visitor.keys import (
    AMPERSAND,
    COLL_MAP_OF,
    COLL_SEQUENCE_OF,
    COLL_SET_OF,
    EVERY,
    NILABLE,
    ONE_OR_MORE,
    OPTIONAL,
    SPEC_TOOLS_SPEC,
    ZERO_OR_MORE,
    Opaque,
)

SINGLE_CHILD_KEYS = frozenset(
    {
        AMPERSAND,
        COLL_MAP_OF,
        COLL_SEQUENCE_OF,
        COLL_SET_OF,
        EVERY,
        NILABLE,
        ONE_OR_MORE,
        OPTIONAL,
        SPEC_TOOLS_SPEC,
        ZERO_OR_MORE,
    }
)


def _label(value: Any) -> str:
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, Keyword):
        return str(value)
    name = getattr(value, "__name__", None)
    return name if isinstance(name, str) else repr(value)


def describe(key: Any, node: Any, child_results: list[str], context: Any = None) -> str:
    """
    Describe a node in terms of its children's descriptions.

    Examples:
        and(int?, pos?)
        nilable(+(string?))
        set(:green, :red)

    Raises:
        PreconditionViolationError: If a single-child combinator got another count
    """
    if isinstance(key, Opaque):
        return _label(key.handle)

    name = key.name if isinstance(key, (Symbol, Keyword)) else _label(key)
    if key in SINGLE_CHILD_KEYS:
        return f"{name}({only(child_results, 'child description')})"
    if not child_results and isinstance(key, Symbol):
        return name
    return f"{name}({', '.join(child_results)})"
