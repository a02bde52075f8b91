"""
Dispatch keys known to the built-in handler table.

Combinators are keyed by their canonical qualified name. Keys the walker
invents itself (enumerations, refined collections, the default row) are
keywords in the `spectree.visitor` namespace so they can never collide with
a combinator symbol.
"""

from typing import Any

from attrs import frozen

from spectree.core.dialects import CANONICAL_NAMESPACE
from spectree.core.types import Keyword, Symbol
from spectree.registry.collections import CollectionKind

VISITOR_NAMESPACE = "spectree.visitor"
SPEC_TOOLS_NAMESPACE = "spec-tools.core"


def _spec(name: str) -> Symbol:
    return Symbol(CANONICAL_NAMESPACE, name)


KEYS = _spec("keys")
KEYS_STAR = _spec("keys*")
OR = _spec("or")
AND = _spec("and")
MERGE = _spec("merge")
COLL_OF = _spec("coll-of")
EVERY = _spec("every")
MAP_OF = _spec("map-of")
EVERY_KV = _spec("every-kv")
ZERO_OR_MORE = _spec("*")
ONE_OR_MORE = _spec("+")
OPTIONAL = _spec("?")
ALT = _spec("alt")
CAT = _spec("cat")
AMPERSAND = _spec("&")
TUPLE = _spec("tuple")
NILABLE = _spec("nilable")
SPEC_TOOLS_SPEC = Symbol(SPEC_TOOLS_NAMESPACE, "spec")

ENUMERATION = Keyword(VISITOR_NAMESPACE, "set")
DEFAULT = Keyword(VISITOR_NAMESPACE, "default")
COLL_MAP_OF = Keyword(VISITOR_NAMESPACE, "map-of")
COLL_SET_OF = Keyword(VISITOR_NAMESPACE, "set-of")
COLL_SEQUENCE_OF = Keyword(VISITOR_NAMESPACE, "sequence-of")

COLLECTION_KEYS = {
    CollectionKind.MAP: COLL_MAP_OF,
    CollectionKind.SET: COLL_SET_OF,
    CollectionKind.SEQUENCE: COLL_SEQUENCE_OF,
}


@frozen(eq=False)
class Opaque:
    """Dispatch key of a node that has no symbolic form; the node stands for itself."""

    handle: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opaque):
            return NotImplemented
        if self.handle is other.handle:
            return True
        # 1, 1.0 and True are distinct leaves
        return type(self.handle) is type(other.handle) and bool(
            self.handle == other.handle
        )

    def __hash__(self) -> int:
        try:
            return hash((Opaque, type(self.handle), self.handle))
        except TypeError:
            # unhashable handles share a bucket per type
            return hash((Opaque, type(self.handle)))
