"""
Collection-kind resolution for homogeneous collection schemas.

A `coll-of` form names its element schema positionally and describes the
runtime collection through its `:kind` and `:into` options. The walker asks
this resolver whether the collection is map-, set- or sequence-shaped.
"""

from enum import Enum
from typing import Any

from spectree.core.forms import Application
from spectree.core.types import Keyword, Symbol

KIND = Keyword(None, "kind")
INTO = Keyword(None, "into")


class CollectionKind(Enum):
    """Runtime shape of a homogeneous collection."""

    MAP = "map"
    SET = "set"
    SEQUENCE = "sequence"


_KIND_PREDICATES = {
    "map?": CollectionKind.MAP,
    "set?": CollectionKind.SET,
    "vector?": CollectionKind.SEQUENCE,
    "list?": CollectionKind.SEQUENCE,
    "seq?": CollectionKind.SEQUENCE,
    "sequential?": CollectionKind.SEQUENCE,
}

_PYTHON_KINDS = {
    dict: CollectionKind.MAP,
    set: CollectionKind.SET,
    frozenset: CollectionKind.SET,
    list: CollectionKind.SEQUENCE,
    tuple: CollectionKind.SEQUENCE,
}


def _kind_of(hint: Any) -> CollectionKind | None:
    """Classify one `:kind`/`:into` hint; None when it says nothing."""
    if isinstance(hint, Symbol):
        return _KIND_PREDICATES.get(hint.name)
    if isinstance(hint, type):
        for python_type, kind in _PYTHON_KINDS.items():
            if issubclass(hint, python_type):
                return kind
        return None
    if isinstance(hint, dict):
        return CollectionKind.MAP
    if isinstance(hint, (set, frozenset)):
        return CollectionKind.SET
    if isinstance(hint, (list, tuple)):
        return CollectionKind.SEQUENCE
    return None


def resolve_collection_kind(form: Any) -> CollectionKind:
    """
    Decide the runtime shape of a `coll-of` form.

    `:into` wins over `:kind`, mirroring how the collection is actually built
    when both are given. Forms carrying neither option are sequences.

    Params:
        form: Literal `coll-of` expression

    Returns:
        The collection kind

    Raises:
        MalformedFormError: If the form has no element schema or a malformed option tail
    """
    application = Application.of(form)
    _, options = application.leading(1)
    settings = application.keyword_args(options)

    for option in (INTO, KIND):
        if option in settings:
            kind = _kind_of(settings[option])
            if kind is not None:
                return kind
    return CollectionKind.SEQUENCE
