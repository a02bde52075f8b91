"""
Dispatch classification of schema nodes.

A schema node is one of five representations: a registered name, an opaque
handle, a literal expression, a raw set or a bare predicate. `dispatch_key`
converges all of them onto one flat key space before table lookup, and
`extract_form` yields the literal form a handler destructures.
"""

import logging
from typing import Any, Protocol

from spectree.core.dialects import DEFAULT_DIALECT, DialectConfig
from spectree.core.forms import strip_wrapper
from spectree.core.types import (
    UNKNOWN,
    Keyword,
    Symbol,
    is_enumeration,
    is_expression,
)
from spectree.exceptions import UnresolvableHandleError
from spectree.registry.specs import Spec
from spectree.visitor.keys import ENUMERATION, Opaque

logger = logging.getLogger(__name__)


class FormResolver(Protocol):
    """Collaborator turning handles into literal forms."""

    def resolve_form(self, handle: Any) -> Any: ...

    def predicate_name(self, predicate: Any) -> Symbol | None: ...


def is_handle(node: Any) -> bool:
    """Check whether a node must be resolved before it can be inspected."""
    return isinstance(node, (Spec, Keyword))


def _is_unknown(form: Any) -> bool:
    return isinstance(form, Keyword) and form == UNKNOWN


def _expression_key(expr: tuple, node: Any, dialect: DialectConfig) -> Any:
    head = strip_wrapper(expr, dialect)[0]
    if isinstance(head, Symbol):
        return dialect.canonicalize(head)
    return Opaque(node)


def dispatch_key(
    node: Any, resolver: FormResolver, dialect: DialectConfig = DEFAULT_DIALECT
) -> Any:
    """
    Compute the dispatch key of a schema node.

    Priority order:
    1. Handles and names resolve to their form; unknown forms make the node
       an opaque leaf, expressions key on their head, anything else is
       classified in turn (alias chains are followed)
    2. Raw sets are enumerations
    3. Literal expressions key on their canonical head, seen through a
       single anonymous-function wrapper
    4. Bare symbols are canonicalized
    5. Other values key on the symbolic name the resolver knows for them,
       or on themselves

    Params:
        node: Schema node to classify
        resolver: Form resolver for handles and predicate names
        dialect: Dialect used to canonicalize names

    Returns:
        A canonical `Symbol`, a walker `Keyword` sentinel or an `Opaque` key
    """
    if is_handle(node):
        form = resolver.resolve_form(node)
        if _is_unknown(form):
            logger.debug("No form for %r, dispatching as opaque leaf", node)
            return Opaque(node)
        if is_expression(form):
            return _expression_key(form, node, dialect)
        return dispatch_key(form, resolver, dialect)

    if is_enumeration(node):
        return ENUMERATION

    if is_expression(node):
        return _expression_key(node, node, dialect)

    if isinstance(node, Symbol):
        return dialect.canonicalize(node)

    name = resolver.predicate_name(node)
    if name is not None:
        return dialect.canonicalize(name)
    return Opaque(node)


def extract_form(
    node: Any, resolver: FormResolver, dialect: DialectConfig = DEFAULT_DIALECT
) -> Any:
    """
    Get the literal form of a node for destructuring.

    Follows handles and name aliases down to the first non-handle form, then
    removes a single anonymous-function wrapper.

    Params:
        node: Schema node
        resolver: Form resolver for handles
        dialect: Dialect deciding which heads are wrappers

    Returns:
        The literal form

    Raises:
        UnresolvableHandleError: If a handle on the way has no known form
    """
    form = node
    while is_handle(form):
        resolved = resolver.resolve_form(form)
        if _is_unknown(resolved):
            raise UnresolvableHandleError(form)
        form = resolved
    return strip_wrapper(form, dialect)
