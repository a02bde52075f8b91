"""
Recursive visitor over schema expressions.

`Visitor` owns an open dispatch table mapping dispatch keys to handlers. A
walk classifies a node, looks up the handler for its key (falling back to the
default handler) and lets the handler recurse into the node's children and
fold their results through the caller's `accept` function.

Module-level `visit`, `register_handler` and `unregister_handler` operate on a
process-wide default visitor bound to the default registry.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from spectree.core.dialects import CANONICAL_NAMESPACE, DEFAULT_DIALECT, DialectConfig
from spectree.core.types import Accept, SchemaNode, Symbol
from spectree.registry.collections import CollectionKind, resolve_collection_kind
from spectree.registry.specs import default_registry
from spectree.visitor.dispatch import FormResolver, dispatch_key, extract_form
from spectree.visitor.handlers import BUILTIN_HANDLERS, Handler, visit_default
from spectree.visitor.keys import DEFAULT

logger = logging.getLogger(__name__)


def builtin_table(dialect: DialectConfig = DEFAULT_DIALECT) -> dict[Any, Handler]:
    """
    Built-in handler table keyed for a dialect.

    Built-in combinator keys live in the default canonical namespace; they are
    moved to the dialect's canonical namespace so canonicalized heads find them.
    """
    table: dict[Any, Handler] = {}
    for key, handler in BUILTIN_HANDLERS.items():
        if isinstance(key, Symbol) and key.namespace == CANONICAL_NAMESPACE:
            key = Symbol(dialect.canonical_namespace, key.name)
        table[key] = handler
    return table


class Visitor:
    """Schema walker with an extensible handler table.

    Responsibilities:
      - Classify nodes into dispatch keys (through the form resolver and dialect).
      - Route each node to the handler registered for its key, or the default.
      - Accept new handlers at runtime without touching existing rows.

    Notes:
      - Table writes are serialized and swap in a fresh snapshot, so walks in
        flight on other threads keep reading a consistent table.
      - The visitor never inspects `context`; it is threaded through unchanged.
    """

    def __init__(
        self,
        resolver: FormResolver | None = None,
        collection_kinds: Callable[[Any], CollectionKind] = resolve_collection_kind,
        dialect: DialectConfig = DEFAULT_DIALECT,
        handlers: dict[Any, Handler] | None = None,
    ):
        self.resolver = resolver if resolver is not None else default_registry
        self.collection_kinds = collection_kinds
        self.dialect = dialect
        self._handlers: dict[Any, Handler] = (
            builtin_table(dialect) if handlers is None else dict(handlers)
        )
        self._lock = threading.Lock()

    def visit(self, node: SchemaNode, accept: Accept, context: Any = None) -> Any:
        """
        Walk a schema bottom-up.

        Params:
            node: Schema node to visit
            accept: Reducer called as `accept(key, node, child_results, context)`
                once per node, after all of the node's children
            context: Caller data threaded unchanged through every call

        Returns:
            Whatever `accept` returned for `node`

        Raises:
            MalformedFormError: If a combinator form has the wrong shape
        """
        key = self.dispatch_key(node)
        handler = self.handler_for(key)
        return handler(self, key, node, accept, context)

    def dispatch_key(self, node: SchemaNode) -> Any:
        return dispatch_key(node, self.resolver, self.dialect)

    def form_of(self, node: SchemaNode) -> Any:
        """Literal form of a node, as handlers destructure it."""
        return extract_form(node, self.resolver, self.dialect)

    def collection_kind(self, form: Any) -> CollectionKind:
        return self.collection_kinds(form)

    def handler_for(self, key: Any) -> Handler:
        """
        Find the handler for a dispatch key.

        Unregistered keys get the `DEFAULT` row if one is registered, and the
        built-in default handler otherwise, so lookup is never undefined.
        """
        handlers = self._handlers
        handler = handlers.get(key)
        if handler is None:
            handler = handlers.get(DEFAULT, visit_default)
        return handler

    def register(self, key: Any, handler: Handler) -> None:
        """
        Register a handler under a dispatch key.

        Keys are canonicalized, so a combinator registered under an alternate
        dialect spelling lands on its canonical row.

        Params:
            key: Dispatch key (combinator symbol, `DEFAULT` or any hashable value)
            handler: Callable `(visitor, key, node, accept, context) -> result`
        """
        key = self.dialect.canonicalize(key)
        with self._lock:
            if key in self._handlers:
                logger.warning("Overriding handler for dispatch key %s", key)
            else:
                logger.debug("Registering handler for dispatch key %s", key)
            table = dict(self._handlers)
            table[key] = handler
            self._handlers = table

    def unregister(self, key: Any) -> None:
        """Remove the handler for a key; unknown keys are ignored."""
        key = self.dialect.canonicalize(key)
        with self._lock:
            if key not in self._handlers:
                return
            table = dict(self._handlers)
            del table[key]
            self._handlers = table

    def handler(self, key: Any) -> Callable[[Handler], Handler]:
        """Decorator form of `register`."""

        def decorator(fn: Handler) -> Handler:
            self.register(key, fn)
            return fn

        return decorator

    def has_handler(self, key: Any) -> bool:
        return self.dialect.canonicalize(key) in self._handlers

    def copy(self) -> "Visitor":
        """Independent visitor with the same collaborators and a copy of the table."""
        return Visitor(
            resolver=self.resolver,
            collection_kinds=self.collection_kinds,
            dialect=self.dialect,
            handlers=self._handlers,
        )


default_visitor = Visitor()


def visit(node: SchemaNode, accept: Accept, context: Any = None) -> Any:
    """Walk a schema with the default visitor."""
    return default_visitor.visit(node, accept, context)


def register_handler(key: Any, handler: Handler) -> None:
    """Register a handler on the default visitor."""
    default_visitor.register(key, handler)


def unregister_handler(key: Any) -> None:
    """Remove a handler from the default visitor."""
    default_visitor.unregister(key)
