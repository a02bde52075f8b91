"""
Built-in handlers of the dispatch table.

Each handler owns the knowledge of how many structural children its
combinator has and where they sit in the literal form. A handler visits every
child through the visitor it is given, then folds the child results through
`accept`.

Handler signature: `handler(visitor, key, node, accept, context) -> result`.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from spectree.core.forms import Application
from spectree.core.types import Accept, Keyword, Symbol, is_expression
from spectree.core.utils import stable_members
from spectree.exceptions import MalformedFormError
from spectree.visitor.keys import (
    ALT,
    AMPERSAND,
    AND,
    CAT,
    COLL_OF,
    COLLECTION_KEYS,
    DEFAULT,
    ENUMERATION,
    EVERY,
    EVERY_KV,
    KEYS,
    KEYS_STAR,
    MAP_OF,
    MERGE,
    NILABLE,
    ONE_OR_MORE,
    OPTIONAL,
    OR,
    SPEC_TOOLS_SPEC,
    TUPLE,
    ZERO_OR_MORE,
    Opaque,
)

if TYPE_CHECKING:
    from spectree.visitor.visitor import Visitor

# handler(visitor, key, node, accept, context) -> result
Handler = Callable[..., Any]

BUILTIN_HANDLERS: dict[Any, Handler] = {}

# Key groups of a keyed record, in the order their names are visited
KEY_GROUPS = (
    Keyword(None, "req"),
    Keyword(None, "opt"),
    Keyword(None, "req-un"),
    Keyword(None, "opt-un"),
)
KEY_CONNECTIVES = frozenset({"or", "and"})

SPEC_OPTION = Keyword(None, "spec")


def handles(*keys: Any) -> Callable[[Handler], Handler]:
    """Register a function as the built-in handler for `keys`."""

    def decorator(handler: Handler) -> Handler:
        for key in keys:
            BUILTIN_HANDLERS[key] = handler
        return handler

    return decorator


def _application(visitor: "Visitor", node: Any) -> Application:
    return Application.of(visitor.form_of(node))


def _fold(
    visitor: "Visitor",
    key: Any,
    node: Any,
    children: list[Any],
    accept: Accept,
    context: Any,
) -> Any:
    results = [visitor.visit(child, accept, context) for child in children]
    return accept(key, node, results, context)


def _record_names(entries: Any, application: Application) -> Iterator[Keyword]:
    """Yield key names of one `:req`-style group, flattening `(or ...)`/`(and ...)`."""
    if not isinstance(entries, (list, tuple)):
        raise MalformedFormError(
            application.head, application.form, f"key group {entries!r} is not a vector"
        )
    for entry in entries:
        if isinstance(entry, Keyword):
            yield entry
        elif (
            is_expression(entry)
            and isinstance(entry[0], Symbol)
            and entry[0].name in KEY_CONNECTIVES
        ):
            yield from _record_names(list(entry[1:]), application)
        else:
            raise MalformedFormError(
                application.head, application.form, f"{entry!r} is not a key name"
            )


@handles(KEYS, KEYS_STAR)
def visit_keys(visitor, key, node, accept, context):
    """Children: every declared key name, each visited as a named schema reference."""
    application = _application(visitor, node)
    groups = application.keyword_args()
    names: list[Keyword] = []
    for group in KEY_GROUPS:
        for name in _record_names(groups.get(group, []), application):
            if name not in names:
                names.append(name)
    return _fold(visitor, key, node, names, accept, context)


@handles(OR, ALT, CAT)
def visit_labeled(visitor, key, node, accept, context):
    """Children: the schema of each labeled alternative or component, in order."""
    application = _application(visitor, node)
    return _fold(visitor, key, node, application.labeled_values(), accept, context)


@handles(AND, MERGE, TUPLE)
def visit_operands(visitor, key, node, accept, context):
    """Children: every operand, in order."""
    application = _application(visitor, node)
    return _fold(visitor, key, node, list(application.variadic()), accept, context)


@handles(COLL_OF)
def visit_coll_of(visitor, key, node, accept, context):
    """
    Child: the element schema.

    The key handed to `accept` is refined to the map-of, set-of or
    sequence-of variant by the collection-kind resolver.
    """
    form = visitor.form_of(node)
    (element,), _ = Application.of(form).leading(1)
    refined = COLLECTION_KEYS[visitor.collection_kind(form)]
    return _fold(visitor, refined, node, [element], accept, context)


@handles(EVERY, AMPERSAND)
def visit_leading_one(visitor, key, node, accept, context):
    """Child: the first argument; trailing options or predicates are not schemas."""
    (inner,), _ = _application(visitor, node).leading(1)
    return _fold(visitor, key, node, [inner], accept, context)


@handles(MAP_OF, EVERY_KV)
def visit_key_value(visitor, key, node, accept, context):
    """Children: key schema, then value schema."""
    (key_schema, value_schema), _ = _application(visitor, node).leading(2)
    return _fold(visitor, key, node, [key_schema, value_schema], accept, context)


@handles(ZERO_OR_MORE, ONE_OR_MORE, OPTIONAL, NILABLE)
def visit_wrapped(visitor, key, node, accept, context):
    """Child: the single wrapped schema."""
    (inner,) = _application(visitor, node).positional(1)
    return _fold(visitor, key, node, [inner], accept, context)


@handles(SPEC_TOOLS_SPEC)
def visit_spec_tools_spec(visitor, key, node, accept, context):
    """Child: the `:spec` entry of the wrapper's metadata map."""
    application = _application(visitor, node)
    (metadata,) = application.positional(1)
    if not isinstance(metadata, dict) or SPEC_OPTION not in metadata:
        raise MalformedFormError(
            application.head, application.form, "expected a map with a :spec entry"
        )
    return _fold(visitor, key, node, [metadata[SPEC_OPTION]], accept, context)


@handles(ENUMERATION)
def visit_enumeration(visitor, key, node, accept, context):
    """
    Children: every member of the set, each a standalone leaf schema.

    Members are data: they go straight to the default row without being
    classified, even when they look like registered names or combinators.
    """
    leaf = visitor.handler_for(DEFAULT)
    results = [
        leaf(visitor, Opaque(member), member, accept, context)
        for member in stable_members(visitor.form_of(node))
    ]
    return accept(key, node, results, context)


def visit_default(visitor, key, node, accept, context):
    """No children: leaves, raw predicates and combinators without a handler."""
    return accept(key, node, [], context)
