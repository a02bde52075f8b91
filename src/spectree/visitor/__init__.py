"""
spectree visitor components.

This package provides dispatch classification, the built-in handler table and
the recursive visitor that folds a schema through a caller's reducer.
"""

from spectree.visitor import keys
from spectree.visitor.dispatch import FormResolver, dispatch_key, extract_form, is_handle
from spectree.visitor.handlers import BUILTIN_HANDLERS, Handler, visit_default
from spectree.visitor.keys import (
    COLL_MAP_OF,
    COLL_SEQUENCE_OF,
    COLL_SET_OF,
    DEFAULT,
    ENUMERATION,
    Opaque,
)
from spectree.visitor.visitor import (
    Visitor,
    builtin_table,
    default_visitor,
    register_handler,
    unregister_handler,
    visit,
)

__all__ = [
    "BUILTIN_HANDLERS",
    "COLL_MAP_OF",
    "COLL_SEQUENCE_OF",
    "COLL_SET_OF",
    "DEFAULT",
    "ENUMERATION",
    "FormResolver",
    "Handler",
    "Opaque",
    "Visitor",
    "builtin_table",
    "default_visitor",
    "dispatch_key",
    "extract_form",
    "is_handle",
    "keys",
    "register_handler",
    "unregister_handler",
    "visit",
    "visit_default",
]
