"""
Core spectree components.

This package provides the value types schema expressions are built from, the
dialect configuration and the helpers used to destructure literal forms.
"""

from spectree.core.dialects import (
    CANONICAL_NAMESPACE,
    DEFAULT_DIALECT,
    DialectConfig,
    canonicalize,
)
from spectree.core.forms import Application, strip_wrapper
from spectree.core.types import (
    UNKNOWN,
    Accept,
    Keyword,
    SchemaNode,
    Symbol,
    is_enumeration,
    is_expression,
    kw,
    sym,
)
from spectree.core.utils import only, stable_members

__all__ = [
    "Accept",
    "Application",
    "CANONICAL_NAMESPACE",
    "DEFAULT_DIALECT",
    "DialectConfig",
    "Keyword",
    "SchemaNode",
    "Symbol",
    "UNKNOWN",
    "canonicalize",
    "is_enumeration",
    "is_expression",
    "kw",
    "only",
    "stable_members",
    "strip_wrapper",
    "sym",
]
