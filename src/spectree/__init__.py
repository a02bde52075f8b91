"""
spectree - an extensible tree-walker for declarative schema expressions

spectree classifies every node of a schema expression, recurses into the
structural children of each combinator and folds the results bottom-up through
a caller-supplied reducer.
"""

from importlib.metadata import version

from spectree.core.types import Keyword, Symbol, kw, sym
from spectree.registry import Spec, SpecRegistry, default_registry, register_spec, spec
from spectree.visitor import Visitor, register_handler, unregister_handler, visit

__version__ = version("spectree")

__all__ = [
    "__version__",
    "Keyword",
    "Symbol",
    "Spec",
    "SpecRegistry",
    "Visitor",
    "default_registry",
    "kw",
    "register_handler",
    "register_spec",
    "spec",
    "sym",
    "unregister_handler",
    "visit",
]
