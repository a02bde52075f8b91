"""
Named-schema collector.

A stateful `accept` function that records every registered schema name met
during a walk, together with its stored definition. The accumulator belongs
to the collector instance; use one collector per walk (or serialize access)
when walks run concurrently.
"""

from typing import Any

from spectree.core.types import Keyword
from spectree.registry.specs import Spec, SpecRegistry, default_registry
from spectree.visitor.keys import Opaque


class SpecCollector:
    """Accumulates `name -> definition` for every named schema visited.

    Usage:
        collector = spec_collector(registry)
        visitor.visit(schema, collector)
        collector.specs  # {Keyword(...): form, ...}
    """

    def __init__(self, registry: SpecRegistry | None = None):
        self.registry = registry if registry is not None else default_registry
        self.specs: dict[Keyword, Any] = {}

    def __call__(
        self, key: Any, node: Any, child_results: list[Any], context: Any = None
    ) -> dict[Keyword, Any]:
        """
        Record `node` if it is a registered name not seen before.

        Params:
            key: Dispatch key of the node; a node keyed as itself is literal
                data (an enumeration member), not a name reference
            node: Visited schema node
            child_results: Results of the node's children (unused)
            context: Walk context (unused)

        Returns:
            The accumulated mapping (the live dict, shared across calls)
        """
        if key == Opaque(node):
            return self.specs
        name = self._name_of(node)
        if name is not None and name not in self.specs:
            definition = self.registry.lookup(name)
            if definition is not None:
                self.specs[name] = definition
        return self.specs

    @staticmethod
    def _name_of(node: Any) -> Keyword | None:
        if isinstance(node, Keyword):
            return node
        if isinstance(node, Spec):
            return node.name
        return None


def spec_collector(registry: SpecRegistry | None = None) -> SpecCollector:
    """Create a collector with a fresh, empty accumulator."""
    return SpecCollector(registry)
