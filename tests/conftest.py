"""
Shared test fixtures and utilities for the spectree test suite.
"""

import pytest

from spectree.registry import SpecRegistry
from spectree.visitor import Visitor


class CallRecorder:
    """Accept function that records every call and returns a tagged tuple.

    The result for a node is `(key, node, child_results)`, which lets tests
    check both call order and what each parent received from its children.
    """

    def __init__(self):
        self.calls = []

    def __call__(self, key, node, child_results, context):
        self.calls.append((key, node, list(child_results), context))
        return (key, node, tuple(child_results))

    @property
    def keys(self):
        return [call[0] for call in self.calls]

    @property
    def nodes(self):
        return [call[1] for call in self.calls]


@pytest.fixture
def registry():
    """Empty registry isolated from the process-wide default."""
    return SpecRegistry()


@pytest.fixture
def visitor(registry):
    """Visitor resolving names through the isolated registry."""
    return Visitor(resolver=registry)


@pytest.fixture
def recorder():
    return CallRecorder()
