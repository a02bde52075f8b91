"""
Sample reducers built on the spectree visitor.
"""

from spectree.reducers.collector import SpecCollector, spec_collector
from spectree.reducers.describe import describe

__all__ = [
    "SpecCollector",
    "describe",
    "spec_collector",
]
