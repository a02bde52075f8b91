"""
spectree exception classes.

This package provides all exception types raised by the schema walker and its
collaborators for consistent error handling and reporting.
"""

from spectree.exceptions.core import (
    DialectConfigError,
    MalformedFormError,
    PreconditionViolationError,
    SpecTreeError,
    UnresolvableHandleError,
)

__all__ = [
    "SpecTreeError",
    "MalformedFormError",
    "UnresolvableHandleError",
    "PreconditionViolationError",
    "DialectConfigError",
]
