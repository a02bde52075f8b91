"""
Exception classes for spectree schema walking.

This module defines specific exception types for the different error conditions
that can occur while classifying and destructuring schema expressions.
"""

from typing import Any


class SpecTreeError(Exception):
    """Base exception for all spectree-related errors."""

    pass


class MalformedFormError(SpecTreeError):
    """Raised when a combinator form does not have the shape its handler expects."""

    def __init__(self, head: Any, form: Any, reason: str):
        """
        Initialize the exception.

        Params:
            head: The combinator name heading the malformed form
            form: The literal form that failed extraction
            reason: What was wrong with the form (arity, argument shape)
        """
        self.head = head
        self.form = form
        self.reason = reason
        super().__init__(f"Malformed '{head}' form {form!r}: {reason}")


class UnresolvableHandleError(SpecTreeError):
    """Raised when a handler must destructure a handle whose form is unknown."""

    def __init__(self, handle: Any):
        """
        Initialize the exception.

        Params:
            handle: The schema handle the form resolver could not resolve
        """
        self.handle = handle
        super().__init__(f"Cannot resolve form of schema handle {handle!r}")


class PreconditionViolationError(SpecTreeError):
    """Raised when a utility is called with arguments violating its contract.

    This is a programmer error, never recovered from inside the walker.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Precondition violated: {reason}")


class DialectConfigError(SpecTreeError):
    """Raised when a dialect configuration value is invalid."""

    def __init__(self, field_name: str, value: Any, reason: str):
        """
        Initialize the exception.

        Params:
            field_name: The configuration field holding the bad value
            value: The rejected value
            reason: Why the value was rejected
        """
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid dialect setting {field_name}={value!r}: {reason}")
