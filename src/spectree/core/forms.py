"""
Destructuring helpers for literal schema expressions.

Handlers never index into raw tuples directly; they go through `Application`,
which validates the arity of the tail and raises `MalformedFormError` when a
form does not have the shape a combinator requires.
"""

from typing import Any

from attrs import frozen

from spectree.core.dialects import DEFAULT_DIALECT, DialectConfig
from spectree.core.types import Keyword, is_expression
from spectree.exceptions import MalformedFormError


def strip_wrapper(expr: Any, dialect: DialectConfig = DEFAULT_DIALECT) -> Any:
    """
    See through a single-parameter anonymous-function wrapper.

    `(fn [x] (contains? x :a))` becomes `(contains? x :a)`. Only one level is
    removed, and only when the body is itself a literal expression; any other
    value is returned unchanged.

    Params:
        expr: Candidate expression
        dialect: Dialect deciding which heads construct anonymous functions

    Returns:
        The wrapped body, or `expr` itself
    """
    if not is_expression(expr) or len(expr) != 3:
        return expr
    head, params, body = expr
    if not dialect.is_wrapper_head(head):
        return expr
    if not isinstance(params, (list, tuple)) or len(params) != 1:
        return expr
    if not is_expression(body):
        return expr
    return body


@frozen
class Application:
    """A literal expression viewed as `head` applied to `args`."""

    head: Any
    args: tuple[Any, ...]

    @classmethod
    def of(cls, form: Any) -> "Application":
        """View a literal expression as an application; raise if it is not one."""
        if not is_expression(form):
            raise MalformedFormError(None, form, "expected a literal expression")
        return cls(form[0], tuple(form[1:]))

    @property
    def form(self) -> tuple:
        return (self.head, *self.args)

    def positional(self, arity: int) -> tuple[Any, ...]:
        """
        Take exactly `arity` positional arguments.

        Raises:
            MalformedFormError: If the form carries a different number of arguments
        """
        if len(self.args) != arity:
            raise MalformedFormError(
                self.head,
                self.form,
                f"expected {arity} argument(s), got {len(self.args)}",
            )
        return self.args

    def leading(self, count: int) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
        """
        Split off `count` leading positional arguments from the rest.

        Raises:
            MalformedFormError: If fewer than `count` arguments are present
        """
        if len(self.args) < count:
            raise MalformedFormError(
                self.head,
                self.form,
                f"expected at least {count} argument(s), got {len(self.args)}",
            )
        return self.args[:count], self.args[count:]

    def variadic(self) -> tuple[Any, ...]:
        """All arguments, in order."""
        return self.args

    def keyword_args(self, args: tuple[Any, ...] | None = None) -> dict[Keyword, Any]:
        """
        Read a `:key value :key value` tail as an ordered mapping.

        Params:
            args: Tail to read; defaults to all arguments

        Raises:
            MalformedFormError: On an odd-length tail or a non-keyword label
        """
        tail = self.args if args is None else args
        if len(tail) % 2:
            raise MalformedFormError(
                self.head, self.form, "expected keyword/value pairs"
            )
        pairs: dict[Keyword, Any] = {}
        for label, value in zip(tail[::2], tail[1::2]):
            if not isinstance(label, Keyword):
                raise MalformedFormError(
                    self.head, self.form, f"label {label!r} is not a keyword"
                )
            pairs[label] = value
        return pairs

    def labeled_values(self) -> list[Any]:
        """Values of a `:label spec` tail in declaration order."""
        return list(self.keyword_args().values())
