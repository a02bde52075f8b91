"""
Small helpers shared by handlers and reducers.
"""

from collections.abc import Iterable
from typing import Any

from spectree.exceptions import PreconditionViolationError


def only(items: Iterable[Any], what: str = "value") -> Any:
    """
    Return the single element of `items`.

    Params:
        items: Collection expected to hold exactly one element
        what: Description of the element for the error message

    Returns:
        The one element

    Raises:
        PreconditionViolationError: If `items` holds zero or several elements
    """
    values = list(items)
    if len(values) != 1:
        raise PreconditionViolationError(
            f"expected exactly one {what}, got {len(values)}"
        )
    return values[0]


def stable_members(members: Iterable[Any]) -> list[Any]:
    """Order set members deterministically by their representation."""
    return sorted(members, key=repr)
