"""
Schema registry and form resolution for spectree.

The registry maps schema names (`Keyword`) to their stored definitions and
acts as the form resolver the walker consults to turn opaque handles and
named references into inspectable literal expressions.
"""

import logging
import threading
from typing import Any

from pydantic import BaseModel, ConfigDict

from spectree.core.types import UNKNOWN, Keyword, Symbol

logger = logging.getLogger(__name__)


class Spec(BaseModel):
    """
    Opaque schema handle.

    Wraps a schema form so that it can be passed around as a single value.
    Handles created by a registry also carry the name they are stored under.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    form: Any
    name: Keyword | None = None

    def __hash__(self) -> int:
        try:
            return hash((type(self), self.name, self.form))
        except TypeError:
            return hash((type(self), self.name, id(self.form)))


def spec(form: Any, name: Keyword | None = None) -> Spec:
    """Wrap a form into an anonymous (or named) schema handle."""
    return Spec(form=form, name=name)


class SpecRegistry:
    """Registry of named schema definitions and symbolic predicate names.

    Serves three roles for the walker:
    - name registry: `lookup(name)` returns the stored definition
    - form resolver: `resolve_form(handle)` returns the literal form or `UNKNOWN`
    - predicate naming: `predicate_name(pred)` gives bare callables a symbol

    Registration is an administrative operation; it must not race with a walk
    that reads the registry.
    """

    def __init__(self):
        self._specs: dict[Keyword, Spec] = {}
        self._predicates: dict[Any, Symbol] = {}
        self._lock = threading.Lock()

    def register(self, name: Keyword, definition: Any) -> Spec:
        """
        Store a schema definition under a name.

        Re-registering a name replaces its definition, matching how schema
        definitions are reloaded during development.

        Params:
            name: Keyword the definition is stored under
            definition: Literal form, handle, set, symbol or predicate

        Returns:
            The named handle stored in the registry

        Raises:
            TypeError: If `name` is not a Keyword
        """
        if not isinstance(name, Keyword):
            raise TypeError(f"Schema names must be keywords, got {name!r}")

        form = definition.form if isinstance(definition, Spec) else definition
        handle = Spec(form=form, name=name)
        with self._lock:
            if name in self._specs:
                logger.debug("Replacing schema definition for %s", name)
            self._specs[name] = handle
        return handle

    def unregister(self, name: Keyword) -> None:
        """Remove a named definition; unknown names are ignored."""
        with self._lock:
            self._specs.pop(name, None)

    def get_spec(self, name: Any) -> Spec | None:
        """
        Get the named handle registered under `name`.

        Params:
            name: Schema name to look up

        Returns:
            Stored handle if found, None otherwise
        """
        if not isinstance(name, Keyword):
            return None
        return self._specs.get(name)

    def lookup(self, name: Any) -> Any | None:
        """Get the stored definition (form) for a name, or None."""
        handle = self.get_spec(name)
        return handle.form if handle is not None else None

    def has_spec(self, name: Any) -> bool:
        return self.get_spec(name) is not None

    def names(self) -> list[Keyword]:
        """Registered schema names in registration order."""
        return list(self._specs)

    def resolve_form(self, handle: Any) -> Any:
        """
        Resolve a handle or name to its literal form.

        Params:
            handle: `Spec` handle or `Keyword` name

        Returns:
            The stored form, or `UNKNOWN` when the handle has no inspectable form
        """
        if isinstance(handle, Spec):
            return handle.form
        if isinstance(handle, Keyword):
            stored = self._specs.get(handle)
            return stored.form if stored is not None else UNKNOWN
        return UNKNOWN

    def register_predicate(self, predicate: Any, name: Symbol) -> None:
        """
        Give a bare predicate a symbolic name.

        Params:
            predicate: Hashable predicate value, usually a function
            name: Symbol the walker dispatches the predicate under
        """
        if not isinstance(name, Symbol):
            raise TypeError(f"Predicate names must be symbols, got {name!r}")
        with self._lock:
            self._predicates[predicate] = name

    def predicate_name(self, predicate: Any) -> Symbol | None:
        """Symbolic name of a bare predicate, or None if it has none."""
        try:
            return self._predicates.get(predicate)
        except TypeError:
            return None

    def clear(self) -> None:
        """Remove every definition and predicate name."""
        with self._lock:
            self._specs.clear()
            self._predicates.clear()

    def __contains__(self, name: Any) -> bool:
        return self.has_spec(name)

    def __len__(self) -> int:
        return len(self._specs)


default_registry = SpecRegistry()


def register_spec(name: Keyword, definition: Any) -> Spec:
    """Register a definition in the default registry."""
    return default_registry.register(name, definition)
