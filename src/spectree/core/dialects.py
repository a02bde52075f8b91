"""
Dialect configuration for spectree.

The same schema language is evaluated under two runtime families that spell
their combinators under different namespaces. This module configures which
namespaces are synonyms of the canonical one, and which heads introduce the
anonymous-function wrappers the dispatcher sees through.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from spectree.core.types import Symbol
from spectree.exceptions import DialectConfigError

CANONICAL_NAMESPACE = "clojure.spec.alpha"


@dataclass(frozen=True)
class DialectConfig:
    """Namespace aliasing and wrapper detection settings.

    Can be created from defaults, a dict or a YAML file with partial
    overrides. Only specified values override defaults.

    Examples:
        # All defaults
        dialect = DialectConfig()

        # Add another namespace spelling of the same combinators
        dialect = DialectConfig.from_dict({
            "alternate_namespaces": ["cljs.spec.alpha", "my.spec"]
        })

        # From YAML file
        dialect = DialectConfig.from_yaml("dialect.yaml")
    """

    canonical_namespace: str = CANONICAL_NAMESPACE
    alternate_namespaces: frozenset[str] = frozenset(
        {"cljs.spec.alpha", "clojure.spec"}
    )
    wrapper_heads: frozenset[Symbol] = frozenset(
        {
            Symbol(None, "fn"),
            Symbol(None, "fn*"),
            Symbol("clojure.core", "fn"),
            Symbol("cljs.core", "fn"),
        }
    )

    def __post_init__(self):
        if not self.canonical_namespace or not isinstance(
            self.canonical_namespace, str
        ):
            raise DialectConfigError(
                "canonical_namespace",
                self.canonical_namespace,
                "must be a non-empty string",
            )
        if self.canonical_namespace in self.alternate_namespaces:
            raise DialectConfigError(
                "alternate_namespaces",
                sorted(self.alternate_namespaces),
                "must not contain the canonical namespace",
            )

    def canonicalize(self, name: Any) -> Any:
        """
        Rewrite an alternate-dialect symbol to the canonical namespace.

        Total over all inputs: anything that is not a symbol in one of the
        alternate namespaces is returned unchanged.

        Params:
            name: Qualified name (or any other value) to normalize

        Returns:
            The canonical symbol, or the input itself
        """
        if isinstance(name, Symbol) and name.namespace in self.alternate_namespaces:
            return Symbol(self.canonical_namespace, name.name)
        return name

    def is_wrapper_head(self, head: Any) -> bool:
        """Check whether a head introduces a single-parameter anonymous function."""
        return isinstance(head, Symbol) and head in self.wrapper_heads

    @classmethod
    def from_dict(cls, config: dict[str, Any] | None = None) -> DialectConfig:
        """Create from dict, only overriding specified values.

        Namespaces are given as strings; wrapper heads as `namespace/name`
        strings. Unknown keys are ignored.

        Args:
            config: Dictionary with partial overrides

        Returns:
            DialectConfig instance with specified overrides
        """
        if config is None:
            config = {}
        valid_fields = {f.name for f in dataclass_fields(cls)}
        config = {k: v for k, v in config.items() if k in valid_fields}
        values: dict[str, Any] = {}

        if "canonical_namespace" in config:
            values["canonical_namespace"] = config["canonical_namespace"]
        if "alternate_namespaces" in config:
            values["alternate_namespaces"] = frozenset(
                _string_entries(
                    "alternate_namespaces",
                    config["alternate_namespaces"],
                    "must be a list of strings",
                )
            )
        if "wrapper_heads" in config:
            heads = _string_entries(
                "wrapper_heads", config["wrapper_heads"], "must be a list of symbol names"
            )
            values["wrapper_heads"] = frozenset(Symbol.parse(h) for h in heads)

        return cls(**values)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> DialectConfig:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            DialectConfig instance with YAML overrides

        Example YAML:
            alternate_namespaces:
              - cljs.spec.alpha
              - clojure.spec
            wrapper_heads:
              - fn
              - clojure.core/fn
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)


def _string_entries(field_name: str, value: Any, reason: str) -> list[str]:
    """Validate a list-like config value whose entries are all strings."""
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise DialectConfigError(field_name, value, reason)
    for entry in value:
        if not isinstance(entry, str):
            raise DialectConfigError(field_name, value, reason)
    return list(value)


DEFAULT_DIALECT = DialectConfig()


def canonicalize(name: Any) -> Any:
    """Canonicalize a name under the default dialect."""
    return DEFAULT_DIALECT.canonicalize(name)
