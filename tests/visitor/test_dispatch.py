"""
Tests for dispatch classification.

This module tests how each of the five node representations converges onto a
dispatch key:
- handles and registered names (including alias chains and unknown forms)
- raw sets
- literal expressions (with and without anonymous-function wrappers)
- bare symbols
- bare predicates
"""

import pytest

from spectree.core import kw, sym
from spectree.exceptions import UnresolvableHandleError
from spectree.registry import spec
from spectree.visitor import ENUMERATION, Opaque, dispatch_key, extract_form, keys

X = sym("x")


def is_int(value):
    return isinstance(value, int)


class TestDispatchKey:
    """Test dispatch_key over every node representation."""

    def test_literal_expression(self, registry):
        """Test that an expression keys on its head."""
        assert dispatch_key((sym("clojure.spec.alpha/and"), is_int), registry) == keys.AND

    def test_alternate_dialect_expression(self, registry):
        """Test that alternate namespaces converge on the canonical key."""
        clj = dispatch_key((sym("clojure.spec.alpha/or"), kw(":a"), is_int), registry)
        cljs = dispatch_key((sym("cljs.spec.alpha/or"), kw(":a"), is_int), registry)
        assert clj == cljs == keys.OR

    def test_wrapped_expression(self, registry):
        """Test that a (fn [x] ...) wrapper is seen through."""
        form = (sym("fn"), [X], (sym("clojure.core/contains?"), X, kw(":a")))
        assert dispatch_key(form, registry) == sym("clojure.core/contains?")

    def test_raw_set(self, registry):
        """Test that sets are enumerations."""
        assert dispatch_key({kw(":red"), kw(":green")}, registry) == ENUMERATION
        assert dispatch_key(frozenset(), registry) == ENUMERATION

    def test_bare_symbol(self, registry):
        """Test that symbols are canonicalized."""
        assert dispatch_key(sym("cljs.spec.alpha/any"), registry) == sym(
            "clojure.spec.alpha/any"
        )
        assert dispatch_key(sym("clojure.core/int?"), registry) == sym("clojure.core/int?")

    def test_handle_with_expression_form(self, registry):
        """Test that handles key on the head of their form."""
        handle = spec((sym("cljs.spec.alpha/nilable"), is_int))
        assert dispatch_key(handle, registry) == keys.NILABLE

    def test_handle_with_set_form(self, registry):
        """Test that a handle around a set is an enumeration."""
        assert dispatch_key(spec({1, 2}), registry) == ENUMERATION

    def test_registered_name(self, registry):
        """Test that names key on their registered form."""
        registry.register(kw(":app/tags"), (sym("clojure.spec.alpha/coll-of"), str))
        assert dispatch_key(kw(":app/tags"), registry) == keys.COLL_OF

    def test_alias_chain(self, registry):
        """Test that a name aliasing another name follows the chain."""
        registry.register(kw(":app/base"), (sym("clojure.spec.alpha/tuple"), int, str))
        registry.register(kw(":app/alias"), kw(":app/base"))
        assert dispatch_key(kw(":app/alias"), registry) == keys.TUPLE

    def test_unknown_name_is_opaque(self, registry):
        """Test that unresolvable names become their own key."""
        assert dispatch_key(kw(":app/missing"), registry) == Opaque(kw(":app/missing"))

    def test_named_predicate(self, registry):
        """Test that bare predicates use the resolver's symbolic name."""
        registry.register_predicate(is_int, sym("cljs.core/int?"))
        assert dispatch_key(is_int, registry) == sym("cljs.core/int?")

    def test_anonymous_predicate_is_opaque(self, registry):
        """Test that predicates without a name key on themselves."""
        assert dispatch_key(is_int, registry) == Opaque(is_int)

    def test_non_symbol_head_is_opaque(self, registry):
        """Test that a tuple not headed by a symbol is an opaque leaf."""
        node = (1, 2, 3)
        assert dispatch_key(node, registry) == Opaque(node)


class TestOpaque:
    """Test value semantics of opaque keys."""

    def test_equal_handles(self):
        """Test that opaque keys compare by handle value."""
        assert Opaque(kw(":a")) == Opaque(kw(":a"))
        assert hash(Opaque(kw(":a"))) == hash(Opaque(kw(":a")))
        assert Opaque(kw(":a")) != Opaque(kw(":b"))

    def test_unhashable_handle(self):
        """Test that unhashable handles still produce a usable key."""
        key = Opaque([1, 2])
        assert key == Opaque([1, 2])
        assert hash(key) == hash(Opaque([1, 2]))
        assert {key: "found"}[Opaque([1, 2])] == "found"

    def test_not_equal_to_raw_handle(self):
        """Test that an opaque key differs from the bare handle."""
        assert Opaque(is_int) != is_int

    def test_numeric_handles_of_different_types(self):
        """Test that handles comparing equal across types give different keys."""
        assert Opaque(1) != Opaque(True)
        assert Opaque(1) != Opaque(1.0)
        assert Opaque(0) != Opaque(False)
        assert len({Opaque(1), Opaque(True), Opaque(1.0)}) == 3

    def test_handler_row_not_shared_across_types(self, visitor, recorder):
        """Test that a row registered for one literal does not catch its look-alikes."""
        visitor.register(Opaque(1), lambda visitor, key, node, accept, context: "one")
        assert visitor.visit(1, recorder) == "one"
        assert visitor.visit(True, recorder) == (Opaque(True), True, ())
        assert visitor.visit(1.0, recorder) == (Opaque(1.0), 1.0, ())


class TestExtractForm:
    """Test form extraction used by handlers."""

    def test_plain_form(self, registry):
        """Test that literal forms come back as is."""
        form = (sym("clojure.spec.alpha/and"), is_int)
        assert extract_form(form, registry) is form

    def test_follows_aliases(self, registry):
        """Test that handles and names are resolved to the underlying form."""
        registry.register(kw(":app/base"), {1, 2})
        registry.register(kw(":app/alias"), kw(":app/base"))
        assert extract_form(spec(kw(":app/alias")), registry) == {1, 2}

    def test_strips_wrapper(self, registry):
        """Test that handlers see the wrapped body."""
        body = (sym("clojure.spec.alpha/and"), is_int)
        assert extract_form((sym("fn"), [X], body), registry) == body

    def test_unresolvable(self, registry):
        """Test that destructuring an unknown handle fails."""
        with pytest.raises(UnresolvableHandleError) as excinfo:
            extract_form(kw(":app/missing"), registry)
        assert excinfo.value.handle == kw(":app/missing")
