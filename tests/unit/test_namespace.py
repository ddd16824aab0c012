"""
Unit tests for the ordered namespace.
"""

import pytest

from noconflict.namespace import Namespace
from noconflict.resolution import ABSENT


@pytest.fixture
def ns():
    return Namespace().set("jQuery", "jq").set("_", "underscore").set("Backbone", "bb")


class TestNamespaceSetGet:
    """Test set/get semantics."""

    def test_set_chains(self):
        ns = Namespace()
        assert ns.set("a", 1) is ns

    def test_update_keeps_position(self, ns):
        ns.set("jQuery", "jq2")
        assert ns.names() == ["jQuery", "_", "Backbone"]
        assert ns.get("jQuery") == "jq2"

    def test_get_all(self, ns):
        assert ns.get() == {"jQuery": "jq", "_": "underscore", "Backbone": "bb"}

    def test_get_missing(self, ns):
        assert ns.get("nope") is ABSENT

    def test_get_empty_name_is_a_lookup(self, ns):
        assert ns.get("") is ABSENT
        ns.set("", "blank")
        assert ns.get("") == "blank"

    def test_container_protocol(self, ns):
        assert "_" in ns
        assert len(ns) == 3
        assert list(ns) == ["jQuery", "_", "Backbone"]


class TestNamespaceApply:
    """Test the ordered handler call."""

    def test_insertion_order(self, ns):
        ns.set("_", "underscore2")
        seen = []
        ns.apply(lambda *values: seen.extend(values))
        assert seen == ["jq", "underscore2", "bb"]

    def test_explicit_names(self, ns):
        seen = []
        ns.apply(["Backbone", "jQuery"], lambda *values: seen.extend(values))
        assert seen == ["bb", "jq"]

    def test_this_defaults_to_namespace(self, ns):
        seen = {}

        def handler(jq, us, bb, *, this):
            seen["this"] = this

        ns.apply(handler)
        assert seen["this"] is ns

    def test_positional_this_is_a_value_slot(self, ns):
        seen = []

        def handler(jq, this, *rest):
            seen.extend([jq, this, *rest])

        ns.apply(handler)
        assert seen == ["jq", "underscore", "bb"]

    def test_bound_object(self, ns):
        marker = object()
        seen = {}

        def handler(*values, this):
            seen["this"] = this

        ns.apply(handler, marker)
        assert seen["this"] is marker

        ns.apply(["_"], handler, marker)
        assert seen["this"] is marker

    def test_returns_nothing(self, ns):
        assert ns.apply(lambda *values: "ignored") is None

    def test_non_callable_handler_is_noop(self, ns):
        ns.apply(["jQuery"], "not callable")
        ns.apply(["jQuery"])
