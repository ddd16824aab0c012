"""
Unit tests for the binding cache.
"""

from noconflict.resolution import ABSENT, BindingCache


class TestBindingCache:
    """Test record/lookup/forget/clear."""

    def test_record_overwrites(self):
        cache = BindingCache()
        cache.record("jq", "v1")
        cache.record("jq", "v2")
        assert cache.lookup("jq") == "v2"
        assert len(cache) == 1

    def test_lookup_missing(self):
        assert BindingCache().lookup("nope") is ABSENT

    def test_context_is_kept(self):
        cache = BindingCache()
        ctx = {}
        cache.record("a", 1, ctx)
        assert cache.context_of("a") is ctx
        assert cache.context_of("b") is None

    def test_forget(self):
        cache = BindingCache()
        cache.record("a", 1)
        cache.forget("a")
        cache.forget("a")
        assert "a" not in cache

    def test_names_keep_insertion_order(self):
        cache = BindingCache()
        for name in ["c", "a", "b"]:
            cache.record(name, name)
        cache.record("c", "again")
        assert cache.names() == ["c", "a", "b"]

    def test_clear(self):
        cache = BindingCache()
        cache.record("a", 1)
        cache.clear()
        assert len(cache) == 0
