"""Tests for DefaultKeyBuilder."""

import fnmatch

import pytest

from cachedrest.core.entities import RequestSignature
from cachedrest.infrastructure.key_builders.default import DefaultKeyBuilder


def sig(path: str, query: str = "", method: str = "GET") -> RequestSignature:
    return RequestSignature.from_components(method, path, query)


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder(prefix="test")

    def test_build_key_without_query(self, key_builder: DefaultKeyBuilder) -> None:
        """Test a request without parameters has no query part."""
        assert key_builder.build(sig("/employees")) == "test:GET:/employees"

    def test_build_key_with_query(self, key_builder: DefaultKeyBuilder) -> None:
        """Test a query hash is appended."""
        key = key_builder.build(sig("/employees", "firstName=Jane"))

        assert key.startswith("test:GET:/employees:q:")

    def test_same_request_same_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that equal requests produce equal keys."""
        assert key_builder.build(sig("/e", "a=1&b=2")) == key_builder.build(sig("/e", "b=2&a=1"))

    def test_different_values_different_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that different values produce different keys."""
        jane = key_builder.build(sig("/employees", "firstName=Jane"))
        john = key_builder.build(sig("/employees", "firstName=John"))

        assert jane != john

    def test_different_names_different_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that the same value under a different name differs."""
        first = key_builder.build(sig("/employees", "firstName=Smith"))
        last = key_builder.build(sig("/employees", "lastName=Smith"))

        assert first != last

    def test_method_is_part_of_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that the method distinguishes keys."""
        assert key_builder.build(sig("/e", method="GET")) != key_builder.build(sig("/e", method="HEAD"))

    def test_default_prefix(self) -> None:
        """Test the default prefix."""
        assert DefaultKeyBuilder().build(sig("/articles")) == "cachedrest:GET:/articles"

    def test_path_patterns_match_resource_and_children(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Test invalidation patterns cover a resource and its sub-paths only."""
        patterns = key_builder.build_path_patterns("get", "/articles/")
        keys = {
            "root": key_builder.build(sig("/articles")),
            "query": key_builder.build(sig("/articles", "x=1")),
            "child": key_builder.build(sig("/articles/1/comments")),
            "sibling": key_builder.build(sig("/articlesarchive")),
            "other": key_builder.build(sig("/employees")),
        }

        matched = {
            name for name, key in keys.items()
            if any(fnmatch.fnmatchcase(key, pattern) for pattern in patterns)
        }

        assert matched == {"root", "query", "child"}

    def test_path_patterns_escape_glob_characters(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Test that glob metacharacters in paths are matched literally."""
        patterns = key_builder.build_path_patterns("GET", "/a[1]")

        assert fnmatch.fnmatchcase("test:GET:/a[1]", patterns[0])
        assert not fnmatch.fnmatchcase("test:GET:/a1", patterns[0])
