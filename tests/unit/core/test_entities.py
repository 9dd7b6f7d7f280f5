"""Tests for core entities."""

from datetime import timedelta

import pytest
from starlette.datastructures import QueryParams

from cachedrest.core.entities import (
    CacheConfig,
    CacheEntry,
    Employee,
    QuerySpec,
    RequestSignature,
    User,
)


class TestCacheEntry:
    """Tests for CacheEntry entity."""

    def test_create_cache_entry(self, clock) -> None:
        """Test creating a cache entry with factory method."""
        entry = CacheEntry.create(
            key="test:key",
            value={"data": "value"},
            ttl=timedelta(minutes=5),
            timer=clock,
        )

        assert entry.key == "test:key"
        assert entry.value == {"data": "value"}
        assert entry.ttl == timedelta(minutes=5)
        assert entry.created_at == 1000.0

    def test_expires_at(self) -> None:
        """Test expires_at is creation time plus TTL."""
        entry = CacheEntry(key="k", value=1, created_at=10.0, ttl=timedelta(seconds=300))

        assert entry.expires_at == 310.0

    def test_is_expired_boundary(self) -> None:
        """Test an entry is served strictly before expires_at only."""
        entry = CacheEntry(key="k", value=1, created_at=10.0, ttl=timedelta(seconds=5))

        assert not entry.is_expired(14.999)
        assert entry.is_expired(15.0)
        assert entry.is_expired(20.0)

    def test_cache_entry_immutable(self) -> None:
        """Test that CacheEntry is immutable."""
        entry = CacheEntry(key="k", value=1, created_at=0.0, ttl=timedelta(seconds=1))

        with pytest.raises(AttributeError):
            entry.key = "new_key"  # type: ignore


class TestRequestSignature:
    """Tests for RequestSignature value object."""

    def test_from_components(self) -> None:
        """Test parsing method, path and query string."""
        signature = RequestSignature.from_components(
            "get", "/employees", "lastName=Smith&firstName=Jane"
        )

        assert signature.method == "GET"
        assert signature.path == "/employees"
        assert signature.query == (("firstName", "Jane"), ("lastName", "Smith"))

    def test_parameter_order_does_not_matter(self) -> None:
        """Test that reordered parameters give the same signature."""
        a = RequestSignature.from_components("GET", "/employees", "a=1&b=2")
        b = RequestSignature.from_components("GET", "/employees", "b=2&a=1")

        assert a == b

    def test_repeated_names_keep_order(self) -> None:
        """Test repeated parameters keep their relative order."""
        signature = RequestSignature.from_components("GET", "/e", "x=2&a=1&x=1")

        assert signature.query == (("a", "1"), ("x", "2"), ("x", "1"))

    def test_blank_values_are_kept(self) -> None:
        """Test that ``?a=`` differs from no parameter at all."""
        blank = RequestSignature.from_components("GET", "/e", "a=")
        bare = RequestSignature.from_components("GET", "/e", "")

        assert blank.query == (("a", ""),)
        assert blank != bare

    def test_bytes_query_string(self) -> None:
        """Test raw ASGI query strings are accepted."""
        signature = RequestSignature.from_components("GET", "/e", b"firstName=Jane")

        assert signature.query == (("firstName", "Jane"),)


class TestQuerySpec:
    """Tests for QuerySpec."""

    def test_from_params(self) -> None:
        """Test building a spec from query parameters."""
        spec = QuerySpec.from_params({"firstName": "Jane", "age": "20"})

        assert spec == QuerySpec(first_name="Jane", last_name=None, age="20")
        assert not spec.is_empty

    def test_empty_strings_are_absent(self) -> None:
        """Test that empty values contribute no attribute."""
        spec = QuerySpec.from_params({"firstName": "", "lastName": "", "age": ""})

        assert spec.is_empty

    def test_unknown_params_ignored(self) -> None:
        """Test parameters other than the three attributes are ignored."""
        assert QuerySpec.from_params({"email": "x"}).is_empty

    def test_repeated_params_keep_every_value(self) -> None:
        """Test a name given more than once becomes a tuple of its values."""
        params = QueryParams("firstName=Jane&firstName=John&age=20")
        spec = QuerySpec.from_params(params)

        assert spec.first_name == ("Jane", "John")
        assert spec.age == "20"
        assert spec.last_name is None

    def test_repeated_blank_params_are_not_absent(self) -> None:
        """Test only a single blank value counts as absent."""
        assert QuerySpec.from_params(QueryParams("age=")).is_empty
        assert QuerySpec.from_params(QueryParams("age=&age=")).age == ("", "")


class TestRecords:
    """Tests for Employee and User records."""

    def test_employee_to_dict_uses_camel_case(self) -> None:
        employee = Employee(first_name="Jane", last_name="Smith", age=20)

        assert employee.to_dict() == {"firstName": "Jane", "lastName": "Smith", "age": 20}

    def test_user_to_dict(self) -> None:
        assert User(email="abc@foo.com").to_dict() == {"email": "abc@foo.com"}


class TestCacheConfig:
    """Tests for CacheConfig entity."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CacheConfig()

        assert config.enabled is True
        assert config.default_ttl == timedelta(minutes=5)
        assert config.max_size == 1000
        assert config.key_prefix == "cachedrest"
        assert config.cacheable_status_codes == (200,)
        assert config.invalidate_on_write is False

    def test_custom_ttl_kept(self) -> None:
        """Test an explicit TTL is not replaced by the default."""
        config = CacheConfig(default_ttl=timedelta(seconds=30))

        assert config.default_ttl == timedelta(seconds=30)
