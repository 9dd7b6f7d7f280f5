"""Tests for JsonSerializer."""

import pytest

from cachedrest.core.entities import Employee
from cachedrest.infrastructure.serializers.json import JsonSerializer, SerializationError


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        """Create a serializer for testing."""
        return JsonSerializer()

    def test_serialize_cached_response(self, serializer: JsonSerializer) -> None:
        """Test serializing the shape the middleware stores."""
        data = {
            "status": 200,
            "headers": [["content-type", "application/json"]],
            "body": '[{"firstName":"Jane"}]',
        }
        result = serializer.serialize(data)

        assert isinstance(result, bytes)
        assert serializer.deserialize(result) == data

    def test_latin1_body_survives(self, serializer: JsonSerializer) -> None:
        """Test that arbitrary bytes stored as latin-1 text come back intact."""
        raw = bytes(range(256))
        data = {"body": raw.decode("latin-1")}

        restored = serializer.deserialize(serializer.serialize(data))

        assert restored["body"].encode("latin-1") == raw

    def test_serialize_records(self, serializer: JsonSerializer) -> None:
        """Test records are encoded through to_dict."""
        employee = Employee(first_name="Jane", last_name="Smith", age=20)

        result = serializer.deserialize(serializer.serialize([employee]))

        assert result == [{"firstName": "Jane", "lastName": "Smith", "age": 20}]

    def test_serialize_none(self, serializer: JsonSerializer) -> None:
        """Test serializing None."""
        assert serializer.deserialize(serializer.serialize(None)) is None

    def test_deserialize_invalid_json(self, serializer: JsonSerializer) -> None:
        """Test deserializing invalid JSON raises error."""
        with pytest.raises(SerializationError):
            serializer.deserialize(b"not valid json")

    def test_deserialize_invalid_encoding(self, serializer: JsonSerializer) -> None:
        """Test deserializing invalid encoding raises error."""
        with pytest.raises(SerializationError):
            serializer.deserialize(b"\xff\xfe")

    def test_serialize_unsupported_object(self, serializer: JsonSerializer) -> None:
        """Test objects without to_dict raise SerializationError."""
        with pytest.raises(SerializationError):
            serializer.serialize({"value": object()})

    def test_serialize_circular(self, serializer: JsonSerializer) -> None:
        """Test circular references raise SerializationError."""
        circular: dict = {}
        circular["self"] = circular
        with pytest.raises(SerializationError):
            serializer.serialize(circular)
