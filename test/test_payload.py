"""
Tests for PayloadDecoder.
"""

import pytest

from marquee.exceptions import DecodeError
from marquee.payload import PAYLOAD_SCHEMA, Payload, PayloadDecoder


@pytest.fixture
def decoder():
    return PayloadDecoder()


class TestDecode:
    """Successful decoding."""

    def test_content_only_uses_defaults(self, decoder):
        assert decoder.decode('{"content": "hello"}') == Payload(content="hello")

    def test_all_fields(self, decoder):
        payload = decoder.decode(
            '{"prefix": "> ", "content": "hello", "suffix": " <", "rotate": false}'
        )
        assert payload == Payload(content="hello", prefix="> ", suffix=" <", rotate=False)

    def test_unknown_keys_ignored(self, decoder):
        assert decoder.decode('{"content": "x", "color": "red"}').content == "x"

    def test_unicode_content(self, decoder):
        assert decoder.decode('{"content": "caf\\u00e9 ✓"}').content == "café ✓"


class TestDecodeErrors:
    """Malformed payloads."""

    def test_invalid_json(self, decoder):
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode("{not json}")
        assert exc_info.value.raw == "{not json}"
        assert exc_info.value.message == "Error parsing JSON"
        assert exc_info.value.cause

    def test_missing_content(self, decoder):
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode('{"prefix": "x"}')
        assert "content" in exc_info.value.cause

    @pytest.mark.parametrize("raw", [
        '{"content": 5}',
        '{"content": "x", "rotate": "yes"}',
        '{"content": "x", "prefix": null}',
        '["content"]',
        '"content"',
    ])
    def test_schema_violations(self, decoder, raw):
        with pytest.raises(DecodeError):
            decoder.decode(raw)

    def test_deeply_nested_document(self, decoder):
        raw = "[" * 100000
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode(raw)
        assert exc_info.value.raw == raw
        assert exc_info.value.message == "Error parsing JSON"

    def test_error_string_includes_cause(self, decoder):
        with pytest.raises(DecodeError) as exc_info:
            decoder.decode('{"content": 5}')
        assert "cause=" in str(exc_info.value)


class TestValidate:
    """Schema validation helper."""

    def test_valid_document(self, decoder):
        assert decoder.validate({"content": "x"}) == []

    def test_type_error_message(self, decoder):
        errors = decoder.validate({"content": "x", "rotate": 1})
        assert errors == ["Field 'rotate': Expected type boolean, got int"]

    def test_schema_requires_content(self):
        assert PAYLOAD_SCHEMA["required"] == ["content"]
