"""
Payload Decoder

Decodes structured (JSON) input lines into a Payload when the marquee runs
with --json. Validation uses jsonschema against PAYLOAD_SCHEMA.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator, ValidationError

from marquee.exceptions import DecodeError
from marquee.logging_config import get_logger

logger = get_logger(__name__)


PAYLOAD_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "prefix": {
            "type": "string",
            "default": "",
            "description": "Text placed before the content"
        },
        "content": {
            "type": "string",
            "description": "The text to rotate"
        },
        "suffix": {
            "type": "string",
            "default": "",
            "description": "Text placed after the content"
        },
        "rotate": {
            "type": "boolean",
            "default": True,
            "description": "Whether the content scrolls when wider than the window"
        }
    },
    "required": ["content"]
}


@dataclass(frozen=True)
class Payload:
    """One decoded structured input value."""
    content: str
    prefix: str = ""
    suffix: str = ""
    rotate: bool = True


def _format_validation_error(error: ValidationError) -> str:
    path = '.'.join(str(p) for p in error.path)
    field_path = f"'{path}'" if path else "root"

    if error.validator == 'required':
        return f"Field {field_path}: {error.message}"
    elif error.validator == 'type':
        expected = error.validator_value
        actual = type(error.instance).__name__
        return f"Field {field_path}: Expected type {expected}, got {actual}"
    return f"Field {field_path}: {error.message}"


class PayloadDecoder:
    """Parses and validates structured payloads."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema or PAYLOAD_SCHEMA
        Draft7Validator.check_schema(self.schema)
        self._validator = Draft7Validator(self.schema)

    def validate(self, document: Any) -> List[str]:
        """
        Validate a parsed document against the payload schema.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = sorted(self._validator.iter_errors(document), key=lambda e: list(e.path))
        return [_format_validation_error(error) for error in errors]

    def decode(self, raw: str) -> Payload:
        """
        Decode a raw input line into a Payload.

        Args:
            raw: The raw input value

        Returns:
            The decoded Payload

        Raises:
            DecodeError: If the value is not valid JSON or does not match the schema
        """
        try:
            document = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # RecursionError: nesting deeper than the interpreter can decode
            raise DecodeError("Error parsing JSON", raw=raw, cause=str(e)) from e

        errors = self.validate(document)
        if errors:
            raise DecodeError("Invalid payload", raw=raw, cause="; ".join(errors))

        payload = Payload(
            content=document["content"],
            prefix=document.get("prefix", ""),
            suffix=document.get("suffix", ""),
            rotate=document.get("rotate", True),
        )
        logger.debug("Decoded payload: %s", payload)
        return payload
