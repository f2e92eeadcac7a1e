"""JSON document codec.

This module serializes typed values with the standard json module and
rebuilds them through the shared payload mapping.
"""

from __future__ import annotations

import json
from typing import Any

from core.constants import DEFAULT_JSON_INDENT
from core.errors import PlayerDataSerializationError
from store.payload_mapping import from_payload, to_payload


class JsonCodec:
    """Typed JSON codec."""

    def __init__(self, indent: int | None = DEFAULT_JSON_INDENT) -> None:
        self._indent = indent

    def encode(self, value: object) -> str:
        """Serialize a value as JSON text.

        Raises:
            PlayerDataSerializationError: If the value is not serializable.
        """
        try:
            payload = to_payload(value)
            return json.dumps(payload, indent=self._indent, sort_keys=True) + "\n"
        except (TypeError, ValueError) as error:
            raise PlayerDataSerializationError(
                f"Failed to encode {type(value).__name__} as JSON: {error}"
            ) from error

    def decode(self, text: str, target_type: Any) -> Any:
        """Deserialize JSON text into ``target_type``.

        Raises:
            PlayerDataSerializationError: If text is not valid JSON or does
                not match the target type.
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as error:
            raise PlayerDataSerializationError(
                f"Failed to parse JSON document: {error.msg} "
                f"(line {error.lineno}, column {error.colno})."
            ) from error
        try:
            return from_payload(payload, target_type)
        except (TypeError, ValueError) as error:
            raise PlayerDataSerializationError(
                f"JSON document does not match {_type_name(target_type)}: {error}"
            ) from error


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))
