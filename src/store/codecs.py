"""Serializer collaborator contract for document stores."""

from __future__ import annotations

from typing import Any, Protocol


class DocumentCodec(Protocol):
    """Text codec used by DocumentStore for typed documents.

    Implementations raise PlayerDataSerializationError for any encode or
    decode failure, with the underlying cause chained.
    """

    def encode(self, value: object) -> str:
        """Serialize a value into document text."""
        ...

    def decode(self, text: str, target_type: Any) -> Any:
        """Deserialize document text into ``target_type``."""
        ...
