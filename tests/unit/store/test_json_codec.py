"""Unit tests for the JSON document codec."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from core.errors import PlayerDataSerializationError
from store.json_codec import JsonCodec


@dataclass(frozen=True)
class Settings:
    volume: float
    fullscreen: bool
    language: str | None = None


def test_encode_writes_sorted_indented_json() -> None:
    """Encoded documents should be stable, indented JSON."""
    text = JsonCodec().encode(Settings(volume=0.5, fullscreen=True))

    assert json.loads(text) == {"fullscreen": True, "language": None, "volume": 0.5} and (
        text.index('"fullscreen"') < text.index('"volume"')
    )


def test_decode_untyped_returns_plain_payload() -> None:
    """Decoding into dict should return the parsed object."""
    assert JsonCodec().decode('{"a": [1, 2]}', dict) == {"a": [1, 2]}


def test_decode_type_mismatch_raises_serialization_error() -> None:
    """Payloads that do not fit the target type should fail."""
    with pytest.raises(PlayerDataSerializationError):
        JsonCodec().decode('{"volume": "loud", "fullscreen": true}', Settings)


def test_decode_invalid_json_raises_serialization_error() -> None:
    """Malformed JSON should fail with the parser cause chained."""
    with pytest.raises(PlayerDataSerializationError) as error_info:
        JsonCodec().decode("[1, 2", list)

    assert isinstance(error_info.value.__cause__, json.JSONDecodeError)


@dataclass(frozen=True)
class LevelScores:
    by_level: dict[int, str]


def test_decode_restores_typed_mapping_keys() -> None:
    """Integer keys should come back as integers, not strings."""
    scores = LevelScores(by_level={1: "a", 10: "b"})

    decoded = JsonCodec().decode(JsonCodec().encode(scores), LevelScores)

    assert decoded == scores and all(isinstance(key, int) for key in decoded.by_level)


def test_decode_invalid_mapping_key_raises_serialization_error() -> None:
    """Keys that cannot be coerced to the key type should fail."""
    with pytest.raises(PlayerDataSerializationError):
        JsonCodec().decode('{"by_level": {"one": "a"}}', LevelScores)
