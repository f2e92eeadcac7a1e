"""Unit tests for the XML document codec."""

from __future__ import annotations

from dataclasses import dataclass, field
import xml.etree.ElementTree as ET

import pytest

from core.errors import PlayerDataSerializationError
from store.xml_codec import XmlCodec


@dataclass(frozen=True)
class Inventory:
    owner: str
    gold: int
    items: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)
    guild: str | None = None


def test_encode_uses_dataclass_name_and_field_elements() -> None:
    """Dataclass fields should become child elements of a named root."""
    text = XmlCodec().encode(Inventory(owner="Ana", gold=10, items=["rope"], counts={"arrow": 5}))
    root = ET.fromstring(text)

    assert (
        root.tag == "Inventory"
        and root.findtext("gold") == "10"
        and [item.text for item in root.find("items")] == ["rope"]
        and root.find("counts/entry").get("key") == "arrow"
        and root.find("guild").get("null") == "true"
    )


def test_encode_starts_with_xml_declaration() -> None:
    """Encoded documents should declare UTF-8."""
    assert XmlCodec().encode(["a"]).startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_decode_restores_typed_fields() -> None:
    """Decoding should coerce element text using field types."""
    inventory = Inventory(owner="Ana", gold=10, items=["rope", "lamp"], counts={"arrow": 5})

    decoded = XmlCodec().decode(XmlCodec().encode(inventory), Inventory)

    assert decoded == inventory


def test_decode_keeps_empty_string_distinct_from_null() -> None:
    """Empty text and null markers should decode differently."""
    text = XmlCodec().encode(Inventory(owner="", gold=0, guild=None))
    decoded = XmlCodec().decode(text, Inventory)

    assert decoded.owner == "" and decoded.guild is None


def test_decode_untyped_document_returns_nested_payload() -> None:
    """Untyped decoding should map items to lists and entries to dicts."""
    text = "<document><entry key='a'><item>1</item><item>2</item></entry></document>"

    assert XmlCodec().decode(text, dict) == {"a": ["1", "2"]}


def test_decode_invalid_scalar_raises_serialization_error() -> None:
    """Element text that cannot be coerced should fail."""
    text = "<Inventory><owner>Ana</owner><gold>lots</gold></Inventory>"

    with pytest.raises(PlayerDataSerializationError):
        XmlCodec().decode(text, Inventory)


def test_decode_malformed_xml_raises_serialization_error() -> None:
    """Malformed XML should fail with the parser cause chained."""
    with pytest.raises(PlayerDataSerializationError) as error_info:
        XmlCodec().decode("<Inventory>", Inventory)

    assert isinstance(error_info.value.__cause__, ET.ParseError)


@dataclass(frozen=True)
class LevelScores:
    by_level: dict[int, str]


def test_encode_escapes_carriage_return_as_reference() -> None:
    """Carriage returns should be written as character references."""
    text = XmlCodec().encode(["a\rb"])

    assert "&#13;" in text and "\r" not in text


def test_encode_rejects_illegal_control_character() -> None:
    """Control characters outside XML 1.0 should fail to encode."""
    with pytest.raises(PlayerDataSerializationError):
        XmlCodec().encode(Inventory(owner="a\x01b", gold=0))


def test_decode_restores_typed_mapping_keys() -> None:
    """Mapping keys should be coerced to the declared key type."""
    scores = LevelScores(by_level={1: "a", 2: "b"})

    assert XmlCodec().decode(XmlCodec().encode(scores), LevelScores) == scores
