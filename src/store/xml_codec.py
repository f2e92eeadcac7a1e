"""XML document codec.

This module maps typed values onto an ElementTree document. Dataclass
fields become child elements named after the field, sequences become
repeated ``<item>`` children, mappings become ``<entry key="...">``
children, and ``None`` is an empty element marked ``null="true"``.
Decoding is driven by the target type, then finished by the shared
payload mapping so XML and JSON apply the same typing rules.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin
import re
import xml.etree.ElementTree as ET

from core.constants import (
    XML_DEFAULT_ROOT_TAG,
    XML_ENTRY_TAG,
    XML_ITEM_TAG,
    XML_KEY_ATTRIBUTE,
    XML_NULL_ATTRIBUTE,
)
from core.errors import PlayerDataSerializationError
from store.payload_mapping import (
    MAPPING_ORIGINS,
    SEQUENCE_ORIGINS,
    field_type_hints,
    from_payload,
    payload_key,
    unwrap_optional,
)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_CARRIAGE_RETURN_REFERENCE = "&#13;"
_XML_ILLEGAL_CHARACTERS = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class XmlCodec:
    """Typed XML codec backed by xml.etree.ElementTree."""

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent

    def encode(self, value: object) -> str:
        """Serialize a value as an XML document.

        Raises:
            PlayerDataSerializationError: If the value is not serializable.
        """
        try:
            root = ET.Element(_root_tag(value))
            _fill_element(root, value)
        except (TypeError, ValueError) as error:
            raise PlayerDataSerializationError(
                f"Failed to encode {type(value).__name__} as XML: {error}"
            ) from error
        if self._indent:
            ET.indent(root, space=self._indent)
        body = ET.tostring(root, encoding="unicode").replace("\r", _CARRIAGE_RETURN_REFERENCE)
        return _XML_DECLARATION + body + "\n"

    def decode(self, text: str, target_type: Any) -> Any:
        """Deserialize an XML document into ``target_type``.

        Raises:
            PlayerDataSerializationError: If text is not well-formed XML or
                does not match the target type.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as error:
            raise PlayerDataSerializationError(
                f"Failed to parse XML document: {error}"
            ) from error
        try:
            return from_payload(_element_to_payload(root, target_type), target_type)
        except (TypeError, ValueError) as error:
            name = getattr(target_type, "__name__", repr(target_type))
            raise PlayerDataSerializationError(
                f"XML document does not match {name}: {error}"
            ) from error


def _root_tag(value: object) -> str:
    if is_dataclass(value) and not isinstance(value, type):
        return type(value).__name__
    return XML_DEFAULT_ROOT_TAG


def _fill_element(element: ET.Element, value: object) -> None:
    """Write a value into an element's attributes, text, and children."""
    if value is None:
        element.set(XML_NULL_ATTRIBUTE, "true")
        return
    if is_dataclass(value) and not isinstance(value, type):
        for item in fields(value):
            _fill_element(ET.SubElement(element, item.name), getattr(value, item.name))
        return
    if isinstance(value, Enum):
        _fill_element(element, value.value)
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            entry = ET.SubElement(
                element, XML_ENTRY_TAG, {XML_KEY_ATTRIBUTE: _xml_text(payload_key(key))}
            )
            _fill_element(entry, item)
        return
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=repr) if isinstance(value, (set, frozenset)) else value
        for item in items:
            _fill_element(ET.SubElement(element, XML_ITEM_TAG), item)
        return
    if isinstance(value, bool):
        element.text = "true" if value else "false"
        return
    if isinstance(value, (str, int, float, Path)):
        element.text = _xml_text(str(value))
        return
    raise TypeError(f"Unsupported value type for serialization: {type(value).__name__}.")


def _element_to_payload(element: ET.Element, target_type: Any) -> object:
    """Convert an element into a plain payload shaped by the target type."""
    if element.get(XML_NULL_ATTRIBUTE) == "true":
        return None
    shape = unwrap_optional(target_type)
    origin = get_origin(shape)
    children = list(element)
    if is_dataclass(shape) and isinstance(shape, type):
        hints = field_type_hints(shape)
        return {
            child.tag: _element_to_payload(child, hints.get(child.tag, Any)) for child in children
        }
    if origin in SEQUENCE_ORIGINS or shape in (list, tuple, set, frozenset):
        return [
            _element_to_payload(child, item_type)
            for child, item_type in zip(children, _item_types(shape, len(children)))
        ]
    if origin in MAPPING_ORIGINS or shape is dict:
        args = get_args(shape)
        value_type = args[1] if len(args) == 2 else Any
        return {
            child.get(XML_KEY_ATTRIBUTE, child.tag): _element_to_payload(child, value_type)
            for child in children
        }
    if shape is Any or shape is object:
        return _untyped_payload(element)
    return element.text or ""


def _item_types(shape: Any, count: int) -> list[Any]:
    args = get_args(shape)
    if get_origin(shape) is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        return [args[index] if index < len(args) else Any for index in range(count)]
    return [args[0] if args else Any] * count


def _untyped_payload(element: ET.Element) -> object:
    """Best-effort payload for elements without type information."""
    if element.get(XML_NULL_ATTRIBUTE) == "true":
        return None
    children = list(element)
    if not children:
        return element.text or ""
    if all(child.tag == XML_ITEM_TAG for child in children):
        return [_untyped_payload(child) for child in children]
    if all(child.tag == XML_ENTRY_TAG for child in children):
        return {
            child.get(XML_KEY_ATTRIBUTE, ""): _untyped_payload(child) for child in children
        }
    return {child.tag: _untyped_payload(child) for child in children}


def _xml_text(text: str) -> str:
    """Return text unchanged, rejecting characters XML 1.0 cannot hold."""
    match = _XML_ILLEGAL_CHARACTERS.search(text)
    if match is not None:
        raise ValueError(
            f"Character U+{ord(match.group()):04X} cannot be stored in an XML document."
        )
    return text
