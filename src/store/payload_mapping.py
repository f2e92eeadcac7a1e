"""Typed value <-> plain payload mapping shared by document codecs.

This module turns dataclasses and containers into JSON-safe payloads
and rebuilds typed values from payloads using type hints. Scalars given
as strings are coerced, which lets text-only formats such as XML share
the same typing rules as JSON.
"""

from __future__ import annotations

import collections.abc
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from pathlib import Path
import types
from typing import Any, Mapping, Union, get_args, get_origin, get_type_hints

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})
SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
)
MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


def to_payload(value: object) -> object:
    """Convert a typed value into a JSON-safe payload.

    Args:
        value: Dataclass instance, container, or scalar.

    Returns:
        Nested dicts, lists, and scalars.

    Raises:
        TypeError: If the value contains an unsupported type.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: to_payload(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, Enum):
        return to_payload(value.value)
    if isinstance(value, Mapping):
        return {payload_key(key): to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_payload(item) for item in sorted(value, key=repr)]
    if isinstance(value, Path):
        return str(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"Unsupported value type for serialization: {type(value).__name__}.")


def payload_key(key: object) -> str:
    """Convert a mapping key into its string payload form.

    Raises:
        TypeError: If the key is not a scalar.
    """
    payload = to_payload(key)
    if isinstance(payload, bool):
        return "true" if payload else "false"
    if isinstance(payload, (str, int, float)):
        return str(payload)
    raise TypeError(f"Unsupported mapping key type: {type(key).__name__}.")


def from_payload(payload: object, target_type: Any) -> Any:
    """Rebuild a typed value from a plain payload.

    Args:
        payload: Decoded payload of dicts, lists, and scalars.
        target_type: Type hint describing the expected value.

    Returns:
        Value of ``target_type``.

    Raises:
        TypeError: If the payload shape does not match the type.
        ValueError: If a scalar cannot be coerced or a field is missing.
    """
    if target_type is Any or target_type is object:
        return payload
    if target_type is None or target_type is type(None):
        if payload is not None:
            raise TypeError(f"Expected null, got {type(payload).__name__}.")
        return None
    origin = get_origin(target_type)
    if origin is Union or origin is types.UnionType:
        return _union_from_payload(payload, get_args(target_type))
    if is_dataclass(target_type) and isinstance(target_type, type):
        return _dataclass_from_payload(payload, target_type)
    if origin in SEQUENCE_ORIGINS or target_type in (list, tuple, set, frozenset):
        return _sequence_from_payload(payload, target_type, origin or target_type)
    if origin in MAPPING_ORIGINS or target_type is dict:
        return _mapping_from_payload(payload, target_type)
    if isinstance(target_type, type) and issubclass(target_type, Enum):
        return _enum_from_payload(payload, target_type)
    if target_type is bool:
        return _bool_from_payload(payload)
    if target_type is int:
        return _int_from_payload(payload)
    if target_type is float:
        return _float_from_payload(payload)
    if target_type is str:
        if not isinstance(payload, str):
            raise TypeError(f"Expected string, got {type(payload).__name__}.")
        return payload
    if target_type is Path:
        return Path(_string_or_raise(payload))
    raise TypeError(f"Unsupported target type for deserialization: {target_type!r}.")


def unwrap_optional(target_type: Any) -> Any:
    """Return the first non-None member of an optional type hint."""
    origin = get_origin(target_type)
    if origin is Union or origin is types.UnionType:
        candidates = [arg for arg in get_args(target_type) if arg is not type(None)]
        return candidates[0] if candidates else type(None)
    return target_type


def field_type_hints(dataclass_type: type) -> dict[str, Any]:
    """Return resolved type hints for dataclass fields."""
    return get_type_hints(dataclass_type)


def _union_from_payload(payload: object, members: tuple[Any, ...]) -> Any:
    if payload is None and type(None) in members:
        return None
    last_error: Exception | None = None
    for member in members:
        if member is type(None):
            continue
        try:
            return from_payload(payload, member)
        except (TypeError, ValueError) as error:
            last_error = error
    raise TypeError(f"Payload does not match any union member: {last_error}")


def _dataclass_from_payload(payload: object, dataclass_type: type) -> Any:
    if not isinstance(payload, Mapping):
        raise TypeError(
            f"Expected object for {dataclass_type.__name__}, got {type(payload).__name__}."
        )
    hints = field_type_hints(dataclass_type)
    kwargs: dict[str, Any] = {}
    for item in fields(dataclass_type):
        if not item.init:
            continue
        if item.name in payload:
            kwargs[item.name] = from_payload(payload[item.name], hints.get(item.name, Any))
        elif item.default is MISSING and item.default_factory is MISSING:
            raise ValueError(f"Missing field '{item.name}' for {dataclass_type.__name__}.")
    return dataclass_type(**kwargs)


def _sequence_from_payload(payload: object, target_type: Any, origin: Any) -> Any:
    if not isinstance(payload, (list, tuple)):
        raise TypeError(f"Expected array, got {type(payload).__name__}.")
    args = get_args(target_type)
    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        if len(args) != len(payload):
            raise ValueError(f"Expected {len(args)} tuple items, got {len(payload)}.")
        return tuple(from_payload(item, arg) for item, arg in zip(payload, args))
    item_type = args[0] if args else Any
    items = [from_payload(item, item_type) for item in payload]
    if origin is tuple:
        return tuple(items)
    if origin in (set, collections.abc.Set):
        return set(items)
    if origin is frozenset:
        return frozenset(items)
    return items


def _mapping_from_payload(payload: object, target_type: Any) -> dict[Any, Any]:
    if not isinstance(payload, Mapping):
        raise TypeError(f"Expected object, got {type(payload).__name__}.")
    args = get_args(target_type)
    key_type, value_type = args if len(args) == 2 else (str, Any)
    return {
        from_payload(str(key), key_type): from_payload(item, value_type)
        for key, item in payload.items()
    }


def _enum_from_payload(payload: object, enum_type: type[Enum]) -> Enum:
    for member in enum_type:
        if member.value == payload or str(member.value) == payload:
            return member
    raise ValueError(f"Invalid {enum_type.__name__} value: {payload!r}.")


def _bool_from_payload(payload: object) -> bool:
    if isinstance(payload, bool):
        return payload
    if isinstance(payload, str):
        normalized = payload.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
        raise ValueError(f"Invalid boolean value: {payload!r}.")
    raise TypeError(f"Expected boolean, got {type(payload).__name__}.")


def _int_from_payload(payload: object) -> int:
    if isinstance(payload, bool):
        raise TypeError("Expected integer, got boolean.")
    if isinstance(payload, int):
        return payload
    if isinstance(payload, str):
        return int(payload.strip())
    raise TypeError(f"Expected integer, got {type(payload).__name__}.")


def _float_from_payload(payload: object) -> float:
    if isinstance(payload, bool):
        raise TypeError("Expected number, got boolean.")
    if isinstance(payload, (int, float)):
        return float(payload)
    if isinstance(payload, str):
        return float(payload.strip())
    raise TypeError(f"Expected number, got {type(payload).__name__}.")


def _string_or_raise(payload: object) -> str:
    if not isinstance(payload, str):
        raise TypeError(f"Expected string, got {type(payload).__name__}.")
    return payload
