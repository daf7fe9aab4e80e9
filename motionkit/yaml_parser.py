"""Typed, checked field lookup in configuration documents loaded from YAML."""

from __future__ import annotations

import logging
import re
import struct
from collections.abc import Mapping
from enum import Enum
from os import PathLike
from typing import Any, Optional, Union

import yaml

__all__ = [
    "ValueKind",
    "YamlParseError",
    "load_file",
    "parse_node",
    "parse_list",
    "parse_val",
    "parse_val_check_range",
    "parse_opt_val",
    "parse_opt_val_check_range",
]

log = logging.getLogger(__name__)

_MISSING = object()
_INT_PATTERN = re.compile(r"[-+]?\d+")
_BOOL_WORDS = {
    "y": True,
    "yes": True,
    "true": True,
    "on": True,
    "n": False,
    "no": False,
    "false": False,
    "off": False,
}


class ValueKind(Enum):
    """The value types a field may be read as."""

    DOUBLE = "double"
    FLOAT = "float"
    STRING = "string"
    INT8 = "int8_t"
    UINT8 = "uint8_t"
    INT16 = "int16_t"
    UINT16 = "uint16_t"
    INT32 = "int32_t"
    UINT32 = "uint32_t"
    INT64 = "int64_t"
    UINT64 = "uint64_t"
    BOOL = "bool"

    @property
    def is_numeric(self) -> bool:
        return self not in (ValueKind.STRING, ValueKind.BOOL)


_INT_RANGES = {
    ValueKind.INT8: (-(2**7), 2**7 - 1),
    ValueKind.UINT8: (0, 2**8 - 1),
    ValueKind.INT16: (-(2**15), 2**15 - 1),
    ValueKind.UINT16: (0, 2**16 - 1),
    ValueKind.INT32: (-(2**31), 2**31 - 1),
    ValueKind.UINT32: (0, 2**32 - 1),
    ValueKind.INT64: (-(2**63), 2**63 - 1),
    ValueKind.UINT64: (0, 2**64 - 1),
}

Number = Union[int, float]


class YamlParseError(ValueError):
    """A field is missing, of the wrong shape, or cannot be converted."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


def load_file(path: Union[str, PathLike]) -> Any:
    """Load a YAML document from ``path``."""
    with open(path, encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def _lookup(node: Any, field: str) -> Any:
    if isinstance(node, Mapping) and field in node:
        return node[field]
    return _MISSING


def parse_node(node: Any, field: str) -> Any:
    """Return the sub-node ``field`` of ``node``."""
    value = _lookup(node, field)
    if value is _MISSING:
        raise YamlParseError(f"Expecting YAML Node: {field}", field)
    log.debug("Parsed Node: %s", field)
    return value


def parse_list(node: Any, field: str) -> list:
    """Return the sequence ``field`` of ``node``."""
    value = _lookup(node, field)
    if value is _MISSING:
        raise YamlParseError(f"Expecting YAML List Node: {field}", field)
    if not isinstance(value, list):
        raise YamlParseError(f"Expecting {field} to be a sequence", field)
    log.debug("Parsed List Node: %s", field)
    return value


def _fail(field: str, value: Any, kind: ValueKind) -> YamlParseError:
    return YamlParseError(
        f"Field {field}: cannot convert {value!r} to {kind.value}", field
    )


def _to_string(field: str, value: Any) -> str:
    if isinstance(value, (Mapping, list)):
        raise _fail(field, value, ValueKind.STRING)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_bool(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value in (
        value.lower(),
        value.upper(),
        value.capitalize(),
    ):
        word = _BOOL_WORDS.get(value.lower())
        if word is not None:
            return word
    raise _fail(field, value, ValueKind.BOOL)


def _to_float(field: str, value: Any, kind: ValueKind) -> float:
    if isinstance(value, bool):
        raise _fail(field, value, kind)
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value)
        except ValueError:
            raise _fail(field, value, kind) from None
    else:
        raise _fail(field, value, kind)
    if kind is ValueKind.FLOAT:
        try:
            result = struct.unpack("f", struct.pack("f", result))[0]
        except OverflowError:
            raise _fail(field, value, kind) from None
    return result


def _to_int(field: str, value: Any, kind: ValueKind) -> int:
    if isinstance(value, bool):
        raise _fail(field, value, kind)
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and _INT_PATTERN.fullmatch(value):
        result = int(value)
    else:
        raise _fail(field, value, kind)
    low, high = _INT_RANGES[kind]
    if not low <= result <= high:
        raise _fail(field, value, kind)
    return result


def _convert(field: str, value: Any, kind: ValueKind) -> Any:
    if kind is ValueKind.STRING:
        return _to_string(field, value)
    if kind is ValueKind.BOOL:
        return _to_bool(field, value)
    if kind in (ValueKind.DOUBLE, ValueKind.FLOAT):
        return _to_float(field, value, kind)
    return _to_int(field, value, kind)


def parse_val(node: Any, field: str, kind: ValueKind) -> Any:
    """Return ``field`` of ``node`` converted to ``kind``.

    Raises YamlParseError when the field is missing or cannot be converted.
    """
    value = _lookup(node, field)
    if value is _MISSING:
        raise YamlParseError(f"Expecting {kind.value} field: {field}", field)
    result = _convert(field, value, kind)
    log.debug("Parsed %s field %s: %s", kind.value, field, result)
    return result


def _check_range(
    field: str, kind: ValueKind, value: Number, lower: Number, upper: Number
) -> Number:
    if lower <= value <= upper:
        return value
    raise YamlParseError(
        f"{field} failed range check {lower} <= {value} <= {upper}", field
    )


def _require_numeric(kind: ValueKind) -> None:
    if not kind.is_numeric:
        raise TypeError(f"range checks need a numeric kind, not {kind.value}")


def parse_val_check_range(
    node: Any, field: str, kind: ValueKind, lower: Number, upper: Number
) -> Number:
    """Return the numeric ``field`` of ``node``, required to lie in [lower, upper]."""
    _require_numeric(kind)
    value = parse_val(node, field, kind)
    return _check_range(field, kind, value, lower, upper)


def parse_opt_val(node: Any, field: str, kind: ValueKind) -> Any:
    """Return ``field`` of ``node`` converted to ``kind``, or None if absent."""
    value = _lookup(node, field)
    if value is _MISSING:
        log.debug("Did not find optional %s field: %s", kind.value, field)
        return None
    result = _convert(field, value, kind)
    log.debug("Parsed %s field %s: %s", kind.value, field, result)
    return result


def parse_opt_val_check_range(
    node: Any, field: str, kind: ValueKind, lower: Number, upper: Number
) -> Optional[Number]:
    """Like parse_opt_val, but a present value must lie in [lower, upper]."""
    _require_numeric(kind)
    value = parse_opt_val(node, field, kind)
    if value is None:
        return None
    return _check_range(field, kind, value, lower, upper)