"""
Fixed mapping of primitive and well-known Python types to OpenAPI
(type, format) pairs.
"""
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, NewType, Optional, Tuple

# Width markers for values whose wire format is narrower than the Python type
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float = NewType("Float", float)
Double = NewType("Double", float)

OBJECT_TYPE = "object"

PRIMITIVE_TYPES: Dict[Any, Tuple[str, Optional[str]]] = {
    bool: ("boolean", None),
    int: ("integer", "int32"),
    Int32: ("integer", "int32"),
    Int64: ("integer", "int64"),
    float: ("number", "double"),
    Double: ("number", "double"),
    Float: ("number", "float"),
    Decimal: ("number", "double"),
    str: ("string", None),
    bytes: ("string", "binary"),
    bytearray: ("string", "binary"),
    datetime: ("string", "date-time"),
    date: ("string", "date"),
    time: ("string", "time"),
    timedelta: ("string", "timespan"),
    uuid.UUID: ("string", "uuid"),
}


def _enum_data_type(enum_cls: type) -> Tuple[str, Optional[str]]:
    values = [member.value for member in enum_cls]  # type: ignore[attr-defined]
    if issubclass(enum_cls, int) or (values and all(isinstance(v, int) and not isinstance(v, bool) for v in values)):
        return ("integer", "int32")
    return ("string", None)


def lookup(annotation: Any) -> Tuple[str, Optional[str]]:
    """Returns the (type, format) pair for an annotation; composite and
    unknown types map to ("object", None)."""
    try:
        mapped = PRIMITIVE_TYPES.get(annotation)
    except TypeError:
        # Unhashable annotations are never primitives
        mapped = None
    if mapped is not None:
        return mapped
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return _enum_data_type(annotation)
    return (OBJECT_TYPE, None)


def is_primitive(annotation: Any) -> bool:
    try:
        return annotation in PRIMITIVE_TYPES
    except TypeError:
        return False


def to_data_type(annotation: Any) -> str:
    return lookup(annotation)[0]


def to_data_format(annotation: Any) -> Optional[str]:
    return lookup(annotation)[1]
