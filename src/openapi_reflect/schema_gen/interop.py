"""
Value/Schema interop: imports generic JSON Schema documents into OpenAPI
schemas and converts parsed JSON values into OpenAPI Any values.
"""
import ctypes
import uuid
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union
from urllib.parse import ParseResult, SplitResult

import structlog
from pydantic import AnyUrl

from ..exceptions import UnhandledValueTypeError
from ..models.any_value import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    AnyArray,
    AnyBinary,
    AnyBoolean,
    AnyByte,
    AnyDate,
    AnyDateTime,
    AnyDouble,
    AnyFloat,
    AnyInteger,
    AnyLong,
    AnyNull,
    AnyObject,
    AnyString,
    AnyValue,
)
from ..models.json_schema import JsonSchemaDocument
from ..models.openapi import OpenApiSchema

logger = structlog.get_logger(__name__)

_TICKS_PER_MICROSECOND = 10
_TICKS_PER_SECOND = 10_000_000
_TICKS_PER_MINUTE = 60 * _TICKS_PER_SECOND
_TICKS_PER_HOUR = 60 * _TICKS_PER_MINUTE
_TICKS_PER_DAY = 24 * _TICKS_PER_HOUR


def import_json_schema(doc: Union[JsonSchemaDocument, Mapping[str, Any], None]) -> Optional[OpenApiSchema]:
    """Copies a generic JSON Schema document into an OpenAPI schema.

    This is a structural copy between two schema dialects: no visibility
    stamping and no naming strategy are applied. `items` entries land in
    `any_of`. Returns None for None.
    """
    if doc is None:
        return None
    if not isinstance(doc, JsonSchemaDocument):
        doc = JsonSchemaDocument.model_validate(doc)
    return _import(doc)


def _import(doc: JsonSchemaDocument) -> OpenApiSchema:
    exclusive_maximum, maximum = _exclusive_bound(doc.exclusive_maximum, doc.maximum)
    exclusive_minimum, minimum = _exclusive_bound(doc.exclusive_minimum, doc.minimum)
    return OpenApiSchema(
        type=_schema_type(doc.type),
        format=doc.format,
        title=doc.title,
        description=doc.description,
        default=to_any(doc.default) if "default" in doc.model_fields_set else None,
        enum=[to_any(member) for member in doc.enum] if doc.enum is not None else None,
        read_only=doc.read_only if doc.read_only is not None else False,
        maximum=maximum,
        exclusive_maximum=exclusive_maximum,
        minimum=minimum,
        exclusive_minimum=exclusive_minimum,
        max_items=doc.max_items,
        min_items=doc.min_items,
        max_length=doc.max_length,
        min_length=doc.min_length,
        pattern=doc.pattern,
        properties={name: _import(prop) for name, prop in doc.properties.items()} if doc.properties is not None else None,
        additional_properties=_import(doc.additional_properties) if doc.additional_properties is not None else None,
        any_of=[_import(item) for item in doc.items] if doc.items is not None else None,
    )


def _schema_type(value: Union[str, list, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.lower()
    return ", ".join(item.lower() for item in value)


def _exclusive_bound(flag: Any, bound: Any) -> Tuple[Optional[bool], Any]:
    if flag is None or isinstance(flag, bool):
        return flag, bound
    # Draft 6+ numeric form: the exclusive keyword carries the bound itself
    return True, flag


def to_any(token: Any) -> AnyValue:
    """Converts a parsed JSON value into a tagged OpenAPI Any value.

    Raises:
        UnhandledValueTypeError: the value (or a nested value) has a runtime
            kind outside the supported set.
    """
    if token is None:
        return AnyNull()
    if isinstance(token, (list, tuple)):
        return AnyArray(elements=[to_any(element) for element in token])
    if isinstance(token, dict):
        members = {}
        for key, value in token.items():
            if not isinstance(key, str):
                logger.error("Unhandled object key type.", key_type=type(key).__name__)
                raise UnhandledValueTypeError(type(key), f"Unhandled object key type: {type(key).__name__}")
            members[key] = to_any(value)
        return AnyObject(members=members)
    return _scalar_to_any(token)


def _scalar_to_any(value: Any) -> AnyValue:
    if isinstance(value, bool):
        return AnyBoolean(value=value)
    if isinstance(value, Enum):
        return AnyString(value=value.name)
    if isinstance(value, str):
        return AnyString(value=value)
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return AnyInteger(value=value)
        if INT64_MIN <= value <= INT64_MAX:
            return AnyLong(value=value)
        logger.error("Integer value outside the 64-bit range.", value=value)
        raise UnhandledValueTypeError(int, f"Integer value {value} does not fit in 64 bits")
    if isinstance(value, ctypes.c_uint8):
        return AnyByte(value=value.value)
    if isinstance(value, ctypes.c_int32):
        return AnyInteger(value=value.value)
    if isinstance(value, ctypes.c_int64):
        return AnyLong(value=value.value)
    if isinstance(value, ctypes.c_float):
        return AnyFloat(value=value.value)
    if isinstance(value, ctypes.c_double):
        return AnyDouble(value=value.value)
    if isinstance(value, float):
        return AnyDouble(value=value)
    if isinstance(value, Decimal):
        # Precision beyond a double is lost
        return AnyDouble(value=float(value))
    if isinstance(value, datetime):
        return AnyDateTime(value=value)
    if isinstance(value, date):
        return AnyDate(value=value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return AnyBinary(value=bytes(value))
    if isinstance(value, uuid.UUID):
        return AnyString(value=str(value))
    if isinstance(value, AnyUrl):
        return AnyString(value=str(value))
    if isinstance(value, (ParseResult, SplitResult)):
        return AnyString(value=value.geturl())
    if isinstance(value, timedelta):
        return AnyString(value=format_timespan(value))

    logger.error("Unhandled value type for JSON token.", value_type=type(value).__name__)
    raise UnhandledValueTypeError(type(value))


def format_timespan(value: timedelta) -> str:
    """Formats a duration in constant form: `[-][d.]hh:mm:ss[.fffffff]`."""
    ticks = (value // timedelta(microseconds=1)) * _TICKS_PER_MICROSECOND
    sign = "-" if ticks < 0 else ""
    days, rest = divmod(abs(ticks), _TICKS_PER_DAY)
    hours, rest = divmod(rest, _TICKS_PER_HOUR)
    minutes, rest = divmod(rest, _TICKS_PER_MINUTE)
    seconds, fraction = divmod(rest, _TICKS_PER_SECOND)

    text = f"{sign}{f'{days}.' if days else ''}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if fraction:
        text += f".{fraction:07d}"
    return text
