"""
Declarative metadata understood by the schema generators.

Type-level markers (`OpenApiSchemaVisibility`, `JsonIgnore`) are attached with
`typing.Annotated` or dataclass field metadata; enum serialization is declared
with the `json_converter` class decorator; handler functions carry parameter
and response-body metadata through the `openapi_parameter` and
`openapi_response_body` decorators.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Type, TypeVar

from ..exceptions import SchemaPreconditionError
from ..models.common import OpenApiVisibilityType, ParameterLocation
from .naming import NamingStrategy

# Dataclass field metadata keys, e.g. field(metadata={JSON_IGNORE: True})
JSON_IGNORE = "json_ignore"
OPENAPI_VISIBILITY = "openapi_visibility"

_PARAMETERS_ATTR = "__openapi_parameters__"
_RESPONSE_BODIES_ATTR = "__openapi_response_bodies__"
_CONVERTER_ATTR = "__json_converter__"

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class OpenApiSchemaVisibility:
    """Marks a property (or a root type) with a restricted visibility."""
    visibility: OpenApiVisibilityType

    @property
    def display_name(self) -> str:
        return OpenApiVisibilityType(self.visibility).display_name


@dataclass(frozen=True)
class JsonIgnore:
    """Excludes a property from serialization and therefore from the schema."""


class JsonConverter:
    """Base class for serialization converters declared on a type."""


class StringEnumConverter(JsonConverter):
    """Serializes enum members by name instead of by value."""

    @staticmethod
    def member_name(name: str, naming_strategy: NamingStrategy) -> str:
        return naming_strategy(name)


def json_converter(converter: Type[JsonConverter]) -> Callable[[T], T]:
    """Class decorator declaring the converter used to serialize a type.

    Example:
        @json_converter(StringEnumConverter)
        class Color(IntEnum):
            RED = 0
    """
    if not (isinstance(converter, type) and issubclass(converter, JsonConverter)):
        raise TypeError(f"{converter!r} is not a JsonConverter subclass")

    def decorator(cls: T) -> T:
        setattr(cls, _CONVERTER_ATTR, converter)
        return cls
    return decorator


def get_json_converter(cls: Any) -> Optional[Type[JsonConverter]]:
    # Read from the class itself only; converters are not inherited
    return vars(cls).get(_CONVERTER_ATTR) if isinstance(cls, type) else None


@dataclass(frozen=True)
class ParameterMetadata:
    """Describes one OpenAPI parameter of a handler function."""
    name: str
    description: Optional[str] = None
    type: Any = str
    location: ParameterLocation = ParameterLocation.PATH
    required: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaPreconditionError("Parameter name must not be empty.")


@dataclass(frozen=True)
class ResponseBodyMetadata:
    """Describes one response payload of a handler function."""
    status_code: int
    body_type: Any
    content_type: str = "application/json"
    summary: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.body_type is None:
            raise SchemaPreconditionError("Response body type must be provided.")


def _attach(fn: Callable[..., Any], attr: str, metadata: Any) -> None:
    existing = list(getattr(fn, attr, ()))
    # Decorators apply bottom-up; prepend so the top-most declaration comes first
    existing.insert(0, metadata)
    setattr(fn, attr, existing)


def openapi_parameter(
    name: str,
    *,
    description: Optional[str] = None,
    type: Any = str,
    location: ParameterLocation = ParameterLocation.PATH,
    required: bool = False,
) -> Callable[[F], F]:
    """Declares an OpenAPI parameter on a handler. May be applied repeatedly."""
    metadata = ParameterMetadata(name=name, description=description, type=type, location=location, required=required)

    def decorator(fn: F) -> F:
        _attach(fn, _PARAMETERS_ATTR, metadata)
        return fn
    return decorator


def openapi_response_body(
    status_code: int,
    body_type: Any,
    *,
    content_type: str = "application/json",
    summary: Optional[str] = None,
    description: Optional[str] = None,
) -> Callable[[F], F]:
    """Declares a response payload on a handler. May be applied repeatedly."""
    metadata = ResponseBodyMetadata(
        status_code=status_code,
        body_type=body_type,
        content_type=content_type,
        summary=summary,
        description=description,
    )

    def decorator(fn: F) -> F:
        _attach(fn, _RESPONSE_BODIES_ATTR, metadata)
        return fn
    return decorator


def get_openapi_parameters(fn: Callable[..., Any]) -> List[ParameterMetadata]:
    return list(getattr(fn, _PARAMETERS_ATTR, ()))


def get_openapi_response_bodies(fn: Callable[..., Any]) -> List[ResponseBodyMetadata]:
    return list(getattr(fn, _RESPONSE_BODIES_ATTR, ()))
