"""
Runtime type introspection over Python annotations.

`TypeDescriptor` answers the questions the translator asks about a type:
whether it is nullable, an enum, a dictionary, a list or a composite object,
which properties it declares and how its enum members are named.
"""
from __future__ import annotations

import collections
import collections.abc
import dataclasses
import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar, List, Mapping, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from ..exceptions import InvalidTypeDescriptorError, SchemaPreconditionError
from ..models.common import OpenApiVisibilityType
from . import type_mapping
from .attributes import (
    JSON_IGNORE,
    OPENAPI_VISIBILITY,
    JsonIgnore,
    OpenApiSchemaVisibility,
    StringEnumConverter,
    get_json_converter,
)

_DICT_ORIGINS = (
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)
_LIST_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)
# Only these are used to recognise user classes deriving from a collection
_LIST_BASES = (list, tuple, set, frozenset, collections.abc.Sequence, collections.abc.Set)
_TEXT_TYPES = (str, bytes, bytearray)


@dataclass(frozen=True)
class PropertyDescriptor:
    """One declared property of a composite type."""
    name: str
    annotation: Any
    ignored: bool = False
    visibility: Optional[OpenApiSchemaVisibility] = None


def _strip_annotated(annotation: Any) -> Tuple[Any, Tuple[Any, ...]]:
    metadata: Tuple[Any, ...] = ()
    while get_origin(annotation) is Annotated:
        metadata = metadata + tuple(annotation.__metadata__)
        annotation = annotation.__origin__
    return annotation, metadata


def _unwrap_new_type(annotation: Any) -> Any:
    # User NewTypes stand for their supertype; width markers are primitives
    while hasattr(annotation, "__supertype__") and not type_mapping.is_primitive(annotation):
        annotation = annotation.__supertype__
    return annotation


def _find_visibility(metadata: Any) -> Optional[OpenApiSchemaVisibility]:
    for item in metadata:
        if isinstance(item, OpenApiSchemaVisibility):
            return item
        if isinstance(item, OpenApiVisibilityType):
            return OpenApiSchemaVisibility(item)
    return None


def _has_json_ignore(metadata: Any) -> bool:
    return any(isinstance(item, JsonIgnore) or item is JsonIgnore for item in metadata)


def _is_pydantic_model(cls: type) -> bool:
    return isinstance(getattr(cls, "model_fields", None), dict) and hasattr(cls, "model_validate")


def _derives_from(cls: Any, bases: Tuple[type, ...]) -> bool:
    return isinstance(cls, type) and issubclass(cls, bases) and not issubclass(cls, _TEXT_TYPES)


def _generic_args(annotation: Any, origins: Tuple[type, ...], bases: Tuple[type, ...]) -> Optional[Tuple[Any, ...]]:
    """Returns the type arguments when `annotation` is one of the collection
    kinds in `origins` or derives from `bases`, or None when it is not such
    a collection."""
    origin = get_origin(annotation)
    if origin is not None:
        if origin in origins or _derives_from(origin, bases):
            return _with_counter_value(origin, get_args(annotation))
        return None
    if not isinstance(annotation, type):
        return None
    if annotation in origins:
        return ()
    if not _derives_from(annotation, bases):
        return None
    # A user class deriving from e.g. dict[str, int]: read the parameterized base
    for klass in annotation.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            base_origin = get_origin(base)
            if _derives_from(base_origin, bases):
                return _with_counter_value(annotation, get_args(base))
    return ()


def _with_counter_value(cls: Any, args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    # Counter[K] only names its key type; the counts are ints
    if len(args) == 1 and isinstance(cls, type) and issubclass(cls, collections.Counter):
        return (args[0], int)
    return args


class TypeDescriptor:
    """Capability view over a single Python annotation."""

    def __init__(self, annotation: Any):
        if annotation is None or annotation is type(None):
            raise SchemaPreconditionError("A type is required to build a schema.")
        self.raw = annotation
        stripped, self.metadata = _strip_annotated(annotation)
        self.annotation = _unwrap_new_type(stripped)
        if self.annotation is type(None):
            raise SchemaPreconditionError("NoneType cannot be described on its own.")
        members = self._union_members()
        if members is not None and type(None) not in members:
            raise InvalidTypeDescriptorError(
                f"Union types are only supported as Optional[T]; got {self.name}.", self.raw
            )

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.name})"

    @property
    def name(self) -> str:
        if isinstance(self.annotation, type):
            return self.annotation.__qualname__
        return getattr(self.annotation, "__name__", None) or repr(self.annotation)

    @property
    def visibility(self) -> Optional[OpenApiSchemaVisibility]:
        """Visibility declared on the annotation itself via Annotated."""
        return _find_visibility(self.metadata)

    # --- Nullable ---

    def _union_members(self) -> Optional[Tuple[Any, ...]]:
        origin = get_origin(self.annotation)
        if origin is Union or origin is types.UnionType:
            return get_args(self.annotation)
        return None

    @property
    def is_nullable(self) -> bool:
        members = self._union_members()
        return members is not None and type(None) in members

    @property
    def underlying(self) -> Any:
        """The wrapped type of `Optional[T]`."""
        members = self._union_members()
        if members is None:
            raise InvalidTypeDescriptorError(f"{self.name} is not a nullable type.", self.raw)
        non_null = [member for member in members if member is not type(None)]
        if len(non_null) != 1:
            raise InvalidTypeDescriptorError(
                f"Union types are only supported as Optional[T]; got {self.name}.", self.raw
            )
        return non_null[0]

    # --- Primitive / enum ---

    @property
    def data_type(self) -> str:
        return type_mapping.to_data_type(self.annotation)

    @property
    def data_format(self) -> Optional[str]:
        return type_mapping.to_data_format(self.annotation)

    @property
    def is_enum(self) -> bool:
        return isinstance(self.annotation, type) and issubclass(self.annotation, Enum)

    @property
    def is_string_enum(self) -> bool:
        if not self.is_enum:
            return False
        converter = get_json_converter(self.annotation)
        return converter is not None and issubclass(converter, StringEnumConverter)

    @property
    def enum_names(self) -> List[str]:
        if not self.is_enum:
            return []
        # __members__ keeps aliases and declaration order
        return list(self.annotation.__members__)

    @property
    def is_simple(self) -> bool:
        return type_mapping.is_primitive(self.annotation) or self.is_enum

    # --- Collections ---

    @property
    def is_dictionary(self) -> bool:
        if self.is_simple or self._union_members() is not None:
            return False
        return _generic_args(self.annotation, _DICT_ORIGINS, (collections.abc.Mapping,)) is not None

    @property
    def value_type(self) -> Any:
        args = _generic_args(self.annotation, _DICT_ORIGINS, (collections.abc.Mapping,))
        if not args or len(args) != 2:
            raise InvalidTypeDescriptorError(
                f"Dictionary type {self.name} must declare key and value types, e.g. dict[str, int].", self.raw
            )
        return args[1]

    @property
    def is_list(self) -> bool:
        if self.is_simple or self.is_dictionary or self._union_members() is not None:
            return False
        return _generic_args(self.annotation, _LIST_ORIGINS, _LIST_BASES) is not None

    @property
    def element_type(self) -> Any:
        args = _generic_args(self.annotation, _LIST_ORIGINS, _LIST_BASES)
        if not args:
            raise InvalidTypeDescriptorError(
                f"Collection type {self.name} must declare its element type, e.g. list[int].", self.raw
            )
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if len(args) == 1 or all(arg == args[0] for arg in args):
            return args[0]
        raise InvalidTypeDescriptorError(
            f"Heterogeneous tuple {self.name} has no single element type.", self.raw
        )

    # --- Composite objects ---

    def properties(self) -> List[PropertyDescriptor]:
        """Declared properties in declaration order, base classes first."""
        cls = self.annotation
        if not isinstance(cls, type) or cls is object:
            return []
        if _is_pydantic_model(cls):
            return self._pydantic_properties(cls)

        try:
            hints = get_type_hints(cls, include_extras=True)
        except (NameError, TypeError) as e:
            raise InvalidTypeDescriptorError(f"Cannot resolve annotations of {self.name}: {e}", cls) from e

        if dataclasses.is_dataclass(cls):
            entries: List[Tuple[str, Mapping[str, Any]]] = [
                (f.name, f.metadata) for f in dataclasses.fields(cls)
            ]
        else:
            entries = [(name, {}) for name in hints if get_origin(hints[name]) is not ClassVar and hints[name] is not ClassVar]

        result = []
        for name, field_metadata in entries:
            if name.startswith("_"):
                continue
            annotation = hints.get(name, Any)
            _, metadata = _strip_annotated(annotation)
            visibility = _find_visibility(metadata)
            if visibility is None and OPENAPI_VISIBILITY in field_metadata:
                visibility = _find_visibility([field_metadata[OPENAPI_VISIBILITY]])
            result.append(
                PropertyDescriptor(
                    name=name,
                    annotation=annotation,
                    ignored=_has_json_ignore(metadata) or bool(field_metadata.get(JSON_IGNORE, False)),
                    visibility=visibility,
                )
            )
        return result

    @staticmethod
    def _pydantic_properties(cls: type) -> List[PropertyDescriptor]:
        # Pydantic moves Annotated extras into FieldInfo.metadata
        result = []
        for name, field_info in cls.model_fields.items():  # type: ignore[attr-defined]
            if name.startswith("_"):
                continue
            metadata = list(field_info.metadata)
            result.append(
                PropertyDescriptor(
                    name=name,
                    annotation=field_info.annotation if field_info.annotation is not None else Any,
                    ignored=bool(field_info.exclude) or _has_json_ignore(metadata),
                    visibility=_find_visibility(metadata),
                )
            )
        return result


def describe(annotation: Any) -> TypeDescriptor:
    """Returns a TypeDescriptor for an annotation, passing descriptors through."""
    if isinstance(annotation, TypeDescriptor):
        return annotation
    return TypeDescriptor(annotation)
