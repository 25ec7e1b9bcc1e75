"""Tests for runtime type introspection."""
import typing
from collections import ChainMap, Counter, deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Annotated, Dict, List, NewType, Optional, Union

import pytest
from pydantic import BaseModel, Field

from openapi_reflect.exceptions import InvalidTypeDescriptorError, SchemaPreconditionError
from openapi_reflect.models.common import OpenApiVisibilityType
from openapi_reflect.schema_gen.attributes import (
    JSON_IGNORE,
    JsonIgnore,
    OpenApiSchemaVisibility,
    StringEnumConverter,
    json_converter,
)
from openapi_reflect.schema_gen.type_descriptor import PropertyDescriptor, TypeDescriptor, describe

UserId = NewType("UserId", int)


class Color(Enum):
    RED = "r"
    CRIMSON = "r"  # alias of RED
    BLUE = "b"


@json_converter(StringEnumConverter)
class Shade(IntEnum):
    LIGHT = 1
    DARK = 2


@dataclass
class Widget:
    name: str
    size: Optional[int] = None
    secret: Annotated[str, JsonIgnore()] = ""
    token: str = field(default="", metadata={JSON_IGNORE: True})
    _private: int = 0


class Gadget(BaseModel):
    label: str = Field(alias="Label")
    hidden: str = Field(default="", exclude=True)
    level: Annotated[int, OpenApiVisibilityType.ADVANCED] = 0


def test_none_is_rejected() -> None:
    with pytest.raises(SchemaPreconditionError):
        TypeDescriptor(None)


def test_annotated_metadata_is_stripped() -> None:
    marker = OpenApiSchemaVisibility(OpenApiVisibilityType.INTERNAL)
    descriptor = TypeDescriptor(Annotated[int, marker])

    assert descriptor.annotation is int
    assert descriptor.visibility == marker
    assert descriptor.data_type == "integer"


def test_user_new_type_is_unwrapped() -> None:
    descriptor = TypeDescriptor(UserId)

    assert descriptor.annotation is int
    assert descriptor.is_simple


def test_nullable_underlying() -> None:
    descriptor = TypeDescriptor(Optional[List[str]])

    assert descriptor.is_nullable
    assert descriptor.underlying == List[str]
    assert not descriptor.is_list


def test_underlying_of_non_nullable_raises() -> None:
    with pytest.raises(InvalidTypeDescriptorError):
        TypeDescriptor(int).underlying


def test_union_of_several_types_is_rejected() -> None:
    with pytest.raises(InvalidTypeDescriptorError):
        TypeDescriptor(Union[int, str])


def test_enum_names_keep_aliases_in_declaration_order() -> None:
    descriptor = TypeDescriptor(Color)

    assert descriptor.is_enum
    assert descriptor.enum_names == ["RED", "CRIMSON", "BLUE"]
    assert descriptor.data_type == "string"
    assert not descriptor.is_string_enum


def test_string_enum_marker_is_detected() -> None:
    descriptor = TypeDescriptor(Shade)

    assert descriptor.is_string_enum
    assert descriptor.data_type == "integer"
    assert descriptor.data_format == "int32"


def test_non_enum_has_no_names() -> None:
    assert TypeDescriptor(str).enum_names == []


@pytest.mark.parametrize("annotation, value_type", [
    (Dict[str, int], int),
    (dict[str, Widget], Widget),
])
def test_dictionary_value_type(annotation, value_type) -> None:
    descriptor = TypeDescriptor(annotation)

    assert descriptor.is_dictionary
    assert not descriptor.is_list
    assert descriptor.value_type is value_type


def test_list_element_type() -> None:
    descriptor = TypeDescriptor(tuple[int, int])

    assert descriptor.is_list
    assert descriptor.element_type is int


def test_string_is_not_a_list() -> None:
    descriptor = TypeDescriptor(str)

    assert descriptor.is_simple
    assert not descriptor.is_list
    assert not descriptor.is_dictionary


def test_dataclass_properties() -> None:
    properties = TypeDescriptor(Widget).properties()

    assert [p.name for p in properties] == ["name", "size", "secret", "token"]
    assert [p.ignored for p in properties] == [False, False, True, True]
    assert properties[1].annotation == Optional[int]


def test_pydantic_properties_use_field_names() -> None:
    properties = TypeDescriptor(Gadget).properties()

    assert [p.name for p in properties] == ["label", "hidden", "level"]
    assert properties[1].ignored is True
    assert properties[2].visibility == OpenApiSchemaVisibility(OpenApiVisibilityType.ADVANCED)


def test_unresolvable_forward_reference() -> None:
    class Broken:
        child: "MissingType"  # noqa: F821

    with pytest.raises(InvalidTypeDescriptorError):
        TypeDescriptor(Broken).properties()


def test_describe_passes_descriptors_through() -> None:
    descriptor = TypeDescriptor(Widget)

    assert describe(descriptor) is descriptor
    assert isinstance(describe(Widget), TypeDescriptor)


def test_property_descriptor_defaults() -> None:
    prop = PropertyDescriptor(name="x", annotation=int)

    assert prop.ignored is False
    assert prop.visibility is None


def test_counter_values_are_integers() -> None:
    class Tally(Counter[str]):
        pass

    assert TypeDescriptor(typing.Counter[str]).value_type is int
    assert TypeDescriptor(Tally).value_type is int


@pytest.mark.parametrize("annotation, element_type", [
    (deque[str], str),
    (typing.MutableSequence[int], int),
])
def test_sequence_subtypes_are_lists(annotation, element_type) -> None:
    descriptor = TypeDescriptor(annotation)

    assert descriptor.is_list
    assert not descriptor.is_dictionary
    assert descriptor.element_type is element_type


def test_mapping_subtypes_are_dictionaries() -> None:
    descriptor = TypeDescriptor(ChainMap[str, float])

    assert descriptor.is_dictionary
    assert descriptor.value_type is float
