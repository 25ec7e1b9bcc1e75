"""
Type Schema Translator: converts a runtime type into an OpenAPI Schema Object.

The walk is depth-first and recursive. The naming strategy is threaded
through every call; a visibility annotation applies to the node it is given
for and is not propagated into collection elements or nested properties.
"""
from typing import Any, FrozenSet, Optional

import structlog

from ..exceptions import CyclicSchemaError
from ..models.any_value import AnyString
from ..models.common import VISIBILITY_EXTENSION
from ..models.openapi import OpenApiSchema
from .attributes import OpenApiSchemaVisibility, StringEnumConverter
from .naming import NamingStrategy, default_naming
from .type_descriptor import TypeDescriptor, describe

logger = structlog.get_logger(__name__)


def translate(
    type_: Any,
    naming_strategy: NamingStrategy = default_naming,
    visibility: Optional[OpenApiSchemaVisibility] = None,
) -> OpenApiSchema:
    """Builds the OpenAPI schema of `type_`.

    Args:
        type_: A Python annotation (class, generic alias, Optional, Annotated)
            or a TypeDescriptor.
        naming_strategy: Applied to property names and string enum members.
        visibility: Optional visibility stamped as `x-ms-visibility`.

    Raises:
        SchemaPreconditionError: `type_` is None.
        InvalidTypeDescriptorError: the type is structurally unusable.
        CyclicSchemaError: the type refers back to itself.
    """
    descriptor = describe(type_)
    logger.debug("Translating type to schema.", type_name=descriptor.name)
    return _translate(descriptor, naming_strategy, visibility, frozenset())


def _translate(
    descriptor: TypeDescriptor,
    naming_strategy: NamingStrategy,
    visibility: Optional[OpenApiSchemaVisibility],
    active: FrozenSet[Any],
    path: tuple = (),
) -> OpenApiSchema:
    if visibility is None:
        visibility = descriptor.visibility

    if descriptor.is_nullable:
        schema = _translate(describe(descriptor.underlying), naming_strategy, visibility, active, path)
        schema.nullable = True
        return schema

    schema = OpenApiSchema(type=descriptor.data_type, format=descriptor.data_format)

    if visibility is not None:
        schema.extensions[VISIBILITY_EXTENSION] = AnyString(value=visibility.display_name)

    if descriptor.is_string_enum:
        schema.enum = [
            AnyString(value=StringEnumConverter.member_name(name, naming_strategy))
            for name in descriptor.enum_names
        ]
        schema.type = "string"
        schema.format = None

    if descriptor.is_simple:
        return schema

    if descriptor.is_dictionary:
        schema.additional_properties = _translate(
            describe(descriptor.value_type), naming_strategy, None, active, path
        )
        return schema

    if descriptor.is_list:
        schema.type = "array"
        schema.items = _translate(describe(descriptor.element_type), naming_strategy, None, active, path)
        return schema

    key = descriptor.annotation
    path = path + (descriptor.name,)
    if key in active:
        logger.warning("Cyclic type graph detected.", path=list(path))
        raise CyclicSchemaError(list(path))
    active = active | {key}

    schema.properties = {}
    for prop in descriptor.properties():
        if prop.ignored:
            continue
        schema.properties[naming_strategy(prop.name)] = _translate(
            describe(prop.annotation), naming_strategy, prop.visibility, active, path
        )
    return schema
