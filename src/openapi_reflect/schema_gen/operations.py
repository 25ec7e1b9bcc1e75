"""Converts handler parameter/response metadata into OpenAPI objects."""
from typing import Any, Dict, List

from ..exceptions import SchemaPreconditionError
from ..models.any_value import AnyString
from ..models.common import SUMMARY_EXTENSION, ParameterLocation
from ..models.openapi import OpenApiMediaType, OpenApiParameter, OpenApiResponse
from .attributes import ParameterMetadata, ResponseBodyMetadata, get_openapi_parameters, get_openapi_response_bodies
from .naming import NamingStrategy, default_naming
from .translator import translate


def _type_name(body_type: Any) -> str:
    return getattr(body_type, "__name__", None) or repr(body_type)


def to_openapi_parameter(
    metadata: ParameterMetadata, naming_strategy: NamingStrategy = default_naming
) -> OpenApiParameter:
    """Converts parameter metadata to an OpenAPI Parameter Object.

    Path parameters are always required, whatever the metadata says.
    """
    if metadata is None:
        raise SchemaPreconditionError("Parameter metadata is required.")

    location = ParameterLocation(metadata.location)
    return OpenApiParameter(
        name=metadata.name,
        location=location,
        description=metadata.description,
        required=metadata.required or location == ParameterLocation.PATH,
        schema_=translate(metadata.type, naming_strategy),
    )


def to_openapi_response(
    metadata: ResponseBodyMetadata, naming_strategy: NamingStrategy = default_naming
) -> OpenApiResponse:
    """Converts response-body metadata to an OpenAPI Response Object."""
    if metadata is None:
        raise SchemaPreconditionError("Response body metadata is required.")

    description = metadata.description
    if not description or not description.strip():
        description = f"Payload of {_type_name(metadata.body_type)}"

    media_type = OpenApiMediaType(schema_=translate(metadata.body_type, naming_strategy))
    response = OpenApiResponse(description=description, content={metadata.content_type: media_type})

    if metadata.summary and metadata.summary.strip():
        response.extensions[SUMMARY_EXTENSION] = AnyString(value=metadata.summary)
    return response


def parameters_for(handler: Any, naming_strategy: NamingStrategy = default_naming) -> List[OpenApiParameter]:
    """All declared parameters of a handler, in declaration order."""
    return [to_openapi_parameter(metadata, naming_strategy) for metadata in get_openapi_parameters(handler)]


def responses_for(handler: Any, naming_strategy: NamingStrategy = default_naming) -> Dict[str, OpenApiResponse]:
    """Declared responses of a handler keyed by status code."""
    return {
        str(int(metadata.status_code)): to_openapi_response(metadata, naming_strategy)
        for metadata in get_openapi_response_bodies(handler)
    }
