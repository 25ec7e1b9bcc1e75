"""Tests for parameter and response-body metadata conversion."""
import uuid
from dataclasses import dataclass
from typing import List, Optional

import pytest

from openapi_reflect.exceptions import SchemaPreconditionError
from openapi_reflect.models.any_value import AnyString
from openapi_reflect.models.common import SUMMARY_EXTENSION, ParameterLocation
from openapi_reflect.schema_gen.attributes import (
    ParameterMetadata,
    ResponseBodyMetadata,
    get_openapi_parameters,
    get_openapi_response_bodies,
    openapi_parameter,
    openapi_response_body,
)
from openapi_reflect.schema_gen.naming import camel_case
from openapi_reflect.schema_gen.operations import (
    parameters_for,
    responses_for,
    to_openapi_parameter,
    to_openapi_response,
)
from openapi_reflect.schema_gen.translator import translate


@dataclass
class OrderLine:
    product_code: str
    quantity: int


@dataclass
class ErrorBody:
    error_code: str
    message: Optional[str] = None


@openapi_parameter("order_id", type=uuid.UUID, description="Order identifier")
@openapi_parameter("expand", type=Optional[bool], location=ParameterLocation.QUERY)
@openapi_response_body(200, List[OrderLine], summary="Order lines")
@openapi_response_body(404, ErrorBody, description="Order not found", summary="   ")
def get_order_lines(order_id, expand=None):
    return []


def test_decorators_keep_declaration_order() -> None:
    assert [p.name for p in get_openapi_parameters(get_order_lines)] == ["order_id", "expand"]
    assert [r.status_code for r in get_openapi_response_bodies(get_order_lines)] == [200, 404]


def test_undecorated_handler_has_no_metadata() -> None:
    def ping():
        return "pong"

    assert get_openapi_parameters(ping) == []
    assert get_openapi_response_bodies(ping) == []


def test_path_parameter_is_always_required() -> None:
    parameter = to_openapi_parameter(ParameterMetadata(name="order_id", type=uuid.UUID, required=False))

    assert parameter.required is True
    assert parameter.location == ParameterLocation.PATH
    assert parameter.schema_.to_openapi() == {"type": "string", "format": "uuid"}


@pytest.mark.parametrize("location", [ParameterLocation.QUERY, ParameterLocation.HEADER, ParameterLocation.COOKIE])
def test_non_path_parameter_keeps_required_flag(location: ParameterLocation) -> None:
    optional = to_openapi_parameter(ParameterMetadata(name="q", location=location))
    required = to_openapi_parameter(ParameterMetadata(name="q", location=location, required=True))

    assert optional.required is False
    assert required.required is True
    assert optional.to_openapi()["in"] == location.value


def test_parameters_for_handler() -> None:
    order_id, expand = parameters_for(get_order_lines, camel_case)

    assert order_id.to_openapi() == {
        "name": "order_id",
        "in": "path",
        "description": "Order identifier",
        "required": True,
        "schema": {"type": "string", "format": "uuid"},
    }
    assert expand.to_openapi() == {
        "name": "expand",
        "in": "query",
        "required": False,
        "schema": {"type": "boolean", "nullable": True},
    }


def test_response_defaults_description_and_sets_summary() -> None:
    response = to_openapi_response(ResponseBodyMetadata(status_code=200, body_type=OrderLine, summary="One line"), camel_case)

    assert response.description == "Payload of OrderLine"
    assert response.extensions == {SUMMARY_EXTENSION: AnyString(value="One line")}
    assert response.content["application/json"].schema_ == translate(OrderLine, camel_case)


def test_responses_for_handler() -> None:
    responses = responses_for(get_order_lines, camel_case)

    assert list(responses) == ["200", "404"]
    ok = responses["200"].to_openapi()
    assert ok["x-ms-summary"] == "Order lines"
    assert ok["content"]["application/json"]["schema"]["items"]["properties"] == {
        "productCode": {"type": "string"},
        "quantity": {"type": "integer", "format": "int32"},
    }

    not_found = responses["404"]
    assert not_found.description == "Order not found"
    # Blank summaries are not stamped
    assert not_found.extensions == {}


def test_custom_content_type() -> None:
    response = to_openapi_response(ResponseBodyMetadata(status_code=200, body_type=bytes, content_type="application/octet-stream"))

    assert response.to_openapi()["content"] == {"application/octet-stream": {"schema": {"type": "string", "format": "binary"}}}


@pytest.mark.parametrize("name", ["", None])
def test_parameter_name_is_required(name) -> None:
    with pytest.raises(SchemaPreconditionError):
        openapi_parameter(name)


def test_response_body_type_is_required() -> None:
    with pytest.raises(SchemaPreconditionError):
        ResponseBodyMetadata(status_code=200, body_type=None)


def test_metadata_is_required() -> None:
    with pytest.raises(SchemaPreconditionError):
        to_openapi_parameter(None)
    with pytest.raises(SchemaPreconditionError):
        to_openapi_response(None)
