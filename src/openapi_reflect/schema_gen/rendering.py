"""Encodes generated OpenAPI objects as JSON or YAML text."""
import json
from typing import Any

import yaml

from ..exceptions import UnsupportedFormatError
from ..models.any_value import AnyValueBase
from ..models.common import OutputFormat


def to_document(obj: Any) -> Any:
    """Returns the plain OpenAPI-shaped value of a generated object."""
    if isinstance(obj, AnyValueBase):
        return obj.to_primitive()
    if hasattr(obj, "to_openapi"):
        return obj.to_openapi()
    if isinstance(obj, dict):
        return {str(key): to_document(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_document(item) for item in obj]
    return obj


def render(obj: Any, fmt: str = OutputFormat.JSON.value, indent: int = 2) -> str:
    """Renders an OpenApiSchema, OpenApiParameter, OpenApiResponse, AnyValue
    (or containers of them) as JSON or YAML."""
    try:
        output_format = OutputFormat(fmt.lower())
    except ValueError:
        raise UnsupportedFormatError(fmt) from None

    document = to_document(obj)
    if output_format == OutputFormat.YAML:
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False, allow_unicode=True, indent=indent)
    return json.dumps(document, indent=indent, ensure_ascii=False)
