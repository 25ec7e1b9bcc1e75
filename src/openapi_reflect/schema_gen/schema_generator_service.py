"""
Service binding configuration, naming strategy and logging around the schema
generators. Used by the CLI and by applications that embed the generator.
"""
import importlib
from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..config import Config
from ..exceptions import SchemaPreconditionError
from ..models.json_schema import JsonSchemaDocument
from ..models.openapi import OpenApiParameter, OpenApiResponse, OpenApiSchema
from .attributes import OpenApiSchemaVisibility
from .interop import import_json_schema
from .naming import NamingStrategy, get_naming_strategy
from .operations import parameters_for, responses_for
from .rendering import render
from .translator import translate

logger = structlog.get_logger(__name__)


class SchemaGeneratorService:
    """
    Generates OpenAPI schemas from Python types and JSON Schema documents
    using the configured naming strategy and output format.
    """

    def __init__(self, app_config: Config, naming_strategy: Optional[NamingStrategy] = None):
        self.app_config = app_config
        self.naming_strategy = naming_strategy or get_naming_strategy(app_config.schema_gen.naming_strategy)
        self.logger = logger.bind(service="SchemaGeneratorService")

    def schema_for(self, type_: Any, visibility: Optional[OpenApiSchemaVisibility] = None) -> OpenApiSchema:
        """Translates a Python type into an OpenAPI schema."""
        schema = translate(type_, self.naming_strategy, visibility)
        self.logger.debug("Schema generated from type.", type_name=getattr(type_, "__qualname__", repr(type_)), property_count=len(schema.properties or {}))
        return schema

    def import_schema(self, document: Optional[Mapping[str, Any] | JsonSchemaDocument]) -> Optional[OpenApiSchema]:
        """Imports a generic JSON Schema document."""
        schema = import_json_schema(document)
        if schema is None:
            self.logger.debug("No JSON Schema document to import.")
        return schema

    def parameters_for(self, handler: Any) -> List[OpenApiParameter]:
        return parameters_for(handler, self.naming_strategy)

    def responses_for(self, handler: Any) -> Dict[str, OpenApiResponse]:
        return responses_for(handler, self.naming_strategy)

    def render(self, obj: Any, fmt: Optional[str] = None) -> str:
        """Renders a generated object with the configured format and indentation."""
        output_format = fmt or self.app_config.schema_gen.output_format
        return render(obj, str(getattr(output_format, "value", output_format)), self.app_config.schema_gen.indent)

    @staticmethod
    def resolve_type(reference: str) -> Any:
        """Resolves a `package.module:QualifiedName` reference to an object."""
        module_name, sep, qualname = reference.partition(":")
        if not sep or not module_name or not qualname:
            raise SchemaPreconditionError(f"Type reference '{reference}' must look like 'package.module:TypeName'.")
        target: Any = importlib.import_module(module_name)
        for part in qualname.split("."):
            target = getattr(target, part)
        return target
