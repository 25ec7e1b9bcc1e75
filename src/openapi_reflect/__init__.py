"""openapi-reflect - OpenAPI schema generation from Python type annotations.

Translates dataclasses, pydantic models and annotated classes into OpenAPI
Schema Objects, imports generic JSON Schema documents and converts JSON
values into OpenAPI Any values.
"""

__version__ = "0.1.0"

from .config import Config
from .schema_gen import import_json_schema, to_any, translate
from .schema_gen.schema_generator_service import SchemaGeneratorService

__all__ = ["Config", "SchemaGeneratorService", "import_json_schema", "to_any", "translate"]
