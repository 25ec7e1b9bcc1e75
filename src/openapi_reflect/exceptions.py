"""
Custom exceptions for OpenAPI schema generation.
"""
from typing import Any, List, Optional


class OpenApiReflectError(Exception):
    """Base class for all openapi_reflect errors."""
    pass

class SchemaPreconditionError(OpenApiReflectError, ValueError):
    """Raised when a required argument (type, attribute, name) is missing."""
    pass

class InvalidTypeDescriptorError(OpenApiReflectError, TypeError):
    """Raised when a type is structurally unusable, e.g. a dictionary
    annotation without its key/value arguments."""
    def __init__(self, message: str, annotation: Optional[Any] = None):
        super().__init__(message)
        self.annotation = annotation

class CyclicSchemaError(OpenApiReflectError):
    """Raised when a type refers back to itself while its schema is still
    being built."""
    def __init__(self, path: List[str]):
        super().__init__(f"Cyclic type graph detected: {' -> '.join(path)}")
        self.path = path

class UnhandledValueTypeError(OpenApiReflectError, TypeError):
    """Raised when a JSON value of an unsupported runtime kind is converted
    to an OpenAPI Any value."""
    def __init__(self, value_type: type, message: Optional[str] = None):
        full_message = message or f"Unhandled value type: {value_type.__module__}.{value_type.__qualname__}"
        super().__init__(full_message)
        self.value_type = value_type

class UnsupportedFormatError(OpenApiReflectError, ValueError):
    """Raised when a document is rendered to an unknown output format."""
    def __init__(self, fmt: str):
        super().__init__(f"Unsupported output format '{fmt}'. Expected 'json' or 'yaml'.")
        self.format = fmt
