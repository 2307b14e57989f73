"""Exceptions raised while declaring schemas and constructing instances."""

from typing import Any, Optional

from bound.codes import ErrorCode


class SchemaError(ValueError):
    """Base exception for schema declaration and construction errors."""
    code: ErrorCode

    def __init__(self, message: str, attribute: Optional[str] = None):
        self.attribute = attribute
        super().__init__(message)


class InvalidSchemaError(SchemaError):
    """Raised when a schema is declared with an invalid attribute name or nested spec."""
    code = ErrorCode.INVALID_SCHEMA


class UnknownAttributeError(SchemaError):
    """Raised when input names an attribute the schema does not declare."""
    code = ErrorCode.UNKNOWN_ATTRIBUTE

    def __init__(self, attribute: str):
        super().__init__(f"Unknown attribute: {attribute}", attribute)


class MissingAttributeError(SchemaError):
    """Raised when a required attribute cannot be resolved."""
    code = ErrorCode.MISSING_ATTRIBUTE

    def __init__(self, attribute: str):
        super().__init__(f"Missing attribute: {attribute}", attribute)


class TypeMismatchError(SchemaError, TypeError):
    """Raised when a nested list attribute receives something that is not a list."""
    code = ErrorCode.TYPE_MISMATCH

    def __init__(self, attribute: Optional[str], value: Any):
        self.value = value
        message = f"Expected {value!r} to be a list"
        if attribute is not None:
            message += f" for attribute {attribute}"
        super().__init__(message, attribute)
