"""bound: schema-driven construction and validation of structured values."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("bound")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from bound.api import required, optional, nested, list_of, construct, describe
from bound.codes import ErrorCode
from bound.contracts import AttributeState, InstanceReport
from bound.kernel.errors import (
    SchemaError,
    InvalidSchemaError,
    UnknownAttributeError,
    MissingAttributeError,
    TypeMismatchError,
)
from bound.kernel.instance import BoundInstance
from bound.kernel.schema import AttributeSpec, NestedSpec, SchemaRegistry
from bound.kernel.slots import UNASSIGNED

__all__ = [
    "__version__",
    "required",
    "optional",
    "nested",
    "list_of",
    "construct",
    "describe",
    "ErrorCode",
    "AttributeState",
    "InstanceReport",
    "SchemaError",
    "InvalidSchemaError",
    "UnknownAttributeError",
    "MissingAttributeError",
    "TypeMismatchError",
    "BoundInstance",
    "AttributeSpec",
    "NestedSpec",
    "SchemaRegistry",
    "UNASSIGNED",
]
