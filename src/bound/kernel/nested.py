"""Nested resolution: build nested instances for nested attributes.

Resolution reuses the full construction pipeline (seeding, then
validation), so nested schemas may nest further to any depth. Schemas are
expected to be acyclic; no cycle detection is performed.
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from .errors import TypeMismatchError
from .schema import NestedSpec


def resolve(spec: NestedSpec, raw: Any, attribute: Optional[str] = None) -> Any:
    """Resolve a raw input value against a nested specification.

    Args:
        spec: Nested specification of the attribute
        raw: Raw input value for the attribute
        attribute: Attribute name, used in error messages

    Returns:
        One instance for a scalar spec, a new list of instances for a list spec

    Raises:
        TypeMismatchError: list spec given a value that is not a list
        SchemaError: any failure while building a nested instance, unchanged
    """
    if spec.is_list:
        return _resolve_list(spec, raw, attribute)
    return _build(spec, raw)


def _resolve_list(spec: NestedSpec, raw: Any, attribute: Optional[str]) -> List[Any]:
    if not _is_list_like(raw):
        raise TypeMismatchError(attribute, raw)
    return [_build(spec, item) for item in raw]


def _is_list_like(raw: Any) -> bool:
    # Strings and mappings are iterable but are never a list of inputs
    return isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray, Mapping))


def _build(spec: NestedSpec, raw: Any):
    from .instance import construct
    return construct(spec.registry, raw)
