"""Public API for the bound package.

Declare schemas with ``required``, ``optional`` and ``nested`` (or the
chained ``declare*`` methods on SchemaRegistry), then build validated
instances with ``construct``:

    address = required("city")
    person = required("name", address=address).declare_optional("nickname")
    ana = construct(person, {"name": "Ana", "address": {"city": "Lima"}})
    ana.address.city  # "Lima"
"""

from typing import Any, Mapping, Optional

from bound.contracts import InstanceReport
from bound.kernel.instance import BoundInstance, construct
from bound.kernel.schema import NestedSpec, SchemaRegistry


def required(*names: str, **nested: Any) -> SchemaRegistry:
    """Declare a schema of required attributes.

    Keyword arguments declare nested attributes: a SchemaRegistry value for
    one nested instance, ``[registry]`` for a list of them.
    """
    registry = SchemaRegistry().declare(*names)
    if nested:
        registry = registry.declare_nested(nested)
    return registry


def optional(*names: str) -> SchemaRegistry:
    """Declare a schema of optional attributes."""
    return SchemaRegistry().declare_optional(*names)


def nested(mapping: Optional[Mapping[str, Any]] = None, /, **more: Any) -> SchemaRegistry:
    """Declare a schema of nested (and therefore required) attributes."""
    return SchemaRegistry().declare_nested(mapping, **more)


def list_of(registry: SchemaRegistry) -> NestedSpec:
    """Nested specification for a list of instances of registry."""
    return NestedSpec.list_of(registry)


def describe(instance: BoundInstance) -> InstanceReport:
    """Diagnostic report of an instance's slots."""
    states = instance.get_attributes()
    return InstanceReport(
        attributes=states,
        assigned=[state.name for state in states if state.assigned],
        unassigned=[state.name for state in states if not state.assigned],
    )


__all__ = [
    "required",
    "optional",
    "nested",
    "list_of",
    "construct",
    "describe",
]
