"""Schema registry: declared attributes, their requiredness and nesting.

A registry is a frozen value. Declaration calls never mutate the receiver;
they return a new registry with the declaration applied (persistent data
style), so registries can be chained while being built and shared freely
once built:

    address = SchemaRegistry().declare("city")
    person = SchemaRegistry().declare("name").declare_nested({"address": address})

Re-declaring a name overwrites the earlier spec (last write wins) and keeps
the name in its original position.
"""

import keyword
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidSchemaError

# Names taken by the instance read API; attributes cannot shadow them.
# Names with a leading underscore are reserved for instance internals.
RESERVED_NAMES = frozenset({"get_attributes", "get_registry", "to_dict", "try_read"})


class NestedSpec(BaseModel):
    """Marks an attribute whose value is built by applying another registry.

    ``scalar`` builds one instance from the input value, ``list`` builds one
    instance per element of an input list.
    """
    kind: Literal["scalar", "list"]
    registry: "SchemaRegistry"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def scalar(cls, registry: "SchemaRegistry") -> "NestedSpec":
        return cls(kind="scalar", registry=registry)

    @classmethod
    def list_of(cls, registry: "SchemaRegistry") -> "NestedSpec":
        return cls(kind="list", registry=registry)

    @property
    def is_list(self) -> bool:
        return self.kind == "list"


class AttributeSpec(BaseModel):
    """Requiredness marker plus optional nested specification for one attribute."""
    required: bool = True
    nested: Optional[NestedSpec] = None

    model_config = ConfigDict(frozen=True)


class SchemaRegistry(BaseModel):
    """Ordered mapping from attribute name to AttributeSpec.

    ``attributes`` is a read-only view; the only way to change a registry is
    to declare on it, which returns a new one.
    """
    attributes: Mapping[str, AttributeSpec] = Field(default_factory=lambda: MappingProxyType({}))

    model_config = ConfigDict(frozen=True)

    @field_validator("attributes", mode="after")
    @classmethod
    def freeze_attributes(cls, v: Mapping[str, AttributeSpec]) -> Mapping[str, AttributeSpec]:
        """Store attributes behind a read-only view, keeping declaration order."""
        return MappingProxyType(dict(v))

    def declare(self, *names: str) -> "SchemaRegistry":
        """Return a registry with each name declared required."""
        _check_names(names)
        return self._with({name: AttributeSpec(required=True) for name in names})

    def declare_optional(self, *names: str) -> "SchemaRegistry":
        """Return a registry with each name declared optional."""
        _check_names(names)
        return self._with({name: AttributeSpec(required=False) for name in names})

    def declare_nested(self, nested: Optional[Mapping[str, Any]] = None, /, **more: Any) -> "SchemaRegistry":
        """Return a registry with each name declared nested.

        Values may be a NestedSpec, a SchemaRegistry (one nested instance) or
        a one-element list holding a SchemaRegistry (a list of nested
        instances). Nested attributes are always required.
        """
        declared = dict(nested or {})
        declared.update(more)
        _check_names(declared.keys())
        return self._with({
            name: AttributeSpec(required=True, nested=_coerce_nested(name, value))
            for name, value in declared.items()
        })

    def names(self) -> List[str]:
        """Attribute names in declaration order."""
        return list(self.attributes)

    def required_names(self) -> List[str]:
        return [name for name, spec in self.attributes.items() if spec.required]

    def is_known(self, name: Any) -> bool:
        return isinstance(name, str) and name in self.attributes

    def spec_for(self, name: Any) -> Optional[AttributeSpec]:
        if not isinstance(name, str):
            return None
        return self.attributes.get(name)

    def build(self, raw: Any = None):
        """Construct a validated instance of this schema from raw input."""
        from .instance import construct
        return construct(self, raw)

    def _with(self, specs: Dict[str, AttributeSpec]) -> "SchemaRegistry":
        merged = dict(self.attributes)
        merged.update(specs)
        return type(self)(attributes=merged)

    # The read-only view cannot be pickled or deep-copied; go through a plain dict.
    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None) -> "SchemaRegistry":
        return type(self)(attributes=deepcopy(dict(self.attributes), memo))

    def __getstate__(self) -> Dict[str, Any]:
        state = super().__getstate__()
        state["__dict__"] = {**state["__dict__"], "attributes": dict(self.attributes)}
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        state["__dict__"]["attributes"] = MappingProxyType(state["__dict__"]["attributes"])
        super().__setstate__(state)


def _check_names(names: Iterable[Any]) -> None:
    for name in names:
        if isinstance(name, str) and (name.startswith("_") or name in RESERVED_NAMES):
            raise InvalidSchemaError(f"Reserved attribute name: {name!r}", name)
        if not _is_identifier(name):
            raise InvalidSchemaError(
                f"Invalid attribute name: {name!r}",
                name if isinstance(name, str) else None,
            )


def _is_identifier(name: Any) -> bool:
    return isinstance(name, str) and name.isidentifier() and not keyword.iskeyword(name)


def _coerce_nested(name: str, value: Any) -> NestedSpec:
    if isinstance(value, NestedSpec):
        return value
    if isinstance(value, SchemaRegistry):
        return NestedSpec.scalar(value)
    if isinstance(value, (list, tuple)) and len(value) == 1 and isinstance(value[0], SchemaRegistry):
        return NestedSpec.list_of(value[0])
    raise InvalidSchemaError(f"Invalid nested specification for {name}: {value!r}", name)


NestedSpec.model_rebuild()
AttributeSpec.model_rebuild()
SchemaRegistry.model_rebuild()
