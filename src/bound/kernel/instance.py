"""Schema instances: seeded, validated values of a schema registry."""

from typing import Any, Dict, List

from bound.contracts import AttributeState

from .errors import InvalidSchemaError, MissingAttributeError, UnknownAttributeError
from .nested import resolve
from .schema import SchemaRegistry
from .seeding import seeder_for
from .slots import UNASSIGNED, AttributeSlot


class BoundInstance:
    """A validated instance of a schema registry.

    Construction seeds one slot per declared attribute from the raw input and
    then validates that every required slot was assigned. If either step
    fails the constructor raises, so no partially built instance escapes.

    Attributes are read as ``instance.name`` or ``instance["name"]``. An
    optional attribute that was never assigned reads as ``UNASSIGNED``.
    Instances cannot be modified after construction.
    """

    __slots__ = ("_registry", "_slots")

    def __init__(self, registry: SchemaRegistry, raw: Any = None):
        object.__setattr__(self, "_registry", registry)
        object.__setattr__(self, "_slots", {name: AttributeSlot(name) for name in registry.attributes})
        self._seed({} if raw is None else raw)
        self._validate()

    def _seed(self, raw: Any) -> None:
        seeder_for(self, raw).seed(raw)

    def _validate(self) -> None:
        for name, spec in self._registry.attributes.items():
            if spec.required and not self._slots[name].assigned:
                raise MissingAttributeError(name)

    def _assign_attribute(self, name: Any, value: Any) -> None:
        spec = self._registry.spec_for(name)
        if spec is None:
            raise UnknownAttributeError(str(name))
        if spec.nested is not None:
            value = resolve(spec.nested, value, name)
        self._slots[name].assign(value)

    def get_registry(self) -> SchemaRegistry:
        return self._registry

    def get_attributes(self) -> List[AttributeState]:
        """Snapshot every attribute slot in declaration order."""
        states = []
        for name, spec in self._registry.attributes.items():
            slot = self._slots[name]
            states.append(AttributeState(
                name=name,
                value=slot.value,
                assigned=slot.assigned,
                required=spec.required,
                nested=spec.nested.kind if spec.nested is not None else None,
            ))
        return states

    def try_read(self, name: str) -> Any:
        """Read an assigned attribute, or UNASSIGNED.

        Lets one instance act as the source object for seeding another.
        """
        slot = self._slots.get(name)
        if slot is None or not slot.assigned:
            return UNASSIGNED
        return slot.value

    def to_dict(self) -> Dict[str, Any]:
        """Assigned attributes as plain data, recursing into nested instances."""
        return {
            name: _plain(slot.value)
            for name, slot in self._slots.items()
            if slot.assigned
        }

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        slots = object.__getattribute__(self, "_slots")
        if name not in slots:
            raise AttributeError(f"Unknown attribute: {name}")
        return slots[name].value

    def __getitem__(self, name: str) -> Any:
        if name not in self._slots:
            raise KeyError(name)
        return self._slots[name].value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot set attribute {name}: bound instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete attribute {name}: bound instances are immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundInstance):
            return NotImplemented
        if self._registry != other._registry:
            return False
        return all(
            slot.assigned == other._slots[name].assigned and slot.value == other._slots[name].value
            for name, slot in self._slots.items()
        )

    __hash__ = None

    def __reduce__(self):
        states = {name: (slot.assigned, slot.value) for name, slot in self._slots.items()}
        return (_restore, (self._registry, states))

    def __repr__(self) -> str:
        return "Bound(" + ", ".join(repr(slot) for slot in self._slots.values()) + ")"


def _restore(registry: SchemaRegistry, states: Dict[str, Any]) -> BoundInstance:
    """Rebuild an already validated instance, for copy and pickle."""
    instance = BoundInstance.__new__(BoundInstance)
    slots = {}
    for name, (assigned, value) in states.items():
        slot = AttributeSlot(name)
        if assigned:
            slot.assign(value)
        slots[name] = slot
    object.__setattr__(instance, "_registry", registry)
    object.__setattr__(instance, "_slots", slots)
    return instance


def _plain(value: Any) -> Any:
    if isinstance(value, BoundInstance):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def construct(registry: SchemaRegistry, raw: Any = None) -> BoundInstance:
    """Build a validated instance of registry from a mapping or source object.

    Args:
        registry: Declared schema
        raw: Mapping of attribute values, or an object exposing them as
            attributes. None is treated as an empty mapping.

    Returns:
        Validated BoundInstance

    Raises:
        InvalidSchemaError: registry is not a SchemaRegistry
        UnknownAttributeError: mapping input has a key the schema does not declare
        MissingAttributeError: a required attribute could not be resolved
        TypeMismatchError: a nested list attribute received a non-list value
    """
    if not isinstance(registry, SchemaRegistry):
        raise InvalidSchemaError(f"Expected a SchemaRegistry, got {registry!r}")
    return BoundInstance(registry, raw)
