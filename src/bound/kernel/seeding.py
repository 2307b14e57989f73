"""Seeding strategies: populate an instance's slots from raw input.

Mapping input is seeded pair by pair in the mapping's own order. Any other
input is read as a source object, attribute by attribute in declaration
order. Both strategies assign through the receiver's guarded assignment,
which rejects names the schema does not declare.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .errors import MissingAttributeError
from .slots import UNASSIGNED


@runtime_checkable
class ReadableSource(Protocol):
    """A source object that can be probed for attribute values.

    ``try_read`` returns the value for ``name``, or ``UNASSIGNED`` when the
    source has no such attribute.
    """

    def try_read(self, name: str) -> Any:
        ...


class ObjectSource:
    """ReadableSource adapter over an arbitrary object, read with getattr.

    A missing attribute (AttributeError) reads as absent.
    """

    def __init__(self, obj: Any):
        self.obj = obj

    def try_read(self, name: str) -> Any:
        try:
            return getattr(self.obj, name)
        except AttributeError:
            return UNASSIGNED


def as_source(obj: Any) -> ReadableSource:
    """Adapt obj to a ReadableSource, unless its type already implements one.

    Only a callable ``try_read`` defined on the type counts; an instance
    attribute of that name is ordinary data and is read with getattr.
    """
    if callable(getattr(type(obj), "try_read", None)):
        return obj
    return ObjectSource(obj)


class MappingSeeder:
    """Seeds a receiver from key/value pairs."""

    def __init__(self, receiver):
        self.receiver = receiver

    def seed(self, mapping: Mapping) -> None:
        for key, value in mapping.items():
            self.receiver._assign_attribute(key, value)


class ObjectSeeder:
    """Seeds a receiver by probing a source object for each declared attribute."""

    def __init__(self, receiver):
        self.receiver = receiver

    def seed(self, obj: Any) -> None:
        source = as_source(obj)
        for name, spec in self.receiver.get_registry().attributes.items():
            value = source.try_read(name)
            if value is UNASSIGNED:
                if spec.required:
                    raise MissingAttributeError(name)
                continue
            self.receiver._assign_attribute(name, value)


def seeder_for(receiver, raw: Any):
    """Select the seeding strategy for the shape of raw."""
    if isinstance(raw, Mapping):
        return MappingSeeder(receiver)
    return ObjectSeeder(receiver)
