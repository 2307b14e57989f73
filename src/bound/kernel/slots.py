"""Attribute slots: per-instance storage cells."""

from dataclasses import dataclass, field
from typing import Any


class _Unassigned:
    """Marker for an attribute that has no value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNASSIGNED"

    def __reduce__(self):
        return (_Unassigned, ())


UNASSIGNED = _Unassigned()


@dataclass
class AttributeSlot:
    """Holds one attribute's resolved value and whether it was ever assigned.

    ``assigned`` flips to True on the first assignment and is never reset.
    Assigning ``None`` counts as an assignment.
    """
    name: str
    value: Any = field(default=UNASSIGNED)
    assigned: bool = False

    def assign(self, value: Any) -> None:
        self.value = value
        self.assigned = True

    def __repr__(self) -> str:
        return f"{self.name}={self.value!r}"
