"""Public introspection models for bound instances."""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict


class AttributeState(BaseModel):
    """Snapshot of one attribute slot of a built instance."""
    name: str
    value: Any = None  # UNASSIGNED when the slot was never assigned
    assigned: bool
    required: bool
    nested: Optional[str] = None  # "scalar" | "list" | None

    model_config = ConfigDict(frozen=True)


class InstanceReport(BaseModel):
    """Diagnostic view of a built instance."""
    attributes: List[AttributeState]  # declaration order
    assigned: List[str]
    unassigned: List[str]

    model_config = ConfigDict(frozen=True)
