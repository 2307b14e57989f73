"""Tests for slots.py."""

import copy
import pickle

from bound.kernel.slots import UNASSIGNED, AttributeSlot


def test_new_slot_is_unassigned():
    slot = AttributeSlot("foo")
    assert slot.name == "foo"
    assert slot.assigned is False
    assert slot.value is UNASSIGNED


def test_assign_sets_value_and_flag():
    slot = AttributeSlot("foo")
    slot.assign("bar")
    assert slot.value == "bar"
    assert slot.assigned is True


def test_assigning_none_counts_as_assigned():
    """Test None is a value, not an absence."""
    slot = AttributeSlot("foo")
    slot.assign(None)
    assert slot.assigned is True
    assert slot.value is None


def test_reassignment_keeps_flag():
    slot = AttributeSlot("foo")
    slot.assign(1)
    slot.assign(2)
    assert slot.value == 2
    assert slot.assigned is True


def test_repr():
    slot = AttributeSlot("foo")
    assert repr(slot) == "foo=UNASSIGNED"
    slot.assign("x")
    assert repr(slot) == "foo='x'"


def test_unassigned_is_falsy_singleton():
    assert not UNASSIGNED
    assert copy.deepcopy(UNASSIGNED) is UNASSIGNED
    assert pickle.loads(pickle.dumps(UNASSIGNED)) is UNASSIGNED
