"""Tests for the public API (bound.api)."""

from types import SimpleNamespace

import pytest
from bound.api import construct, describe, list_of, nested, optional, required
from bound.contracts import InstanceReport
from bound.kernel.errors import InvalidSchemaError, MissingAttributeError
from bound.kernel.schema import NestedSpec, SchemaRegistry
from bound.kernel.slots import UNASSIGNED


def test_required_with_keyword_nesting():
    """Test the combined required(:foo, :baz => ...) declaration form."""
    boundary = required("foo", baz=required("gonzo"))

    from_mapping = construct(boundary, {"foo": "YES", "baz": {"gonzo": 22}})
    from_object = construct(boundary, SimpleNamespace(foo="YES", baz=SimpleNamespace(gonzo=22)))

    assert from_mapping.foo == "YES"
    assert from_mapping.baz.gonzo == 22
    assert from_mapping == from_object


def test_required_and_optional_chain():
    schema = required("foo").declare_optional("bar")

    assert construct(schema, {"foo": "x"}).bar is UNASSIGNED
    assert construct(schema, {"foo": "x", "bar": "y"}).bar == "y"


def test_optional_only():
    schema = optional("nickname")
    assert construct(schema, {}).nickname is UNASSIGNED


def test_nested_helpers():
    tag = required("label")
    schema = nested({"primary": tag}, others=list_of(tag)).declare("id")

    assert schema.names() == ["primary", "others", "id"]
    assert schema.spec_for("others").nested == NestedSpec.list_of(tag)

    post = construct(schema, {"id": 1, "primary": {"label": "a"}, "others": [{"label": "b"}]})
    assert post.primary.label == "a"
    assert post.others[0].label == "b"


def test_required_rejects_bad_names():
    with pytest.raises(InvalidSchemaError):
        required("ok", "not ok")
    with pytest.raises(InvalidSchemaError):
        required("ok", bad="not a registry")


def test_describe_reports_slots():
    schema = required("foo").declare_optional("bar", "baz")
    report = describe(construct(schema, {"foo": 1, "baz": None}))

    assert isinstance(report, InstanceReport)
    assert [state.name for state in report.attributes] == ["foo", "bar", "baz"]
    assert report.assigned == ["foo", "baz"]
    assert report.unassigned == ["bar"]


def test_api_returns_registries():
    assert isinstance(required("a"), SchemaRegistry)
    assert isinstance(optional("a"), SchemaRegistry)
    assert isinstance(nested(a=required("b")), SchemaRegistry)


def test_errors_surface_through_api():
    with pytest.raises(MissingAttributeError):
        construct(required("foo", baz=required("gonzo")), {"foo": "YES", "baz": {}})


def test_nested_keyword_named_mapping():
    """Test an attribute called "mapping" can be declared by keyword."""
    item = required("sku")
    schema = nested(mapping=item)

    assert schema.names() == ["mapping"]
    assert construct(schema, {"mapping": {"sku": "A1"}}).mapping.sku == "A1"


def test_nested_keyword_named_nested():
    item = required("sku")
    schema = nested(nested=item)
    assert construct(schema, {"nested": {"sku": "A1"}}).nested.sku == "A1"
