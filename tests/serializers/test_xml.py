# topmark:header:start
#
#   project      : Tailor
#   file         : test_xml.py
#   file_relpath : tests/serializers/test_xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the tree-building `XmlSerializer`."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

import pytest

from tailor.api import make_scope, render
from tailor.core.errors import InvalidElementNameError, TailorError
from tailor.resources import Collection, Item
from tailor.scope import StaticScope
from tailor.serializers import XmlSerializer
from tests.conftest import mark_serializer
from tests.fakes import identity_callback

DECL: str = '<?xml version="1.0"?>\n'


def _render(serializer: XmlSerializer, data: Any) -> str:
    return serializer.data(Item(data, identity_callback), StaticScope.of())


@mark_serializer
def test_mapping_keys_sorted_by_default() -> None:
    """Mapping members are emitted in alphabetical order."""
    rendered: str = _render(XmlSerializer(), {"name": "Ann", "id": 5})

    assert rendered == DECL + "<root><id>5</id><name>Ann</name></root>\n"


@mark_serializer
def test_sorting_is_case_insensitive() -> None:
    """Keys are ordered ignoring case."""
    rendered: str = _render(XmlSerializer(), {"b": 1, "C": 2, "a": 3})

    assert [child.tag for child in ET.fromstring(rendered)] == ["a", "b", "C"]


@mark_serializer
def test_insertion_order_kept_when_unsorted() -> None:
    """With sort_keys disabled the insertion order is kept."""
    rendered: str = _render(XmlSerializer(sort_keys=False), {"name": "Ann", "id": 5})

    assert rendered == DECL + "<root><name>Ann</name><id>5</id></root>\n"


@mark_serializer
def test_sequence_members_use_item_key_in_order() -> None:
    """Sequences become item_key siblings in sequence order."""
    resource = Collection([{"id": 2}, {"id": 1}], identity_callback)

    rendered: str = XmlSerializer(item_key="entry").data(resource, StaticScope.of())

    assert rendered == DECL + (
        "<root><entry><id>2</id></entry><entry><id>1</id></entry></root>\n"
    )


@mark_serializer
def test_nested_lists_and_scalars() -> None:
    """Nested sequences, booleans and absent values follow the scalar rules."""
    rendered: str = _render(XmlSerializer(), {"tags": ["x", "y"], "ok": True, "gone": None})

    root: ET.Element = ET.fromstring(rendered)
    assert [item.text for item in root.iter("item")] == ["x", "y"]
    assert root.findtext("ok") == "true"
    gone: ET.Element | None = root.find("gone")
    assert gone is not None
    assert gone.text is None
    assert len(gone) == 0


@mark_serializer
def test_sets_are_rendered_sorted() -> None:
    """Set members have no order and are emitted sorted by text."""
    rendered: str = _render(XmlSerializer(), {"roles": {"b", "a", "c"}})

    assert [item.text for item in ET.fromstring(rendered).iter("item")] == ["a", "b", "c"]


@mark_serializer
def test_empty_collection_is_empty_document_element() -> None:
    """An empty collection renders an empty document element."""
    rendered: str = XmlSerializer().data(Collection(None, identity_callback), StaticScope.of())

    root: ET.Element = ET.fromstring(rendered)
    assert root.tag == "root"
    assert len(root) == 0


@mark_serializer
def test_scope_root_key_moves_children_in_order() -> None:
    """All children of the document element move under the identifier element."""
    serializer = XmlSerializer(sort_keys=False)
    rendered: str = _render(serializer, {"name": "Ann", "age": 30})

    wrapped: str = serializer.scope_root_key(rendered, "user")

    assert wrapped == DECL + "<root><user><name>Ann</name><age>30</age></user></root>\n"


@mark_serializer
def test_scope_root_key_moves_scalar_text() -> None:
    """Text directly inside the document element moves along."""
    serializer = XmlSerializer()
    wrapped: str = serializer.scope_root_key(_render(serializer, "hello"), "greeting")

    assert wrapped == DECL + "<root><greeting>hello</greeting></root>\n"


@mark_serializer
def test_scope_root_key_empty_identifier_is_identity() -> None:
    """An empty identifier returns the document unchanged."""
    serializer = XmlSerializer()
    rendered: str = _render(serializer, {"id": 1})

    assert serializer.scope_root_key(rendered, "") == rendered


@mark_serializer
def test_meta_appended_to_document_element() -> None:
    """Metadata becomes one extra child of the document element."""
    serializer = XmlSerializer()
    resource = Item({"id": 1}, identity_callback).add_meta("total", 1)
    scope = StaticScope.of()

    rendered: str = serializer.meta(resource, scope, serializer.data(resource, scope))

    assert rendered == DECL + "<root><id>1</id><meta><total>1</total></meta></root>\n"


@mark_serializer
def test_custom_root_and_meta_keys() -> None:
    """root_key and meta_key name the document and metadata elements."""
    serializer = XmlSerializer(root_key="response", meta_key="info")
    resource = Item({"id": 1}, identity_callback).add_meta("page", 2)
    scope = StaticScope.of()

    rendered: str = serializer.meta(resource, scope, serializer.data(resource, scope))

    assert rendered == DECL + "<response><id>1</id><info><page>2</page></info></response>\n"


@mark_serializer
def test_from_config_uses_xml_settings(default_config: Any) -> None:
    """from_config copies the [xml] settings."""
    serializer: XmlSerializer = XmlSerializer.from_config(default_config)

    assert (serializer.root_key, serializer.meta_key, serializer.item_key) == (
        "root",
        "meta",
        "item",
    )
    assert serializer.sort_keys is True


@mark_serializer
@pytest.mark.parametrize("key", ["first name", "1", "", "a:b", "<x>"])
def test_invalid_element_name_fails_while_building(key: str) -> None:
    """data() refuses keys that cannot name an element instead of emitting broken XML."""
    with pytest.raises(InvalidElementNameError) as excinfo:
        _render(XmlSerializer(), {"id": 1, "nested": {key: "Ann"}})

    assert excinfo.value.name == key
    assert isinstance(excinfo.value, TailorError)


@mark_serializer
def test_invalid_configured_names_are_rejected() -> None:
    """root_key, meta_key, item_key and the re-rooting identifier must be element names."""
    with pytest.raises(InvalidElementNameError):
        XmlSerializer(root_key="my root")
    with pytest.raises(InvalidElementNameError):
        XmlSerializer(item_key="2nd")
    with pytest.raises(InvalidElementNameError):
        XmlSerializer().scope_root_key('<?xml version="1.0"?>\n<root />\n', "user id")


@mark_serializer
def test_illegal_control_characters_are_dropped_from_text() -> None:
    """Code points XML cannot carry are removed; tabs and newlines are kept."""
    serializer = XmlSerializer()
    resource = Item({"note": "a\x0bb\x00c", "memo": "x\ty\nz"}, identity_callback, serializer)
    resource.add_meta("total", 1)

    rendered: Any = render(resource, make_scope(), identifier="entry")

    root: ET.Element = ET.fromstring(rendered)
    assert root.findtext("entry/note") == "abc"
    assert root.findtext("entry/memo") == "x\ty\nz"
    assert root.findtext("meta/total") == "1"


@mark_serializer
def test_keys_equal_up_to_case_are_ordered_deterministically() -> None:
    """Keys that differ only by case are ordered by exact text, whatever the insertion order."""
    first: str = _render(XmlSerializer(), {"b": 1, "B": 2, "a": 3})
    second: str = _render(XmlSerializer(), {"B": 2, "a": 3, "b": 1})

    assert first == second
    assert [child.tag for child in ET.fromstring(first)] == ["a", "B", "b"]
