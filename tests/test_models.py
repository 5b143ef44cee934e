"""Tests for the OPML document model."""

from datetime import datetime, timezone

from mindmap_opml import OPMLBody, OPMLDocument, OPMLHead, OPMLOutline


def test_new_document_defaults():
    doc = OPMLDocument()
    assert doc.version == "2.0"
    assert doc.outlines == []
    assert doc.head.date_created is not None
    assert doc.head.date_modified is not None
    assert doc.head.date_created.tzinfo is not None
    assert doc.head.date_created.microsecond == 0
    assert doc.head.title is None


def test_plain_head_has_no_dates():
    head = OPMLHead()
    assert head.date_created is None
    assert head.date_modified is None
    assert head.expansion_state is None


def test_head_now_keeps_given_dates():
    created = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    head = OPMLHead.now(title="Plan", date_created=created)
    assert head.title == "Plan"
    assert head.date_created == created
    assert head.date_modified is not None


def test_text_and_type_accessors():
    outline = OPMLOutline()
    assert outline.text is None
    outline.text = "Idea"
    outline.type = "link"
    assert outline.attributes == {"text": "Idea", "type": "link"}

    outline.type = None
    assert "type" not in outline.attributes


def test_boolean_accessors():
    outline = OPMLOutline(attributes={"isComment": "true"})
    assert outline.is_comment
    assert not outline.is_breakpoint

    outline.is_breakpoint = True
    outline.is_comment = False
    assert outline.attributes["isBreakpoint"] == "true"
    assert outline.attributes["isComment"] == "false"


def test_created_accessor():
    outline = OPMLOutline()
    assert outline.created is None

    when = datetime(2026, 10, 19, 5, 28, tzinfo=timezone.utc)
    outline.created = when
    assert outline.attributes["created"] == "Mon, 19 Oct 2026 05:28:00 +0000"
    assert outline.created == when

    outline.attributes["created"] = "someday"
    assert outline.created is None

    outline.created = None
    assert "created" not in outline.attributes


def test_private_attributes_are_plain_storage():
    outline = OPMLOutline(attributes={"text": "A", "_position_x": "12.5"})
    outline.text = "B"
    assert outline.attributes == {"text": "B", "_position_x": "12.5"}


def test_tree_helpers():
    root = OPMLOutline(attributes={"text": "Root"})
    a = root.add_child("A")
    a.add_child("A1", _color="#00FF00")
    root.add_child("B")

    assert [o.text for o in root.walk()] == ["Root", "A", "A1", "B"]
    assert root.count() == 4
    assert root.find("a1").attributes["_color"] == "#00FF00"
    assert root.find("missing") is None
    assert a.children[0].is_leaf
    assert not a.is_leaf


def test_document_walk_and_find():
    first = OPMLOutline(attributes={"text": "First"})
    first.add_child("Nested")
    second = OPMLOutline(attributes={"text": "Second"})
    doc = OPMLDocument(head=OPMLHead(), body=OPMLBody(outlines=[first, second]))

    assert doc.outline_count == 3
    assert doc.find("nested") is first.children[0]
    assert doc.find("Second") is second
    assert "3 outlines" in repr(doc)


def test_structural_equality():
    a = OPMLOutline(attributes={"text": "x", "b": "1"}, children=[OPMLOutline({"text": "c"})])
    b = OPMLOutline(attributes={"b": "1", "text": "x"}, children=[OPMLOutline({"text": "c"})])
    assert a == b
