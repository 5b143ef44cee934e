"""Mind map nodes and their mapping to OPML outlines.

Layout and visual state that OPML has no vocabulary for is stored as
private outline attributes prefixed with ``_``::

    <outline text="Idea" _collapsed="false" _color="#FF0000"
             _fontSize="14.0" _position_x="12.5" _position_y="40.0" />

Any other attribute on the outline is kept in ``opml_attributes`` and
written back unchanged.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional

from .models import OPMLBody, OPMLDocument, OPMLHead, OPMLOutline

POSITION_X = "_position_x"
POSITION_Y = "_position_y"
COLOR = "_color"
FONT_SIZE = "_fontSize"
COLLAPSED = "_collapsed"

MAPPED_KEYS = ("text", POSITION_X, POSITION_Y, COLOR, FONT_SIZE, COLLAPSED)

DEFAULT_TEXT = "Untitled"
DEFAULT_FONT_SIZE = 14.0


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _float(raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(eq=False)
class MindMapNode:
    """A node on the mind map canvas.

    Nodes form a tree via ``children``; ``parent`` points back up.
    """
    text: str = ""
    x: float = 0.0
    y: float = 0.0
    color_hex: Optional[str] = None
    font_size: float = DEFAULT_FONT_SIZE
    is_collapsed: bool = False

    # Outline attributes not interpreted by the node
    opml_attributes: dict[str, str] = field(default_factory=dict)

    children: list[MindMapNode] = field(default_factory=list)
    parent: Optional[MindMapNode] = field(default=None, repr=False)

    id: uuid.UUID = field(default_factory=uuid.uuid4, repr=False)
    created_at: datetime = field(default_factory=_now, repr=False)
    modified_at: datetime = field(default_factory=_now, repr=False)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value
        self.modified_at = _now()

    def add_child(self, child: MindMapNode) -> MindMapNode:
        """Append ``child`` and make this node its parent."""
        self.children.append(child)
        child.parent = self
        self.modified_at = _now()
        return child

    def remove_child(self, child: MindMapNode) -> None:
        self.children = [c for c in self.children if c.id != child.id]
        if child.parent is self:
            child.parent = None
        self.modified_at = _now()

    def walk(self) -> Iterator[MindMapNode]:
        """Yield this node and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_outline(self) -> OPMLOutline:
        """Convert this node and its subtree to an outline."""
        attributes = dict(self.opml_attributes)
        attributes["text"] = self.text
        attributes[POSITION_X] = repr(float(self.x))
        attributes[POSITION_Y] = repr(float(self.y))
        if self.color_hex is not None:
            attributes[COLOR] = self.color_hex
        attributes[FONT_SIZE] = repr(float(self.font_size))
        attributes[COLLAPSED] = "true" if self.is_collapsed else "false"

        return OPMLOutline(
            attributes=attributes,
            children=[child.to_outline() for child in self.children],
        )

    @classmethod
    def from_outline(cls, outline: OPMLOutline, parent: Optional[MindMapNode] = None) -> MindMapNode:
        """Build a node tree from an outline.

        Missing or malformed layout attributes fall back to defaults.
        """
        attrs = outline.attributes
        node = cls(
            text=attrs.get("text", DEFAULT_TEXT),
            x=_float(attrs.get(POSITION_X), 0.0),
            y=_float(attrs.get(POSITION_Y), 0.0),
            color_hex=attrs.get(COLOR),
            font_size=_float(attrs.get(FONT_SIZE), DEFAULT_FONT_SIZE),
            is_collapsed=attrs.get(COLLAPSED) == "true",
            opml_attributes={k: v for k, v in attrs.items() if k not in MAPPED_KEYS},
            parent=parent,
        )

        for child_outline in outline.children:
            node.children.append(cls.from_outline(child_outline, parent=node))

        return node

    def __repr__(self) -> str:
        child_count = len(self.children)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"MindMapNode({self.text!r} @ {self.x}, {self.y}{suffix})"


def nodes_from_document(document: OPMLDocument) -> list[MindMapNode]:
    """Root nodes for every root outline in the document body."""
    return [MindMapNode.from_outline(outline) for outline in document.body.outlines]


def document_from_nodes(
    nodes: Iterable[MindMapNode],
    *,
    title: Optional[str] = None,
    head: Optional[OPMLHead] = None,
) -> OPMLDocument:
    """Build a document from root nodes.

    Args:
        nodes: Root nodes, in body order.
        title: Document title; overrides ``head.title`` when given.
        head: Existing head to carry over (e.g. from the loaded file).
            A fresh head is created when omitted.

    Returns:
        A document whose ``date_modified`` is the current time.
    """
    if head is None:
        head = OPMLHead.now()
    else:
        head.touch()
    if title is not None:
        head.title = title

    body = OPMLBody(outlines=[node.to_outline() for node in nodes])
    return OPMLDocument(head=head, body=body)
