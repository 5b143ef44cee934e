"""Data models for OPML 2.0 documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Optional

from .dates import DATE_FORMATTER


def _now() -> datetime:
    # OPML dates carry whole seconds only
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class OPMLHead:
    """Document metadata from the ``<head>`` element.

    Every field is optional; None means the element was not present.
    """
    title: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    owner_id: Optional[str] = None
    docs: Optional[str] = None
    expansion_state: Optional[list[int]] = None
    vert_scroll_state: Optional[int] = None
    window_top: Optional[int] = None
    window_left: Optional[int] = None
    window_bottom: Optional[int] = None
    window_right: Optional[int] = None

    @classmethod
    def now(cls, **fields) -> OPMLHead:
        """Head for a new document, stamped with the current time."""
        fields.setdefault("date_created", _now())
        fields.setdefault("date_modified", _now())
        return cls(**fields)

    def touch(self) -> None:
        """Set ``date_modified`` to the current time."""
        self.date_modified = _now()


@dataclass
class OPMLOutline:
    """A single ``<outline>`` node.

    ``attributes`` is a free-form mapping; any key may appear, including
    application-private ones such as ``_position_x``. The properties below
    only interpret well-known keys, they never restrict what is stored.
    """
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[OPMLOutline] = field(default_factory=list)

    @property
    def text(self) -> Optional[str]:
        return self.attributes.get("text")

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self._set_optional("text", value)

    @property
    def type(self) -> Optional[str]:
        return self.attributes.get("type")

    @type.setter
    def type(self, value: Optional[str]) -> None:
        self._set_optional("type", value)

    @property
    def is_comment(self) -> bool:
        return self.attributes.get("isComment") == "true"

    @is_comment.setter
    def is_comment(self, value: bool) -> None:
        self.attributes["isComment"] = "true" if value else "false"

    @property
    def is_breakpoint(self) -> bool:
        return self.attributes.get("isBreakpoint") == "true"

    @is_breakpoint.setter
    def is_breakpoint(self, value: bool) -> None:
        self.attributes["isBreakpoint"] = "true" if value else "false"

    @property
    def created(self) -> Optional[datetime]:
        raw = self.attributes.get("created")
        if raw is None:
            return None
        return DATE_FORMATTER.parse(raw)

    @created.setter
    def created(self, value: Optional[datetime]) -> None:
        if value is None:
            self.attributes.pop("created", None)
        else:
            self.attributes["created"] = DATE_FORMATTER.format(value)

    def _set_optional(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self.attributes.pop(key, None)
        else:
            self.attributes[key] = value

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def add_child(self, text: Optional[str] = None, **attributes: str) -> OPMLOutline:
        """Create and append a new child outline."""
        child = OPMLOutline(attributes=dict(attributes))
        if text is not None:
            child.text = text
        self.children.append(child)
        return child

    def walk(self) -> Iterator[OPMLOutline]:
        """Yield this outline and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self) -> int:
        """Total number of outlines in this subtree (including self)."""
        return sum(1 for _ in self.walk())

    def find(self, text: str) -> Optional[OPMLOutline]:
        """Find first outline in this subtree with matching text (case-insensitive)."""
        text_lower = text.lower()
        for outline in self.walk():
            if outline.text is not None and outline.text.lower() == text_lower:
                return outline
        return None

    def __repr__(self) -> str:
        child_count = len(self.children)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"OPMLOutline({self.text!r}{suffix})"


@dataclass
class OPMLBody:
    """Root-level outlines, in document order."""
    outlines: list[OPMLOutline] = field(default_factory=list)

    def walk(self) -> Iterator[OPMLOutline]:
        for outline in self.outlines:
            yield from outline.walk()


@dataclass
class OPMLDocument:
    """A complete OPML document.

    ``OPMLDocument()`` is a new, empty document whose head carries the
    current time as creation and modification date.
    """
    version: str = "2.0"
    head: OPMLHead = field(default_factory=OPMLHead.now)
    body: OPMLBody = field(default_factory=OPMLBody)

    @property
    def outlines(self) -> list[OPMLOutline]:
        return self.body.outlines

    @property
    def outline_count(self) -> int:
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[OPMLOutline]:
        """Iterate all outlines depth-first."""
        yield from self.body.walk()

    def find(self, text: str) -> Optional[OPMLOutline]:
        """Find first outline with matching text (case-insensitive)."""
        for outline in self.body.outlines:
            found = outline.find(text)
            if found is not None:
                return found
        return None

    def __repr__(self) -> str:
        return f"OPMLDocument({self.head.title!r}, {self.outline_count} outlines)"
