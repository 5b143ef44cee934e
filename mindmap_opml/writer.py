"""Write OPMLDocument objects as OPML 2.0 text.

Output is canonical: head fields in a fixed order, the ``text`` attribute
first and the remaining outline attributes sorted by name, two-space
indentation. Generating the same document twice gives identical text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union
from xml.sax.saxutils import escape

from .dates import DATE_FORMATTER
from .logger import get_logger
from .models import OPMLBody, OPMLDocument, OPMLHead, OPMLOutline

logger = get_logger(__name__)

INDENT = "  "
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Parsers normalize literal whitespace in attribute values to spaces
_ATTRIBUTE_ENTITIES = {**_QUOTE_ENTITIES, "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def escape_xml(value: str) -> str:
    """Escape ``& < > " '`` (``&`` first, so nothing is escaped twice)."""
    return escape(value, _QUOTE_ENTITIES)


def escape_attribute(value: str) -> str:
    """Like :func:`escape_xml`, plus newlines, carriage returns and tabs."""
    return escape(value, _ATTRIBUTE_ENTITIES)


def generate(document: OPMLDocument) -> str:
    """Render a document as OPML text.

    Head values that are empty or only whitespace (including an empty
    ``expansion_state``) are written like absent fields, since reading
    trims head text and treats blank content as missing. Leading and
    trailing whitespace around head text is likewise not preserved.

    Args:
        document: The document to render.

    Returns:
        The XML text, starting with the XML declaration and ending
        with ``</opml>``.
    """
    lines = [XML_DECLARATION, f'<opml version="{escape_attribute(document.version)}">']
    _head_lines(document.head, lines, level=1)
    _body_lines(document.body, lines, level=1)
    lines.append("</opml>")
    return "\n".join(lines)


def write(document: OPMLDocument, path: Union[str, Path]) -> Path:
    """Write a document to an ``.opml`` file as UTF-8.

    Returns:
        The path written to.
    """
    path = Path(path)
    text = generate(document)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d outlines to %s", document.outline_count, path)
    return path


def _head_lines(head: OPMLHead, lines: list[str], level: int) -> None:
    pad = INDENT * level
    lines.append(f"{pad}<head>")

    for tag, value in _head_fields(head):
        # Parsing trims head text, so blank values would read back as absent
        if value is not None and value.strip():
            lines.append(f"{pad}{INDENT}<{tag}>{escape_xml(value)}</{tag}>")

    lines.append(f"{pad}</head>")


def _head_fields(head: OPMLHead) -> list[tuple[str, Optional[str]]]:
    """Head elements in output order, rendered to text (None when absent)."""
    return [
        ("title", head.title),
        ("dateCreated", _date(head.date_created)),
        ("dateModified", _date(head.date_modified)),
        ("ownerName", head.owner_name),
        ("ownerEmail", head.owner_email),
        ("ownerId", head.owner_id),
        ("docs", head.docs),
        ("expansionState", _int_list(head.expansion_state)),
        ("vertScrollState", _int(head.vert_scroll_state)),
        ("windowTop", _int(head.window_top)),
        ("windowLeft", _int(head.window_left)),
        ("windowBottom", _int(head.window_bottom)),
        ("windowRight", _int(head.window_right)),
    ]


def _date(value) -> Optional[str]:
    return DATE_FORMATTER.format(value) if value is not None else None


def _int(value: Optional[int]) -> Optional[str]:
    return str(value) if value is not None else None


def _int_list(values: Optional[list[int]]) -> Optional[str]:
    if values is None:
        return None
    return ", ".join(str(v) for v in values)


def _body_lines(body: OPMLBody, lines: list[str], level: int) -> None:
    pad = INDENT * level
    lines.append(f"{pad}<body>")
    for outline in body.outlines:
        _outline_lines(outline, lines, level + 1)
    lines.append(f"{pad}</body>")


def _outline_lines(outline: OPMLOutline, lines: list[str], level: int) -> None:
    """Append an outline and, recursively, its children."""
    pad = INDENT * level
    attrs = "".join(
        f' {key}="{escape_attribute(value)}"' for key, value in sorted_attributes(outline.attributes)
    )

    if not outline.children:
        lines.append(f"{pad}<outline{attrs} />")
        return

    lines.append(f"{pad}<outline{attrs}>")
    for child in outline.children:
        _outline_lines(child, lines, level + 1)
    lines.append(f"{pad}</outline>")


def sorted_attributes(attributes: dict[str, str]) -> list[tuple[str, str]]:
    """``text`` first, then the remaining attributes by name."""
    return sorted(attributes.items(), key=lambda item: (item[0] != "text", item[0]))
