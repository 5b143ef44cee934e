"""Read OPML text into OPMLDocument objects.

Parsing is a single pass over start/end events from the XML tokenizer.
Outline nesting is rebuilt with an explicit stack: an outline is pushed when
its start tag is seen and attached to its parent (or to the body) when its
end tag is seen, so children always end up in document order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union
from xml.parsers import expat

from .dates import DATE_FORMATTER
from .errors import InvalidDocument, InvalidEncoding, ParsingFailed
from .logger import get_logger
from .models import OPMLBody, OPMLDocument, OPMLHead, OPMLOutline

logger = get_logger(__name__)

HEAD_FIELDS = frozenset(
    {
        "title",
        "dateCreated",
        "dateModified",
        "ownerName",
        "ownerEmail",
        "ownerId",
        "docs",
        "expansionState",
        "vertScrollState",
        "windowTop",
        "windowLeft",
        "windowBottom",
        "windowRight",
    }
)


def parse(data: Union[bytes, str]) -> OPMLDocument:
    """Parse OPML text into a document.

    Args:
        data: UTF-8 encoded bytes, or already decoded text.

    Returns:
        The parsed document. Head fields missing from the source stay None.

    Raises:
        InvalidEncoding: If ``data`` is bytes that are not valid UTF-8.
        ParsingFailed: If the XML is malformed.
        InvalidDocument: If the input contains no ``<opml>`` element.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding() from e
    else:
        text = data

    if not text.strip():
        raise InvalidDocument()

    return _OPMLParser().run(text)


def read(path: Union[str, Path]) -> OPMLDocument:
    """Read an .opml file and return its document.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OPMLError: If the content is not a valid OPML document.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    document = parse(path.read_bytes())
    logger.debug("Read %d outlines from %s", document.outline_count, path)
    return document


class _OPMLParser:
    """Event handler state for one parse call."""

    def __init__(self) -> None:
        self.document: Optional[OPMLDocument] = None
        self.stack: list[OPMLOutline] = []
        self.head_values: dict[str, str] = {}
        self.in_head = False
        self.field: Optional[str] = None
        self.chunks: list[str] = []

    def run(self, text: str) -> OPMLDocument:
        # No namespace_separator: names like "x:y" are kept as written
        parser = expat.ParserCreate()
        parser.buffer_text = True
        parser.StartElementHandler = self._start
        parser.EndElementHandler = self._end
        parser.CharacterDataHandler = self._characters
        try:
            parser.Parse(text, True)
        except expat.ExpatError as e:
            raise ParsingFailed(str(e)) from e

        if self.document is None:
            raise InvalidDocument()
        if self.stack:
            raise ParsingFailed(f"{len(self.stack)} outline element(s) not closed")

        logger.debug(
            "Parsed OPML %s document with %d outlines",
            self.document.version,
            self.document.outline_count,
        )
        return self.document

    def _start(self, name: str, attrs: dict[str, str]) -> None:
        self.field = None
        if name == "opml":
            self.document = OPMLDocument(
                version=attrs.get("version", "2.0"),
                head=OPMLHead(),
                body=OPMLBody(),
            )
        elif name == "head":
            self.in_head = True
        elif name == "outline":
            self.stack.append(OPMLOutline(attributes=dict(attrs)))
        elif self.in_head and name in HEAD_FIELDS:
            self.field = name
            self.chunks = []

    def _characters(self, data: str) -> None:
        if self.field is not None:
            self.chunks.append(data)

    def _end(self, name: str) -> None:
        if name == "outline":
            self._close_outline()
        elif name == "head":
            self.in_head = False
            if self.document is not None:
                self.document.head = head_from_values(self.head_values)
        elif name == self.field:
            content = "".join(self.chunks).strip()
            if content:
                self.head_values[name] = content
        self.field = None
        self.chunks = []

    def _close_outline(self) -> None:
        outline = self.stack.pop()
        if self.stack:
            self.stack[-1].children.append(outline)
        elif self.document is not None:
            self.document.body.outlines.append(outline)


def head_from_values(values: dict[str, str]) -> OPMLHead:
    """Convert collected head element text into a typed head.

    Malformed numbers and dates leave the field None instead of failing.
    """
    return OPMLHead(
        title=values.get("title"),
        date_created=_date(values, "dateCreated"),
        date_modified=_date(values, "dateModified"),
        owner_name=values.get("ownerName"),
        owner_email=values.get("ownerEmail"),
        owner_id=values.get("ownerId"),
        docs=values.get("docs"),
        expansion_state=_int_list(values, "expansionState"),
        vert_scroll_state=_int(values, "vertScrollState"),
        window_top=_int(values, "windowTop"),
        window_left=_int(values, "windowLeft"),
        window_bottom=_int(values, "windowBottom"),
        window_right=_int(values, "windowRight"),
    )


def _date(values: dict[str, str], key: str):
    raw = values.get(key)
    if raw is None:
        return None
    value = DATE_FORMATTER.parse(raw)
    if value is None:
        logger.debug("Ignoring unparseable %s: %r", key, raw)
    return value


def _to_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _int(values: dict[str, str], key: str) -> Optional[int]:
    raw = values.get(key)
    if raw is None:
        return None
    value = _to_int(raw)
    if value is None:
        logger.debug("Ignoring malformed %s: %r", key, raw)
    return value


def _int_list(values: dict[str, str], key: str) -> Optional[list[int]]:
    """Comma-separated integers; tokens that don't parse are dropped."""
    raw = values.get(key)
    if raw is None:
        return None
    parsed = [_to_int(token) for token in raw.split(",")]
    numbers = [n for n in parsed if n is not None]
    if len(numbers) != len(parsed):
        logger.debug("Dropped %d malformed %s token(s)", len(parsed) - len(numbers), key)
    return numbers or None
