"""Errors raised while reading OPML documents."""

from __future__ import annotations


class OPMLError(ValueError):
    """Base class for document-level OPML failures."""


class InvalidEncoding(OPMLError):
    """Input bytes are not valid UTF-8 text."""

    def __init__(self, message: str = "Invalid text encoding"):
        super().__init__(message)


class ParsingFailed(OPMLError):
    """The XML tokenizer rejected the markup.

    ``detail`` carries the tokenizer's diagnostic message unchanged.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"OPML parsing failed: {detail}")


class InvalidDocument(OPMLError):
    """Well-formed input that never produced an ``<opml>`` element."""

    def __init__(self, message: str = "Invalid OPML document structure"):
        super().__init__(message)
