"""mindmap-opml: Read and write OPML 2.0 mind map documents.

A pure Python library for the OPML outline format, including the private
``_``-prefixed attributes mind map editors use to keep node layout.
No external dependencies required.

Usage:
    import mindmap_opml

    # Parse a document
    doc = mindmap_opml.read("ideas.opml")
    print(doc)  # OPMLDocument('Ideas', 12 outlines)

    # Navigate the tree
    for outline in doc.outlines:
        print(outline.text, len(outline.children))

    # Private attributes pass through untouched
    node = doc.find("Roadmap")
    print(node.attributes.get("_position_x"))

    # Serialize back to text, or to a file
    text = mindmap_opml.generate(doc)
    mindmap_opml.write(doc, "ideas.opml")
"""

__version__ = "0.1.0"

from .dates import DATE_FORMATTER, OPMLDateFormatter
from .errors import InvalidDocument, InvalidEncoding, OPMLError, ParsingFailed
from .models import OPMLBody, OPMLDocument, OPMLHead, OPMLOutline
from .nodes import MindMapNode, document_from_nodes, nodes_from_document
from .reader import parse, read
from .writer import generate, write

__all__ = [
    "parse",
    "read",
    "generate",
    "write",
    "OPMLDocument",
    "OPMLHead",
    "OPMLBody",
    "OPMLOutline",
    "OPMLDateFormatter",
    "DATE_FORMATTER",
    "OPMLError",
    "InvalidEncoding",
    "ParsingFailed",
    "InvalidDocument",
    "MindMapNode",
    "document_from_nodes",
    "nodes_from_document",
]
