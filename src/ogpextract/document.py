"""
BeautifulSoup adapter supplying attributes and meta declarations to the parser.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

DEFAULT_HTML_PARSER = "html.parser"


def load_document(html: str, parser: str = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    """Parse HTML text into a BeautifulSoup tree."""
    return BeautifulSoup(html, parser)


def find_root(node: Any) -> Optional[Tag]:
    """Return the ``<html>`` element of a document, or the tag itself.

    Fragments without an ``<html>`` element are rooted at the document.
    """
    if isinstance(node, BeautifulSoup):
        html = node.find("html")
        return html if isinstance(html, Tag) else node
    if isinstance(node, Tag):
        return node
    return None


def _attribute_text(value: Any) -> str:
    # Multi-valued attributes such as class come back as lists.
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return "" if value is None else str(value)


def root_attributes(root: Optional[Tag]) -> List[Tuple[str, str]]:
    """Ordered ``(name, value)`` pairs of the root element's attributes."""
    if root is None:
        return []
    return [(name, _attribute_text(value)) for name, value in root.attrs.items()]


def head_prefix(root: Optional[Tag]) -> str:
    """``prefix`` of the document's head, if there is exactly one head."""
    if root is None:
        return ""
    heads = root.find_all("head")
    if len(heads) != 1:
        return ""
    return _attribute_text(heads[0].get("prefix"))


def iter_declarations(root: Optional[Tag]) -> Iterator[Tuple[str, str]]:
    """Yield ``(property, content)`` for every ``<meta>`` in document order."""
    if root is None:
        return
    for meta in root.find_all("meta"):
        yield _attribute_text(meta.get("property")).lower(), _attribute_text(meta.get("content"))
