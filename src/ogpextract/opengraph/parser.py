"""
Open Graph Protocol parser.

Recognizes the OGP ``<meta>`` declarations that matter to distilled content
and returns them semantically, taking arrays, structures and object types
into account:

- 4 required properties: title, type, image, url
- 2 optional properties: description, site_name
- image structured properties: image:url, image:secure_url, image:type,
  image:width, image:height
- profile object properties: first_name, last_name
- article object properties: section, published_time, modified_time,
  expiration_time, author (each author is a URL to the author's profile)

A document only yields a result if all required properties are present.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

import structlog

from ..document import DEFAULT_HTML_PARSER, find_root, head_prefix, iter_declarations, load_document, root_attributes
from ..models import Article, Namespace, ParseResult
from .prefixes import resolve_prefixes
from .registry import (
    ARTICLE_EXPIRATION_TIME_PROP,
    ARTICLE_MODIFIED_TIME_PROP,
    ARTICLE_PUBLISHED_TIME_PROP,
    ARTICLE_SECTION_PROP,
    DESCRIPTION_PROP,
    IMAGE_PROP,
    SITE_NAME_PROP,
    TITLE_PROP,
    TYPE_PROP,
    URL_PROP,
)
from .scanner import Declaration, MetaTagScanner

logger = structlog.get_logger(__name__)

REQUIRED_PROPERTIES = (TITLE_PROP, TYPE_PROP, URL_PROP)


class OpenGraphParser:
    """Assembles the result of one scan and enforces protocol conformance."""

    def __init__(self, scanner: MetaTagScanner) -> None:
        self.scanner = scanner

    @property
    def og_prefix(self) -> str:
        return self.scanner.prefixes[Namespace.OG]

    def missing_property(self) -> Optional[str]:
        """Name of the first required property that is absent, if any."""
        table = self.scanner.table
        for name in REQUIRED_PROPERTIES:
            if table.get(name) is None:
                return name
        if self.scanner.images.get_images() is None:
            return IMAGE_PROP
        return None

    def get_profile(self) -> Optional[str]:
        return self.scanner.profile.get_full_name(self.scanner.table.view())

    def get_article(self) -> Optional[Article]:
        """Article properties, or None if none of them were declared."""
        table = self.scanner.table
        article = Article(
            published_time=table.get(ARTICLE_PUBLISHED_TIME_PROP),
            modified_time=table.get(ARTICLE_MODIFIED_TIME_PROP),
            expiration_time=table.get(ARTICLE_EXPIRATION_TIME_PROP),
            section=table.get(ARTICLE_SECTION_PROP),
            authors=self.scanner.article.get_authors(),
        )
        if (
            article.section is None
            and article.published_time is None
            and article.modified_time is None
            and article.expiration_time is None
            and article.authors is None
        ):
            return None
        return article

    def assemble(self) -> Optional[ParseResult]:
        missing = self.missing_property()
        if missing is not None:
            logger.debug("Required property is missing", property=f"{self.og_prefix}:{missing}")
            return None

        table = self.scanner.table
        return ParseResult(
            title=table.get(TITLE_PROP),  # type: ignore[arg-type]
            type=table.get(TYPE_PROP),  # type: ignore[arg-type]
            url=table.get(URL_PROP),  # type: ignore[arg-type]
            images=tuple(self.scanner.images.get_images() or ()),
            description=table.get(DESCRIPTION_PROP),
            site_name=table.get(SITE_NAME_PROP),
            profile=self.get_profile(),
            article=self.get_article(),
        )

    @classmethod
    def parse_declarations(
        cls,
        attributes: Iterable[Tuple[str, str]],
        prefix: str,
        declarations: Iterable[Declaration],
        root_is_html: bool = True,
    ) -> Optional[ParseResult]:
        """
        Parse already-traversed markup.

        Args:
            attributes: Ordered ``(name, value)`` attributes of the root element
            prefix: ``prefix`` attribute of the unique head element, or ""
            declarations: Ordered ``(property, content)`` meta declarations
            root_is_html: False when the root is not an ``<html>`` element, in which
                case its own ``prefix`` attribute is not consulted

        Returns:
            ParseResult if the properties conform to the protocol, else None
        """
        try:
            scanner = MetaTagScanner(resolve_prefixes(attributes, prefix, read_root_prefix=root_is_html))
            scanner.scan(declarations)
            return cls(scanner).assemble()
        except Exception as e:
            logger.warning("Open Graph parsing failed", error=str(e), exc_info=True)
            return None

    @classmethod
    def parse(cls, root: Any, html_parser: str = DEFAULT_HTML_PARSER) -> Optional[ParseResult]:
        """
        Parse the Open Graph properties of a document.

        Args:
            root: HTML text, a BeautifulSoup document or a bs4 Tag
            html_parser: BeautifulSoup tree builder used for HTML text

        Returns:
            ParseResult if the properties conform to the protocol, else None
        """
        try:
            if isinstance(root, str):
                root = load_document(root, html_parser)
            element = find_root(root)
            attributes = root_attributes(element)
            prefix = head_prefix(element)
            root_is_html = element is not None and element.name == "html"
        except Exception as e:
            logger.warning("Could not load document", error=str(e), exc_info=True)
            return None
        return cls.parse_declarations(attributes, prefix, iter_declarations(element), root_is_html)


def parse(root: Any, html_parser: str = DEFAULT_HTML_PARSER) -> Optional[ParseResult]:
    """Module-level shortcut for :meth:`OpenGraphParser.parse`."""
    return OpenGraphParser.parse(root, html_parser)
