"""
Data models for Open Graph extraction results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Namespace(Enum):
    """OGP namespaces whose properties are recognised."""

    OG = "og"
    PROFILE = "profile"
    ARTICLE = "article"

    @property
    def default_prefix(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Image:
    """One ``og:image`` structure with its structured sub-properties."""

    image: str | None = None
    url: str | None = None
    secure_url: str | None = None
    type: str | None = None
    width: int = 0
    height: int = 0


@dataclass(slots=True, frozen=True)
class Article:
    """Properties of the ``article`` object type."""

    published_time: str | None = None
    modified_time: str | None = None
    expiration_time: str | None = None
    section: str | None = None
    authors: tuple[str, ...] | None = None


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Open Graph properties of a document that conforms to the protocol."""

    title: str
    type: str
    url: str
    images: tuple[Image, ...]
    description: str | None = None
    site_name: str | None = None
    profile: str | None = None
    article: Article | None = None

    def __post_init__(self) -> None:
        """Validate the result."""
        if not self.images:
            raise ValueError("A conforming document has at least one image")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        data = asdict(self)
        data["images"] = [asdict(image) for image in self.images]
        if self.article is not None and self.article.authors is not None:
            data["article"]["authors"] = list(self.article.authors)
        return data
