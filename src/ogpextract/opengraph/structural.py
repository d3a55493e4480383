"""
Stateful consumers for structured Open Graph properties.

Some properties cannot be stored as flat name/value pairs: ``og:image`` is an
array of structures, and the ``profile`` and ``article`` families only apply
when ``og:type`` names the matching object type. Each family gets one
consumer that decides, per matched declaration, whether the value should also
land in the flat property table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Protocol, runtime_checkable

from ..models import Image
from .registry import (
    ARTICLE_AUTHOR_PROP,
    IMAGE_PROP,
    PROFILE_FIRSTNAME_PROP,
    PROFILE_LASTNAME_PROP,
    TYPE_PROP,
)

PROFILE_OBJTYPE = "profile"
ARTICLE_OBJTYPE = "article"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


@runtime_checkable
class StructuralParser(Protocol):
    """Consumer of one structured property family."""

    def consume(self, prop: str, content: str, properties: Mapping[str, str]) -> bool:
        """Handle a matched declaration.

        Args:
            prop: Property name with the namespace prefix removed, e.g. ``image:width``
            content: Raw ``content`` value of the declaration
            properties: Read-only view of the flat property table

        Returns:
            True if the value should also be stored in the property table
        """
        ...


def _parse_int(value: Optional[str]) -> int:
    """Parse a base-10 32-bit integer, returning 0 for anything malformed or out of range."""
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        return 0
    number = int(value, 10)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return 0
    return number


@dataclass
class ImageEntry:
    """Slots of one image structure while it is being assembled."""

    image: Optional[str] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None
    type: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None


class ImageGrouper:
    """Groups ``og:image`` and its sub-properties into image structures."""

    SUB_PROPERTIES = {
        "image:url": "url",
        "image:secure_url": "secure_url",
        "image:type": "type",
        "image:width": "width",
        "image:height": "height",
    }

    def __init__(self) -> None:
        self._entries: List[ImageEntry] = []
        self._current: Optional[ImageEntry] = None

    def consume(self, prop: str, content: str, properties: Mapping[str, str]) -> bool:
        if prop == IMAGE_PROP:
            # A root property always starts a new structure.
            self._current = ImageEntry(image=content)
            self._entries.append(self._current)
            return False

        if self._current is None:
            self._current = ImageEntry()
            self._entries.append(self._current)

        slot = self.SUB_PROPERTIES.get(prop)
        if slot is not None:
            setattr(self._current, slot, content)
        return False

    def finalize(self) -> None:
        """Drop every structure that never received its root ``og:image``."""
        self._entries = [entry for entry in self._entries if entry.image]

    def get_images(self) -> Optional[List[Image]]:
        if not self._entries:
            return None
        return [
            Image(
                image=entry.image,
                url=entry.url,
                secure_url=entry.secure_url,
                type=entry.type,
                width=_parse_int(entry.width),
                height=_parse_int(entry.height),
            )
            for entry in self._entries
        ]


class ProfileGate:
    """
    Honors ``profile:*`` properties only for documents of type ``profile``.

    The type is checked once, at the first profile property; an ``og:type``
    declared after that point does not change the decision.
    """

    def __init__(self) -> None:
        self.checked_type = False
        self.is_profile = False

    def consume(self, prop: str, content: str, properties: Mapping[str, str]) -> bool:
        if not self.checked_type:
            object_type = properties.get(TYPE_PROP)
            self.is_profile = object_type is not None and object_type.lower() == PROFILE_OBJTYPE
            self.checked_type = True
        return self.is_profile

    def get_full_name(self, properties: Mapping[str, str]) -> Optional[str]:
        """Join first and last name with a single space; empty if neither is set."""
        if not self.is_profile:
            return None

        full_name = properties.get(PROFILE_FIRSTNAME_PROP) or ""
        last_name = properties.get(PROFILE_LASTNAME_PROP) or ""
        if full_name and last_name:
            full_name += " "
        return full_name + last_name


@dataclass
class ArticleGate:
    """
    Honors ``article:*`` properties only for documents of type ``article``.

    Unlike :class:`ProfileGate`, the type is re-checked on every article
    property until it matches.
    """

    is_article: bool = False
    authors: List[str] = field(default_factory=list)

    def consume(self, prop: str, content: str, properties: Mapping[str, str]) -> bool:
        if not self.is_article:
            object_type = properties.get(TYPE_PROP)
            self.is_article = object_type is not None and object_type.lower() == ARTICLE_OBJTYPE
        if not self.is_article:
            return False

        # "author" is an array of profile URLs.
        if prop == ARTICLE_AUTHOR_PROP:
            self.authors.append(content)
            return False
        return True

    def get_authors(self) -> Optional[tuple[str, ...]]:
        return tuple(self.authors) if self.authors else None
