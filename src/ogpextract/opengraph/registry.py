"""
Static registry of the Open Graph properties that matter for distillation.

The registry is ordered: a declaration is matched against the records in turn
and handled by the first one whose ``prefix:name`` it starts with. Every image
sub-property such as ``og:image:width`` also starts with ``og:image``, so the
``image`` record handles it and the ``image:`` record after it is shadowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..models import Namespace


class ParserKind(Enum):
    """Structural parser responsible for a property family."""

    IMAGE = "image"
    PROFILE = "profile"
    ARTICLE = "article"


@dataclass(slots=True, frozen=True)
class PropertyRecord:
    name: str
    namespace: Namespace
    parser: Optional[ParserKind] = None


TITLE_PROP = "title"
TYPE_PROP = "type"
URL_PROP = "url"
DESCRIPTION_PROP = "description"
SITE_NAME_PROP = "site_name"
IMAGE_PROP = "image"
IMAGE_STRUCT_PROP_PFX = "image:"
PROFILE_FIRSTNAME_PROP = "first_name"
PROFILE_LASTNAME_PROP = "last_name"
ARTICLE_SECTION_PROP = "section"
ARTICLE_PUBLISHED_TIME_PROP = "published_time"
ARTICLE_MODIFIED_TIME_PROP = "modified_time"
ARTICLE_EXPIRATION_TIME_PROP = "expiration_time"
ARTICLE_AUTHOR_PROP = "author"

PROPERTY_REGISTRY: Tuple[PropertyRecord, ...] = (
    PropertyRecord(TITLE_PROP, Namespace.OG),
    PropertyRecord(TYPE_PROP, Namespace.OG),
    PropertyRecord(URL_PROP, Namespace.OG),
    PropertyRecord(DESCRIPTION_PROP, Namespace.OG),
    PropertyRecord(SITE_NAME_PROP, Namespace.OG),
    PropertyRecord(IMAGE_PROP, Namespace.OG, ParserKind.IMAGE),
    PropertyRecord(IMAGE_STRUCT_PROP_PFX, Namespace.OG, ParserKind.IMAGE),
    PropertyRecord(PROFILE_FIRSTNAME_PROP, Namespace.PROFILE, ParserKind.PROFILE),
    PropertyRecord(PROFILE_LASTNAME_PROP, Namespace.PROFILE, ParserKind.PROFILE),
    PropertyRecord(ARTICLE_SECTION_PROP, Namespace.ARTICLE, ParserKind.ARTICLE),
    PropertyRecord(ARTICLE_PUBLISHED_TIME_PROP, Namespace.ARTICLE, ParserKind.ARTICLE),
    PropertyRecord(ARTICLE_MODIFIED_TIME_PROP, Namespace.ARTICLE, ParserKind.ARTICLE),
    PropertyRecord(ARTICLE_EXPIRATION_TIME_PROP, Namespace.ARTICLE, ParserKind.ARTICLE),
    PropertyRecord(ARTICLE_AUTHOR_PROP, Namespace.ARTICLE, ParserKind.ARTICLE),
)
