"""
Single pass over a document's meta declarations.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

import structlog

from ..models import Namespace
from .registry import PROPERTY_REGISTRY, ParserKind, PropertyRecord
from .structural import ArticleGate, ImageGrouper, ProfileGate, StructuralParser

logger = structlog.get_logger(__name__)

Declaration = Tuple[str, str]


class PropertyTable:
    """Flat property store; the last value written for a name wins."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def put(self, name: str, content: str) -> None:
        self._values[name] = content

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def view(self) -> Mapping[str, str]:
        """Read-only live view handed to structural parsers."""
        return MappingProxyType(self._values)


class MetaTagScanner:
    """
    Matches declarations against the property registry.

    Each declaration is handled by at most one record: the first whose
    ``prefix:name`` the lower-cased property starts with.
    """

    def __init__(
        self,
        prefixes: Mapping[Namespace, str],
        registry: Sequence[PropertyRecord] = PROPERTY_REGISTRY,
    ) -> None:
        self.prefixes = dict(prefixes)
        self.registry = tuple(registry)
        self.table = PropertyTable()
        self.images = ImageGrouper()
        self.profile = ProfileGate()
        self.article = ArticleGate()
        self._parsers: Dict[ParserKind, StructuralParser] = {
            ParserKind.IMAGE: self.images,
            ParserKind.PROFILE: self.profile,
            ParserKind.ARTICLE: self.article,
        }

    def match(self, prop: str) -> Optional[Tuple[PropertyRecord, str]]:
        """Return the first matching record and the property without its prefix."""
        for record in self.registry:
            prefix_with_colon = self.prefixes[record.namespace] + ":"
            if prop.startswith(prefix_with_colon + record.name):
                return record, prop[len(prefix_with_colon) :]
        return None

    def feed(self, prop: str, content: Optional[str]) -> None:
        """Process one declaration."""
        prop = (prop or "").lower()
        content = content or ""

        matched = self.match(prop)
        if matched is None:
            return
        record, suffix = matched

        store = True
        if record.parser is not None:
            store = self._parsers[record.parser].consume(suffix, content, self.table.view())
        if store:
            self.table.put(record.name, content)

    def scan(self, declarations: Iterable[Declaration]) -> None:
        """Process every declaration in order, then finalize the image list."""
        count = 0
        for prop, content in declarations:
            self.feed(prop, content)
            count += 1
        self.images.finalize()
        logger.debug("Scanned meta declarations", declarations=count, properties=len(self.table))
