"""
Open Graph Protocol extraction.

Components:
- resolve_prefixes: namespace prefixes from ``prefix`` / ``xmlns:*`` attributes
- MetaTagScanner: matches meta declarations against the property registry
- ImageGrouper, ProfileGate, ArticleGate: structured property families
- OpenGraphParser: conformance check and result assembly
"""

from .parser import OpenGraphParser, parse
from .prefixes import resolve_prefixes
from .registry import PROPERTY_REGISTRY, ParserKind, PropertyRecord
from .scanner import MetaTagScanner, PropertyTable
from .structural import ArticleGate, ImageGrouper, ProfileGate, StructuralParser

__all__ = [
    "OpenGraphParser",
    "parse",
    "resolve_prefixes",
    "MetaTagScanner",
    "PropertyTable",
    "PROPERTY_REGISTRY",
    "PropertyRecord",
    "ParserKind",
    "StructuralParser",
    "ImageGrouper",
    "ProfileGate",
    "ArticleGate",
]
