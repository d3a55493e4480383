"""
ogpextract - Open Graph Protocol metadata extractor.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .models import Article, Image, Namespace, ParseResult
from .opengraph import OpenGraphParser, parse

__all__ = ["__version__", "Article", "Image", "Namespace", "ParseResult", "OpenGraphParser", "parse"]
