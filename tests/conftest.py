"""
Shared test configuration for ogpextract.

Provides HTML documents and declaration sequences used across the unit and
integration suites.
"""

# Standard library imports
import logging
from typing import Callable, List, Tuple

# Third-party imports
import pytest
import structlog

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture(autouse=True)
def reset_logging():
    """Keep logging configuration from leaking between tests."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# ============================================================================
# Declaration Fixtures
# ============================================================================

Declarations = List[Tuple[str, str]]


@pytest.fixture
def required_declarations() -> Declarations:
    """The og:title/og:type/og:url triple every conforming document needs."""
    return [
        ("og:title", "The Rock"),
        ("og:type", "video.movie"),
        ("og:url", "http://www.imdb.com/title/tt0117500/"),
    ]


@pytest.fixture
def with_required(required_declarations) -> Callable[..., Declarations]:
    """Build a declaration list with the required properties in front."""

    def build(*declarations: Tuple[str, str], og_type: str = "video.movie") -> Declarations:
        required = [(prop, og_type if prop == "og:type" else content) for prop, content in required_declarations]
        return required + list(declarations)

    return build


# ============================================================================
# HTML Fixtures
# ============================================================================


@pytest.fixture
def article_html() -> str:
    """A complete article page using the default prefixes."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>Machine Learning Algorithms: A Comprehensive Guide</title>
        <meta name="description" content="A comprehensive guide to machine learning algorithms">
        <meta property="og:title" content="Machine Learning Algorithms Guide">
        <meta property="og:type" content="article">
        <meta property="og:url" content="https://example.com/ml-guide">
        <meta property="og:description" content="Complete guide to ML algorithms">
        <meta property="og:site_name" content="AI Research Blog">
        <meta property="og:image" content="https://example.com/ml-guide.jpg">
        <meta property="og:image:secure_url" content="https://secure.example.com/ml-guide.jpg">
        <meta property="og:image:type" content="image/jpeg">
        <meta property="og:image:width" content="1200">
        <meta property="og:image:height" content="630">
        <meta property="og:image" content="https://example.com/ml-thumb.png">
        <meta property="og:image:width" content="not-a-number">
        <meta property="article:published_time" content="2023-12-01T10:00:00Z">
        <meta property="article:modified_time" content="2023-12-02T08:30:00Z">
        <meta property="article:section" content="Technology">
        <meta property="article:author" content="https://example.com/authors/jane">
        <meta property="article:author" content="https://example.com/authors/john">
    </head>
    <body>
        <article><h1>Machine Learning Algorithms</h1><p>Body text.</p></article>
    </body>
    </html>
    """


@pytest.fixture
def profile_html() -> str:
    """A profile page declaring custom prefixes on the head element."""
    return """
    <html>
    <head prefix="my: http://ogp.me/ns# person: http://ogp.me/ns/profile#">
        <meta property="my:title" content="Jane Doe">
        <meta property="my:type" content="profile">
        <meta property="my:url" content="https://example.com/jane">
        <meta property="my:image" content="https://example.com/jane.jpg">
        <meta property="person:first_name" content="Jane">
        <meta property="person:last_name" content="Doe">
        <meta property="profile:first_name" content="Ignored">
    </head>
    <body></body>
    </html>
    """


@pytest.fixture
def plain_html() -> str:
    """A page without any Open Graph markup."""
    return """
    <html>
    <head>
        <title>Plain page</title>
        <meta name="description" content="Nothing to see here">
    </head>
    <body><p>Hello</p></body>
    </html>
    """
