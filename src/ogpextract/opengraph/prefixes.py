"""
Namespace prefix resolution for Open Graph properties.

Documents may rename the OGP namespaces, either through an RDFa ``prefix``
attribute on ``<html>`` or ``<head>``::

    prefix="og: http://ogp.me/ns# article: http://ogp.me/ns/article#"

or through XML namespace declarations on ``<html>``::

    xmlns:og="http://ogp.me/ns#"

Only one of the two sources is consulted. Namespaces left unbound fall back
to the commonly used ``og``, ``profile`` and ``article`` prefixes.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Tuple

from ..models import Namespace

PREFIX_ATTR_PATTERN = re.compile(r"(\w+):\s+(http://ogp\.me/ns(/\w+)*#)\s*", re.IGNORECASE)
XMLNS_NAME_PATTERN = re.compile(r"^xmlns:(\w+)", re.IGNORECASE)
XMLNS_VALUE_PATTERN = re.compile(r"^http://ogp\.me/ns(/\w+)*#", re.IGNORECASE)

_OBJECT_TYPE_NAMESPACES = {
    "profile": Namespace.PROFILE,
    "article": Namespace.ARTICLE,
}


def _namespace_for(object_type_segment: Optional[str]) -> Optional[Namespace]:
    """Map the trailing ``/segment`` of an OGP namespace URI to a namespace."""
    if not object_type_segment:
        return Namespace.OG
    return _OBJECT_TYPE_NAMESPACES.get(object_type_segment.lstrip("/").lower())


def _bind(prefixes: Dict[Namespace, str], token: str, object_type_segment: Optional[str]) -> None:
    namespace = _namespace_for(object_type_segment)
    if namespace is not None:
        prefixes[namespace] = token.lower()


def parse_prefix_attribute(value: str) -> Dict[Namespace, str]:
    """Collect every ``token: http://ogp.me/ns...#`` binding in a ``prefix`` value."""
    prefixes: Dict[Namespace, str] = {}
    for match in PREFIX_ATTR_PATTERN.finditer(value):
        _bind(prefixes, match.group(1), match.group(3))
    return prefixes


def parse_xmlns_attributes(attributes: Iterable[Tuple[str, str]]) -> Dict[Namespace, str]:
    """Collect OGP bindings declared as ``xmlns:token`` attributes."""
    prefixes: Dict[Namespace, str] = {}
    for name, value in attributes:
        name_match = XMLNS_NAME_PATTERN.match(name or "")
        if not name_match:
            continue
        value_match = XMLNS_VALUE_PATTERN.match(value or "")
        if value_match:
            _bind(prefixes, name_match.group(1), value_match.group(1))
    return prefixes


def resolve_prefixes(
    root_attributes: Iterable[Tuple[str, str]],
    head_prefix: str = "",
    read_root_prefix: bool = True,
) -> Dict[Namespace, str]:
    """
    Build a fully populated prefix map.

    Args:
        root_attributes: Ordered ``(name, value)`` attributes of the root element
        head_prefix: ``prefix`` attribute of the document's single head element,
            empty when absent or ambiguous
        read_root_prefix: Whether the root carries its own ``prefix`` attribute;
            only an ``<html>`` root does

    Returns:
        Mapping with exactly one prefix for every namespace
    """
    root_attributes = list(root_attributes)

    prefix_value = ""
    if read_root_prefix:
        for name, value in root_attributes:
            if (name or "").lower() == "prefix":
                prefix_value = value or ""
                break
    if not prefix_value:
        prefix_value = head_prefix or ""

    if prefix_value:
        prefixes = parse_prefix_attribute(prefix_value)
    else:
        prefixes = parse_xmlns_attributes(root_attributes)

    for namespace in Namespace:
        prefixes.setdefault(namespace, namespace.default_prefix)
    return prefixes
