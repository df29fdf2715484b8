"""Namespace-agnostic helpers for navigating EAD elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lxml import etree


def get_tag_name(elem: etree._Element) -> str:
    """Get tag name without namespace prefix.

    Args:
        elem: XML element

    Returns:
        Tag name without namespace (e.g., "did" not "{urn:isbn:1-931666-22-9}did").
        Comments and processing instructions return an empty string.
    """
    tag = elem.tag
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}")[-1]
    return tag if isinstance(tag, str) else ""


def iter_children(elem: etree._Element, name: str) -> Iterator[etree._Element]:
    """Iterate over direct children with the given local name."""
    for child in elem:
        if get_tag_name(child) == name:
            yield child


def find_child(elem: etree._Element | None, name: str) -> etree._Element | None:
    """Return the first direct child with the given local name, or None."""
    if elem is None:
        return None
    return next(iter_children(elem, name), None)


def find_path(elem: etree._Element | None, *names: str) -> etree._Element | None:
    """Follow a chain of local child names, e.g. ("eadheader", "eadid")."""
    for name in names:
        elem = find_child(elem, name)
        if elem is None:
            return None
    return elem


def text_of(elem: etree._Element | None) -> str:
    """Return the stripped text content of an element, or "" if missing."""
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()
