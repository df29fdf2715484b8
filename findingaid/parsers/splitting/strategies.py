"""Copy strategy implementations."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree

from findingaid.config import CONTAINER_TAG_PATTERN
from findingaid.parsers.elements import find_child, get_tag_name


def is_container(tag_name: str) -> bool:
    """Check if a tag is a container wrapper (c, c01, c02 ...)."""
    return CONTAINER_TAG_PATTERN.match(tag_name) is not None


@dataclass
class FilteredCopyStrategy:
    """Copy a unit's own content, leaving out nested container wrappers.

    Nested c/cNN elements are units in their own right and are emitted
    as separate records. Text and tails are copied as-is; lxml escapes
    characters such as "&" when the record is serialized. Comments and
    processing instructions are dropped.
    """

    def copy(self, unit: etree._Element) -> etree._Element:
        """Create a standalone copy of a unit element.

        Args:
            unit: The source unit

        Returns:
            New element with the unit's tag, attributes, text and
            filtered children
        """
        record = etree.Element(get_tag_name(unit), attrib=dict(unit.attrib))
        record.text = unit.text
        for child in unit:
            self.append(record, child)
        return record

    def append(
        self,
        target: etree._Element,
        source: etree._Element,
    ) -> None:
        """Append a filtered copy of source under target."""
        name = get_tag_name(source)
        if not name or is_container(name):
            return

        copied = etree.SubElement(target, name, attrib=dict(source.attrib))
        copied.text = source.text
        copied.tail = source.tail
        for child in source:
            self.append(copied, child)


@dataclass
class MergeByNameStrategy:
    """Merge inherited context into a record by element name.

    When the target already has a child with the same name, that child
    is reused and only gains attributes it does not have yet. Otherwise a
    new child is created with the source's attributes and stripped text.
    """

    ignore: frozenset[str] = field(default_factory=frozenset)
    """Element names skipped at the top level and among its direct children."""

    def append(
        self,
        target: etree._Element,
        source: etree._Element,
    ) -> None:
        """Merge source and its subtree into target."""
        self._merge(target, source, self.ignore)

    def _merge(
        self,
        target: etree._Element,
        source: etree._Element,
        ignore: frozenset[str],
    ) -> None:
        name = get_tag_name(source)
        if not name or name in ignore:
            return

        merged = find_child(target, name)
        if merged is None:
            merged = etree.SubElement(target, name)
            text = (source.text or "").strip()
            if text:
                merged.text = text

        # First writer wins
        for key, value in source.attrib.items():
            if key not in merged.attrib:
                merged.set(key, value)

        for child in source:
            if get_tag_name(child) in ignore:
                continue
            self._merge(merged, child, frozenset())
