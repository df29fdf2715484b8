"""Split engine that turns an EAD finding aid into per-unit records."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from findingaid.config import (
    INHERITED_NOTE_TAGS,
    UNIT_LEVEL_ATTRIBUTE,
    SplitterOptions,
    format_sequence,
)
from findingaid.logging_config import logger
from findingaid.models import Archive, Cursor
from findingaid.parsers.ead_loader import (
    find_archdesc,
    load_document,
    load_file,
    parse_archive,
    select_units,
)
from findingaid.parsers.elements import get_tag_name, iter_children
from findingaid.parsers.splitting.protocols import CopyStrategy
from findingaid.parsers.splitting.registry import IdentifierRegistry
from findingaid.parsers.splitting.resolver import IdentifierResolver
from findingaid.parsers.splitting.strategies import (
    FilteredCopyStrategy,
    MergeByNameStrategy,
)

# Element holding the data added to each record
ADD_DATA_TAG = "add-data"


class EadSplitter:
    """Splits one EAD document into standalone unit records.

    Each call to next() emits the next unit in document order: the
    archdesc first, then every descendant carrying a level attribute.
    A record contains the unit's own content without nested components,
    an add-data block with its identifier, archive summary and parent
    link, and the descriptive data inherited from its ancestors.

    An instance holds per-document state and is meant for sequential use
    by a single caller.
    """

    def __init__(
        self,
        data: str | bytes | etree._Element,
        options: SplitterOptions | None = None,
    ) -> None:
        """Load the document and enumerate its units.

        Args:
            data: EAD XML as text or bytes, or an already parsed root element
            options: Splitter options (defaults apply when omitted)

        Raises:
            EadParseError: If the document is malformed or has no archdesc
        """
        root = data if isinstance(data, etree._Element) else load_document(data)

        self._options = options or SplitterOptions()
        self._archdesc = find_archdesc(root)
        self._archive = parse_archive(root)
        self._units = select_units(self._archdesc)
        self._cursor = Cursor(total=len(self._units))

        self._resolver = IdentifierResolver(
            self._archive, IdentifierRegistry(), self._options
        )
        self._own_content = FilteredCopyStrategy()
        self._context: CopyStrategy = MergeByNameStrategy(
            ignore=self._options.non_inherited_fields
        )
        self._notes = [
            note
            for tag in INHERITED_NOTE_TAGS
            for note in iter_children(self._archdesc, tag)
        ]

        logger.debug(
            f"Loaded archive '{self._archive.id}' ({self._archive.title}): "
            f"{self._cursor.total} units"
        )

    @classmethod
    def from_file(
        cls,
        path: Path,
        options: SplitterOptions | None = None,
    ) -> EadSplitter:
        """Create a splitter for an EAD file on disk."""
        return cls(load_file(path), options)

    @property
    def archive(self) -> Archive:
        return self._archive

    @property
    def total(self) -> int:
        return self._cursor.total

    @property
    def position(self) -> int:
        return self._cursor.position

    def has_more(self) -> bool:
        """Return True while records remain."""
        return not self._cursor.exhausted

    def next(self) -> str | None:
        """Build and serialize the next record.

        Returns:
            The record as XML text, or None when all units have been emitted
        """
        if self._cursor.exhausted:
            return None

        unit = self._units[self._cursor.position]
        position = self._cursor.advance()
        record = self.build_record(unit, position)
        return etree.tostring(record, encoding="unicode")

    def __iter__(self) -> Iterator[str]:
        while self.has_more():
            record = self.next()
            if record is not None:
                yield record

    def build_record(self, unit: etree._Element, position: int) -> etree._Element:
        """Build the output record for one unit.

        Args:
            unit: The source unit
            position: Its 1-based position in document order

        Returns:
            The record element
        """
        is_root = unit is self._archdesc
        depth = self._depth(unit)

        record = self._own_content.copy(unit)
        add_data = etree.SubElement(record, ADD_DATA_TAG)

        identifier = self._resolver.resolve_identifier(unit, position, is_root=is_root)
        if identifier is not None:
            add_data.set("identifier", identifier)

        sequence = format_sequence(position)
        archive = etree.SubElement(add_data, "archive")
        archive.set("id", self._archive.id)
        archive.set("title", self._archive.title)
        archive.set("sequence", sequence)
        if self._archive.subtitle:
            archive.set("subtitle", self._archive.subtitle)

        for did in self._resolver.ancestor_blocks(unit):
            self._context.append(record, did)
        for note in self._notes:
            self._context.append(record, note)

        parent = self._resolver.resolve_parent(unit)
        if parent is not None:
            link = etree.SubElement(add_data, "parent")
            link.set("id", parent.id)
            link.set("title", parent.title)

        logger.debug(
            f"{sequence} <{get_tag_name(unit)} {UNIT_LEVEL_ATTRIBUTE}="
            f"{unit.get(UNIT_LEVEL_ATTRIBUTE, '')}> "
            f"id={identifier or self._archive.id}"
            + (f" parent={parent.id}" if parent is not None else ""),
            depth=depth,
        )
        return record

    def _depth(self, unit: etree._Element) -> int:
        """Number of enclosing units between unit and archdesc (archdesc = 0)."""
        if unit is self._archdesc:
            return 0
        depth = 1
        for ancestor in unit.iterancestors():
            if ancestor is self._archdesc:
                break
            if ancestor.get(UNIT_LEVEL_ATTRIBUTE) is not None:
                depth += 1
        return depth
