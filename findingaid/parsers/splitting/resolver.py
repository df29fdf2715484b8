"""Identifier and parent linkage resolution for units."""

from __future__ import annotations

from typing import TYPE_CHECKING

from findingaid.config import (
    PARENT_TITLE_PREFIX_LEVELS,
    UNIT_LEVEL_ATTRIBUTE,
    SplitterOptions,
    format_sequence,
)
from findingaid.models import Archive, ParentLink
from findingaid.parsers.elements import find_child, text_of
from findingaid.parsers.splitting.registry import IdentifierRegistry

if TYPE_CHECKING:
    from lxml import etree


def explicit_identifier(did: etree._Element | None) -> str:
    """Return the identifier attribute of a did's unitid, or ""."""
    unitid = find_child(did, "unitid")
    if unitid is None:
        return ""
    return unitid.get("identifier", "")


class IdentifierResolver:
    """Resolves identifiers, ancestor blocks and parent links for units.

    Must be fed units in document order: parent links are looked up in
    the registry, which only knows units that were resolved earlier.
    """

    def __init__(
        self,
        archive: Archive,
        registry: IdentifierRegistry,
        options: SplitterOptions,
    ) -> None:
        """Initialize the resolver.

        Args:
            archive: Identity of the archive being split
            registry: Registry shared with later resolutions
            options: Splitter options
        """
        self._archive = archive
        self._registry = registry
        self._options = options
        self._dids: dict[etree._Element, etree._Element | None] = {}

    def resolve_identifier(
        self,
        unit: etree._Element,
        position: int,
        is_root: bool = False,
    ) -> str | None:
        """Resolve and register the identifier of a unit.

        The root unit is identified by the archive itself, so it gets no
        identifier of its own; its children see the archive id as their
        parent id. Other units use their unitid identifier attribute when
        present and a sequence-based identifier otherwise.

        Args:
            unit: The source unit
            position: 1-based position of the unit in document order
            is_root: True for the archdesc element

        Returns:
            The unit's identifier, or None for the root unit
        """
        if is_root:
            # Children link to the archive, or archiveId_X when the root
            # carries its own identifier
            self._registry.register(unit, self._fallback_parent_id(self.did_of(unit)))
            return None

        unit_id = explicit_identifier(self.did_of(unit))
        if not unit_id:
            unit_id = format_sequence(position)

        identifier = self._archive.qualify(unit_id)
        self._registry.register(unit, identifier)
        return identifier

    def did_of(self, elem: etree._Element) -> etree._Element | None:
        """Return the did child of an element, looked up once per element."""
        if elem not in self._dids:
            self._dids[elem] = find_child(elem, "did")
        return self._dids[elem]

    def ancestor_blocks(self, unit: etree._Element) -> list[etree._Element]:
        """Collect the did elements of all ancestors, outermost first."""
        blocks = []
        for ancestor in unit.iterancestors():
            did = self.did_of(ancestor)
            if did is not None:
                blocks.append(did)
        blocks.reverse()
        return blocks

    def resolve_parent(self, unit: etree._Element) -> ParentLink | None:
        """Resolve the parent reference of a unit.

        The parent is the nearest element with a did: the direct parent,
        or the grandparent when an undescribed wrapper (such as dsc) sits
        in between.

        Args:
            unit: The source unit

        Returns:
            ParentLink, or None if neither parent nor grandparent has a did
        """
        owner = self._find_described_parent(unit)
        if owner is None:
            return None
        did = self.did_of(owner)

        parent_id = self._registry.get(owner)
        if parent_id is None:
            parent_id = self._fallback_parent_id(did)

        title = text_of(find_child(did, "unittitle"))
        if self._options.prepend_parent_title_with_unit_id:
            parent_unit_id = text_of(find_child(did, "unitid"))
            level = unit.get(UNIT_LEVEL_ATTRIBUTE, "")
            if parent_unit_id and level in PARENT_TITLE_PREFIX_LEVELS:
                title = f"{parent_unit_id} {title}"

        return ParentLink(id=parent_id, title=title)

    def _find_described_parent(
        self,
        unit: etree._Element,
    ) -> etree._Element | None:
        parent = unit.getparent()
        if parent is None:
            return None
        if self.did_of(parent) is not None:
            return parent
        grandparent = parent.getparent()
        if grandparent is not None and self.did_of(grandparent) is not None:
            return grandparent
        return None

    def _fallback_parent_id(self, did: etree._Element | None) -> str:
        """Build a parent id from a did that has no registry entry to go by."""
        parent_id = explicit_identifier(did) or text_of(find_child(did, "unitid"))
        if not parent_id or parent_id == self._archive.id:
            return self._archive.id
        return self._archive.qualify(parent_id)
