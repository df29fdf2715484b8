"""Registry of identifiers resolved while splitting a document."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lxml import etree


class IdentifierRegistry:
    """Registry mapping source elements to their resolved identifiers.

    Units are resolved in document order, so by the time a unit is
    processed every ancestor unit already has an entry. Keys are the
    element proxies themselves; holding them keeps lxml from handing out
    a different proxy for the same node later on.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._identifiers: dict[etree._Element, str] = {}

    def register(self, elem: etree._Element, identifier: str) -> None:
        """Record the resolved identifier for an element.

        Args:
            elem: The source unit element
            identifier: Its fully qualified identifier
        """
        self._identifiers[elem] = identifier

    def get(self, elem: etree._Element) -> str | None:
        """Get the identifier resolved for an element.

        Args:
            elem: The source element

        Returns:
            The identifier, or None if the element has not been resolved
        """
        return self._identifiers.get(elem)
