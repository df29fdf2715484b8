"""Protocols for the splitting system."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lxml import etree


@runtime_checkable
class CopyStrategy(Protocol):
    """Protocol for recursively copying source elements into a record.

    Implementations decide which elements are copied and whether an
    element reuses an existing same-named child of the target.
    """

    def append(
        self,
        target: etree._Element,
        source: etree._Element,
    ) -> None:
        """Copy source and its subtree under target.

        Args:
            target: The record element being built
            source: The element to copy from the source document
        """
        ...


@runtime_checkable
class RecordSplitter(Protocol):
    """Protocol for pull-based splitters producing one record per call."""

    @property
    def total(self) -> int:
        """Number of records the splitter will produce."""
        ...

    def has_more(self) -> bool:
        """Return True while records remain."""
        ...

    def next(self) -> str | None:
        """Return the next record as XML text, or None when exhausted."""
        ...
