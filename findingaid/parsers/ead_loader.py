"""Loader for EAD finding-aid documents."""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from findingaid.config import UNIT_LEVEL_ATTRIBUTE
from findingaid.models import Archive
from findingaid.parsers.elements import find_child, find_path, get_tag_name, text_of


class EadParseError(Exception):
    """Raised when a document cannot be loaded as an EAD finding aid."""

    def __init__(self, reason: str, source: str = "") -> None:
        """Initialize the error.

        Args:
            reason: What went wrong
            source: File name or other description of the input
        """
        self.reason = reason
        self.source = source
        msg = f"Cannot load EAD document: {reason}"
        if source:
            msg = f"{msg} ({source})"
        super().__init__(msg)


def _make_parser(encoding: str | None = None) -> etree.XMLParser:
    # huge_tree lifts libxml2's depth and text size limits
    return etree.XMLParser(huge_tree=True, resolve_entities=False, encoding=encoding)


def load_document(data: str | bytes) -> etree._Element:
    """Parse raw EAD XML.

    Args:
        data: The document as text or bytes

    Returns:
        Root element of the parsed document

    Raises:
        EadParseError: If the XML is malformed
    """
    if isinstance(data, str):
        # Text input is already decoded; ignore any declared encoding
        content = data.encode("utf-8")
        parser = _make_parser(encoding="utf-8")
    else:
        content = data
        parser = _make_parser()

    try:
        return etree.fromstring(content, parser)
    except etree.XMLSyntaxError as e:
        raise EadParseError(str(e)) from e


def load_file(path: Path) -> etree._Element:
    """Parse an EAD XML file.

    Args:
        path: Path to the file

    Returns:
        Root element of the parsed document

    Raises:
        EadParseError: If the XML is malformed
        OSError: If the file cannot be read
    """
    try:
        return etree.parse(str(path), _make_parser()).getroot()
    except etree.XMLSyntaxError as e:
        raise EadParseError(str(e), source=str(path)) from e


def find_archdesc(root: etree._Element) -> etree._Element:
    """Locate the root description element.

    Raises:
        EadParseError: If the document has no archdesc
    """
    if get_tag_name(root) == "archdesc":
        return root
    archdesc = find_child(root, "archdesc")
    if archdesc is None:
        raise EadParseError(f"no <archdesc> found under <{get_tag_name(root)}>")
    return archdesc


def parse_archive(root: etree._Element) -> Archive:
    """Extract archive identity from the EAD header.

    Args:
        root: Root element of the EAD document

    Returns:
        Archive with missing fields left as empty strings
    """
    eadid = find_path(root, "eadheader", "eadid")

    agency_code = ""
    archive_id = ""
    if eadid is not None:
        agency_code = eadid.get("mainagencycode", "")
        # Prefer the identifier attribute over the element text
        archive_id = eadid.get("identifier", "") or text_of(eadid)

    titlestmt = find_path(root, "eadheader", "filedesc", "titlestmt")

    return Archive(
        agency_code=agency_code,
        id=archive_id,
        title=text_of(find_child(titlestmt, "titleproper")),
        subtitle=text_of(find_child(titlestmt, "subtitle")),
    )


def select_units(archdesc: etree._Element) -> list[etree._Element]:
    """List the elements that become records, in document order.

    Returns:
        The archdesc itself followed by every descendant carrying a level
    """
    return [archdesc, *archdesc.xpath(f".//*[@{UNIT_LEVEL_ATTRIBUTE}]")]
