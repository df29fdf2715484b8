"""Shared test fixtures for finding-aid tests."""

from pathlib import Path

import pytest
from lxml import etree


# Shared fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

SCENARIO_XML = """<ead>
  <eadheader>
    <eadid mainagencycode="FI" identifier="coll1"/>
    <filedesc><titlestmt><titleproper>Test Archive</titleproper></titlestmt></filedesc>
  </eadheader>
  <archdesc level="collection">
    <did><unitid identifier="coll1">coll1</unitid><unittitle>Test Archive</unittitle></did>
    <dsc>
      <c01 level="series">
        <did><unitid identifier="s1">s1</unitid><unittitle>Series One</unittitle></did>
        <c02 level="item">
          <did><unittitle>Item One</unittitle></did>
        </c02>
      </c01>
    </dsc>
  </archdesc>
</ead>"""


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def finding_aid_path() -> Path:
    """Path to the multi-level sample finding aid."""
    return FIXTURES_DIR / "finding_aid.xml"


@pytest.fixture
def finding_aid_xml(finding_aid_path: Path) -> bytes:
    """Raw bytes of the multi-level sample finding aid."""
    return finding_aid_path.read_bytes()


@pytest.fixture
def scenario_xml() -> str:
    """Three-unit finding aid: collection, series s1, item without identifier."""
    return SCENARIO_XML


@pytest.fixture
def parse_record():
    """Factory fixture to parse emitted record text.

    Usage:
        def test_example(parse_record):
            record = parse_record(splitter.next())
            # record.find("add-data").get("identifier")
    """

    def _parse(text: str) -> etree._Element:
        assert text is not None
        return etree.fromstring(text)

    return _parse
