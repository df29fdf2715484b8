"""
Step definitions for splitting EAD finding aids into unit records.
"""

from behave import given, then, when  # type: ignore[import-untyped]
from lxml import etree

from findingaid.parsers.ead_loader import EadParseError
from findingaid.parsers.splitting import EadSplitter


# === Document Setup ===


@given('a finding aid for archive "{archive_id}" titled "{title}" from agency "{agency}"')  # type: ignore[misc]
def step_given_finding_aid(context, archive_id, title, agency):
    """Start a finding aid with header and collection-level description."""
    context.archive_id = archive_id
    context.header = (
        f'<eadheader><eadid mainagencycode="{agency}" identifier="{archive_id}"/>'
        f"<filedesc><titlestmt><titleproper>{title}</titleproper></titlestmt>"
        f"</filedesc></eadheader>"
    )
    context.root_did = (
        f'<did><unitid identifier="{archive_id}">{archive_id}</unitid>'
        f"<unittitle>{title}</unittitle></did>"
    )
    context.items = []


@given('a series "{title}" with identifier "{identifier}"')  # type: ignore[misc]
def step_given_series(context, title, identifier):
    context.series = (
        f'<did><unitid identifier="{identifier}">{identifier}</unitid>'
        f"<unittitle>{title}</unittitle></did>"
    )


@given('an item "{title}" without identifier inside the series')  # type: ignore[misc]
def step_given_item(context, title):
    context.items.append(
        f'<c02 level="item"><did><unittitle>{title}</unittitle></did></c02>'
    )


@given("a malformed finding aid")  # type: ignore[misc]
def step_given_malformed(context):
    context.document = "<ead><archdesc></ead>"


def _build_document(context):
    if hasattr(context, "document"):
        return context.document
    items = "".join(context.items)
    return (
        f"<ead>{context.header}"
        f'<archdesc level="collection">{context.root_did}<dsc>'
        f'<c01 level="series">{context.series}{items}</c01>'
        f"</dsc></archdesc></ead>"
    )


# === Actions ===


@when("I split the finding aid")  # type: ignore[misc]
def step_when_split(context):
    try:
        context.splitter = EadSplitter(_build_document(context))
    except EadParseError as e:
        context.error = e
        return
    context.records = [etree.fromstring(record) for record in context.splitter]


# === Assertions ===


@then("{count:d} records are emitted")  # type: ignore[misc]
def step_then_count(context, count):
    assert context.splitter.total == count, context.splitter.total
    assert len(context.records) == count, len(context.records)


@then("no more records are available")  # type: ignore[misc]
def step_then_exhausted(context):
    assert not context.splitter.has_more()
    assert context.splitter.next() is None


@then('record {index:d} has identifier "{identifier}"')  # type: ignore[misc]
def step_then_identifier(context, index, identifier):
    actual = context.records[index - 1].find("add-data").get("identifier")
    assert actual == identifier, f"Expected {identifier}, got {actual}"


@then('record {index:d} has sequence "{sequence}"')  # type: ignore[misc]
def step_then_sequence(context, index, sequence):
    actual = context.records[index - 1].find("add-data/archive").get("sequence")
    assert actual == sequence, f"Expected {sequence}, got {actual}"


@then('record {index:d} has parent "{parent_id}" titled "{title}"')  # type: ignore[misc]
def step_then_parent(context, index, parent_id, title):
    parent = context.records[index - 1].find("add-data/parent")
    assert parent is not None, "Record has no parent"
    assert parent.get("id") == parent_id, parent.get("id")
    assert parent.get("title") == title, parent.get("title")


@then("record {index:d} has no identifier")  # type: ignore[misc]
def step_then_no_identifier(context, index):
    assert context.records[index - 1].find("add-data").get("identifier") is None


@then("record {index:d} has no parent")  # type: ignore[misc]
def step_then_no_parent(context, index):
    assert context.records[index - 1].find("add-data/parent") is None


@then("loading fails")  # type: ignore[misc]
def step_then_loading_fails(context):
    assert isinstance(context.error, EadParseError)
