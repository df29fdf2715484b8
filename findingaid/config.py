"""Shared configuration for the finding-aid splitter."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

# Attribute marking an element as a unit of the archival hierarchy
UNIT_LEVEL_ATTRIBUTE = "level"

# Container wrappers: bare "c" or "c" followed by digits (c01 ... c12)
CONTAINER_TAG_PATTERN = re.compile(r"^c\d*$")

# Unit levels whose parent title gets the parent's unitid prepended
PARENT_TITLE_PREFIX_LEVELS = frozenset({"series", "subseries", "item", "file"})

# Width of the zero-padded sequence number
SEQUENCE_WIDTH = 7

# Archive-wide notes inherited by every unit
INHERITED_NOTE_TAGS = ("bibliography", "accessrestrict")

OPTIONS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "prependParentTitleWithUnitId": {"type": "boolean"},
        "prepend_parent_title_with_unit_id": {"type": "boolean"},
        "nonInheritedFields": {
            "oneOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "non_inherited_fields": {
            "oneOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
    },
    "additionalProperties": False,
}


def parse_field_names(value: str | list[str] | set[str] | None) -> frozenset[str]:
    """Normalize a comma-separated string or list of element names."""
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(name.strip() for name in value if name.strip())


@dataclass(frozen=True)
class SplitterOptions:
    """Options controlling how units are turned into records."""

    prepend_parent_title_with_unit_id: bool = True
    """Prefix the parent title with the parent's unitid for fine-grained levels."""

    non_inherited_fields: frozenset[str] = field(default_factory=frozenset)
    """Element names within ancestor blocks that are not passed down to children."""

    @classmethod
    def from_params(cls, params: dict[str, Any] | None) -> SplitterOptions:
        """Build options from a data source parameter mapping.

        Both the camelCase keys used in data source settings and the
        snake_case attribute names are accepted.

        Args:
            params: Parameter mapping, may be None or empty

        Returns:
            SplitterOptions with defaults for anything missing
        """
        params = params or {}
        prepend = params.get(
            "prependParentTitleWithUnitId",
            params.get("prepend_parent_title_with_unit_id", True),
        )
        fields = params.get(
            "nonInheritedFields", params.get("non_inherited_fields")
        )
        return cls(
            prepend_parent_title_with_unit_id=bool(prepend),
            non_inherited_fields=parse_field_names(fields),
        )


def load_options(path: Path) -> SplitterOptions:
    """Load splitter options from a YAML file.

    Args:
        path: Path to the YAML options file

    Returns:
        Validated SplitterOptions

    Raises:
        ValueError: If the file is not valid YAML or does not match the schema
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid options file '{path}': {e}") from e

    if data is None:
        data = {}

    try:
        validate(instance=data, schema=OPTIONS_SCHEMA)
    except ValidationError as e:
        raise ValueError(f"Invalid options file '{path}': {e.message}") from e

    return SplitterOptions.from_params(data)


def format_sequence(position: int) -> str:
    """Format a 1-based position as a zero-padded sequence number."""
    return str(position).zfill(SEQUENCE_WIDTH)
