"""Tests for splitter configuration."""

from pathlib import Path

import pytest

from findingaid.config import (
    SplitterOptions,
    format_sequence,
    load_options,
    parse_field_names,
)


class TestFormatSequence:
    """Tests for sequence number formatting."""

    def test_pads_to_seven_digits(self) -> None:
        assert format_sequence(1) == "0000001"

    def test_large_position(self) -> None:
        assert format_sequence(1234567) == "1234567"


class TestParseFieldNames:
    """Tests for parsing non-inherited field lists."""

    def test_comma_separated_string(self) -> None:
        assert parse_field_names("unitdate, repository") == frozenset(
            {"unitdate", "repository"}
        )

    def test_list(self) -> None:
        assert parse_field_names(["unitdate"]) == frozenset({"unitdate"})

    def test_empty_values(self) -> None:
        assert parse_field_names(None) == frozenset()
        assert parse_field_names("") == frozenset()
        assert parse_field_names(" , ") == frozenset()


class TestSplitterOptions:
    """Tests for SplitterOptions construction."""

    def test_defaults(self) -> None:
        options = SplitterOptions()
        assert options.prepend_parent_title_with_unit_id is True
        assert options.non_inherited_fields == frozenset()

    def test_from_params_camel_case(self) -> None:
        options = SplitterOptions.from_params(
            {
                "prependParentTitleWithUnitId": False,
                "nonInheritedFields": "unitdate,repository",
            }
        )
        assert options.prepend_parent_title_with_unit_id is False
        assert options.non_inherited_fields == frozenset({"unitdate", "repository"})

    def test_from_params_snake_case(self) -> None:
        options = SplitterOptions.from_params(
            {"non_inherited_fields": ["physdesc"]}
        )
        assert options.prepend_parent_title_with_unit_id is True
        assert options.non_inherited_fields == frozenset({"physdesc"})

    def test_from_params_none(self) -> None:
        assert SplitterOptions.from_params(None) == SplitterOptions()


class TestLoadOptions:
    """Tests for loading options from YAML."""

    def test_load_fixture(self, fixtures_dir: Path) -> None:
        options = load_options(fixtures_dir / "options.yaml")
        assert options.prepend_parent_title_with_unit_id is False
        assert options.non_inherited_fields == frozenset({"unitdate", "repository"})

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "options.yaml"
        path.write_text("", encoding="utf-8")
        assert load_options(path) == SplitterOptions()

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "options.yaml"
        path.write_text("splitEverything: true\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid options file"):
            load_options(path)

    def test_wrong_type_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "options.yaml"
        path.write_text("prependParentTitleWithUnitId: [1, 2]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid options file"):
            load_options(path)

    def test_malformed_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "options.yaml"
        path.write_text("nonInheritedFields: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid options file"):
            load_options(path)
