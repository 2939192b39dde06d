"""
Test Suite for Filter Definition Validation
"""

import json

import pytest

from compiler import FilterValidationError, FilterValidator, JsonAnyRequest, LikeRequest, load_filters
from compiler.filter_schema import build_requests


@pytest.fixture
def validator():
    return FilterValidator()


@pytest.fixture
def valid_document():
    """Valid filter document"""
    return {
        "filters": [
            {
                "type": "LIKE",
                "column": "users.name",
                "pattern": "john",
                "case_sensitive": False,
                "escape_wildcards": True,
            },
            {
                "type": "JSON_CONTAINS_ANY",
                "column": "tags",
                "values": ["electronics", 2, True, None],
                "disjunctive": True,
            },
        ]
    }


class TestFilterValidator:
    """Test schema validation of filter documents"""

    def test_valid_document(self, validator, valid_document):
        is_valid, errors = validator.validate_filters(valid_document)

        assert is_valid is True
        assert errors == []

    def test_missing_filters_key(self, validator):
        is_valid, errors = validator.validate_filters({})

        assert is_valid is False
        assert any("filters" in e for e in errors)

    def test_unknown_type(self, validator):
        is_valid, errors = validator.validate_filters({"filters": [{"type": "REGEX", "column": "a"}]})

        assert is_valid is False
        assert any("filters.0" in e for e in errors)

    def test_invalid_column(self, validator):
        document = {"filters": [{"type": "LIKE", "column": "name; DROP", "pattern": "x"}]}

        is_valid, _ = validator.validate_filters(document)

        assert is_valid is False

    def test_nested_values_rejected(self, validator):
        document = {"filters": [{"type": "JSON_CONTAINS_ANY", "column": "tags", "values": [["nested"]]}]}

        is_valid, _ = validator.validate_filters(document)

        assert is_valid is False

    def test_validate_and_raise(self, validator):
        with pytest.raises(FilterValidationError) as exc_info:
            validator.validate_and_raise({"filters": "nope"})

        assert len(exc_info.value.errors) > 0


class TestBuildRequests:
    """Test conversion of documents into requests"""

    def test_build_requests(self, valid_document):
        requests = build_requests(valid_document)

        assert requests[0] == (
            "LIKE",
            LikeRequest(column="users.name", pattern="john", case_sensitive=False, escape_wildcards=True),
        )
        assert requests[1] == (
            "JSON_CONTAINS_ANY",
            JsonAnyRequest(column="tags", values=("electronics", 2, True, None), disjunctive=True),
        )


class TestLoadFilters:
    """Test loading filter files"""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "filters.yaml"
        path.write_text(
            "filters:\n"
            "  - type: LIKE\n"
            "    column: name\n"
            "    pattern: jane\n"
            "  - type: JSON_CONTAINS_ANY\n"
            "    column: tags\n"
            "    values: [electronics, books]\n"
        )

        requests = load_filters(str(path))

        assert [kind for kind, _ in requests] == ["LIKE", "JSON_CONTAINS_ANY"]
        assert requests[1][1].values == ("electronics", "books")

    def test_load_json(self, tmp_path, valid_document):
        path = tmp_path / "filters.json"
        path.write_text(json.dumps(valid_document))

        requests = load_filters(str(path))

        assert len(requests) == 2

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "filters.yml"
        path.write_text("filters:\n  - type: LIKE\n")

        with pytest.raises(FilterValidationError):
            load_filters(str(path))

    def test_load_utf8_file(self, tmp_path):
        path = tmp_path / "filters.yaml"
        path.write_bytes(
            "filters:\n"
            "  - type: JSON_CONTAINS_ANY\n"
            "    column: tags\n"
            "    values: [café, 日本語]\n".encode("utf-8")
        )

        requests = load_filters(str(path))

        assert requests[0][1].values == ("café", "日本語")
