"""
Unit Tests for Checklist Text Validation

Tests for parse_checklist.
"""

import json

import pytest

from checklist_manager.core.schemas.validator import (
    parse_checklist,
    ParseResult,
    SHAPE_ERROR_MESSAGE,
)


class TestParseChecklist:
    """Tests for parse_checklist function."""

    @pytest.mark.parametrize("text", ["", " ", "\n\t  \n", "\r\n"])
    def test_parse_when_blank_then_empty_without_error(self, text):
        """Blank text is a valid empty checklist, not an error."""
        result = parse_checklist(text)
        assert result == ParseResult()
        assert result.items == ()
        assert result.error is None
        assert result.ok

    def test_parse_when_valid_array_then_items(self, sign_form_text):
        result = parse_checklist(sign_form_text)
        assert result.error is None
        assert len(result.items) == 1
        assert result.items[0].name == "Sign form"
        assert result.items[0].required

    def test_parse_when_empty_array_then_no_items(self):
        result = parse_checklist("[]")
        assert result.items == ()
        assert result.error is None

    def test_parse_preserves_order(self, three_items_text):
        result = parse_checklist(three_items_text)
        assert [item.id for item in result.items] == ["a", "b", "c"]

    @pytest.mark.parametrize("text", ["not json", "[", '[{"id": 1,}]', "{'a': 1}", "[1] x"])
    def test_parse_when_malformed_then_error(self, text):
        result = parse_checklist(text)
        assert result.items == ()
        assert isinstance(result.error, str)
        assert result.error
        assert not result.ok

    def test_parse_error_message_comes_from_decoder(self):
        result = parse_checklist("not json")
        assert "Expecting value" in result.error

    @pytest.mark.parametrize("value", [{"a": 1}, 1, "text", True, None, 2.5])
    def test_parse_when_not_array_then_shape_error(self, value):
        result = parse_checklist(json.dumps(value))
        assert result.items == ()
        assert result.error == SHAPE_ERROR_MESSAGE == "JSON must be an array"

    @pytest.mark.parametrize("text", ["[NaN]", "[Infinity]", "[-Infinity]"])
    def test_parse_when_non_standard_constant_then_error(self, text):
        result = parse_checklist(text)
        assert result.items == ()
        assert "Unexpected token" in result.error

    def test_parse_when_entries_are_not_objects_then_kept(self):
        """No per-item schema validation is performed."""
        result = parse_checklist('[1, "two", {"id": "3"}]')
        assert result.error is None
        assert [item.to_json() for item in result.items] == [1, "two", {"id": "3"}]

    def test_parse_never_raises(self):
        result = parse_checklist("[" * 100000)
        assert result.items == ()
        assert result.error

    @pytest.mark.parametrize("literal", ["1e400", "-1e400"])
    def test_parse_when_float_overflows_then_null(self, literal):
        result = parse_checklist(f'[{{"id": "1", "size": {literal}, "ratio": 0.5}}]')
        assert result.error is None
        assert result.items[0].data == {"id": "1", "size": None, "ratio": 0.5}
